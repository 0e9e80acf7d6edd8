"""Host system facts shown by the shell."""

from __future__ import annotations

import os
import socket
import sys

try:
    import pwd
except ImportError:  # not available on Windows
    pwd = None

UNKNOWN = "Unknown"


def _on_linux() -> bool:
    return sys.platform.startswith("linux")


def get_username() -> str:
    """Login name of the current user, or Unknown."""
    if not _on_linux() or pwd is None:
        return UNKNOWN
    try:
        return pwd.getpwuid(os.getuid()).pw_name
    except (KeyError, AttributeError):
        return UNKNOWN


def get_hostname() -> str:
    """Host name of this machine, or Unknown."""
    if not _on_linux():
        return UNKNOWN
    try:
        return socket.gethostname()
    except OSError:
        return UNKNOWN


def get_kernel_version() -> str:
    """Kernel name and release, or Unknown."""
    if not _on_linux():
        return UNKNOWN
    try:
        uname = os.uname()
    except AttributeError:
        return UNKNOWN
    return f"{uname.sysname} {uname.release}"


def platform_test_message() -> str:
    """Line naming the platform the shell runs on."""
    if _on_linux():
        return "Test on Linux"
    if sys.platform.startswith("win"):
        return "Test on Windows"
    return f"Test on {sys.platform}"