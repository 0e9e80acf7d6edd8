import sys
import types

from nmtshell import sysinfo


def _linux(monkeypatch):
    monkeypatch.setattr(sys, "platform", "linux")


def _windows(monkeypatch):
    monkeypatch.setattr(sys, "platform", "win32")


def test_windows_reports_unknown(monkeypatch):
    _windows(monkeypatch)
    assert sysinfo.get_username() == "Unknown"
    assert sysinfo.get_hostname() == "Unknown"
    assert sysinfo.get_kernel_version() == "Unknown"
    assert sysinfo.platform_test_message() == "Test on Windows"


def test_linux_message(monkeypatch):
    _linux(monkeypatch)
    assert sysinfo.platform_test_message() == "Test on Linux"


def test_hostname_on_linux(monkeypatch):
    _linux(monkeypatch)
    monkeypatch.setattr(sysinfo.socket, "gethostname", lambda: "box")
    assert sysinfo.get_hostname() == "box"


def test_hostname_failure_is_unknown(monkeypatch):
    _linux(monkeypatch)

    def fail():
        raise OSError("no name")

    monkeypatch.setattr(sysinfo.socket, "gethostname", fail)
    assert sysinfo.get_hostname() == "Unknown"


def test_kernel_version_joins_name_and_release(monkeypatch):
    _linux(monkeypatch)
    fake = types.SimpleNamespace(sysname="Linux", release="6.1.0")
    monkeypatch.setattr(sysinfo.os, "uname", lambda: fake, raising=False)
    assert sysinfo.get_kernel_version() == "Linux 6.1.0"


def test_username_from_password_database(monkeypatch):
    _linux(monkeypatch)
    monkeypatch.setattr(sysinfo.os, "getuid", lambda: 1000, raising=False)
    fake_db = types.SimpleNamespace(
        getpwuid=lambda uid: types.SimpleNamespace(pw_name=f"user{uid}")
    )
    monkeypatch.setattr(sysinfo, "pwd", fake_db)
    assert sysinfo.get_username() == "user1000"


def test_username_missing_entry_is_unknown(monkeypatch):
    _linux(monkeypatch)
    monkeypatch.setattr(sysinfo.os, "getuid", lambda: 1000, raising=False)

    def missing(uid):
        raise KeyError(uid)

    monkeypatch.setattr(sysinfo, "pwd", types.SimpleNamespace(getpwuid=missing))
    assert sysinfo.get_username() == "Unknown"