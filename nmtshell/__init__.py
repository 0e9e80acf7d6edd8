"""A toy interactive shell over an in-memory tree of folders and files."""

__version__ = "0.1.0"
__all__ = ["__version__"]