"""Content root scanning."""

from .scanner import DEFAULT_EXTENSIONS, DirectoryScanner, FileDescriptor

__all__ = ["DEFAULT_EXTENSIONS", "DirectoryScanner", "FileDescriptor"]
