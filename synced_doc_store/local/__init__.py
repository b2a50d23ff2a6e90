"""
Local file access for the store's local copy.

Uses aiofiles for non-blocking I/O and temp file + rename for atomic writes.

Key classes:
- LocalFiles: LocalFileAccess implementation used by SyncedFileStore
"""

from .file_ops import (
    copy_file_atomic,
    ensure_directory,
    file_exists,
    read_text,
    remove_file,
    write_text_atomic,
)
from .files import LocalFiles

__all__ = [
    "LocalFiles",
    # Low-level file operations
    "ensure_directory",
    "read_text",
    "write_text_atomic",
    "copy_file_atomic",
    "file_exists",
    "remove_file",
]
