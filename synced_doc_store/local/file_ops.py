"""
Text file operations for the local copy.

Provides async read/write operations with:
- Atomic writes using temp file + rename
- Existence checks that never raise
- Removal that reports whether anything was removed
"""

import os
import shutil
import tempfile
from pathlib import Path

import aiofiles
import aiofiles.os

from ..exceptions import StorageIOError


async def ensure_directory(path: Path) -> None:
    """Ensure directory exists, creating if necessary.

    Args:
        path: Directory path to ensure exists
    """
    try:
        await aiofiles.os.makedirs(path, exist_ok=True)
    except OSError as e:
        raise StorageIOError("create_directory", str(path), e) from e


async def read_text(path: Path) -> str:
    """Read a UTF-8 text file.

    Args:
        path: Path to the file

    Returns:
        File content

    Raises:
        StorageIOError: If the file cannot be read
        UnicodeDecodeError: If the content is not valid UTF-8
    """
    try:
        async with aiofiles.open(path, encoding="utf-8") as f:
            return await f.read()
    except OSError as e:
        raise StorageIOError("read_text", str(path), e) from e


async def write_text_atomic(path: Path, text: str) -> None:
    """Write a text file atomically using temp file + rename.

    Args:
        path: Target path
        text: Content to write
    """
    await ensure_directory(path.parent)

    fd, temp_path = tempfile.mkstemp(
        dir=path.parent,
        prefix=".tmp_",
        suffix=path.suffix,
    )
    try:
        os.close(fd)
        async with aiofiles.open(temp_path, "w", encoding="utf-8") as f:
            await f.write(text)
            await f.flush()
            os.fsync(f.fileno())

        await aiofiles.os.replace(temp_path, path)
    except Exception as e:
        # Clean up temp file on error
        try:
            await aiofiles.os.remove(temp_path)
        except OSError:
            pass
        raise StorageIOError("write_text", str(path), e) from e


async def copy_file_atomic(source: Path, destination: Path) -> None:
    """Copy a file so the destination is replaced in one step.

    Args:
        source: File to copy
        destination: Target path
    """
    await ensure_directory(destination.parent)

    fd, temp_path = tempfile.mkstemp(
        dir=destination.parent,
        prefix=".tmp_",
        suffix=destination.suffix,
    )
    try:
        os.close(fd)
        # aiofiles doesn't have copy
        await aiofiles.os.wrap(shutil.copyfile)(source, temp_path)
        await aiofiles.os.replace(temp_path, destination)
    except Exception as e:
        try:
            await aiofiles.os.remove(temp_path)
        except OSError:
            pass
        raise StorageIOError("copy", str(destination), e) from e


async def file_exists(path: Path) -> bool:
    """Check if a file exists.

    Args:
        path: Path to check

    Returns:
        True if file exists
    """
    try:
        return await aiofiles.os.path.isfile(path)
    except OSError:
        return False


async def remove_file(path: Path) -> bool:
    """Remove a file if it exists.

    Args:
        path: Path to remove

    Returns:
        True if file was removed, False if it didn't exist
    """
    try:
        await aiofiles.os.remove(path)
    except FileNotFoundError:
        return False
    except OSError as e:
        raise StorageIOError("remove", str(path), e) from e
    return True
