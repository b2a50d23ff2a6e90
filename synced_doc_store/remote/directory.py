"""
Directory-backed object access.

Treats a local directory as a bucket: the object ``key`` lives at
``root/key``. Useful for development, tests, and network shares mounted
on several machines.
"""

from __future__ import annotations

from pathlib import Path, PurePosixPath

from ..exceptions import RemoteAccessError, StorageIOError
from ..local.file_ops import copy_file_atomic, file_exists, remove_file
from ..protocol import RemoteObjectAccess


class DirectoryObjectAccess(RemoteObjectAccess):
    """RemoteObjectAccess storing objects as files under a root directory."""

    def __init__(self, root: Path | str):
        self.root = Path(root)

    def object_path(self, key: str) -> Path:
        """Resolve the file holding an object.

        Raises:
            RemoteAccessError: If the key escapes the root directory
        """
        parts = PurePosixPath(key.lstrip("/")).parts
        if not parts or ".." in parts:
            raise RemoteAccessError("resolve", key, str(self.root))
        return self.root.joinpath(*parts)

    async def exists(self, key: str) -> bool:
        return await file_exists(self.object_path(key))

    async def download(self, key: str, destination: Path) -> None:
        path = self.object_path(key)
        if not await file_exists(path):
            raise RemoteAccessError("download", key, str(self.root), FileNotFoundError(str(path)))
        try:
            await copy_file_atomic(path, destination)
        except StorageIOError as e:
            raise RemoteAccessError("download", key, str(self.root), e) from e

    async def upload(self, key: str, source: Path) -> None:
        try:
            await copy_file_atomic(source, self.object_path(key))
        except StorageIOError as e:
            raise RemoteAccessError("upload", key, str(self.root), e) from e

    async def delete(self, key: str) -> None:
        # Deleting a missing object succeeds, as on S3
        try:
            await remove_file(self.object_path(key))
        except StorageIOError as e:
            raise RemoteAccessError("delete", key, str(self.root), e) from e
