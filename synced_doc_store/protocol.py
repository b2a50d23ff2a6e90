"""
Capability interfaces the store depends on.

The store never touches the filesystem or a storage SDK directly. It talks to
one LocalFileAccess and one RemoteObjectAccess implementation, which keeps the
synchronization logic independent of any particular object-storage vendor.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path


class LocalFileAccess(ABC):
    """Async access to local text files."""

    @abstractmethod
    async def exists(self, path: Path) -> bool:
        """Check whether a file exists."""
        ...

    @abstractmethod
    async def read_text(self, path: Path) -> str:
        """Read a UTF-8 file.

        Raises:
            StorageIOError: On permission or hardware faults
            UnicodeDecodeError: If the content is not valid UTF-8
        """
        ...

    @abstractmethod
    async def write_text(self, path: Path, text: str) -> None:
        """Replace a file's content so readers never see a partial write."""
        ...

    @abstractmethod
    async def delete(self, path: Path) -> bool:
        """Remove a file.

        Returns:
            True if removed, False if it did not exist
        """
        ...


class RemoteObjectAccess(ABC):
    """Async access to objects in a remote bucket.

    Implementations must raise RemoteAccessError for failures rather than
    returning None; the store decides which failures to absorb.
    """

    @abstractmethod
    async def exists(self, key: str) -> bool:
        """Check whether an object exists without fetching it.

        Returns:
            False when the object is absent

        Raises:
            RemoteAccessError: For any other failure
        """
        ...

    @abstractmethod
    async def download(self, key: str, destination: Path) -> None:
        """Download an object into a local file, replacing it."""
        ...

    @abstractmethod
    async def upload(self, key: str, source: Path) -> None:
        """Upload a local file, unconditionally overwriting the object."""
        ...

    @abstractmethod
    async def delete(self, key: str) -> None:
        """Delete an object."""
        ...

    async def close(self) -> None:
        """Release client resources. No-op by default."""
        return None
