"""
Synced file store.

A document persisted in a local file and mirrored to a remote bucket:
- The first read of each store instance refreshes the local file from the
  remote object (hydration), ignoring any failure
- Reads are served from the local file, initialized with the default value
  when absent
- Writes replace the local file, then upload it, overwriting the remote object

Local is a cache of remote, refreshed once per instance. There is no conflict
detection: concurrent writers on the same object race and the last upload wins.
"""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any

from .best_effort import SyncReport, best_effort
from .config import RemoteConfig
from .exceptions import MalformedInputError
from .local.files import LocalFiles
from .logging_utils import StoreLoggerAdapter, get_store_logger
from .protocol import LocalFileAccess, RemoteObjectAccess
from .remote.s3 import S3ObjectAccess
from .serializers import JSON_SERIALIZER, Serializer

logger = get_store_logger("store")


def default_key(source: Path | str) -> str:
    """Remote key for a local path: its POSIX form without leading slashes."""
    return Path(source).as_posix().lstrip("/")


class SyncedFileStore:
    """Local document file mirrored to a remote object.

    Operations are async and meant to be awaited sequentially by a single
    owner; the store does no locking of its own.

    Example:
        >>> config = RemoteConfig.from_env()
        >>> async with SyncedFileStore("db.json", config) as store:
        ...     doc = await store.read()
        ...     doc["count"] = doc.get("count", 0) + 1
        ...     await store.write(doc)
    """

    def __init__(
        self,
        source: Path | str,
        config: RemoteConfig,
        *,
        default_value: Any = None,
        serializer: Serializer | None = None,
        key: str | None = None,
        remote: RemoteObjectAccess | None = None,
        files: LocalFileAccess | None = None,
    ):
        """Initialize the store.

        Args:
            source: Local file path; also names the remote object by default
            config: Remote bucket coordinates and credentials
            default_value: Document used when nothing can be loaded (default: {})
            serializer: Encoding strategy (default: JSON)
            key: Remote object key override
            remote: Remote adapter (default: S3ObjectAccess built from config)
            files: Local file adapter (default: LocalFiles)

        Raises:
            ConfigurationError: If region, bucket, secret_id or secret_key is missing
        """
        config.validate()

        self.config = config
        self._source = Path(source)
        self._key = key or default_key(source)
        self._default = copy.deepcopy({} if default_value is None else default_value)
        self._serializer = serializer or JSON_SERIALIZER
        self._files = files or LocalFiles()
        self._remote = remote if remote is not None else S3ObjectAccess.from_config(config)

        self._downloaded = False
        self.last_hydration: SyncReport | None = None
        self._log = StoreLoggerAdapter(
            logger,
            {
                "source": str(self._source),
                "key": self._key,
                "serializer": self._serializer.name,
            },
        )

    @classmethod
    def from_env(cls, source: Path | str, **kwargs: Any) -> SyncedFileStore:
        """Create a store using RemoteConfig.from_env().

        Raises:
            ConfigurationError: If required environment variables are missing
        """
        return cls(source, RemoteConfig.from_env(), **kwargs)

    @property
    def source(self) -> Path:
        return self._source

    @property
    def key(self) -> str:
        return self._key

    @property
    def serializer(self) -> Serializer:
        return self._serializer

    @property
    def downloaded(self) -> bool:
        """True once this instance has attempted hydration."""
        return self._downloaded

    @property
    def default_value(self) -> Any:
        """A fresh copy of the default document."""
        return copy.deepcopy(self._default)

    async def read(self) -> Any:
        """Load the document.

        The first call on an instance refreshes the local file from the remote
        object. A missing local file is created from the default value.

        Returns:
            The stored document, or the default value

        Raises:
            MalformedInputError: If the local file cannot be deserialized
            StorageIOError: On local filesystem faults other than absence
        """
        if not self._downloaded:
            try:
                self.last_hydration = await self._hydrate()
            finally:
                self._downloaded = True

        if await self._files.exists(self._source):
            try:
                data = await self._files.read_text(self._source)
            except UnicodeDecodeError as e:
                raise MalformedInputError(str(self._source), e) from e
            trimmed = data.strip()
            if not trimmed:
                return self.default_value
            try:
                return self._serializer.deserialize(trimmed)
            except self._serializer.errors as e:
                raise MalformedInputError(str(self._source), e) from e

        # Initialize locally only; the remote object is created by the first write
        await self._files.write_text(self._source, self._serializer.serialize(self._default))
        self._log.debug("Initialized local file with default value")
        return self.default_value

    async def write(self, doc: Any) -> None:
        """Replace the local file with ``doc``, then upload it.

        If the upload fails the local file has already been updated and the
        error propagates. Calling write again re-uploads the same content.

        Raises:
            StorageIOError: If the local file cannot be written
            RemoteAccessError: If the upload fails
        """
        text = self._serializer.serialize(doc)
        await self._files.write_text(self._source, text)
        await self._remote.upload(self._key, self._source)
        self._log.debug("Wrote and uploaded document (%d chars)", len(text))

    async def clean(self) -> SyncReport:
        """Delete the local file and the remote object, ignoring failures.

        Returns:
            Outcomes of the local and remote deletes
        """
        report = SyncReport()
        report.add(await best_effort("delete_local", lambda: self._files.delete(self._source)))
        report.add(await best_effort("delete_remote", lambda: self._remote.delete(self._key)))
        self._log.report("clean", report)
        return report

    async def close(self) -> None:
        """Close the remote adapter."""
        await self._remote.close()

    async def __aenter__(self) -> SyncedFileStore:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def _hydrate(self) -> SyncReport:
        """Replace the local file with the remote object, if there is one."""
        report = SyncReport()

        cleared = report.add(
            await best_effort("delete_local", lambda: self._files.delete(self._source))
        )
        if not cleared.ok:
            # Don't mix a stale local file with a download
            self._log.report("hydrate", report)
            return report

        found = report.add(await best_effort("exists", lambda: self._remote.exists(self._key)))
        if found.ok and found.value:
            report.add(
                await best_effort("download", lambda: self._remote.download(self._key, self._source))
            )

        self._log.report("hydrate", report)
        return report
