"""
Shared test configuration and fixtures.

Provides an in-memory remote object store so the synchronization logic can be
tested without network access. Tests against a real bucket live in
test_s3_live.py and only run when SYNCED_DOC_STORE_BUCKET is set.
"""

import logging
from pathlib import Path

import pytest

from synced_doc_store import RemoteAccessError, RemoteConfig, RemoteObjectAccess

logger = logging.getLogger(__name__)


class FakeObjectAccess(RemoteObjectAccess):
    """
    In-memory remote object store for testing.

    Records every call and can be told to fail specific operations.
    """

    def __init__(self, bucket: str = "test-bucket"):
        self.bucket = bucket
        self.objects: dict[str, bytes] = {}
        self.calls: list[tuple[str, str]] = []
        self.fail_on: set[str] = set()
        self.closed = False

    def count(self, operation: str) -> int:
        return sum(1 for op, _ in self.calls if op == operation)

    def _record(self, operation: str, key: str) -> None:
        self.calls.append((operation, key))
        if operation in self.fail_on:
            raise RemoteAccessError(operation, key, self.bucket, RuntimeError("injected failure"))

    async def exists(self, key: str) -> bool:
        self._record("exists", key)
        return key in self.objects

    async def download(self, key: str, destination: Path) -> None:
        self._record("download", key)
        if key not in self.objects:
            raise RemoteAccessError("download", key, self.bucket)
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_bytes(self.objects[key])

    async def upload(self, key: str, source: Path) -> None:
        self._record("upload", key)
        self.objects[key] = source.read_bytes()

    async def delete(self, key: str) -> None:
        self._record("delete", key)
        self.objects.pop(key, None)

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def config() -> RemoteConfig:
    """Complete remote configuration with dummy credentials."""
    return RemoteConfig(
        region="ap-guangzhou",
        bucket="test-bucket",
        secret_id="test-id",
        secret_key="test-key",
    )


@pytest.fixture
def remote() -> FakeObjectAccess:
    """Fresh in-memory remote for each test."""
    return FakeObjectAccess()


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    """Local file path for the store under test."""
    return tmp_path / "db.json"
