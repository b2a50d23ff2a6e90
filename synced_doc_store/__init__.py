"""
Synced Doc Store

A small persistent document store backed by a local file that is
transparently mirrored to a remote object-storage bucket.

Provides:
- One-time hydration of the local file from the remote object per instance
- Local-first writes followed by an unconditional upload
- Pluggable serializers (JSON by default, YAML available)
- Pluggable remote adapters (S3-compatible, directory-backed)

Usage:

    >>> from synced_doc_store import RemoteConfig, SyncedFileStore, cos_endpoint
    >>> config = RemoteConfig(
    ...     region="ap-guangzhou",
    ...     bucket="my-bucket-1250000000",
    ...     secret_id="...",
    ...     secret_key="...",
    ...     endpoint_url=cos_endpoint("ap-guangzhou"),
    ... )
    >>> async with SyncedFileStore("db.json", config, default_value={"posts": []}) as store:
    ...     doc = await store.read()
    ...     doc["posts"].append({"id": 1, "title": "hello"})
    ...     await store.write(doc)

Remote adapters:

    # AWS S3 or S3-compatible services (default)
    from synced_doc_store.remote import S3ObjectAccess

    # A local or mounted directory acting as a bucket
    from synced_doc_store.remote import DirectoryObjectAccess
"""

from .best_effort import Outcome, SyncReport, best_effort
from .config import RemoteConfig, cos_endpoint
from .exceptions import (
    ConfigurationError,
    DocStoreError,
    MalformedInputError,
    RemoteAccessError,
    StorageIOError,
)
from .local import LocalFiles
from .protocol import LocalFileAccess, RemoteObjectAccess
from .remote import DirectoryObjectAccess, S3ObjectAccess
from .serializers import JSON_SERIALIZER, YAML_SERIALIZER, Serializer, stringify
from .store import SyncedFileStore

__all__ = [
    # Core
    "SyncedFileStore",
    "RemoteConfig",
    "cos_endpoint",
    # Serializers
    "Serializer",
    "JSON_SERIALIZER",
    "YAML_SERIALIZER",
    "stringify",
    # Capability interfaces
    "LocalFileAccess",
    "RemoteObjectAccess",
    "LocalFiles",
    "S3ObjectAccess",
    "DirectoryObjectAccess",
    # Best-effort results
    "Outcome",
    "SyncReport",
    "best_effort",
    # Exceptions
    "DocStoreError",
    "ConfigurationError",
    "MalformedInputError",
    "StorageIOError",
    "RemoteAccessError",
]

__version__ = "0.1.0"
