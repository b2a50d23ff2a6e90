"""
Remote object storage adapters.

Each adapter implements RemoteObjectAccess, allowing the store to mirror
its file to any backing object store:

    # AWS S3 or an S3-compatible service (e.g. Tencent COS)
    from synced_doc_store.remote import S3ObjectAccess

    # A directory acting as a bucket
    from synced_doc_store.remote import DirectoryObjectAccess
"""

from .directory import DirectoryObjectAccess
from .s3 import MISSING_OBJECT_CODES, S3ObjectAccess

__all__ = [
    "DirectoryObjectAccess",
    "S3ObjectAccess",
    "MISSING_OBJECT_CODES",
]
