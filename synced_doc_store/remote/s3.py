"""
S3-compatible object access.

Works with AWS S3 and with any provider exposing the S3 API, including
Tencent Cloud COS (use ``config.cos_endpoint(region)`` as endpoint_url).
boto3 is synchronous, so every client call runs in a worker thread to keep
the event loop free.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

import boto3
from boto3.exceptions import Boto3Error
from botocore.exceptions import BotoCoreError, ClientError

from ..config import DEFAULT_STORAGE_CLASS, RemoteConfig
from ..exceptions import RemoteAccessError
from ..local.file_ops import ensure_directory
from ..protocol import RemoteObjectAccess

logger = logging.getLogger(__name__)

# Error codes S3-compatible services return for a missing object on HEAD
MISSING_OBJECT_CODES = frozenset({"404", "NoSuchKey", "NotFound"})

_REMOTE_ERRORS = (BotoCoreError, ClientError, Boto3Error, OSError)


def _error_code(error: ClientError) -> str:
    return str(error.response.get("Error", {}).get("Code", ""))


class S3ObjectAccess(RemoteObjectAccess):
    """RemoteObjectAccess over a boto3 S3 client.

    Args:
        client: boto3 S3 client
        bucket: Bucket holding the objects
        storage_class: Storage tier used for uploads
    """

    def __init__(self, client: Any, bucket: str, storage_class: str = DEFAULT_STORAGE_CLASS):
        self._client = client
        self.bucket = bucket
        self.storage_class = storage_class

    @classmethod
    def from_config(cls, config: RemoteConfig) -> S3ObjectAccess:
        """Create an adapter with a fresh boto3 client.

        Raises:
            ConfigurationError: If required settings are missing
        """
        config.validate()
        client = boto3.client(
            "s3",
            region_name=config.region,
            aws_access_key_id=config.secret_id,
            aws_secret_access_key=config.secret_key,
            endpoint_url=config.endpoint_url,
        )
        return cls(client, config.bucket, storage_class=config.storage_class)

    async def _call(
        self, operation: str, key: str, func: Callable[..., Any], *args: Any, **kwargs: Any
    ) -> Any:
        try:
            return await asyncio.to_thread(func, *args, **kwargs)
        except _REMOTE_ERRORS as e:
            raise RemoteAccessError(operation, key, self.bucket, e) from e

    async def exists(self, key: str) -> bool:
        try:
            await asyncio.to_thread(self._client.head_object, Bucket=self.bucket, Key=key)
        except ClientError as e:
            if _error_code(e) in MISSING_OBJECT_CODES:
                return False
            raise RemoteAccessError("exists", key, self.bucket, e) from e
        except _REMOTE_ERRORS as e:
            raise RemoteAccessError("exists", key, self.bucket, e) from e
        return True

    async def download(self, key: str, destination: Path) -> None:
        await ensure_directory(destination.parent)
        await self._call(
            "download", key, self._client.download_file, self.bucket, key, str(destination)
        )
        logger.debug("Downloaded s3://%s/%s to %s", self.bucket, key, destination)

    async def upload(self, key: str, source: Path) -> None:
        await self._call(
            "upload",
            key,
            self._client.upload_file,
            str(source),
            self.bucket,
            key,
            ExtraArgs={"StorageClass": self.storage_class},
        )
        logger.debug("Uploaded %s to s3://%s/%s", source, self.bucket, key)

    async def delete(self, key: str) -> None:
        await self._call("delete", key, self._client.delete_object, Bucket=self.bucket, Key=key)

    async def close(self) -> None:
        await asyncio.to_thread(self._client.close)
