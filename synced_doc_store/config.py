"""
Remote object storage configuration.

Holds the bucket coordinates and credentials the store needs to mirror its
local file. All four of region, bucket, secret_id and secret_key are
required; the store validates them before building any remote client.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from .exceptions import ConfigurationError

ENV_PREFIX = "SYNCED_DOC_STORE_"

DEFAULT_STORAGE_CLASS = "STANDARD"

REQUIRED_FIELDS = ("region", "bucket", "secret_id", "secret_key")


def cos_endpoint(region: str) -> str:
    """Return the S3-compatible endpoint of Tencent Cloud COS for a region."""
    return f"https://cos.{region}.myqcloud.com"


@dataclass
class RemoteConfig:
    """Configuration for the remote bucket.

    Attributes:
        region: Storage region (e.g. 'ap-guangzhou', 'eu-west-1')
        bucket: Bucket name
        secret_id: Access key id
        secret_key: Secret access key
        endpoint_url: Optional S3-compatible endpoint (see cos_endpoint)
        storage_class: Storage tier used for uploads
    """

    region: str | None
    bucket: str | None
    secret_id: str | None
    secret_key: str | None
    endpoint_url: str | None = None
    storage_class: str = DEFAULT_STORAGE_CLASS

    def missing_fields(self) -> list[str]:
        """Names of required fields that are unset or empty."""
        return [name for name in REQUIRED_FIELDS if not getattr(self, name)]

    def validate(self) -> RemoteConfig:
        """Raise ConfigurationError if any required field is missing.

        Returns:
            self, so calls can be chained
        """
        missing = self.missing_fields()
        if missing:
            raise ConfigurationError(missing)
        return self

    def __repr__(self) -> str:
        # Keep credentials out of logs and tracebacks
        return (
            f"RemoteConfig(region={self.region!r}, bucket={self.bucket!r}, "
            f"endpoint_url={self.endpoint_url!r}, storage_class={self.storage_class!r})"
        )

    @classmethod
    def from_env(cls) -> RemoteConfig:
        """Create config from environment variables.

        Expected environment variables:
        - SYNCED_DOC_STORE_REGION: Storage region
        - SYNCED_DOC_STORE_BUCKET: Bucket name
        - SYNCED_DOC_STORE_SECRET_ID: Access key id
        - SYNCED_DOC_STORE_SECRET_KEY: Secret access key
        - SYNCED_DOC_STORE_ENDPOINT_URL: Optional S3-compatible endpoint
        - SYNCED_DOC_STORE_STORAGE_CLASS: Optional upload tier (default STANDARD)

        Raises:
            ConfigurationError: If any required variable is missing
        """
        config = cls(
            region=os.environ.get(f"{ENV_PREFIX}REGION"),
            bucket=os.environ.get(f"{ENV_PREFIX}BUCKET"),
            secret_id=os.environ.get(f"{ENV_PREFIX}SECRET_ID"),
            secret_key=os.environ.get(f"{ENV_PREFIX}SECRET_KEY"),
            endpoint_url=os.environ.get(f"{ENV_PREFIX}ENDPOINT_URL") or None,
            storage_class=os.environ.get(f"{ENV_PREFIX}STORAGE_CLASS", DEFAULT_STORAGE_CLASS),
        )
        missing = config.missing_fields()
        if missing:
            raise ConfigurationError(
                [f"{ENV_PREFIX}{name.upper()}" for name in missing],
                source="environment",
            )
        return config
