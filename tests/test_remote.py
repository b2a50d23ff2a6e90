"""
Tests for remote object adapters.

The S3 adapter is tested against a mocked boto3 client to avoid network
access; the directory adapter is exercised on a real temp directory.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from boto3.exceptions import S3UploadFailedError
from botocore.exceptions import ClientError, EndpointConnectionError

from synced_doc_store import SyncedFileStore
from synced_doc_store.config import RemoteConfig, cos_endpoint
from synced_doc_store.exceptions import ConfigurationError, RemoteAccessError
from synced_doc_store.remote import DirectoryObjectAccess, S3ObjectAccess


def client_error(code: str, operation: str = "HeadObject") -> ClientError:
    return ClientError({"Error": {"Code": code, "Message": code}}, operation)


class TestS3ObjectAccess:
    """Tests for the boto3-backed adapter."""

    @pytest.fixture
    def client(self) -> MagicMock:
        return MagicMock()

    @pytest.fixture
    def access(self, client: MagicMock) -> S3ObjectAccess:
        return S3ObjectAccess(client, "test-bucket")

    def test_from_config(self) -> None:
        config = RemoteConfig(
            region="ap-guangzhou",
            bucket="bucket-1250000000",
            secret_id="id",
            secret_key="key",
            endpoint_url=cos_endpoint("ap-guangzhou"),
            storage_class="STANDARD_IA",
        )

        with patch("synced_doc_store.remote.s3.boto3.client") as mock_client:
            access = S3ObjectAccess.from_config(config)

        mock_client.assert_called_once_with(
            "s3",
            region_name="ap-guangzhou",
            aws_access_key_id="id",
            aws_secret_access_key="key",
            endpoint_url="https://cos.ap-guangzhou.myqcloud.com",
        )
        assert access.bucket == "bucket-1250000000"
        assert access.storage_class == "STANDARD_IA"

    def test_from_config_requires_credentials(self) -> None:
        config = RemoteConfig(region="r", bucket="b", secret_id=None, secret_key=None)

        with patch("synced_doc_store.remote.s3.boto3.client") as mock_client:
            with pytest.raises(ConfigurationError):
                S3ObjectAccess.from_config(config)

        mock_client.assert_not_called()

    @pytest.mark.asyncio
    async def test_exists(self, access: S3ObjectAccess, client: MagicMock) -> None:
        client.head_object.return_value = {"ContentLength": 2}

        assert await access.exists("db.json") is True
        client.head_object.assert_called_once_with(Bucket="test-bucket", Key="db.json")

    @pytest.mark.parametrize("code", ["404", "NoSuchKey", "NotFound"])
    @pytest.mark.asyncio
    async def test_exists_missing(self, access: S3ObjectAccess, client: MagicMock, code: str) -> None:
        client.head_object.side_effect = client_error(code)

        assert await access.exists("db.json") is False

    @pytest.mark.asyncio
    async def test_exists_forbidden(self, access: S3ObjectAccess, client: MagicMock) -> None:
        client.head_object.side_effect = client_error("403")

        with pytest.raises(RemoteAccessError) as exc_info:
            await access.exists("db.json")

        assert exc_info.value.operation == "exists"
        assert exc_info.value.bucket == "test-bucket"

    @pytest.mark.asyncio
    async def test_exists_connection_error(self, access: S3ObjectAccess, client: MagicMock) -> None:
        client.head_object.side_effect = EndpointConnectionError(endpoint_url="https://example")

        with pytest.raises(RemoteAccessError):
            await access.exists("db.json")

    @pytest.mark.asyncio
    async def test_download(self, access: S3ObjectAccess, client: MagicMock, tmp_path: Path) -> None:
        destination = tmp_path / "nested" / "db.json"

        await access.download("db.json", destination)

        client.download_file.assert_called_once_with("test-bucket", "db.json", str(destination))
        assert destination.parent.is_dir()

    @pytest.mark.asyncio
    async def test_download_failure(self, access: S3ObjectAccess, client: MagicMock, tmp_path: Path) -> None:
        client.download_file.side_effect = client_error("404", "GetObject")

        with pytest.raises(RemoteAccessError) as exc_info:
            await access.download("db.json", tmp_path / "db.json")

        assert isinstance(exc_info.value.cause, ClientError)

    @pytest.mark.asyncio
    async def test_upload(self, access: S3ObjectAccess, client: MagicMock, tmp_path: Path) -> None:
        source = tmp_path / "db.json"
        source.write_text("{}", encoding="utf-8")

        await access.upload("db.json", source)

        client.upload_file.assert_called_once_with(
            str(source), "test-bucket", "db.json", ExtraArgs={"StorageClass": "STANDARD"}
        )

    @pytest.mark.asyncio
    async def test_upload_failure(self, access: S3ObjectAccess, client: MagicMock, tmp_path: Path) -> None:
        client.upload_file.side_effect = S3UploadFailedError("Failed to upload")

        with pytest.raises(RemoteAccessError) as exc_info:
            await access.upload("db.json", tmp_path / "db.json")

        assert exc_info.value.operation == "upload"
        assert "test-bucket/db.json" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_delete(self, access: S3ObjectAccess, client: MagicMock) -> None:
        await access.delete("db.json")

        client.delete_object.assert_called_once_with(Bucket="test-bucket", Key="db.json")

    @pytest.mark.asyncio
    async def test_close(self, access: S3ObjectAccess, client: MagicMock) -> None:
        await access.close()

        client.close.assert_called_once_with()


class TestDirectoryObjectAccess:
    """Tests for the directory-backed adapter."""

    @pytest.fixture
    def access(self, tmp_path: Path) -> DirectoryObjectAccess:
        return DirectoryObjectAccess(tmp_path / "bucket")

    @pytest.mark.asyncio
    async def test_upload_download_delete(self, access: DirectoryObjectAccess, tmp_path: Path) -> None:
        source = tmp_path / "db.json"
        source.write_text('{"a": 1}', encoding="utf-8")

        assert await access.exists("data/db.json") is False
        await access.upload("data/db.json", source)
        assert await access.exists("data/db.json") is True
        assert (tmp_path / "bucket" / "data" / "db.json").read_text(encoding="utf-8") == '{"a": 1}'

        destination = tmp_path / "copy.json"
        await access.download("data/db.json", destination)
        assert destination.read_text(encoding="utf-8") == '{"a": 1}'

        await access.delete("data/db.json")
        assert await access.exists("data/db.json") is False

    @pytest.mark.asyncio
    async def test_download_missing(self, access: DirectoryObjectAccess, tmp_path: Path) -> None:
        with pytest.raises(RemoteAccessError) as exc_info:
            await access.download("db.json", tmp_path / "db.json")

        assert exc_info.value.operation == "download"

    @pytest.mark.asyncio
    async def test_delete_missing_is_noop(self, access: DirectoryObjectAccess) -> None:
        await access.delete("db.json")

    @pytest.mark.parametrize("key", ["../escape.json", "a/../../b.json", ""])
    def test_invalid_keys(self, access: DirectoryObjectAccess, key: str) -> None:
        with pytest.raises(RemoteAccessError):
            access.object_path(key)

    def test_leading_slash_is_ignored(self, access: DirectoryObjectAccess, tmp_path: Path) -> None:
        assert access.object_path("/db.json") == tmp_path / "bucket" / "db.json"

    @pytest.mark.asyncio
    async def test_store_over_directory_bucket(
        self, access: DirectoryObjectAccess, config: RemoteConfig, tmp_path: Path
    ) -> None:
        """Two stores on different local paths share documents through the bucket."""
        first = SyncedFileStore(tmp_path / "one" / "db.json", config, key="db.json", remote=access)
        assert await first.read() == {}
        await first.write({"posts": [{"id": 1}]})

        second = SyncedFileStore(tmp_path / "two" / "db.json", config, key="db.json", remote=access)
        assert await second.read() == {"posts": [{"id": 1}]}

        await second.clean()
        assert await access.exists("db.json") is False
