"""
Custom exceptions for the synced document store.

Local file adapters, remote object adapters and the store itself raise
these exceptions so callers can handle failures consistently regardless
of which object-storage provider sits behind the store.
"""


class DocStoreError(Exception):
    """Base exception for all document store errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(DocStoreError):
    """Raised when required remote-access settings are missing."""

    def __init__(self, missing: list[str], source: str | None = None):
        details: dict = {"missing": list(missing)}
        if source:
            details["source"] = source
        message = f"Missing required remote configuration: {', '.join(missing)}"
        if source:
            message += f" ({source})"
        super().__init__(message, details)
        self.missing = list(missing)
        self.source = source


class MalformedInputError(DocStoreError):
    """Raised when a local file exists but its content cannot be deserialized."""

    def __init__(self, path: str, cause: Exception | None = None):
        details = {"path": path}
        if cause:
            details["cause"] = str(cause)
        message = f"Malformed content in file: {path}"
        if cause:
            message += f"\n{cause}"
        super().__init__(message, details)
        self.path = path
        self.cause = cause


class StorageIOError(DocStoreError):
    """Raised when a local storage I/O operation fails."""

    def __init__(self, operation: str, path: str | None = None, cause: Exception | None = None):
        details = {"operation": operation}
        if path:
            details["path"] = path
        if cause:
            details["cause"] = str(cause)
        message = f"Storage I/O error during {operation}"
        if path:
            message += f": {path}"
        super().__init__(message, details)
        self.operation = operation
        self.path = path
        self.cause = cause


class RemoteAccessError(DocStoreError):
    """Raised when the remote object store rejects or fails an operation.

    Note: "object does not exist" is reported by ``exists()`` returning False,
    not by this exception. Every other remote failure surfaces here.
    """

    def __init__(
        self,
        operation: str,
        key: str,
        bucket: str | None = None,
        cause: Exception | None = None,
    ):
        details = {"operation": operation, "key": key}
        if bucket:
            details["bucket"] = bucket
        if cause:
            details["cause"] = str(cause)
        location = f"{bucket}/{key}" if bucket else key
        message = f"Remote {operation} failed for {location}"
        if cause:
            message += f": {cause}"
        super().__init__(message, details)
        self.operation = operation
        self.key = key
        self.bucket = bucket
        self.cause = cause
