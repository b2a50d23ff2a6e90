"""
Logging helpers for store components.

Every record a store emits carries the local source path, the remote key and
the serializer name, so records from several stores in one process can be
told apart. Best-effort hydration and cleanup passes are logged step by step
with their phase and operation.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .best_effort import SyncReport


def get_store_logger(name: str) -> logging.Logger:
    """
    Get a logger for store components with consistent naming.

    Args:
        name: Component name (e.g., 'store', 's3')

    Returns:
        Logger instance with name 'synced_doc_store.{name}'
    """
    return logging.getLogger(f"synced_doc_store.{name}")


class StoreLoggerAdapter(logging.LoggerAdapter):
    """
    Logger adapter bound to one store's source, key and serializer.

    Context passed per call through ``extra`` is merged with the store context.
    """

    def process(self, msg: str, kwargs: dict[str, Any]) -> tuple[str, dict[str, Any]]:
        """Add store context to the log record."""
        extra = kwargs.get("extra", {})
        extra.update(self.extra)
        kwargs["extra"] = extra
        return msg, kwargs

    def report(self, phase: str, report: SyncReport) -> None:
        """Log the outcomes of a hydration or cleanup pass.

        Failures are expected (a first run has no remote object), so they are
        logged at DEBUG with the failing operation and error type.
        """
        for failure in report.failures:
            self.debug(
                "%s: %s failed, ignoring: %s",
                phase,
                failure.operation,
                failure.error,
                extra={
                    "phase": phase,
                    "operation": failure.operation,
                    "error_type": type(failure.error).__name__,
                },
            )
        if report.ok:
            self.debug(
                "%s completed: %s",
                phase,
                ", ".join(report.operations()),
                extra={"phase": phase},
            )
