"""Exception types raised by yedwriter."""
from __future__ import annotations


class YedWriterError(Exception):
    """Base class for errors raised by this package."""


class WriterClosedError(YedWriterError):
    """Raised when a document is written to after its footer was emitted."""

    def __init__(self, message: str = "yed: writer is closed") -> None:
        super().__init__(message)


class NestingError(YedWriterError):
    """Raised when a streaming document is asked to write a nested node."""


__all__ = ["NestingError", "WriterClosedError", "YedWriterError"]
