"""Domain layer: errors and schemas."""

from .errors import ContentError, ErrorCodes
from .schemas import (
    Article,
    ContentErrorKind,
    ReadResult,
)

__all__ = [
    "ContentError",
    "ErrorCodes",
    "ContentErrorKind",
    "ReadResult",
    "Article",
]
