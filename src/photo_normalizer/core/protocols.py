"""Protocol definitions for dependency injection and testability."""

from typing import Any, Dict, Protocol

from .models import ImageMetrics, PhotoRecord, ResizeSpec, SourceKey


class S3ClientProtocol(Protocol):
    """Protocol for S3 client operations."""

    def get_object(self, Bucket: str, Key: str) -> Dict[str, Any]:
        """Get object from S3."""
        ...

    def put_object(
        self, Bucket: str, Key: str, Body: bytes, ContentType: str
    ) -> Dict[str, Any]:
        """Put object to S3."""
        ...

    def delete_object(self, Bucket: str, Key: str) -> Dict[str, Any]:
        """Delete object from S3."""
        ...


class DynamoTableProtocol(Protocol):
    """Protocol for the DynamoDB table resource operations we use."""

    def update_item(self, **kwargs: Any) -> Dict[str, Any]:
        """Update a single item."""
        ...


class ImageEngineProtocol(Protocol):
    """Protocol for image decoding and re-encoding."""

    def read_metrics(self, image_bytes: bytes) -> ImageMetrics:
        """Read stored dimensions and orientation."""
        ...

    def render(self, image_bytes: bytes, spec: ResizeSpec) -> bytes:
        """Resize and re-encode image bytes."""
        ...


class PhotoListProtocol(Protocol):
    """Protocol for the per-group photo list."""

    def append(self, key: SourceKey, record: PhotoRecord) -> None:
        """Append a record to the list for the key's collection and group."""
        ...


class LoggerProtocol(Protocol):
    """Protocol for logging operations."""

    def debug(self, message: str, context: Any = None, **kwargs: Any) -> None:
        """Log debug message."""
        ...

    def info(self, message: str, context: Any = None, **kwargs: Any) -> None:
        """Log info message."""
        ...

    def warning(self, message: str, context: Any = None, **kwargs: Any) -> None:
        """Log warning message."""
        ...

    def error(self, message: str, context: Any = None, **kwargs: Any) -> None:
        """Log error message."""
        ...
