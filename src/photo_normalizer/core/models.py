"""Shared data models for the photo normalizer."""

import os
from enum import Enum
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

from .exceptions import ConfigurationError

DEFAULT_PHOTOS_TABLE = "cloud-atlas-demo-photos"


class WorkerConfig(BaseModel):
    """Configuration for the worker, resolved once per process."""

    staging_bucket: str
    serving_bucket: str
    photos_table: str = DEFAULT_PHOTOS_TABLE

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "WorkerConfig":
        """Build the configuration from environment variables."""
        env = os.environ if environ is None else environ

        missing = [
            name
            for name in ("DUMP_BUCKET_NAME", "OPTIMIZED_BUCKET_NAME")
            if not env.get(name)
        ]
        if missing:
            raise ConfigurationError(
                f"Missing required environment variables: {', '.join(missing)}"
            )

        return cls(
            staging_bucket=env["DUMP_BUCKET_NAME"],
            serving_bucket=env["OPTIMIZED_BUCKET_NAME"],
            photos_table=env.get("PHOTOS_TABLE_NAME") or DEFAULT_PHOTOS_TABLE,
        )


class SourceKey(BaseModel):
    """Logical identity of an uploaded photo."""

    model_config = ConfigDict(frozen=True)

    collection_id: str = Field(min_length=1)
    group_id: str = Field(min_length=1)
    item_id: str = Field(min_length=1)

    @property
    def path(self) -> str:
        return f"{self.collection_id}/{self.group_id}/{self.item_id}"


class ImageMetrics(BaseModel):
    """Raw dimensions and EXIF orientation read from the decoded image."""

    raw_width: Optional[int] = None
    raw_height: Optional[int] = None
    orientation: Optional[int] = None


class CorrectedDimensions(BaseModel):
    """Dimensions of the image as it is displayed."""

    model_config = ConfigDict(frozen=True)

    width: int
    height: int


class AspectCategory(str, Enum):
    """Coarse aspect-ratio bucket used to pick a resize policy."""

    SQUARE = "square"
    LANDSCAPE = "landscape"
    PORTRAIT = "portrait"
    PANORAMA = "panorama"


class ResizeSpec(BaseModel):
    """Target box handed to the image engine."""

    model_config = ConfigDict(frozen=True)

    target_width: int
    target_height: Optional[int] = None


class PhotoRecord(BaseModel):
    """Entry appended to a group's photo list."""

    id: str
    legend: str = ""


class StepOutcome(BaseModel):
    """Captured result of a best-effort step."""

    step: str
    succeeded: bool = True
    error: str = ""


class NormalizationResult(BaseModel):
    """Result of normalizing a single image."""

    key: str
    status: str = "success"
    category: AspectCategory
    resize: ResizeSpec
    cleanup: StepOutcome
    record: StepOutcome
    processing_time: float = 0.0

    def to_response(self) -> Dict[str, Any]:
        """Render the payload returned to the trigger."""
        return {"statusCode": 200, "body": {"key": self.key}}
