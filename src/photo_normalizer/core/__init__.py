"""Core utilities and shared components for the photo normalizer."""

from .classifier import classify
from .exceptions import (
    PhotoNormalizerError,
    InvalidKey,
    ImageProcessingError,
    InvalidDimensions,
    S3Error,
    RecordStoreError,
    ConfigurationError,
)
from .keys import extract_object_key, parse_source_key
from .logging_config import get_logger, setup_logger
from .models import (
    AspectCategory,
    CorrectedDimensions,
    ImageMetrics,
    NormalizationResult,
    PhotoRecord,
    ResizeSpec,
    SourceKey,
    StepOutcome,
    WorkerConfig,
)
from .planner import plan_resize

__all__ = [
    "WorkerConfig",
    "SourceKey",
    "ImageMetrics",
    "CorrectedDimensions",
    "AspectCategory",
    "ResizeSpec",
    "PhotoRecord",
    "StepOutcome",
    "NormalizationResult",
    "classify",
    "plan_resize",
    "extract_object_key",
    "parse_source_key",
    "setup_logger",
    "get_logger",
    "PhotoNormalizerError",
    "InvalidKey",
    "ImageProcessingError",
    "InvalidDimensions",
    "S3Error",
    "RecordStoreError",
    "ConfigurationError",
]
