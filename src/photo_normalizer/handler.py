"""Entry point invoked once per S3 object-created notification."""

import json
import urllib.parse
from typing import Any, Dict, Mapping, Optional

from .core import WorkerConfig, extract_object_key, get_logger
from .core.factories import NormalizationPipelineFactory
from .core.services import NormalizationPipeline

logger = get_logger("handler")

# Built on the first invocation and reused while the process stays warm.
_pipeline: Optional[NormalizationPipeline] = None


def get_pipeline() -> NormalizationPipeline:
    """Return the process-wide pipeline, creating it from the environment once."""
    global _pipeline
    if _pipeline is None:
        _pipeline = NormalizationPipelineFactory.create_pipeline(WorkerConfig.from_env())
    return _pipeline


def reset_pipeline() -> None:
    """Forget the cached pipeline so the next invocation rebuilds it."""
    global _pipeline
    _pipeline = None


def lambda_handler(event: Mapping[str, Any], context: Any = None) -> Dict[str, Any]:
    """
    Normalize the image named by an S3 notification.

    Returns:
        ``{"statusCode": 200, "body": {"key": key}}`` on success. Fatal
        errors propagate so the trigger can report or retry the event.
    """
    logger.info(f"Starting image processing with event: {json.dumps(event, default=str)}")

    key = extract_object_key(event)
    result = get_pipeline().process(key)
    return result.to_response()


def build_s3_event(key: str, bucket: str = "") -> Dict[str, Any]:
    """Build a minimal S3 object-created event for ``key``, encoded as S3 does."""
    return {
        "Records": [
            {
                "eventSource": "aws:s3",
                "eventName": "ObjectCreated:Put",
                "s3": {
                    "bucket": {"name": bucket},
                    "object": {"key": urllib.parse.quote_plus(key, safe="/")},
                },
            }
        ]
    }
