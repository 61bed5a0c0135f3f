"""Service implementations for the image normalization pipeline."""

import time
from typing import Any, Callable, Optional, Tuple, TypeVar

from .classifier import classify
from .image_utils import CONTENT_TYPE, read_metrics, render
from .keys import parse_source_key
from .models import (
    AspectCategory,
    CorrectedDimensions,
    ImageMetrics,
    NormalizationResult,
    PhotoRecord,
    ResizeSpec,
    StepOutcome,
)
from .observability import LogContext, MetricsCollector, PerformanceMetrics
from .planner import plan_resize
from .protocols import ImageEngineProtocol, LoggerProtocol, PhotoListProtocol
from .storage import ObjectStore

T = TypeVar("T")


class ImageEngine:
    """Pillow-backed image engine with no I/O dependencies."""

    def read_metrics(self, image_bytes: bytes) -> ImageMetrics:
        return read_metrics(image_bytes)

    def render(self, image_bytes: bytes, spec: ResizeSpec) -> bytes:
        return render(image_bytes, spec)


class NormalizationPipeline:
    """
    Normalizes one staged image per call.

    Steps run strictly in order: fetch, decode and classify, plan, transform,
    publish, then the two best-effort steps (staging cleanup and photo list
    append). Any failure up to and including publish propagates to the caller
    and nothing already written is rolled back. The best-effort steps return
    a StepOutcome and never raise.
    """

    def __init__(
        self,
        staging: ObjectStore,
        serving: ObjectStore,
        photo_list: PhotoListProtocol,
        image_engine: ImageEngineProtocol,
        logger: LoggerProtocol,
        metrics_collector: Optional[MetricsCollector] = None,
    ):
        self._staging = staging
        self._serving = serving
        self._photo_list = photo_list
        self._image_engine = image_engine
        self._logger = logger
        self._metrics_collector = metrics_collector

    def process(self, key: str) -> NormalizationResult:
        """Run the whole pipeline for one staging key."""
        start_time = time.time()
        log_context = LogContext(
            correlation_id=f"img_{key}_{int(start_time * 1000)}",
            operation="normalize_image",
            component="normalization_pipeline",
        ).with_metadata(key=key)

        self._logger.info("Starting image normalization", log_context)

        try:
            source_key = parse_source_key(key)

            image_bytes = self._timed(
                "fetch", log_context, self._staging.get_bytes, key
            )
            dimensions, category = self._timed(
                "decode", log_context, self._inspect, image_bytes
            )
            spec = plan_resize(category, dimensions.width, dimensions.height)
            self._logger.debug(
                "Planned resize",
                log_context.with_operation("plan"),
                category=category.value,
                width=dimensions.width,
                height=dimensions.height,
                target_width=spec.target_width,
                target_height=spec.target_height,
            )
            processed_bytes = self._timed(
                "transform", log_context, self._image_engine.render, image_bytes, spec
            )
            self._timed(
                "publish",
                log_context,
                self._serving.put_bytes,
                key,
                processed_bytes,
                CONTENT_TYPE,
            )
        except Exception as e:
            self._logger.error(
                "Image normalization failed", log_context.with_metadata(error=str(e))
            )
            raise

        cleanup = self._best_effort("cleanup", log_context, self._staging.delete, key)
        record = self._best_effort(
            "record_append",
            log_context,
            self._photo_list.append,
            source_key,
            PhotoRecord(id=source_key.item_id, legend=""),
        )

        result = NormalizationResult(
            key=key,
            category=category,
            resize=spec,
            cleanup=cleanup,
            record=record,
            processing_time=time.time() - start_time,
        )

        self._logger.info(
            "Successfully normalized image",
            log_context,
            category=category.value,
            processing_time_ms=result.processing_time * 1000,
        )
        return result

    def _inspect(self, image_bytes: bytes) -> Tuple[CorrectedDimensions, AspectCategory]:
        metrics = self._image_engine.read_metrics(image_bytes)
        return classify(metrics.raw_width, metrics.raw_height, metrics.orientation)

    def _timed(
        self, step: str, log_context: LogContext, func: Callable[..., T], *args: Any
    ) -> T:
        step_context = log_context.with_operation(step)
        self._logger.debug(f"Starting {step}", step_context)

        start_time = time.time()
        success = False
        error_message = None
        try:
            value = func(*args)
            success = True
            return value
        except Exception as e:
            error_message = str(e)
            raise
        finally:
            if self._metrics_collector is not None:
                self._metrics_collector.record_metric(
                    PerformanceMetrics(
                        operation=step,
                        start_time=start_time,
                        end_time=time.time(),
                        success=success,
                        error_message=error_message,
                    )
                )

    def _best_effort(
        self, step: str, log_context: LogContext, func: Callable[..., Any], *args: Any
    ) -> StepOutcome:
        """Run a step whose failure is logged and reported, never raised."""
        try:
            self._timed(step, log_context, func, *args)
        except Exception as e:  # noqa: BLE001
            self._logger.warning(
                f"Best-effort step '{step}' failed",
                log_context.with_operation(step).with_metadata(error=str(e)),
            )
            return StepOutcome(step=step, succeeded=False, error=str(e))
        return StepOutcome(step=step)
