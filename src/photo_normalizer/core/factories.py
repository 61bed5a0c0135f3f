"""Factory classes for creating configured service instances."""

from typing import Any, Optional

import boto3

from .models import WorkerConfig
from .observability import MetricsCollector, StructuredLogger
from .protocols import (
    DynamoTableProtocol,
    ImageEngineProtocol,
    LoggerProtocol,
    S3ClientProtocol,
)
from .records import DynamoPhotoList
from .services import ImageEngine, NormalizationPipeline
from .storage import ObjectStore


class LoggerFactory:
    """Factory for creating logger instances."""

    @staticmethod
    def create_logger(name: str, level: Optional[str] = None) -> LoggerProtocol:
        """Create a configured structured logger."""
        return StructuredLogger(name, level=level)


class S3ClientFactory:
    """Factory for creating S3 client instances."""

    @staticmethod
    def create_s3_client(**kwargs: Any) -> S3ClientProtocol:
        """Create S3 client with optional configuration."""
        session = boto3.Session()
        return session.client("s3", **kwargs)  # type: ignore


class DynamoTableFactory:
    """Factory for creating DynamoDB table resources."""

    @staticmethod
    def create_table(table_name: str, **kwargs: Any) -> DynamoTableProtocol:
        """Create a Table resource bound to ``table_name``."""
        session = boto3.Session()
        return session.resource("dynamodb", **kwargs).Table(table_name)  # type: ignore


class NormalizationPipelineFactory:
    """Factory for creating the complete normalization pipeline."""

    @staticmethod
    def create_pipeline(
        config: WorkerConfig,
        s3_client: Optional[S3ClientProtocol] = None,
        table: Optional[DynamoTableProtocol] = None,
        image_engine: Optional[ImageEngineProtocol] = None,
        logger: Optional[LoggerProtocol] = None,
        metrics_collector: Optional[MetricsCollector] = None,
    ) -> NormalizationPipeline:
        """Create a fully configured pipeline; clients are shared by both buckets."""

        if s3_client is None:
            s3_client = S3ClientFactory.create_s3_client()

        if table is None:
            table = DynamoTableFactory.create_table(config.photos_table)

        if image_engine is None:
            image_engine = ImageEngine()

        if logger is None:
            logger = LoggerFactory.create_logger("pipeline")

        return NormalizationPipeline(
            staging=ObjectStore(s3_client, config.staging_bucket),
            serving=ObjectStore(s3_client, config.serving_bucket),
            photo_list=DynamoPhotoList(table),
            image_engine=image_engine,
            logger=logger,
            metrics_collector=metrics_collector,
        )
