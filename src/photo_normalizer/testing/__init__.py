"""Testing utilities and fakes for the photo normalizer."""

from .fakes import (
    FakeS3Client,
    FakeDynamoTable,
    FakeLogger,
    S3Object,
    S3Bucket,
    STAGING_BUCKET,
    SERVING_BUCKET,
    create_test_image,
    setup_test_s3_environment,
    srgb_profile_bytes,
)

__all__ = [
    "FakeS3Client",
    "FakeDynamoTable",
    "FakeLogger",
    "S3Object",
    "S3Bucket",
    "STAGING_BUCKET",
    "SERVING_BUCKET",
    "create_test_image",
    "setup_test_s3_environment",
    "srgb_profile_bytes",
]
