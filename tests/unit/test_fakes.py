"""Tests for the in-memory fakes themselves."""

import io

import pytest
from botocore.exceptions import ClientError
from PIL import Image

from photo_normalizer.testing.fakes import (
    SERVING_BUCKET,
    STAGING_BUCKET,
    FakeDynamoTable,
    FakeLogger,
    FakeS3Client,
    create_test_image,
    setup_test_s3_environment,
)


class TestFakeS3Client:
    def test_unknown_bucket(self):
        with pytest.raises(ClientError) as excinfo:
            FakeS3Client().get_object(Bucket="nope", Key="k")
        assert excinfo.value.response["Error"]["Code"] == "NoSuchBucket"

    def test_failure_mode_is_per_operation(self):
        s3 = setup_test_s3_environment()
        s3.set_failure_mode(["delete_object"])

        s3.get_object(Bucket=STAGING_BUCKET, Key="a1/m2/square.jpg")
        with pytest.raises(ClientError):
            s3.delete_object(Bucket=STAGING_BUCKET, Key="a1/m2/square.jpg")

        s3.clear_failure_mode()
        s3.delete_object(Bucket=STAGING_BUCKET, Key="a1/m2/square.jpg")
        assert s3.operations() == ["get_object", "delete_object", "delete_object"]

    def test_default_environment(self):
        s3 = setup_test_s3_environment()
        assert len(s3.get_bucket(STAGING_BUCKET).objects) == 4
        assert s3.get_bucket(SERVING_BUCKET).objects == {}


class TestFakeDynamoTable:
    def test_failure_mode_toggles(self):
        table = FakeDynamoTable()
        table.set_failure_mode()
        with pytest.raises(ClientError):
            table.update_item(Key={"k": 1}, ExpressionAttributeValues={})
        table.set_failure_mode(None)
        table.update_item(
            Key={"k": 1},
            ExpressionAttributeValues={":empty": [], ":new_photo": [{"id": "x"}]},
        )
        assert table.get_item(k=1) == {"k": 1, "photos": [{"id": "x"}]}


class TestFakeLogger:
    def test_filters_by_level(self):
        logger = FakeLogger()
        logger.info("hello")
        logger.warning("careful", detail=1)

        assert [log["message"] for log in logger.get_logs()] == ["hello", "careful"]
        assert logger.get_logs("WARNING")[0]["detail"] == 1

        logger.clear_logs()
        assert logger.get_logs() == []


class TestCreateTestImage:
    def test_size_and_format(self):
        image = Image.open(io.BytesIO(create_test_image(120, 60)))
        assert image.size == (120, 60)
        assert image.format == "JPEG"

    def test_embeds_orientation(self):
        image = Image.open(io.BytesIO(create_test_image(120, 60, orientation=8)))
        assert image.getexif()[0x0112] == 8
