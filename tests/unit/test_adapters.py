"""Tests for the S3 and DynamoDB adapters."""

from unittest.mock import Mock

import pytest
from botocore.exceptions import ClientError

from photo_normalizer.core.exceptions import RecordStoreError, S3Error
from photo_normalizer.core.keys import parse_source_key
from photo_normalizer.core.models import PhotoRecord
from photo_normalizer.core.records import DynamoPhotoList, build_append_request
from photo_normalizer.core.storage import ObjectStore
from photo_normalizer.testing.fakes import FakeDynamoTable, FakeS3Client


class TestObjectStore:
    def setup_method(self):
        self.s3 = FakeS3Client()
        self.s3.create_bucket("bucket")
        self.store = ObjectStore(self.s3, "bucket")

    def test_put_get_delete(self):
        self.store.put_bytes("a/b/c.jpg", b"data", "image/jpeg")
        assert self.store.get_bytes("a/b/c.jpg") == b"data"

        self.store.delete("a/b/c.jpg")
        assert self.s3.get_bucket("bucket").get_object("a/b/c.jpg") is None

    def test_put_sets_content_type(self):
        client = Mock()
        ObjectStore(client, "served").put_bytes("k.jpg", b"x", "image/jpeg")
        client.put_object.assert_called_once_with(
            Bucket="served", Key="k.jpg", Body=b"x", ContentType="image/jpeg"
        )

    def test_missing_object_raises_s3_error(self):
        with pytest.raises(S3Error) as excinfo:
            self.store.get_bytes("nope.jpg")
        assert isinstance(excinfo.value.__cause__, ClientError)

    def test_delete_failure_raises_s3_error(self):
        self.s3.set_failure_mode(["delete_object"], "AccessDenied")
        with pytest.raises(S3Error, match="AccessDenied"):
            self.store.delete("a/b/c.jpg")

    def test_repr_names_bucket(self):
        assert repr(self.store) == "ObjectStore(bucket='bucket')"


class TestBuildAppendRequest:
    def test_request_shape(self):
        request = build_append_request(
            parse_source_key("a1/m2/p3.jpg"), PhotoRecord(id="p3.jpg")
        )

        assert request["Key"] == {"atlasId": "a1", "markerId": "m2"}
        assert request["UpdateExpression"] == (
            "SET #photos = list_append(if_not_exists(#photos, :empty), :new_photo)"
        )
        assert request["ExpressionAttributeNames"] == {"#photos": "photos"}
        assert request["ExpressionAttributeValues"] == {
            ":new_photo": [{"id": "p3.jpg", "legend": ""}],
            ":empty": [],
        }
        assert request["ReturnValues"] == "UPDATED_NEW"


class TestDynamoPhotoList:
    def test_creates_list_then_appends(self):
        table = FakeDynamoTable()
        photo_list = DynamoPhotoList(table)
        key = parse_source_key("a1/m2/p3.jpg")

        photo_list.append(key, PhotoRecord(id="p3.jpg"))
        photo_list.append(key, PhotoRecord(id="p4.jpg", legend="Pier"))

        assert table.get_item(atlasId="a1", markerId="m2")["photos"] == [
            {"id": "p3.jpg", "legend": ""},
            {"id": "p4.jpg", "legend": "Pier"},
        ]

    def test_lists_are_per_group(self):
        table = FakeDynamoTable()
        photo_list = DynamoPhotoList(table)

        photo_list.append(parse_source_key("a1/m2/p3.jpg"), PhotoRecord(id="p3.jpg"))
        photo_list.append(parse_source_key("a1/m9/p3.jpg"), PhotoRecord(id="p3.jpg"))

        assert len(table.get_item(atlasId="a1", markerId="m2")["photos"]) == 1
        assert len(table.get_item(atlasId="a1", markerId="m9")["photos"]) == 1

    def test_client_error_becomes_record_store_error(self):
        table = FakeDynamoTable()
        table.set_failure_mode("Throughput exceeded")

        with pytest.raises(RecordStoreError, match="Throughput exceeded"):
            DynamoPhotoList(table).append(
                parse_source_key("a1/m2/p3.jpg"), PhotoRecord(id="p3.jpg")
            )
