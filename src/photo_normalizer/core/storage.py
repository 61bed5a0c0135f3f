"""S3 object store adapter used for both the staging and serving buckets."""

from .error_handling import with_error_handling
from .logging_config import get_logger
from .protocols import S3ClientProtocol


class ObjectStore:
    """A single S3 bucket seen through a shared client."""

    def __init__(self, s3_client: S3ClientProtocol, bucket: str):
        self._s3_client = s3_client
        self.bucket = bucket

    def __repr__(self) -> str:
        return f"ObjectStore(bucket={self.bucket!r})"

    @with_error_handling
    def get_bytes(self, key: str) -> bytes:
        get_logger("storage").debug(f"Downloading s3://{self.bucket}/{key}")
        response = self._s3_client.get_object(Bucket=self.bucket, Key=key)
        return response["Body"].read()

    @with_error_handling
    def put_bytes(self, key: str, data: bytes, content_type: str) -> None:
        get_logger("storage").debug(
            f"Uploading {len(data)} bytes to s3://{self.bucket}/{key}"
        )
        self._s3_client.put_object(
            Bucket=self.bucket, Key=key, Body=data, ContentType=content_type
        )

    @with_error_handling
    def delete(self, key: str) -> None:
        get_logger("storage").debug(f"Deleting s3://{self.bucket}/{key}")
        self._s3_client.delete_object(Bucket=self.bucket, Key=key)
