"""DynamoDB-backed photo lists keyed by collection and group."""

from typing import Any, Dict

from .error_handling import with_error_handling
from .exceptions import RecordStoreError
from .logging_config import get_logger
from .models import PhotoRecord, SourceKey
from .protocols import DynamoTableProtocol

COLLECTION_KEY_ATTRIBUTE = "atlasId"
GROUP_KEY_ATTRIBUTE = "markerId"
PHOTOS_ATTRIBUTE = "photos"


def build_append_request(key: SourceKey, record: PhotoRecord) -> Dict[str, Any]:
    """
    Build the ``update_item`` arguments that append one record.

    The list is created when the item or attribute does not exist yet.
    Appends are not deduplicated.
    """
    return {
        "Key": {
            COLLECTION_KEY_ATTRIBUTE: key.collection_id,
            GROUP_KEY_ATTRIBUTE: key.group_id,
        },
        "UpdateExpression": (
            "SET #photos = list_append(if_not_exists(#photos, :empty), :new_photo)"
        ),
        "ExpressionAttributeNames": {"#photos": PHOTOS_ATTRIBUTE},
        "ExpressionAttributeValues": {
            ":new_photo": [record.model_dump()],
            ":empty": [],
        },
        "ReturnValues": "UPDATED_NEW",
    }


class DynamoPhotoList:
    """Appends PhotoRecords to the ``photos`` list of a DynamoDB item."""

    def __init__(self, table: DynamoTableProtocol):
        self._table = table

    @with_error_handling(client_error=RecordStoreError)
    def append(self, key: SourceKey, record: PhotoRecord) -> None:
        get_logger("records").debug(
            f"Appending photo {record.id} to "
            f"{key.collection_id}/{key.group_id}"
        )
        self._table.update_item(**build_append_request(key, record))
