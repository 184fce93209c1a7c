"""DynamoDB backend implementing ITokenStore."""

from __future__ import annotations

from decimal import Decimal
from typing import Any

import boto3
from botocore.config import Config

from dmsnotify.models.task_record import TASK_TOKEN_KEY, TaskKey, TaskRecord

IGNORE_DMS_TASK_FAILURE_KEY = "ignoreDmsTaskFailure"
CREATED_AT_KEY = "createdAt"
EXPIRE_AT_KEY = "expireAt"


def _decode_int(value: Decimal | int | None) -> int | None:
    """DynamoDB numbers come back as Decimal."""
    return None if value is None else int(value)


def record_to_item(key: TaskKey, record: TaskRecord) -> dict[str, Any]:
    """Build the DynamoDB item stored for ``record``."""
    item: dict[str, Any] = {
        key.attribute: key.value,
        TASK_TOKEN_KEY: record.token,
        IGNORE_DMS_TASK_FAILURE_KEY: record.ignore_failure,
    }
    if record.created_at is not None:
        item[CREATED_AT_KEY] = record.created_at
    if record.expire_at is not None:
        item[EXPIRE_AT_KEY] = record.expire_at
    return item


def item_to_record(item: dict[str, Any] | None) -> TaskRecord | None:
    """Parse a DynamoDB item. Items without a token count as absent."""
    if not item or not item.get(TASK_TOKEN_KEY):
        return None
    return TaskRecord(
        token=item[TASK_TOKEN_KEY],
        ignore_failure=bool(item.get(IGNORE_DMS_TASK_FAILURE_KEY, False)),
        created_at=item.get(CREATED_AT_KEY),
        expire_at=_decode_int(item.get(EXPIRE_AT_KEY)),
    )


class DynamoDBTokenStore:
    """Production ITokenStore backed by DynamoDB.

    Expiry is enforced by the table's TTL on ``expireAt``; nothing here reads it.
    """

    def __init__(self, region: str = "eu-west-2", endpoint_url: str | None = None,
                 client_config: Config | None = None) -> None:
        kwargs: dict = {"region_name": region}
        if endpoint_url:
            kwargs["endpoint_url"] = endpoint_url
        if client_config is not None:
            kwargs["config"] = client_config
        self._ddb = boto3.resource("dynamodb", **kwargs)

    def _table(self, name: str):
        return self._ddb.Table(name)

    # ---- ITokenStore methods ----

    def save(self, table: str, key: TaskKey, record: TaskRecord) -> None:
        self._table(table).put_item(Item=record_to_item(key, record))

    def lookup(self, table: str, key: TaskKey) -> TaskRecord | None:
        resp = self._table(table).get_item(Key={key.attribute: key.value}, ConsistentRead=True)
        return item_to_record(resp.get("Item"))

    def delete(self, table: str, key: TaskKey) -> None:
        self._table(table).delete_item(Key={key.attribute: key.value})
