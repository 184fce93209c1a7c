"""Create the DynamoDB table holding Step Functions task tokens.

Usage:
    python scripts/create_token_table.py --endpoint-url http://localhost:4566
"""

from __future__ import annotations

import argparse
from typing import Any

import boto3

DEFAULT_TABLE_NAME = "dpr-step-function-tokens"
DEFAULT_KEY_ATTRIBUTE = "replicationTaskArn"
TTL_ATTRIBUTE = "expireAt"


def create_token_table(ddb: Any, table_name: str = DEFAULT_TABLE_NAME, suffix: str = "",
                       key_attribute: str = DEFAULT_KEY_ATTRIBUTE) -> bool:
    """Create the token table with TTL on expireAt. Skips if it already exists.

    Returns:
        True if the table was created, False if it already existed.
    """
    client = ddb.meta.client
    full_name = f"{table_name}{suffix}"
    existing = client.list_tables().get("TableNames", [])

    if full_name in existing:
        print(f"  Table {full_name} already exists, skipping")
        return False

    client.create_table(
        TableName=full_name,
        KeySchema=[{"AttributeName": key_attribute, "KeyType": "HASH"}],
        AttributeDefinitions=[{"AttributeName": key_attribute, "AttributeType": "S"}],
        BillingMode="PAY_PER_REQUEST",
    )
    client.get_waiter("table_exists").wait(TableName=full_name)
    client.update_time_to_live(
        TableName=full_name,
        TimeToLiveSpecification={"Enabled": True, "AttributeName": TTL_ATTRIBUTE},
    )
    print(f"  Created table {full_name} (TTL on {TTL_ATTRIBUTE})")
    return True


def main() -> None:
    parser = argparse.ArgumentParser(description="Create the DMS notifier token table")
    parser.add_argument("--endpoint-url", default=None, help="DynamoDB endpoint (e.g. http://localhost:4566)")
    parser.add_argument("--table-name", default=DEFAULT_TABLE_NAME, help="Base table name")
    parser.add_argument("--table-suffix", default="", help="Table name suffix (e.g. -dev)")
    parser.add_argument("--key-attribute", default=DEFAULT_KEY_ATTRIBUTE, help="Hash key attribute name")
    parser.add_argument("--region", default="eu-west-2", help="AWS region")
    args = parser.parse_args()

    kwargs: dict[str, Any] = {"region_name": args.region}
    if args.endpoint_url:
        kwargs["endpoint_url"] = args.endpoint_url

    ddb = boto3.resource("dynamodb", **kwargs)

    print("Creating table...")
    create_token_table(ddb, table_name=args.table_name, suffix=args.table_suffix,
                       key_attribute=args.key_attribute)

    print("Done!")


if __name__ == "__main__":
    main()
