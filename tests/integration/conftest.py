"""Integration test fixtures, LocalStack DynamoDB."""

from __future__ import annotations

import os
import sys

import boto3
import pytest
from botocore.config import Config

# Default LocalStack endpoint
LOCALSTACK_URL = os.environ.get("LOCALSTACK_URL", "http://localhost:4566")
REGION = "eu-west-2"
TABLE_SUFFIX = "-inttest"


def _localstack_available() -> bool:
    """Check if LocalStack is reachable."""
    try:
        client = boto3.client(
            "dynamodb", region_name=REGION, endpoint_url=LOCALSTACK_URL,
            aws_access_key_id="test", aws_secret_access_key="test",
            config=Config(connect_timeout=1, retries={"max_attempts": 0}),
        )
        client.list_tables()
        return True
    except Exception:
        return False


skip_no_localstack = pytest.mark.skipif(
    not _localstack_available(),
    reason="LocalStack not available",
)


@pytest.fixture(scope="session")
def localstack_ddb():
    """DynamoDB resource pointing at LocalStack."""
    return boto3.resource(
        "dynamodb", region_name=REGION, endpoint_url=LOCALSTACK_URL,
        aws_access_key_id="test", aws_secret_access_key="test",
    )


@pytest.fixture(scope="session")
def token_table(localstack_ddb):
    """Create the token table via the bootstrap script."""
    sys.path.insert(0, str(os.path.join(os.path.dirname(__file__), "..", "..", "scripts")))
    from create_token_table import DEFAULT_TABLE_NAME, create_token_table

    create_token_table(localstack_ddb, suffix=TABLE_SUFFIX)
    return f"{DEFAULT_TABLE_NAME}{TABLE_SUFFIX}"
