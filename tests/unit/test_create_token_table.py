"""Tests for the token table bootstrap script."""

from __future__ import annotations

import sys
from pathlib import Path

import boto3
import pytest
from moto import mock_aws

# Make scripts/ importable
sys.path.insert(0, str(Path(__file__).resolve().parent.parent.parent / "scripts"))

from create_token_table import create_token_table  # noqa: E402


@pytest.fixture
def ddb():
    with mock_aws():
        yield boto3.resource("dynamodb", region_name="eu-west-2")


class TestCreateTokenTable:
    def test_creates_table_keyed_on_task_arn(self, ddb):
        assert create_token_table(ddb, suffix="-test") is True

        desc = ddb.meta.client.describe_table(TableName="dpr-step-function-tokens-test")["Table"]
        assert desc["KeySchema"] == [{"AttributeName": "replicationTaskArn", "KeyType": "HASH"}]

    def test_enables_ttl_on_expire_at(self, ddb):
        create_token_table(ddb, suffix="-test")

        ttl = ddb.meta.client.describe_time_to_live(TableName="dpr-step-function-tokens-test")
        assert ttl["TimeToLiveDescription"]["AttributeName"] == "expireAt"
        assert ttl["TimeToLiveDescription"]["TimeToLiveStatus"] == "ENABLED"

    def test_idempotent_skips_existing(self, ddb):
        create_token_table(ddb, suffix="-test")
        assert create_token_table(ddb, suffix="-test") is False
        assert ddb.meta.client.list_tables()["TableNames"] == ["dpr-step-function-tokens-test"]
