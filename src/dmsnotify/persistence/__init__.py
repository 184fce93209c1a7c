"""Pluggable token store backends behind the ITokenStore protocol."""

from __future__ import annotations

from botocore.config import Config

from dmsnotify.core.config import AppSettings
from dmsnotify.persistence.dynamodb_backend import DynamoDBTokenStore


def create_token_store(settings: AppSettings | None = None) -> DynamoDBTokenStore:
    """Create the DynamoDB token store from application settings."""
    if settings is None:
        settings = AppSettings()

    return DynamoDBTokenStore(
        region=settings.dynamodb.region,
        endpoint_url=settings.dynamodb.endpoint_url,
        client_config=Config(retries={"mode": "standard"}),
    )
