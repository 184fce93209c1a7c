"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class DynamoDBConfig(BaseSettings):
    """DynamoDB token table configuration."""

    model_config = {"env_prefix": "DMSNOTIFY_DYNAMO_"}

    table_name: str = "dpr-step-function-tokens"
    table_suffix: str = ""  # "-dev", "-uat", or "" for prod
    key_attribute: str = "replicationTaskArn"
    region: str = "eu-west-2"
    endpoint_url: str | None = None  # LocalStack override

    @property
    def full_table_name(self) -> str:
        return f"{self.table_name}{self.table_suffix}"


class StepFunctionsConfig(BaseSettings):
    """Step Functions callback configuration."""

    model_config = {"env_prefix": "DMSNOTIFY_SFN_"}

    region: str = "eu-west-2"
    endpoint_url: str | None = None  # LocalStack override
    success_output: str = "{}"


class TokenConfig(BaseSettings):
    """Callback token registration defaults."""

    model_config = {"env_prefix": "DMSNOTIFY_TOKEN_"}

    default_expiry_days: int = 5


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "DMSNOTIFY_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"

    dynamodb: DynamoDBConfig = Field(default_factory=DynamoDBConfig)
    stepfunctions: StepFunctionsConfig = Field(default_factory=StepFunctionsConfig)
    token: TokenConfig = Field(default_factory=TokenConfig)
