import logging
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration settings for the SNS to SQS forwarder"""

    # Application settings
    service_name: str = "sns-forwarder"
    environment: str = "dev"
    log_level: str = "INFO"

    # SQS settings
    # SQS_REGION rather than AWS_REGION: the Lambda runtime always sets the latter
    sqs_region: str = "eu-west-2"
    sqs_endpoint_url: Optional[str] = None  # e.g. http://localhost:9324 for ElasticMQ

    # Destination queue
    queue_url: str = "https://sqs.eu-west-2.amazonaws.com/535002890543/RealWorlddemoQueue"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level


# Create settings instance
settings = Settings()
