import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Load environment variables from .env file if it exists
load_dotenv()


class EventStoreConfig(BaseModel):
    """Configuration for the DynamoDB tables and the HTTP process."""

    aws_access_key_id: Optional[str] = Field(
        default_factory=lambda: os.getenv("AWS_ACCESS_KEY_ID"),
        description="AWS access key ID"
    )

    aws_secret_access_key: Optional[str] = Field(
        default_factory=lambda: os.getenv("AWS_SECRET_ACCESS_KEY"),
        description="AWS secret access key"
    )

    region_name: str = Field(
        default_factory=lambda: os.getenv("AWS_REGION", "us-west-1"),
        description="AWS region name"
    )

    endpoint_url: Optional[str] = Field(
        default_factory=lambda: os.getenv("DYNAMODB_ENDPOINT_URL"),
        description="DynamoDB endpoint URL (for local development)"
    )

    # Table configuration
    participant_table: str = Field(
        default_factory=lambda: os.getenv("PARTICIPANT_TABLE", "participants"),
        description="Table holding registered participants, keyed by email"
    )

    announcement_table: str = Field(
        default_factory=lambda: os.getenv("ANNOUNCE_TABLE", "announcements"),
        description="Table holding announcements, keyed by uuid"
    )

    schedule_table: str = Field(
        default_factory=lambda: os.getenv("SCHEDULE_TABLE", "schedules"),
        description="Table holding per-team schedule entries, keyed by uuid"
    )

    # HTTP settings
    host: str = Field(
        default_factory=lambda: os.getenv("HOST", "0.0.0.0"),
        description="Bind address for the HTTP API"
    )

    port: int = Field(
        default_factory=lambda: os.getenv("PORT", "3001"),
        validate_default=True,
        description="Port for the HTTP API"
    )

    # Connection settings
    max_pool_connections: int = Field(
        default=50,
        description="Maximum number of connections in the connection pool"
    )

    retries: int = Field(
        default=3,
        description="Number of retry attempts botocore makes for failed requests"
    )

    timeout_seconds: float = Field(
        default=30.0,
        description="Request timeout in seconds"
    )

    # Logging settings
    enable_debug_logging: bool = Field(
        default_factory=lambda: os.getenv("EVENT_BACKEND_DEBUG_LOGGING", "false").lower() == "true",
        description="Enable debug logging for DynamoDB operations"
    )

    @field_validator('region_name')
    @classmethod
    def validate_region(cls, v):
        """Validate AWS region name."""
        if not v:
            raise ValueError("AWS region name is required")
        return v

    @field_validator('participant_table', 'announcement_table', 'schedule_table')
    @classmethod
    def validate_table_name(cls, v):
        if not v or not v.strip():
            raise ValueError("Table name must not be empty")
        return v

    @field_validator('port')
    @classmethod
    def validate_port(cls, v):
        if not 1 <= v <= 65535:
            raise ValueError(f"Port must be between 1 and 65535, got {v}")
        return v

    def table_names(self) -> dict:
        """Return the configured table names keyed by resource type."""
        return {
            'participant': self.participant_table,
            'announcement': self.announcement_table,
            'schedule': self.schedule_table,
        }

    @classmethod
    def from_env(cls) -> 'EventStoreConfig':
        """Create configuration from environment variables.

        Returns:
            EventStoreConfig instance
        """
        return cls()

    @classmethod
    def for_local_development(cls) -> 'EventStoreConfig':
        """Create configuration for DynamoDB Local on port 8000.

        Returns:
            EventStoreConfig instance configured for local development
        """
        return cls(
            aws_access_key_id="local",
            aws_secret_access_key="local",
            region_name="us-west-1",
            endpoint_url="http://localhost:8000",
            enable_debug_logging=True
        )

    model_config = ConfigDict(
        validate_assignment=True,
    )
