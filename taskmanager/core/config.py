"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Backend-specific required fields (table names, SES
sender) are validated at load time.
"""

from functools import lru_cache

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from taskmanager.domain.enums import TaskPriority


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    All settings have defaults; validate_backends enforces the fields each
    storage/email backend needs.
    """

    # App
    app_name: str = "taskmanager"
    app_version: str = "1.0.0"
    debug: bool = False
    api_prefix: str = "/api/v1"
    # Front-end base URL used for links in notification emails (optional).
    app_url: str | None = None

    # Storage: "dynamodb" (AWS) or "memory" (local development and tests)
    storage_backend: str = "dynamodb"
    tasks_table: str = ""
    users_table: str = ""
    aws_region: str = "eu-west-1"
    dynamodb_endpoint_url: str | None = None
    # JSON file (list of user items) loaded into the in-memory directory at startup.
    memory_seed_users_path: str | None = None

    # Email: "ses" (Amazon SES) or "log" (log only, no delivery)
    email_backend: str = "ses"
    ses_sender_email: str = ""
    ses_configuration_set: str | None = None

    # Identity. Claims normally come from the API Gateway authorizer; a bearer
    # JWT signed with secret_key is accepted when no authorizer claims exist.
    secret_key: SecretStr = SecretStr("")
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60
    role_claim: str = "custom:role"

    # Tasks
    default_priority: TaskPriority = TaskPriority.NORMAL

    # CORS
    allowed_origins: str = "http://localhost:3000"

    # Request / middleware
    request_timeout_seconds: int = 29  # API Gateway integration limit
    request_id_header: str = "X-Request-ID"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_backends(self) -> "Settings":
        """Validate storage and email backend selection.

        - DynamoDB: TASKS_TABLE and USERS_TABLE required.
        - SES: SES_SENDER_EMAIL required.
        """
        self.storage_backend = self.storage_backend.lower()
        self.email_backend = self.email_backend.lower()
        if self.storage_backend == "dynamodb":
            if not self.tasks_table or not self.users_table:
                raise ValueError(
                    "TASKS_TABLE and USERS_TABLE are required when storage_backend is 'dynamodb'. "
                    "Set in environment or .env file."
                )
        elif self.storage_backend != "memory":
            raise ValueError(
                f"storage_backend must be 'dynamodb' or 'memory', got: {self.storage_backend!r}"
            )
        if self.email_backend == "ses":
            if not self.ses_sender_email:
                raise ValueError(
                    "SES_SENDER_EMAIL is required when email_backend is 'ses'. "
                    "Use a verified SES identity."
                )
        elif self.email_backend != "log":
            raise ValueError(
                f"email_backend must be 'ses' or 'log', got: {self.email_backend!r}"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
