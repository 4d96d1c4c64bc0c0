"""structvalidate configuration management."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

# Metadata key holding a field's directive string
TAG_KEY = "validate"

# Reserved directive name that validates a nested record
STRUCT_TOKEN = "struct"


class Settings(BaseSettings):
    """
    Validation settings.

    Only log_undefined_validators is taken from the environment by a
    Validator built without explicit settings. tag_key and struct_token
    apply only when a Settings object is passed to Validator directly.
    """

    model_config = SettingsConfigDict(
        env_prefix="STRUCTVALIDATE_",
        extra="ignore",
    )

    tag_key: str = TAG_KEY
    struct_token: str = STRUCT_TOKEN

    # Warn when a directive names a validator missing from the registry
    log_undefined_validators: bool = True


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
