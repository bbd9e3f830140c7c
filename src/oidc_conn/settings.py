"""Application configuration loaded from environment variables.

Settings are read from variables with the ``OIDC_CONN_`` prefix, or from a
``.env`` file in the working directory.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Central configuration for the connection-details projector."""

    model_config = SettingsConfigDict(
        env_prefix="OIDC_CONN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Logging level
    LOG_LEVEL: str = "INFO"

    # Raise on non-string values for recognized attributes instead of
    # skipping them
    STRICT_ATTRIBUTE_TYPES: bool = False


settings = Settings()
