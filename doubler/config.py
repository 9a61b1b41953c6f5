"""
Doubler API - Application Configuration
========================================

What:  Configuration loaded from environment variables (or a .env file)
       using Pydantic Settings.
How:   Settings validates types and ranges on construction. The application
       factory receives a Settings instance explicitly and keeps it on
       app.state.settings; nothing reads configuration from a module global.
Who:   Built by the entry points (doubler.main, doubler.__main__) and by tests.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have defaults suitable for local development. Variable names
    are case-insensitive (PORT and port both work).
    """

    # ── API Documentation ─────────────────────────────────────────────────
    # Rendered into the OpenAPI "info" block and the Swagger UI page title.
    api_title: str = Field(default="Basic Example")
    api_description: str = Field(default="This app showcases a trivial REST API.")
    api_version: str = Field(default="v1.2.3")

    # Marks POST /doubler/{param1} as deprecated in the OpenAPI document.
    doubler_deprecated: bool = Field(default=False)

    # ── Server ────────────────────────────────────────────────────────────
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000, ge=1024, le=65535)

    # What: Controls verbosity of application logging
    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    # ── Compression ───────────────────────────────────────────────────────
    # Responses smaller than this many bytes are sent uncompressed.
    gzip_minimum_size: int = Field(default=500, ge=0)

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }

    @property
    def docs_url(self) -> str:
        """Public URL of the Swagger UI, used in the startup log line."""
        host = "localhost" if self.host in ("0.0.0.0", "") else self.host
        return f"http://{host}:{self.port}/docs"


@lru_cache
def get_settings() -> Settings:
    """
    Default settings for the process entry points.

    Cached so uvicorn's module-level app and the CLI share one instance;
    tests build their own Settings and pass them to create_app().
    """
    return Settings()
