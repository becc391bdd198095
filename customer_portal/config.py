"""
Customer Portal - Application Configuration
=============================================

What:  Process configuration loaded with Pydantic Settings.
How:   `Settings()` reads environment variables (or a .env file) once at
       process entry. The resulting object is handed to `create_app()`,
       stored on `app.state.settings` and injected into handlers with the
       `get_settings` dependency. Nothing else reads the environment.

Environment variables:
    PORT                TCP port to bind (default 3000; non-numeric -> 3000)
    APP_ENV / NODE_ENV  Free-text environment label (default "development")
    HOST                Bind address (default 0.0.0.0, all interfaces)
    STATIC_DIR          Directory for static assets (default "public")
    LOG_LEVEL           DEBUG, INFO, WARNING, ERROR or CRITICAL
"""

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings
from starlette.requests import Request

DEFAULT_PORT = 3000


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have defaults suitable for local development, so the
    service starts with an empty environment.
    """

    # ── Server ────────────────────────────────────────────────────────────
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=DEFAULT_PORT)

    # Display label only: surfaced in /api/health and the startup log,
    # never parsed or branched on.
    environment: str = Field(
        default="development",
        validation_alias=AliasChoices("APP_ENV", "NODE_ENV"),
    )

    # ── Static Assets ─────────────────────────────────────────────────────
    static_dir: str = Field(default="public")

    # ── Logging ───────────────────────────────────────────────────────────
    log_level: str = Field(default="INFO")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }

    @field_validator("port", mode="before")
    @classmethod
    def coerce_port(cls, v: object) -> int:
        """Unset, empty or non-numeric PORT values fall back to the default."""
        try:
            port = int(str(v).strip())
        except (TypeError, ValueError):
            return DEFAULT_PORT
        if not 0 < port < 65536:
            return DEFAULT_PORT
        return port

    @field_validator("environment", mode="before")
    @classmethod
    def default_empty_environment(cls, v: object) -> object:
        # An empty label behaves like an unset one.
        if v is None or v == "":
            return "development"
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper


def get_settings(request: Request) -> Settings:
    """FastAPI dependency returning the settings the app was created with."""
    return request.app.state.settings
