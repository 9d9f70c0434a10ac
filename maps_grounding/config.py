from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Gemini API ---
    GOOGLE_GEMINI_API_KEY: str = Field(
        default="",
        description="API key for the Gemini API (generateContent with Google Maps grounding).",
    )

    # --- Logging ---
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Minimum level for the stderr log sink.",
    )

    # --- Transport ---
    MCP_TRANSPORT: Literal["stdio", "http"] = Field(
        default="stdio",
        description="MCP transport to serve on.",
    )
    MCP_HTTP_HOST: str = Field(
        default="0.0.0.0",
        description="Bind host when MCP_TRANSPORT is http.",
    )
    MCP_HTTP_PORT: int = Field(
        default=8000,
        description="Bind port when MCP_TRANSPORT is http.",
    )

    # --- Observability ---
    AGENT_OBSERVABILITY_ENABLED: bool = Field(
        default=True,
        description="Enable OpenTelemetry spans around tool handlers.",
    )
    OTEL_SERVICE_NAME: str = Field(
        default="maps-grounding-mcp",
        description="Service name used for the tracer.",
    )


settings = Settings()
