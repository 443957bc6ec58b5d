"""Client configuration with environment variable loading.

Pydantic-based configuration for talking to the knowledge service and for
serving the assistant UI.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Load environment variables from .env file
load_dotenv()

DEFAULT_API_BASE_URL = "http://localhost:3000"


class ClientConfig(BaseModel):
    """Configuration for the knowledge service client and UI server.

    Attributes:
        api_base_url: Base URL serving the /embed and /ask endpoints.
        request_timeout: Seconds before an outstanding request is abandoned.
        ui_host: Interface the NiceGUI server binds to.
        ui_port: Port the NiceGUI server listens on.
    """

    # Environment values arrive as defaults; validate them like explicit ones.
    model_config = ConfigDict(validate_default=True)

    api_base_url: str = Field(
        default_factory=lambda: os.getenv("RAG_API_BASE_URL", DEFAULT_API_BASE_URL),
        description="Base URL of the knowledge service",
    )
    request_timeout: float = Field(
        default_factory=lambda: float(os.getenv("RAG_REQUEST_TIMEOUT", "120")),
        gt=0.0,
        le=600.0,
        description="Per-request timeout in seconds",
    )
    ui_host: str = Field(
        default_factory=lambda: os.getenv("UI_HOST", "0.0.0.0"),
        description="Host for the assistant UI",
    )
    ui_port: int = Field(
        default_factory=lambda: int(os.getenv("UI_PORT", "8080")),
        ge=1,
        le=65535,
        description="Port for the assistant UI",
    )

    @field_validator("api_base_url")
    @classmethod
    def validate_api_base_url(cls, v: str) -> str:
        """Require an http(s) URL and drop any trailing slash."""
        v = v.strip()
        if not v:
            raise ValueError("API base URL required. Set RAG_API_BASE_URL in .env")
        if not v.startswith(("http://", "https://")):
            raise ValueError("API base URL must start with http:// or https://")
        return v.rstrip("/")


def get_client_config() -> ClientConfig:
    """Create client configuration from environment.

    Returns:
        Configured ClientConfig instance.

    Raises:
        ValueError: If an environment value is invalid.
    """
    return ClientConfig()
