"""Relay configuration with environment variable loading.

Pydantic-based configuration for the Gemini call and the knowledge directory.
The API key may be empty here; its absence is reported per request so the
endpoint can answer with a configuration error instead of failing at startup.
"""

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# Load environment variables from .env file
load_dotenv()

_DEFAULT_KNOWLEDGE_DIR = Path(__file__).resolve().parent.parent.parent / "data" / "knowledge"


class RelayConfig(BaseModel):
    """Configuration for the query relay.

    Attributes:
        api_key: Gemini API key, sent as the ``key`` query parameter.
        model_name: Gemini model identifier.
        base_url: Gemini REST base URL.
        temperature: Sampling temperature (kept low to stay on the documents).
        max_output_tokens: Upper bound on the generated answer length.
        timeout: Seconds to wait for the Gemini API.
        knowledge_dir: Directory holding the knowledge documents.
        system_prompt_marker: Filename substring marking the system prompt document.
        knowledge_suffix: Only files with this suffix are read.
    """

    api_key: str = Field(
        default_factory=lambda: os.getenv("GEMINI_API_KEY", ""),
        description="API key for the Gemini API",
    )
    model_name: str = Field(
        default_factory=lambda: os.getenv("GEMINI_MODEL", "gemini-3-flash-preview"),
        description="Model to use",
    )
    base_url: str = Field(
        default_factory=lambda: os.getenv(
            "GEMINI_BASE_URL", "https://generativelanguage.googleapis.com/v1beta"
        ),
        description="Gemini REST API base URL",
    )
    temperature: float = Field(
        default=0.1,
        ge=0.0,
        le=2.0,
        description="Sampling temperature for response generation",
    )
    max_output_tokens: int = Field(
        default=4096,
        ge=1,
        le=65536,
        description="Maximum tokens in generated response",
    )
    timeout: float = Field(
        default_factory=lambda: float(os.getenv("GEMINI_TIMEOUT", "120")),
        gt=0,
        description="Request timeout in seconds",
    )
    knowledge_dir: Path = Field(
        default_factory=lambda: Path(os.getenv("KNOWLEDGE_DIR", str(_DEFAULT_KNOWLEDGE_DIR))),
        description="Directory of knowledge documents",
    )
    system_prompt_marker: str = Field(default="System_Prompt", min_length=1)
    knowledge_suffix: str = Field(default=".md")

    @field_validator("api_key")
    @classmethod
    def strip_api_key(cls, v: str) -> str:
        """Strip surrounding whitespace so a blank key counts as missing."""
        return v.strip()

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")


def get_relay_config() -> RelayConfig:
    """Create relay configuration from environment.

    Returns:
        Configured RelayConfig instance.
    """
    return RelayConfig()
