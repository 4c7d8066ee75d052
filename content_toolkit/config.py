"""Application configuration from environment."""
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Project root (parent of content_toolkit/); .env is loaded from here so it works regardless of CWD
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Gemini
    gemini_api_key: str = ""
    # Optional endpoint returning {"apiKey": "..."} when no key is set locally
    key_endpoint_url: str = ""
    gemini_text_model: str = "gemini-2.5-flash"
    gemini_vision_model: str = "gemini-2.5-flash"
    gemini_image_model: str = "imagen-4.0-generate-001"

    # Retry policy for every model request
    retry_attempts: int = 3
    retry_base_delay_ms: int = 2000

    # Link verification (relay takes the target URL as an encoded query string)
    link_probe_proxy: str = "https://corsproxy.io/?"
    link_probe_timeout: float = 5.0
    max_verified_links: int = 4

    # Pause between analysis stages so progress messages stay readable
    stage_pause_ms: int = 500

    # App
    log_level: str = "INFO"
    billing_help_url: str = "https://ai.google.dev/gemini-api/docs/billing"


settings = Settings()
