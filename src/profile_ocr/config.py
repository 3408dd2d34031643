from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Get the absolute path to the project root
PROJECT_ROOT = Path(__file__).parent.parent.parent
DEFAULT_LOG_DIR = str(PROJECT_ROOT / "logs")


class Settings(BaseSettings):
    """
    Centralized runtime configuration for the profile OCR service and dashboard.
    All defaults are sensible for dev-mode; ops override via ENV.
    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # --- Vision model ---
    openai_api_key: Optional[str] = Field(default=None)
    openai_model: str = Field(default="gpt-4o")
    max_output_tokens: int = Field(default=1000)

    # --- Extraction batch ---
    max_concurrent_requests: int = Field(default=5)
    request_timeout: float = Field(default=60.0)  # seconds, per image

    # --- API ---
    api_host: str = Field(default="0.0.0.0")
    api_port: int = Field(default=8000)

    # --- Dashboard ---
    ocr_api_url: str = Field(default="http://localhost:8000/api/ocr/process")
    dashboard_request_timeout: float = Field(default=300.0)
    demo_fallback: bool = Field(default=False)
    csv_quote_fields: bool = Field(default=False)

    # --- Logging ---
    log_level: str = Field(default="INFO")
    log_dir: str = Field(default=DEFAULT_LOG_DIR)


# Create a singleton instance
settings = Settings()
