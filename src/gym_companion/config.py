"""Runtime configuration for gym-companion.

Settings come from the environment, after a project-level ``.env`` file
has been loaded with python-dotenv.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
load_dotenv(PROJECT_ROOT / ".env")

DEFAULT_GATEWAY_URL = "https://ai.gateway.lovable.dev/v1/chat/completions"
DEFAULT_MODEL = "google/gemini-2.5-flash"

LOG_FORMAT = "%(levelname)s | %(name)s | %(message)s"


@dataclass
class Settings:
    """Application settings."""

    gateway_url: str = DEFAULT_GATEWAY_URL
    gateway_api_key: str | None = None
    model: str = DEFAULT_MODEL
    gateway_timeout: float = 60.0
    data_dir: Path = PROJECT_ROOT / "data"
    redirect_delay_ms: int = 1500
    max_upload_bytes: int = 20 * 1024 * 1024
    log_level: str = "INFO"


def get_settings() -> Settings:
    """Build settings from the environment."""
    return Settings(
        gateway_url=os.getenv("AI_GATEWAY_URL", DEFAULT_GATEWAY_URL),
        gateway_api_key=os.getenv("AI_GATEWAY_API_KEY") or os.getenv("LOVABLE_API_KEY"),
        model=os.getenv("AI_GATEWAY_MODEL", DEFAULT_MODEL),
        gateway_timeout=float(os.getenv("AI_GATEWAY_TIMEOUT", "60")),
        data_dir=Path(os.getenv("GYM_COMPANION_DATA_DIR", str(PROJECT_ROOT / "data"))),
        redirect_delay_ms=int(os.getenv("REDIRECT_DELAY_MS", "1500")),
        max_upload_bytes=int(os.getenv("MAX_UPLOAD_BYTES", str(20 * 1024 * 1024))),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once for the CLI and the web server."""
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT)
