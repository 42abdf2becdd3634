"""Configuration loaded from environment variables."""

import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env: try package dir then project root
_base = Path(__file__).resolve().parent
for _env_path in (_base / ".env", _base.parent / ".env"):
    if load_dotenv(_env_path):
        break
load_dotenv()  # also allow process env


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


# Inference backend – an empty key selects the demo path
OPENAI_API_KEY: str = os.getenv("OPENAI_API_KEY", "")
OPENAI_BASE_URL: str = os.getenv("OPENAI_BASE_URL", "")
MODEL_NAME: str = os.getenv("MODEL_NAME", "gpt-4o-mini")
INFERENCE_TIMEOUT_SECONDS: float = float(os.getenv("INFERENCE_TIMEOUT_SECONDS", "60"))
INFERENCE_MAX_TOKENS: int = int(os.getenv("INFERENCE_MAX_TOKENS", "4096"))
INFERENCE_TEMPERATURE: float = float(os.getenv("INFERENCE_TEMPERATURE", "0.1"))
# Treat a failed live call like a missing credential and return the demo record
INFERENCE_DEGRADE_TO_DEMO: bool = _env_bool("INFERENCE_DEGRADE_TO_DEMO")

# HTTP / fetch settings
FETCH_TIMEOUT_SECONDS: float = float(os.getenv("FETCH_TIMEOUT_SECONDS", "15"))
FETCH_MAX_BYTES: int = int(os.getenv("FETCH_MAX_BYTES", str(5 * 1024 * 1024)))
BROWSER_HEADERS: dict = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    ),
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "ja,en;q=0.9",
}

# Sanitized text limits
MIN_CONTENT_CHARS: int = 100
POSITION_MAX_CHARS: int = int(os.getenv("POSITION_MAX_CHARS", "8000"))
COMPETITOR_MAX_CHARS: int = int(os.getenv("COMPETITOR_MAX_CHARS", "10000"))

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
