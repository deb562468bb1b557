"""
Settings for the shader backend.

Values come from the process environment, with backend/.env loaded through
python-dotenv first (real environment variables win). The Anthropic key may
also live in config/env.example at the repository root.
"""

import os
from pathlib import Path

from dotenv import dotenv_values, load_dotenv

ROOT_DIR = Path(__file__).resolve().parent.parent
ENV_PATH = Path(__file__).resolve().parent / ".env"
ENV_EXAMPLE_PATH = ROOT_DIR / "config" / "env.example"

API_KEY_VAR = "ANTHROPIC_API_KEY"

load_dotenv(ENV_PATH, override=False)

ANTHROPIC_MODEL = os.getenv("ANTHROPIC_MODEL", "claude-haiku-4-5-20251001")
MAX_OUTPUT_TOKENS = int(os.getenv("MAX_OUTPUT_TOKENS", "1500"))
TEMPERATURE = float(os.getenv("TEMPERATURE", "0.8"))

CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "4000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


class MissingApiKeyError(RuntimeError):
    pass


def get_api_key() -> str:
    """Return the Anthropic API key from the environment or config/env.example."""
    key = os.getenv(API_KEY_VAR, "").strip()
    if key:
        return key
    if ENV_EXAMPLE_PATH.exists():
        key = (dotenv_values(ENV_EXAMPLE_PATH).get(API_KEY_VAR) or "").strip()
        if key:
            return key
    raise MissingApiKeyError(
        f"Set {API_KEY_VAR} env var or add it to config/env.example"
    )
