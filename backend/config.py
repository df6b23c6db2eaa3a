import logging
import os
from dotenv import load_dotenv

load_dotenv()


def env_float(name: str, default: float) -> float:
    try:
        return float(os.environ.get(name, default))
    except ValueError:
        return default


def log_level(name: str) -> int:
    level = getattr(logging, name.upper(), None)
    return level if isinstance(level, int) else logging.INFO


# Mock mode (for testing without API key)
MOCK_MODE = os.environ.get("MOCK_MODE", "false").lower() == "true"

# OpenAI
OPENAI_MODEL = os.environ.get("OPENAI_MODEL", "gpt-4o-mini")
ANALYSIS_TEMPERATURE = env_float("ANALYSIS_TEMPERATURE", 0.3)

# Reject results whose label disagrees with the score band
STRICT_LABEL_BANDING = os.environ.get("STRICT_LABEL_BANDING", "true").lower() == "true"

# Logging
LOG_LEVEL = log_level(os.environ.get("LOG_LEVEL", "INFO"))

# CORS
CORS_ORIGINS = [o.strip() for o in os.environ.get("CORS_ORIGINS", "*").split(",") if o.strip()]


def get_api_key():
    """Read the provider credential at call time so a missing key is a request error, not a startup crash."""
    key = os.environ.get("OPENAI_API_KEY", "").strip()
    return key or None
