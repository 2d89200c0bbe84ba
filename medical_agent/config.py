import logging
import os

from dotenv import load_dotenv

load_dotenv()

DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_TEMPERATURE = 0.6
DEFAULT_PORT = 3000


def get_api_key():
    gemini_key = os.getenv("GEMINI_API_KEY")
    google_key = os.getenv("GOOGLE_API_KEY")
    if gemini_key:
        return gemini_key
    if google_key:
        return google_key
    return None


def get_model_name() -> str:
    return os.getenv("LLM_MODEL", DEFAULT_MODEL)


def get_temperature() -> float:
    return float(os.getenv("LLM_TEMPERATURE", DEFAULT_TEMPERATURE))


def get_host() -> str:
    return os.getenv("HOST", "0.0.0.0")


def get_port() -> int:
    return int(os.getenv("PORT", DEFAULT_PORT))


def setup_logging(level=None) -> None:
    """Configure root logging once, honouring LOG_LEVEL."""
    level = level or os.getenv("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    logging.getLogger("medical_agent").setLevel(level)
