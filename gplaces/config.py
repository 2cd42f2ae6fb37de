# gplaces/config.py
from dataclasses import dataclass
import os

from dotenv import load_dotenv

from .base_request import PLACES_BASE_URL
from .common import Language


@dataclass(frozen=True)
class Settings:
    api_key: str
    timeout_sec: int = 20
    language: Language = Language.ENGLISH

    # Google endpoints
    places_base_url: str = PLACES_BASE_URL

    # Autocomplete
    max_suggestions: int = 5

    # Rate limiting
    sleep_between_requests_sec: float = 0.15

    # Export paths
    data_processed_dir: str = "data/processed"


def load_settings() -> Settings:
    load_dotenv()
    key = os.getenv("GOOGLE_MAPS_API_KEY", "").strip()

    if not key:
        raise ValueError(
            "Missing GOOGLE_MAPS_API_KEY.\n"
            "Add it to a .env file locally or export it in your shell.\n"
            "Example (local): export GOOGLE_MAPS_API_KEY='YOUR_KEY'"
        )

    overrides = {}
    language = os.getenv("GOOGLE_PLACES_LANGUAGE", "").strip()
    if language:
        overrides["language"] = Language.from_code(language)

    timeout = os.getenv("GOOGLE_PLACES_TIMEOUT_SEC", "").strip()
    if timeout:
        overrides["timeout_sec"] = int(timeout)

    return Settings(api_key=key, **overrides)
