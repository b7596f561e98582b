# hltv_scraper/core/config.py
import logging
import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables
BASE_DIR = Path(__file__).resolve().parent.parent.parent
load_dotenv(dotenv_path=BASE_DIR / ".env")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        logging.getLogger(__name__).warning(f"{name}={raw!r} is not an integer, using default {default}")
        return default


class Config:
    """Central settings for the HLTV match fetcher"""

    # 🔧 UPSTREAM (HLTV)
    HLTV_BASE_URL = os.getenv("HLTV_BASE_URL", "https://www.hltv.org").rstrip("/")
    REQUEST_TIMEOUT = _env_int("REQUEST_TIMEOUT", 30)
    REQUEST_HEADERS = {
        "User-Agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36",
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
        "Accept-Language": "en-US,en;q=0.9",
        "Referer": "https://www.hltv.org/",
    }

    # 🔧 THROTTLING
    REQUEST_DELAY_MS = _env_int("REQUEST_DELAY_MS", 500)

    # 🔧 MATCH WINDOW
    MATCH_WINDOW_HOURS = _env_int("MATCH_WINDOW_HOURS", 24)

    # 🔧 FILES
    LOGO_CACHE_PATH = Path(os.getenv("LOGO_CACHE_PATH", "teamLogoCache.json"))
    OUTPUT_PATH = Path(os.getenv("OUTPUT_PATH", "matches.json"))
    LOG_DIR = os.getenv("LOG_DIR", "logs")

    # 🔧 STORAGE (Supabase)
    SUPABASE_URL = os.getenv("SUPABASE_URL")
    SUPABASE_SERVICE_KEY = os.getenv("SUPABASE_SERVICE_KEY")
    STORAGE_BUCKET = os.getenv("STORAGE_BUCKET", "hltv")
    STORAGE_BLOB_NAME = os.getenv("STORAGE_BLOB_NAME", "matches.json")

    # 🔧 PLACEHOLDERS
    LOGO_NOT_AVAILABLE = "Logo not available"
    DATE_NOT_SPECIFIED = "Date not specified"
    UNKNOWN_EVENT = "Unknown Event"

    # 🔧 LOGGING CONFIGURATION
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_FORMAT = "[%(asctime)s] %(levelname)s [%(name)s] %(message)s"
    LOG_DATE_FORMAT = "%H:%M:%S"

    @classmethod
    def validate_config(cls, url=None, key=None):
        """Return the missing publish credentials (empty list when all set).

        ``url``/``key`` override the configured values when given.
        """
        errors = []

        if not (cls.SUPABASE_URL if url is None else url):
            errors.append("SUPABASE_URL not set")

        if not (cls.SUPABASE_SERVICE_KEY if key is None else key):
            errors.append("SUPABASE_SERVICE_KEY not set")

        return errors


# Export main config instance
config = Config()
