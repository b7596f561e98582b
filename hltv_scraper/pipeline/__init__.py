from .throttle import RateLimiter, ThrottledClient
from .logo_cache import LogoCache, LOGO_NOT_AVAILABLE
from .fetchers import fetch_upcoming
from .enrichers import enrich_match, slugify, build_match_link, is_within_window, format_countdown
from .store import write_document
from .orchestrator import run_pipeline, MatchOutcome, RunReport

__all__ = [
    "RateLimiter",
    "ThrottledClient",
    "LogoCache",
    "LOGO_NOT_AVAILABLE",
    "fetch_upcoming",
    "enrich_match",
    "slugify",
    "build_match_link",
    "is_within_window",
    "format_countdown",
    "write_document",
    "run_pipeline",
    "MatchOutcome",
    "RunReport",
]
