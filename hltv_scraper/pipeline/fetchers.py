from __future__ import annotations
from typing import Any, List
from hltv_scraper.models import MatchRecord
from hltv_scraper.utils.logger import get_logger

logger = get_logger(__name__)

def fetch_upcoming(client: Any) -> List[MatchRecord]:
    """Fetch the full upcoming-match listing. Errors propagate: without a listing there is no run."""
    try:
        matches = list(client.list_matches())
    except Exception as e:
        logger.error(f"[fetch_upcoming] listing failed: {e}")
        raise
    logger.info(f"[fetch_upcoming] {len(matches)} upcoming matches")
    return matches
