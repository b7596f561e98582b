from __future__ import annotations
import math
import re
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional, Tuple
from hltv_scraper.core.config import config
from hltv_scraper.models import MatchDetail, MatchRecord, MatchResult, Team
from hltv_scraper.pipeline.logo_cache import LOGO_NOT_AVAILABLE, LogoCache
from hltv_scraper.utils.logger import get_logger

logger = get_logger(__name__)

_NON_SLUG = re.compile(r"[^a-z0-9]+")

# Single-match enrichment: naming, link, window check, logos, countdown.


def slugify(name: Optional[str]) -> str:
    """Lowercase, collapse every non ``[a-z0-9]`` run into one hyphen; ``unknown`` when empty."""
    if not name:
        return "unknown"
    slug = _NON_SLUG.sub("-", name.lower()).strip("-")
    return slug or "unknown"


def build_match_link(match_id: int, team1_slug: str, team2_slug: str, event_slug: str) -> str:
    return f"{config.HLTV_BASE_URL}/matches/{match_id}/{team1_slug}-vs-{team2_slug}-{event_slug}"


def is_within_window(date: Optional[datetime], now: datetime, hours: Optional[int] = None) -> bool:
    # undated matches (live / TBA) are always kept
    if date is None:
        return True
    window = timedelta(hours=config.MATCH_WINDOW_HOURS if hours is None else hours)
    return now <= date <= now + window


def format_countdown(date: Optional[datetime], now: datetime) -> str:
    if date is None:
        return "N/A"
    diff_hours = (date - now).total_seconds() / 3600.0
    whole_hours = math.floor(diff_hours)
    # half-up, not banker's rounding
    minutes = math.floor((diff_hours - whole_hours) * 60 + 0.5)
    return f"{whole_hours}h : {minutes}m"


def format_date(date: Optional[datetime]) -> str:
    """ISO-8601 UTC with milliseconds and a ``Z`` suffix."""
    if date is None:
        return config.DATE_NOT_SPECIFIED
    utc = date.astimezone(timezone.utc)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"


def resolve_team_logo(team: Optional[Team], cache: LogoCache, fetch_logo: Callable[[int], Optional[str]]) -> Tuple[str, bool]:
    if team is None or team.id is None:
        return LOGO_NOT_AVAILABLE, False
    return cache.resolve(team.id, fetch_logo)


def enrich_match(
    record: MatchRecord,
    detail: Optional[MatchDetail],
    cache: LogoCache,
    fetch_logo: Callable[[int], Optional[str]],
    now: datetime,
) -> Optional[MatchResult]:
    """Build the ``MatchResult`` for one listed match, or ``None`` when it is outside the window.

    Logos are only looked up for matches that pass the window check, so filtered
    matches cost no extra requests.
    """
    event_name = (detail.event_name if detail else None) or record.event_name or config.UNKNOWN_EVENT

    team1_slug = slugify(record.team1.name) if record.team1 else "unknown"
    team2_slug = slugify(record.team2.name) if record.team2 else "unknown"
    event_slug = slugify(event_name)
    match_link = build_match_link(record.id, team1_slug, team2_slug, event_slug)

    if not is_within_window(record.date, now):
        logger.debug(f"[enrich_match] {record.id} outside window ({record.date})")
        return None

    team1_logo, _ = resolve_team_logo(record.team1, cache, fetch_logo)
    team2_logo, _ = resolve_team_logo(record.team2, cache, fetch_logo)

    return MatchResult(
        match_id=record.id,
        date=format_date(record.date),
        team1=record.team1.name if record.team1 else "Team1 not specified",
        team1_logo=team1_logo,
        team2=record.team2.name if record.team2 else "Team2 not specified",
        team2_logo=team2_logo,
        hours_until_match=format_countdown(record.date, now),
        event=event_name,
        match_link=match_link,
    )
