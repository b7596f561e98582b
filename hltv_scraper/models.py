# hltv_scraper/models.py
"""Plain data records passed between the client and the pipeline."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Team:
    """A participant as referenced by a match listing."""

    id: Optional[int]
    name: str


@dataclass(frozen=True)
class MatchRecord:
    """One upcoming match from the HLTV listing (read-only)."""

    id: int
    date: Optional[datetime] = None
    team1: Optional[Team] = None
    team2: Optional[Team] = None
    event_name: Optional[str] = None


@dataclass(frozen=True)
class MatchDetail:
    """The bits of the match page the pipeline needs."""

    match_id: int
    event_name: Optional[str] = None


@dataclass
class MatchResult:
    """Enriched match, serialized into ``matches.json``."""

    match_id: int
    date: str
    team1: str
    team1_logo: str
    team2: str
    team2_logo: str
    hours_until_match: str
    event: str
    match_link: str

    def to_dict(self) -> Dict[str, Any]:
        # key names and order are what downstream consumers read
        return {
            "matchId": self.match_id,
            "date": self.date,
            "team1": self.team1,
            "team1Logo": self.team1_logo,
            "team2": self.team2,
            "team2Logo": self.team2_logo,
            "hoursUntilMatch": self.hours_until_match,
            "event": self.event,
            "matchLink": self.match_link,
        }
