"""
tests/conftest.py

Purpose:
    Shared fakes for the HLTV pipeline tests: an in-memory upstream client and
    a rate limiter whose sleep only records the requested pauses.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Dict, List, Optional

import pytest

from hltv_scraper.models import MatchDetail, MatchRecord
from hltv_scraper.pipeline import LogoCache, RateLimiter, ThrottledClient


class FakeHltv:
    def __init__(
        self,
        records: Optional[List[MatchRecord]] = None,
        events: Optional[Dict[int, str]] = None,
        logos: Optional[Dict[int, Optional[str]]] = None,
        failing_matches: tuple = (),
        failing_teams: tuple = (),
        list_error: Optional[Exception] = None,
    ):
        self.records = list(records or [])
        self.events = dict(events or {})
        self.logos = dict(logos or {})
        self.failing_matches = set(failing_matches)
        self.failing_teams = set(failing_teams)
        self.list_error = list_error
        self.calls: List[tuple] = []

    def list_matches(self) -> List[MatchRecord]:
        self.calls.append(("list_matches",))
        if self.list_error is not None:
            raise self.list_error
        return list(self.records)

    def get_match(self, match_id: int) -> MatchDetail:
        self.calls.append(("get_match", match_id))
        if match_id in self.failing_matches:
            raise RuntimeError(f"match {match_id} unavailable")
        return MatchDetail(match_id=match_id, event_name=self.events.get(match_id))

    def get_team_logo(self, team_id: int) -> Optional[str]:
        self.calls.append(("get_team_logo", team_id))
        if team_id in self.failing_teams:
            raise RuntimeError(f"team {team_id} unavailable")
        return self.logos.get(team_id)

    def team_calls(self) -> List[int]:
        return [c[1] for c in self.calls if c[0] == "get_team_logo"]


class SleepRecorder:
    def __init__(self):
        self.pauses: List[float] = []

    def __call__(self, seconds: float) -> None:
        self.pauses.append(seconds)


@pytest.fixture
def now() -> datetime:
    return datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def sleeper() -> SleepRecorder:
    return SleepRecorder()


@pytest.fixture
def limiter(sleeper) -> RateLimiter:
    return RateLimiter(delay_ms=500, sleep=sleeper)


@pytest.fixture
def cache(tmp_path) -> LogoCache:
    return LogoCache(tmp_path / "teamLogoCache.json")


@pytest.fixture
def make_client(limiter):
    def _make(**kwargs):
        upstream = FakeHltv(**kwargs)
        return upstream, ThrottledClient(upstream, limiter)

    return _make
