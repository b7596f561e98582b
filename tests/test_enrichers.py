"""
tests/test_enrichers.py

Purpose:
    Single-match enrichment: slugs, canonical link, 24h window, countdown
    string and logo resolution per participant.
"""

from __future__ import annotations

import re
from datetime import timedelta

import pytest

from hltv_scraper.core.config import config
from hltv_scraper.models import MatchDetail, MatchRecord, Team
from hltv_scraper.pipeline import (
    LOGO_NOT_AVAILABLE,
    build_match_link,
    enrich_match,
    format_countdown,
    is_within_window,
    slugify,
)
from hltv_scraper.pipeline.enrichers import format_date

SLUG_RE = re.compile(r"^[a-z0-9]+(-[a-z0-9]+)*$")


@pytest.mark.parametrize(
    "name, expected",
    [
        ("Foo Bar", "foo-bar"),
        ("Major Finals", "major-finals"),
        ("Natus Vincere", "natus-vincere"),
        ("G2 Esports", "g2-esports"),
        ("IEM Katowice 2026 - Play-In", "iem-katowice-2026-play-in"),
        ("  !!Team  Spirit?? ", "team-spirit"),
        ("Ninjas in Pyjamas", "ninjas-in-pyjamas"),
        ("MOUZ", "mouz"),
        ("Fnatic", "fnatic"),
        ("", "unknown"),
        (None, "unknown"),
        ("???", "unknown"),
        ("Heroíc", "hero-c"),
    ],
)
def test_slugify(name, expected):
    slug = slugify(name)
    assert slug == expected
    assert slug == "unknown" or SLUG_RE.match(slug)


def test_slugify_is_deterministic():
    assert slugify("Team Liquid") == slugify("Team Liquid") == "team-liquid"


def test_build_match_link():
    link = build_match_link(2376543, "foo-bar", "unknown", "major-finals")
    assert link == f"{config.HLTV_BASE_URL}/matches/2376543/foo-bar-vs-unknown-major-finals"


def test_window_bounds(now):
    assert is_within_window(None, now)
    assert is_within_window(now, now)
    assert is_within_window(now + timedelta(hours=24), now)
    assert is_within_window(now + timedelta(hours=5), now)
    assert not is_within_window(now - timedelta(seconds=1), now)
    assert not is_within_window(now + timedelta(hours=24, seconds=1), now)
    assert is_within_window(now + timedelta(hours=30), now, hours=48)


def test_countdown_without_date(now):
    assert format_countdown(None, now) == "N/A"


@pytest.mark.parametrize(
    "offset, expected",
    [
        (timedelta(hours=2, minutes=30), "2h : 30m"),
        (timedelta(minutes=5), "0h : 5m"),
        (timedelta(hours=23, minutes=59), "23h : 59m"),
        (timedelta(hours=1, seconds=45), "1h : 1m"),
        (timedelta(minutes=59, seconds=50), "0h : 60m"),
        (timedelta(0), "0h : 0m"),
    ],
)
def test_countdown_format(now, offset, expected):
    assert format_countdown(now + offset, now) == expected


@pytest.mark.parametrize("seconds", [0, 29, 31, 59 * 60 + 40, 3600 + 17, 5 * 3600 + 44 * 60 + 50, 86399])
def test_countdown_reconstructs_total_minutes(now, seconds):
    text = format_countdown(now + timedelta(seconds=seconds), now)
    match = re.fullmatch(r"(\d+)h : (\d+)m", text)
    assert match
    total = int(match.group(1)) * 60 + int(match.group(2))
    assert abs(total - seconds / 60.0) <= 1


def test_format_date(now):
    assert format_date(now + timedelta(hours=6, milliseconds=250)) == "2026-10-19T18:00:00.250Z"
    assert format_date(None) == "Date not specified"


def test_undated_match_with_missing_team2(cache, make_client, now):
    upstream, client = make_client(logos={5: "http://x/5.png"})
    record = MatchRecord(id=2376543, date=None, team1=Team(id=5, name="Foo Bar"), team2=None)
    detail = MatchDetail(match_id=2376543, event_name="Major Finals")

    result = enrich_match(record, detail, cache, client.get_team_logo, now)

    assert result is not None
    assert result.team1_logo == "http://x/5.png"
    assert result.team2_logo == LOGO_NOT_AVAILABLE
    assert result.team2 == "Team2 not specified"
    assert result.hours_until_match == "N/A"
    assert result.date == "Date not specified"
    assert result.match_link.endswith("/matches/2376543/foo-bar-vs-unknown-major-finals")
    assert upstream.team_calls() == [5]
    assert client.limiter.waits == 1


def test_team_without_id_gets_marker_without_fetch(cache, make_client, now):
    upstream, client = make_client()
    record = MatchRecord(id=1, date=now + timedelta(hours=1), team1=Team(id=None, name="TBD"), team2=Team(id=None, name="TBD"))

    result = enrich_match(record, MatchDetail(match_id=1, event_name="Cup"), cache, client.get_team_logo, now)

    assert result.team1_logo == LOGO_NOT_AVAILABLE
    assert result.team2_logo == LOGO_NOT_AVAILABLE
    assert upstream.team_calls() == []
    assert client.limiter.waits == 0


def test_out_of_window_match_returns_none_without_logo_fetch(cache, make_client, now):
    upstream, client = make_client(logos={5: "http://x/5.png"})
    record = MatchRecord(id=2, date=now + timedelta(hours=30), team1=Team(id=5, name="A"), team2=Team(id=6, name="B"))

    assert enrich_match(record, MatchDetail(match_id=2, event_name="Cup"), cache, client.get_team_logo, now) is None
    assert upstream.team_calls() == []


def test_event_name_fallbacks(cache, make_client, now):
    _, client = make_client()
    record = MatchRecord(id=3, date=None, event_name="Listing Event")

    from_listing = enrich_match(record, MatchDetail(match_id=3), cache, client.get_team_logo, now)
    unknown = enrich_match(MatchRecord(id=4), MatchDetail(match_id=4), cache, client.get_team_logo, now)

    assert from_listing.event == "Listing Event"
    assert unknown.event == "Unknown Event"
    assert unknown.match_link.endswith("/matches/4/unknown-vs-unknown-unknown-event")
    assert unknown.team1 == "Team1 not specified"


def test_dated_match_fields(cache, make_client, now):
    _, client = make_client(logos={1: "http://x/1.png", 2: None})
    record = MatchRecord(
        id=10,
        date=now + timedelta(hours=3, minutes=15),
        team1=Team(id=1, name="Vitality"),
        team2=Team(id=2, name="FaZe"),
    )

    result = enrich_match(record, MatchDetail(match_id=10, event_name="BLAST Premier"), cache, client.get_team_logo, now)

    assert result.to_dict() == {
        "matchId": 10,
        "date": "2026-10-19T15:15:00.000Z",
        "team1": "Vitality",
        "team1Logo": "http://x/1.png",
        "team2": "FaZe",
        "team2Logo": LOGO_NOT_AVAILABLE,
        "hoursUntilMatch": "3h : 15m",
        "event": "BLAST Premier",
        "matchLink": f"{config.HLTV_BASE_URL}/matches/10/vitality-vs-faze-blast-premier",
    }
