# hltv_scraper/core/client.py
"""HTTP client for hltv.org: match listing, match page and team page.

Selectors target the classic server-rendered layout (the one the npm ``hltv``
package scrapes): ``/matches`` entries are ``.upcomingMatch`` /
``.liveMatch-container`` with ``team1``/``team2`` attributes, ``.matchTeamName``,
``.matchEventName`` and ``[data-unix]`` millisecond timestamps; match pages carry
``.timeAndEvent .event a``; team pages ``img.teamlogo``. If HLTV changes that
markup, ``list_matches`` returns nothing and ``get_match`` raises ``ScrapeError``.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import List, Optional
from urllib.parse import urljoin

import requests
from bs4 import BeautifulSoup, Tag

from hltv_scraper.core.config import config
from hltv_scraper.models import MatchDetail, MatchRecord, Team
from hltv_scraper.utils.logger import get_logger

logger = get_logger(__name__)


class ScrapeError(RuntimeError):
    """Raised when an HLTV page does not contain what we parse for."""


def _parse_int(value) -> Optional[int]:
    try:
        parsed = int(str(value).strip())
    except (TypeError, ValueError):
        return None
    return parsed if parsed > 0 else None


def _parse_unix_ms(value) -> Optional[datetime]:
    ms = _parse_int(value)
    if ms is None:
        return None
    return datetime.fromtimestamp(ms / 1000.0, tz=timezone.utc)


def _match_id_from_href(href: Optional[str]) -> Optional[int]:
    # /matches/2376543/team-a-vs-team-b-event
    if not href:
        return None
    parts = [p for p in href.split("/") if p]
    if len(parts) >= 2 and parts[0] == "matches":
        return _parse_int(parts[1])
    return None


def _text(node: Optional[Tag]) -> Optional[str]:
    if node is None:
        return None
    text = node.get_text(strip=True)
    return text or None


class HltvClient:
    """Thin requests/BeautifulSoup wrapper around the three HLTV pages we read."""

    def __init__(self, base_url: str = None, timeout: int = None, session: requests.Session = None):
        self.base_url = (base_url or config.HLTV_BASE_URL).rstrip("/")
        self.timeout = timeout or config.REQUEST_TIMEOUT
        self.session = session or requests.Session()
        self.session.headers.update(config.REQUEST_HEADERS)

    def _build_url(self, path: str) -> str:
        if path.startswith("http://") or path.startswith("https://"):
            return path
        return f"{self.base_url}/{path.lstrip('/')}"

    def fetch_html(self, path: str) -> BeautifulSoup:
        url = self._build_url(path)
        logger.debug(f"[fetch] {url}")
        response = self.session.get(url, timeout=self.timeout)
        response.raise_for_status()
        return BeautifulSoup(response.text, "html.parser")

    # ---------- match listing ----------
    def list_matches(self) -> List[MatchRecord]:
        soup = self.fetch_html("matches")
        containers = soup.select(".liveMatch-container, .upcomingMatch")
        if not containers:
            logger.warning("[list_matches] no match entries found, page layout may have changed")
        records: List[MatchRecord] = []
        for el in containers:
            record = self._parse_listing_entry(el)
            if record is None:
                continue
            records.append(record)
        logger.info(f"[list_matches] {len(records)} matches parsed from {len(containers)} entries")
        return records

    def _parse_listing_entry(self, el: Tag) -> Optional[MatchRecord]:
        link = el.select_one("a[href^='/matches/']")
        match_id = _match_id_from_href(link.get("href") if link else None)
        if match_id is None:
            logger.debug("[list_matches] entry without match link skipped")
            return None

        time_el = el.select_one("[data-unix]")
        date = _parse_unix_ms(time_el.get("data-unix")) if time_el else None
        if date is None:
            date = _parse_unix_ms(el.get("data-zonedgrouping-entry-unix"))

        names = [n.get_text(strip=True) for n in el.select(".matchTeamName")]
        team1 = self._team(el.get("team1"), names[0] if len(names) > 0 else None)
        team2 = self._team(el.get("team2"), names[1] if len(names) > 1 else None)

        event_name = _text(el.select_one(".matchEventName"))
        if event_name is None:
            logo = el.select_one(".matchEventLogo")
            event_name = (logo.get("title") or None) if logo else None

        return MatchRecord(id=match_id, date=date, team1=team1, team2=team2, event_name=event_name)

    @staticmethod
    def _team(raw_id, name: Optional[str]) -> Optional[Team]:
        team_id = _parse_int(raw_id)
        if team_id is None and not name:
            return None
        return Team(id=team_id, name=name or "")

    # ---------- match page ----------
    def get_match(self, match_id: int) -> MatchDetail:
        soup = self.fetch_html(f"matches/{match_id}/_")
        if soup.select_one(".match-page, .timeAndEvent") is None:
            raise ScrapeError(f"match page {match_id} has no match content")
        event_name = _text(soup.select_one(".timeAndEvent .event a")) or _text(soup.select_one(".event a"))
        return MatchDetail(match_id=match_id, event_name=event_name)

    # ---------- team page ----------
    def get_team_logo(self, team_id: int) -> Optional[str]:
        soup = self.fetch_html(f"team/{team_id}/_")
        img = soup.select_one(".profile-team-logo-container img.teamlogo") or soup.select_one("img.teamlogo")
        src = img.get("src") if img else None
        if not src:
            return None
        return urljoin(self.base_url + "/", src)

    def close(self):
        self.session.close()
