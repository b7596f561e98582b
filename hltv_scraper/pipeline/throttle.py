from __future__ import annotations
import time
from typing import Any, Callable, List, Optional
from hltv_scraper.core.config import config
from hltv_scraper.models import MatchDetail, MatchRecord
from hltv_scraper.utils.logger import get_logger

logger = get_logger(__name__)


class RateLimiter:
    """Fixed post-call pause. No jitter, no queue; one caller at a time."""

    def __init__(self, delay_ms: Optional[int] = None, sleep: Callable[[float], Any] = time.sleep):
        self.delay_ms = config.REQUEST_DELAY_MS if delay_ms is None else delay_ms
        self._sleep = sleep
        self.waits = 0

    def wait(self, duration_ms: Optional[int] = None) -> None:
        ms = self.delay_ms if duration_ms is None else duration_ms
        self.waits += 1
        if ms > 0:
            self._sleep(ms / 1000.0)


class ThrottledClient:
    """Single call site for upstream requests; every call is followed by ``limiter.wait()``.

    Logo lookups served from the cache never reach this class, so they are never delayed.
    """

    def __init__(self, client: Any, limiter: RateLimiter):
        self.client = client
        self.limiter = limiter

    def _call(self, label: str, fn: Callable[..., Any], *args):
        try:
            return fn(*args)
        finally:
            logger.debug(f"[throttle] {label} -> wait {self.limiter.delay_ms}ms")
            self.limiter.wait()

    def list_matches(self) -> List[MatchRecord]:
        return self._call("list_matches", self.client.list_matches)

    def get_match(self, match_id: int) -> MatchDetail:
        return self._call(f"get_match {match_id}", self.client.get_match, match_id)

    def get_team_logo(self, team_id: int) -> Optional[str]:
        return self._call(f"get_team_logo {team_id}", self.client.get_team_logo, team_id)
