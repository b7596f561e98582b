from __future__ import annotations
import json
from pathlib import Path
from typing import Callable, Dict, Optional, Tuple, Union
from hltv_scraper.core.config import config
from hltv_scraper.utils.logger import get_logger

logger = get_logger(__name__)

LOGO_NOT_AVAILABLE = config.LOGO_NOT_AVAILABLE


class LogoCache:
    """Persistent team id -> logo URL map backed by one JSON file.

    Every new entry rewrites the whole file right away. A cached
    ``LOGO_NOT_AVAILABLE`` is a permanent answer and is never re-fetched.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self._entries: Dict[int, str] = {}
        self._load()

    def _load(self) -> None:
        if not self.path.exists() or self.path.stat().st_size == 0:
            logger.info(f"[logo_cache] initializing empty cache at {self.path}")
            try:
                self._flush()
            except OSError as e:
                logger.error(f"[logo_cache] cannot create {self.path}: {e}")
            return
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.error(f"[logo_cache] error reading or parsing {self.path}: {e}")
            return
        if not isinstance(raw, dict):
            logger.error(f"[logo_cache] {self.path} does not hold a JSON object, starting empty")
            return
        for key, value in raw.items():
            try:
                team_id = int(key)
            except (TypeError, ValueError):
                logger.warning(f"[logo_cache] ignoring non-numeric key {key!r}")
                continue
            if not isinstance(value, str) or not value:
                # treated as a miss, re-fetched on next lookup
                logger.warning(f"[logo_cache] ignoring invalid logo {value!r} for team {key}")
                continue
            self._entries[team_id] = value
        logger.info(f"[logo_cache] loaded {len(self._entries)} cached logos")

    def _flush(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = {str(k): v for k, v in self._entries.items()}
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2, ensure_ascii=False)

    def __contains__(self, team_id: int) -> bool:
        return team_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, team_id: int) -> Optional[str]:
        return self._entries.get(team_id)

    def put(self, team_id: int, url: str) -> None:
        self._entries[team_id] = url
        self._flush()

    def resolve(self, team_id: int, fetcher: Callable[[int], Optional[str]]) -> Tuple[str, bool]:
        """Read-through lookup. Returns ``(url, was_cached)``; fetch failures become the sentinel."""
        cached = self.get(team_id)
        if cached is not None:
            logger.info(f"[logo_cache] using cached logo for team {team_id}")
            return cached, True

        try:
            url = fetcher(team_id)
        except Exception as e:
            logger.error(f"[logo_cache] failed to fetch logo for team {team_id}: {e}")
            url = LOGO_NOT_AVAILABLE
        if not url:
            logger.warning(f"[logo_cache] logo is undefined for team {team_id}")
            url = LOGO_NOT_AVAILABLE

        try:
            self.put(team_id, url)
        except OSError as e:
            # entry stays in memory for this run
            logger.error(f"[logo_cache] cannot persist logo for team {team_id} to {self.path}: {e}")
        return url, False
