# pipeline package: fetch -> enrich -> emit
from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional, Union
from hltv_scraper.models import MatchResult
from hltv_scraper.utils.logger import get_logger
from .enrichers import enrich_match
from .fetchers import fetch_upcoming
from .logo_cache import LogoCache
from .store import write_document

logger = get_logger(__name__)

INCLUDED = "included"
FILTERED = "filtered"
FAILED = "failed"


@dataclass
class MatchOutcome:
    match_id: Any
    status: str
    result: Optional[MatchResult] = None
    reason: Optional[str] = None


@dataclass
class RunReport:
    output_path: Path
    outcomes: List[MatchOutcome] = field(default_factory=list)

    @property
    def results(self) -> List[MatchResult]:
        return [o.result for o in self.outcomes if o.status == INCLUDED and o.result is not None]

    def count(self, status: str) -> int:
        return sum(1 for o in self.outcomes if o.status == status)

    def stats(self) -> Dict[str, int]:
        return {
            "listed": len(self.outcomes),
            INCLUDED: self.count(INCLUDED),
            FILTERED: self.count(FILTERED),
            FAILED: self.count(FAILED),
        }


def process_match(client: Any, record, cache: LogoCache, now: datetime) -> MatchOutcome:
    """Detail fetch + enrichment for one match; any error becomes a ``failed`` outcome."""
    try:
        detail = client.get_match(record.id)
        result = enrich_match(record, detail, cache, client.get_team_logo, now)
    except Exception as ex:
        logger.error(f"[orchestrator] error while processing match id={record.id}: {ex}")
        return MatchOutcome(match_id=record.id, status=FAILED, reason=str(ex))
    if result is None:
        return MatchOutcome(match_id=record.id, status=FILTERED, reason="outside window")
    return MatchOutcome(match_id=record.id, status=INCLUDED, result=result)


def run_pipeline(
    client: Any,
    cache: LogoCache,
    output_path: Union[str, Path],
    now: Optional[datetime] = None,
) -> RunReport:
    """List upcoming matches, enrich each in listing order, write the document.

    ``client`` is expected to be a ``ThrottledClient``. A listing failure propagates
    and nothing is written.
    """
    now = now or datetime.now(timezone.utc)
    records = fetch_upcoming(client)

    report = RunReport(output_path=Path(output_path))
    for record in records:
        report.outcomes.append(process_match(client, record, cache, now))

    write_document(report.results, report.output_path)
    logger.info(f"[orchestrator] run finished: {report.stats()}")
    return report
