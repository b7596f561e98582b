from __future__ import annotations
import json
from pathlib import Path
from typing import Iterable, Union
from hltv_scraper.models import MatchResult
from hltv_scraper.utils.logger import get_logger

logger = get_logger(__name__)

def write_document(results: Iterable[MatchResult], path: Union[str, Path]) -> Path:
    """Overwrite ``path`` with the JSON array of results (an empty run still writes ``[]``)."""
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    rows = [r.to_dict() for r in results]
    with open(out, "w", encoding="utf-8") as f:
        json.dump(rows, f, indent=2, ensure_ascii=False)
    logger.info(f"[store] wrote {len(rows)} matches to {out}")
    return out
