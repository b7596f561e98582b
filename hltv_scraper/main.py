# hltv_scraper/main.py
from __future__ import annotations
import time

from hltv_scraper.core.config import config
from hltv_scraper.core.client import HltvClient
from hltv_scraper.core.storage import Publisher
from hltv_scraper.pipeline import LogoCache, RateLimiter, ThrottledClient, run_pipeline
from hltv_scraper.utils.logger import RunLogger, get_logger

logger = get_logger(__name__)


def main() -> int:
    """Run one fetch -> enrich -> write -> publish cycle. Returns the process exit code."""
    run_logger = RunLogger(config.LOG_DIR)
    run_logger.log_run_start()
    start = time.time()

    hltv = None
    try:
        try:
            cache = LogoCache(config.LOGO_CACHE_PATH)
            hltv = HltvClient()
            client = ThrottledClient(hltv, RateLimiter(config.REQUEST_DELAY_MS))
            report = run_pipeline(client, cache, config.OUTPUT_PATH)
        except Exception as e:
            logger.error(f"main | run failed: {e}")
            run_logger.log_run_end(False, time.time() - start)
            return 1
        finally:
            if hltv is not None:
                hltv.close()

        published = Publisher().publish(report.output_path)
        stats = dict(report.stats(), published=published)
        run_logger.log_run_end(True, time.time() - start, stats)
        return 0
    finally:
        run_logger.close()


if __name__ == "__main__":
    raise SystemExit(main())
