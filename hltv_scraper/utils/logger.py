# hltv_scraper/utils/logger.py
import logging
import sys
from pathlib import Path
from datetime import datetime
from typing import Optional

from hltv_scraper.core.config import config

# Basic formatting setup
logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO),
    format=config.LOG_FORMAT,
    datefmt=config.LOG_DATE_FORMAT,
    stream=sys.stdout
)

def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module"""
    return logging.getLogger(name)

class RunLogger:
    """Central run logger with a daily file output"""

    def __init__(self, log_dir: str = "logs"):
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)

        log_file = self.log_dir / f"hltv_{datetime.now().strftime('%Y%m%d')}.log"

        self.file_handler = logging.FileHandler(log_file, encoding='utf-8')
        self.file_handler.setLevel(logging.INFO)
        self.file_handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        ))

        # Add file handler to root logger
        logging.getLogger().addHandler(self.file_handler)

    def log_run_start(self):
        """Log the start of a fetch run"""
        logger = get_logger("hltv_scraper.main")
        logger.info("=" * 50)
        logger.info("🚀 HLTV FETCH RUN STARTED")
        logger.info(f"Time: {datetime.now().isoformat()}")
        logger.info("=" * 50)

    def log_run_end(self, success: bool, duration: float, stats: Optional[dict] = None):
        """Log the end of a fetch run"""
        logger = get_logger("hltv_scraper.main")
        logger.info("=" * 50)

        if success:
            logger.info("✅ HLTV FETCH RUN COMPLETED")
        else:
            logger.info("❌ HLTV FETCH RUN FAILED")

        logger.info(f"Duration: {duration:.2f}s")

        if stats:
            logger.info(f"Stats: {stats}")

        logger.info("=" * 50)

    def close(self):
        logging.getLogger().removeHandler(self.file_handler)
        self.file_handler.close()
