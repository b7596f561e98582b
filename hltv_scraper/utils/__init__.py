# hltv_scraper/utils/__init__.py
"""
Utils module - logging helpers
"""

from .logger import get_logger, RunLogger

__all__ = [
    'get_logger',
    'RunLogger',
]
