# hltv_scraper/core/__init__.py
"""
Core module - settings plus the upstream client and storage publisher.

Only the settings are re-exported here; ``utils.logger`` reads them while
``core.client`` and ``core.storage`` import the logger, so those two are
imported from their own modules.
"""

from .config import config, Config

__all__ = [
    'config',
    'Config',
]
