"""Fetch upcoming HLTV matches, attach team logos and publish them as ``matches.json``."""

__version__ = "0.1.0"
