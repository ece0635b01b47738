"""
Connectors for live follower sources.

Connectors deliver UserRecord lists that substitute directly for parsed
CSV exports.
"""

from crosslist.connectors.instagram import InstagramListType, InstagramProfile, InstagramScraper

__all__ = ["InstagramListType", "InstagramProfile", "InstagramScraper"]
