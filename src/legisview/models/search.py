"""
Search result model for feed normalization.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class SearchResult:
    """One normalized search hit. canonical_url is always the base document identifier."""
    title: str
    canonical_url: str
    snippet: str
    source_updated: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "canonical_url": self.canonical_url,
            "snippet": self.snippet,
            "source_updated": self.source_updated.isoformat() if self.source_updated else None,
        }
