"""
Retrieval configuration.

The thresholds here were tuned empirically against the live source and are
not part of any documented contract; retune them against current pages.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from ..config import Settings, get_settings
from ..identifiers import LEGISLATION_BASE

logger = logging.getLogger(__name__)


@dataclass
class RetrievalConfig:
    """Configuration for document and provision retrieval."""
    base_url: str = LEGISLATION_BASE

    # Content extraction
    min_content_length: int = 1000  # characters of text a selector match must exceed
    content_selectors: tuple[str, ...] = (
        "#viewLegContents",
        "#content",
        ".LegContent",
        "article",
        "main",
        "body",
    )

    # Interstitial ("choose a version") detection
    interstitial_markers: tuple[str, ...] = (
        "Latest available",
        "Point in Time",
        "Original (As enacted)",
    )
    interstitial_max_size: int = 30000  # raw payload bytes; larger pages are real documents

    # Candidate list
    include_enacted_contents: bool = True

    # Search
    search_results_count: int = 50

    # Page furniture that means extraction picked up navigation instead of content
    leftover_chrome_markers: tuple[str, ...] = ("Skip to main content",)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "RetrievalConfig":
        settings = settings or get_settings()
        return cls(
            base_url=settings.base_url,
            min_content_length=settings.min_content_length,
            interstitial_max_size=settings.interstitial_max_size,
            include_enacted_contents=settings.include_enacted_contents,
            search_results_count=settings.search_results_count,
        )
