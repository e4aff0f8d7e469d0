"""
Data models for the legislation engine.

This package contains all data models organized by domain:
- legislation: TOC tree, outline metadata, provision content and amendment notes
- search: Search result models
"""

from .legislation import (
    TOCNode,
    Outline,
    OutlineMetadata,
    AmendmentKind,
    AmendmentNote,
    ProvisionContent,
    iter_toc,
)

from .search import SearchResult

__all__ = [
    # Legislation models
    "TOCNode",
    "Outline",
    "OutlineMetadata",
    "AmendmentKind",
    "AmendmentNote",
    "ProvisionContent",
    "iter_toc",
    # Search models
    "SearchResult",
]
