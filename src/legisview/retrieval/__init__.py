"""
Retrieval components that drive the fetch capability.

This package contains:
- config: RetrievalConfig thresholds
- search: Search feed queries
- content: Content Retriever (candidate strategy loop)
- provisions: Provision fetch and processing
- status: Status Classifier
- session: DocumentSession orchestrating a document view
"""

from .config import RetrievalConfig
from .search import search, browse_by_type, recent
from .content import retrieve_content, is_interstitial
from .provisions import retrieve_provision
from .status import classify_status, status_badge, STATUS_BADGES
from .session import DocumentSession, OpenedDocument

__all__ = [
    "RetrievalConfig",
    # Search
    "search",
    "browse_by_type",
    "recent",
    # Content
    "retrieve_content",
    "is_interstitial",
    # Provisions
    "retrieve_provision",
    # Status
    "classify_status",
    "status_badge",
    "STATUS_BADGES",
    # Session
    "DocumentSession",
    "OpenedDocument",
]
