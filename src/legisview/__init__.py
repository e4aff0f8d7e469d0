"""
legisview - UK Legislation Acquisition & Structuring Engine

Turns the legislation site's search feeds, outline XML, provision fragments
and HTML pages into a stable document model for a research viewer.

Packages:
    - models: Search results, TOC tree, provision content and amendment notes
    - parsers: Feed normalizer, markup sanitizer, TOC builder, provision transforms
    - retrieval: Content retriever, provision retrieval, status classifier, document session
"""

__version__ = "1.0.0"

# Configuration
from .config import Settings, get_settings, configure_logging

# Identifiers and transport
from .identifiers import (
    LEGISLATION_TYPES,
    DocumentIdentifier,
    normalize_document_url,
    candidate_urls,
    outline_url,
    data_xml_url,
    changes_url,
)
from .transport import Fetcher, FetchResponse, HttpFetcher

# Core models
from .models import (
    SearchResult,
    TOCNode,
    Outline,
    OutlineMetadata,
    AmendmentKind,
    AmendmentNote,
    ProvisionContent,
)

# Result schemas
from .schemas import (
    SearchParams,
    ContentResult,
    RetrievalAttempt,
    AttemptOutcome,
    ProvisionResult,
    DocumentStatus,
    StatusBadge,
)

# Parsers
from .parsers import (
    parse_feed,
    sanitize_markup,
    parse_outline,
    build_toc,
    process_fragment,
    resolve_cross_reference,
)

# Retrieval
from .retrieval import (
    RetrievalConfig,
    search,
    browse_by_type,
    recent,
    retrieve_content,
    retrieve_provision,
    classify_status,
    status_badge,
    DocumentSession,
    OpenedDocument,
)

__all__ = [
    # Version
    "__version__",
    # Configuration
    "Settings",
    "get_settings",
    "configure_logging",
    # Identifiers
    "LEGISLATION_TYPES",
    "DocumentIdentifier",
    "normalize_document_url",
    "candidate_urls",
    "outline_url",
    "data_xml_url",
    "changes_url",
    # Transport
    "Fetcher",
    "FetchResponse",
    "HttpFetcher",
    # Models
    "SearchResult",
    "TOCNode",
    "Outline",
    "OutlineMetadata",
    "AmendmentKind",
    "AmendmentNote",
    "ProvisionContent",
    # Schemas
    "SearchParams",
    "ContentResult",
    "RetrievalAttempt",
    "AttemptOutcome",
    "ProvisionResult",
    "DocumentStatus",
    "StatusBadge",
    # Parsers
    "parse_feed",
    "sanitize_markup",
    "parse_outline",
    "build_toc",
    "process_fragment",
    "resolve_cross_reference",
    # Retrieval
    "RetrievalConfig",
    "search",
    "browse_by_type",
    "recent",
    "retrieve_content",
    "retrieve_provision",
    "classify_status",
    "status_badge",
    "DocumentSession",
    "OpenedDocument",
]
