"""
Result schemas returned to the viewer/annotation layer.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from .models import ProvisionContent


# ============================================================================
# Search
# ============================================================================

class SearchParams(BaseModel):
    """Search filters for the legislation feed."""

    title: Optional[str] = Field(None, description="Title words to search for")
    type: Optional[str] = Field(
        None,
        description="Legislation type code (e.g. 'ukpga') or '*' for all types"
    )
    year: Optional[int] = Field(None, description="Exact year")
    number: Optional[int] = Field(None, description="Chapter/instrument number")
    start_year: Optional[int] = Field(None, description="First year of a range")
    end_year: Optional[int] = Field(None, description="Last year of a range")
    results_count: Optional[int] = Field(None, description="Maximum results requested")


# ============================================================================
# Content Retrieval
# ============================================================================

class AttemptOutcome(str, Enum):
    """What happened to one retrieval candidate."""
    ACCEPTED = "accepted"
    TRANSPORT_FAILURE = "transport_failure"
    INTERSTITIAL = "interstitial"
    NO_CONTENT = "no_content"
    CONTENT_TOO_SHORT = "content_too_short"


class RetrievalAttempt(BaseModel):
    """One entry in a retrieval call's attempt ledger."""

    url: str = Field(..., description="Candidate URL tried")
    strategy: str = Field(..., description="Human-readable candidate description")
    outcome: AttemptOutcome = Field(..., description="Result of the attempt")
    status_code: Optional[int] = Field(None, description="Transport status code, if any")
    detail: Optional[str] = Field(None, description="Extra detail (selector used, error text)")


class ContentResult(BaseModel):
    """
    Sanitized document body, or a failure carrying a direct source link.

    Failure is an expected outcome: the viewer shows `message` and links
    to `fallback_url`.
    """

    ok: bool = Field(..., description="Whether a candidate was accepted")
    base_url: str = Field(..., description="Canonical base URL of the document")
    body: Optional[str] = Field(None, description="Sanitized body markup")
    url: Optional[str] = Field(None, description="Candidate URL that produced the body")
    selector: Optional[str] = Field(None, description="Content selector that matched")
    fallback_url: Optional[str] = Field(None, description="Direct link to view the document at the source")
    message: Optional[str] = Field(None, description="Human-readable failure explanation")
    attempts: list[RetrievalAttempt] = Field(default_factory=list, description="Ordered attempt ledger")


# ============================================================================
# Provisions
# ============================================================================

class ProvisionResult(BaseModel):
    """Processed provision content, or a failure offering a direct link."""

    ok: bool = Field(..., description="Whether the provision was processed")
    node_id: str = Field(..., description="TOC node the result belongs to")
    content: Optional[ProvisionContent] = Field(None, description="Cleaned body and amendment notes")
    source_url: Optional[str] = Field(None, description="Fragment URL fetched")
    fallback_url: Optional[str] = Field(None, description="Direct link to the provision at the source")
    message: Optional[str] = Field(None, description="Human-readable failure explanation")


# ============================================================================
# Document Status
# ============================================================================

class DocumentStatus(str, Enum):
    """Lifecycle label of a document version."""
    AS_ENACTED = "as_enacted"
    REVISED = "revised"
    REVISED_PENDING = "revised_pending"
    LATEST_AVAILABLE = "latest_available"
    UNKNOWN = "unknown"


class StatusBadge(BaseModel):
    """Presentation constants for a document status."""

    status: DocumentStatus = Field(..., description="Classified status")
    label: str = Field(..., description="Display label")
    color: str = Field(..., description="Display color name")
    tooltip: str = Field(..., description="Explanatory tooltip text")
