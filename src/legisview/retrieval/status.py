"""
Status Classifier.

Derives a document's lifecycle label from its URL and outline metadata.
First match wins:

1. URL path carries an enacted/made marker  -> AS_ENACTED
2. Metadata lists unapplied effects         -> REVISED_PENDING
3. Metadata carries a modification date     -> REVISED
4. Metadata present, nothing else matched   -> LATEST_AVAILABLE
5. No metadata                              -> UNKNOWN
"""

import logging
from typing import Optional
from urllib.parse import urlsplit

from ..models import OutlineMetadata
from ..schemas import DocumentStatus, StatusBadge


logger = logging.getLogger(__name__)

ENACTED_SEGMENTS = ("enacted", "made")

STATUS_BADGES = {
    DocumentStatus.AS_ENACTED: StatusBadge(
        status=DocumentStatus.AS_ENACTED,
        label="As Enacted",
        color="green",
        tooltip="This is the original version of the legislation as it was initially enacted or made.",
    ),
    DocumentStatus.REVISED: StatusBadge(
        status=DocumentStatus.REVISED,
        label="Revised",
        color="amber",
        tooltip="This is a revised version that may incorporate subsequent amendments and changes.",
    ),
    DocumentStatus.REVISED_PENDING: StatusBadge(
        status=DocumentStatus.REVISED_PENDING,
        label="Revised with Pending Changes",
        color="orange",
        tooltip=(
            "This revised version has outstanding changes that have not yet been applied "
            "to the text. Check the outstanding changes before relying on it."
        ),
    ),
    DocumentStatus.LATEST_AVAILABLE: StatusBadge(
        status=DocumentStatus.LATEST_AVAILABLE,
        label="Latest Available",
        color="blue",
        tooltip="This is the latest available version of the legislation.",
    ),
    DocumentStatus.UNKNOWN: StatusBadge(
        status=DocumentStatus.UNKNOWN,
        label="Unknown",
        color="grey",
        tooltip="The version status of this document could not be determined.",
    ),
}


def is_enacted_url(url: str) -> bool:
    try:
        path = urlsplit(url or "").path.lower()
    except ValueError:
        return False
    segments = [s for s in path.split("/") if s]
    return any(s in ENACTED_SEGMENTS for s in segments)


def classify_status(metadata: Optional[OutlineMetadata], url: str) -> DocumentStatus:
    """Classify a document version. The URL check short-circuits metadata."""
    if is_enacted_url(url):
        return DocumentStatus.AS_ENACTED
    if metadata is None:
        return DocumentStatus.UNKNOWN
    if metadata.has_pending_effects:
        return DocumentStatus.REVISED_PENDING
    if metadata.modified:
        return DocumentStatus.REVISED
    return DocumentStatus.LATEST_AVAILABLE


def status_badge(metadata: Optional[OutlineMetadata], url: str) -> StatusBadge:
    """Classify and attach the presentation constants."""
    status = classify_status(metadata, url)
    logger.debug(f"[STATUS] {url} -> {status.value}")
    return STATUS_BADGES[status]
