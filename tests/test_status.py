"""
Tests for the Status Classifier.

Run with: pytest tests/test_status.py -v
"""

import pytest

from legisview.models import OutlineMetadata
from legisview.retrieval import STATUS_BADGES, classify_status, status_badge
from legisview.schemas import DocumentStatus
from tests.conftest import DOC


class TestClassifyStatus:
    """First matching rule wins."""

    def test_enacted_url_wins_over_pending_metadata(self):
        """Should classify an enacted URL as enacted whatever the metadata says."""
        metadata = OutlineMetadata(modified="2024-03-01", unapplied_effects=3)
        assert classify_status(metadata, f"{DOC}/enacted") == DocumentStatus.AS_ENACTED

    def test_made_url(self):
        assert classify_status(None, "https://www.legislation.gov.uk/uksi/2020/1234/made") == DocumentStatus.AS_ENACTED

    def test_pending_effects(self):
        metadata = OutlineMetadata(modified="2024-03-01", unapplied_effects=1)
        assert classify_status(metadata, DOC) == DocumentStatus.REVISED_PENDING

    def test_revised(self):
        assert classify_status(OutlineMetadata(modified="2024-03-01"), DOC) == DocumentStatus.REVISED

    def test_latest_available(self):
        """Should fall back to latest available when metadata matches nothing else."""
        assert classify_status(OutlineMetadata(title="Companies Act 2006"), DOC) == DocumentStatus.LATEST_AVAILABLE

    def test_unknown(self):
        assert classify_status(None, DOC) == DocumentStatus.UNKNOWN

    def test_malformed_url(self):
        assert classify_status(None, "http://[broken/ukpga/2006/46/enacted") == DocumentStatus.UNKNOWN

    def test_enacted_in_title_not_path(self):
        """Should only look at path segments, not substrings."""
        assert classify_status(None, "https://www.legislation.gov.uk/ukpga/2006/46?v=enacted") == DocumentStatus.UNKNOWN


class TestStatusBadge:

    @pytest.mark.parametrize("status", list(DocumentStatus))
    def test_every_status_has_badge(self, status):
        badge = STATUS_BADGES[status]
        assert badge.status == status
        assert badge.label and badge.color and badge.tooltip

    def test_badge_for_document(self):
        badge = status_badge(OutlineMetadata(modified="2024-03-01"), DOC)

        assert badge.label == "Revised"
        assert badge.color == "amber"
