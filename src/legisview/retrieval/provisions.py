"""
Provision retrieval.

Fetches one TOC node's XML fragment and runs the provision transforms.
Failures are scoped to the single provision: they come back as a
ProvisionResult carrying a direct link, never as an exception.
"""

import logging
from typing import Optional

from ..errors import FragmentParseError, MissingDocumentUriError
from ..identifiers import data_xml_url, upgrade_scheme
from ..models import TOCNode
from ..parsers.provision import process_fragment
from ..schemas import ProvisionResult
from ..transport import Fetcher, safe_fetch
from .config import RetrievalConfig


logger = logging.getLogger(__name__)


def retrieve_provision(
    fetcher: Fetcher,
    node: TOCNode,
    config: Optional[RetrievalConfig] = None,
) -> ProvisionResult:
    """Fetch and process the content of one TOC node."""
    config = config or RetrievalConfig.from_settings()

    try:
        source_url = data_xml_url(node.document_uri)
    except MissingDocumentUriError as e:
        logger.warning(f"[PROVISION] Node '{node.id}' ({node.label[:40]}): {e}")
        return ProvisionResult(
            ok=False,
            node_id=node.id,
            message="This provision has no address at the source.",
        )

    fallback_url = upgrade_scheme(node.document_uri, config.base_url)
    logger.info(f"[PROVISION] Fetching '{node.id}': {source_url}")
    response = safe_fetch(fetcher, source_url)

    if not response.ok or not response.text:
        logger.warning(f"[PROVISION] ✗ Fetch failed for '{node.id}' (status={response.status_code})")
        return ProvisionResult(
            ok=False,
            node_id=node.id,
            source_url=source_url,
            fallback_url=fallback_url,
            message="Could not load this provision. Open it directly at the source.",
        )

    try:
        content = process_fragment(response.text)
    except FragmentParseError as e:
        logger.warning(f"[PROVISION] ✗ Malformed fragment for '{node.id}': {e}")
        return ProvisionResult(
            ok=False,
            node_id=node.id,
            source_url=source_url,
            fallback_url=fallback_url,
            message="This provision could not be structured automatically. Open it directly at the source.",
        )

    logger.info(
        f"[PROVISION] ✓ '{node.id}' processed: {len(content.sanitized_body)} chars, "
        f"{len(content.amendments)} amendment note(s)"
    )
    return ProvisionResult(
        ok=True,
        node_id=node.id,
        content=content,
        source_url=source_url,
        fallback_url=fallback_url,
    )
