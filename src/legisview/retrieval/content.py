"""
Content Retriever.

Fetches a working version of a document body by trying an ordered list of
URL variants until one yields genuine content:

1. base URL
2. enacted version (most reliably bypasses version selection)
3. contents page
4. enacted contents page

Each candidate is rejected on transport failure, on a version-selection
interstitial, or when no content selector yields enough text. Candidates
are tried strictly in order and the loop stops at the first accepted one.
Exhausting every candidate is an expected outcome: the result then carries
a direct link to the source instead of a body.
"""

import logging
from typing import Optional, Union

from bs4 import BeautifulSoup, Tag

from ..identifiers import DocumentIdentifier, candidate_urls, document_base_url
from ..parsers.sanitizer import sanitize_element
from ..schemas import AttemptOutcome, ContentResult, RetrievalAttempt
from ..transport import Fetcher, FetchResponse, safe_fetch
from .config import RetrievalConfig


logger = logging.getLogger(__name__)


def has_interstitial_markers(text: str, config: RetrievalConfig) -> bool:
    """True when every version-selection phrase appears in the text."""
    return all(marker in text for marker in config.interstitial_markers)


def is_interstitial(response: FetchResponse, config: RetrievalConfig) -> bool:
    """
    Detect a "choose a version" page.

    Both conditions must hold: all marker phrases present and a small raw
    payload. Long documents that happen to mention the phrases are content.
    """
    return response.size < config.interstitial_max_size and has_interstitial_markers(response.text, config)


def extract_content(soup: BeautifulSoup, config: RetrievalConfig) -> Optional[tuple[str, Tag]]:
    """First selector match, most specific first, whose text exceeds the minimum length."""
    for selector in config.content_selectors:
        element = soup.select_one(selector)
        if element is None:
            continue
        text_length = len(element.get_text())
        if text_length > config.min_content_length:
            return selector, element
        logger.debug(f"[CONTENT] Selector '{selector}' matched but has only {text_length} chars")
    return None


def _is_substantial(body: str, config: RetrievalConfig) -> bool:
    if len(body) <= config.min_content_length:
        return False
    if has_interstitial_markers(body, config):
        return False
    return not any(marker in body for marker in config.leftover_chrome_markers)


def retrieve_content(
    fetcher: Fetcher,
    document: Union[DocumentIdentifier, str],
    config: Optional[RetrievalConfig] = None,
) -> ContentResult:
    """
    Retrieve sanitized body markup for a document.

    Args:
        fetcher: Fetch capability
        document: DocumentIdentifier or any URL of the document
        config: Retrieval thresholds (defaults from settings)

    Returns:
        ContentResult: ok with body, or failure with fallback_url and message.
        Never raises for network or data conditions.
    """
    config = config or RetrievalConfig.from_settings()
    base_url = document_base_url(document, config.base_url)
    attempts: list[RetrievalAttempt] = []

    if not base_url:
        logger.warning(f"[CONTENT] Cannot derive a document URL from {document!r}")
        return ContentResult(
            ok=False,
            base_url="",
            message="No document URL could be derived.",
        )

    candidates = candidate_urls(base_url, config.include_enacted_contents)
    for index, (url, strategy) in enumerate(candidates, start=1):
        logger.info(f"[CONTENT] Strategy {index}: trying {strategy}: {url}")
        response = safe_fetch(fetcher, url)

        if not response.ok or not response.text:
            logger.info(f"[CONTENT] ✗ {strategy} failed (status={response.status_code}), trying next strategy")
            attempts.append(RetrievalAttempt(
                url=url,
                strategy=strategy,
                outcome=AttemptOutcome.TRANSPORT_FAILURE,
                status_code=response.status_code,
                detail=response.error,
            ))
            continue

        if is_interstitial(response, config):
            logger.info(f"[CONTENT] ✗ {strategy} is a version selection page, trying next strategy")
            attempts.append(RetrievalAttempt(
                url=url,
                strategy=strategy,
                outcome=AttemptOutcome.INTERSTITIAL,
                status_code=response.status_code,
            ))
            continue

        soup = BeautifulSoup(response.text, "html.parser")
        match = extract_content(soup, config)
        if match is None:
            logger.info(f"[CONTENT] ✗ No content selector matched for {strategy}, trying next strategy")
            attempts.append(RetrievalAttempt(
                url=url,
                strategy=strategy,
                outcome=AttemptOutcome.NO_CONTENT,
                status_code=response.status_code,
            ))
            continue

        selector, element = match
        body = sanitize_element(element)

        if not _is_substantial(body, config):
            logger.info(f"[CONTENT] ✗ Content from '{selector}' too short or invalid, trying next strategy")
            attempts.append(RetrievalAttempt(
                url=url,
                strategy=strategy,
                outcome=AttemptOutcome.CONTENT_TOO_SHORT,
                status_code=response.status_code,
                detail=selector,
            ))
            continue

        logger.info(f"[CONTENT] ✓ Accepted {strategy} via '{selector}' ({len(body)} chars)")
        attempts.append(RetrievalAttempt(
            url=url,
            strategy=strategy,
            outcome=AttemptOutcome.ACCEPTED,
            status_code=response.status_code,
            detail=selector,
        ))
        return ContentResult(
            ok=True,
            base_url=base_url,
            body=body,
            url=url,
            selector=selector,
            fallback_url=base_url,
            attempts=attempts,
        )

    logger.warning(f"[CONTENT] All {len(candidates)} strategies failed for {base_url}")
    return ContentResult(
        ok=False,
        base_url=base_url,
        fallback_url=base_url,
        message=(
            "Could not structure this document automatically. It may require manual "
            "version selection at the source. Open it directly to view it."
        ),
        attempts=attempts,
    )
