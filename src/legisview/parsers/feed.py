"""
Feed Normalizer.

Parses an Atom search feed into SearchResult records. Each entry's link is
normalized to the canonical document URL, so entries that point at
different revisions of one instrument share a canonical_url. No
deduplication happens here.
"""

import logging
from datetime import datetime
from typing import Optional
from urllib.parse import urlencode

from bs4 import BeautifulSoup, Tag

from ..identifiers import LEGISLATION_BASE, normalize_document_url
from ..models import SearchResult
from ..schemas import SearchParams


logger = logging.getLogger(__name__)


def _child_text(entry: Tag, name: str) -> str:
    child = entry.find(name, recursive=False)
    if child is None:
        return ""
    return " ".join(child.get_text(" ").split())


def _entry_link(entry: Tag) -> str:
    """Pick the entry's document link: alternate HTML, then any alternate, then the id."""
    links = entry.find_all("link", recursive=False)

    for link in links:
        if link.get("rel") == "alternate" and link.get("type") == "text/html" and link.get("href"):
            return link["href"]

    for link in links:
        if link.get("rel", "alternate") == "alternate" and link.get("href"):
            return link["href"]

    return _child_text(entry, "id")


def parse_timestamp(value: str) -> Optional[datetime]:
    """Parse an Atom timestamp; None when absent or malformed."""
    if not value:
        return None
    try:
        return datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError:
        logger.debug(f"[FEED] Unparseable timestamp: {value!r}")
        return None


def parse_feed(xml: str, base_url: str = LEGISLATION_BASE) -> list[SearchResult]:
    """
    Parse a search feed payload into an ordered list of SearchResult.

    Entries missing both title and link are dropped. An entry with a link
    but no title is titled by its identifier path. Malformed payloads
    yield an empty list.
    """
    if not xml or not xml.strip():
        logger.warning("[FEED] Empty feed payload")
        return []

    soup = BeautifulSoup(xml, "xml")
    entries = soup.find_all("entry")
    if not entries and soup.find("feed") is None:
        logger.warning("[FEED] Payload is not a feed")
        return []

    results = []
    for index, entry in enumerate(entries):
        title = _child_text(entry, "title")
        link = _entry_link(entry).strip()

        if not title and not link:
            logger.debug(f"[FEED] Dropping entry {index}: no title and no link")
            continue

        canonical_url = normalize_document_url(link, base_url) if link else ""
        if not canonical_url:
            logger.debug(f"[FEED] Dropping entry {index} ('{title[:40]}'): no usable link")
            continue

        if not title:
            title = canonical_url.split("://", 1)[-1].split("/", 1)[-1]

        updated = _child_text(entry, "updated")
        snippet = _child_text(entry, "summary") or f"Last updated: {updated}"

        results.append(SearchResult(
            title=title,
            canonical_url=canonical_url,
            snippet=snippet,
            source_updated=parse_timestamp(updated),
        ))

    logger.info(f"[FEED] Normalized {len(results)} of {len(entries)} entries")
    return results


def build_search_url(params: SearchParams, base_url: str = LEGISLATION_BASE) -> str:
    """Build the search feed URL, including only the filters that are set."""
    query = []
    if params.title:
        query.append(("title", params.title))
    if params.type:
        query.append(("type", params.type))
    if params.year:
        query.append(("year", str(params.year)))
    if params.number:
        query.append(("number", str(params.number)))
    if params.start_year:
        query.append(("start-year", str(params.start_year)))
    if params.end_year:
        query.append(("end-year", str(params.end_year)))
    if params.results_count:
        query.append(("results-count", str(params.results_count)))

    url = f"{base_url.rstrip('/')}/all/data.feed"
    if query:
        url += "?" + urlencode(query)
    return url
