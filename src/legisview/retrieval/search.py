"""
Search service.

Builds search-feed URLs from filters, fetches them and hands the payload to
the Feed Normalizer. A failed search is an empty result list.
"""

import logging
from datetime import date
from typing import Optional

from ..parsers.feed import build_search_url, parse_feed
from ..models import SearchResult
from ..schemas import SearchParams
from ..transport import Fetcher, safe_fetch
from .config import RetrievalConfig


logger = logging.getLogger(__name__)


def search(
    fetcher: Fetcher,
    params: SearchParams,
    config: Optional[RetrievalConfig] = None,
) -> list[SearchResult]:
    """Search the legislation feed."""
    config = config or RetrievalConfig.from_settings()
    url = build_search_url(params, config.base_url)
    logger.info(f"[SEARCH] {url}")

    response = safe_fetch(fetcher, url)
    if not response.ok:
        logger.warning(f"[SEARCH] Search failed (status={response.status_code}): {response.error}")
        return []

    return parse_feed(response.text, config.base_url)


def browse_by_type(
    fetcher: Fetcher,
    type_code: str,
    year: Optional[int] = None,
    config: Optional[RetrievalConfig] = None,
) -> list[SearchResult]:
    """List instruments of one legislation type, optionally for one year."""
    config = config or RetrievalConfig.from_settings()
    params = SearchParams(type=type_code, year=year, results_count=config.search_results_count)
    return search(fetcher, params, config)


def recent(
    fetcher: Fetcher,
    type_code: Optional[str] = None,
    today: Optional[date] = None,
    config: Optional[RetrievalConfig] = None,
) -> list[SearchResult]:
    """Instruments from last year and this year."""
    config = config or RetrievalConfig.from_settings()
    current_year = (today or date.today()).year
    params = SearchParams(
        type=type_code or "*",
        start_year=current_year - 1,
        end_year=current_year,
        results_count=config.search_results_count,
    )
    return search(fetcher, params, config)
