"""
Fetch capability consumed by the engine.

The engine never performs network I/O directly: every component takes a
``Fetcher`` and treats failure, non-success status and empty payloads as
ordinary data. ``HttpFetcher`` is the default implementation backed by
requests, restricted to the legislation source hosts.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Protocol, runtime_checkable
from urllib.parse import urlsplit

import requests

from .config import Settings, get_settings


logger = logging.getLogger(__name__)


@dataclass
class FetchResponse:
    """Raw result of one fetch."""
    url: str
    ok: bool
    status_code: Optional[int] = None
    text: str = ""
    error: Optional[str] = None

    @property
    def size(self) -> int:
        return len(self.text.encode("utf-8"))


@runtime_checkable
class Fetcher(Protocol):
    """Protocol for fetch capabilities."""

    def fetch(self, url: str) -> FetchResponse:
        """Fetch an absolute URL and return its payload and status."""
        ...


class HttpFetcher:
    """requests-backed fetcher limited to the allowed source hosts."""

    def __init__(self, settings: Optional[Settings] = None, session: Optional[requests.Session] = None):
        self.settings = settings or get_settings()
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": self.settings.user_agent})
        self.allowed_hosts = {h.lower() for h in self.settings.allowed_hosts}

    def is_allowed(self, url: str) -> bool:
        try:
            parts = urlsplit(url)
        except ValueError:
            return False
        return parts.scheme == "https" and parts.hostname is not None and parts.hostname.lower() in self.allowed_hosts

    def fetch(self, url: str) -> FetchResponse:
        if not self.is_allowed(url):
            logger.warning(f"[FETCH] Refusing non-allowed URL: {url}")
            return FetchResponse(url=url, ok=False, status_code=403, error="Only legislation source URLs allowed")

        logger.debug(f"[FETCH] GET {url}")
        try:
            response = self.session.get(url, timeout=self.settings.request_timeout)
        except requests.RequestException as e:
            logger.warning(f"[FETCH] Request failed for {url}: {e}")
            return FetchResponse(url=url, ok=False, error=str(e))

        if not response.ok:
            logger.info(f"[FETCH] {url} returned {response.status_code}")
            return FetchResponse(
                url=url,
                ok=False,
                status_code=response.status_code,
                error=f"Failed to fetch: {response.reason}",
            )

        return FetchResponse(url=url, ok=True, status_code=response.status_code, text=response.text)


def safe_fetch(fetcher: Fetcher, url: str) -> FetchResponse:
    """Call a fetcher, converting any exception it raises into a failed response."""
    try:
        response = fetcher.fetch(url)
    except Exception as e:
        logger.error(f"[FETCH] Fetcher raised for {url}: {e}")
        return FetchResponse(url=url, ok=False, error=str(e))

    if response is None:
        return FetchResponse(url=url, ok=False, error="No response")
    return response
