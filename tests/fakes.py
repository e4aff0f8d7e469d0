"""Fake fetch capability for testing the engine without network access."""

import threading
import time

from legisview.transport import FetchResponse


class FakeFetcher:
    """In-memory fake for HttpFetcher.

    Stores canned payloads per URL and records every URL requested.
    Unregistered URLs answer 404.
    """

    def __init__(self) -> None:
        self.pages: dict[str, FetchResponse] = {}
        self.delays: dict[str, float] = {}
        self.calls: list[str] = []
        self._lock = threading.Lock()

    def add_page(self, url: str, text: str, status_code: int = 200) -> None:
        """Register a successful payload for a URL."""
        self.pages[url] = FetchResponse(url=url, ok=True, status_code=status_code, text=text)

    def add_failure(self, url: str, status_code: int = 500, error: str = "Server error") -> None:
        """Register a non-success response for a URL."""
        self.pages[url] = FetchResponse(url=url, ok=False, status_code=status_code, error=error)

    def add_delay(self, url: str, seconds: float) -> None:
        """Make a URL slow to answer."""
        self.delays[url] = seconds

    def fetch(self, url: str) -> FetchResponse:
        """Return the registered response and record the call."""
        with self._lock:
            self.calls.append(url)
        if url in self.delays:
            time.sleep(self.delays[url])
        if url not in self.pages:
            return FetchResponse(url=url, ok=False, status_code=404, error="Not Found")
        return self.pages[url]


class RaisingFetcher:
    """Fetcher whose transport blows up on every call."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    def fetch(self, url: str) -> FetchResponse:
        self.calls.append(url)
        raise ConnectionError(f"network unreachable for {url}")
