"""
Document identifiers and URL derivation.

The same instrument is reachable through many URL shapes:

- https://www.legislation.gov.uk/ukpga/2006/46
- http://www.legislation.gov.uk/ukpga/2006/46/contents
- /ukpga/2006/46/enacted
- https://www.legislation.gov.uk/ukpga/2006/46/2024-01-01/data.htm
- http://www.legislation.gov.uk/id/ukpga/2006/46

All of them normalize to one canonical URL, and every retrieval strategy
derives its candidate URLs from that canonical form.
"""

import logging
import re
from dataclasses import dataclass
from typing import Optional, Union
from urllib.parse import urljoin, urlsplit, urlunsplit

from .errors import MissingDocumentUriError


logger = logging.getLogger(__name__)

LEGISLATION_BASE = "https://www.legislation.gov.uk"

LEGISLATION_TYPES = {
    "ukpga": "UK Public General Acts",
    "ukla": "UK Local Acts",
    "asp": "Acts of the Scottish Parliament",
    "asc": "Acts of Senedd Cymru",
    "anaw": "Acts of the National Assembly for Wales",
    "mwa": "Measures of the National Assembly for Wales",
    "ukcm": "UK Church Measures",
    "uksi": "UK Statutory Instruments",
    "ssi": "Scottish Statutory Instruments",
    "wsi": "Wales Statutory Instruments",
    "nisr": "Northern Ireland Statutory Rules",
    "ukci": "UK Church Instruments",
}

# Format suffixes: /data.xml, /data.htm, /data.feed ...
DATA_SUFFIX_PATTERN = re.compile(r'/data\.(?:xml|htm|html|feed|rdf|akn|pdf)$', re.IGNORECASE)

# Version and view segments: dated revisions, enacted/made originals, contents pages
VERSION_SEGMENT_PATTERN = re.compile(
    r'/(?:\d{4}-\d{2}-\d{2}|enacted|made|created|adopted|contents)(?=/|$)'
)

# type/year/number prefix of a document path. Pre-1963 Acts use a regnal
# year spanning two segments: /ukpga/Geo5/4-5/59, /ukpga/Geo6and1Eliz2/15-16/2
IDENTIFIER_PATTERN = re.compile(
    r'^/(?P<type>[a-z]+)'
    r'/(?P<year>\d{4}|[A-Z][a-z]+\d*(?:and\d*[A-Z][a-z]+\d*)?/\d+(?:-\d+)?)'
    r'/(?P<number>\d+)(?=/|$)'
)

# Hosts serving the legislation source; all map onto the configured base host
SOURCE_HOSTS = ("www.legislation.gov.uk", "legislation.gov.uk")


def upgrade_scheme(url: str, base_url: str = LEGISLATION_BASE) -> str:
    """Force secure transport and resolve relative links against the source origin."""
    url = (url or "").strip()
    if not url:
        return ""
    if url.startswith("http://"):
        return "https://" + url[len("http://"):]
    if url.startswith("//"):
        return "https:" + url
    if url.startswith("https://"):
        return url
    return urljoin(base_url.rstrip("/") + "/", url.lstrip("/"))


def _strip_version_path(path: str) -> str:
    path = path.rstrip("/")
    path = DATA_SUFFIX_PATTERN.sub("", path)
    if path.startswith("/id/"):
        path = path[len("/id"):]
    path = VERSION_SEGMENT_PATTERN.sub("", path)

    match = IDENTIFIER_PATTERN.match(path)
    if match:
        return match.group(0)
    return path.rstrip("/")


def normalize_document_url(url: str, base_url: str = LEGISLATION_BASE) -> str:
    """
    Normalize any document URL to its canonical base identifier URL.

    Idempotent: normalizing an already-normalized URL returns it unchanged.
    Query strings and fragments are dropped. URLs that cannot be split
    (e.g. a broken IPv6 authority) normalize to "".
    """
    try:
        absolute = upgrade_scheme(url, base_url)
        if not absolute:
            return ""
        parts = urlsplit(absolute)
        netloc = parts.netloc.lower()
        if netloc in SOURCE_HOSTS:
            netloc = urlsplit(base_url).netloc.lower()
    except ValueError as e:
        logger.debug(f"[IDENTIFIER] Unusable URL {url!r}: {e}")
        return ""

    path = _strip_version_path(parts.path)
    return urlunsplit(("https", netloc, path, "", ""))


@dataclass(frozen=True)
class DocumentIdentifier:
    """Canonical, version-independent reference to one instrument."""
    type_code: str
    year: str
    number: str
    base_url: str = LEGISLATION_BASE

    @property
    def path(self) -> str:
        return f"/{self.type_code}/{self.year}/{self.number}"

    @property
    def url(self) -> str:
        return self.base_url.rstrip("/") + self.path

    @property
    def type_name(self) -> str:
        return LEGISLATION_TYPES.get(self.type_code, self.type_code)

    @classmethod
    def from_url(cls, url: str, base_url: str = LEGISLATION_BASE) -> Optional["DocumentIdentifier"]:
        """Derive an identifier from any URL shape, or None if it has no type/year/number."""
        normalized = normalize_document_url(url, base_url)
        if not normalized:
            return None
        parts = urlsplit(normalized)
        match = IDENTIFIER_PATTERN.match(parts.path)
        if not match:
            return None
        return cls(
            type_code=match.group("type"),
            year=match.group("year"),
            number=match.group("number"),
            base_url=f"https://{parts.netloc}",
        )

    def __str__(self) -> str:
        return self.url


def document_base_url(document: Union[DocumentIdentifier, str], base_url: str = LEGISLATION_BASE) -> str:
    """Canonical base URL for an identifier or any document URL."""
    if isinstance(document, DocumentIdentifier):
        return document.url
    return normalize_document_url(document, base_url)


def candidate_urls(base_url: str, include_enacted_contents: bool = True) -> list[tuple[str, str]]:
    """
    Ordered retrieval candidates as (url, description) pairs.

    Precedence is base, then enacted, then contents. The enacted version
    most reliably bypasses the version-selection page.
    """
    base = normalize_document_url(base_url)
    candidates = [
        (base, "base URL"),
        (f"{base}/enacted", "enacted version"),
        (f"{base}/contents", "contents page"),
    ]
    if include_enacted_contents:
        candidates.append((f"{base}/enacted/contents", "enacted contents page"))
    return candidates


def outline_url(document: Union[DocumentIdentifier, str]) -> str:
    """URL of the structured outline (table of contents) XML."""
    return f"{document_base_url(document)}/contents/data.xml"


def data_xml_url(document_uri: str) -> str:
    """URL of a provision's XML fragment; appends the data suffix when missing."""
    uri = upgrade_scheme(document_uri or "")
    if not uri:
        raise MissingDocumentUriError("TOC node has no document URI")
    uri = uri.split("#", 1)[0].rstrip("/")
    if uri.endswith("/data.xml"):
        return uri
    return f"{uri}/data.xml"


def changes_url(url: str) -> str:
    """Link to the outstanding changes view of a document."""
    return f"{normalize_document_url(url)}/changes"
