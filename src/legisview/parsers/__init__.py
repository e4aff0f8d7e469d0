"""
Pure parsers and transforms for the legislation engine.

This package contains:
- feed: Atom search feed normalization
- sanitizer: Page chrome removal
- toc: Outline XML to TOC tree, heading fallback
- provision: Provision fragment transforms and cross-reference resolution
"""

from .feed import parse_feed, build_search_url
from .sanitizer import sanitize_markup, sanitize_element, strip_chrome
from .toc import (
    parse_outline,
    build_toc,
    build_toc_from_headings,
    filter_toc,
    clean_toc_text,
)
from .provision import (
    process_fragment,
    resolve_cross_reference,
    ALLOWED_ATTRIBUTES,
)

__all__ = [
    # Feed
    "parse_feed",
    "build_search_url",
    # Sanitizer
    "sanitize_markup",
    "sanitize_element",
    "strip_chrome",
    # TOC
    "parse_outline",
    "build_toc",
    "build_toc_from_headings",
    "filter_toc",
    "clean_toc_text",
    # Provision
    "process_fragment",
    "resolve_cross_reference",
    "ALLOWED_ATTRIBUTES",
]
