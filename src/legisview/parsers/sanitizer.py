"""
Markup Sanitizer.

Removes page chrome (scripts, navigation, breadcrumbs, tooltips, print
options, version pickers) from a content subtree. Everything not on the
denylist is preserved, so sanitizing twice is the same as sanitizing once.
"""

import logging
from typing import Union

from bs4 import BeautifulSoup, Tag


logger = logging.getLogger(__name__)

# Element kinds and chrome regions that never carry legislative content
DENYLIST_SELECTORS = (
    "script",
    "style",
    "noscript",
    "nav",
    "header",
    "footer",
    ".navigation",
    ".breadcrumb",
    ".toolTip",
    ".LegNavigation",
    ".printOptions",
    ".moreResources",
    ".accessKey",
    "#layout1",
    ".LegNav",
    ".LegBreadcrumb",
    ".LegVersions",
)

DENYLIST_SELECTOR = ", ".join(DENYLIST_SELECTORS)


def strip_chrome(element: Union[BeautifulSoup, Tag]) -> int:
    """Remove denylisted subtrees from an element in place. Returns the number removed."""
    removed = 0
    for unwanted in element.select(DENYLIST_SELECTOR):
        # Already gone with an ancestor
        if unwanted.decomposed:
            continue
        unwanted.decompose()
        removed += 1
    return removed


def inner_markup(element: Union[BeautifulSoup, Tag]) -> str:
    """Serialize an element's children without the element's own tag."""
    return element.decode_contents()


def sanitize_element(element: Union[BeautifulSoup, Tag]) -> str:
    """Strip chrome from a parsed subtree and return its inner markup."""
    removed = strip_chrome(element)
    if removed:
        logger.debug(f"[SANITIZE] Removed {removed} non-content element(s)")
    return inner_markup(element)


def sanitize_markup(markup: str) -> str:
    """Sanitize a markup string. Idempotent."""
    soup = BeautifulSoup(markup or "", "html.parser")
    return sanitize_element(soup)
