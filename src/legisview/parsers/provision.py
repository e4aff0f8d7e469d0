"""
Provision Processor transforms.

Turns one provision's XML fragment into cleaned markup plus a separate
list of amendment notes:

- Attribute allow-list: only class, style, a link target and a reference tag survive
- References become navigable anchors (``<a class="cross-reference" href=...>``)
- Inline typography wrappers (Substitution, Repeal, Emphasis, ...) are flattened
- Commentary references are lifted out of the body into AmendmentNote records

All functions here are pure over the parsed tree; fetching lives in
``legisview.retrieval.provisions``.
"""

import logging
import re
from collections import defaultdict
from typing import Optional, Union

from bs4 import BeautifulSoup, NavigableString, Tag

from ..errors import FragmentParseError
from ..identifiers import DocumentIdentifier
from ..models import AmendmentKind, AmendmentNote, ProvisionContent, TOCNode, iter_toc
from .sanitizer import inner_markup, strip_chrome


logger = logging.getLogger(__name__)

ALLOWED_ATTRIBUTES = ("class", "style", "href", "data-ref")

# Source attributes kept under their rendering names
ATTRIBUTE_ALIASES = {
    "URI": "href",
    "Ref": "data-ref",
}

ROOT_TAGS = ("Body", "Schedules", "EUBody")

REFERENCE_TAGS = ("Citation", "CitationSubRef", "InternalLink", "ExternalLink")

INLINE_FLATTEN_TAGS = (
    "Substitution",
    "Addition",
    "Repeal",
    "Emphasis",
    "Strong",
    "SmallCaps",
    "Underline",
)

# Block wrappers keep a line break so flattened paragraphs do not run together
BLOCK_FLATTEN_TAGS = ("Text", "Para")

CROSS_REFERENCE_CLASS = "cross-reference"

CROSS_REFERENCE_PATTERN = re.compile(
    r'\b(section|article|regulation|rule|paragraph|schedule|part)[/\-\s]+(\d+[A-Za-z]*)',
    re.IGNORECASE
)

NUMBER_PREFIX_PATTERN = re.compile(
    r'^(?:section|article|regulation|rule|paragraph|s\.|art\.|reg\.|para\.)\s*',
    re.IGNORECASE
)


def find_content_roots(soup: BeautifulSoup) -> list[Tag]:
    """
    Locate the body and schedule roots of a fragment, in document order.

    A whole-document fragment carries both a Body and Schedules; every root
    with content is returned. Roots nested in another root are skipped.

    Raises:
        FragmentParseError: If no root element is present.
    """
    found = [
        el for el in soup.find_all(ROOT_TAGS)
        if not any(parent.name in ROOT_TAGS for parent in el.parents)
    ]
    if not found:
        raise FragmentParseError("Fragment has no Body or Schedules element")

    with_content = [el for el in found if el.find(True) is not None]
    return with_content or found[:1]


def filter_attributes(root: Tag) -> int:
    """Drop every attribute outside the allow-list. Returns the number removed."""
    removed = 0
    for el in [root, *root.find_all(True)]:
        retained = {}
        for name, value in el.attrs.items():
            target = ATTRIBUTE_ALIASES.get(name, name)
            if target in ALLOWED_ATTRIBUTES:
                retained[target] = value
            else:
                removed += 1
        el.attrs = retained
    return removed


def link_references(soup: BeautifulSoup, root: Tag) -> int:
    """Replace reference elements with navigable anchors. Returns the number of anchors."""
    linked = 0
    for ref in root.find_all(REFERENCE_TAGS):
        text = ref.get_text()
        target = ref.get("href") or ref.get("data-ref")
        if not target:
            ref.replace_with(NavigableString(text))
            continue

        anchor = soup.new_tag("a", attrs={"class": CROSS_REFERENCE_CLASS, "href": target})
        anchor.string = text
        ref.replace_with(anchor)
        linked += 1
    return linked


def flatten_wrappers(root: Tag) -> int:
    """Unwrap typography and text wrappers, keeping their content."""
    flattened = 0
    for wrapper in root.find_all(INLINE_FLATTEN_TAGS + BLOCK_FLATTEN_TAGS):
        if wrapper.name in BLOCK_FLATTEN_TAGS:
            wrapper.append(NavigableString("\n"))
        wrapper.unwrap()
        flattened += 1
    return flattened


def _commentary_text(commentary: Tag) -> str:
    return " ".join(commentary.get_text(" ").split())


def extract_amendments(soup: BeautifulSoup, roots: list[Tag]) -> list[AmendmentNote]:
    """
    Lift commentary references out of the body into amendment notes.

    Each referenced commentary appears once, in order of first reference
    across all roots. Titles follow the source numbering per type code
    (F1, F2, I1, ...).
    """
    commentaries = {c.get("id"): c for c in soup.find_all("Commentary") if c.get("id")}
    counters: dict[str, int] = defaultdict(int)
    seen: set[str] = set()
    notes = []

    refs = [ref for root in roots for ref in root.find_all("CommentaryRef")]
    for ref in refs:
        ref_id = ref.get("data-ref")
        ref.decompose()

        if not ref_id or ref_id in seen:
            continue
        seen.add(ref_id)

        commentary = commentaries.get(ref_id)
        if commentary is None:
            logger.debug(f"[PROVISION] Commentary '{ref_id}' referenced but not present")
            continue

        code = (commentary.get("Type") or "").strip().upper()
        counters[code] += 1
        notes.append(AmendmentNote(
            kind=AmendmentKind.from_code(code),
            title=f"{code or 'Note'}{counters[code]}",
            body=_commentary_text(commentary),
        ))

    return notes


def process_fragment(xml: str) -> ProvisionContent:
    """
    Process one provision fragment into ProvisionContent.

    Raises:
        FragmentParseError: If the fragment has no content root.
    """
    soup = BeautifulSoup(xml or "", "xml")
    roots = find_content_roots(soup)

    removed = sum(filter_attributes(root) for root in roots)
    linked = sum(link_references(soup, root) for root in roots)
    flattened = sum(flatten_wrappers(root) for root in roots)
    amendments = extract_amendments(soup, roots)
    for root in roots:
        strip_chrome(root)

    logger.debug(
        f"[PROVISION] Fragment processed: {removed} attribute(s) dropped, {linked} link(s), "
        f"{flattened} wrapper(s) flattened, {len(amendments)} amendment note(s) "
        f"from {len(roots)} root(s)"
    )
    body = "".join(inner_markup(root) for root in roots)
    return ProvisionContent(sanitized_body=body, amendments=amendments)


# ============================================================================
# Cross-reference resolution
# ============================================================================

def extract_reference_numbers(target: str) -> list[tuple[str, str]]:
    """All (kind, number) pairs embedded in a reference target, outermost first."""
    return [(m.group(1).lower(), m.group(2).lower()) for m in CROSS_REFERENCE_PATTERN.finditer(target or "")]


def _bare_number(number: str) -> str:
    return NUMBER_PREFIX_PATTERN.sub("", number.strip().lower()).strip()


def _is_container(node: TOCNode) -> bool:
    return node.number.strip().lower().startswith(("part", "schedule"))


def _find_container(nodes: list[TOCNode], kind: str, number: str) -> Optional[TOCNode]:
    expected = f"{kind} {number}"
    for node in iter_toc(nodes):
        if " ".join(node.number.lower().split()) == expected:
            return node
    return None


def _find_item(nodes: list[TOCNode], number: str) -> Optional[TOCNode]:
    for node in iter_toc(nodes):
        if not _is_container(node) and _bare_number(node.number) == number:
            return node
    return None


def resolve_cross_reference(
    target: str,
    nodes: list[TOCNode],
    document: Union[DocumentIdentifier, str, None] = None,
) -> Optional[TOCNode]:
    """
    Find the TOC node a reference target points at.

    Absolute targets resolve only when they name the current instrument;
    unparseable or foreign URLs never resolve. Returns None when nothing
    matches, which leaves the anchor inert.
    """
    if document is not None and (target or "").startswith(("http://", "https://")):
        current = document if isinstance(document, DocumentIdentifier) else DocumentIdentifier.from_url(document)
        referenced = DocumentIdentifier.from_url(target)
        if referenced is None:
            return None
        if current is not None and current.path != referenced.path:
            return None

    refs = extract_reference_numbers(target)
    if not refs:
        return None

    kind, number = refs[-1]
    if kind in ("part", "schedule"):
        return _find_container(nodes, kind, number)

    # Schedule paragraphs resolve inside their schedule
    for outer_kind, outer_number in refs[:-1]:
        if outer_kind == "schedule":
            schedule = _find_container(nodes, outer_kind, outer_number)
            if schedule is not None:
                return _find_item(schedule.children, number)

    return _find_item(nodes, number)
