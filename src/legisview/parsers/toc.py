"""
TOC Builder.

Parses the outline XML (``/contents/data.xml``) into a typed tree of
provisions. The outline mixes three sibling shapes that do not nest
uniformly, so each shape gets its own pass:

1. Bare items outside any Part or Schedule
2. Parts, each owning its nested items
3. Schedules, each owning its nested items

Roots are emitted in that order (preamble sections, then Parts, then
Schedules), whatever order the XML lists them in.

When the outline is unavailable, a flat TOC is reconstructed from the
headings of the already-retrieved HTML body.
"""

import logging
import re
from typing import Optional

from bs4 import BeautifulSoup, Tag

from ..errors import OutlineParseError
from ..models import Outline, OutlineMetadata, TOCNode, iter_toc


logger = logging.getLogger(__name__)

# Editorial footnote markers: [F12], [M3], [I1]
FOOTNOTE_MARKER_PATTERN = re.compile(r'\[\s*[A-Z]{1,2}\d+\s*\]')

# Amended-text brackets opened by a marker: "[F12Short title]" -> "Short title"
FOOTNOTE_BRACKET_PATTERN = re.compile(r'\[\s*[A-Z]{1,2}\d+\s*([^\[\]]*)\]')

# Trailing extent marker on headings
EXTENT_MARKER_PATTERN = re.compile(r'\s*U\.K\.\s*$', re.IGNORECASE)

HEADING_SELECTOR = "h1, h2, h3, .LegHeading"

PART_CONTAINERS = ("ContentsPart",)
SCHEDULE_CONTAINERS = ("ContentsSchedule",)


def clean_toc_text(text: str) -> str:
    """Strip footnote markers and collapse whitespace."""
    text = FOOTNOTE_MARKER_PATTERN.sub(" ", text or "")
    text = FOOTNOTE_BRACKET_PATTERN.sub(r"\1", text)
    return " ".join(text.split())


def _is_within(element: Tag, container_names: tuple[str, ...]) -> bool:
    return any(parent.name in container_names for parent in element.parents)


def _child_text(element: Tag, name: str) -> str:
    child = element.find(name, recursive=False)
    if child is None:
        return ""
    return clean_toc_text(child.get_text(" "))


def _make_node(element: Tag, fallback_id: str, level: int) -> TOCNode:
    return TOCNode(
        id=element.get("ContentRef") or fallback_id,
        number=_child_text(element, "ContentsNumber"),
        title=_child_text(element, "ContentsTitle"),
        document_uri=element.get("DocumentURI") or element.get("IdURI") or "",
        status=element.get("Status"),
        level=level,
    )


def _attach_items(container: Tag, node: TOCNode) -> TOCNode:
    for index, item in enumerate(container.find_all("ContentsItem")):
        node.children.append(_make_node(item, f"{node.id}-item-{index}", node.level + 1))
    return node


def extract_bare_items(contents: Tag) -> list[TOCNode]:
    """Pass 1: items that sit outside every Part and Schedule."""
    nodes = []
    for item in contents.find_all("ContentsItem"):
        if _is_within(item, PART_CONTAINERS + SCHEDULE_CONTAINERS):
            continue
        nodes.append(_make_node(item, f"item-{len(nodes)}", 0))
    return nodes


def extract_parts(contents: Tag) -> list[TOCNode]:
    """Pass 2: Parts with their nested items. Parts inside Schedules belong to pass 3."""
    nodes = []
    for part in contents.find_all("ContentsPart"):
        if _is_within(part, SCHEDULE_CONTAINERS):
            continue
        node = _make_node(part, f"part-{len(nodes)}", 0)
        nodes.append(_attach_items(part, node))
    return nodes


def extract_schedules(contents: Tag) -> list[TOCNode]:
    """Pass 3: Schedules with their nested items."""
    nodes = []
    for schedule in contents.find_all("ContentsSchedule"):
        node = _make_node(schedule, f"schedule-{len(nodes)}", 0)
        nodes.append(_attach_items(schedule, node))
    return nodes


def parse_metadata(soup: BeautifulSoup) -> Optional[OutlineMetadata]:
    """Read revision metadata; None when the outline has no metadata block."""
    metadata = soup.find("Metadata")
    if metadata is None:
        return None

    def text_of(name: str) -> Optional[str]:
        el = metadata.find(name)
        if el is None:
            return None
        value = el.get_text(strip=True)
        return value or None

    status_el = metadata.find("DocumentStatus")
    return OutlineMetadata(
        title=text_of("title") or "",
        modified=text_of("modified"),
        valid=text_of("valid"),
        document_status=status_el.get("Value") if status_el is not None else None,
        unapplied_effects=len(metadata.find_all("UnappliedEffect")),
    )


def parse_outline(xml: str) -> Outline:
    """
    Parse outline XML into root TOC nodes plus metadata.

    Raises:
        OutlineParseError: If the payload has no Contents element.
    """
    soup = BeautifulSoup(xml or "", "xml")
    contents = soup.find("Contents")
    if contents is None:
        raise OutlineParseError("Outline has no Contents element")

    nodes = extract_bare_items(contents) + extract_parts(contents) + extract_schedules(contents)
    title = _child_text(contents, "ContentsTitle")
    metadata = parse_metadata(soup)

    logger.info(
        f"[TOC] Parsed outline '{title[:50]}': {len(nodes)} root node(s), "
        f"{sum(1 for _ in iter_toc(nodes))} total"
    )
    return Outline(nodes=nodes, title=title or (metadata.title if metadata else ""), metadata=metadata)


def build_toc_from_headings(body_markup: str, document_url: str) -> list[TOCNode]:
    """
    Reconstruct a flat TOC from heading elements of the HTML body.

    Every node points back at the whole document; there is no
    fragment-level navigation in this mode.
    """
    soup = BeautifulSoup(body_markup or "", "html.parser")
    nodes = []
    for heading in soup.select(HEADING_SELECTOR):
        title = EXTENT_MARKER_PATTERN.sub("", clean_toc_text(heading.get_text(" ")))
        if not title:
            continue
        nodes.append(TOCNode(
            id=f"heading-{len(nodes)}",
            number=str(len(nodes) + 1),
            title=title,
            document_uri=document_url,
            level=0,
        ))

    logger.info(f"[TOC] Heading fallback produced {len(nodes)} node(s)")
    return nodes


def build_toc(outline_xml: Optional[str], body_markup: Optional[str], document_url: str) -> Outline:
    """
    Build the TOC, falling back to headings when the outline is missing or malformed.

    An empty result is a valid terminal state ("no contents available").
    """
    outline = None
    if outline_xml:
        try:
            outline = parse_outline(outline_xml)
        except OutlineParseError as e:
            logger.warning(f"[TOC] Outline unusable, using heading fallback: {e}")
    else:
        logger.warning("[TOC] No outline payload, using heading fallback")

    if outline is not None and outline.nodes:
        return outline

    nodes = build_toc_from_headings(body_markup or "", document_url) if body_markup else []
    if outline is None:
        outline = Outline()
    outline.nodes = nodes
    return outline


def filter_toc(nodes: list[TOCNode], query: str) -> list[TOCNode]:
    """
    Filter a TOC by a case-insensitive match on number or title.

    A container that matches keeps all its children; otherwise it is kept
    with only its matching children.
    """
    needle = (query or "").strip().lower()
    if not needle:
        return list(nodes)

    filtered = []
    for node in nodes:
        if needle in node.number.lower() or needle in node.title.lower():
            filtered.append(node)
            continue
        children = filter_toc(node.children, needle)
        if children:
            filtered.append(TOCNode(
                id=node.id,
                number=node.number,
                title=node.title,
                document_uri=node.document_uri,
                status=node.status,
                children=children,
                level=node.level,
            ))
    return filtered
