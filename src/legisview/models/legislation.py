"""
Structured legislation models.

This module defines the document model built from outline and fragment XML:
- TOCNode: A provision container in the table of contents tree
- Outline: Parsed outline document (TOC roots plus metadata)
- OutlineMetadata: Revision metadata used for status classification
- AmendmentNote: A commentary block surfaced beside a provision
- ProvisionContent: Cleaned provision body plus its amendment notes
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional


@dataclass
class TOCNode:
    """A node in the table of contents. Parts and Schedules own item children."""
    id: str
    number: str
    title: str
    document_uri: str
    status: Optional[str] = None
    children: list["TOCNode"] = field(default_factory=list)
    level: int = 0

    @property
    def label(self) -> str:
        return " ".join(p for p in (self.number, self.title) if p)

    def walk(self) -> Iterator["TOCNode"]:
        """Yield this node and its descendants in reading order."""
        yield self
        for child in self.children:
            yield from child.walk()

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "number": self.number,
            "title": self.title,
            "document_uri": self.document_uri,
            "status": self.status,
            "children": [c.to_dict() for c in self.children],
            "level": self.level,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "TOCNode":
        return cls(
            id=data["id"],
            number=data.get("number", ""),
            title=data.get("title", ""),
            document_uri=data.get("document_uri", ""),
            status=data.get("status"),
            children=[cls.from_dict(c) for c in data.get("children", [])],
            level=data.get("level", 0),
        )


def iter_toc(nodes: list[TOCNode]) -> Iterator[TOCNode]:
    """Depth-first iteration over a TOC forest."""
    for node in nodes:
        yield from node.walk()


@dataclass
class OutlineMetadata:
    """Revision metadata from the outline's metadata block."""
    title: str = ""
    modified: Optional[str] = None
    valid: Optional[str] = None
    document_status: Optional[str] = None
    unapplied_effects: int = 0

    @property
    def has_pending_effects(self) -> bool:
        return self.unapplied_effects > 0


@dataclass
class Outline:
    """Parsed outline document."""
    nodes: list[TOCNode] = field(default_factory=list)
    title: str = ""
    metadata: Optional[OutlineMetadata] = None


class AmendmentKind(Enum):
    """Commentary categories surfaced beside a provision."""
    TEXTUAL = "textual"
    COMMENCEMENT = "commencement"
    OTHER = "other"

    @classmethod
    def from_code(cls, code: Optional[str]) -> "AmendmentKind":
        """Map a commentary type code (F, I, C, M, ...) to a kind."""
        normalized = (code or "").strip().upper()
        if normalized == "F":
            return cls.TEXTUAL
        if normalized == "I":
            return cls.COMMENCEMENT
        return cls.OTHER

    @property
    def heading(self) -> str:
        return {
            AmendmentKind.TEXTUAL: "Textual Amendments",
            AmendmentKind.COMMENCEMENT: "Commencement Information",
            AmendmentKind.OTHER: "Other Annotations",
        }[self]


@dataclass
class AmendmentNote:
    """One commentary block referenced from a provision."""
    kind: AmendmentKind
    title: str
    body: str

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "title": self.title,
            "body": self.body,
        }


@dataclass
class ProvisionContent:
    """Cleaned provision markup with amendment notes kept separate."""
    sanitized_body: str
    amendments: list[AmendmentNote] = field(default_factory=list)

    def amendments_of(self, kind: AmendmentKind) -> list[AmendmentNote]:
        return [a for a in self.amendments if a.kind is kind]

    def to_dict(self) -> dict:
        return {
            "sanitized_body": self.sanitized_body,
            "amendments": [a.to_dict() for a in self.amendments],
        }
