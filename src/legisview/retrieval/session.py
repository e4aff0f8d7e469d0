"""
Document session.

Holds the single active document view and drives the engine's control flow:

- open(): body retrieval and outline fetch run concurrently, then the TOC
  is built (heading fallback when needed) and the status classified
- activate(): the one shared "activate provision" operation, used by TOC
  clicks and cross-reference jumps alike; last request wins
- follow_reference(): resolve an in-text reference and activate it

Blocking fetches run in the default executor so the event loop stays free.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Optional, Union

from ..identifiers import DocumentIdentifier, changes_url, document_base_url, outline_url
from ..models import Outline, TOCNode, iter_toc
from ..parsers.provision import resolve_cross_reference
from ..parsers.toc import build_toc, filter_toc
from ..schemas import ContentResult, ProvisionResult, StatusBadge
from ..transport import Fetcher, FetchResponse, safe_fetch
from .config import RetrievalConfig
from .content import retrieve_content
from .provisions import retrieve_provision
from .status import status_badge


logger = logging.getLogger(__name__)


@dataclass
class OpenedDocument:
    """Everything the viewer needs to show a freshly opened document."""
    base_url: str
    content: ContentResult
    status: StatusBadge
    identifier: Optional[DocumentIdentifier] = None
    outline: Outline = field(default_factory=Outline)
    changes_url: str = ""

    @property
    def toc(self) -> list[TOCNode]:
        return self.outline.nodes

    @property
    def title(self) -> str:
        return self.outline.title


class DocumentSession:
    """The single active document view. Not shared across documents."""

    def __init__(self, fetcher: Fetcher, config: Optional[RetrievalConfig] = None):
        self.fetcher = fetcher
        self.config = config or RetrievalConfig.from_settings()
        self.document: Optional[OpenedDocument] = None
        self.current_provision: Optional[ProvisionResult] = None
        self._generation = 0
        self._pending: Optional[asyncio.Future] = None

    # ------------------------------------------------------------------
    # Document lifecycle
    # ------------------------------------------------------------------

    async def open(self, document: Union[DocumentIdentifier, str]) -> OpenedDocument:
        """Open a document: fetch body and outline concurrently, build TOC and status."""
        self.close()

        base_url = document_base_url(document, self.config.base_url)
        identifier = document if isinstance(document, DocumentIdentifier) else DocumentIdentifier.from_url(base_url)
        requested_url = document.url if isinstance(document, DocumentIdentifier) else document
        logger.info(f"[SESSION] Opening {requested_url} (base={base_url})")

        loop = asyncio.get_running_loop()
        if base_url:
            content, outline_response = await asyncio.gather(
                loop.run_in_executor(None, retrieve_content, self.fetcher, document, self.config),
                loop.run_in_executor(None, safe_fetch, self.fetcher, outline_url(base_url)),
            )
        else:
            content = await loop.run_in_executor(None, retrieve_content, self.fetcher, document, self.config)
            outline_response = FetchResponse(url="", ok=False, error="No document URL")

        outline_xml = outline_response.text if outline_response.ok else None
        page_url = content.url or base_url
        outline = build_toc(outline_xml, content.body, page_url)

        # Activations that ran while fetching belong to the previous document
        self._discard_pending()
        self.current_provision = None
        self.document = OpenedDocument(
            base_url=base_url,
            content=content,
            status=status_badge(outline.metadata, content.url or requested_url),
            identifier=identifier,
            outline=outline,
            changes_url=changes_url(base_url) if base_url else "",
        )
        logger.info(
            f"[SESSION] Opened {base_url}: content={'ok' if content.ok else 'failed'}, "
            f"toc={len(outline.nodes)} root node(s), status={self.document.status.status.value}"
        )
        return self.document

    def close(self) -> None:
        """Discard the current document, its TOC and any pending provision."""
        self._discard_pending()
        self.document = None
        self.current_provision = None

    def _discard_pending(self) -> None:
        self._generation += 1
        if self._pending is not None and not self._pending.done():
            self._pending.cancel()
        self._pending = None

    # ------------------------------------------------------------------
    # Provision navigation
    # ------------------------------------------------------------------

    async def activate(self, node: TOCNode) -> Optional[ProvisionResult]:
        """
        Fetch and show one provision.

        A newer activation supersedes this one: the superseded call returns
        None and never replaces current_provision.
        """
        self._discard_pending()
        generation = self._generation

        loop = asyncio.get_running_loop()
        future = loop.run_in_executor(None, retrieve_provision, self.fetcher, node, self.config)
        self._pending = future

        try:
            result = await future
        except asyncio.CancelledError:
            task = asyncio.current_task()
            if task is not None and task.cancelling():
                raise
            logger.info(f"[SESSION] Activation of '{node.id}' superseded")
            return None

        if generation != self._generation:
            logger.info(f"[SESSION] Discarding stale provision '{node.id}'")
            return None

        self._pending = None
        self.current_provision = result
        return result

    async def follow_reference(self, target: str) -> Optional[ProvisionResult]:
        """Jump to the provision a cross-reference names. Unresolved targets are inert."""
        if self.document is None:
            return None

        node = resolve_cross_reference(
            target,
            self.document.toc,
            self.document.identifier or self.document.base_url,
        )
        if node is None:
            logger.info(f"[SESSION] Reference '{target}' does not resolve in this document")
            return None

        logger.info(f"[SESSION] Reference '{target}' -> '{node.id}'")
        return await self.activate(node)

    # ------------------------------------------------------------------
    # TOC helpers
    # ------------------------------------------------------------------

    def filter_toc(self, query: str) -> list[TOCNode]:
        if self.document is None:
            return []
        return filter_toc(self.document.toc, query)

    def adjacent(self, node_id: str, step: int = 1) -> Optional[TOCNode]:
        """Previous (step=-1) or next (step=1) provision in reading order."""
        if self.document is None:
            return None

        flat = list(iter_toc(self.document.toc))
        for index, node in enumerate(flat):
            if node.id == node_id:
                neighbour = index + step
                if 0 <= neighbour < len(flat):
                    return flat[neighbour]
                return None
        return None
