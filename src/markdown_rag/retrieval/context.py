"""Turn ranked search hits into a prompt context block and source list."""

from __future__ import annotations

from typing import Any, Iterable

from markdown_rag.retrieval.models import (
    UNKNOWN,
    ChatContext,
    SearchResult,
    SearchResultMetadata,
    SourceMetadata,
    SourceSummary,
)

PREVIEW_CHARS = 200
ELLIPSIS = "..."
BLOCK_SEPARATOR = "\n\n"


def _preview(content: str) -> str:
    if len(content) > PREVIEW_CHARS:
        return content[:PREVIEW_CHARS] + ELLIPSIS
    return content


def format_block(hit: SearchResult) -> str:
    """Render one hit as ``Source: <file> - <section>`` followed by its text."""
    filename = hit.metadata.filename or UNKNOWN
    section = hit.metadata.section or UNKNOWN
    return f"Source: {filename} - {section}\n{hit.content}\n---"


def summarize_source(hit: SearchResult) -> SourceSummary:
    """Build the citation preview for *hit* (content cut to 200 chars)."""
    return SourceSummary(
        id=hit.id,
        content=_preview(hit.content),
        metadata=SourceMetadata(
            filename=hit.metadata.filename or UNKNOWN,
            section=hit.metadata.section or UNKNOWN,
            headers=hit.metadata.headers or [],
            distance=1.0 if hit.distance is None else hit.distance,
        ),
    )


def build_context(hits: Iterable[SearchResult | dict[str, Any]]) -> ChatContext:
    """Assemble the grounding context for a chat completion.

    Parameters
    ----------
    hits:
        Ranked search hits, most relevant first.  Plain dicts with the
        :class:`SearchResult` shape are accepted too.  Order is preserved;
        the number of hits is the caller's concern.

    Returns
    -------
    ChatContext
        ``("", [])`` for no hits, otherwise the blank-line-joined blocks
        (full content) and one :class:`SourceSummary` per hit (preview).
    """
    results = [hit if isinstance(hit, SearchResult) else SearchResult.model_validate(hit) for hit in hits]
    if not results:
        return ChatContext("", [])

    context = BLOCK_SEPARATOR.join(format_block(hit) for hit in results)
    sources = [summarize_source(hit) for hit in results]
    return ChatContext(context, sources)


def to_search_results(hits: Iterable[SearchResult]) -> list[SearchResult]:
    """Normalise hits for a direct search listing.

    Full content is kept; missing filename / section become
    ``"Unknown"``, missing headers ``[]`` and a missing distance ``1.0``.
    """
    normalised: list[SearchResult] = []
    for hit in hits:
        meta = hit.metadata.model_dump()
        meta.update(
            filename=hit.metadata.filename or UNKNOWN,
            section=hit.metadata.section or UNKNOWN,
            headers=hit.metadata.headers or [],
        )
        normalised.append(
            SearchResult(
                id=hit.id,
                content=hit.content,
                metadata=SearchResultMetadata(**meta),
                distance=1.0 if hit.distance is None else hit.distance,
            )
        )
    return normalised
