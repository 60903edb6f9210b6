"""Domain models for search hits and citation-ready source summaries."""

from __future__ import annotations

from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, Field

UNKNOWN = "Unknown"


class SearchResultMetadata(BaseModel):
    """Chunk metadata as returned by the vector store.

    Only the fields read by the retrieval layer are declared; anything
    else stored alongside a chunk (``chunkIndex``, ``documentId`` …) is
    kept as extra data.
    """

    model_config = ConfigDict(extra="allow")

    filename: str | None = None
    section: str | None = None
    headers: list[str | None] | None = None


class SearchResult(BaseModel):
    """A single ranked hit.

    ``distance`` is a dissimilarity score from the embedding space
    (0 = identical); it is passed through, never normalised.
    """

    id: str
    content: str = ""
    metadata: SearchResultMetadata = Field(default_factory=SearchResultMetadata)
    distance: float | None = None


class SourceMetadata(BaseModel):
    filename: str = UNKNOWN
    section: str = UNKNOWN
    headers: list[str | None] = Field(default_factory=list)
    distance: float = 1.0


class SourceSummary(BaseModel):
    """Preview of a hit shown to the end user as a citation."""

    id: str
    content: str
    metadata: SourceMetadata


class ChatContext(NamedTuple):
    """Prompt-ready context block plus the parallel list of sources."""

    context: str
    sources: list[SourceSummary]
