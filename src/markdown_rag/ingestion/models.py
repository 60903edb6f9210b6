"""Domain models for ingested documents, sections and chunks.

Persisted / wire-facing records are Pydantic models that serialise with
camelCase aliases (``chunkIndex``, ``wordCount``) so the metadata shape
stored in the vector index matches what the HTTP layer returns.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field


@dataclass(frozen=True)
class Section:
    """A heading-delimited region of a document.

    Attributes
    ----------
    headers:
        One slot per heading level (index 0 is level 1).  Levels skipped
        by the document are ``None``; they are never backfilled.
    content:
        Trimmed section text, including its own heading line.
    section:
        Display name: nearest heading text, or ``"Introduction"``.
    """

    headers: list[str | None] = field(default_factory=list)
    content: str = ""
    section: str = "Introduction"


class ChunkMetadata(BaseModel):
    """Metadata attached to every chunk sent to the vector store.

    ``headers`` is only populated for sections that were split into more
    than one chunk; single-chunk sections leave it unset.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    filename: str
    chunk_index: int = Field(alias="chunkIndex", ge=0)
    section: str
    headers: list[str | None] | None = None
    word_count: int = Field(alias="wordCount", ge=0)

    def to_record(self) -> dict[str, Any]:
        """Return the camelCase dict persisted next to the chunk."""
        return self.model_dump(by_alias=True, exclude_none=True)


class Chunk(BaseModel):
    """A bounded, indexable slice of a document plus its metadata."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: str(uuid4()))
    content: str
    metadata: ChunkMetadata


class DocumentMetadata(BaseModel):
    """Document-level summary attributes, independent of chunking."""

    model_config = ConfigDict(populate_by_name=True)

    title: str | None = None
    description: str | None = None
    word_count: int = Field(default=0, alias="wordCount")


class ProcessedDocument(BaseModel):
    """Result of running a Markdown document through the chunking pipeline."""

    model_config = ConfigDict(populate_by_name=True)

    filename: str
    chunks: list[Chunk] = Field(default_factory=list)
    total_chunks: int = Field(default=0, alias="totalChunks")


class DocumentStatus(str, Enum):
    PROCESSING = "processing"
    COMPLETED = "completed"
    ERROR = "error"


class Document(BaseModel):
    """One uploaded unit and its lifecycle status.

    The status is managed by the indexing layer; the pure processing
    functions never touch it.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default_factory=lambda: str(uuid4()))
    filename: str
    uploaded_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc), alias="uploadedAt"
    )
    status: DocumentStatus = DocumentStatus.PROCESSING
    error: str | None = None
    metadata: DocumentMetadata = Field(default_factory=DocumentMetadata)
    chunks: list[Chunk] = Field(default_factory=list)

    @property
    def chunk_count(self) -> int:
        return len(self.chunks)


class ValidationErrorKind(str, Enum):
    EMPTY_CONTENT = "EmptyContent"
    TOO_LARGE = "TooLarge"


class ValidationResult(BaseModel):
    """Outcome of pre-flight validation.

    ``warnings`` is a non-fatal side channel: a valid result may still
    carry warnings (e.g. the text does not look like Markdown).
    """

    is_valid: bool
    error: ValidationErrorKind | None = None
    message: str | None = None
    warnings: list[str] = Field(default_factory=list)
