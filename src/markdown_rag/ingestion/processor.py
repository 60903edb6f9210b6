"""DocumentProcessor — one object bundling the pure processing steps."""

from __future__ import annotations

from markdown_rag.config import settings
from markdown_rag.ingestion.chunker import check_window_sizes, chunk_document
from markdown_rag.ingestion.metadata import extract_metadata
from markdown_rag.ingestion.models import DocumentMetadata, ProcessedDocument, ValidationResult
from markdown_rag.ingestion.validation import validate


class DocumentProcessor:
    """Validate, chunk and summarise Markdown documents.

    Holds only configuration, so one instance can be shared across
    threads and requests.

    Parameters
    ----------
    max_chunk_size:
        Maximum words per chunk.
    overlap_size:
        Words shared by consecutive chunks of the same section.
    max_content_bytes:
        Byte ceiling enforced by :meth:`validate`.
    """

    def __init__(
        self,
        *,
        max_chunk_size: int | None = None,
        overlap_size: int | None = None,
        max_content_bytes: int | None = None,
    ) -> None:
        self.max_chunk_size = settings.max_chunk_size if max_chunk_size is None else max_chunk_size
        self.overlap_size = settings.overlap_size if overlap_size is None else overlap_size
        self.max_content_bytes = (
            settings.max_content_bytes if max_content_bytes is None else max_content_bytes
        )
        check_window_sizes(self.max_chunk_size, self.overlap_size)

    def validate(self, content: str) -> ValidationResult:
        return validate(content, max_bytes=self.max_content_bytes)

    def extract_metadata(self, content: str) -> DocumentMetadata:
        return extract_metadata(content)

    def process_markdown(self, content: str, filename: str) -> ProcessedDocument:
        """Chunk *content*; chunk indices start at 0 for every document."""
        chunks = chunk_document(
            content,
            filename,
            max_chunk_size=self.max_chunk_size,
            overlap_size=self.overlap_size,
        )
        return ProcessedDocument(filename=filename, chunks=chunks, total_chunks=len(chunks))
