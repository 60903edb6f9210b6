"""Section-aware, word-window chunking."""

from __future__ import annotations

from markdown_rag.config import settings
from markdown_rag.ingestion.models import Chunk, ChunkMetadata, Section
from markdown_rag.ingestion.sections import split_sections


def check_window_sizes(max_chunk_size: int, overlap_size: int) -> None:
    if max_chunk_size <= 0:
        raise ValueError(f"max_chunk_size must be positive, got {max_chunk_size}")
    if overlap_size < 0:
        raise ValueError(f"overlap_size must not be negative, got {overlap_size}")
    if overlap_size >= max_chunk_size:
        raise ValueError(
            f"overlap_size ({overlap_size}) must be < max_chunk_size ({max_chunk_size})"
        )


def chunk_section(
    section: Section,
    filename: str,
    start_index: int = 0,
    *,
    max_chunk_size: int | None = None,
    overlap_size: int | None = None,
) -> list[Chunk]:
    """Split one section into overlapping word windows.

    Parameters
    ----------
    section:
        Section produced by :func:`~markdown_rag.ingestion.sections.split_sections`.
    filename:
        Source filename recorded in every chunk's metadata.
    start_index:
        ``chunkIndex`` of the first chunk emitted for this section.
    max_chunk_size:
        Maximum words per chunk (default ``settings.max_chunk_size``).
    overlap_size:
        Words repeated at the start of the next window
        (default ``settings.overlap_size``).

    Returns
    -------
    list[Chunk]
        One chunk when the section fits, otherwise windows advancing by
        ``max_chunk_size - overlap_size`` words until the last word is
        covered.
    """
    max_chunk_size = settings.max_chunk_size if max_chunk_size is None else max_chunk_size
    overlap_size = settings.overlap_size if overlap_size is None else overlap_size
    check_window_sizes(max_chunk_size, overlap_size)

    words = section.content.split()

    if len(words) <= max_chunk_size:
        # Single-chunk sections keep their original formatting and carry no headers.
        return [
            Chunk(
                content=section.content,
                metadata=ChunkMetadata(
                    filename=filename,
                    chunk_index=start_index,
                    section=section.section,
                    word_count=len(words),
                ),
            )
        ]

    chunks: list[Chunk] = []
    chunk_index = start_index
    start = 0
    while start < len(words):
        end = min(start + max_chunk_size, len(words))
        window = words[start:end]
        chunks.append(
            Chunk(
                content=" ".join(window),
                metadata=ChunkMetadata(
                    filename=filename,
                    chunk_index=chunk_index,
                    section=section.section,
                    headers=list(section.headers),
                    word_count=len(window),
                ),
            )
        )
        chunk_index += 1
        if end >= len(words):
            break
        start = max(end - overlap_size, 0)

    return chunks


def chunk_document(
    content: str,
    filename: str,
    *,
    max_chunk_size: int | None = None,
    overlap_size: int | None = None,
) -> list[Chunk]:
    """Split *content* into sections and chunk each one.

    ``chunkIndex`` runs continuously across section boundaries, starting
    at 0.  Chunks never overlap across sections.
    """
    chunks: list[Chunk] = []
    for section in split_sections(content):
        chunks.extend(
            chunk_section(
                section,
                filename,
                len(chunks),
                max_chunk_size=max_chunk_size,
                overlap_size=overlap_size,
            )
        )
    return chunks
