"""
Ingestion — validation, section splitting, chunking and metadata.

Every function here is a pure transformation of its inputs plus fixed
configuration; nothing reaches into the vector store or a model except
:class:`~markdown_rag.ingestion.indexer.DocumentIndexer`, which is handed
its store explicitly.
"""

from markdown_rag.ingestion.chunker import chunk_document, chunk_section
from markdown_rag.ingestion.indexer import DocumentIndexer
from markdown_rag.ingestion.metadata import extract_metadata
from markdown_rag.ingestion.models import (
    Chunk,
    ChunkMetadata,
    Document,
    DocumentMetadata,
    DocumentStatus,
    ProcessedDocument,
    Section,
    ValidationErrorKind,
    ValidationResult,
)
from markdown_rag.ingestion.processor import DocumentProcessor
from markdown_rag.ingestion.sections import split_sections
from markdown_rag.ingestion.validation import ensure_valid, validate

__all__ = [
    "Chunk",
    "ChunkMetadata",
    "Document",
    "DocumentIndexer",
    "DocumentMetadata",
    "DocumentProcessor",
    "DocumentStatus",
    "ProcessedDocument",
    "Section",
    "ValidationErrorKind",
    "ValidationResult",
    "chunk_document",
    "chunk_section",
    "ensure_valid",
    "extract_metadata",
    "split_sections",
    "validate",
]
