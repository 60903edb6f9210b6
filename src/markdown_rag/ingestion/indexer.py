"""Index documents into a vector store and track their status.

This is the calling layer that owns the ``processing → completed |
error`` lifecycle; the processing functions themselves stay pure.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Iterable

from markdown_rag.ingestion.models import Document, DocumentStatus
from markdown_rag.ingestion.processor import DocumentProcessor
from markdown_rag.ingestion.validation import ensure_valid

if TYPE_CHECKING:
    from markdown_rag.retrieval.base import VectorStoreBase

logger = logging.getLogger(__name__)


class DocumentIndexer:
    """Validate, chunk and store Markdown documents one at a time.

    Parameters
    ----------
    store:
        Vector store receiving the chunks.
    processor:
        Processing configuration.  Defaults to a settings-driven
        :class:`DocumentProcessor`.
    """

    def __init__(self, store: VectorStoreBase, processor: DocumentProcessor | None = None) -> None:
        self._store = store
        self._processor = processor or DocumentProcessor()

    def index(self, content: str, filename: str) -> Document:
        """Index one document and return it with status ``completed``.

        Raises
        ------
        EmptyContentError, TooLargeError
            When validation rejects *content*.  Nothing is stored.
        Exception
            Whatever the vector store raises, unchanged.
        """
        document = Document(filename=filename)

        ensure_valid(content, max_bytes=self._processor.max_content_bytes)

        processed = self._processor.process_markdown(content, filename)
        document.metadata = self._processor.extract_metadata(content)

        self._store.add_documents(
            processed.chunks,
            extra_metadata={
                "documentId": document.id,
                "uploadedAt": document.uploaded_at.isoformat(),
            },
        )
        document.chunks = processed.chunks
        document.status = DocumentStatus.COMPLETED
        logger.info("Indexed %s as %s (%d chunks)", filename, document.id, len(processed.chunks))
        return document

    def index_files(self, paths: Iterable[str | Path]) -> list[Document]:
        """Index *paths* strictly one after another.

        A failing file is returned with status ``error`` and does not
        stop the remaining files.
        """
        documents: list[Document] = []
        for path in paths:
            path = Path(path)
            try:
                content = path.read_text(encoding="utf-8")
                documents.append(self.index(content, path.name))
            except Exception as exc:
                logger.exception("Failed to index %s", path)
                documents.append(
                    Document(
                        filename=path.name,
                        status=DocumentStatus.ERROR,
                        error=str(exc),
                    )
                )
        return documents
