"""Unit tests for DocumentProcessor and DocumentIndexer."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from conftest import FakeVectorStore

from markdown_rag.exceptions import EmptyContentError, TooLargeError
from markdown_rag.ingestion.indexer import DocumentIndexer
from markdown_rag.ingestion.models import DocumentStatus
from markdown_rag.ingestion.processor import DocumentProcessor
from markdown_rag.ingestion.validation import NOT_MARKDOWN_WARNING

SAMPLE = "# Guide\nThis guide explains how the indexing service works end to end.\n## Setup\nInstall it."


class TestDocumentProcessor:
    def test_process_markdown(self) -> None:
        processed = DocumentProcessor().process_markdown(SAMPLE, "guide.md")
        assert processed.filename == "guide.md"
        assert processed.total_chunks == len(processed.chunks) == 2
        assert [c.metadata.section for c in processed.chunks] == ["Guide", "Setup"]

    def test_configured_sizes(self) -> None:
        processor = DocumentProcessor(max_chunk_size=4, overlap_size=1)
        processed = processor.process_markdown(" ".join(["w"] * 10), "plain.md")
        assert processed.total_chunks == 3

    def test_rejects_bad_sizes(self) -> None:
        with pytest.raises(ValueError):
            DocumentProcessor(max_chunk_size=5, overlap_size=5)

    def test_validate_uses_configured_ceiling(self) -> None:
        assert not DocumentProcessor(max_content_bytes=3).validate("abcd").is_valid

    def test_extract_metadata(self) -> None:
        assert DocumentProcessor().extract_metadata(SAMPLE).title == "Guide"


class TestDocumentIndexer:
    def test_index_stores_chunks_with_document_metadata(self, fake_store: FakeVectorStore) -> None:
        document = DocumentIndexer(fake_store).index(SAMPLE, "guide.md")

        assert document.status is DocumentStatus.COMPLETED
        assert document.chunk_count == 2
        assert document.metadata.title == "Guide"
        assert len(fake_store.records) == 2
        for record in fake_store.records:
            assert record["metadata"]["documentId"] == document.id
            assert record["metadata"]["uploadedAt"] == document.uploaded_at.isoformat()

    def test_empty_content_stores_nothing(self, fake_store: FakeVectorStore) -> None:
        with pytest.raises(EmptyContentError):
            DocumentIndexer(fake_store).index("   ", "blank.md")
        assert fake_store.records == []

    def test_too_large(self, fake_store: FakeVectorStore) -> None:
        indexer = DocumentIndexer(fake_store, DocumentProcessor(max_content_bytes=10))
        with pytest.raises(TooLargeError):
            indexer.index("# far too long for the ceiling", "big.md")

    def test_store_failure_propagates(self, fake_store: FakeVectorStore) -> None:
        fake_store.fail_with = RuntimeError("embedding service timeout")
        with pytest.raises(RuntimeError, match="timeout"):
            DocumentIndexer(fake_store).index(SAMPLE, "guide.md")

    def test_index_files_is_sequential_and_isolates_errors(
        self, tmp_path: Path, fake_store: FakeVectorStore
    ) -> None:
        (tmp_path / "a.md").write_text(SAMPLE)
        (tmp_path / "empty.md").write_text("\n")
        (tmp_path / "b.md").write_text("# Other\nbody")

        documents = DocumentIndexer(fake_store).index_files(
            [tmp_path / "a.md", tmp_path / "empty.md", tmp_path / "b.md"]
        )

        assert [d.status for d in documents] == [
            DocumentStatus.COMPLETED,
            DocumentStatus.ERROR,
            DocumentStatus.COMPLETED,
        ]
        assert documents[1].error == "Content is empty"
        filenames = [r["metadata"]["filename"] for r in fake_store.records]
        assert filenames == ["a.md", "a.md", "b.md"]


class TestIndexerLogging:
    def test_plain_text_warning_logged_once(
        self, fake_store: FakeVectorStore, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.INFO):
            DocumentIndexer(fake_store).index("just some plain words", "plain.md")
        assert caplog.text.count(NOT_MARKDOWN_WARNING) == 1
