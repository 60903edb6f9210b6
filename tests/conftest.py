"""Shared pytest configuration and fixtures."""

from __future__ import annotations

from typing import Any

import pytest

from markdown_rag.ingestion.models import Chunk
from markdown_rag.retrieval.base import VectorStoreBase
from markdown_rag.retrieval.models import SearchResult


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: marks tests requiring external services")


class FakeVectorStore(VectorStoreBase):
    """In-memory fake that records writes and returns canned hits."""

    def __init__(self, hits: list[SearchResult] | None = None) -> None:
        super().__init__("test-collection")
        self._hits: list[SearchResult] = hits or []
        self.records: list[dict[str, Any]] = []
        self.last_n_results: int | None = None
        self.fail_with: Exception | None = None

    def add_documents(
        self,
        chunks: list[Chunk],
        *,
        extra_metadata: dict[str, Any] | None = None,
    ) -> None:
        if self.fail_with is not None:
            raise self.fail_with
        for chunk in chunks:
            self.records.append(
                {
                    "id": chunk.id,
                    "content": chunk.content,
                    "metadata": {**chunk.metadata.to_record(), **(extra_metadata or {})},
                }
            )

    def search_documents(self, query_text: str, *, n_results: int = 5) -> list[SearchResult]:
        if self.fail_with is not None:
            raise self.fail_with
        self.last_n_results = n_results
        return self._hits[:n_results]

    def list_metadatas(self) -> list[dict[str, Any]]:
        return [record["metadata"] for record in self.records]

    def clear(self) -> None:
        self.records.clear()

    def health_check(self) -> bool:
        return True


@pytest.fixture()
def fake_store() -> FakeVectorStore:
    return FakeVectorStore()
