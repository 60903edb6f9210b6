"""Abstract base class for vector-store backends.

Adding a new backend (Pinecone, Qdrant …) only requires subclassing
:class:`VectorStoreBase` and implementing the abstract methods.  The
rest of the stack only ever sees chunks going in and
:class:`~markdown_rag.retrieval.models.SearchResult` records coming out,
never the backend's parallel ``ids`` / ``documents`` / ``metadatas``
arrays.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from markdown_rag.retrieval.models import SearchResult

if TYPE_CHECKING:
    from markdown_rag.ingestion.models import Chunk


class VectorStoreBase(ABC):
    """Backend-agnostic vector-store interface.

    Parameters
    ----------
    collection_name:
        Logical name of the collection / index / namespace.
    """

    def __init__(self, collection_name: str) -> None:
        self.collection_name = collection_name

    # -- required overrides ---------------------------------------------------

    @abstractmethod
    def add_documents(
        self,
        chunks: list[Chunk],
        *,
        extra_metadata: dict[str, Any] | None = None,
    ) -> None:
        """Embed and persist *chunks*.

        *extra_metadata* (e.g. ``documentId``, ``uploadedAt``) is merged
        into every chunk's metadata record.
        """
        ...

    @abstractmethod
    def search_documents(self, query_text: str, *, n_results: int = 5) -> list[SearchResult]:
        """Return up to *n_results* hits, most relevant first."""
        ...

    @abstractmethod
    def list_metadatas(self) -> list[dict[str, Any]]:
        """Return the metadata record of every stored chunk."""
        ...

    @abstractmethod
    def clear(self) -> None:
        """Drop every chunk in the collection."""
        ...

    @abstractmethod
    def health_check(self) -> bool:
        """Return ``True`` when the backend is reachable and ready."""
        ...
