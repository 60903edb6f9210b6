"""
Retrieval — vector search and context assembly.

Public surface
--------------
- :class:`VectorStoreBase` — abstract backend.
- :class:`ChromaVectorStore` — default Chroma backend.
- :func:`build_context` — ranked hits → prompt context + source list.
- :class:`SearchResult`, :class:`SourceSummary`, :class:`ChatContext` — data models.
"""

from markdown_rag.retrieval.base import VectorStoreBase
from markdown_rag.retrieval.context import build_context, to_search_results
from markdown_rag.retrieval.models import ChatContext, SearchResult, SearchResultMetadata, SourceSummary

__all__ = [
    "ChatContext",
    "ChromaVectorStore",
    "SearchResult",
    "SearchResultMetadata",
    "SourceSummary",
    "VectorStoreBase",
    "build_context",
    "to_search_results",
]


def __getattr__(name: str):  # noqa: ANN001
    """Lazy-import ChromaVectorStore to avoid pulling in chromadb at import time."""
    if name == "ChromaVectorStore":
        from markdown_rag.retrieval.chroma_store import ChromaVectorStore

        return ChromaVectorStore
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
