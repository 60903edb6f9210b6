"""Chroma implementation of the vector-store abstraction."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

import chromadb

from markdown_rag.config import settings
from markdown_rag.retrieval.base import VectorStoreBase
from markdown_rag.retrieval.models import SearchResult, SearchResultMetadata

if TYPE_CHECKING:
    from langchain_core.embeddings import Embeddings

    from markdown_rag.ingestion.models import Chunk

logger = logging.getLogger(__name__)


def _encode_metadata(metadata: dict[str, Any]) -> dict[str, Any]:
    """Make a metadata record acceptable to Chroma (scalar values only).

    ``None`` values are dropped and lists are stored as JSON strings.
    """
    encoded: dict[str, Any] = {}
    for key, value in metadata.items():
        if value is None:
            continue
        if isinstance(value, (list, dict)):
            value = json.dumps(value)
        encoded[key] = value
    return encoded


def _decode_metadata(metadata: dict[str, Any] | None) -> dict[str, Any]:
    decoded = dict(metadata or {})
    headers = decoded.get("headers")
    if isinstance(headers, str):
        try:
            decoded["headers"] = json.loads(headers)
        except json.JSONDecodeError:
            logger.warning("Ignoring undecodable headers metadata: %r", headers)
            decoded.pop("headers")
    return decoded


class ChromaVectorStore(VectorStoreBase):
    """Chroma-backed vector store.

    Parameters
    ----------
    collection_name:
        Name of the Chroma collection.
    client:
        Pre-built Chroma client.  When *None*, an ``HttpClient`` is
        created for *host* / *port*.
    embeddings:
        LangChain embeddings used for both chunks and queries.  When
        *None*, a ``HuggingFaceEmbeddings`` for *embedding_model* is built.
    """

    def __init__(
        self,
        collection_name: str | None = None,
        *,
        client: Any = None,
        embeddings: Embeddings | None = None,
        host: str | None = None,
        port: int | None = None,
        embedding_model: str | None = None,
    ) -> None:
        super().__init__(collection_name or settings.chroma_collection)
        if client is None:
            client = chromadb.HttpClient(
                host=host or settings.chroma_host,
                port=port or settings.chroma_port,
            )
        if embeddings is None:
            from langchain_huggingface import HuggingFaceEmbeddings

            embeddings = HuggingFaceEmbeddings(model_name=embedding_model or settings.embedding_model)
        self._client = client
        self._embeddings = embeddings
        self._collection = self._client.get_or_create_collection(self.collection_name)

    # -- VectorStoreBase overrides --------------------------------------------

    def add_documents(
        self,
        chunks: list[Chunk],
        *,
        extra_metadata: dict[str, Any] | None = None,
    ) -> None:
        if not chunks:
            return

        ids = [chunk.id for chunk in chunks]
        documents = [chunk.content for chunk in chunks]
        metadatas = [
            _encode_metadata({**chunk.metadata.to_record(), **(extra_metadata or {})})
            for chunk in chunks
        ]
        embeddings = self._embeddings.embed_documents(documents)

        self._collection.add(
            ids=ids,
            documents=documents,
            metadatas=metadatas,
            embeddings=embeddings,
        )
        logger.info("Added %d chunks to collection %r", len(chunks), self.collection_name)

    def search_documents(self, query_text: str, *, n_results: int = 5) -> list[SearchResult]:
        embedding = self._embeddings.embed_query(query_text)
        results = self._collection.query(
            query_embeddings=[embedding],
            n_results=n_results,
            include=["documents", "metadatas", "distances"],
        )

        ids = (results.get("ids") or [[]])[0]
        docs = (results.get("documents") or [[]])[0]
        metas = (results.get("metadatas") or [[]])[0]
        distances = (results.get("distances") or [[]])[0]

        hits: list[SearchResult] = []
        for doc_id, content, meta, dist in zip(ids, docs, metas, distances):
            hits.append(
                SearchResult(
                    id=doc_id,
                    content=content or "",
                    metadata=SearchResultMetadata(**_decode_metadata(meta)),
                    distance=dist,
                )
            )
        logger.debug("Query %r returned %d hits", query_text, len(hits))
        return hits

    def list_metadatas(self) -> list[dict[str, Any]]:
        results = self._collection.get(include=["metadatas"])
        return [_decode_metadata(meta) for meta in results.get("metadatas") or []]

    def clear(self) -> None:
        self._client.delete_collection(self.collection_name)
        self._collection = self._client.get_or_create_collection(self.collection_name)
        logger.info("Cleared collection %r", self.collection_name)

    def health_check(self) -> bool:
        try:
            self._client.heartbeat()
            return True
        except Exception:
            logger.warning("Chroma health-check failed", exc_info=True)
            return False
