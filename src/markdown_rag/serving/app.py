"""FastAPI application exposing document upload, search and grounded chat."""

from __future__ import annotations

import logging
from collections import OrderedDict
from contextlib import asynccontextmanager
from functools import lru_cache
from pathlib import Path
from typing import Any, AsyncIterator

from fastapi import Depends, FastAPI, File, UploadFile
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
from fastapi.concurrency import run_in_threadpool

from markdown_rag.agent.chat import ChatMessage, ChatService
from markdown_rag.config import settings
from markdown_rag.exceptions import ValidationFailedError
from markdown_rag.ingestion.indexer import DocumentIndexer
from markdown_rag.retrieval.base import VectorStoreBase
from markdown_rag.retrieval.context import to_search_results

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    logging.basicConfig(level=settings.log_level)
    yield


app = FastAPI(
    title="Markdown RAG API",
    version="0.1.0",
    description="Upload Markdown documents, search them, and chat grounded on them.",
    lifespan=lifespan,
)


# ── Collaborators ─────────────────────────────────────────────────────
@lru_cache(maxsize=1)
def get_vector_store() -> VectorStoreBase:
    """Process-wide Chroma store, created on first use."""
    from markdown_rag.retrieval.chroma_store import ChromaVectorStore

    return ChromaVectorStore()


@lru_cache(maxsize=1)
def get_chat_model() -> Any:
    from markdown_rag.agent.llm import get_llm

    return get_llm()


def get_indexer(store: VectorStoreBase = Depends(get_vector_store)) -> DocumentIndexer:
    return DocumentIndexer(store)


def get_chat_service(
    store: VectorStoreBase = Depends(get_vector_store),
    llm: Any = Depends(get_chat_model),
) -> ChatService:
    return ChatService(store, llm)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


# ── Request schemas ───────────────────────────────────────────────────
class SearchRequest(BaseModel):
    query: str = ""
    limit: int = Field(default=settings.search_limit_default, ge=1)


class ChatRequest(BaseModel):
    message: str = ""
    messages: list[ChatMessage] = Field(default_factory=list)


# ── Routes ────────────────────────────────────────────────────────────
@app.get("/health")
async def health() -> dict[str, str]:
    """Liveness probe."""
    return {"status": "ok"}


@app.post("/documents/upload")
async def upload_document(
    file: UploadFile | None = File(default=None),
    indexer: DocumentIndexer = Depends(get_indexer),
) -> Any:
    """Validate, chunk and index one Markdown file."""
    if file is None or not file.filename:
        return _error(400, "No file provided")

    if Path(file.filename).suffix.lower() not in settings.allowed_extensions:
        return _error(400, "Only Markdown files are supported")

    too_large = f"File too large (max {settings.max_upload_bytes // (1024 * 1024)}MB)"
    if file.size is not None and file.size > settings.max_upload_bytes:
        return _error(400, too_large)

    raw = await file.read()
    if len(raw) > settings.max_upload_bytes:
        return _error(400, too_large)

    try:
        content = raw.decode("utf-8")
    except UnicodeDecodeError:
        return _error(400, "File is not valid UTF-8 text")

    try:
        document = await run_in_threadpool(indexer.index, content, file.filename)
    except ValidationFailedError as exc:
        return _error(400, str(exc))
    except Exception:
        logger.exception("Error processing document upload: %s", file.filename)
        return _error(500, "Failed to process document")

    return {
        "success": True,
        "documentId": document.id,
        "filename": document.filename,
        "chunks": document.chunk_count,
        "metadata": document.metadata.model_dump(by_alias=True, exclude_none=True),
    }


@app.get("/documents/list")
def list_documents(store: VectorStoreBase = Depends(get_vector_store)) -> Any:
    """Group stored chunks by the document they came from, newest first."""
    try:
        metadatas = store.list_metadatas()
    except Exception:
        logger.exception("Error listing documents")
        return _error(500, "Failed to list documents")

    documents: OrderedDict[str, dict[str, Any]] = OrderedDict()
    for meta in metadatas:
        doc_id = meta.get("documentId")
        if doc_id not in documents:
            documents[doc_id] = {
                "id": doc_id,
                "filename": meta.get("filename"),
                "uploadedAt": meta.get("uploadedAt"),
                "status": "completed",
                "metadata": {"wordCount": 0, "chunkCount": 0},
            }
        summary = documents[doc_id]["metadata"]
        summary["wordCount"] += meta.get("wordCount") or 0
        summary["chunkCount"] += 1

    ordered = sorted(documents.values(), key=lambda d: d["uploadedAt"] or "", reverse=True)
    return {"success": True, "documents": ordered}


@app.delete("/documents/clear")
def clear_documents(store: VectorStoreBase = Depends(get_vector_store)) -> Any:
    """Drop every indexed chunk."""
    try:
        store.clear()
    except Exception:
        logger.exception("Error clearing documents")
        return _error(500, "Failed to clear documents")
    return {"success": True}


@app.post("/search")
def search(request: SearchRequest, store: VectorStoreBase = Depends(get_vector_store)) -> Any:
    """Semantic search over the indexed chunks."""
    query = request.query.strip()
    if not query:
        return _error(400, "Query is required")

    try:
        hits = store.search_documents(query, n_results=min(request.limit, settings.search_limit_max))
    except Exception:
        logger.exception("Error performing search for %r", query)
        return _error(500, "Failed to perform search")

    results = [hit.model_dump() for hit in to_search_results(hits)]
    return {"success": True, "results": results, "query": query, "totalResults": len(results)}


@app.post("/chat")
def chat(request: ChatRequest, service: ChatService = Depends(get_chat_service)) -> Any:
    """Answer *message* from the indexed documents."""
    if not request.message.strip():
        return _error(400, "Message is required")

    try:
        reply = service.answer(request.message, request.messages)
    except Exception:
        logger.exception("Error in chat endpoint")
        return _error(500, "Failed to generate response")

    return {"success": True, "message": reply.model_dump(mode="json", exclude_none=True)}


def main() -> None:
    """Run the API with uvicorn."""
    import uvicorn

    uvicorn.run(app, host=settings.api_host, port=settings.api_port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
