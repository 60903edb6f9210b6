"""Grounded chat: retrieve, assemble context, ask the model.

Dependency-injection note
-------------------------
``ChatService`` is handed its vector store and chat model; it never
builds either itself.  The serving layer wires the production
collaborators, tests pass fakes.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, Literal
from uuid import uuid4

from pydantic import BaseModel, Field

from markdown_rag.agent.prompts import build_chat_messages
from markdown_rag.config import settings
from markdown_rag.retrieval.context import build_context
from markdown_rag.retrieval.models import SourceSummary

if TYPE_CHECKING:
    from langchain_core.language_models import BaseChatModel

    from markdown_rag.retrieval.base import VectorStoreBase

logger = logging.getLogger(__name__)

FALLBACK_REPLY = "I apologize, but I was unable to generate a response."


def _message_text(content: str | list[Any]) -> str:
    """Flatten a completion into plain text, joining any text content blocks."""
    if isinstance(content, str):
        return content
    parts: list[str] = []
    for block in content:
        if isinstance(block, str):
            parts.append(block)
        elif isinstance(block, dict) and block.get("type") == "text":
            parts.append(block.get("text", ""))
    return "".join(parts)


class ChatMessage(BaseModel):
    """One prior turn of the conversation."""

    role: Literal["system", "user", "assistant"]
    content: str


class ChatReply(BaseModel):
    """The assistant's answer plus the sources it was grounded on."""

    id: str = Field(default_factory=lambda: str(uuid4()))
    role: Literal["assistant"] = "assistant"
    content: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    sources: list[SourceSummary] | None = None


class ChatService:
    """Answer questions from the indexed documents.

    Parameters
    ----------
    store:
        Vector store searched for context.
    llm:
        LangChain chat model producing the completion.
    context_limit:
        Number of hits requested from the store per question.
    """

    def __init__(
        self,
        store: VectorStoreBase,
        llm: BaseChatModel,
        *,
        context_limit: int | None = None,
    ) -> None:
        self._store = store
        self._llm = llm
        self.context_limit = settings.chat_context_limit if context_limit is None else context_limit

    def answer(self, message: str, history: list[ChatMessage] | None = None) -> ChatReply:
        """Search, build the grounding prompt and return the model's reply.

        Store and model failures propagate unchanged.  Zero hits is not an
        error: the model is told it has no document context.
        """
        message = message.strip()
        hits = self._store.search_documents(message, n_results=self.context_limit)
        context, sources = build_context(hits)
        if not hits:
            logger.info("No document context found for %r", message)

        response = self._llm.invoke(build_chat_messages(context, history or [], message))
        content = _message_text(response.content)
        if not content:
            logger.warning("Model returned an empty completion; using fallback reply")
            content = FALLBACK_REPLY

        return ChatReply(content=content, sources=sources or None)
