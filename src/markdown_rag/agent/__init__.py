"""
Agent — grounded chat over the indexed documents.

Public API
----------
- :class:`ChatService` — search → context assembly → chat completion.
- :func:`get_llm` — configured chat model.
- :func:`build_chat_messages` — fixed grounding prompt + conversation.
"""

from markdown_rag.agent.chat import ChatMessage, ChatReply, ChatService
from markdown_rag.agent.llm import get_llm
from markdown_rag.agent.prompts import build_chat_messages, build_system_prompt

__all__ = [
    "ChatMessage",
    "ChatReply",
    "ChatService",
    "build_chat_messages",
    "build_system_prompt",
    "get_llm",
]
