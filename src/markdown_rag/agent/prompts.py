"""Prompt template for grounded chat.

The system prompt is fixed: it is not configurable per request.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from langchain_core.messages import AIMessage, HumanMessage, SystemMessage

if TYPE_CHECKING:
    from langchain_core.messages import BaseMessage

    from markdown_rag.agent.chat import ChatMessage

NO_CONTEXT_NOTICE = (
    "No document context is available for this question. "
    "Tell the user that no indexed documents matched, and do not cite any sources."
)

SYSTEM_PROMPT = """\
You are a helpful assistant that answers questions based on the provided context. \
Use the context to answer questions accurately and cite your sources when possible.

Context:
{context}

Instructions:
- Answer questions based only on the provided context
- If the answer isn't in the context, say so clearly
- Cite specific documents or sections when referencing information
- Be concise but comprehensive in your responses"""


def build_system_prompt(context: str) -> str:
    """Embed *context* in the grounding prompt.

    An empty context is replaced with an explicit notice so the model
    knows it has nothing to cite.
    """
    return SYSTEM_PROMPT.format(context=context or NO_CONTEXT_NOTICE)


_ROLE_TO_MESSAGE = {
    "system": SystemMessage,
    "user": HumanMessage,
    "assistant": AIMessage,
}


def build_chat_messages(
    context: str,
    history: Iterable[ChatMessage],
    message: str,
) -> list[BaseMessage]:
    """Return ``[system, *history, user]`` ready for ``llm.invoke``."""
    messages: list[BaseMessage] = [SystemMessage(content=build_system_prompt(context))]
    for turn in history:
        messages.append(_ROLE_TO_MESSAGE[turn.role](content=turn.content))
    messages.append(HumanMessage(content=message))
    return messages
