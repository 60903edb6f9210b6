"""Split Markdown into heading-delimited sections."""

from __future__ import annotations

import re

from markdown_rag.ingestion.models import Section

HEADING_RE = re.compile(r"^(#{1,6})\s+(.+)$")

DEFAULT_SECTION = "Introduction"


def split_sections(content: str) -> list[Section]:
    """Break *content* into ordered :class:`Section` objects.

    Each heading line starts a new section and stays at the top of that
    section's content.  The header stack follows outline semantics: a
    level-*n* heading drops every header at level *n* or deeper before
    taking slot *n*.  Levels that were skipped stay ``None``.

    Sections whose trimmed content is empty are discarded.
    """
    sections: list[Section] = []
    headers: list[str | None] = []
    buffer: list[str] = []
    current = DEFAULT_SECTION

    def flush() -> None:
        sections.append(
            Section(headers=list(headers), content="\n".join(buffer).strip(), section=current)
        )

    for line in content.split("\n"):
        match = HEADING_RE.match(line.rstrip("\r"))
        if match:
            if buffer:
                flush()
                buffer = []

            level = len(match.group(1))
            text = match.group(2)

            del headers[level - 1 :]
            headers.extend([None] * (level - 1 - len(headers)))
            headers.append(text)
            current = text

        buffer.append(line)

    if buffer:
        flush()

    return [s for s in sections if s.content.strip()]
