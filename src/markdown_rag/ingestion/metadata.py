"""Document-level metadata extraction."""

from __future__ import annotations

import re

from markdown_rag.ingestion.models import DocumentMetadata

_TITLE_RE = re.compile(r"^#\s+(.+)$")

DESCRIPTION_MAX_CHARS = 200
DESCRIPTION_MIN_CHARS = 20
ELLIPSIS = "..."

_NON_PROSE_PREFIXES = ("#", "```", "---")


def extract_metadata(content: str) -> DocumentMetadata:
    """Derive title, description and word count from a whole document.

    * ``title`` — text of the first level-1 heading.
    * ``description`` — first non-empty line that is not a heading, code
      fence or horizontal rule, cut to 200 characters plus ``"..."``.
      Omitted when that line is 20 characters or shorter.
    * ``word_count`` — whitespace tokens in the whole document.
    """
    lines = content.split("\n")

    title = None
    for line in lines:
        match = _TITLE_RE.match(line.rstrip("\r"))
        if match:
            title = match.group(1)
            break

    description = None
    first_paragraph = next(
        (line for line in lines if line.strip() and not line.startswith(_NON_PROSE_PREFIXES)),
        None,
    )
    if first_paragraph is not None and len(first_paragraph) > DESCRIPTION_MIN_CHARS:
        description = first_paragraph[:DESCRIPTION_MAX_CHARS]
        if len(first_paragraph) > DESCRIPTION_MAX_CHARS:
            description += ELLIPSIS

    return DocumentMetadata(title=title, description=description, word_count=len(content.split()))
