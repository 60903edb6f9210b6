"""Pre-flight content checks run before a document is chunked."""

from __future__ import annotations

import logging
import re

from markdown_rag.config import settings
from markdown_rag.exceptions import EmptyContentError, MalformedInputError, TooLargeError
from markdown_rag.ingestion.models import ValidationErrorKind, ValidationResult

logger = logging.getLogger(__name__)

# Any one of: heading, bold, emphasis, inline code / fence, link, bullet, numbered list.
_MARKDOWN_FEATURES = re.compile(
    r"^#{1,6}\s+|\*\*|\*|`|```|\[.*\]\(.*\)|^-\s+|^\d+\.\s+",
    re.MULTILINE,
)

NOT_MARKDOWN_WARNING = "File may not be markdown, but processing as plain text"


def validate(content: str, *, max_bytes: int | None = None) -> ValidationResult:
    """Check that *content* is non-empty and below the byte ceiling.

    Parameters
    ----------
    content:
        Raw document text.
    max_bytes:
        Ceiling on the UTF-8 encoded size.  Defaults to
        ``settings.max_content_bytes``.

    Returns
    -------
    ValidationResult
        ``is_valid`` is ``False`` only for empty or oversized content.
        Text without any Markdown syntax is accepted with a warning.

    Raises
    ------
    MalformedInputError
        If *content* is not a ``str``.
    """
    if not isinstance(content, str):
        raise MalformedInputError(f"Expected str content, got {type(content).__name__}")

    if not content.strip():
        return ValidationResult(
            is_valid=False,
            error=ValidationErrorKind.EMPTY_CONTENT,
            message="Content is empty",
        )

    limit = settings.max_content_bytes if max_bytes is None else max_bytes
    if len(content.encode("utf-8")) > limit:
        return ValidationResult(
            is_valid=False,
            error=ValidationErrorKind.TOO_LARGE,
            message=f"File is too large (max {limit} bytes)",
        )

    warnings: list[str] = []
    if not _MARKDOWN_FEATURES.search(content):
        logger.warning(NOT_MARKDOWN_WARNING)
        warnings.append(NOT_MARKDOWN_WARNING)

    return ValidationResult(is_valid=True, warnings=warnings)


def ensure_valid(content: str, *, max_bytes: int | None = None) -> ValidationResult:
    """Like :func:`validate` but raise on failure."""
    result = validate(content, max_bytes=max_bytes)
    if result.error is ValidationErrorKind.EMPTY_CONTENT:
        raise EmptyContentError(result.message)
    if result.error is ValidationErrorKind.TOO_LARGE:
        raise TooLargeError(result.message)
    return result
