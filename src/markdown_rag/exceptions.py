"""Error taxonomy for document validation and processing.

Failures raised by external collaborators (vector store, embedding or
chat model) are *not* wrapped here; they propagate unchanged.
"""

from __future__ import annotations


class MarkdownRagError(Exception):
    """Base class for every error raised by this package."""


class ValidationFailedError(MarkdownRagError, ValueError):
    """Content was rejected by pre-flight validation."""


class EmptyContentError(ValidationFailedError):
    """The document is empty or whitespace only."""


class TooLargeError(ValidationFailedError):
    """The document exceeds the configured byte ceiling."""


class MalformedInputError(MarkdownRagError, TypeError):
    """The input is not text (e.g. ``bytes`` or ``None``)."""
