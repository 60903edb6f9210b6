"""markdown-rag — Markdown ingestion and retrieval-grounded chat."""

__version__ = "0.1.0"
