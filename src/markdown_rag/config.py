"""Shared configuration loaded from environment / .env file."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application-wide settings, populated from env vars or .env file."""

    # Chunking
    max_chunk_size: int = Field(default=1000, description="Maximum words per chunk")
    overlap_size: int = Field(default=100, description="Words shared by consecutive chunks of a section")

    # Validation / upload gate
    max_content_bytes: int = Field(default=1_000_000, description="Byte ceiling for a single document")
    max_upload_bytes: int = Field(default=5 * 1024 * 1024, description="Byte ceiling for an uploaded file")
    allowed_extensions: tuple[str, ...] = (".md", ".markdown")

    # Retrieval
    chat_context_limit: int = 5
    search_limit_default: int = 5
    search_limit_max: int = 20

    # Vector store
    chroma_host: str = "localhost"
    chroma_port: int = 8000
    chroma_collection: str = "docs_global"

    # Embedding
    embedding_model: str = "sentence-transformers/all-MiniLM-L6-v2"

    # LLM
    openai_api_key: str = Field(default="", description="OpenAI API key (or dummy value for a local server)")
    llm_model_name: str = Field(default="gpt-4o-mini", description="LLM model identifier")
    llm_base_url: str = Field(
        default="",
        description=(
            "Base URL for the LLM API. Leave empty to use OpenAI cloud. "
            "Set to any OpenAI-compatible endpoint (vLLM, Ollama) for local serving."
        ),
    )
    llm_temperature: float = 0.7
    llm_max_tokens: int = 1000

    # Serving
    api_host: str = "0.0.0.0"
    api_port: int = 8080
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


# Singleton — import `settings` wherever needed.
settings = Settings()
