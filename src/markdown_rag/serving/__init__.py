"""
Serving — FastAPI application exposing upload, search and chat.

Collaborators (vector store, chat model) are provided through FastAPI
dependencies so tests can override them.
"""
