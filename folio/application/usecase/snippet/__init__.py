"""Snippet use cases."""

from .create_snippet import CreateSnippetRequest, CreateSnippetUseCase
from .delete_snippet import (
    DeleteSnippetRequest,
    DeleteSnippetResponse,
    DeleteSnippetUseCase,
)
from .get_snippet import GetSnippetRequest, GetSnippetUseCase, SnippetResponse
from .list_snippets import ListSnippetsRequest, ListSnippetsResponse, ListSnippetsUseCase
from .update_snippet import UpdateSnippetRequest, UpdateSnippetUseCase

__all__ = [
    "CreateSnippetRequest",
    "CreateSnippetUseCase",
    "DeleteSnippetRequest",
    "DeleteSnippetResponse",
    "DeleteSnippetUseCase",
    "GetSnippetRequest",
    "GetSnippetUseCase",
    "ListSnippetsRequest",
    "ListSnippetsResponse",
    "ListSnippetsUseCase",
    "SnippetResponse",
    "UpdateSnippetRequest",
    "UpdateSnippetUseCase",
]
