"""Error handling utilities: structured logging and error responses."""
from __future__ import annotations

import logging
from typing import Any

logger = logging.getLogger(__name__)


def log_error_with_context(
    error: Exception,
    node_name: str,
    character_id: str | None = None,
    endpoint: str | None = None,
    extra_context: dict[str, Any] | None = None,
) -> None:
    """
    Log an error with context: character_id, endpoint and stack trace.

    Args:
        error: The exception that occurred
        node_name: Area of the app (e.g., 'ask', 'inspect', 'cast')
        character_id: Character being talked to or inspected
        endpoint: Request path or CLI command
        extra_context: Additional context dict to include in log
    """
    context_parts = []
    if character_id:
        context_parts.append(f"character_id={character_id}")
    if endpoint:
        context_parts.append(f"endpoint={endpoint}")
    context_str = ", ".join(context_parts) if context_parts else "no context"

    extra: dict[str, Any] = {}
    if extra_context:
        extra.update(extra_context)
    if character_id:
        extra["character_id"] = character_id
    if endpoint:
        extra["endpoint"] = endpoint
    extra["node_name"] = node_name

    logger.error(
        f"[{node_name}] Error: {type(error).__name__}: {str(error)} ({context_str})",
        exc_info=error,
        extra=extra,
    )


def create_error_response(
    error_code: str,
    message: str,
    node: str | None = None,
    details: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """
    Create a structured error response for API endpoints.

    Args:
        error_code: Error code (e.g., 'ASK_HTTP_404', 'INSPECT_ERROR')
        message: Human-readable error message
        node: App area where the error occurred
        details: Additional error details

    Returns:
        Structured error dict
    """
    response: dict[str, Any] = {
        "error_code": error_code,
        "message": message,
    }
    if node:
        response["node"] = node
    if details:
        response["details"] = details
    return response
