"""
Anythink Market Backend — Pydantic Request/Response Schemas
============================================================

What:  Pydantic models defining the API contract for the comments resource.
How:   FastAPI uses these models to validate request bodies, serialize responses,
       and generate Swagger/OpenAPI documentation automatically.
Who:   Used by route handlers as body/return types and by CommentService as
       its return values.

Schemas are separate from the SQLAlchemy model: `seq` and `created_at` are
stored but never exposed.
"""

import uuid
from typing import Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Request Models: what the client sends in the body
# ══════════════════════════════════════════════════════════════════════════


class CommentCreate(BaseModel):
    """
    Body of POST /comments.

    Both fields are optional at the schema level. Presence and non-emptiness
    are checked by CommentService.create_comment, which reports the missing
    field by name.
    """
    text: Optional[str] = Field(default=None, description="Comment body (required, non-empty)")
    author: Optional[str] = Field(default=None, description="Author name (required, non-empty)")


class CommentUpdate(BaseModel):
    """
    Body of PUT /comments/{id}.

    Both fields are always written to the stored comment. Empty strings are
    accepted; missing keys are rejected by FastAPI before the handler runs.
    """
    text: str = Field(description="New comment body")
    author: str = Field(description="New author name")


# ══════════════════════════════════════════════════════════════════════════
# Response Models: what the API returns to clients
# ══════════════════════════════════════════════════════════════════════════


class CommentResponse(BaseModel):
    """
    What:  Public representation of a stored comment.
    Who:   Returned by GET /comments (as array items), POST and PUT.
    """
    id: uuid.UUID = Field(description="Unique comment identifier (UUID)")
    text: str = Field(description="Comment body")
    author: str = Field(description="Author name")

    model_config = {"from_attributes": True}


class MessageResponse(BaseModel):
    """Plain confirmation payload, e.g. after a delete."""
    message: str = Field(description="Human-readable confirmation")


# ══════════════════════════════════════════════════════════════════════════
# Error / Service Response Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    What:  Standardized error response format for all API errors.

    Fields:
        error: Machine-readable error code (e.g., "validation_error", "not_found")
        message: Human-readable description
        details: Optional extra context (e.g., which field failed validation)
        request_id: Correlation ID for tracing this error in server logs

    Example:
        {
            "error": "not_found",
            "message": "Comment not found",
            "request_id": "1f0c2a9b"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /health for monitoring and container health checks."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
