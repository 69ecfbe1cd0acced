"""
Anythink Market Backend — Comments Route Handlers
==================================================

What:  CRUD endpoints for the comments resource.
How:   Extracts path/body data, delegates to CommentService, returns JSON.
       Errors raised by the service are turned into responses by the global
       handlers in main.py, so no handler here catches anything.

Endpoints:
    GET    /comments          → 200, array of comments
    POST   /comments          → 201, created comment
    PUT    /comments/{id}     → 200, updated comment
    DELETE /comments/{id}     → 200, confirmation message
"""

import logging
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.schemas.comment import (
    CommentCreate,
    CommentUpdate,
    CommentResponse,
    MessageResponse,
    ErrorResponse,
)
from app.services.comment_service import comment_service

logger = logging.getLogger(__name__)

# ── Router Configuration ──────────────────────────────────────────────────
router = APIRouter(prefix="/comments", tags=["Comments"])


@router.get(
    "",
    response_model=List[CommentResponse],
    responses={
        200: {"description": "All stored comments"},
        500: {"description": "Failed to fetch comments", "model": ErrorResponse},
    },
    summary="List all comments",
)
async def list_comments(
    db: AsyncSession = Depends(get_db_session),
) -> List[CommentResponse]:
    """Return every stored comment in insertion order."""
    return await comment_service.list_comments(db)


@router.post(
    "",
    status_code=201,
    response_model=CommentResponse,
    responses={
        201: {"description": "Comment created", "model": CommentResponse},
        400: {"description": "Text or author missing", "model": ErrorResponse},
        500: {"description": "Failed to create comment", "model": ErrorResponse},
    },
    summary="Create a comment",
)
async def create_comment(
    payload: CommentCreate,
    db: AsyncSession = Depends(get_db_session),
) -> CommentResponse:
    """
    Create a comment from `{text, author}`.

    Both fields must be present and non-empty; the response carries the id
    assigned by the database.
    """
    return await comment_service.create_comment(
        db=db,
        text=payload.text,
        author=payload.author,
    )


@router.put(
    "/{comment_id}",
    response_model=CommentResponse,
    responses={
        200: {"description": "Comment updated", "model": CommentResponse},
        404: {"description": "Comment not found", "model": ErrorResponse},
        500: {"description": "Failed to update comment", "model": ErrorResponse},
    },
    summary="Replace a comment's text and author",
)
async def update_comment(
    comment_id: str,
    payload: CommentUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> CommentResponse:
    """
    Overwrite both `text` and `author` of the comment.

    `comment_id` is a plain string: ids that are not well-formed UUIDs are
    reported as 404 by the service, like any other unknown id.
    """
    return await comment_service.update_comment(
        db=db,
        comment_id=comment_id,
        text=payload.text,
        author=payload.author,
    )


@router.delete(
    "/{comment_id}",
    response_model=MessageResponse,
    responses={
        200: {"description": "Comment deleted", "model": MessageResponse},
        404: {"description": "Comment not found", "model": ErrorResponse},
        500: {"description": "Failed to delete comment", "model": ErrorResponse},
    },
    summary="Delete a comment",
)
async def delete_comment(
    comment_id: str,
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    await comment_service.delete_comment(db=db, comment_id=comment_id)
    return MessageResponse(message="Comment deleted successfully")
