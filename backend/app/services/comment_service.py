"""
Anythink Market Backend — Comment Service (Comment Store Gateway)
==================================================================

What:  The four comment operations: list, create, delete, update.
How:   Each method performs one storage operation on the session it is given,
       commits it, and maps the outcome onto the application exceptions.
Who:   Called by route handlers in app/routes/comments.py.

Outcome Mapping:
    missing/empty field on create  → ValidationError          (400)
    unknown or malformed id        → NotFoundError            (404)
    SQLAlchemy / driver failure    → StorageUnavailableError  (500)

CommentService holds no state. The session is passed into every call, so
isolation and last-write-wins ordering are whatever the database provides.
"""

import logging
import uuid
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import STORAGE_ERRORS
from app.exceptions import NotFoundError, StorageUnavailableError, ValidationError
from app.models.comment import Comment
from app.schemas.comment import CommentResponse

logger = logging.getLogger(__name__)


def _parse_comment_id(comment_id: str) -> Optional[uuid.UUID]:
    """
    Return the UUID for `comment_id`, or None when it is not a well-formed id.

    Only the canonical dashed form is accepted (either letter case), so one
    comment is never reachable under several paths. Braced, `urn:uuid:` and
    undashed spellings are treated as unknown ids.
    """
    try:
        parsed = uuid.UUID(comment_id)
    except ValueError:
        return None
    if str(parsed) != comment_id.lower():
        return None
    return parsed


async def _rollback(db: AsyncSession) -> None:
    """Roll back after a failed write. A rollback on a dead connection is only logged."""
    try:
        await db.rollback()
    except STORAGE_ERRORS as e:
        logger.warning("Rollback failed: %s", str(e))


class CommentService:
    """
    Business logic layer for comment operations.

    Responsibilities:
        - list_comments():  every stored comment, insertion order
        - create_comment(): presence check, then insert
        - delete_comment(): lookup + hard delete
        - update_comment(): lookup + overwrite of both text and author
    """

    async def list_comments(self, db: AsyncSession) -> List[CommentResponse]:
        """
        Return all stored comments.

        Raises:
            StorageUnavailableError: The query failed (→ 500)
        """
        try:
            result = await db.execute(select(Comment).order_by(Comment.seq))
            comments = result.scalars().all()
        except STORAGE_ERRORS as e:
            logger.error("Database error listing comments: %s", str(e), exc_info=True)
            raise StorageUnavailableError(
                message="Failed to fetch comments",
                context={"error_type": type(e).__name__},
            )

        return [CommentResponse.model_validate(comment) for comment in comments]

    async def create_comment(
        self,
        db: AsyncSession,
        text: Optional[str],
        author: Optional[str],
    ) -> CommentResponse:
        """
        Persist a new comment and return it with its assigned id.

        Validation runs before the session is touched, so a rejected request
        never reaches the database.

        Args:
            db: Async database session
            text: Comment body; must be a non-empty string
            author: Author name; must be a non-empty string

        Raises:
            ValidationError: `text` or `author` missing or empty (→ 400)
            StorageUnavailableError: Insert or commit failed (→ 500)
        """
        for field, value in (("text", text), ("author", author)):
            if not value:
                raise ValidationError(
                    message=f"Text and author are required: '{field}' is missing",
                    field=field,
                )

        comment = Comment(text=text, author=author)
        try:
            db.add(comment)
            await db.commit()
        except STORAGE_ERRORS as e:
            await _rollback(db)
            logger.error("Database error creating comment: %s", str(e), exc_info=True)
            raise StorageUnavailableError(
                message="Failed to create comment",
                context={"error_type": type(e).__name__},
            )

        logger.info("Comment %s created by %s", comment.id, comment.author)
        return CommentResponse.model_validate(comment)

    async def delete_comment(self, db: AsyncSession, comment_id: str) -> None:
        """
        Remove the comment stored under `comment_id`.

        Raises:
            NotFoundError: No such comment (→ 404)
            StorageUnavailableError: Lookup, delete or commit failed (→ 500)
        """
        comment = await self._get_or_raise(db, comment_id, action="delete")

        try:
            await db.delete(comment)
            await db.commit()
        except STORAGE_ERRORS as e:
            await _rollback(db)
            logger.error("Database error deleting comment %s: %s", comment_id, str(e))
            raise StorageUnavailableError(
                message="Failed to delete comment",
                context={"comment_id": comment_id, "error_type": type(e).__name__},
            )

        logger.info("Comment %s deleted", comment_id)

    async def update_comment(
        self,
        db: AsyncSession,
        comment_id: str,
        text: str,
        author: str,
    ) -> CommentResponse:
        """
        Overwrite `text` and `author` of an existing comment.

        Both fields are always written, even when only one of them differs
        from the stored value. No emptiness check is applied here.

        Raises:
            NotFoundError: No such comment (→ 404)
            StorageUnavailableError: Lookup, update or commit failed (→ 500)
        """
        comment = await self._get_or_raise(db, comment_id, action="update")

        try:
            comment.text = text
            comment.author = author
            await db.commit()
        except STORAGE_ERRORS as e:
            await _rollback(db)
            logger.error("Database error updating comment %s: %s", comment_id, str(e))
            raise StorageUnavailableError(
                message="Failed to update comment",
                context={"comment_id": comment_id, "error_type": type(e).__name__},
            )

        logger.info("Comment %s updated", comment_id)
        return CommentResponse.model_validate(comment)

    async def _get_or_raise(self, db: AsyncSession, comment_id: str, action: str) -> Comment:
        """Load a comment by id for `action`, converting a miss into NotFoundError."""
        parsed_id = _parse_comment_id(comment_id)
        if parsed_id is None:
            raise NotFoundError(resource="comment", resource_id=comment_id)

        try:
            result = await db.execute(select(Comment).where(Comment.id == parsed_id))
            comment = result.scalar_one_or_none()
        except STORAGE_ERRORS as e:
            logger.error("Database error loading comment %s: %s", comment_id, str(e))
            raise StorageUnavailableError(
                message=f"Failed to {action} comment",
                context={"comment_id": comment_id, "error_type": type(e).__name__},
            )

        if comment is None:
            raise NotFoundError(resource="comment", resource_id=comment_id)
        return comment


comment_service = CommentService()
