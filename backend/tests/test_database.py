"""
Anythink Market Backend — Database Session Tests
=================================================

What:  Tests for Database.session and the ping helper.
How:   In-memory SQLite Database from the `database` fixture.
"""

from unittest.mock import AsyncMock, patch

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import NotFoundError


class TestDatabaseSession:

    @pytest.mark.asyncio
    async def test_error_in_scope_rolls_back_and_propagates(self, database):
        with patch.object(AsyncSession, "rollback", new_callable=AsyncMock) as rollback:
            with pytest.raises(NotFoundError):
                async with database.session():
                    raise NotFoundError(resource="comment", resource_id="x")

        rollback.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_failed_rollback_keeps_original_error(self, database):
        """A rollback that fails on a dead connection does not mask the handler's error."""
        failing = AsyncMock(side_effect=OperationalError("ROLLBACK", {}, Exception("gone")))
        with patch.object(AsyncSession, "rollback", failing):
            with pytest.raises(NotFoundError):
                async with database.session():
                    raise NotFoundError(resource="comment", resource_id="x")

        failing.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_clean_scope_does_not_roll_back(self, database):
        with patch.object(AsyncSession, "rollback", new_callable=AsyncMock) as rollback:
            async with database.session() as session:
                assert isinstance(session, AsyncSession)

        rollback.assert_not_awaited()


class TestDatabasePing:

    @pytest.mark.asyncio
    async def test_ping_succeeds_on_live_database(self, database):
        await database.ping()
