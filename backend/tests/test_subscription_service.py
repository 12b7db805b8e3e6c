"""
Subscriptions API — Subscription Service Unit Tests
=====================================================

What:  Tests for SubscriptionService (subscribe, list, delete).
How:   Uses mock DB sessions (no real DB).

What we test:
    ✅ Server-side id and timestamp on subscribe
    ✅ Driver errors wrapped in DatabaseError for every operation
    ✅ Row count returned by delete
"""

from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock
from uuid import UUID

import pytest
from sqlalchemy.exc import OperationalError

from subscriptions_api.exceptions import DatabaseError
from subscriptions_api.models.subscription import Subscription
from subscriptions_api.schemas.subscription import SubscriptionForm
from subscriptions_api.services.subscription_service import SubscriptionService


def _operational_error():
    return OperationalError("SELECT 1", {}, Exception("connection lost"))


class TestSubscribe:

    def setup_method(self):
        self.service = SubscriptionService()

    @pytest.mark.asyncio
    async def test_subscribe_assigns_id_and_timestamp(self, mock_db_session):
        before = datetime.now(timezone.utc)

        result = await self.service.subscribe(
            mock_db_session, SubscriptionForm(email="a@x.com", name="A")
        )

        after = datetime.now(timezone.utc)
        added = mock_db_session.add.call_args.args[0]
        assert added is result
        assert isinstance(result.id, UUID)
        assert result.email == "a@x.com"
        assert result.name == "A"
        assert before <= result.subscribed_at <= after
        mock_db_session.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_subscribe_ids_are_unique(self, mock_db_session):
        form = SubscriptionForm(email="a@x.com", name="A")

        first = await self.service.subscribe(mock_db_session, form)
        second = await self.service.subscribe(mock_db_session, form)

        assert first.id != second.id

    @pytest.mark.asyncio
    async def test_subscribe_commit_failure_raises_database_error(self, mock_db_session):
        mock_db_session.commit = AsyncMock(side_effect=_operational_error())

        with pytest.raises(DatabaseError) as exc_info:
            await self.service.subscribe(
                mock_db_session, SubscriptionForm(email="a@x.com", name="A")
            )

        assert exc_info.value.context["operation"] == "insert"
        assert exc_info.value.context["error_type"] == "OperationalError"


class TestListSubscriptions:

    def setup_method(self):
        self.service = SubscriptionService()

    @pytest.mark.asyncio
    async def test_list_returns_rows(self, mock_db_session):
        rows = [
            Subscription(
                id=UUID(int=i),
                email=f"u{i}@x.com",
                name="N",
                subscribed_at=datetime.now(timezone.utc),
            )
            for i in range(3)
        ]
        mock_result = MagicMock()
        mock_result.scalars.return_value.all.return_value = rows
        mock_db_session.execute.return_value = mock_result

        result = await self.service.list_subscriptions(mock_db_session)

        assert result == rows

    @pytest.mark.asyncio
    async def test_list_failure_raises_database_error(self, mock_db_session):
        mock_db_session.execute = AsyncMock(side_effect=_operational_error())

        with pytest.raises(DatabaseError):
            await self.service.list_subscriptions(mock_db_session)


class TestDeleteByEmail:

    def setup_method(self):
        self.service = SubscriptionService()

    @pytest.mark.asyncio
    async def test_delete_returns_rowcount(self, mock_db_session):
        mock_result = MagicMock()
        mock_result.rowcount = 2
        mock_db_session.execute.return_value = mock_result

        deleted = await self.service.delete_by_email(mock_db_session, "dup@x.com")

        assert deleted == 2
        mock_db_session.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_delete_zero_rows_is_not_an_error(self, mock_db_session):
        mock_result = MagicMock()
        mock_result.rowcount = 0
        mock_db_session.execute.return_value = mock_result

        assert await self.service.delete_by_email(mock_db_session, "nobody@x.com") == 0

    @pytest.mark.asyncio
    async def test_delete_failure_raises_database_error(self, mock_db_session):
        mock_db_session.execute = AsyncMock(side_effect=_operational_error())

        with pytest.raises(DatabaseError) as exc_info:
            await self.service.delete_by_email(mock_db_session, "a@x.com")

        assert exc_info.value.context["operation"] == "delete"
        mock_db_session.commit.assert_not_awaited()
