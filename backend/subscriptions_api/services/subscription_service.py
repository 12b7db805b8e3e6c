"""
Subscriptions API — Subscription Service
==========================================

What:  The three storage operations behind the subscription endpoints:
       create one row, list every row, delete rows by email.
How:   Each method issues exactly one SQL statement on the session it is
       given, commits where it writes, and translates any failure into
       DatabaseError (logged here, answered with 500 by the global handler).
Who:   Called by routes/subscriptions.py.

Design:
    SubscriptionService is stateless. The session is passed into every
    call, so concurrent requests share nothing but the engine's pool.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import List

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from subscriptions_api.exceptions import DatabaseError
from subscriptions_api.models.subscription import Subscription
from subscriptions_api.schemas.subscription import SubscriptionForm

logger = logging.getLogger(__name__)


class SubscriptionService:
    """
    Business logic layer for subscriptions.

    Responsibilities:
        - subscribe(): insert one row with server-generated id and timestamp
        - list_subscriptions(): every row, storage order, no pagination
        - delete_by_email(): remove all rows with an exactly matching email
    """

    async def subscribe(self, db: AsyncSession, form: SubscriptionForm) -> Subscription:
        """
        Insert a new subscription.

        The id (UUID4) and subscribed_at (current UTC time) are assigned
        here and never taken from the client.

        Raises:
            DatabaseError: the INSERT or its commit failed
        """
        subscription = Subscription(
            id=uuid.uuid4(),
            email=form.email,
            name=form.name,
            subscribed_at=datetime.now(timezone.utc),
        )
        try:
            db.add(subscription)
            await db.commit()
        except Exception as e:
            logger.error("Failed to execute query: %s", e)
            raise DatabaseError(
                message="Could not store the subscription",
                context={"operation": "insert", "error_type": type(e).__name__},
            ) from e

        logger.info("Subscription %s created", subscription.id)
        return subscription

    async def list_subscriptions(self, db: AsyncSession) -> List[Subscription]:
        """
        Fetch every subscription.

        No ORDER BY: rows come back in whatever order storage yields them.

        Raises:
            DatabaseError: the SELECT failed
        """
        try:
            result = await db.execute(select(Subscription))
            return list(result.scalars().all())
        except Exception as e:
            logger.error("Failed to fetch subscriptions: %s", e, exc_info=True)
            raise DatabaseError(
                message="Could not fetch subscriptions",
                context={"operation": "select", "error_type": type(e).__name__},
            ) from e

    async def delete_by_email(self, db: AsyncSession, email: str) -> int:
        """
        Delete every subscription whose email equals `email` exactly.

        Deleting an address that has no rows is not an error.

        Returns:
            Number of rows removed

        Raises:
            DatabaseError: the DELETE or its commit failed
        """
        try:
            result = await db.execute(
                delete(Subscription).where(Subscription.email == email)
            )
            await db.commit()
        except Exception as e:
            logger.error("Failed to execute query: %s", e)
            raise DatabaseError(
                message="Could not delete subscriptions",
                context={"operation": "delete", "error_type": type(e).__name__},
            ) from e

        deleted = result.rowcount
        logger.info("Deleted %d subscription(s) for %s", deleted, email)
        return deleted


# ── Singleton Instance ────────────────────────────────────────────────────
subscription_service = SubscriptionService()
