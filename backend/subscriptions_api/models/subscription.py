"""
Subscriptions API — Subscription SQLAlchemy Model
===================================================

What:  ORM mapping of the `subscriptions` table.
How:   Inherits from the declarative Base; used by SubscriptionService to
       build INSERT/SELECT/DELETE statements.
When:  Instantiated when a subscription is created; loaded when listing.

The table is created and migrated outside this service. The mapping only
mirrors its columns:

    subscriptions(id UUID PRIMARY KEY, email TEXT, name TEXT, subscribed_at TIMESTAMPTZ)

`email` is deliberately NOT unique: the same address may subscribe more
than once, and deleting by email removes every matching row.
"""

import uuid
from datetime import datetime

from sqlalchemy import DateTime, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from subscriptions_api.database import Base


class Subscription(Base):
    """
    A single newsletter signup.

    Lifecycle:
        1. Created by POST /subscription (id and subscribed_at set server-side)
        2. Read by GET /get-subscriptions
        3. Deleted by DELETE /delete-subscriptions/{email}
        Never updated in place.
    """

    __tablename__ = "subscriptions"

    # ── Primary Key ───────────────────────────────────────────────────────
    # Generated in Python at construction time, never by the database
    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
    )

    email: Mapped[str] = mapped_column(Text, nullable=False)

    name: Mapped[str] = mapped_column(Text, nullable=False)

    # ── Timestamps ────────────────────────────────────────────────────────
    # UTC, timezone-aware; set once at insertion
    subscribed_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<Subscription(id={self.id}, email='{self.email}')>"
