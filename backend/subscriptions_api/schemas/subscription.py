"""
Subscriptions API — Pydantic Request/Response Schemas
=======================================================

What:  Pydantic models for the subscription form (input) and the listing
       payload (output).
How:   `SubscriptionForm` is validated by the explicit form-parsing
       dependency; `SubscriptionResponse` is built from ORM rows with
       from_attributes and serialized by FastAPI.
"""

import uuid
from datetime import datetime, timezone

from pydantic import BaseModel, Field, field_validator


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class SubscriptionForm(BaseModel):
    """
    What:  Fields of the form-encoded POST /subscription body.

    strict=True: values must already be strings. A file part sent under
    `email` or `name` fails validation instead of being coerced.
    """
    email: str = Field(description="Subscriber email address")
    name: str = Field(description="Subscriber display name")

    model_config = {"strict": True}


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class SubscriptionResponse(BaseModel):
    """
    What:  One element of the GET /get-subscriptions JSON array.

    Serialized form:
        {
            "id": "3f1c2b1e-8a8e-4c55-9d6a-2f3b0f3a9c11",
            "email": "a@x.com",
            "name": "A",
            "subscribed_at": "2024-01-15T12:00:00Z"
        }
    """
    id: uuid.UUID = Field(description="Server-generated identifier (UUID4)")
    email: str = Field(description="Subscriber email address")
    name: str = Field(description="Subscriber display name")
    subscribed_at: datetime = Field(description="Insertion time (UTC ISO 8601)")

    model_config = {"from_attributes": True}

    @field_validator("subscribed_at")
    @classmethod
    def ensure_utc(cls, v: datetime) -> datetime:
        """Stored timestamps are UTC; backends that drop the zone (SQLite) get it back here."""
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)
