"""
Subscriptions API — Subscription Route Handlers
=================================================

What:  POST /subscription, GET /get-subscriptions,
       DELETE /delete-subscriptions/{email}.
How:   Each handler pulls its inputs from the request, makes one call into
       SubscriptionService, and answers with an empty 200 or the JSON list.
       Failures are raised as application exceptions and turned into
       empty-bodied 400/500 responses by the handlers in main.py.

Input boundary:
    The subscription body is parsed by `parse_subscription_form` BEFORE
    the handler runs. A body that does not yield a string `email` and a
    string `name` never reaches the service.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Request, Response
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from subscriptions_api.database import get_db_session
from subscriptions_api.exceptions import ValidationError
from subscriptions_api.schemas.subscription import SubscriptionForm, SubscriptionResponse
from subscriptions_api.services.subscription_service import subscription_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Subscriptions"])


async def parse_subscription_form(request: Request) -> SubscriptionForm:
    """
    Parse the form-encoded body into a SubscriptionForm.

    Non-form content types parse as an empty form and so fail on the
    missing fields.

    Raises:
        ValidationError: a field is missing or is not plain text (→ 400)
    """
    form = await request.form()
    try:
        return SubscriptionForm.model_validate(dict(form))
    except PydanticValidationError as e:
        errors = e.errors()
        field = str(errors[0]["loc"][0]) if errors and errors[0]["loc"] else None
        raise ValidationError(
            message="Invalid subscription form",
            field=field,
            context={"errors": [err["msg"] for err in errors]},
        ) from e


@router.post(
    "/subscription",
    responses={
        200: {"description": "Subscription stored (empty body)"},
        400: {"description": "Malformed form body (empty body)"},
        500: {"description": "Storage error (empty body)"},
    },
    summary="Create a subscription",
)
async def subscribe(
    form: SubscriptionForm = Depends(parse_subscription_form),
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    await subscription_service.subscribe(db, form)
    return Response(status_code=200)


@router.get(
    "/get-subscriptions",
    response_model=List[SubscriptionResponse],
    responses={
        200: {"description": "Every subscription, in storage order"},
        500: {"description": "Storage error (empty body)"},
    },
    summary="List all subscriptions",
)
async def get_subscriptions(
    db: AsyncSession = Depends(get_db_session),
) -> List[SubscriptionResponse]:
    """
    Return every stored subscription as a JSON array.

    No filtering, no pagination, no ordering guarantee.
    """
    rows = await subscription_service.list_subscriptions(db)
    return [SubscriptionResponse.model_validate(row) for row in rows]


@router.delete(
    "/delete-subscriptions/{email}",
    responses={
        200: {"description": "Statement executed, zero or more rows removed (empty body)"},
        500: {"description": "Storage error (empty body)"},
    },
    summary="Delete all subscriptions for an email",
)
async def delete_subscriptions(
    email: str,
    db: AsyncSession = Depends(get_db_session),
) -> Response:
    """
    Delete every subscription with this exact (case-sensitive) email.

    `email` arrives percent-decoded from the path segment.
    """
    await subscription_service.delete_by_email(db, email)
    return Response(status_code=200)
