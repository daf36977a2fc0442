"""Subscription endpoints."""

from fastapi import APIRouter

from mediashare.api.deps import CurrentSubjectDep, SessionDep
from mediashare.api.errors import to_http_exception
from mediashare.api.schemas import ToggleResponse, UserResponse
from mediashare.errors import MediaShareError
from mediashare.services import subscriptions as subscription_service

router = APIRouter(prefix="/subscriptions", tags=["Subscriptions"])


@router.post("/c/{channel_id}", response_model=ToggleResponse, summary="Toggle subscription")
def toggle_subscription(
    channel_id: str, session: SessionDep, subject: CurrentSubjectDep
) -> ToggleResponse:
    """Subscribe to a channel, or unsubscribe if already subscribed."""
    try:
        result = subscription_service.toggle_subscription(session, subject, channel_id)
    except MediaShareError as e:
        raise to_http_exception(e) from e

    return ToggleResponse.from_result(result)


@router.get("/c/{channel_id}", response_model=list[UserResponse], summary="List subscribers")
def get_channel_subscribers(channel_id: str, session: SessionDep) -> list[UserResponse]:
    try:
        subscribers = subscription_service.get_channel_subscribers(session, channel_id)
    except MediaShareError as e:
        raise to_http_exception(e) from e

    return [UserResponse.model_validate(u) for u in subscribers]


@router.get(
    "/u/{subscriber_id}",
    response_model=list[UserResponse],
    summary="List subscribed channels",
)
def get_subscribed_channels(subscriber_id: str, session: SessionDep) -> list[UserResponse]:
    try:
        channels = subscription_service.get_subscribed_channels(session, subscriber_id)
    except MediaShareError as e:
        raise to_http_exception(e) from e

    return [UserResponse.model_validate(u) for u in channels]
