"""FCM send request/response envelopes. Keys match the API exactly."""

from __future__ import annotations

from typing import NotRequired, TypedDict

from fcm_messaging.codec.schema import MessageSchema

ErrorDetailSchema = TypedDict(
    "ErrorDetailSchema",
    {"@type": str, "errorCode": str},
    total=False,
)


class ErrorBodySchema(TypedDict, total=False):
    code: int
    message: str
    status: str
    details: list[ErrorDetailSchema]


class ErrorResponseSchema(TypedDict, total=False):
    """Non-200 response body."""

    error: ErrorBodySchema


class SendRequestSchema(TypedDict):
    """POST /projects/{project_id}/messages:send body."""

    message: MessageSchema
    validate_only: NotRequired[bool]


class SendResponseSchema(TypedDict):
    """200 response body; name is "projects/{project_id}/messages/{message_id}"."""

    name: str
