# -*- coding: utf-8 -*-
"""FCM HTTP v1 client: validate, encode, POST one message, interpret the response."""

from __future__ import annotations

import structlog
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Callable, Optional, cast
from structlog.contextvars import bound_contextvars

from fcm_messaging.clients.schema import (
    ErrorResponseSchema,
    SendRequestSchema,
    SendResponseSchema,
)
from fcm_messaging.codec.message_codec import encode_message
from fcm_messaging.config import Settings
from fcm_messaging.exceptions import FcmAPIError, MissingRequiredConfigError
from fcm_messaging.models import Message
from fcm_messaging.utils.validation import mask_token
from fcm_messaging.validation import validate_message

if TYPE_CHECKING:
    from fcm_messaging.clients.auth import ITokenProvider
    from fcm_messaging.clients.http import AsyncHttpClient


def parse_error_response(body: Any) -> tuple[Optional[str], Optional[str]]:
    """Return (error_code, message) from an FCM error envelope; (None, None) if absent.

    error_code is the first details[].errorCode (e.g. "UNREGISTERED"), falling
    back to error.status (e.g. "INVALID_ARGUMENT").
    """
    if not isinstance(body, Mapping):
        return None, None
    error = cast(ErrorResponseSchema, body).get("error")
    if not isinstance(error, Mapping):
        return None, None
    error_code: Optional[str] = None
    details = error.get("details")
    if isinstance(details, list):
        for detail in details:
            if isinstance(detail, Mapping) and isinstance(detail.get("errorCode"), str):
                error_code = detail["errorCode"]
                break
    if error_code is None and isinstance(error.get("status"), str):
        error_code = error["status"]
    message = error.get("message")
    return error_code, message if isinstance(message, str) else None


class FcmClient:
    """Client for the FCM HTTP v1 messages:send endpoint."""

    def __init__(
        self,
        http_client: "AsyncHttpClient",
        token_provider: "ITokenProvider",
        settings: Settings,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        """Initialize the client.

        Args:
            http_client: Async HTTP client (e.g. AsyncHttpClient).
            token_provider: Supplies the bearer token for each request.
            settings: Application settings (uses settings.fcm).
            get_logger: Logger factory (injected) with default of structlog.get_logger.
            logger_name: Optional logger name (defaults to class name).

        Raises:
            MissingRequiredConfigError: If settings.fcm.project_id is not set.
        """
        project_id = settings.fcm.project_id
        if not project_id:
            raise MissingRequiredConfigError("FCM__PROJECT_ID")
        self._http = http_client
        self._token_provider = token_provider
        self._project_id = project_id
        self._validate_only = settings.fcm.validate_only
        self._send_url = f"{settings.fcm.endpoint.rstrip('/')}/projects/{project_id}/messages:send"
        self._logger = get_logger(logger_name or self.__class__.__name__)

    @property
    def send_url(self) -> str:
        return self._send_url

    def build_request(self, message: Message) -> SendRequestSchema:
        """Wrap the encoded message in the send envelope."""
        request: SendRequestSchema = {"message": encode_message(message)}
        if self._validate_only:
            request["validate_only"] = True
        return request

    async def send(self, message: Message) -> str:
        """Validate and send one message.

        Returns:
            The message name assigned by FCM ("projects/<id>/messages/<id>").

        Raises:
            ValidationError: If the message violates a validation rule (nothing is sent).
            FcmAPIError: If the request fails or FCM answers with a non-200 status.
        """
        validate_message(message)
        return await self._send(message)

    async def _send(self, message: Message) -> str:
        target = message.targets()[0]
        with bound_contextvars(
            fcm_project_id=self._project_id,
            fcm_target_type=target,
            fcm_target=mask_token(message.token) if target == "token" else getattr(message, target),
        ):
            request = self.build_request(message)
            token = await self._token_provider.get_token()
            response = await self._http.post_json(
                self._send_url,
                json=cast(dict[str, Any], request),
                headers={"Authorization": f"Bearer {token}"},
            )

            if response.status != 200:
                error_code, error_message = parse_error_response(response.body)
                self._logger.warning(
                    "fcm_send_failed",
                    http_status_code=response.status,
                    fcm_error_code=error_code,
                    error_message=error_message,
                )
                raise FcmAPIError(
                    f"FCM send failed with status {response.status}: "
                    f"{error_message or response.body!r}",
                    url=self._send_url,
                    status_code=response.status,
                    error_code=error_code,
                )

            body = response.body
            name = (
                cast(SendResponseSchema, body).get("name") if isinstance(body, Mapping) else None
            )
            if not isinstance(name, str) or not name:
                self._logger.warning("fcm_send_unexpected_response", response_body=body)
                raise FcmAPIError(
                    "FCM response does not contain a message name",
                    url=self._send_url,
                    status_code=response.status,
                )
            self._logger.info("fcm_send_succeeded", fcm_message_name=name)
            return name
