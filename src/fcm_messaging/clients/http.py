# -*- coding: utf-8 -*-
"""Async HTTP client used by the FCM client: one JSON POST per call, no retries."""

from __future__ import annotations

import asyncio
import json as jsonlib
import uuid
import aiohttp
import structlog
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional
from structlog.contextvars import bound_contextvars

from fcm_messaging.config import Settings
from fcm_messaging.exceptions import FcmAPIError


@dataclass(frozen=True, slots=True)
class HttpResponse:
    """Status and parsed body of a completed HTTP exchange."""

    status: int
    body: Any
    """Parsed JSON when the body is JSON, the raw text otherwise, None when empty."""

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


def _parse_body(text: str) -> Any:
    if not text:
        return None
    try:
        return jsonlib.loads(text)
    except ValueError:
        return text


class AsyncHttpClient:
    """Async HTTP client for the FCM API.

    Injects Settings and optionally an aiohttp.ClientSession. If no session
    is provided, one is created and must be closed via aclose() or used
    as an async context manager.
    """

    def __init__(
        self,
        settings: Settings,
        *,
        session: Optional[aiohttp.ClientSession] = None,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        """Initialize the client.

        Args:
            settings: Configuration (uses settings.fcm.timeout_seconds).
            session: Optional shared aiohttp session. If None, the client
                creates and owns a session (call aclose() when done).
            get_logger: Logger factory (injected) with default of structlog.get_logger.
            logger_name: Optional logger name (defaults to class name).
        """
        self._settings = settings
        self._session = session
        self._owns_session = session is None
        self._logger = get_logger(logger_name or self.__class__.__name__)

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            timeout = aiohttp.ClientTimeout(total=self._settings.fcm.timeout_seconds)
            self._session = aiohttp.ClientSession(timeout=timeout)
        return self._session

    async def aclose(self) -> None:
        """Close the session if this client owns it."""
        if self._owns_session and self._session is not None and not self._session.closed:
            await self._session.close()
            self._session = None

    async def __aenter__(self) -> AsyncHttpClient:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    async def post_json(
        self,
        url: str,
        *,
        json: Dict[str, Any],
        headers: Optional[Dict[str, str]] = None,
    ) -> HttpResponse:
        """POST a JSON body once and return status and parsed body for any HTTP status.

        Args:
            url: Full URL to request.
            json: JSON-serializable body.
            headers: Extra request headers (e.g. Authorization).

        Returns:
            HttpResponse with the status code and parsed body.

        Raises:
            FcmAPIError: If the request could not be completed (connection error, timeout).
        """
        request_id = uuid.uuid4().hex[:12]
        with bound_contextvars(http_url=url, http_request_id=request_id):
            try:
                session = await self._get_session()
                async with session.post(url, json=json, headers=headers or {}) as response:
                    text = await response.text()
                    self._logger.debug("http_post_completed", http_status_code=response.status)
                    return HttpResponse(status=response.status, body=_parse_body(text))
            except (aiohttp.ClientError, asyncio.TimeoutError) as e:
                self._logger.exception(
                    "http_post_failed",
                    error_type=type(e).__name__,
                    error_message=str(e),
                )
                raise FcmAPIError(
                    f"POST failed: {url}",
                    url=url,
                    status_code=getattr(e, "status", None),
                    cause=e,
                ) from e
