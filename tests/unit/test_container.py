# -*- coding: utf-8 -*-
"""Unit tests for the DI container wiring."""

from __future__ import annotations

from dependency_injector import providers

from fcm_messaging.clients import AsyncHttpClient, FcmClient, StaticTokenProvider
from fcm_messaging.config import Settings
from fcm_messaging.DI import Container


async def test_container_wires_fcm_client(settings: Settings) -> None:
    container = Container()
    container.config.override(providers.Object(settings))
    try:
        client = container.fcm_client()
        assert isinstance(client, FcmClient)
        assert client is container.fcm_client()
        assert isinstance(container.http_client(), AsyncHttpClient)
        assert isinstance(container.token_provider(), StaticTokenProvider)
        assert client.send_url == "https://fcm.example.test/v1/projects/demo-project/messages:send"
    finally:
        await container.http_client().aclose()
        container.config.reset_override()
