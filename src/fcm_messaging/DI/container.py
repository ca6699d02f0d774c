# -*- coding: utf-8 -*-
"""Dependency injection container (dependency-injector)."""

from __future__ import annotations

from dependency_injector import containers, providers

from fcm_messaging.clients.auth import StaticTokenProvider
from fcm_messaging.clients.fcm_client import FcmClient
from fcm_messaging.clients.http import AsyncHttpClient
from fcm_messaging.config import get_settings


class Container(containers.DeclarativeContainer):
    """Application container. Wires settings, HTTP client, token provider and FCM client."""

    config = providers.Callable(get_settings)

    http_client = providers.Singleton(
        AsyncHttpClient,
        settings=config,
    )

    token_provider = providers.Singleton(
        StaticTokenProvider.from_settings,
        settings=config,
    )

    fcm_client = providers.Singleton(
        FcmClient,
        http_client=http_client,
        token_provider=token_provider,
        settings=config,
    )
