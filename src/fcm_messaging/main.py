# -*- coding: utf-8 -*-
"""
Entry point: send one message described by a JSON file.

Orchestrates: logging, settings, container, decode, validate + send, shutdown.
The JSON file holds a message document in wire form (as produced by dumps_message).

Run with: python -m fcm_messaging.main path/to/message.json
"""
from __future__ import annotations

import argparse
import asyncio
import structlog
from pathlib import Path
from typing import Optional, Sequence

from fcm_messaging.DI import Container
from fcm_messaging.codec import loads_message
from fcm_messaging.exceptions import FcmError
from fcm_messaging.logging.config import configure_logging


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="fcm-send",
        description="Validate and send one FCM message read from a JSON file.",
    )
    parser.add_argument("message_file", type=Path, help="Path to the message JSON document.")
    return parser.parse_args(argv)


async def run(message_file: Path) -> str:
    """Decode, validate and send the message in message_file; return the FCM message name."""
    configure_logging()
    logger = structlog.get_logger("main")

    message = loads_message(message_file.read_text(encoding="utf-8"))
    container = Container()
    http_client = container.http_client()
    try:
        name = await container.fcm_client().send(message)
    finally:
        await http_client.aclose()
        logger.info("main_shutdown_complete")
    return name


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    try:
        name = asyncio.run(run(args.message_file))
    except FcmError as e:
        structlog.get_logger("main").error(
            "main_send_failed",
            error_type=type(e).__name__,
            error_message=str(e),
        )
        return 1
    print(name)
    return 0


__all__ = ["run", "main"]

if __name__ == "__main__":
    raise SystemExit(main())
