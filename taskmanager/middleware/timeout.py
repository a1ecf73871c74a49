"""Request timeout middleware.

Answers 504 before the API Gateway integration limit is hit, so clients get
the service's JSON error shape rather than the gateway's. Raw ASGI.
"""

import asyncio
import json
from typing import Callable

from taskmanager.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


def _timeout_body(timeout_seconds: float) -> bytes:
    return json.dumps(
        {
            "error": "GATEWAY_TIMEOUT",
            "message": "Request timed out",
            "details": {"timeout_seconds": timeout_seconds},
        }
    ).encode()


def TimeoutMiddleware(app: Callable, timeout_seconds: float) -> Callable:
    """Cancel the request after timeout_seconds and send 504 (if nothing was sent yet)."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        started = False

        async def send_wrapper(message: dict) -> None:
            nonlocal started
            if message["type"] == "http.response.start":
                started = True
            await send(message)

        try:
            await asyncio.wait_for(app(scope, receive, send_wrapper), timeout=timeout_seconds)
        except asyncio.TimeoutError:
            logger.warning(
                "Request timed out after %s seconds: %s %s",
                timeout_seconds,
                scope.get("method", ""),
                scope.get("path", ""),
            )
            if started:
                # Headers already went out; nothing valid can follow.
                return
            await send({
                "type": "http.response.start",
                "status": 504,
                "headers": [(b"content-type", b"application/json")],
            })
            await send({
                "type": "http.response.body",
                "body": _timeout_body(timeout_seconds),
                "more_body": False,
            })

    return asgi_app
