"""Request ID middleware.

Forwards a client X-Request-ID (or the API Gateway request id when running
under Lambda, else a new UUID) and echoes it on the response. Client values
are checked for length and character set before they reach the logs.
Raw ASGI (no BaseHTTPMiddleware).
"""

import re
import uuid
from typing import Callable

REQUEST_ID_MAX_LENGTH = 64
REQUEST_ID_ALLOWED_PATTERN = re.compile(
    r"^[a-zA-Z0-9_-]{1," + str(REQUEST_ID_MAX_LENGTH) + r"}$"
)


def _get_header(scope: dict, name: str) -> str | None:
    want = name.lower().encode()
    for k, v in scope.get("headers", []):
        if k.lower() == want:
            return v.decode("utf-8", errors="replace")
    return None


def _gateway_request_id(scope: dict) -> str | None:
    event = scope.get("aws.event")
    if not isinstance(event, dict):
        return None
    return (event.get("requestContext") or {}).get("requestId")


def resolve_request_id(raw: str | None) -> str:
    """Return raw when it is a safe identifier; otherwise a new UUID."""
    if raw and REQUEST_ID_ALLOWED_PATTERN.match(raw.strip()):
        return raw.strip()
    return str(uuid.uuid4())


def RequestIDMiddleware(app: Callable, header_name: str = "X-Request-ID") -> Callable:
    """Add or forward the request id on each request and response. Raw ASGI."""
    header_bytes = header_name.lower().encode()

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        request_id = resolve_request_id(
            _get_header(scope, header_name) or _gateway_request_id(scope)
        )
        scope.setdefault("state", {})["request_id"] = request_id

        async def send_wrapper(message: dict) -> None:
            if message["type"] == "http.response.start":
                headers = [
                    h for h in message.get("headers", []) if h[0].lower() != header_bytes
                ]
                headers.append((header_name.encode(), request_id.encode()))
                message["headers"] = headers
            await send(message)

        await app(scope, receive, send_wrapper)

    return asgi_app
