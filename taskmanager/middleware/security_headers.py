"""Security headers middleware for the JSON API. Raw ASGI."""

from typing import Callable

# JSON only: nothing is framed, scripted or cached by intermediaries.
DEFAULT_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Cache-Control": "no-store",
    "Strict-Transport-Security": "max-age=31536000; includeSubDomains",
    "Referrer-Policy": "no-referrer",
}
# Swagger UI loads its assets from a CDN, so /docs keeps the browser defaults.
DOCS_PATHS = ("/docs", "/redoc", "/openapi.json")
API_CSP = "default-src 'none'; frame-ancestors 'none'"


def SecurityHeadersMiddleware(
    app: Callable, headers: dict[str, str] | None = None
) -> Callable:
    """Set security headers on every HTTP response without overriding ones the route set."""
    resolved = dict(DEFAULT_HEADERS if headers is None else headers)
    base = [(k.lower().encode(), v.encode()) for k, v in resolved.items()]
    csp = (b"content-security-policy", API_CSP.encode())

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        extra = base if scope.get("path", "").startswith(DOCS_PATHS) else [*base, csp]

        async def send_wrapper(message: dict) -> None:
            if message["type"] == "http.response.start":
                out = list(message.get("headers", []))
                present = {name.lower() for name, _ in out}
                out.extend(h for h in extra if h[0] not in present)
                message["headers"] = out
            await send(message)

        await app(scope, receive, send_wrapper)

    return asgi_app
