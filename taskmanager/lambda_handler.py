"""AWS Lambda entry point: API Gateway events through Mangum to the FastAPI app."""

from typing import Any

from mangum import Mangum

_asgi_handler: Mangum | None = None


def api_handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
    """Lambda handler for HTTP requests via API Gateway.

    The app is built on the first invocation and reused for the lifetime of
    the execution environment. Lifespan is off; create_app does all setup.
    """
    global _asgi_handler

    if _asgi_handler is None:
        from taskmanager.main import app

        _asgi_handler = Mangum(app, lifespan="off")
    return _asgi_handler(event, context)
