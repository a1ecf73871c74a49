"""Lambda entry point: API Gateway (REST) proxy events through Mangum."""

import json

import pytest

from taskmanager import lambda_handler, main


def _rest_event(method: str, path: str, body: dict | None = None, claims: dict | None = None) -> dict:
    headers = {"content-type": "application/json", "host": "abc123.execute-api.eu-west-1.amazonaws.com"}
    request_context = {
        "resourcePath": "/{proxy+}",
        "httpMethod": method,
        "path": f"/prod{path}",
        "stage": "prod",
        "requestId": "gw-request-1",
        "identity": {"sourceIp": "203.0.113.10"},
    }
    if claims is not None:
        request_context["authorizer"] = {"claims": claims}
    return {
        "resource": "/{proxy+}",
        "path": path,
        "httpMethod": method,
        "headers": headers,
        "multiValueHeaders": {k: [v] for k, v in headers.items()},
        "queryStringParameters": None,
        "multiValueQueryStringParameters": None,
        "pathParameters": {"proxy": path.lstrip("/")},
        "requestContext": request_context,
        "body": json.dumps(body) if body is not None else None,
        "isBase64Encoded": False,
    }


@pytest.fixture
def handler(backends, monkeypatch):
    monkeypatch.setattr(main.app.state, "backends", backends)
    monkeypatch.setattr(lambda_handler, "_asgi_handler", None)
    return lambda_handler.api_handler


def test_create_task_with_authorizer_claims(handler, notifier) -> None:
    event = _rest_event(
        "POST",
        "/api/v1/tasks",
        body={"title": "From Lambda", "priority": "urgent", "assignedTo": ["user-123"]},
        claims={"sub": "admin-1", "email": "admin@example.com", "custom:role": "admin"},
    )
    response = handler(event, None)
    assert response["statusCode"] == 201
    assert json.loads(response["body"])["task"]["title"] == "From Lambda"
    assert notifier.sent[0]["to"] == "user123@example.com"


def test_member_claims_are_forbidden(handler) -> None:
    event = _rest_event(
        "POST",
        "/api/v1/tasks",
        body={"title": "T", "assignedTo": ["user-123"]},
        claims={"sub": "user-123", "custom:role": "member"},
    )
    response = handler(event, None)
    assert response["statusCode"] == 403
    assert json.loads(response["body"])["message"] == "Only admins can create tasks"


def test_gateway_request_id_is_echoed(handler) -> None:
    response = handler(_rest_event("GET", "/api/v1/health"), None)
    assert response["statusCode"] == 200
    headers = {k.lower(): v for k, v in (response.get("multiValueHeaders") or {}).items()}
    headers.update({k.lower(): [v] for k, v in (response.get("headers") or {}).items()})
    assert headers["x-request-id"] == ["gw-request-1"]
