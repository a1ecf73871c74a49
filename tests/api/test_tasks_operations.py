"""Task listing, status updates and comments over HTTP."""

import pytest
from httpx import AsyncClient

URL = "/api/v1/tasks"


@pytest.fixture
async def task_id(client: AsyncClient, admin_headers) -> str:
    """A task assigned to user-123 only."""
    response = await client.post(
        URL,
        json={"title": "Write report", "priority": "high", "assignedTo": ["user-123"]},
        headers=admin_headers,
    )
    assert response.status_code == 201
    return response.json()["task"]["taskId"]


async def test_admin_lists_all_tasks(client: AsyncClient, admin_headers, task_id) -> None:
    await client.post(URL, json={"title": "Other", "assignedTo": ["user-456"]}, headers=admin_headers)
    response = await client.get(URL, headers=admin_headers)
    assert response.status_code == 200
    assert len(response.json()["tasks"]) == 2


async def test_member_lists_only_assigned_tasks(
    client: AsyncClient, admin_headers, member_headers, task_id
) -> None:
    await client.post(URL, json={"title": "Other", "assignedTo": ["user-456"]}, headers=admin_headers)
    response = await client.get(URL, headers=member_headers)
    assert response.status_code == 200
    tasks = response.json()["tasks"]
    assert [t["taskId"] for t in tasks] == [task_id]


async def test_list_filters_by_status(client: AsyncClient, admin_headers, task_id) -> None:
    response = await client.get(URL, params={"status": "Completed"}, headers=admin_headers)
    assert response.json()["tasks"] == []
    response = await client.get(URL, params={"status": "To Do"}, headers=admin_headers)
    assert len(response.json()["tasks"]) == 1


async def test_list_rejects_unknown_status(client: AsyncClient, admin_headers) -> None:
    response = await client.get(URL, params={"status": "Blocked"}, headers=admin_headers)
    assert response.status_code == 400


async def test_list_requires_identity(client: AsyncClient) -> None:
    response = await client.get(URL)
    assert response.status_code == 401


async def test_get_task_as_assignee(client: AsyncClient, member_headers, task_id) -> None:
    response = await client.get(f"{URL}/{task_id}", headers=member_headers)
    assert response.status_code == 200
    assert response.json()["task"]["title"] == "Write report"


async def test_get_task_as_other_member_is_forbidden(
    client: AsyncClient, other_member_headers, task_id
) -> None:
    response = await client.get(f"{URL}/{task_id}", headers=other_member_headers)
    assert response.status_code == 403


async def test_get_unknown_task_returns_404(client: AsyncClient, admin_headers) -> None:
    response = await client.get(f"{URL}/missing", headers=admin_headers)
    assert response.status_code == 404


async def test_assignee_updates_status(client: AsyncClient, member_headers, task_id) -> None:
    response = await client.put(
        f"{URL}/{task_id}", json={"status": "In Progress"}, headers=member_headers
    )
    assert response.status_code == 200
    task = response.json()["task"]
    assert task["status"] == "In Progress"
    assert task["updatedAt"] >= task["createdAt"]

    again = await client.get(f"{URL}/{task_id}", headers=member_headers)
    assert again.json()["task"]["status"] == "In Progress"


async def test_invalid_status_returns_400(client: AsyncClient, admin_headers, task_id) -> None:
    response = await client.put(f"{URL}/{task_id}", json={"status": "Done"}, headers=admin_headers)
    assert response.status_code == 400
    assert response.json()["message"] == "Invalid status"


async def test_non_assignee_cannot_update_status(
    client: AsyncClient, other_member_headers, task_id
) -> None:
    response = await client.put(
        f"{URL}/{task_id}", json={"status": "Completed"}, headers=other_member_headers
    )
    assert response.status_code == 403


async def test_update_unknown_task_returns_404(client: AsyncClient, admin_headers) -> None:
    response = await client.put(f"{URL}/missing", json={"status": "Completed"}, headers=admin_headers)
    assert response.status_code == 404


async def test_assignee_adds_comment(client: AsyncClient, member_headers, task_id) -> None:
    response = await client.post(
        f"{URL}/{task_id}/comments",
        json={"text": "Started <i>today</i>"},
        headers=member_headers,
    )
    assert response.status_code == 201
    data = response.json()
    assert data["comment"]["text"] == "Started today"
    assert data["comment"]["author"] == "user-123"
    assert len(data["task"]["comments"]) == 1


async def test_comments_are_appended_in_order(client: AsyncClient, admin_headers, task_id) -> None:
    for text in ("first", "second"):
        await client.post(f"{URL}/{task_id}/comments", json={"text": text}, headers=admin_headers)
    response = await client.get(f"{URL}/{task_id}", headers=admin_headers)
    assert [c["text"] for c in response.json()["task"]["comments"]] == ["first", "second"]


async def test_empty_comment_returns_400(client: AsyncClient, admin_headers, task_id) -> None:
    response = await client.post(
        f"{URL}/{task_id}/comments", json={"text": "<br>"}, headers=admin_headers
    )
    assert response.status_code == 400


async def test_comment_body_without_text_returns_422(client: AsyncClient, admin_headers, task_id) -> None:
    response = await client.post(f"{URL}/{task_id}/comments", json={}, headers=admin_headers)
    assert response.status_code == 422
    assert response.json()["error"] == "VALIDATION_ERROR"
