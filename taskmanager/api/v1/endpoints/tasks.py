"""Task API: thin routes delegating to the task use cases."""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, Query

from taskmanager.api.v1.dependencies import (
    get_actor_context,
    get_create_task_use_case,
    get_task_service,
)
from taskmanager.application.dtos.actor import ActorContext
from taskmanager.application.use_cases.tasks import CreateTaskUseCase, TaskService
from taskmanager.schemas.task import (
    CommentCreatedResponse,
    CommentCreateRequest,
    CommentResponse,
    TaskCreateRequest,
    TaskEnvelope,
    TaskListResponse,
    TaskResponse,
    TaskStatusUpdateRequest,
)

router = APIRouter()


@router.post(
    "",
    response_model=TaskEnvelope,
    status_code=201,
    openapi_extra={
        "requestBody": {
            "content": {
                "application/json": {"schema": TaskCreateRequest.model_json_schema(by_alias=True)}
            }
        }
    },
)
async def create_task(
    actor: Annotated[ActorContext, Depends(get_actor_context)],
    use_case: Annotated[CreateTaskUseCase, Depends(get_create_task_use_case)],
    payload: Annotated[Any, Body()] = None,
) -> TaskEnvelope:
    """Create a task (admins only) and email every assignee."""
    result = await use_case.execute(actor, payload)
    return TaskEnvelope(task=TaskResponse.from_entity(result.task))


@router.get("", response_model=TaskListResponse)
async def list_tasks(
    actor: Annotated[ActorContext, Depends(get_actor_context)],
    task_service: Annotated[TaskService, Depends(get_task_service)],
    status: str | None = Query(None, description="To Do | In Progress | Completed"),
) -> TaskListResponse:
    """List tasks: all for admins, assigned ones for members."""
    tasks = await task_service.list_tasks(actor, status=status)
    return TaskListResponse(tasks=[TaskResponse.from_entity(t) for t in tasks])


@router.get("/{task_id}", response_model=TaskEnvelope)
async def get_task(
    task_id: str,
    actor: Annotated[ActorContext, Depends(get_actor_context)],
    task_service: Annotated[TaskService, Depends(get_task_service)],
) -> TaskEnvelope:
    task = await task_service.get_task(actor, task_id)
    return TaskEnvelope(task=TaskResponse.from_entity(task))


@router.put("/{task_id}", response_model=TaskEnvelope)
async def update_task_status(
    task_id: str,
    body: TaskStatusUpdateRequest,
    actor: Annotated[ActorContext, Depends(get_actor_context)],
    task_service: Annotated[TaskService, Depends(get_task_service)],
) -> TaskEnvelope:
    """Change task status (admin or assignee)."""
    task = await task_service.update_status(actor, task_id, body.status)
    return TaskEnvelope(task=TaskResponse.from_entity(task))


@router.post("/{task_id}/comments", response_model=CommentCreatedResponse, status_code=201)
async def add_comment(
    task_id: str,
    body: CommentCreateRequest,
    actor: Annotated[ActorContext, Depends(get_actor_context)],
    task_service: Annotated[TaskService, Depends(get_task_service)],
) -> CommentCreatedResponse:
    """Append a comment (admin or assignee)."""
    task, comment = await task_service.add_comment(actor, task_id, body.text)
    return CommentCreatedResponse(
        comment=CommentResponse.from_comment(comment),
        task=TaskResponse.from_entity(task),
    )
