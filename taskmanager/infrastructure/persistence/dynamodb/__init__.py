"""DynamoDB repositories (STORAGE_BACKEND=dynamodb)."""

from taskmanager.infrastructure.persistence.dynamodb.client import (
    get_dynamodb_resource,
    get_table,
)
from taskmanager.infrastructure.persistence.dynamodb.task_repo import (
    DynamoDBTaskRepository,
)
from taskmanager.infrastructure.persistence.dynamodb.user_repo import (
    DynamoDBUserDirectory,
)

__all__ = [
    "DynamoDBTaskRepository",
    "DynamoDBUserDirectory",
    "get_dynamodb_resource",
    "get_table",
]
