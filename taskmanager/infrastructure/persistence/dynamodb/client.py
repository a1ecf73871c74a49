"""DynamoDB resource (boto3).

One resource per process, created lazily and reused across Lambda
invocations of the same container. Credentials come from the standard AWS
chain (execution role on Lambda, env/profile locally).
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any

import boto3

logger = logging.getLogger(__name__)


@lru_cache
def get_dynamodb_resource(region: str, endpoint_url: str | None = None) -> Any:
    """Return a cached boto3 DynamoDB service resource.

    Args:
        region: AWS region (e.g. 'eu-west-1').
        endpoint_url: Optional custom endpoint (DynamoDB Local).

    Returns:
        boto3 DynamoDB ServiceResource.
    """
    extra = {} if endpoint_url is None else {"endpoint_url": endpoint_url}
    logger.info("Creating DynamoDB resource (region=%s, endpoint=%s)", region, endpoint_url or "default")
    return boto3.resource("dynamodb", region_name=region, **extra)


def get_table(table_name: str, region: str, endpoint_url: str | None = None) -> Any:
    """Return a boto3 Table for table_name."""
    return get_dynamodb_resource(region, endpoint_url).Table(table_name)
