"""Seed the users table from a JSON file (DynamoDB backend only).

Usage:
    python -m scripts.seed_users <users.json>
The file holds a JSON list of {userId, email, role, status, name?} items.
Existing users with the same userId are replaced.
"""

import sys

from taskmanager.core.config import get_settings
from taskmanager.infrastructure.persistence.dynamodb import get_table
from taskmanager.infrastructure.persistence.items import user_to_item
from taskmanager.infrastructure.persistence.memory import load_seed_users


def main() -> None:
    """Write every user in the file to USERS_TABLE."""
    if len(sys.argv) < 2:
        print("Usage: python -m scripts.seed_users <users.json>", file=sys.stderr)
        sys.exit(1)

    settings = get_settings()
    if settings.storage_backend != "dynamodb":
        print("STORAGE_BACKEND must be 'dynamodb' to seed users", file=sys.stderr)
        sys.exit(1)

    try:
        users = load_seed_users(sys.argv[1])
    except (OSError, ValueError) as e:
        print(f"Cannot read users: {e}", file=sys.stderr)
        sys.exit(1)

    table = get_table(settings.users_table, settings.aws_region, settings.dynamodb_endpoint_url)
    with table.batch_writer(overwrite_by_pkeys=["userId"]) as batch:
        for user in users:
            batch.put_item(Item=user_to_item(user))
    print(f"Seeded {len(users)} user(s) into {settings.users_table}")


if __name__ == "__main__":
    main()
