"""Infrastructure: DynamoDB/in-memory persistence, SES/log notifications, JWT."""
