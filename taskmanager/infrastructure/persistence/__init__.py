"""Persistence: item mapping plus DynamoDB and in-memory repositories."""
