"""Task management API: task creation, assignment and notification."""

__version__ = "1.0.0"
