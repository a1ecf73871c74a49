"""HTTP middleware: timeout, request ID, security headers.

Applied in create_app; order matters (last added = outermost).
"""

from taskmanager.middleware.request_id import RequestIDMiddleware
from taskmanager.middleware.security_headers import SecurityHeadersMiddleware
from taskmanager.middleware.timeout import TimeoutMiddleware

__all__ = [
    "RequestIDMiddleware",
    "SecurityHeadersMiddleware",
    "TimeoutMiddleware",
]
