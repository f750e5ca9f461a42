"""ASGI middleware."""

from siteops.middleware.request_id import RequestIDMiddleware

__all__ = [
    "RequestIDMiddleware",
]
