"""Request metadata for audit log lines on destructive admin actions."""

from __future__ import annotations

from starlette.requests import Request


def get_audit_request_context(request: Request) -> tuple[str | None, str | None]:
    """Return (request_id, ip_address) for audit log lines.

    request_id is the value RequestIDMiddleware stored in request state; the
    IP is the first X-Forwarded-For hop, else request.client.host.
    """
    request_id = getattr(request.state, "request_id", None)
    client_host = request.client.host if request.client else None
    forwarded = request.headers.get("X-Forwarded-For")
    ip_address = (forwarded.split(",")[0].strip() if forwarded else None) or client_host
    return (request_id, ip_address)
