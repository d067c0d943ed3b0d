import uuid
from dataclasses import dataclass
from typing import Optional

from fastapi import Request

REQUEST_ID_HEADER = "X-Request-Id"


def resolve_request_id(request: Request) -> str:
    """Caller-supplied request id, or a fresh one"""
    return request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex


@dataclass(frozen=True)
class RequestContext:
    client_ip: Optional[str]
    user_agent: Optional[str]
    request_id: Optional[str]

    def describe(self) -> str:
        return f"ip={self.client_ip} request_id={self.request_id}"


def get_request_context(request: Request) -> RequestContext:
    # request_id is set on request.state by LoggingMiddleware
    return RequestContext(
        client_ip=request.client.host if request.client else None,
        user_agent=request.headers.get("user-agent"),
        request_id=getattr(request.state, "request_id", None) or request.headers.get(REQUEST_ID_HEADER),
    )
