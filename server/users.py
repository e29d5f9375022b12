"""
User API routes.

Placeholder endpoints under /api/users. Nothing is validated or stored:
the create route echoes whatever JSON it receives.

Author: SafeSteps Team
Date: 2026-10-16
"""

from typing import Any, Optional

from fastapi import APIRouter, Body, Request
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

router = APIRouter(prefix="/api/users", tags=["users"])

JSON_MEDIA_TYPE = "application/json"


class MessageResponse(BaseModel):
    """Static placeholder payload."""

    message: str


class UserCreatedResponse(BaseModel):
    """Echo of a created user."""

    message: str
    user: Any


def is_json_request(content_type: Optional[str]) -> bool:
    """Whether a Content-Type header names a JSON body (parameters ignored)."""
    if not content_type:
        return False
    return content_type.split(";", 1)[0].strip().lower() == JSON_MEDIA_TYPE


@router.get("", response_class=PlainTextResponse)
def users_root():
    """Return the users route banner."""
    return "User route"


@router.post("", status_code=201, response_model=UserCreatedResponse)
def create_user(request: Request, user: Any = Body(None)):
    """Echo the posted user back.

    Only JSON bodies are parsed; any other content type is treated as an
    empty body.

    Args:
        request: Incoming request, used for its Content-Type.
        user: Any JSON body. A missing or non-JSON body echoes as an empty object.

    Returns:
        Confirmation message with the unmodified body.
    """
    if user is None or not is_json_request(request.headers.get("content-type")):
        user = {}
    return {"message": "User created", "user": user}


@router.get("/all", response_model=MessageResponse)
def list_users():
    """Return the static user list placeholder."""
    return {"message": "List of users"}
