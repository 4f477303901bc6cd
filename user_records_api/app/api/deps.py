"""
Request dependencies shared by the endpoints.

``validate_user`` is the gate in front of user creation.  It accepts a
JSON body or an ``application/x-www-form-urlencoded`` form, and rejects
requests without a name or email, or with an email that does not look
like ``local@domain.tld``, before the service is called.
"""

import json
import re
from typing import Any, Dict

from fastapi import Request
from pydantic import ValidationError

from ..core.errors import UserValidationError
from ..schemas.user import UserCreate
from ..services.user_service import UserService


EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"
INVALID_BODY = "Invalid request body"


def is_valid_email(email: str) -> bool:
    """Coarse shape check, not RFC 5322 validation."""
    return EMAIL_PATTERN.fullmatch(email) is not None


def get_user_service(request: Request) -> UserService:
    """Return the service owned by the running application."""
    return request.app.state.user_service


async def read_user_payload(request: Request) -> UserCreate:
    """Build a ``UserCreate`` from a form or JSON body.

    An empty body is treated as an empty object.  Undecodable JSON or
    wrongly typed fields raise ``UserValidationError``.
    """
    content_type = request.headers.get("content-type", "").split(";")[0].strip().lower()
    if content_type == FORM_CONTENT_TYPE:
        form = await request.form()
        data: Any = {key: value for key, value in form.items() if isinstance(value, str)}
    else:
        body = await request.body()
        try:
            data = json.loads(body) if body.strip() else {}
        except ValueError:
            raise UserValidationError(INVALID_BODY)

    if not isinstance(data, dict):
        raise UserValidationError(INVALID_BODY)
    try:
        return UserCreate.model_validate(data)
    except ValidationError:
        raise UserValidationError(INVALID_BODY)


async def validate_user(request: Request) -> UserCreate:
    """Read and validate a create request.

    Raises ``UserValidationError`` (rendered as HTTP 400) when a
    required field is missing or empty, or when the email is malformed.
    """
    payload = await read_user_payload(request)
    return check_user_payload(payload)


def check_user_payload(payload: UserCreate) -> UserCreate:
    if not payload.name or not payload.email:
        raise UserValidationError("Name and email are required")
    if not is_valid_email(payload.email):
        raise UserValidationError("Invalid email format")
    return payload


# Request body schema for the OpenAPI document; the body itself is
# parsed by ``read_user_payload``.
USER_CREATE_BODY: Dict[str, Any] = {
    "requestBody": {
        "required": True,
        "content": {
            "application/json": {"schema": UserCreate.model_json_schema()},
            FORM_CONTENT_TYPE: {"schema": UserCreate.model_json_schema()},
        },
    }
}
