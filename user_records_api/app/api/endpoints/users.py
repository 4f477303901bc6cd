"""
User endpoints.

List, fetch, create and delete user records.  Lookups that miss are
answered with a 404 envelope here; everything raised by the service
layer is rendered by the application's exception handlers.
"""

from typing import Union

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from ..deps import USER_CREATE_BODY, get_user_service, validate_user
from ...core.errors import error_envelope
from ...schemas.user import (
    ErrorResponse,
    MessageResponse,
    UserCreate,
    UserCreatedResponse,
    UserListResponse,
    UserResponse,
)
from ...services.user_service import UserService


router = APIRouter()

USER_NOT_FOUND = "User not found"
NOT_FOUND_RESPONSES = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}


@router.get("", response_model=UserListResponse, response_model_exclude_none=True)
async def list_users(service: UserService = Depends(get_user_service)) -> UserListResponse:
    """Return all users with their count."""
    users = await service.get_all_users()
    return UserListResponse(count=len(users), data=users)


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    response_model_exclude_none=True,
    responses=NOT_FOUND_RESPONSES,
)
async def get_user(
    user_id: str,
    service: UserService = Depends(get_user_service),
) -> Union[UserResponse, JSONResponse]:
    user = await service.get_user_by_id(user_id)
    if user is None:
        return error_envelope(status.HTTP_404_NOT_FOUND, USER_NOT_FOUND)
    return UserResponse(data=user)


@router.post(
    "",
    response_model=UserCreatedResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_409_CONFLICT: {"model": ErrorResponse},
    },
    openapi_extra=USER_CREATE_BODY,
)
async def create_user(
    payload: UserCreate = Depends(validate_user),
    service: UserService = Depends(get_user_service),
) -> UserCreatedResponse:
    """Create a user.

    Accepts JSON or a url‑encoded form.  ``name`` and ``email`` are
    required; ``role`` defaults to ``user``.
    A duplicate email is answered with 409.
    """
    user = await service.create_user(payload)
    return UserCreatedResponse(data=user)


@router.delete("/{user_id}", response_model=MessageResponse, responses=NOT_FOUND_RESPONSES)
async def delete_user(
    user_id: str,
    service: UserService = Depends(get_user_service),
) -> Union[MessageResponse, JSONResponse]:
    removed = await service.delete_user(user_id)
    if not removed:
        return error_envelope(status.HTTP_404_NOT_FOUND, USER_NOT_FOUND)
    return MessageResponse(message="User deleted successfully")
