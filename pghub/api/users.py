"""
Users API endpoints
"""
from fastapi import APIRouter, Depends, HTTPException, Request, Response
from typing import List
import logging

from pghub.constants import ErrorMessages, HTTPStatus
from pghub.dependencies import get_user_service
from pghub.dtos.request.user_request import CreateUserRequest, UpdateUserRequest
from pghub.dtos.response.user_response import UserResponse
from pghub.services.interfaces import IUserService
from pghub.utils.error_handlers import handle_api_errors

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/users/{user_id}", response_model=UserResponse)
@handle_api_errors("User retrieval")
def get_user(user_id: str, service: IUserService = Depends(get_user_service)):
    return service.get_by_id(user_id=user_id)


@router.get("/users", response_model=List[UserResponse])
@handle_api_errors("User listing")
def list_users(service: IUserService = Depends(get_user_service)):
    return service.get_all()


@router.post("/users", response_model=UserResponse, status_code=HTTPStatus.CREATED)
@handle_api_errors("User creation")
def create_user(
    payload: CreateUserRequest,
    request: Request,
    response: Response,
    service: IUserService = Depends(get_user_service)
):
    """
    Register a user.

    The email is stored lowercased. Returns 400 listing every violated rule,
    or 409 if the email is already registered.
    """
    user = service.create(payload)
    response.headers["Location"] = str(request.url_for("get_user", user_id=user.id))
    return user


@router.put("/users/{user_id}", response_model=UserResponse)
@handle_api_errors("User update")
def update_user(
    user_id: str,
    payload: UpdateUserRequest,
    service: IUserService = Depends(get_user_service)
):
    """Replace all of a user's values."""
    return service.update(user_id=user_id, request=payload)


@router.delete("/users/{user_id}", status_code=HTTPStatus.NO_CONTENT)
@handle_api_errors("User deletion", failure_detail=ErrorMessages.USER_DELETE_FAILED)
def delete_user(user_id: str, service: IUserService = Depends(get_user_service)):
    if not service.delete(user_id=user_id):
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail=ErrorMessages.USER_NOT_FOUND)
    return Response(status_code=HTTPStatus.NO_CONTENT)
