"""
Posts API endpoints
"""
from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response
from typing import List
import logging

from pghub.config.app_config import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from pghub.constants import ErrorMessages, HTTPStatus
from pghub.dependencies import get_post_service
from pghub.dtos.request.post_request import CreatePostRequest, UpdatePostRequest
from pghub.dtos.response.post_response import PostResponse
from pghub.services.interfaces import IPostService
from pghub.utils.error_handlers import handle_api_errors

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/posts/{post_id}", response_model=PostResponse)
@handle_api_errors("Post retrieval")
def get_post(post_id: str, service: IPostService = Depends(get_post_service)):
    """
    Get a post with its attachments

    Raises:
        HTTPException: 404 if the post does not exist
    """
    return service.get_by_id(post_id=post_id)


@router.get("/posts", response_model=List[PostResponse])
@handle_api_errors("Post listing")
def list_posts(
    page_number: int = Query(1, ge=1, description="1-based page index"),
    page_size: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE, description="Posts per page"),
    service: IPostService = Depends(get_post_service)
):
    """
    List one page of posts, oldest first.

    No total count is returned.
    """
    return service.get_all(page_number=page_number, page_size=page_size)


@router.post("/posts", response_model=PostResponse, status_code=HTTPStatus.CREATED)
@handle_api_errors("Post creation")
def create_post(
    payload: CreatePostRequest,
    request: Request,
    response: Response,
    service: IPostService = Depends(get_post_service)
):
    """
    Create a post and one attachment per file name in the payload.

    Returns:
        The created post; the Location header points at its GET URL
    """
    post = service.create(payload)
    response.headers["Location"] = str(request.url_for("get_post", post_id=post.id))
    return post


@router.put("/posts/{post_id}", response_model=PostResponse)
@handle_api_errors("Post update")
def update_post(
    post_id: str,
    payload: UpdatePostRequest,
    service: IPostService = Depends(get_post_service)
):
    """
    Replace a post's title, content and attachments.

    Attachments not present in the payload are removed; the ones listed are
    created anew.
    """
    return service.update(post_id=post_id, request=payload)


@router.delete("/posts/{post_id}", status_code=HTTPStatus.NO_CONTENT)
@handle_api_errors("Post deletion", failure_detail=ErrorMessages.POST_DELETE_FAILED)
def delete_post(post_id: str, service: IPostService = Depends(get_post_service)):
    """
    Delete a post and its attachments.

    Returns 204 when removed and 404 when no such post exists.
    """
    if not service.delete(post_id=post_id):
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail=ErrorMessages.POST_NOT_FOUND)
    return Response(status_code=HTTPStatus.NO_CONTENT)
