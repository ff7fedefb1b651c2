"""User CRUD endpoints"""
from fastapi import APIRouter, Body, Depends, Query, Request, Response, status
from fastapi.responses import JSONResponse
from typing import Any, List
from app.core.config import settings
from app.core.dependencies import get_user_store
from app.models.schemas import ErrorResponse, UserDto, ValidationErrorResponse
from app.services.user_store import UserStore
from app.utils.exceptions import error_response, store_error_response, validation_error_response
from app.utils.logger import logger
from app.utils.validation import validate_user_payload

router = APIRouter(prefix="/users", tags=["Users"])

BAD_REQUEST = {400: {"model": ValidationErrorResponse}}
NOT_FOUND = {404: {"model": ErrorResponse}}
SERVER_ERROR = {500: {"model": ErrorResponse}}

USER_BODY = Body(
    None,
    examples=[{"name": "Alice", "email": "a@x.com", "password": "p1"}],
    description="User fields: name, email and password (all required)"
)


@router.get(
    "",
    response_model=List[UserDto],
    summary="List Users",
    responses={**BAD_REQUEST, **SERVER_ERROR}
)
async def get_all_users(
    page: int = Query(settings.DEFAULT_PAGE, description="1-based page number"),
    page_size: int = Query(settings.DEFAULT_PAGE_SIZE, alias="pageSize", description="Users per page"),
    store: UserStore = Depends(get_user_store)
):
    """
    Get one page of users in creation order.

    **Returns:**
    - Up to `pageSize` users; an empty list past the last page
    - 400 if `page` or `pageSize` is not a positive integer
    """
    try:
        result = store.list(page, page_size)
        if not result.ok:
            logger.warning(f"Rejected pagination page={page} pageSize={page_size}")
            return store_error_response(result.error)

        return [user.to_dto() for user in result.value]

    except Exception as e:
        logger.error(f"Unexpected error listing users: {str(e)}")
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Unexpected error retrieving users.", str(e))


@router.get(
    "/{user_id}",
    response_model=UserDto,
    summary="Get User",
    responses={**NOT_FOUND, **SERVER_ERROR}
)
async def get_user_by_id(user_id: int, store: UserStore = Depends(get_user_store)):
    """Get a single user by id"""
    try:
        result = store.get(user_id)
        if not result.ok:
            return store_error_response(result.error)

        return result.value.to_dto()

    except Exception as e:
        logger.error(f"Unexpected error retrieving user {user_id}: {str(e)}")
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Unexpected error retrieving user.", str(e))


@router.post(
    "",
    response_model=UserDto,
    status_code=status.HTTP_201_CREATED,
    summary="Create User",
    responses={**BAD_REQUEST, **SERVER_ERROR}
)
async def create_user(
    request: Request,
    body: Any = USER_BODY,
    store: UserStore = Depends(get_user_store)
):
    """
    Create a user.

    The id is assigned by the service; any id in the body is ignored.

    **Returns:**
    - 201 with the new user and a `Location` header pointing at it
    - 400 with field-level errors if the body is invalid
    """
    try:
        payload, errors = validate_user_payload(body)
        if errors:
            logger.warning(f"Invalid user payload: {[e.field for e in errors]}")
            return validation_error_response(errors)

        user = store.create(payload.name, payload.email, payload.password)
        location = str(request.url_for("get_user_by_id", user_id=user.id))

        return JSONResponse(
            status_code=status.HTTP_201_CREATED,
            content=user.to_dto().model_dump(),
            headers={"Location": location}
        )

    except Exception as e:
        logger.error(f"Unexpected error creating user: {str(e)}")
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Unexpected error creating user.", str(e))


@router.put(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Update User",
    responses={**BAD_REQUEST, **NOT_FOUND, **SERVER_ERROR}
)
async def update_user(
    user_id: int,
    body: Any = USER_BODY,
    store: UserStore = Depends(get_user_store)
):
    """
    Replace name, email and password of an existing user.

    The body is validated before the user is looked up, so an invalid body
    yields 400 even for an unknown id.
    """
    try:
        payload, errors = validate_user_payload(body)
        if errors:
            logger.warning(f"Invalid user payload for {user_id}: {[e.field for e in errors]}")
            return validation_error_response(errors)

        result = store.update(user_id, payload.name, payload.email, payload.password)
        if not result.ok:
            return store_error_response(result.error)

        return Response(status_code=status.HTTP_204_NO_CONTENT)

    except Exception as e:
        logger.error(f"Unexpected error updating user {user_id}: {str(e)}")
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Unexpected error updating user.", str(e))


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete User",
    responses={**NOT_FOUND, **SERVER_ERROR}
)
async def delete_user(user_id: int, store: UserStore = Depends(get_user_store)):
    """Delete a user; its id is never handed out again"""
    try:
        result = store.delete(user_id)
        if not result.ok:
            return store_error_response(result.error)

        return Response(status_code=status.HTTP_204_NO_CONTENT)

    except Exception as e:
        logger.error(f"Unexpected error deleting user {user_id}: {str(e)}")
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Unexpected error deleting user.", str(e))
