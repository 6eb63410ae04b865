# File: app/api/v1/routes_users.py

from fastapi import APIRouter, HTTPException, status

from app.schemas.user import (
    UserChangeSet,
    UserCreateRequest,
    UserCreateSummary,
    UserUpdateRequest,
    field_docs,
)
from app.services.user_service import (
    InvalidUserId,
    build_user_change_set,
    describe_user_create,
)

router = APIRouter()

REQUEST_SHAPES = {
    "create": UserCreateRequest,
    "update": UserUpdateRequest,
}


@router.post(
    "/",
    response_model=UserCreateSummary,
    status_code=status.HTTP_201_CREATED,
    summary="Create user",
)
def create_user(payload: UserCreateRequest):
    return describe_user_create(payload)


@router.put(
    "/{user_id}",
    response_model=UserChangeSet,
    summary="Update user",
)
def update_user(user_id: int, payload: UserUpdateRequest):
    """
    Validate an update for ``user_id`` and return the changes it makes.

    Omit ``password`` to keep the current one.
    """
    try:
        return build_user_change_set(user_id, payload)
    except InvalidUserId as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))


@router.get("/fields/{shape}", summary="Describe request fields")
def describe_fields(shape: str):
    model = REQUEST_SHAPES.get(shape)
    if model is None:
        raise HTTPException(
            status_code=404,
            detail=f"Unknown request shape '{shape}'",
        )
    return {
        name: {"description": doc.description, "required": doc.required}
        for name, doc in field_docs(model).items()
    }
