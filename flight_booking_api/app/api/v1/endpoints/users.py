"""
User endpoints.

Create, list, fetch, replace and delete users.  The ``UserService``
instance is taken from ``app.state`` so each application (and each
test) works on its own store.
"""

from typing import List

from fastapi import APIRouter, Depends, Request, status

from flight_booking_api.app.schemas.user import UserCreate, UserRead, UserUpdate
from flight_booking_api.app.services.user_service import UserService

router = APIRouter()


def get_user_service(request: Request) -> UserService:
    return request.app.state.user_service


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def create_user(
    user_in: UserCreate,
    service: UserService = Depends(get_user_service),
) -> UserRead:
    """Create a user.  Returns 400 with every failing field if the body is invalid."""
    return await service.create(user_in)


@router.get("", response_model=List[UserRead])
async def list_users(service: UserService = Depends(get_user_service)) -> List[UserRead]:
    """Return all users in creation order."""
    return await service.list()


@router.get("/{user_id}", response_model=UserRead)
async def get_user(user_id: int, service: UserService = Depends(get_user_service)) -> UserRead:
    """Retrieve a single user.  Returns 404 if the user does not exist."""
    return await service.get(user_id)


@router.put("/{user_id}", response_model=UserRead)
async def update_user(
    user_id: int,
    user_in: UserUpdate,
    service: UserService = Depends(get_user_service),
) -> UserRead:
    """Replace the name and email of an existing user."""
    return await service.update(user_id, user_in)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(user_id: int, service: UserService = Depends(get_user_service)) -> None:
    """Delete a user.  Always answers 204, even if the user did not exist."""
    await service.delete(user_id)
    return None
