"""
User routes.
"""
from fastapi import APIRouter, Depends, status
from typing import List, Optional

from detailpro.dependencies import found_or_404, get_store
from detailpro.models.user import UserRole
from detailpro.schemas.user import User as UserSchema, UserCreate, UserUpdate
from detailpro.store import Store

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/", response_model=List[UserSchema])
async def get_users(
    role: Optional[UserRole] = None,
    store: Store = Depends(get_store)
):
    """
    Get all users, optionally only those with the given role.
    """
    return store.users.list(role=role.value if role else None)


@router.get("/{user_id}", response_model=UserSchema)
async def get_user(user_id: int, store: Store = Depends(get_store)):
    """
    Get a specific user by ID.
    """
    return found_or_404(store.users.get(user_id))


@router.post("/", response_model=UserSchema, status_code=status.HTTP_201_CREATED)
async def create_user(user: UserCreate, store: Store = Depends(get_store)):
    """
    Create a new user. The password is stored but never returned.
    """
    return store.users.create(user)


@router.put("/{user_id}", response_model=UserSchema)
async def update_user(
    user_id: int,
    user_update: UserUpdate,
    store: Store = Depends(get_store)
):
    """
    Update a user.
    """
    return found_or_404(store.users.update(user_id, user_update))
