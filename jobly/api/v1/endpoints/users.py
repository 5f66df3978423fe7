"""User API endpoints.

Admins manage every account; a user may read, update and delete their own.
Passwords can only be changed by the account owner.
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from jobly.api.deps import require_admin, require_self_or_admin
from jobly.db.session import get_db
from jobly.models.schemas import (
    DeletedResponse,
    UserListResponse,
    UserNew,
    UserResponse,
    UserUpdate,
    UserWithTokenResponse,
)
from jobly.repositories.user import user_repository
from jobly.services.auth_service import create_access_token
from jobly.utils import get_logger

logger = get_logger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=UserWithTokenResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
async def create_user(body: UserNew, db: Session = Depends(get_db)):
    """Add a user, possibly an admin, and return a token for them.

    This is not the registration endpoint; see /auth/register.

    Authorization required: admin
    """
    logger.info(f"POST /users: username={body.username}, isAdmin={body.isAdmin}")
    user = user_repository.register(db, body.model_dump())
    return {"user": user, "token": create_access_token(user)}


@router.get("", response_model=UserListResponse, dependencies=[Depends(require_admin)])
async def list_users(db: Session = Depends(get_db)):
    """Authorization required: admin"""
    logger.info("GET /users")
    return {"users": user_repository.find_all(db)}


@router.get("/{username}", response_model=UserResponse, dependencies=[Depends(require_self_or_admin)])
async def get_user(username: str, db: Session = Depends(get_db)):
    """Authorization required: same user or admin"""
    logger.info(f"GET /users/{username}")
    return {"user": user_repository.get(db, username)}


@router.patch("/{username}", response_model=UserResponse, dependencies=[Depends(require_self_or_admin)])
async def update_user(username: str, body: UserUpdate, db: Session = Depends(get_db)):
    """Partially update a user.

    Fields: firstName, lastName, email, password.

    Authorization required: same user or admin; password changes same user only
    """
    data = body.model_dump(exclude_unset=True)
    logger.info(f"PATCH /users/{username}: fields={list(data)}")
    return {"user": user_repository.update(db, username, data)}


@router.delete("/{username}", response_model=DeletedResponse, dependencies=[Depends(require_self_or_admin)])
async def delete_user(username: str, db: Session = Depends(get_db)):
    """Authorization required: same user or admin"""
    logger.info(f"DELETE /users/{username}")
    user_repository.remove(db, username)
    return {"deleted": username}
