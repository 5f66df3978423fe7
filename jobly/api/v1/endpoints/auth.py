"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from jobly.api.deps import require_login
from jobly.db.session import get_db
from jobly.models.auth_schemas import Token, UserLogin, UserRegister
from jobly.models.schemas import UserResponse
from jobly.repositories.user import user_repository
from jobly.services.access_policy import Identity
from jobly.services.auth_service import create_access_token
from jobly.utils import get_logger

logger = get_logger(__name__)

router = APIRouter()


@router.post("/token", response_model=Token)
async def login(body: UserLogin, db: Session = Depends(get_db)):
    """Exchange username/password for a JWT.

    Authorization required: none
    """
    logger.info(f"POST /auth/token: username={body.username}")
    user = user_repository.authenticate(db, body.username, body.password)
    return Token(token=create_access_token(user))


@router.post("/register", response_model=Token, status_code=status.HTTP_201_CREATED)
async def register(body: UserRegister, db: Session = Depends(get_db)):
    """Register a new (non-admin) user and return a JWT for them.

    Authorization required: none
    """
    logger.info(f"POST /auth/register: username={body.username}")
    user = user_repository.register(db, {**body.model_dump(), "isAdmin": False})
    logger.info(f"New user registered: {user['username']}")
    return Token(token=create_access_token(user))


@router.get("/me", response_model=UserResponse)
async def get_me(
    identity: Annotated[Identity, Depends(require_login)],
    db: Session = Depends(get_db),
):
    """Current user information.

    Authorization required: login
    """
    logger.info(f"GET /auth/me: username={identity.username}")
    return {"user": user_repository.get(db, identity.username)}
