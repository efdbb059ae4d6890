"""User registration endpoints"""
import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from teamtasks.auth import get_password_hash
from teamtasks.config import Settings
from teamtasks.database import get_db
from teamtasks.dependencies import get_settings, require
from teamtasks.errors import DomainConflictError, NotFoundError
from teamtasks.models import User, UserRole
from teamtasks.permissions import Action, Principal
from teamtasks.schemas import UserCreate, UserResponse

logger = logging.getLogger(__name__)

router = APIRouter()

EMAIL_IN_USE_MESSAGE = "Email is already use"


@router.post("", response_model=UserResponse)
def create_user(
    user_in: UserCreate,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Register a user. The role defaults to member."""
    if db.query(User).filter(User.email == user_in.email).first():
        raise DomainConflictError(EMAIL_IN_USE_MESSAGE, status_code=status.HTTP_400_BAD_REQUEST)

    user = User(
        name=user_in.name,
        email=user_in.email,
        password_hash=get_password_hash(user_in.password, settings.BCRYPT_ROUNDS),
        role=user_in.role or UserRole.MEMBER,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # Lost a race with a concurrent registration of the same email
        db.rollback()
        raise DomainConflictError(EMAIL_IN_USE_MESSAGE, status_code=status.HTTP_400_BAD_REQUEST)
    db.refresh(user)

    logger.info("Registered user %s with role %s", user.id, user.role.value)
    return user


@router.get("/me", response_model=UserResponse)
def read_current_user(
    principal: Principal = Depends(require(Action.USER_READ_SELF)),
    db: Session = Depends(get_db),
):
    user = db.get(User, principal.id)
    if not user:
        raise NotFoundError("User not found")
    return user
