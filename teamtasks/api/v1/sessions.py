"""Session (login) endpoint"""
import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from teamtasks.auth import create_access_token, verify_password
from teamtasks.config import Settings
from teamtasks.database import get_db
from teamtasks.dependencies import get_settings
from teamtasks.errors import UnauthenticatedError
from teamtasks.models import User
from teamtasks.schemas import SessionResponse, UserLogin, UserResponse

logger = logging.getLogger(__name__)

router = APIRouter()

INVALID_CREDENTIALS_MESSAGE = "email ou senha errada!"


@router.post("", response_model=SessionResponse)
def create_session(
    credentials: UserLogin,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Exchange email and password for a signed access token."""
    user = db.query(User).filter(User.email == credentials.email).first()
    # Same message whether the email or the password is wrong
    if not user or not verify_password(credentials.password, user.password_hash):
        logger.warning("Rejected login for %s", credentials.email)
        raise UnauthenticatedError(INVALID_CREDENTIALS_MESSAGE)

    token = create_access_token(user, settings)
    logger.info("Issued access token for user %s", user.id)
    return SessionResponse(token=token, user=UserResponse.model_validate(user))
