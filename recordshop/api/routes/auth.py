"""Login: credential check against the staff directory."""
import logging

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from recordshop.api.state import AppState, get_state
from recordshop.errors import InvalidCredentials

logger = logging.getLogger(__name__)

router = APIRouter()


class LoginBody(BaseModel):
    email: str = ""
    password: str = ""


@router.post("/login")
def login(body: LoginBody, state: AppState = Depends(get_state)):
    """Return the user's public profile; the password is never echoed."""
    user = state.directory.find_by_credentials(body.email, body.password)
    if user is None:
        raise InvalidCredentials()
    logger.info("Login: %s (%s)", user.email, user.role)
    return user.public_profile()
