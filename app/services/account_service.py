import logging
from typing import Tuple

from app.config import settings
from app.exceptions import DuplicateAccount, InvalidCredentials
from app.models.user import User
from app.repositories.base import UserRepository
from app.schemas.user_schemas import UserRegister
from app.utils.hash import hash_password, verify_password
from app.utils.token import create_access_token

logger = logging.getLogger(__name__)


def role_for_email(email: str) -> str:
    admins = {e.strip().lower() for e in settings.admin_emails}
    if email.strip().lower() in admins:
        return "admin"
    return "customer"


def register(users: UserRepository, payload: UserRegister) -> User:
    if users.get_by_email(payload.email):
        raise DuplicateAccount()

    user = User(
        first_name=payload.first_name,
        last_name=payload.last_name,
        email=payload.email,
        password=hash_password(payload.password),
        role=role_for_email(payload.email),
    )

    user = users.add(user)
    logger.info(f"Registered user {user.id} ({user.role})")
    return user


def login(users: UserRepository, email: str, password: str) -> Tuple[User, str]:
    """Same error for unknown email and wrong password."""
    user = users.get_by_email(email)

    if not user or not verify_password(password, user.password):
        logger.info(f"Failed login for {email}")
        raise InvalidCredentials()

    token = create_access_token({"user_id": user.id, "role": user.role})
    return user, token
