import logging

from fastapi import Depends

from app.exceptions import AdminRequired
from app.models.user import User
from app.utils.token import get_current_user

logger = logging.getLogger(__name__)


def require_admin(current_user: User = Depends(get_current_user)) -> User:
    """Gate for the /api/admin routes; the role comes from the stored user,
    not from the token claims."""
    if not current_user.is_admin:
        logger.warning(f"Admin route refused for user {current_user.id}")
        raise AdminRequired()
    return current_user
