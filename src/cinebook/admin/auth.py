"""Session login for the back office."""

import logging
import secrets

from sqladmin.authentication import AuthenticationBackend
from starlette.requests import Request

from cinebook.config import settings

logger = logging.getLogger(__name__)


def _matches(given: object, expected: str) -> bool:
    if not isinstance(given, str):
        return False
    return secrets.compare_digest(given.encode(), expected.encode())


class AdminAuth(AuthenticationBackend):
    """
    Single staff account taken from settings.

    A successful login marks the signed session cookie as authenticated;
    failed attempts are logged with the submitted username.
    """

    async def login(self, request: Request) -> bool:
        form = await request.form()
        username = form.get("username")
        # Compare both fields so timing does not reveal which one was wrong
        user_ok = _matches(username, settings.admin_username)
        password_ok = _matches(form.get("password"), settings.admin_password)
        if not (user_ok and password_ok):
            client = request.client.host if request.client else "unknown"
            logger.warning(f"Failed back office login for {username!r} from {client}")
            return False

        request.session.update({"authenticated": True, "username": username})
        logger.info(f"Back office login: {username}")
        return True

    async def logout(self, request: Request) -> bool:
        username = request.session.get("username")
        request.session.clear()
        if username:
            logger.info(f"Back office logout: {username}")
        return True

    async def authenticate(self, request: Request) -> bool:
        return bool(request.session.get("authenticated", False))
