# pizzeria/core/credentials.py
"""
Credential store: persisted user records with hashed passwords.
"""
import logging
from tortoise.exceptions import IntegrityError

from pizzeria.core.errors import Conflict
from pizzeria.core.security import hash_password, verify_password
from pizzeria.models.user import User

logger = logging.getLogger("uvicorn.error")


class UsernameTaken(Conflict):
    code = "USERNAME_EXISTS"
    default_message = "El nombre de usuario ya existe."


class CredentialStore:
    """
    Lookup and creation of User records.

    Uniqueness is guaranteed by the unique index on `username`: two concurrent
    registrations that both pass the lookup still end with one IntegrityError,
    which is reported as UsernameTaken.
    """

    async def find_by_username(self, username: str) -> User | None:
        return await User.get_or_none(username=username)

    async def create(self, username: str, plain: str) -> User:
        """
        Hash the password and insert a new user.

        Raises:
            UsernameTaken: If the username already exists
        """
        password_hash = hash_password(plain)
        try:
            return await User.create(username=username, password_hash=password_hash)
        except IntegrityError as exc:
            logger.info("[auth] duplicate username rejected by the store: %s", username)
            raise UsernameTaken(reason=str(exc)) from exc

    async def authenticate(self, username: str, plain: str) -> User | None:
        """
        Return the user when the credentials match, None otherwise.
        An unknown username and a wrong password are indistinguishable.
        """
        user = await self.find_by_username(username)
        if not user or not verify_password(plain, user.password_hash):
            return None
        return user
