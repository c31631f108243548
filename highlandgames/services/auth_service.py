"""
AuthService: login across the admins and users tables, and self-service signup.
"""
import logging
import sqlite3
from typing import Optional, Dict, Tuple

from highlandgames.models.account import Account, User, Admin
from highlandgames.repositories.account_repository import UserRepository, AdminRepository

logger = logging.getLogger(__name__)


class AuthService:

    def __init__(
        self,
        user_repository: Optional[UserRepository] = None,
        admin_repository: Optional[AdminRepository] = None,
    ):
        self.user_repository = user_repository or UserRepository()
        self.admin_repository = admin_repository or AdminRepository()

    def authenticate(self, login: str, password: str) -> Optional[Account]:
        """
        Check the admins table first, then users (by email or username).
        The first account whose password matches wins and decides the role.
        """
        if not isinstance(login, str) or not isinstance(password, str):
            return None
        if not login or not password:
            return None

        admin = self.admin_repository.find_by_username(login)
        if admin and admin.check_password(password):
            return admin

        for user in self.user_repository.find_by_login(login):
            if user.check_password(password):
                return user

        logger.info("Failed login for %s", login)
        return None

    def signup(self, username: str, email: str, password: str) -> Tuple[Optional[User], Dict[str, str]]:
        """
        Create a user account.
        Returns tuple of (created_user, errors); a taken email yields the 'conflict' key.
        """
        user = User(
            username=str(username).strip() if username else '',
            email=str(email).strip() if email else '',
        )
        errors = user.validate()
        if not isinstance(password, str) or not password:
            errors['password'] = "Password is required"
        if errors:
            return None, errors

        if self.user_repository.find_by_email(user.email):
            return None, {'conflict': 'Email exists'}

        user.set_password(password)
        try:
            user.id = self.user_repository.create(user)
        except sqlite3.IntegrityError:
            # Lost a race with a concurrent signup for the same email
            return None, {'conflict': 'Email exists'}
        logger.info("Created user %s", user.id)
        return user, {}

    def create_admin(self, username: str, password: str) -> Admin:
        """Create an admin, or reset the password of an existing one."""
        admin = self.admin_repository.find_by_username(username)
        if admin:
            admin.set_password(password)
            self.admin_repository.update_password(admin)
            return admin
        admin = Admin(username=username)
        admin.set_password(password)
        admin.id = self.admin_repository.create(admin)
        return admin
