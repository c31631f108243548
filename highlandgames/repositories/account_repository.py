"""
Repositories for users and admins.
"""
from typing import Optional, List

from highlandgames.models.account import User, Admin
from highlandgames.repositories.base import SQLiteRepository


class UserRepository(SQLiteRepository):

    def create(self, user: User) -> int:
        """Insert a user. Raises sqlite3.IntegrityError when the email is taken."""
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                "INSERT INTO users (username, email, password_hash) VALUES (?, ?, ?)",
                (user.username, user.email, user.password_hash)
            )
            conn.commit()
            return cursor.lastrowid
        finally:
            conn.close()

    def find_by_email(self, email: str) -> Optional[User]:
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute("SELECT * FROM users WHERE email = ?", (email,))
            row = cursor.fetchone()
            return User.from_dict(dict(row)) if row else None
        finally:
            conn.close()

    def find_by_login(self, login: str) -> List[User]:
        """Users whose email or username equals the login name."""
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                "SELECT * FROM users WHERE email = ? OR username = ? ORDER BY id ASC",
                (login, login)
            )
            return [User.from_dict(dict(row)) for row in cursor.fetchall()]
        finally:
            conn.close()


class AdminRepository(SQLiteRepository):

    def create(self, admin: Admin) -> int:
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                "INSERT INTO admins (username, password_hash) VALUES (?, ?)",
                (admin.username, admin.password_hash)
            )
            conn.commit()
            return cursor.lastrowid
        finally:
            conn.close()

    def find_by_username(self, username: str) -> Optional[Admin]:
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute("SELECT * FROM admins WHERE username = ?", (username,))
            row = cursor.fetchone()
            return Admin.from_dict(dict(row)) if row else None
        finally:
            conn.close()

    def update_password(self, admin: Admin) -> bool:
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                "UPDATE admins SET password_hash = ? WHERE id = ?",
                (admin.password_hash, admin.id)
            )
            conn.commit()
            return cursor.rowcount > 0
        finally:
            conn.close()
