"""
Account entities: site users and administrators.
Admins live in their own table; they are not users with a role flag.
"""
from typing import Optional, Dict, Any

from werkzeug.security import generate_password_hash, check_password_hash


class Account:
    """Shared behaviour of users and admins."""

    role = ''

    def __init__(self, username: str, password_hash: str = '', id: Optional[int] = None):
        self.id = id
        self.username = username
        self.password_hash = password_hash

    def set_password(self, password: str) -> None:
        """Hashes the password before storing it."""
        self.password_hash = generate_password_hash(password)

    def check_password(self, password: str) -> bool:
        if not self.password_hash or password is None:
            return False
        return check_password_hash(self.password_hash, password)

    def to_public_dict(self) -> Dict[str, Any]:
        """Data returned to the client after login."""
        return {'username': self.username, 'role': self.role}


class User(Account):
    role = 'user'

    def __init__(self, username: str, email: str, password_hash: str = '', id: Optional[int] = None):
        super().__init__(username, password_hash=password_hash, id=id)
        self.email = email

    def validate(self) -> Dict[str, str]:
        errors = {}
        if not self.username or not self.username.strip():
            errors['username'] = "Username is required"
        if not self.email or '@' not in self.email:
            errors['email'] = "A valid email address is required"
        return errors

    def to_public_dict(self) -> Dict[str, Any]:
        data = super().to_public_dict()
        data['email'] = self.email
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'User':
        return cls(
            id=data.get('id'),
            username=data.get('username', ''),
            email=data.get('email', ''),
            password_hash=data.get('password_hash', '')
        )

    def __repr__(self) -> str:
        return f"User(id={self.id}, email='{self.email}')"


class Admin(Account):
    role = 'admin'

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Admin':
        return cls(
            id=data.get('id'),
            username=data.get('username', ''),
            password_hash=data.get('password_hash', '')
        )

    def __repr__(self) -> str:
        return f"Admin(id={self.id}, username='{self.username}')"
