"""
Registration entity class with validation methods.
One row represents one submitter's entry into one event.
"""
from datetime import datetime
from typing import Optional, Dict, Any, List

from highlandgames.config import VALID_REGISTRATION_TYPES


class Registration:
    """
    Entity class representing a registration.
    event_name is a plain string reference; it is kept as submitted even if
    the event is renamed or deleted later.
    """

    def __init__(
        self,
        user_name: str,
        email: str,
        event_name: str,
        type: str = 'individual',
        status: str = 'pending',
        id: Optional[int] = None,
        created_at: Optional[str] = None
    ):
        self.id = id
        self.user_name = user_name
        self.email = email
        self.type = type
        self.event_name = event_name
        self.status = status
        self.created_at = created_at or datetime.now().isoformat(sep=' ', timespec='seconds')

    def to_dict(self) -> Dict[str, Any]:
        """Convert the Registration to a dictionary."""
        return {
            'id': self.id,
            'user_name': self.user_name,
            'email': self.email,
            'type': self.type,
            'event_name': self.event_name,
            'status': self.status,
            'created_at': self.created_at
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Registration':
        """Create a Registration from a dictionary (database row)."""
        return cls(
            id=data.get('id'),
            user_name=data.get('user_name', ''),
            email=data.get('email', ''),
            type=data.get('type') or 'individual',
            event_name=data.get('event_name', ''),
            status=data.get('status') or 'pending',
            created_at=data.get('created_at')
        )

    def __repr__(self) -> str:
        return f"Registration(id={self.id}, email='{self.email}', event='{self.event_name}', status='{self.status}')"


def validate_submitter(name: str, email: str, reg_type: str) -> Dict[str, str]:
    """Validate the submitter part shared by every row of one submission."""
    errors = {}
    if not name or not str(name).strip():
        errors['name'] = "Name is required"
    if not email or '@' not in str(email):
        errors['email'] = "A valid email address is required"
    if reg_type not in VALID_REGISTRATION_TYPES:
        errors['type'] = f"Type must be one of: {', '.join(VALID_REGISTRATION_TYPES)}"
    return errors


def collect_event_names(event_name: Any, event_names: Any) -> List[str]:
    """
    Normalise the submitted target events.
    A non-empty list wins over a single name; duplicates and blanks are dropped.
    """
    if isinstance(event_names, list) and event_names:
        candidates = event_names
    elif event_name:
        candidates = [event_name]
    else:
        return []

    names = []
    for candidate in candidates:
        if not isinstance(candidate, str):
            continue
        candidate = candidate.strip()
        if candidate and candidate not in names:
            names.append(candidate)
    return names
