"""
RegistrationService class for business logic.
Validates submissions, fans them out into one row per event and triggers
the confirmation email.
"""
import logging
from datetime import datetime
from typing import Optional, List, Dict, Any, Tuple

from highlandgames.config import VALID_STATUSES
from highlandgames.models.registration import Registration, validate_submitter, collect_event_names
from highlandgames.repositories.content_repositories import EventRepository
from highlandgames.repositories.registration_repository import RegistrationRepository
from highlandgames.services.email_notifier import EmailNotifier
from highlandgames.services.tasks import TaskRunner

logger = logging.getLogger(__name__)


class RegistrationService:
    """
    Service class for registration business logic.
    Unknown event names are dropped silently; the rest are stored atomically.
    """

    def __init__(
        self,
        repository: Optional[RegistrationRepository] = None,
        event_repository: Optional[EventRepository] = None,
        notifier: Optional[EmailNotifier] = None,
        tasks: Optional[TaskRunner] = None,
    ):
        self.repository = repository or RegistrationRepository()
        self.event_repository = event_repository or EventRepository()
        self.notifier = notifier or EmailNotifier()
        self.tasks = tasks or TaskRunner()

    def register(
        self,
        name: str,
        email: str,
        reg_type: Optional[str] = None,
        event_name: Optional[str] = None,
        event_names: Optional[List[str]] = None,
    ) -> Tuple[List[Registration], Dict[str, str]]:
        """
        Register one submitter for one or more events.
        Returns tuple of (created_registrations, errors).
        """
        target_names = collect_event_names(event_name, event_names)
        if not target_names:
            return [], {'events': 'No events'}

        name = name.strip() if isinstance(name, str) else name
        email = email.strip() if isinstance(email, str) else email
        reg_type = reg_type or 'individual'

        errors = validate_submitter(name, email, reg_type)
        if errors:
            return [], errors

        events = self.event_repository.find_by_names(target_names)
        if len(events) < len(target_names):
            found = {event.name for event in events}
            logger.info(
                "Ignoring unknown events for %s: %s",
                email, ', '.join(n for n in target_names if n not in found)
            )
        if not events:
            return [], {}

        # Rows of one submission share the same timestamp
        created_at = datetime.now().isoformat(sep=' ', timespec='seconds')
        registrations = [
            Registration(
                user_name=name,
                email=email,
                type=reg_type,
                event_name=event.name,
                created_at=created_at,
            )
            for event in events
        ]
        self.repository.create_many(registrations)

        self.tasks.submit(self.notifier.notify_registration, name, email, events)
        return registrations, {}

    def list_registrations(self) -> List[Registration]:
        return self.repository.find_all()

    def registrations_for_email(self, email: str) -> List[Dict[str, Any]]:
        return self.repository.find_by_email_with_events(email)

    def update_status(self, registration_id: int, status: str) -> Tuple[Optional[Registration], Dict[str, str]]:
        """
        Move a registration to a new status.
        Returns tuple of (updated_registration, errors).
        """
        if status not in VALID_STATUSES:
            return None, {'status': f"Status must be one of: {', '.join(VALID_STATUSES)}"}

        registration = self.repository.find_by_id(registration_id)
        if not registration:
            return None, {'id': 'Registration not found'}

        self.repository.update_status(registration_id, status)
        registration.status = status
        return registration, {}
