"""Services package: business logic between the blueprints and the repositories."""
from types import SimpleNamespace as NS

from .auth_service import AuthService
from .content_service import ContentService, build_content_services
from .email_notifier import EmailNotifier
from .image_store import ImageStore
from .registration_service import RegistrationService
from .tasks import TaskRunner
from highlandgames.repositories import (
    EventRepository, TallyRepository, RegistrationRepository, UserRepository, AdminRepository
)


def build_services(config, notifier=None) -> NS:
    """Wire repositories and services against the app's configuration."""
    db_path = config['DATABASE_PATH']
    tasks = TaskRunner(inline=config.get('RUN_TASKS_INLINE', False))
    image_store = ImageStore(config['IMAGE_UPLOAD_DIR'], config.get('IMAGE_MIRROR_DIR'))
    notifier = notifier or EmailNotifier(
        host=config['EMAIL_HOST'],
        port=config['EMAIL_PORT'],
        username=config['EMAIL_USER'],
        password=config['EMAIL_PASS'],
        secure=config['EMAIL_SECURE'],
        from_name=config['EMAIL_FROM_NAME'],
    )
    event_repository = EventRepository(db_path)

    return NS(
        tasks=tasks,
        image_store=image_store,
        notifier=notifier,
        content=build_content_services(db_path, image_store, tasks),
        tally=TallyRepository(db_path),
        registrations=RegistrationService(
            RegistrationRepository(db_path), event_repository, notifier, tasks
        ),
        auth=AuthService(UserRepository(db_path), AdminRepository(db_path)),
    )
