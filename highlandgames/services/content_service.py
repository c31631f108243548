"""
ContentService: admin CRUD over events, slides and heritage items.
Handles the image lifecycle: a replaced or orphaned image is removed from
disk after the row change, off the request thread.
"""
import logging
from typing import Optional, List, Dict, Any, Tuple, Type

from highlandgames.models.event import EventPatch
from highlandgames.models.heritage import HeritagePatch
from highlandgames.models.patch import Patch
from highlandgames.models.slide import SlidePatch
from highlandgames.repositories.base import ContentRepository
from highlandgames.repositories.content_repositories import (
    EventRepository, SlideRepository, HeritageRepository
)
from highlandgames.services.image_store import ImageStore
from highlandgames.services.tasks import TaskRunner

logger = logging.getLogger(__name__)


class ContentService:
    """
    Symmetrical create/update/delete for one content type.
    Updates merge: fields omitted from the payload keep their stored value.
    """

    def __init__(
        self,
        repository: ContentRepository,
        patch_class: Type[Patch],
        label: str,
        image_store: Optional[ImageStore] = None,
        tasks: Optional[TaskRunner] = None,
    ):
        self.repository = repository
        self.patch_class = patch_class
        self.label = label
        self.image_store = image_store or ImageStore()
        self.tasks = tasks or TaskRunner()

    def not_found(self) -> Dict[str, str]:
        return {'id': f"{self.label} not found"}

    def list_all(self) -> List[Any]:
        return self.repository.find_all()

    def get(self, entity_id: int) -> Optional[Any]:
        return self.repository.find_by_id(entity_id)

    def create(self, payload: Dict[str, Any]) -> Tuple[Optional[Any], Dict[str, str]]:
        """
        Create an entity from a JSON payload, defaulting optional fields.
        Returns tuple of (created_entity, errors).
        """
        patch = self.patch_class.from_payload(payload)
        entity = self.repository.MODEL.from_dict(patch.__dict__)

        errors = entity.validate()
        if errors:
            return None, errors

        entity.id = self.repository.create(entity)
        logger.info("Created %s %s", self.label.lower(), entity.id)
        return entity, {}

    def update(self, entity_id: int, payload: Dict[str, Any]) -> Tuple[Optional[Any], Dict[str, str]]:
        """
        Apply a partial update.
        Returns tuple of (updated_entity, errors).
        """
        entity = self.repository.find_by_id(entity_id)
        if not entity:
            return None, self.not_found()

        patch = self.patch_class.from_payload(payload)
        old_image = entity.image
        patch.apply(entity)

        errors = entity.validate()
        if errors:
            return None, errors

        self.repository.update(entity)

        if entity.image != old_image:
            self.tasks.submit(self.image_store.delete, old_image)
        return entity, {}

    def delete(self, entity_id: int) -> Tuple[bool, Dict[str, str]]:
        """
        Delete the row, then its image file(s).
        Returns tuple of (success, errors).
        """
        entity = self.repository.find_by_id(entity_id)
        if not entity:
            return False, self.not_found()

        self.repository.delete(entity_id)
        if entity.image:
            self.tasks.submit(self.image_store.delete, entity.image)
        logger.info("Deleted %s %s", self.label.lower(), entity_id)
        return True, {}


def build_content_services(
    db_path: str,
    image_store: ImageStore,
    tasks: TaskRunner
) -> Dict[str, ContentService]:
    """Content services keyed by their URL segment."""
    return {
        'events': ContentService(EventRepository(db_path), EventPatch, 'Event', image_store, tasks),
        'slides': ContentService(SlideRepository(db_path), SlidePatch, 'Slide', image_store, tasks),
        'heritage': ContentService(HeritageRepository(db_path), HeritagePatch, 'Heritage item', image_store, tasks),
    }
