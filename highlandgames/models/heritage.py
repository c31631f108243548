"""
Heritage item entity: editorial content shown on the home page.
"""
from dataclasses import dataclass
from typing import Optional, Dict, Any

from highlandgames.models.patch import Patch


class HeritageItem:

    def __init__(
        self,
        title: str,
        description: str = '',
        image: str = '',
        id: Optional[int] = None
    ):
        self.id = id
        self.title = title
        self.description = description
        self.image = image

    def validate(self) -> Dict[str, str]:
        errors = {}
        if not self.title or not str(self.title).strip():
            errors['title'] = "Title is required"
        return errors

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'title': self.title,
            'description': self.description,
            'image': self.image
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'HeritageItem':
        return cls(
            id=data.get('id'),
            title=data.get('title', ''),
            description=data.get('description') or '',
            image=data.get('image') or ''
        )

    def __repr__(self) -> str:
        return f"HeritageItem(id={self.id}, title='{self.title}')"


@dataclass
class HeritagePatch(Patch):
    title: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
