"""
Slide entity: one entry of the home-page hero carousel.
"""
from dataclasses import dataclass
from typing import Optional, Dict, Any

from highlandgames.models.patch import Patch


class Slide:
    """Hero carousel slide. `action` is the view the button navigates to."""

    def __init__(
        self,
        title: str,
        subtitle: str = '',
        button_text: str = '',
        action: str = 'Events',
        image: str = '',
        id: Optional[int] = None
    ):
        self.id = id
        self.title = title
        self.subtitle = subtitle
        self.button_text = button_text
        self.action = action
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
            'subtitle': self.subtitle,
            'button_text': self.button_text,
            'action': self.action,
            'image': self.image
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Slide':
        return cls(
            id=data.get('id'),
            title=data.get('title', ''),
            subtitle=data.get('subtitle') or '',
            button_text=data.get('button_text') or '',
            action=data.get('action') or 'Events',
            image=data.get('image') or ''
        )

    def __repr__(self) -> str:
        return f"Slide(id={self.id}, title='{self.title}')"


@dataclass
class SlidePatch(Patch):
    title: Optional[str] = None
    subtitle: Optional[str] = None
    button_text: Optional[str] = None
    action: Optional[str] = None
    image: Optional[str] = None
