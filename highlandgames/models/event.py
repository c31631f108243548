"""
Event entity class with validation methods.
Represents a scheduled competition entry of the Highland Games.
"""
import math
from dataclasses import dataclass
from typing import Optional, Dict, Any

from highlandgames.config import DEFAULT_LAT, DEFAULT_LNG
from highlandgames.models.patch import Patch

LAT_LIMIT = 90.0
LNG_LIMIT = 180.0


def parse_coordinate(value: Any, default: float, limit: float = 180.0) -> float:
    """Parse a latitude/longitude, falling back to default when unusable."""
    if isinstance(value, bool):
        return default
    try:
        parsed = float(value)
    except (TypeError, ValueError):
        return default
    # NaN and infinities cannot be serialized as JSON
    if not math.isfinite(parsed) or abs(parsed) > limit:
        return default
    return parsed


class Event:
    """
    Entity class representing an event.
    The name is unique and registrations reference events by name.
    """

    def __init__(
        self,
        name: str,
        description: str = '',
        image: str = '',
        event_date: str = '',
        event_time: str = '',
        location: str = '',
        lat: Any = None,
        lng: Any = None,
        id: Optional[int] = None
    ):
        self.id = id
        self.name = name
        self.description = description
        self.image = image
        self.event_date = event_date
        self.event_time = event_time
        self.location = location
        self.lat = parse_coordinate(lat, DEFAULT_LAT, LAT_LIMIT)
        self.lng = parse_coordinate(lng, DEFAULT_LNG, LNG_LIMIT)

    def validate(self) -> Dict[str, str]:
        """
        Validate the event data.
        Returns a dictionary of field names to error messages.
        """
        errors = {}
        if not self.name or not str(self.name).strip():
            errors['name'] = "Event name is required"
        elif len(str(self.name)) > 120:
            errors['name'] = "Event name must be 120 characters or less"
        return errors

    def to_dict(self) -> Dict[str, Any]:
        """Convert the Event to a dictionary."""
        return {
            'id': self.id,
            'name': self.name,
            'description': self.description,
            'image': self.image,
            'event_date': self.event_date,
            'event_time': self.event_time,
            'location': self.location,
            'lat': self.lat,
            'lng': self.lng
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Event':
        """Create an Event from a dictionary (database row or JSON body)."""
        return cls(
            id=data.get('id'),
            name=data.get('name', ''),
            description=data.get('description') or '',
            image=data.get('image') or '',
            event_date=data.get('event_date') or '',
            event_time=data.get('event_time') or '',
            location=data.get('location') or '',
            lat=data.get('lat'),
            lng=data.get('lng')
        )

    def __repr__(self) -> str:
        return f"Event(id={self.id}, name='{self.name}')"


@dataclass
class EventPatch(Patch):
    name: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
    event_date: Optional[str] = None
    event_time: Optional[str] = None
    location: Optional[str] = None
    lat: Optional[Any] = None
    lng: Optional[Any] = None

    def apply(self, entity: Event) -> Event:
        super().apply(entity)
        # A supplied but unparseable coordinate resets to the map centre
        if self.lat is not None:
            entity.lat = parse_coordinate(self.lat, DEFAULT_LAT, LAT_LIMIT)
        if self.lng is not None:
            entity.lng = parse_coordinate(self.lng, DEFAULT_LNG, LNG_LIMIT)
        return entity
