"""
Repositories for the admin-managed content tables.
"""
from typing import List, Dict, Any

from highlandgames.models.event import Event
from highlandgames.models.slide import Slide
from highlandgames.models.heritage import HeritageItem
from highlandgames.repositories.base import ContentRepository, SQLiteRepository


class EventRepository(ContentRepository):
    TABLE = 'events'
    COLUMNS = ['name', 'description', 'image', 'event_date', 'event_time', 'location', 'lat', 'lng']
    MODEL = Event

    def find_by_names(self, names: List[str]) -> List[Event]:
        """Batched lookup of events by name. Unknown names are simply absent from the result."""
        if not names:
            return []
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            placeholders = ', '.join(['?' for _ in names])
            cursor.execute(
                f"SELECT * FROM events WHERE name IN ({placeholders}) ORDER BY id ASC",
                list(names)
            )
            return [Event.from_dict(dict(row)) for row in cursor.fetchall()]
        finally:
            conn.close()


class SlideRepository(ContentRepository):
    TABLE = 'slides'
    COLUMNS = ['title', 'subtitle', 'button_text', 'action', 'image']
    MODEL = Slide


class HeritageRepository(ContentRepository):
    TABLE = 'heritage'
    COLUMNS = ['title', 'description', 'image']
    MODEL = HeritageItem


class TallyRepository(SQLiteRepository):
    """Read-only access to the medal tally."""

    def find_all(self) -> List[Dict[str, Any]]:
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute("SELECT * FROM medal_tally ORDER BY total DESC, gold DESC, id ASC")
            return [dict(row) for row in cursor.fetchall()]
        finally:
            conn.close()
