"""
Shared SQLite plumbing for the repositories.
"""
import os
import sqlite3
from typing import Optional, List, Any, Dict

from highlandgames.config import DATABASE_PATH


class SQLiteRepository:
    def __init__(self, db_path: str = DATABASE_PATH):
        """Initialize the repository with database path."""
        self.db_path = db_path
        self._ensure_data_dir()

    def _ensure_data_dir(self) -> None:
        """Ensure the data directory exists."""
        data_dir = os.path.dirname(self.db_path)
        if data_dir and not os.path.exists(data_dir):
            os.makedirs(data_dir)

    def _get_connection(self) -> sqlite3.Connection:
        """Get a database connection with row factory."""
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        return conn


class ContentRepository(SQLiteRepository):
    """
    CRUD over one admin-managed content table (events, slides, heritage).
    Subclasses set TABLE, COLUMNS and MODEL.
    """

    TABLE = ''
    COLUMNS: List[str] = []
    MODEL: Any = None

    # Table names are interpolated into SQL, so only these are accepted
    _VALID_TABLES = {'events', 'slides', 'heritage'}

    def __init__(self, db_path: str = DATABASE_PATH):
        if self.TABLE not in self._VALID_TABLES:
            raise ValueError(f"Invalid table name: {self.TABLE}")
        super().__init__(db_path)

    def _values(self, entity: Any) -> List[Any]:
        data = entity.to_dict()
        return [data[column] for column in self.COLUMNS]

    def create(self, entity: Any) -> int:
        """Insert the entity and return its new id."""
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            columns = ', '.join(self.COLUMNS)
            placeholders = ', '.join(['?' for _ in self.COLUMNS])
            cursor.execute(
                f"INSERT INTO {self.TABLE} ({columns}) VALUES ({placeholders})",
                self._values(entity)
            )
            conn.commit()
            return cursor.lastrowid
        finally:
            conn.close()

    def find_by_id(self, entity_id: int) -> Optional[Any]:
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(f"SELECT * FROM {self.TABLE} WHERE id = ?", (entity_id,))
            row = cursor.fetchone()
            return self.MODEL.from_dict(dict(row)) if row else None
        finally:
            conn.close()

    def find_all(self) -> List[Any]:
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(f"SELECT * FROM {self.TABLE} ORDER BY id ASC")
            return [self.MODEL.from_dict(dict(row)) for row in cursor.fetchall()]
        finally:
            conn.close()

    def update(self, entity: Any) -> bool:
        """
        Write every column of the entity back to its row.
        Returns True if a row was updated.
        """
        if not entity.id:
            return False
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            set_clause = ', '.join([f"{column} = ?" for column in self.COLUMNS])
            cursor.execute(
                f"UPDATE {self.TABLE} SET {set_clause} WHERE id = ?",
                self._values(entity) + [entity.id]
            )
            conn.commit()
            return cursor.rowcount > 0
        finally:
            conn.close()

    def delete(self, entity_id: int) -> bool:
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(f"DELETE FROM {self.TABLE} WHERE id = ?", (entity_id,))
            conn.commit()
            return cursor.rowcount > 0
        finally:
            conn.close()
