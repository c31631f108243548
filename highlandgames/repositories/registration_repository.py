"""
RegistrationRepository for SQLite operations on registrations.
"""
from typing import Optional, List, Dict, Any

from highlandgames.models.registration import Registration
from highlandgames.repositories.base import SQLiteRepository


class RegistrationRepository(SQLiteRepository):

    def create_many(self, registrations: List[Registration]) -> List[int]:
        """
        Insert all rows of one submission in a single transaction.
        Either every row is written or none is.
        """
        conn = self._get_connection()
        ids = []
        try:
            with conn:
                cursor = conn.cursor()
                for registration in registrations:
                    cursor.execute(
                        """INSERT INTO registrations (user_name, email, type, event_name, status, created_at)
                           VALUES (?, ?, ?, ?, ?, ?)""",
                        (
                            registration.user_name,
                            registration.email,
                            registration.type,
                            registration.event_name,
                            registration.status,
                            registration.created_at,
                        ),
                    )
                    registration.id = cursor.lastrowid
                    ids.append(cursor.lastrowid)
            return ids
        finally:
            conn.close()

    def find_by_id(self, registration_id: int) -> Optional[Registration]:
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute("SELECT * FROM registrations WHERE id = ?", (registration_id,))
            row = cursor.fetchone()
            return Registration.from_dict(dict(row)) if row else None
        finally:
            conn.close()

    def find_all(self) -> List[Registration]:
        """All registrations, newest first."""
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute("SELECT * FROM registrations ORDER BY created_at DESC, id DESC")
            return [Registration.from_dict(dict(row)) for row in cursor.fetchall()]
        finally:
            conn.close()

    def find_by_email_with_events(self, email: str) -> List[Dict[str, Any]]:
        """
        Registrations of one email joined with the event's date, time and location.
        The join is by name, so rows for renamed or deleted events come back with nulls.
        """
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute('''
                SELECT r.*, e.event_date, e.event_time, e.location
                FROM registrations r
                LEFT JOIN events e ON r.event_name = e.name
                WHERE r.email = ?
                ORDER BY r.created_at DESC, r.id DESC
            ''', (email,))
            return [dict(row) for row in cursor.fetchall()]
        finally:
            conn.close()

    def update_status(self, registration_id: int, status: str) -> bool:
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute(
                "UPDATE registrations SET status = ? WHERE id = ?",
                (status, registration_id)
            )
            conn.commit()
            return cursor.rowcount > 0
        finally:
            conn.close()
