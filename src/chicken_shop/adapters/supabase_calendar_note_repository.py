"""Supabase repository for calendar notes."""

from dataclasses import dataclass
from datetime import UTC, date, datetime

from supabase import Client

from chicken_shop.adapters.supabase_rows import (
    row_date,
    row_datetime,
    row_id,
    row_text,
    to_row,
)
from chicken_shop.domain.calendar import CalendarNote
from chicken_shop.domain.errors import PersistenceError
from chicken_shop.services.calendar_notes import CalendarNoteRepository

_TABLE = "calendar_notes"


@dataclass
class SupabaseCalendarNoteRepository(CalendarNoteRepository):
    """Supabase implementation for calendar notes."""

    client: Client

    def list_notes(self) -> list[CalendarNote]:
        """Return all notes ordered by date."""
        response = (
            self.client.table(_TABLE).select("*").order("date", desc=False).execute()
        )
        return [_parse_note(row) for row in response.data or []]

    def list_notes_by_date(self, day: date) -> list[CalendarNote]:
        """Return notes for one day."""
        response = (
            self.client.table(_TABLE)
            .select("*")
            .eq("date", day.isoformat())
            .order("created_at", desc=False)
            .execute()
        )
        return [_parse_note(row) for row in response.data or []]

    def list_notes_between(self, start: date, end: date) -> list[CalendarNote]:
        """Return notes dated in ``[start, end)``."""
        response = (
            self.client.table(_TABLE)
            .select("*")
            .gte("date", start.isoformat())
            .lt("date", end.isoformat())
            .order("date", desc=False)
            .execute()
        )
        return [_parse_note(row) for row in response.data or []]

    def get_note(self, note_id: str) -> CalendarNote | None:
        """Return a note by id."""
        response = (
            self.client.table(_TABLE).select("*").eq("id", note_id).limit(1).execute()
        )
        if not response.data:
            return None
        return _parse_note(response.data[0])

    def create_note(self, day: date, title: str, content: str) -> CalendarNote:
        """Insert a note row."""
        response = (
            self.client.table(_TABLE)
            .insert({"date": day.isoformat(), "title": title, "content": content})
            .execute()
        )
        if not response.data:
            raise PersistenceError("Failed to create calendar note")
        return _parse_note(response.data[0])

    def update_note(self, note_id: str, changes: dict[str, object]) -> CalendarNote:
        """Update a note row and bump ``updated_at``."""
        payload = to_row({**changes, "updated_at": datetime.now(tz=UTC)})
        response = (
            self.client.table(_TABLE).update(payload).eq("id", note_id).execute()
        )
        if not response.data:
            raise PersistenceError("Failed to update calendar note")
        return _parse_note(response.data[0])

    def delete_note(self, note_id: str) -> None:
        """Delete a note row."""
        self.client.table(_TABLE).delete().eq("id", note_id).execute()


def _parse_note(row: dict[str, object]) -> CalendarNote:
    return CalendarNote(
        id=row_id(row),
        date=row_date(row, "date"),
        title=row_text(row, "title"),
        content=row_text(row, "content"),
        created_at=row_datetime(row, "created_at"),
        updated_at=row_datetime(row, "updated_at"),
    )
