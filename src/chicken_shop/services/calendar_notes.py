"""Calendar notes service."""

from dataclasses import dataclass
from datetime import date
from typing import Protocol

from chicken_shop.domain.calendar import CalendarNote, month_bounds
from chicken_shop.domain.errors import NotFoundError, ValidationError


class CalendarNoteRepository(Protocol):
    """Persistence interface for calendar notes."""

    def list_notes(self) -> list[CalendarNote]:
        """Return all notes ordered by date."""

    def list_notes_by_date(self, day: date) -> list[CalendarNote]:
        """Return notes for one day."""

    def list_notes_between(self, start: date, end: date) -> list[CalendarNote]:
        """Return notes with ``start <= date < end``."""

    def get_note(self, note_id: str) -> CalendarNote | None:
        """Return a note by id, if present."""

    def create_note(self, day: date, title: str, content: str) -> CalendarNote:
        """Create a note and return it."""

    def update_note(self, note_id: str, changes: dict[str, object]) -> CalendarNote:
        """Apply field changes to a note and return it."""

    def delete_note(self, note_id: str) -> None:
        """Delete a note."""


@dataclass
class CalendarNoteService:
    """Application service for calendar notes."""

    repository: CalendarNoteRepository

    def list_notes(self) -> list[CalendarNote]:
        """Return all notes."""
        return self.repository.list_notes()

    def list_notes_by_date(self, day: date) -> list[CalendarNote]:
        """Return notes for ``day``."""
        return self.repository.list_notes_by_date(day)

    def list_notes_for_month(
        self, year: int, month: int
    ) -> dict[date, list[CalendarNote]]:
        """Return a month's notes grouped by day for the calendar grid."""
        start, end = month_bounds(year, month)
        grouped: dict[date, list[CalendarNote]] = {}
        for note in self.repository.list_notes_between(start, end):
            grouped.setdefault(note.date, []).append(note)
        return grouped

    def get_note(self, note_id: str) -> CalendarNote:
        """Return a note or raise ``NotFoundError``."""
        note = self.repository.get_note(note_id)
        if note is None:
            raise NotFoundError("calendar note", note_id)
        return note

    def create_note(self, day: date, title: str, content: str = "") -> CalendarNote:
        """Create a note for ``day``."""
        if not title.strip():
            raise ValidationError("title is required")
        return self.repository.create_note(day, title.strip(), content)

    def update_note(self, note_id: str, changes: dict[str, object]) -> CalendarNote:
        """Edit a note's date, title or content."""
        self.get_note(note_id)
        allowed = {
            key: value
            for key, value in changes.items()
            if key in {"date", "title", "content"} and value is not None
        }
        if "title" in allowed and not str(allowed["title"]).strip():
            raise ValidationError("title is required")
        if not allowed:
            return self.get_note(note_id)
        return self.repository.update_note(note_id, allowed)

    def delete_note(self, note_id: str) -> None:
        """Delete a note."""
        self.get_note(note_id)
        self.repository.delete_note(note_id)
