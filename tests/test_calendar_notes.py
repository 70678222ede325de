"""Tests for calendar notes."""

from datetime import date

import pytest

from chicken_shop.domain.calendar import month_bounds
from chicken_shop.domain.errors import ValidationError
from chicken_shop.services.calendar_notes import CalendarNoteService
from tests.conftest import InMemoryCalendarNoteRepository


def test_notes_for_month_grouped_by_day() -> None:
    service = CalendarNoteService(InMemoryCalendarNoteRepository())
    service.create_note(date(2025, 3, 1), "Delivery", "200 kg wings")
    service.create_note(date(2025, 3, 1), "Payday")
    service.create_note(date(2025, 3, 15), "Market closed")
    service.create_note(date(2025, 4, 1), "Price change")

    grouped = service.list_notes_for_month(2025, 3)

    assert sorted(grouped) == [date(2025, 3, 1), date(2025, 3, 15)]
    assert [note.title for note in grouped[date(2025, 3, 1)]] == ["Delivery", "Payday"]


def test_note_requires_title() -> None:
    service = CalendarNoteService(InMemoryCalendarNoteRepository())

    with pytest.raises(ValidationError):
        service.create_note(date(2025, 3, 1), "  ")


def test_update_note_moves_date() -> None:
    service = CalendarNoteService(InMemoryCalendarNoteRepository())
    note = service.create_note(date(2025, 3, 1), "Delivery")

    service.update_note(note.id, {"date": date(2025, 3, 2)})

    assert service.list_notes_by_date(date(2025, 3, 1)) == []
    assert service.get_note(note.id).date == date(2025, 3, 2)


def test_month_bounds_december() -> None:
    assert month_bounds(2024, 12) == (date(2024, 12, 1), date(2025, 1, 1))
