"""Calendar note endpoints."""

from __future__ import annotations

from datetime import date  # noqa: TC003
from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request

from chicken_shop.api.auth import require_token
from chicken_shop.api.payloads import to_payload
from chicken_shop.api.schemas import CalendarNoteCreate, CalendarNoteUpdate

if TYPE_CHECKING:
    from chicken_shop.containers import AppContainer

router = APIRouter(
    prefix="/calendar-notes",
    tags=["calendar-notes"],
    dependencies=[Depends(require_token)],
)


@router.get("")
async def list_notes(
    request: Request, year: int | None = None, month: int | None = None
) -> dict[str, object]:
    """Return all notes, or one month's notes grouped by day."""
    container: AppContainer = request.app.state.container
    service = container.calendar_note_service
    if year is not None and month is not None:
        return {"days": to_payload(service.list_notes_for_month(year, month))}
    return {"notes": to_payload(service.list_notes())}


@router.get("/date/{day}")
async def notes_for_date(day: date, request: Request) -> dict[str, object]:
    """Return notes for one day."""
    container: AppContainer = request.app.state.container
    notes = container.calendar_note_service.list_notes_by_date(day)
    return {"date": day.isoformat(), "notes": to_payload(notes)}


@router.get("/{note_id}")
async def get_note(note_id: str, request: Request) -> dict[str, object]:
    """Return one note."""
    container: AppContainer = request.app.state.container
    return to_payload(container.calendar_note_service.get_note(note_id))


@router.post("", status_code=201)
async def create_note(
    payload: CalendarNoteCreate, request: Request
) -> dict[str, object]:
    """Create a note for a day."""
    container: AppContainer = request.app.state.container
    note = container.calendar_note_service.create_note(
        payload.date, payload.title, payload.content
    )
    return to_payload(note)


@router.patch("/{note_id}")
async def update_note(
    note_id: str, payload: CalendarNoteUpdate, request: Request
) -> dict[str, object]:
    """Edit a note."""
    container: AppContainer = request.app.state.container
    note = container.calendar_note_service.update_note(
        note_id, payload.model_dump(exclude_none=True)
    )
    return to_payload(note)


@router.delete("/{note_id}", status_code=204)
async def delete_note(note_id: str, request: Request) -> None:
    """Delete a note."""
    container: AppContainer = request.app.state.container
    container.calendar_note_service.delete_note(note_id)
