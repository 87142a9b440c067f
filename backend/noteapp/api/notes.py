from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException

from noteapp.api.deps import get_session
from noteapp.models.notes import NoteOut
from noteapp.screens.controllers import NoteSession
from noteapp.screens.render import note_out

router = APIRouter(prefix="/notes", tags=["notes"])


@router.get("", response_model=list[NoteOut])
def list_notes(session: NoteSession = Depends(get_session)) -> list[NoteOut]:
    with session.lock:
        notes = session.store.list_notes()
    return [note_out(n) for n in notes]


@router.get("/{note_id}", response_model=NoteOut)
def get_note(note_id: UUID, session: NoteSession = Depends(get_session)) -> NoteOut:
    with session.lock:
        note = session.store.get_note(note_id)
    if note is None:
        raise HTTPException(status_code=404, detail="Note not found")
    return note_out(note)
