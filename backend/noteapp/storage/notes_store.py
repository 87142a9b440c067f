import uuid
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Any, Callable


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Note:
    id: uuid.UUID
    title: str
    content: str
    created_at: datetime
    updated_at: datetime

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": str(self.id),
            "title": self.title,
            "content": self.content,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }


class NotesStore:
    """In-memory, insertion-ordered collection of notes for one session.

    The store does no validation of its own; callers validate drafts before
    calling create/update.
    """

    def __init__(self, clock: Callable[[], datetime] = _utc_now):
        self._clock = clock
        # dicts keep insertion order, and update() reassigns in place so the
        # position of a note never changes
        self._notes: dict[uuid.UUID, Note] = {}

    def __len__(self) -> int:
        return len(self._notes)

    def __contains__(self, note_id: object) -> bool:
        return note_id in self._notes

    def list_notes(self) -> list[Note]:
        return list(self._notes.values())

    def create_note(self, title: str, content: str) -> Note:
        note_id = uuid.uuid4()
        while note_id in self._notes:
            note_id = uuid.uuid4()
        now = self._clock()
        note = Note(
            id=note_id,
            title=title,
            content=content,
            created_at=now,
            updated_at=now,
        )
        self._notes[note_id] = note
        return note

    def get_note(self, note_id: uuid.UUID) -> Note | None:
        return self._notes.get(note_id)

    def update_note(self, note_id: uuid.UUID, title: str, content: str) -> Note | None:
        existing = self._notes.get(note_id)
        if existing is None:
            return None

        # updated_at never goes backwards, even if the clock does
        now = max(self._clock(), existing.updated_at)
        updated = replace(existing, title=title, content=content, updated_at=now)
        self._notes[note_id] = updated
        return updated

    def delete_note(self, note_id: uuid.UUID) -> bool:
        return self._notes.pop(note_id, None) is not None
