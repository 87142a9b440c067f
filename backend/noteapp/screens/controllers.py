"""Screen controllers and the session that owns the note store.

A ``NoteSession`` is the one place the store, the navigator and the event log
live; controllers get it passed in and never reach for globals. The active
controller is rebuilt whenever the top frame changes, which is how an edit
draft gets dropped on back or after a save.
"""
from __future__ import annotations

import uuid
from dataclasses import dataclass
from threading import Lock
from typing import Optional, TypeVar, Union

from noteapp.navigation.frames import DetailFrame, EditFrame, ExistingNote, Frame, ListFrame, frame_note_id
from noteapp.navigation.navigator import NavigationError, Navigator
from noteapp.storage.event_log import Event, EventLog
from noteapp.storage.notes_store import Note, NotesStore
from noteapp.utils.validation import ValidationResult, validate_note


class ListScreen:
    def __init__(self, session: NoteSession, frame: ListFrame):
        self.session = session
        self.frame = frame

    def notes(self) -> list[Note]:
        return self.session.store.list_notes()

    def tap_row(self, note_id: uuid.UUID) -> Frame:
        return self.session.navigator.open_detail(note_id)

    def tap_add(self) -> Frame:
        return self.session.navigator.open_new()

    def tap_delete(self, note_id: uuid.UUID) -> bool:
        deleted = self.session.store.delete_note(note_id)
        if deleted:
            self.session.event_log.emit(Event(event_type="NOTE_DELETED", note_id=str(note_id)))
        return deleted


class DetailScreen:
    def __init__(self, session: NoteSession, frame: DetailFrame):
        self.session = session
        self.frame = frame

    @property
    def note(self) -> Optional[Note]:
        return self.session.store.get_note(self.frame.note_id)

    def back(self) -> None:
        self.session.navigator.back()

    def edit(self) -> Frame:
        return self.session.navigator.open_edit()


@dataclass(frozen=True)
class SaveResult:
    """Outcome of a save attempt.

    ``not_found`` means the draft was valid but the note it edits is gone,
    so nothing was written.
    """

    validation: ValidationResult
    note: Optional[Note] = None
    not_found: bool = False

    @property
    def ok(self) -> bool:
        return self.note is not None


class EditScreen:
    """Form over an unsaved draft.

    The draft is seeded from the stored note in existing mode and is empty
    for a new note. Nothing reaches the store until a save passes validation.
    """

    def __init__(self, session: NoteSession, frame: EditFrame):
        self.session = session
        self.frame = frame
        self.errors = ValidationResult()

        note = self.existing_note
        self.title = note.title if note else ""
        self.content = note.content if note else ""

    @property
    def is_new(self) -> bool:
        return self.frame.is_new

    @property
    def existing_note(self) -> Optional[Note]:
        if isinstance(self.frame.mode, ExistingNote):
            return self.session.store.get_note(self.frame.mode.note_id)
        return None

    def change(self, title: Optional[str] = None, content: Optional[str] = None) -> None:
        if title is not None:
            self.title = title
        if content is not None:
            self.content = content

    def save(self) -> SaveResult:
        result = validate_note(self.title, self.content)
        self.errors = result
        session = self.session

        if not result.ok:
            session.event_log.emit(Event(
                event_type="VALIDATION_FAILED",
                note_id=None if self.is_new else str(self.frame.mode.note_id),
                meta=result.to_dict(),
            ))
            return SaveResult(validation=result)

        if self.is_new:
            note = session.store.create_note(title=self.title, content=self.content)
            session.event_log.emit(Event(event_type="NOTE_CREATED", note_id=str(note.id)))
        else:
            note_id = self.frame.mode.note_id
            note = session.store.update_note(note_id, title=self.title, content=self.content)
            if note is None:
                # note vanished under the form
                session.navigator.reset_to_root()
                session.event_log.emit(Event(event_type="STALE_FRAME_REDIRECT", note_id=str(note_id)))
                return SaveResult(validation=result, not_found=True)
            session.event_log.emit(Event(event_type="NOTE_UPDATED", note_id=str(note_id)))

        session.navigator.save_completed()
        return SaveResult(validation=result, note=note)

    def back(self) -> None:
        self.session.navigator.back()


Screen = Union[ListScreen, DetailScreen, EditScreen]
S = TypeVar("S", ListScreen, DetailScreen, EditScreen)


class NoteSession:
    def __init__(
        self,
        store: Optional[NotesStore] = None,
        event_log: Optional[EventLog] = None,
    ):
        self.store = store if store is not None else NotesStore()
        self.event_log = event_log if event_log is not None else EventLog()
        self.navigator = Navigator(event_log=self.event_log)
        self._screen: Optional[Screen] = None
        # hosts that dispatch gestures from several threads hold this for
        # the whole gesture + render
        self.lock = Lock()

    def _note_exists(self, note_id: uuid.UUID) -> bool:
        return note_id in self.store

    def current_screen(self) -> Screen:
        top = self.navigator.top
        if self.navigator.redirect_if_stale(self._note_exists):
            self.event_log.emit(Event(
                event_type="STALE_FRAME_REDIRECT",
                note_id=str(frame_note_id(top)),
            ))
            top = self.navigator.top

        if self._screen is None or self._screen.frame is not top:
            self._screen = self._build(top)
        return self._screen

    def _build(self, frame: Frame) -> Screen:
        if isinstance(frame, ListFrame):
            return ListScreen(self, frame)
        if isinstance(frame, DetailFrame):
            return DetailScreen(self, frame)
        if isinstance(frame, EditFrame):
            return EditScreen(self, frame)
        raise TypeError(f"Unknown frame: {frame!r}")

    def screen_as(self, screen_type: type[S]) -> S:
        """Active controller, which must be of ``screen_type``."""
        screen = self.current_screen()
        if not isinstance(screen, screen_type):
            raise NavigationError(
                f"Current screen is {screen.frame.kind}, not {screen_type.__name__}"
            )
        return screen
