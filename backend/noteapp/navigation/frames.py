"""Navigation frames.

A frame names one screen and its parameters. The edit screen's mode is its
own type: a new-note form is ``NewNote()``, never a reserved id value, so it
cannot be confused with the id of a stored note.
"""
from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class NewNote:
    def describe(self) -> str:
        return "new"


@dataclass(frozen=True)
class ExistingNote:
    note_id: uuid.UUID

    def describe(self) -> str:
        return str(self.note_id)


EditMode = Union[NewNote, ExistingNote]


@dataclass(frozen=True)
class ListFrame:
    kind = "list"

    def describe(self) -> str:
        return "list"


@dataclass(frozen=True)
class DetailFrame:
    note_id: uuid.UUID
    kind = "detail"

    def describe(self) -> str:
        return f"detail/{self.note_id}"


@dataclass(frozen=True)
class EditFrame:
    mode: EditMode
    kind = "edit"

    @property
    def is_new(self) -> bool:
        return isinstance(self.mode, NewNote)

    def describe(self) -> str:
        return f"edit/{self.mode.describe()}"


Frame = Union[ListFrame, DetailFrame, EditFrame]


def frame_note_id(frame: Frame) -> uuid.UUID | None:
    """Id of the stored note a frame refers to, if any."""
    if isinstance(frame, DetailFrame):
        return frame.note_id
    if isinstance(frame, EditFrame) and isinstance(frame.mode, ExistingNote):
        return frame.mode.note_id
    return None
