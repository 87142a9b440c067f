import uuid
from typing import Callable, Optional

from noteapp.navigation.frames import (
    DetailFrame,
    EditFrame,
    ExistingNote,
    Frame,
    ListFrame,
    NewNote,
    frame_note_id,
)
from noteapp.storage.event_log import Event, EventLog


class NavigationError(Exception):
    """A gesture was sent that the current screen does not offer."""


class Navigator:
    """Back stack of frames with List as its permanent root.

    The stack never holds fewer than one frame: back() on the root is a no-op.
    """

    def __init__(self, event_log: Optional[EventLog] = None):
        self._stack: list[Frame] = [ListFrame()]
        self.event_log = event_log

    @property
    def stack(self) -> tuple[Frame, ...]:
        return tuple(self._stack)

    @property
    def top(self) -> Frame:
        return self._stack[-1]

    @property
    def depth(self) -> int:
        return len(self._stack)

    def _require(self, frame_type: type, action: str) -> None:
        if not isinstance(self.top, frame_type):
            raise NavigationError(f"'{action}' is not available on the {self.top.kind} screen")

    def _emit(self, action: str, before: Frame, note_id: Optional[uuid.UUID] = None) -> None:
        if self.event_log is None:
            return
        self.event_log.emit(Event(
            event_type="NAVIGATED",
            note_id=str(note_id) if note_id else None,
            meta={"action": action, "from": before.describe(), "to": self.top.describe(), "depth": self.depth},
        ))

    def _push(self, frame: Frame, action: str) -> Frame:
        before = self.top
        self._stack.append(frame)
        self._emit(action, before, frame_note_id(frame))
        return frame

    def _pop(self, action: str) -> Optional[Frame]:
        if len(self._stack) == 1:
            return None
        popped = self._stack.pop()
        self._emit(action, popped, frame_note_id(popped))
        return popped

    def open_detail(self, note_id: uuid.UUID) -> Frame:
        self._require(ListFrame, "open detail")
        return self._push(DetailFrame(note_id=note_id), "open_detail")

    def open_new(self) -> Frame:
        self._require(ListFrame, "new note")
        return self._push(EditFrame(mode=NewNote()), "open_new")

    def open_edit(self) -> Frame:
        self._require(DetailFrame, "edit")
        return self._push(EditFrame(mode=ExistingNote(note_id=self.top.note_id)), "open_edit")

    def back(self) -> Optional[Frame]:
        """Pop one frame. Returns the popped frame, or None at the root."""
        return self._pop("back")

    def save_completed(self) -> Optional[Frame]:
        self._require(EditFrame, "save")
        return self._pop("save_completed")

    def reset_to_root(self) -> None:
        if len(self._stack) == 1:
            return
        before = self.top
        del self._stack[1:]
        self._emit("reset_to_root", before, frame_note_id(before))

    def redirect_if_stale(self, exists: Callable[[uuid.UUID], bool]) -> bool:
        """Return to List if the top frame points at a note that is gone.

        Returns True when a redirect happened.
        """
        note_id = frame_note_id(self.top)
        if note_id is None or exists(note_id):
            return False
        self.reset_to_root()
        return True
