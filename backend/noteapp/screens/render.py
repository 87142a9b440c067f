from noteapp.models.notes import FieldErrors, NoteOut
from noteapp.models.screens import DetailView, EditView, ListView, NoteRow, ScreenOut
from noteapp.screens.controllers import DetailScreen, EditScreen, ListScreen, NoteSession, Screen
from noteapp.storage.notes_store import Note
from noteapp.utils.validation import CONTENT_MAX_LENGTH

PREVIEW_CHARS = 100
EMPTY_LIST_MESSAGE = "No notes yet. Tap + to add one."


def preview(content: str, limit: int = PREVIEW_CHARS) -> str:
    if len(content) > limit:
        return content[:limit] + "..."
    return content


def note_out(note: Note) -> NoteOut:
    return NoteOut(**note.to_dict())


def _render_list(screen: ListScreen) -> ListView:
    rows = [
        NoteRow(
            id=str(n.id),
            title=n.title,
            preview=preview(n.content),
            updated_at=n.updated_at.isoformat(),
        )
        for n in screen.notes()
    ]
    return ListView(notes=rows, empty_message=None if rows else EMPTY_LIST_MESSAGE)


def _render_detail(screen: DetailScreen) -> DetailView:
    note = screen.note
    if note is None:
        # current_screen() redirects stale frames before we get here
        raise LookupError(f"Note {screen.frame.note_id} not found")
    return DetailView(note=note_out(note))


def _render_edit(screen: EditScreen) -> EditView:
    errors = screen.errors
    return EditView(
        mode="new" if screen.is_new else "existing",
        note_id=None if screen.is_new else str(screen.frame.mode.note_id),
        header="New Note" if screen.is_new else "Edit Note",
        title=screen.title,
        content=screen.content,
        errors=FieldErrors(title=errors.title_error, content=errors.content_error),
        content_counter=None if errors.content_error else f"{len(screen.content)}/{CONTENT_MAX_LENGTH}",
    )


def render_screen(screen: Screen) -> ListView | DetailView | EditView:
    if isinstance(screen, ListScreen):
        return _render_list(screen)
    if isinstance(screen, DetailScreen):
        return _render_detail(screen)
    if isinstance(screen, EditScreen):
        return _render_edit(screen)
    raise TypeError(f"Unknown screen: {screen!r}")


def render(session: NoteSession) -> ScreenOut:
    """Render whatever the navigator currently shows, after any mutation."""
    screen = session.current_screen()
    return ScreenOut(
        depth=session.navigator.depth,
        stack=[f.describe() for f in session.navigator.stack],
        screen=render_screen(screen),
    )
