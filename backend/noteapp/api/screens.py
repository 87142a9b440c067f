from contextlib import contextmanager
from typing import Iterator, Union
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse

from noteapp.api.deps import get_session
from noteapp.models.notes import DraftChange
from noteapp.models.screens import ScreenOut
from noteapp.navigation.navigator import NavigationError
from noteapp.screens.controllers import S, DetailScreen, EditScreen, ListScreen, NoteSession
from noteapp.screens.render import render

router = APIRouter(prefix="/screen", tags=["screen"])


@contextmanager
def _gesture(session: NoteSession, screen_type: type[S]) -> Iterator[S]:
    """Run one gesture and its render under the session lock.

    Routes run in the threadpool, so two taps on the same button must not
    interleave between the store mutation and the navigator pop.
    """
    with session.lock:
        try:
            yield session.screen_as(screen_type)
        except NavigationError as e:
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))


@router.get("", response_model=ScreenOut)
def current_screen(session: NoteSession = Depends(get_session)) -> ScreenOut:
    with session.lock:
        return render(session)


# List screen gestures
@router.post("/list/open/{note_id}", response_model=ScreenOut)
def open_note(note_id: UUID, session: NoteSession = Depends(get_session)) -> ScreenOut:
    with _gesture(session, ListScreen) as screen:
        screen.tap_row(note_id)
        return render(session)


@router.post("/list/new", response_model=ScreenOut)
def new_note(session: NoteSession = Depends(get_session)) -> ScreenOut:
    with _gesture(session, ListScreen) as screen:
        screen.tap_add()
        return render(session)


# Deleting an unknown id is a no-op, same as the store
@router.delete("/list/notes/{note_id}", response_model=ScreenOut)
def delete_note(note_id: UUID, session: NoteSession = Depends(get_session)) -> ScreenOut:
    with _gesture(session, ListScreen) as screen:
        screen.tap_delete(note_id)
        return render(session)


# Detail screen gestures
@router.post("/detail/back", response_model=ScreenOut)
def detail_back(session: NoteSession = Depends(get_session)) -> ScreenOut:
    with _gesture(session, DetailScreen) as screen:
        screen.back()
        return render(session)


@router.post("/detail/edit", response_model=ScreenOut)
def detail_edit(session: NoteSession = Depends(get_session)) -> ScreenOut:
    with _gesture(session, DetailScreen) as screen:
        screen.edit()
        return render(session)


# Edit screen gestures
@router.put("/edit/draft", response_model=ScreenOut)
def change_draft(payload: DraftChange, session: NoteSession = Depends(get_session)) -> ScreenOut:
    with _gesture(session, EditScreen) as screen:
        screen.change(title=payload.title, content=payload.content)
        return render(session)


# 422: draft rejected, 404: edited note is gone. Both carry the screen now shown.
@router.post("/edit/save", response_model=ScreenOut)
def save_draft(session: NoteSession = Depends(get_session)) -> Union[ScreenOut, JSONResponse]:
    with _gesture(session, EditScreen) as screen:
        result = screen.save()
        view = render(session)

    if result.not_found:
        return JSONResponse(status_code=404, content=view.model_dump(mode="json"))
    if not result.validation.ok:
        return JSONResponse(status_code=422, content=view.model_dump(mode="json"))
    return view


@router.post("/edit/back", response_model=ScreenOut)
def edit_back(session: NoteSession = Depends(get_session)) -> ScreenOut:
    with _gesture(session, EditScreen) as screen:
        screen.back()
        return render(session)
