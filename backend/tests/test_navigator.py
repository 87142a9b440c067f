import uuid

import pytest

from noteapp.navigation.frames import DetailFrame, EditFrame, ExistingNote, ListFrame, NewNote
from noteapp.navigation.navigator import NavigationError, Navigator
from noteapp.storage.event_log import EventLog


def test_starts_at_list():
    nav = Navigator()
    assert nav.stack == (ListFrame(),)
    assert nav.depth == 1


def test_back_on_root_is_noop():
    nav = Navigator()
    assert nav.back() is None
    assert nav.back() is None
    assert nav.stack == (ListFrame(),)


def test_list_detail_edit_chain():
    note_id = uuid.uuid4()
    nav = Navigator()

    nav.open_detail(note_id)
    assert nav.top == DetailFrame(note_id=note_id)

    nav.open_edit()
    assert nav.top == EditFrame(mode=ExistingNote(note_id=note_id))
    assert nav.depth == 3

    nav.save_completed()
    assert nav.top == DetailFrame(note_id=note_id)

    nav.back()
    assert nav.top == ListFrame()


def test_open_new_uses_mode_not_reserved_id():
    nav = Navigator()
    nav.open_new()
    assert nav.top == EditFrame(mode=NewNote())
    assert nav.top.is_new
    # a note whose id happens to render as "new" is still an existing note
    assert EditFrame(mode=ExistingNote(note_id=uuid.uuid4())) != nav.top


@pytest.mark.parametrize("action", ["open_edit", "save_completed"])
def test_actions_rejected_on_list(action):
    nav = Navigator()
    with pytest.raises(NavigationError):
        getattr(nav, action)()
    assert nav.stack == (ListFrame(),)


def test_open_detail_only_from_list():
    nav = Navigator()
    nav.open_new()
    with pytest.raises(NavigationError):
        nav.open_detail(uuid.uuid4())
    with pytest.raises(NavigationError):
        nav.open_new()
    assert nav.depth == 2


def test_redirect_if_stale_resets_to_list():
    note_id = uuid.uuid4()
    nav = Navigator()
    nav.open_detail(note_id)
    nav.open_edit()

    assert nav.redirect_if_stale(lambda _id: True) is False
    assert nav.depth == 3

    assert nav.redirect_if_stale(lambda _id: False) is True
    assert nav.stack == (ListFrame(),)


def test_redirect_ignores_frames_without_note():
    nav = Navigator()
    nav.open_new()
    assert nav.redirect_if_stale(lambda _id: False) is False
    assert nav.top == EditFrame(mode=NewNote())


def test_transitions_are_logged():
    log = EventLog()
    nav = Navigator(event_log=log)
    nav.open_new()
    nav.back()
    nav.back()  # root, nothing logged

    records = log.records
    assert [r["meta"]["action"] for r in records] == ["open_new", "back"]
    assert records[0]["meta"]["from"] == "list"
    assert records[0]["meta"]["to"] == "edit/new"
    assert records[1]["meta"]["to"] == "list"
