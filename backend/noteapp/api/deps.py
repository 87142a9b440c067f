from fastapi import Request

from noteapp.screens.controllers import NoteSession


def get_session(request: Request) -> NoteSession:
    # one session per app instance, created in create_app()
    return request.app.state.session
