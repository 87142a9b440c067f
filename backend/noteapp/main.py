import logging
import os
from pathlib import Path

from fastapi import FastAPI

from noteapp.api import notes, screens
from noteapp.screens.controllers import NoteSession
from noteapp.storage.event_log import EventLog


def create_app() -> FastAPI:
    # config via env, read when the app is built
    title = os.getenv("APP_TITLE", "Notes")
    event_log_path = os.getenv("APP_EVENT_LOG")

    app = FastAPI(title=title)
    event_log = EventLog(Path(event_log_path) if event_log_path else None)
    app.state.session = NoteSession(event_log=event_log)

    @app.get("/health")
    def health():
        return {"ok": True}

    app.include_router(notes.router)
    app.include_router(screens.router)
    return app


def configure_logging() -> None:
    log_level = os.getenv("APP_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.WARNING),
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )


# Create the default app instance
app = create_app()


def run_server():
    """Run the API server."""
    import uvicorn

    configure_logging()
    uvicorn.run(
        "noteapp.main:app",
        host=os.getenv("APP_HOST", "127.0.0.1"),
        port=int(os.getenv("APP_PORT", "8000")),
        reload=False,
    )


if __name__ == "__main__":
    run_server()
