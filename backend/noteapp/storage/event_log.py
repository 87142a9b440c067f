import json
import logging
import os
import uuid
from collections import deque
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

logger = logging.getLogger(__name__)

DEFAULT_MAX_RECORDS = 1000


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


@dataclass(frozen=True)
class Event:
    event_type: str
    note_id: Optional[str] = None
    meta: Optional[dict[str, Any]] = None

    def to_record(self) -> dict[str, Any]:
        return {
            "event_id": str(uuid.uuid4()),
            "event_type": self.event_type,
            "ts": _utc_now_iso(),
            "note_id": self.note_id,
            "meta": self.meta or {},
        }


class EventLog:
    """Audit trail of what happened during a session.

    The most recent ``max_records`` events stay in memory; if ``path`` is
    given every event is also appended to it as JSON lines. Notes are never
    restored from this file.
    """

    def __init__(self, path: Optional[Path] = None, max_records: int = DEFAULT_MAX_RECORDS):
        self.path = path
        self._records: deque[dict[str, Any]] = deque(maxlen=max_records)

    @property
    def records(self) -> list[dict[str, Any]]:
        return list(self._records)

    def event_types(self) -> list[str]:
        return [r["event_type"] for r in self._records]

    def emit(self, event: Event) -> None:
        record = event.to_record()
        self._records.append(record)
        logger.debug("%s note=%s meta=%s", event.event_type, event.note_id, record["meta"])

        if self.path is None:
            return

        self.path.parent.mkdir(parents=True, exist_ok=True)
        # append-only, durable write
        with self.path.open("a", encoding="utf-8") as f:
            f.write(json.dumps(record, ensure_ascii=False) + "\n")
            f.flush()
            os.fsync(f.fileno())
