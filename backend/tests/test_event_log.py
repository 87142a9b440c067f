import json

from noteapp.storage.event_log import Event, EventLog


def test_events_kept_in_memory_without_path():
    log = EventLog()
    log.emit(Event(event_type="NOTE_CREATED", note_id="n1", meta={"x": 1}))

    assert log.event_types() == ["NOTE_CREATED"]
    record = log.records[0]
    assert record["note_id"] == "n1"
    assert record["meta"] == {"x": 1}
    assert record["event_id"]
    assert record["ts"]


def test_events_appended_as_json_lines(tmp_path):
    path = tmp_path / "audit" / "events.log"
    log = EventLog(path)
    log.emit(Event(event_type="NOTE_CREATED", note_id="n1"))
    log.emit(Event(event_type="NOTE_DELETED", note_id="n1"))

    lines = path.read_text(encoding="utf-8").splitlines()
    assert [json.loads(line)["event_type"] for line in lines] == ["NOTE_CREATED", "NOTE_DELETED"]
    assert json.loads(lines[0])["meta"] == {}


def test_api_writes_audit_file(client, tmp_path):
    client.post("/screen/list/new")
    client.put("/screen/edit/draft", json={"title": "Hi", "content": "ok"})
    client.post("/screen/edit/save")
    client.put("/screen/edit/draft", json={"title": "Groceries"})
    client.post("/screen/edit/save")

    text = (tmp_path / "events.log").read_text(encoding="utf-8")
    assert "VALIDATION_FAILED" in text
    assert "NOTE_CREATED" in text
    assert "NAVIGATED" in text


def test_memory_keeps_only_latest_records(tmp_path):
    path = tmp_path / "events.log"
    log = EventLog(path, max_records=3)
    for i in range(5):
        log.emit(Event(event_type="NAVIGATED", note_id=str(i)))

    assert [r["note_id"] for r in log.records] == ["2", "3", "4"]
    # the file still has every event
    assert len(path.read_text(encoding="utf-8").splitlines()) == 5
