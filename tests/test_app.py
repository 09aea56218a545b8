from datetime import date

from pay_period_events.adapters.blob_store import InMemoryBlobStore
from pay_period_events.config import Settings
from pay_period_events.validation import TIME_FORMAT_MESSAGE
from ui_streamlit.app import STATUS_KEY, build_store, handle_submit


class _FailingPutStore(InMemoryBlobStore):
    def put(self, key, payload):
        raise OSError("bucket unreachable")


def _settings():
    return Settings(backend="memory", anchor_date=date(2025, 2, 16), period_count=2)


def test_successful_submit_clears_fields():
    store = build_store(_settings(), InMemoryBlobStore())
    state = {
        "event_name": "Lunch",
        "event_date": date(2025, 2, 20),
        "event_time": "1330",
        "event_duration": 30.0,
    }
    assert handle_submit(store, state) is True
    assert state[STATUS_KEY] == ""
    assert state["event_name"] == ""
    assert state["event_time"] == ""
    assert state["event_duration"] is None
    assert store.rows()[0]["Pay_Period"] == "2025-02-16 to 2025-03-01"


def test_failed_validation_keeps_fields():
    store = build_store(_settings(), InMemoryBlobStore())
    state = {
        "event_name": "Lunch",
        "event_date": date(2025, 2, 20),
        "event_time": "24:00",
        "event_duration": 30.0,
    }
    assert handle_submit(store, state) is False
    assert state[STATUS_KEY] == TIME_FORMAT_MESSAGE
    assert state["event_time"] == "24:00"
    assert store.render() == ()


def test_write_failure_is_reported():
    store = build_store(_settings(), _FailingPutStore())
    state = {
        "event_name": "Lunch",
        "event_date": date(2025, 4, 1),
        "event_time": "1330",
        "event_duration": 30.0,
    }
    assert handle_submit(store, state) is False
    assert state[STATUS_KEY].startswith("Error: Could not save the event table")
    assert state["event_name"] == "Lunch"
    assert store.render() == ()
