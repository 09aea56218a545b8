"""Streamlit event input form backed by the event record store."""

from __future__ import annotations

from datetime import date
from typing import Any, MutableMapping, Optional

from pay_period_events.adapters.blob_store import build_blob_store
from pay_period_events.config import Settings, configure_logging
from pay_period_events.errors import StorageWriteError, ValidationError
from pay_period_events.pay_periods import coverage
from pay_period_events.store import EventRecordStore


STATUS_KEY = "status_message"
STORE_KEY = "event_store"


def build_store(settings: Settings, blob_store=None) -> EventRecordStore:
    """Create the store for a session and hydrate it from storage."""

    store = EventRecordStore(
        blob_store=blob_store if blob_store is not None else build_blob_store(settings),
        key=settings.object_key,
        periods=settings.pay_periods(),
    )
    store.load()
    return store


def reset_fields(state: MutableMapping[str, Any], today: Optional[date] = None) -> None:
    state["event_name"] = ""
    state["event_date"] = today or date.today()
    state["event_time"] = ""
    state["event_duration"] = None


def handle_submit(store: EventRecordStore, state: MutableMapping[str, Any]) -> bool:
    """Submit the form values held in ``state``.

    On success the fields are cleared; on failure they are left as entered
    and only the status line changes.
    """

    try:
        store.append(
            state.get("event_name"),
            state.get("event_date"),
            state.get("event_time"),
            state.get("event_duration"),
        )
    except ValidationError as exc:
        state[STATUS_KEY] = str(exc)
        return False
    except StorageWriteError as exc:
        state[STATUS_KEY] = f"Error: {exc}"
        return False

    state[STATUS_KEY] = ""
    reset_fields(state)
    return True


def main() -> None:
    import streamlit as st

    settings = Settings.from_env()
    configure_logging(settings.log_level)

    st.set_page_config(page_title="Event Input Form", layout="wide")
    st.title("Event Input Form")

    if STORE_KEY not in st.session_state:
        st.session_state[STORE_KEY] = build_store(settings)
        reset_fields(st.session_state)
    store: EventRecordStore = st.session_state[STORE_KEY]

    with st.sidebar:
        st.text_input("Event Name", key="event_name")
        st.date_input("Event Date", key="event_date")
        st.text_input("Event Time (HHMM)", key="event_time")
        st.number_input("Event Duration (minutes)", min_value=0.0, step=1.0, key="event_duration")
        st.button("Submit", type="primary", on_click=handle_submit, args=(store, st.session_state))
        st.code(st.session_state.get(STATUS_KEY, ""), language=None)

        first, last = coverage(store.periods)
        st.caption(f"Pay periods cover {first} to {last}.")

    st.table(store.rows())


if __name__ == "__main__":
    main()
