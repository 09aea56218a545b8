from datetime import date, datetime

import pytest

from pay_period_events.adapters.blob_store import (
    BlobNotFound,
    InMemoryBlobStore,
    LocalBlobStore,
    S3BlobStore,
    build_blob_store,
)
from pay_period_events.adapters.csv_adapter import parse, serialize
from pay_period_events.config import Settings
from pay_period_events.schema import EventRecord


def _records():
    return [
        EventRecord("Lunch", date(2025, 3, 1), "1330", 30, "2025-02-16 to 2025-03-01", datetime(2025, 3, 1, 13, 45, 2)),
        EventRecord("Late, shift", date(2025, 4, 1), "0915", 12.5, None, datetime(2025, 4, 1, 9, 20, 0)),
    ]


def test_serialize_writes_header_and_rows():
    lines = serialize(_records()).decode("utf-8").splitlines()
    assert lines[0] == "Event_Name,Event_Date,Event_Time,Event_Duration,Pay_Period,Form_Submission_Timestamp"
    assert lines[1] == "Lunch,2025-03-01,1330,30,2025-02-16 to 2025-03-01,2025-03-01 13:45:02"
    assert lines[2] == '"Late, shift",2025-04-01,0915,12.5,,2025-04-01 09:20:00'
    assert len(lines) == 3


def test_parse_round_trip_preserves_order_and_blank_pay_period():
    records = _records()
    parsed = parse(serialize(records))
    assert parsed == records
    assert parsed[1].pay_period is None
    assert parsed[1].time == "0915"


def test_parse_empty_payload():
    assert parse(b"") == []
    assert parse(serialize([])) == []


def test_parse_missing_column():
    with pytest.raises(ValueError):
        parse(b"Event_Name,Event_Date\nLunch,2025-03-01\n")


def test_parse_malformed_row():
    payload = (
        b"Event_Name,Event_Date,Event_Time,Event_Duration,Pay_Period,Form_Submission_Timestamp\n"
        b"Lunch,not-a-date,1330,30,,2025-03-01 13:45:02\n"
    )
    with pytest.raises(ValueError, match="Row 2"):
        parse(payload)


def test_in_memory_blob_store():
    store = InMemoryBlobStore()
    with pytest.raises(BlobNotFound):
        store.get("events.csv")
    store.put("events.csv", b"one")
    store.put("events.csv", b"two")
    assert store.get("events.csv") == b"two"


def test_local_blob_store(tmp_path):
    store = LocalBlobStore(tmp_path)
    with pytest.raises(BlobNotFound):
        store.get("data/events.csv")
    store.put("data/events.csv", b"payload")
    assert (tmp_path / "data" / "events.csv").read_bytes() == b"payload"
    assert store.get("data/events.csv") == b"payload"


class _Body:
    def __init__(self, payload):
        self.payload = payload

    def read(self):
        return self.payload


class _FakeS3Client:
    def __init__(self):
        self.objects = {}

    def get_object(self, Bucket, Key):
        from botocore.exceptions import ClientError

        if (Bucket, Key) not in self.objects:
            raise ClientError({"Error": {"Code": "NoSuchKey", "Message": "missing"}}, "GetObject")
        return {"Body": _Body(self.objects[(Bucket, Key)])}

    def put_object(self, Bucket, Key, Body, ContentType):
        self.objects[(Bucket, Key)] = Body


def test_s3_blob_store_maps_missing_key():
    pytest.importorskip("botocore")
    client = _FakeS3Client()
    store = S3BlobStore("bucket", client=client)
    with pytest.raises(BlobNotFound):
        store.get("data/events.csv")
    store.put("data/events.csv", b"rows")
    assert store.get("data/events.csv") == b"rows"


def test_s3_blob_store_requires_bucket():
    with pytest.raises(ValueError):
        S3BlobStore("", client=_FakeS3Client())


def test_build_blob_store_by_backend(tmp_path):
    assert isinstance(build_blob_store(Settings(backend="memory")), InMemoryBlobStore)
    local = build_blob_store(Settings(backend="local", local_dir=tmp_path))
    assert isinstance(local, LocalBlobStore)
    assert local.root == tmp_path
