# pylint: disable=missing-module-docstring,missing-function-docstring

import dataclasses
import logging
from datetime import datetime, timezone

import pytest

from fluentlog.entry import LogEntry
from fluentlog.levels import Level


def test_entry_is_immutable() -> None:
    fields = {"status": 200}
    entry = LogEntry(
        time=datetime.now(timezone.utc), level=Level.INFO, message="ok", data=fields
    )
    fields["status"] = 500

    assert entry.data["status"] == 200
    with pytest.raises(dataclasses.FrozenInstanceError):
        entry.message = "changed"  # type: ignore[misc]
    with pytest.raises(TypeError):
        entry.data["status"] = 500  # type: ignore[index]


def test_from_record_collects_extra_fields() -> None:
    record = logging.makeLogRecord({
        "name": "worker",
        "levelno": logging.INFO,
        "levelname": "INFO",
        "msg": "job %s done",
        "args": ("42",),
        "job_id": "42",
        "duration_ms": 12.5,
    })
    entry = LogEntry.from_record(record)

    assert entry.message == "job 42 done"
    assert entry.level is Level.INFO
    assert dict(entry.data) == {"job_id": "42", "duration_ms": 12.5}
    assert entry.time == datetime.fromtimestamp(record.created, tz=timezone.utc)


def test_from_record_adds_stack_info() -> None:
    record = logging.makeLogRecord({
        "levelno": logging.DEBUG,
        "msg": "where am i",
        "stack_info": "Stack (most recent call last):\n  frame",
    })
    entry = LogEntry.from_record(record)

    assert entry.data["stack"] == "Stack (most recent call last):\n  frame"
    assert "fields.stack" not in entry.data
