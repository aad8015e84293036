# pylint: disable=missing-module-docstring,missing-function-docstring

from datetime import datetime, timedelta, timezone

import pytest

from fluentlog.timestamps import RFC3339, RFC3339_NANO, format_timestamp, parse_timestamp

UTC_TIME = datetime(2024, 5, 1, 12, 30, 45, 123000, tzinfo=timezone.utc)
PLUS_TWO = timezone(timedelta(hours=2))


@pytest.mark.parametrize(
    "when, layout, expected",
    [
        (UTC_TIME, "", "2024-05-01T12:30:45Z"),
        (UTC_TIME, RFC3339, "2024-05-01T12:30:45Z"),
        (UTC_TIME, RFC3339_NANO, "2024-05-01T12:30:45.123Z"),
        (UTC_TIME.replace(microsecond=0), RFC3339_NANO, "2024-05-01T12:30:45Z"),
        (UTC_TIME.astimezone(PLUS_TWO), RFC3339, "2024-05-01T14:30:45+02:00"),
        (UTC_TIME, "%d/%m/%Y %H:%M", "01/05/2024 12:30"),
    ],
)
def test_format_timestamp(when: datetime, layout: str, expected: str) -> None:
    assert format_timestamp(when, layout) == expected


@pytest.mark.parametrize("layout", ["", RFC3339, RFC3339_NANO])
def test_named_layouts_round_trip(layout: str) -> None:
    for when in (UTC_TIME, UTC_TIME.astimezone(PLUS_TWO)):
        parsed = parse_timestamp(format_timestamp(when, layout), layout)
        if layout == RFC3339_NANO:
            assert parsed == when
        else:
            assert parsed == when.replace(microsecond=0)


def test_naive_datetime_gets_local_offset() -> None:
    text = format_timestamp(datetime(2024, 5, 1, 12, 0, 0))
    assert parse_timestamp(text).tzinfo is not None


def test_parse_accepts_up_to_nanosecond_fractions() -> None:
    parsed = parse_timestamp("2024-05-01T12:30:45.123456789Z", RFC3339_NANO)
    assert parsed == UTC_TIME.replace(microsecond=123456)


def test_parse_rejects_non_rfc3339_text() -> None:
    with pytest.raises(ValueError):
        parse_timestamp("2024-05-01 12:30:45")
