import json

import pytest

from uuid7time.utils.errors import InvalidFormat, TimestampOutOfRange
from uuid7time.utils.time_format import (OutputFormat, TimestampRecord, format_timestamp, to_datetime,
                                         to_seconds)

SAMPLE_UUID = "017f22fe-8560-7cc3-98c4-dc0c0c07398f"
SAMPLE_MS = 1645559580000
LAST_DATETIME_MS = 253402300799999


@pytest.mark.parametrize("name, expected", [
    ("iso", OutputFormat.ISO),
    ("unix", OutputFormat.UNIX),
    ("unix-ms", OutputFormat.UNIX_MS),
    ("json", OutputFormat.JSON),
    ("JSON", OutputFormat.JSON),
    ("Unix-MS", OutputFormat.UNIX_MS),
])
def test_output_format_from_name(name, expected):
    assert OutputFormat.from_name(name) is expected


def test_output_format_unknown_name():
    with pytest.raises(InvalidFormat) as excinfo:
        OutputFormat.from_name("bogus")
    assert excinfo.value.name == "bogus"
    assert str(excinfo.value) == "Unknown format: bogus. Use: iso, unix, unix-ms, json"


@pytest.mark.parametrize("output_format, expected", [
    (OutputFormat.ISO, "2022-02-22T19:53:00.000Z"),
    (OutputFormat.UNIX, "1645559580"),
    (OutputFormat.UNIX_MS, "1645559580000"),
])
def test_format_sample(output_format, expected):
    assert format_timestamp(SAMPLE_UUID, SAMPLE_MS, output_format) == expected


def test_format_iso_keeps_milliseconds():
    assert format_timestamp(SAMPLE_UUID, SAMPLE_MS + 123, OutputFormat.ISO) == "2022-02-22T19:53:00.123Z"
    assert format_timestamp(SAMPLE_UUID, 0, OutputFormat.ISO) == "1970-01-01T00:00:00.000Z"


def test_format_json_record():
    output = format_timestamp(SAMPLE_UUID, SAMPLE_MS + 7, OutputFormat.JSON)
    assert output == (
        '{"uuid":"017f22fe-8560-7cc3-98c4-dc0c0c07398f","timestamp_ms":1645559580007,'
        '"timestamp_sec":1645559580,"iso8601":"2022-02-22T19:53:00.007Z",'
        '"rfc3339":"2022-02-22T19:53:00.007+00:00"}'
    )
    assert list(json.loads(output)) == list(TimestampRecord._fields)


@pytest.mark.parametrize("timestamp_ms", [0, 999, 1000, SAMPLE_MS + 999, (1 << 48) - 1])
def test_unix_seconds_truncate_milliseconds(timestamp_ms):
    seconds = format_timestamp(SAMPLE_UUID, timestamp_ms, OutputFormat.UNIX)
    millis = format_timestamp(SAMPLE_UUID, timestamp_ms, OutputFormat.UNIX_MS)
    assert int(millis) == timestamp_ms
    assert int(seconds) == timestamp_ms // 1000


def test_to_seconds_truncates_toward_zero():
    assert to_seconds(-1500) == -1
    assert to_seconds(1500) == 1


@pytest.mark.parametrize("timestamp_ms", [0, 1, SAMPLE_MS + 456, LAST_DATETIME_MS])
def test_iso_and_rfc3339_denote_same_instant(timestamp_ms):
    record = json.loads(format_timestamp(SAMPLE_UUID, timestamp_ms, OutputFormat.JSON))
    iso, rfc = record["iso8601"], record["rfc3339"]
    assert iso.endswith("Z")
    assert len(iso.rsplit(".", 1)[1]) == len("000Z")
    assert rfc.endswith("+00:00")
    assert iso[:-1] == rfc[:-len("+00:00")]


def test_last_representable_instant():
    assert to_datetime(LAST_DATETIME_MS).year == 9999
    assert format_timestamp(SAMPLE_UUID, LAST_DATETIME_MS, OutputFormat.ISO) == "9999-12-31T23:59:59.999Z"


@pytest.mark.parametrize("output_format", [OutputFormat.ISO, OutputFormat.JSON])
def test_calendar_formats_out_of_range(output_format):
    with pytest.raises(TimestampOutOfRange) as excinfo:
        format_timestamp(SAMPLE_UUID, LAST_DATETIME_MS + 1, output_format)
    assert excinfo.value.timestamp_ms == LAST_DATETIME_MS + 1
    assert str(excinfo.value) == "Timestamp out of range"


def test_unix_formats_cover_whole_range():
    top = (1 << 48) - 1
    assert format_timestamp(SAMPLE_UUID, top, OutputFormat.UNIX) == "281474976710"
    assert format_timestamp(SAMPLE_UUID, top, OutputFormat.UNIX_MS) == "281474976710655"
