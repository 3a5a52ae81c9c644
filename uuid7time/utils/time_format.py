### SECTION :: Module Imports ############################################################
import json
from datetime import datetime, timedelta
from enum import Enum
from typing import NamedTuple

import pytz

from uuid7time.utils.constants import FORMAT_ISO, FORMAT_JSON, FORMAT_UNIX, FORMAT_UNIX_MS
from uuid7time.utils.errors import InvalidFormat, TimestampOutOfRange



### SECTION :: Calendar Constants ########################################################
UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=pytz.utc)
MS_PER_SECOND = 1000



### CLASS :: Output Format ###############################################################
class OutputFormat(Enum):
    ISO = FORMAT_ISO
    UNIX = FORMAT_UNIX
    UNIX_MS = FORMAT_UNIX_MS
    JSON = FORMAT_JSON

    @classmethod
    def from_name(cls, name: str) -> "OutputFormat":
        """Looks up a format keyword, ignoring case."""
        try:
            return cls(name.lower())
        except ValueError:
            raise InvalidFormat(name) from None



### CLASS :: JSON Record #################################################################
class TimestampRecord(NamedTuple):
    """Read-only view serialised for --json. Field order is part of the output."""
    uuid: str
    timestamp_ms: int
    timestamp_sec: int
    iso8601: str
    rfc3339: str

    def to_json(self) -> str:
        return json.dumps(self._asdict(), separators=(",", ":"), ensure_ascii=False)



### FUNCTION :: Convert To Datetime ######################################################
def to_datetime(timestamp_ms: int) -> datetime:
    """Converts milliseconds since the Unix epoch into an aware UTC datetime."""
    try:
        return UNIX_EPOCH + timedelta(milliseconds=timestamp_ms)
    except OverflowError:
        raise TimestampOutOfRange(timestamp_ms) from None



### FUNCTION :: Calendar Strings #########################################################
def format_rfc3339(dt: datetime) -> str:
    """2022-02-22T19:53:00.000+00:00"""
    return dt.astimezone(pytz.utc).isoformat(timespec="milliseconds")


def format_iso8601(dt: datetime) -> str:
    """2022-02-22T19:53:00.000Z"""
    return dt.astimezone(pytz.utc).replace(tzinfo=None).isoformat(timespec="milliseconds") + "Z"


def to_seconds(timestamp_ms: int) -> int:
    # Truncates toward zero
    if timestamp_ms < 0:
        return -(-timestamp_ms // MS_PER_SECOND)
    return timestamp_ms // MS_PER_SECOND



### FUNCTION :: Format Timestamp #########################################################
def format_timestamp(uuid_str: str, timestamp_ms: int, output_format: OutputFormat) -> str:
    """Renders timestamp_ms in the requested format.

    Plain unix values never touch the calendar, so they succeed for the whole
    48-bit range; the ISO and JSON renderings raise TimestampOutOfRange past
    the last instant datetime can hold.
    """
    if output_format is OutputFormat.UNIX:
        return str(to_seconds(timestamp_ms))
    if output_format is OutputFormat.UNIX_MS:
        return str(timestamp_ms)

    dt = to_datetime(timestamp_ms)
    if output_format is OutputFormat.ISO:
        return format_iso8601(dt)

    record = TimestampRecord(
        uuid=uuid_str,
        timestamp_ms=timestamp_ms,
        timestamp_sec=to_seconds(timestamp_ms),
        iso8601=format_iso8601(dt),
        rfc3339=format_rfc3339(dt),
    )
    return record.to_json()
