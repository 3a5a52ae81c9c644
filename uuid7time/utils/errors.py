### SECTION :: Module Imports ############################################################
from typing import Optional



### CLASS :: Base Error ##################################################################
class Uuid7TimeError(Exception):
    """Base class for every error the tool reports to the user."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message



### CLASS :: Configuration Errors ########################################################
class InvalidFormat(Uuid7TimeError):
    """Unrecognised output format keyword."""

    def __init__(self, name: str):
        super().__init__(f"Unknown format: {name}. Use: iso, unix, unix-ms, json")
        self.name = name


class SettingsError(Uuid7TimeError):
    """Settings file exists but cannot be used."""

    def __init__(self, path: str, details: str):
        super().__init__(f"Invalid settings file {path}: {details}")
        self.path = path
        self.details = details



### CLASS :: Per-Item Errors #############################################################
class InvalidUuid(Uuid7TimeError):
    """Text is not a syntactically valid UUID literal."""

    def __init__(self, reason: str, position: Optional[int] = None):
        super().__init__(f"Invalid UUID: {reason}")
        self.reason = reason
        self.position = position


class TimestampOutOfRange(Uuid7TimeError):
    """Millisecond value cannot be turned into a calendar instant."""

    def __init__(self, timestamp_ms: int):
        super().__init__("Timestamp out of range")
        self.timestamp_ms = timestamp_ms



### CLASS :: Run Errors ##################################################################
class NoInput(Uuid7TimeError):
    """Neither arguments nor standard input supplied a UUID."""

    def __init__(self):
        super().__init__("No UUID provided. Use --help for usage information.")
