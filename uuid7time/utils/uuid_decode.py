### SECTION :: Module Imports ############################################################
import string
import uuid

from uuid7time.utils.constants import TIMESTAMP_BYTE_LENGTH, URN_PREFIX
from uuid7time.utils.errors import InvalidUuid



### SECTION :: Grammar ###################################################################
HEX_CHARS = frozenset(string.hexdigits)
GROUP_LENGTHS = (8, 4, 4, 4, 12)
SIMPLE_LENGTH = sum(GROUP_LENGTHS)



### FUNCTION :: Strip Prefix #############################################################
def _strip_wrapping(text: str):
    """Removes a urn:uuid: prefix or surrounding braces, returning (body, offset)."""
    if text[:len(URN_PREFIX)].lower() == URN_PREFIX:
        return text[len(URN_PREFIX):], len(URN_PREFIX)
    if len(text) >= 2 and text[0] == "{" and text[-1] == "}":
        return text[1:-1], 1
    return text, 0



### FUNCTION :: Parse UUID ###############################################################
def parse_uuid(text: str) -> uuid.UUID:
    """Parses a UUID literal into a uuid.UUID.

    Accepted forms are simple (32 hex digits), hyphenated (8-4-4-4-12),
    braced hyphenated and urn:uuid: prefixed. The version and variant bits are
    not inspected. Raises InvalidUuid with a reason describing the first
    problem found.
    """
    body, offset = _strip_wrapping(text)

    for index, char in enumerate(body):
        if char not in HEX_CHARS and char != "-":
            raise InvalidUuid(
                "invalid character: expected an optional prefix of `urn:uuid:` "
                f"followed by [0-9a-fA-F-], found `{char}` at {offset + index + 1}",
                position=offset + index + 1,
            )

    if "-" not in body:
        if len(body) != SIMPLE_LENGTH:
            raise InvalidUuid(f"invalid length: expected length {SIMPLE_LENGTH} for simple format, found {len(body)}")
        return uuid.UUID(hex=body)

    groups = body.split("-")
    if len(groups) != len(GROUP_LENGTHS):
        raise InvalidUuid(f"invalid group count: expected {len(GROUP_LENGTHS)}, found {len(groups)}")

    for index, (group, expected) in enumerate(zip(groups, GROUP_LENGTHS)):
        if len(group) != expected:
            raise InvalidUuid(f"invalid group length in group {index}: expected {expected}, found {len(group)}")

    return uuid.UUID(hex="".join(groups))



### FUNCTION :: Extract Timestamp ########################################################
def extract_timestamp_ms(uuid_obj: uuid.UUID) -> int:
    """Returns bytes 0-5 of the UUID as a big-endian millisecond count."""
    return int.from_bytes(uuid_obj.bytes[:TIMESTAMP_BYTE_LENGTH], byteorder="big")
