"""
Timestamp parsing for the departure/arrival columns.

Values are matched against a fixed list of ISO-8601 style patterns instead of
locale defaults, so a file parses the same way on every host.
"""
from datetime import datetime

TIMESTAMP_FORMATS = (
    "%Y-%m-%d %H:%M",
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%dT%H:%M",
    "%Y-%m-%dT%H:%M:%S",
)


def parse_timestamp(value: str) -> datetime:
    """Parse a leg timestamp, raising ValueError if no known pattern matches."""
    text = value.strip()
    for fmt in TIMESTAMP_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    raise ValueError(f"Unrecognised timestamp '{text}'")


def is_timestamp(value: str) -> bool:
    try:
        parse_timestamp(value)
    except ValueError:
        return False
    return True
