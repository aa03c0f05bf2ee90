"""
Timestamp parsing and formatting for WebVTT timing lines.
"""

import re

from .errors import MalformedTimestampError

# Fixed-width mm:ss.mmm suffix with an optional hh: prefix in front of it
_TIMESTAMP_RE = re.compile(r"(?:(?P<h>\d\d):)?(?P<m>\d\d):(?P<s>\d\d)\.(?P<ms>\d{3})")


def parse_timestamp(timestamp: str) -> int:
    """Convert an hh:mm:ss.mmm or mm:ss.mmm timestamp to whole seconds.

    Hours are optional but must be exactly two digits when present.
    Milliseconds are validated and then dropped.

    Raises:
        MalformedTimestampError: if the input has any other shape.
    """
    if not isinstance(timestamp, str):
        raise MalformedTimestampError(timestamp)

    m = _TIMESTAMP_RE.fullmatch(timestamp)
    if not m:
        raise MalformedTimestampError(timestamp)

    hours = int(m.group("h") or 0)
    return int(m.group("s")) + int(m.group("m")) * 60 + hours * 3600


def format_timestamp(seconds: int) -> str:
    """Format whole seconds as hh:mm:ss.000."""
    if seconds < 0:
        raise ValueError(f"seconds must be non-negative, got {seconds}")
    hours = int(seconds // 3600)
    minutes = int((seconds % 3600) // 60)
    secs = int(seconds % 60)
    return f"{hours:02d}:{minutes:02d}:{secs:02d}.000"
