"""
Errors raised while parsing transcripts.
"""


class ChapterParseError(ValueError):
    """Base class for transcript parsing failures."""


class MalformedTimestampError(ChapterParseError):
    """A timestamp is not in hh:mm:ss.mmm or mm:ss.mmm form."""

    def __init__(self, timestamp):
        self.timestamp = timestamp
        super().__init__(f"Badly formatted timestamp: {timestamp!r}")


class NoChaptersFoundError(ChapterParseError):
    """The transcript holds no chapter blocks for the chosen layout."""

    def __init__(self, mode: str):
        self.mode = mode
        super().__init__(f"Transcript does not contain properly formatted chapters ({mode})")


class UnknownChapterFormatError(ChapterParseError):
    def __init__(self, value):
        self.value = value
        super().__init__(f"Unknown chapter format: {value!r} (expected 'titles' or 'blocks')")
