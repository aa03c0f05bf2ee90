"""
Data models for chapter extraction.
"""

from dataclasses import asdict, dataclass
from enum import Enum

from .errors import UnknownChapterFormatError


@dataclass
class ChapterRecord:
    """A chapter title with its timing range."""

    text: str
    start: int  # seconds
    end: int  # seconds

    def to_dict(self) -> dict:
        return asdict(self)


class ChapterFormat(str, Enum):
    """Where the chapter title sits relative to its timing line."""

    TITLES = "titles"  # title line, then timing line
    BLOCKS = "blocks"  # timing line, then title line

    @classmethod
    def parse(cls, value: "ChapterFormat | str") -> "ChapterFormat":
        """Resolve an enum member or its string value."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise UnknownChapterFormatError(value)
