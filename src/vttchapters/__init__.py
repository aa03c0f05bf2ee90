"""
VTT Chapters - Chapter extraction from WebVTT transcripts.

Turns chapter blocks found in a transcript into ordered records:
- Parsing hh:mm:ss.mmm / mm:ss.mmm timestamps into whole seconds
- Reading chapter titles placed before the timing line (titles layout)
- Reading chapter titles placed after the timing line (blocks layout)
"""

from .chapters import extract_chapters, extract_from_chapter_blocks, extract_from_titles
from .errors import (
    ChapterParseError,
    MalformedTimestampError,
    NoChaptersFoundError,
    UnknownChapterFormatError,
)
from .models import ChapterFormat, ChapterRecord
from .timestamps import format_timestamp, parse_timestamp

__version__ = "0.1.0"

__all__ = [
    "ChapterFormat",
    "ChapterParseError",
    "ChapterRecord",
    "MalformedTimestampError",
    "NoChaptersFoundError",
    "UnknownChapterFormatError",
    "extract_chapters",
    "extract_from_chapter_blocks",
    "extract_from_titles",
    "format_timestamp",
    "parse_timestamp",
]
