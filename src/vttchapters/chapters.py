"""
Chapter extraction from WebVTT transcripts.

Two layouts are recognized and the caller picks one up front:

titles::

    Chapter 1
    00:00:00.000 --> 00:00:05.000

blocks (dedicated chapter file)::

    00:00:00.000 --> 00:00:05.000
    Chapter 1
"""

import logging
import re

from .errors import NoChaptersFoundError
from .models import ChapterFormat, ChapterRecord
from .timestamps import parse_timestamp

logger = logging.getLogger("vttchapters")

# Loose timestamp candidates; parse_timestamp validates the shape
_TS = r"\d+(?::\d+)+[.,]\d+"
_TIMING = rf"(?P<start>{_TS}) --> (?P<end>{_TS})(?:[ \t][^\n]*)?"

_TITLE_THEN_TIMING_RE = re.compile(rf"^(?P<text>.*)\n{_TIMING}$", re.M)
_TIMING_THEN_TITLE_RE = re.compile(rf"^{_TIMING}\n(?P<text>.*)$", re.M)


def _normalize_newlines(transcript: str) -> str:
    return transcript.replace("\r\n", "\n").replace("\r", "\n")


def _scan(transcript: str, pattern: re.Pattern, mode: ChapterFormat) -> list[ChapterRecord]:
    chapters: list[ChapterRecord] = []
    for m in pattern.finditer(_normalize_newlines(transcript or "")):
        chapters.append(
            ChapterRecord(
                text=m.group("text"),
                start=parse_timestamp(m.group("start")),
                end=parse_timestamp(m.group("end")),
            )
        )
    if not chapters:
        raise NoChaptersFoundError(mode.value)
    logger.debug(f"Extracted {len(chapters)} chapters ({mode.value})")
    return chapters


def extract_from_titles(transcript: str) -> list[ChapterRecord]:
    """Read chapters whose title line precedes the timing line."""
    return _scan(transcript, _TITLE_THEN_TIMING_RE, ChapterFormat.TITLES)


def extract_from_chapter_blocks(transcript: str) -> list[ChapterRecord]:
    """Read chapters whose title line follows the timing line."""
    return _scan(transcript, _TIMING_THEN_TITLE_RE, ChapterFormat.BLOCKS)


_EXTRACTORS = {
    ChapterFormat.TITLES: extract_from_titles,
    ChapterFormat.BLOCKS: extract_from_chapter_blocks,
}


def extract_chapters(
    transcript: str, mode: ChapterFormat | str = ChapterFormat.BLOCKS
) -> list[ChapterRecord]:
    """Extract chapters from a transcript using the given layout.

    Any malformed timestamp aborts the whole call; no partial list is returned.

    Raises:
        UnknownChapterFormatError: if mode is not "titles" or "blocks".
        NoChaptersFoundError: if no chapter blocks match.
        MalformedTimestampError: if a timing line holds a bad timestamp.
    """
    fmt = ChapterFormat.parse(mode)
    return _EXTRACTORS[fmt](transcript)
