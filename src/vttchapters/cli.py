"""
Command-line interface for chapter extraction.
"""

import argparse
import json
import logging
import os
import pathlib
import sys

from dotenv import load_dotenv

from .chapters import extract_chapters
from .errors import ChapterParseError
from .models import ChapterFormat, ChapterRecord
from .timestamps import format_timestamp

logger = logging.getLogger("vttchapters")


def setup_logging(verbose: bool = False) -> None:
    """Setup logging configuration."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    ap = argparse.ArgumentParser(description="Extract chapter timings from a WebVTT transcript")

    ap.add_argument("transcript", help="Path to the .vtt transcript ('-' reads stdin)")
    ap.add_argument(
        "--format",
        choices=[f.value for f in ChapterFormat],
        default=os.getenv("VTT_CHAPTERS_FORMAT", ChapterFormat.BLOCKS.value),
        help="titles: title line before timing line; blocks: timing line before title line",
    )
    ap.add_argument("--json", action="store_true", help="Emit chapters as a JSON array")
    ap.add_argument("--output", default=None, help="Write to this file instead of stdout")
    ap.add_argument("--verbose", action="store_true")

    return ap.parse_args(argv)


def read_transcript(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, encoding="utf-8") as f:
        return f.read()


def render_chapters(chapters: list[ChapterRecord], as_json: bool = False) -> str:
    """Render chapters as JSON or as a plain timing table."""
    if as_json:
        return json.dumps([c.to_dict() for c in chapters], ensure_ascii=False, indent=2)
    return "\n".join(
        f"{format_timestamp(c.start)} - {format_timestamp(c.end)}  {c.text}" for c in chapters
    )


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    # Look for .env in the project root (parent of src directory)
    project_root = pathlib.Path(__file__).parent.parent.parent
    env_path = project_root / ".env"
    if env_path.exists():
        load_dotenv(env_path)
    else:
        load_dotenv()

    args = parse_args(argv)
    setup_logging(args.verbose)

    try:
        transcript = read_transcript(args.transcript)
        chapters = extract_chapters(transcript, args.format)
    except (ChapterParseError, UnicodeDecodeError, OSError) as e:
        logger.error(f"Failed to extract chapters from {args.transcript}: {e}")
        return 1

    logger.info(f"Found {len(chapters)} chapters ({args.format}) in {args.transcript}")
    out = render_chapters(chapters, as_json=args.json)

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(out + "\n")
        logger.info(f"Saved chapters -> {args.output}")
    else:
        print(out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
