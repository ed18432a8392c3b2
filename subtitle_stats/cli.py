"""Command-line interface for Subtitle Statistics.

WHY: Editors need a quick way to get the statistics report for a
subtitle file from the terminal, to pipe it somewhere, or to save it
next to the deliverable as a .txt/.nfo sidecar.

HOW: Uses argparse to accept a subtitle file, an optional format
override, the section to print, and an optional export path. Parses
the file with the matching format, runs report.analyze(), prints the
requested text to stdout, and writes the combined report when asked.

RULES:
- Positional argument: subtitle file path ("-" reads stdin)
- Format: --format wins; otherwise by extension, falling back to
  DEFAULT_FORMAT
- --export accepts only EXPORT_EXTENSIONS (.txt, .nfo)
- --log-level accepts LOG_LEVELS in any case; a bad environment default
  is reported like any other error
- Report text goes to stdout, status messages to stderr
- Exit codes: 0 = success, 1 = error
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from subtitle_stats import __version__
from subtitle_stats.config import (
    DEFAULT_FORMAT,
    EXPORT_EXTENSIONS,
    LOG_LEVEL,
    is_export_path,
)
from subtitle_stats.core.report import StatisticsReport, analyze, write_report
from subtitle_stats.formats import FORMATS, format_for_filename, get_format

logger = logging.getLogger(__name__)

SECTIONS = ("all", "general", "words", "lines")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _status(msg: str) -> None:
    """Print a status message to stderr.

    Status output must not pollute stdout so the CLI can be piped.
    """
    print(msg, file=sys.stderr, flush=True)


def _error(msg: str) -> None:
    print("Error: {}".format(msg), file=sys.stderr)
    sys.exit(1)


def _read_input(input_file: str) -> str:
    """Read the subtitle file (or stdin for "-") as text."""
    if input_file == "-":
        return sys.stdin.read()
    path = Path(input_file)
    if not path.is_file():
        raise ValueError("File not found: {}".format(path))
    return path.read_text(encoding="utf-8-sig")


def _configure_logging(level: str) -> None:
    """Send log records to stderr at ``level``.

    Raises:
        ValueError: If ``level`` is not one of LOG_LEVELS (the default comes
                    from the environment and is not checked by argparse).
    """
    if level not in LOG_LEVELS:
        raise ValueError(
            "Unknown log level '{}'. Choose from: {}".format(level, ", ".join(LOG_LEVELS))
        )
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _section_text(report: StatisticsReport, section: str) -> str:
    """Select the text to print for ``--section``."""
    if section == "general":
        return report.general
    if section == "words":
        return report.most_used_words.rstrip("\n")
    if section == "lines":
        return report.most_used_lines.rstrip("\n")
    return report.to_text()


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    Separating parser construction from main() makes the CLI testable.
    """
    parser = argparse.ArgumentParser(
        prog="subtitle-stats",
        description="Compute timing, length and word/line frequency statistics "
                    "for a subtitle file.",
    )

    parser.add_argument(
        "input_file",
        help="Path to the subtitle file ('-' reads from stdin).",
    )

    parser.add_argument(
        "--format",
        dest="format_key",
        default=None,
        choices=sorted(FORMATS.keys()),
        help="Subtitle format (default: detect from the file extension, "
             "falling back to '{}').".format(DEFAULT_FORMAT),
    )

    parser.add_argument(
        "--section",
        default="all",
        choices=SECTIONS,
        help="Report section to print (default: %(default)s).",
    )

    parser.add_argument(
        "--export",
        default=None,
        help="Write the combined report to this path ({}).".format(
            ", ".join(sorted(EXPORT_EXTENSIONS))
        ),
    )

    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Do not print the report to stdout.",
    )

    parser.add_argument(
        "--log-level",
        default=LOG_LEVEL,
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level (default: %(default)s).",
    )

    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s {}".format(__version__),
    )

    return parser


def run(args: argparse.Namespace) -> StatisticsReport:
    """Parse, analyze and output according to ``args``.

    Raises:
        ValueError: For unknown formats, unreadable files or a bad
                    export extension.
        OSError: If the export file cannot be written.
    """
    if args.export and not is_export_path(args.export):
        raise ValueError(
            "Unsupported export file type '{}'. Supported: {}".format(
                Path(args.export).suffix, ", ".join(sorted(EXPORT_EXTENSIONS))
            )
        )

    if args.format_key:
        subtitle_format = get_format(args.format_key)
    else:
        subtitle_format = format_for_filename(args.input_file, default=DEFAULT_FORMAT)

    raw = _read_input(args.input_file)
    corpus = subtitle_format.parse(raw)
    _status("Loaded {} subtitles ({})".format(len(corpus), subtitle_format.name))

    report = analyze(corpus, subtitle_format)

    if not args.quiet:
        print(_section_text(report, args.section))

    if args.export:
        saved = write_report(report, args.export)
        _status("Saved: {}".format(saved))

    return report


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        _configure_logging(args.log_level)
        run(args)
    except (ValueError, OSError) as e:
        # UnicodeDecodeError is a ValueError; export failures are OSErrors
        logger.debug("Statistics run failed", exc_info=True)
        _error(str(e))


if __name__ == "__main__":
    main()
