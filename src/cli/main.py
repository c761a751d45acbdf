"""englishgate CLI entry points.
This module exposes the language gate for shell pipelines.
It maps argparse commands onto SDK calls.
"""

from __future__ import annotations

import argparse
from dataclasses import asdict
import json
import sys
from typing import Iterable, Sequence

from core.constants import DEFAULT_ENGLISH_THRESHOLD, DEFAULT_MIN_WORD_LENGTH
from core.errors import EnglishGateError
from core.logging_config import configure_logging
from core.types import DetectionOptions
from detection.decision_engine import LanguageDetector
from detection.default_detector import get_default_detector
from detection.document_patterns import matches_document_pattern


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(
        prog="englishgate",
        description="Check whether text is predominantly English",
    )
    parser.add_argument("--verbose", action="store_true", help="Emit debug log events")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_check_command(subparsers)
    _add_filter_command(subparsers)
    _add_match_document_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the englishgate CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        configure_logging("DEBUG")
    if args.command == "match-document":
        return _run_match_document_command(args)
    try:
        options = _build_options(args)
        detector = get_default_detector()
    except EnglishGateError as error:
        parser.error(str(error))
    if args.command == "check":
        return _run_check_command(detector, options, args)
    if args.command == "filter":
        return _run_filter_command(detector, options, args)
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _add_detection_arguments(parser: argparse.ArgumentParser) -> None:
    """Register options shared by detection commands."""
    parser.add_argument(
        "--threshold",
        type=float,
        default=DEFAULT_ENGLISH_THRESHOLD,
        help="Minimum ratio of English words (0.0-1.0)",
    )
    parser.add_argument(
        "--min-word-length",
        type=int,
        default=DEFAULT_MIN_WORD_LENGTH,
        help="Skip words shorter than this",
    )
    parser.add_argument(
        "--no-numbers",
        action="store_true",
        help="Do not count standalone numbers as English",
    )
    parser.add_argument(
        "--no-abbreviations",
        action="store_true",
        help="Do not count uppercase abbreviations as English",
    )
    parser.add_argument(
        "--pattern",
        action="append",
        default=[],
        help="Regular expression stripped before detection (repeatable)",
    )
    parser.add_argument(
        "--exclude-word",
        action="append",
        default=[],
        help="Word removed before detection, case-insensitive (repeatable)",
    )


def _add_check_command(subparsers: argparse._SubParsersAction) -> None:
    parser = subparsers.add_parser("check", help="Classify one text")
    parser.add_argument("text", nargs="+", help="Text to classify; words are joined by spaces")
    parser.add_argument(
        "--explain",
        action="store_true",
        help="Print the decision trace as JSON",
    )
    _add_detection_arguments(parser)


def _add_filter_command(subparsers: argparse._SubParsersAction) -> None:
    parser = subparsers.add_parser("filter", help="Keep English lines of a file")
    parser.add_argument("source", help="Input file path, or - for stdin")
    parser.add_argument(
        "--invert",
        action="store_true",
        help="Keep non-English lines instead",
    )
    _add_detection_arguments(parser)


def _add_match_document_command(subparsers: argparse._SubParsersAction) -> None:
    parser = subparsers.add_parser(
        "match-document",
        help="Check whether text contains a document identifier",
    )
    parser.add_argument("text", help="Text to inspect")


def _build_options(args: argparse.Namespace) -> DetectionOptions:
    """Translate parsed arguments into detection options.

    Args:
        args: Parsed CLI args.

    Returns:
        Validated detection options.

    Raises:
        EnglishGateConfigError: If an option or pattern is invalid.
    """
    return DetectionOptions(
        english_threshold=args.threshold,
        min_word_length=args.min_word_length,
        allow_numbers=not args.no_numbers,
        allow_abbreviations=not args.no_abbreviations,
        custom_patterns=tuple(args.pattern),
        exclude_words=tuple(args.exclude_word),
    )


def _run_check_command(
    detector: LanguageDetector,
    options: DetectionOptions,
    args: argparse.Namespace,
) -> int:
    """Handle check command.

    Args:
        detector: Language detector.
        options: Detection options.
        args: Parsed CLI args.

    Returns:
        0 for English text, 1 for non-English text.
    """
    report = detector.analyze(" ".join(args.text), options)
    if args.explain:
        print(json.dumps(asdict(report), sort_keys=True))
    else:
        print("non-english" if report.is_non_english else "english")
    return 1 if report.is_non_english else 0


def _run_filter_command(
    detector: LanguageDetector,
    options: DetectionOptions,
    args: argparse.Namespace,
) -> int:
    """Handle filter command.

    Args:
        detector: Language detector.
        options: Detection options.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    if args.source == "-":
        _write_matching_lines(detector, options, sys.stdin, args.invert)
        return 0
    with open(args.source, encoding="utf-8") as source:
        _write_matching_lines(detector, options, source, args.invert)
    return 0


def _write_matching_lines(
    detector: LanguageDetector,
    options: DetectionOptions,
    lines: Iterable[str],
    invert: bool,
) -> None:
    for line in lines:
        record = line.rstrip("\n")
        if detector.detect_non_english_text(record, options) == invert:
            print(record)


def _run_match_document_command(args: argparse.Namespace) -> int:
    """Handle match-document command."""
    print("true" if matches_document_pattern(args.text) else "false")
    return 0
