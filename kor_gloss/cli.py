"""
CLI interface for kor-gloss.

Usage:
    kor-gloss translate chapter1.txt -w words.wl.txt -x skip.txt
    kor-gloss translate chapter1.txt -w words.wl.txt --use-line-mode
    kor-gloss translate chapter1.txt -d kor_gloss.dic --retranslate
    kor-gloss clean chapter1.txt
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from kor_gloss import __version__
from kor_gloss.dictionary import build_dictionary, load_dictionary
from kor_gloss.translator import TranslationMode, clean_lines, translate_document


# ============================================================================
# Exit Codes
# ============================================================================

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_OPEN_FAILED = 2
EXIT_READ_FAILED = 3


class CommandError(Exception):
    """A command failed; carries the process exit code."""

    def __init__(self, message: str, exit_code: int) -> None:
        super().__init__(message)
        self.exit_code = exit_code


def read_document(path: Path) -> str:
    """Read a UTF-8 text file, mapping failures to exit codes."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return f.read()
    except OSError as e:
        raise CommandError(f"Could not open file {str(path)!r}: {e.strerror}", EXIT_OPEN_FAILED)
    except UnicodeDecodeError as e:
        raise CommandError(f"Could not read file {str(path)!r}: {e.reason}", EXIT_READ_FAILED)


# ============================================================================
# Commands
# ============================================================================

def cmd_translate(args: argparse.Namespace) -> str:
    mode = TranslationMode.NORMAL
    if args.use_line_mode:
        mode = TranslationMode.LINE_BY_LINE
    if args.retranslate:
        mode = TranslationMode.RETRANSLATE

    if args.dictionary is not None:
        if args.word_list or args.exclusion_rules:
            raise CommandError("--dictionary cannot be combined with -w/-x", EXIT_USAGE)
        try:
            dictionary = load_dictionary(args.dictionary)
        except FileNotFoundError as e:
            raise CommandError(str(e), EXIT_OPEN_FAILED)
    else:
        try:
            dictionary = build_dictionary(args.word_list, args.exclusion_rules)
        except OSError as e:
            raise CommandError(f"Could not open file {e.filename!r}: {e.strerror}", EXIT_OPEN_FAILED)
        except UnicodeDecodeError as e:
            raise CommandError(f"Could not read word list: {e.reason}", EXIT_READ_FAILED)

    text = read_document(args.document)
    return translate_document(text, dictionary, mode)


def cmd_clean(args: argparse.Namespace) -> str:
    text = read_document(args.document)
    return "\n".join(clean_lines(text))


# ============================================================================
# Main
# ============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kor-gloss",
        description="Utility to aid with the translation of Korean text documents.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"kor-gloss {__version__}",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show loading details",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    translate_parser = subparsers.add_parser(
        "translate",
        help="Make a rough translation of a document",
        description=(
            "Makes a very rough translation of a document in Korean, using a set "
            "of provided word lists to substitute words with their definitions."
        ),
    )
    translate_parser.add_argument(
        "document",
        type=Path,
        help="A document to translate",
    )
    translate_parser.add_argument(
        "--word-list", "-w",
        type=Path,
        action="append",
        default=[],
        metavar="FILE",
        help="Word lists to read definitions from",
    )
    translate_parser.add_argument(
        "--exclusion-rules", "-x",
        type=Path,
        action="append",
        default=[],
        metavar="FILE",
        help="Files with one word per line to exclude from the automatic translation",
    )
    translate_parser.add_argument(
        "--dictionary", "-d",
        type=Path,
        metavar="FILE",
        help="Compiled dictionary to use instead of word lists",
    )
    translate_parser.add_argument(
        "--use-line-mode", "-l",
        action="store_true",
        help=(
            "Keep existing lines, and place a translated and blank line under "
            "each line of the source text"
        ),
    )
    translate_parser.add_argument(
        "--retranslate", "-r",
        action="store_true",
        help="Retranslate the file, keeping existing user-translated lines (overrides -l)",
    )
    translate_parser.set_defaults(handler=cmd_translate)

    clean_parser = subparsers.add_parser(
        "clean",
        help="Keep only the manual translations of a line-mode document",
    )
    clean_parser.add_argument(
        "document",
        type=Path,
        help="A line-mode document to clean",
    )
    clean_parser.set_defaults(handler=cmd_clean)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format='%(levelname)s: %(message)s',
    )

    try:
        print(args.handler(args))
    except CommandError as e:
        print(f"Error: {e}", file=sys.stderr)
        return e.exit_code

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
