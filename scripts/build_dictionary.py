#!/usr/bin/env python3
"""
Dictionary Builder for kor-gloss.

This script reads word lists, expands every verb and adjective into its
conjugated forms, applies exclusion lists and saves the result as a
compiled marisa_trie.RecordTrie with a definitions sidecar.

Usage:
    python scripts/build_dictionary.py -w words.wl.txt [-w more.wl.txt] [-x skip.txt] [--output PATH]
"""

import argparse
import logging
import sys
import time
from pathlib import Path

# Add parent to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from kor_gloss.dictionary import build_dictionary, get_default_dictionary_path, save_dictionary

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


# ============================================================================
# Paths
# ============================================================================

DEFAULT_OUTPUT = get_default_dictionary_path()


# ============================================================================
# Main
# ============================================================================

def main():
    parser = argparse.ArgumentParser(
        description="Build a compiled kor-gloss dictionary from word lists"
    )
    parser.add_argument(
        '--word-list', '-w',
        type=Path,
        action='append',
        required=True,
        help="Word list to read definitions from (repeatable, later lists win)"
    )
    parser.add_argument(
        '--exclusion-rules', '-x',
        type=Path,
        action='append',
        default=[],
        help="File with one key per line to exclude (repeatable)"
    )
    parser.add_argument(
        '--output', '-o',
        type=Path,
        default=DEFAULT_OUTPUT,
        help=f"Output dictionary path (default: {DEFAULT_OUTPUT})"
    )

    args = parser.parse_args()

    for path in [*args.word_list, *args.exclusion_rules]:
        if not path.exists():
            logger.error(f"File not found: {path}")
            sys.exit(2)

    start_time = time.time()

    dictionary = build_dictionary(args.word_list, args.exclusion_rules)
    save_dictionary(dictionary, args.output)

    elapsed = time.time() - start_time
    logger.info(f"Build completed in {elapsed:.1f} seconds")


if __name__ == '__main__':
    main()
