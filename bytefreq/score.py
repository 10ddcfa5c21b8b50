#!/usr/bin/env python3
"""
Score content against a trained model or a preset.

Prints one line per input: the score followed by the input name. Scores are
in [0, 1]; an empty input scores nan.

Usage:
    bytefreq-score --model checkpoints/model.npy README.md
    bytefreq-score --preset english --text "Is this English?"
"""
import argparse
import sys
from pathlib import Path
from typing import List, Optional

from .config import DEFAULT_PRESET, MODEL_DIR, MODEL_FILE, TEXT_ENCODING
from .models import Analyzer, available_presets, load_preset


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Score files or text against a byte-frequency model."
    )
    parser.add_argument("inputs", nargs="*", type=Path, help="Files to score.")
    parser.add_argument("--text", action="append", default=[], help="Text to score (repeatable).")
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--model",
        type=Path,
        help=f"Saved model to score against (default: {MODEL_DIR / MODEL_FILE} if it exists).",
    )
    source.add_argument(
        "--preset",
        choices=available_presets(),
        help=f"Preset to score against (default: {DEFAULT_PRESET} when no model is found).",
    )
    parser.add_argument(
        "--occurrences",
        action="store_true",
        help="Also print the byte-set occurrence score.",
    )
    return parser


def load_reference(args: argparse.Namespace) -> Analyzer:
    if args.preset:
        return load_preset(args.preset)

    path = args.model
    if path is None:
        path = MODEL_DIR / MODEL_FILE
        if not path.exists():
            return load_preset(DEFAULT_PRESET)

    analyzer = Analyzer()
    analyzer.restore(path)
    return analyzer


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.inputs and not args.text:
        parser.error("nothing to score: pass files and/or --text")

    reference = load_reference(args)
    if reference.size == 0:
        print("Reference model is untrained; scores are undefined.", file=sys.stderr)
        return 1

    items = [(text, text.encode(TEXT_ENCODING)) for text in args.text]
    items += [(str(path), path.read_bytes()) for path in args.inputs]

    for name, contents in items:
        line = f"{reference.score(contents):.4f}"
        if args.occurrences:
            line += f"\t{reference.score_occurrences(contents):.4f}"
        print(f"{line}\t{name}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
