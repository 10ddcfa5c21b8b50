#!/usr/bin/env python3
"""
Train a byte-frequency model on a corpus.

Files, directories and/or a Hugging Face dataset are fed into one Analyzer,
which is then saved. With --resume, an existing model at the output path is
restored first so training continues where it left off.

Usage:
    bytefreq-train corpus/ notes.txt -o checkpoints/model.npy
    bytefreq-train --dataset wikitext --limit 10000 --resume
"""
import argparse
import sys
from pathlib import Path
from typing import List, Optional

from tqdm import tqdm

from .config import (
    DATASET_CONFIG, DATASET_SPLIT, MODEL_DIR, MODEL_FILE, TEXT_FIELD,
)
from .corpus import collect_files, iter_dataset_texts, iter_file_chunks
from .models import Analyzer


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Train a byte-frequency model on files or a dataset."
    )
    parser.add_argument(
        "inputs",
        nargs="*",
        help="Files or directories to train on. Directories are walked recursively.",
    )
    parser.add_argument(
        "-o", "--output",
        type=Path,
        default=MODEL_DIR / MODEL_FILE,
        help="Where to save the model (default: %(default)s).",
    )
    parser.add_argument(
        "--resume",
        action="store_true",
        help="Restore the model at --output before training, if it exists.",
    )
    parser.add_argument("--dataset", help="Hugging Face dataset to train on.")
    parser.add_argument(
        "--dataset-config",
        default=DATASET_CONFIG,
        help="Dataset configuration (default: %(default)s).",
    )
    parser.add_argument(
        "--split",
        default=DATASET_SPLIT,
        help="Dataset split (default: %(default)s).",
    )
    parser.add_argument(
        "--text-field",
        default=TEXT_FIELD,
        help="Dataset column holding the text (default: %(default)s).",
    )
    parser.add_argument("--limit", type=int, help="Maximum number of dataset rows.")
    return parser


def train_files(analyzer: Analyzer, files: List[Path]) -> None:
    for path in tqdm(files, desc="Files", unit="file"):
        for chunk in iter_file_chunks(path):
            analyzer.feed(chunk)


def train_dataset(analyzer: Analyzer, args: argparse.Namespace) -> int:
    rows = 0
    texts = iter_dataset_texts(
        args.dataset,
        args.dataset_config,
        split=args.split,
        text_field=args.text_field,
        limit=args.limit,
    )
    for text in tqdm(texts, desc="Rows", unit="row", total=args.limit):
        analyzer.feed(text)
        rows += 1
    return rows


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.inputs and not args.dataset:
        parser.error("nothing to train on: pass input paths and/or --dataset")

    print("=" * 60)
    print("Training Byte-Frequency Model")
    print("=" * 60)

    analyzer = Analyzer()
    if args.resume and args.output.exists():
        analyzer.restore(args.output)
        print(f"Resumed from {args.output} ({analyzer.size:,} bytes)")

    start = analyzer.size
    if args.inputs:
        files = collect_files(args.inputs)
        print(f"Files: {len(files)}")
        train_files(analyzer, files)
    if args.dataset:
        print(f"Dataset: {args.dataset} ({args.dataset_config}, {args.split})")
        rows = train_dataset(analyzer, args)
        print(f"Rows: {rows:,}")

    if analyzer.size == 0:
        print("No bytes to train on; model not saved.", file=sys.stderr)
        return 1

    args.output.parent.mkdir(parents=True, exist_ok=True)
    analyzer.save(args.output)

    print()
    print(f"Bytes fed:   {analyzer.size - start:,}")
    print(f"Total bytes: {analyzer.size:,}")
    print(f"Model saved to: {args.output}")
    print("=" * 60)
    return 0


if __name__ == "__main__":
    sys.exit(main())
