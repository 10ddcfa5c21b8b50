#!/usr/bin/env python3
"""
Report statistics of a trained byte-frequency model.

Shows:
- Total bytes observed and distinct byte values used
- Zero-order entropy of the distribution
- Most common bytes

Usage:
    bytefreq-analyze checkpoints/model.npy --top 20
"""
import argparse
import sys
from pathlib import Path
from typing import List, Optional

import numpy as np

from .config import NUM_SYMBOLS
from .models import Analyzer
from .scoring import normalize


def entropy(probs: np.ndarray) -> float:
    """Calculate entropy in bits."""
    probs = probs[probs > 0]
    return float(-np.sum(probs * np.log2(probs)))


def describe_byte(value: int) -> str:
    """Printable rendering of a byte value."""
    char = chr(value)
    if value < 128 and char.isprintable():
        return repr(char)
    return f"0x{value:02x}"


def analyze_distribution(counts: np.ndarray, top_k: int = 10) -> None:
    """Print the distribution summary for a histogram."""
    total = int(counts.sum())
    probs = normalize(counts)

    print(f"Total bytes: {total:,}")
    print(f"Distinct byte values: {np.count_nonzero(counts)} / {NUM_SYMBOLS}")
    print()

    h = entropy(probs)
    print(f"Entropy (0-order): {h:.3f} bits")
    print(f"Original encoding: {np.log2(NUM_SYMBOLS):.3f} bits (8 bits)")
    print()

    print("Most common bytes:")
    sorted_idx = np.argsort(-counts, kind="stable")[:top_k]
    for i, idx in enumerate(sorted_idx):
        if counts[idx] == 0:
            break
        print(f"  {i+1:2d}. {describe_byte(int(idx)):>6}: {int(counts[idx]):>12,} ({float(probs[idx])*100:.2f}%)")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Report statistics of a byte-frequency model.")
    parser.add_argument("model", type=Path, help="Saved model to analyze.")
    parser.add_argument("--top", type=int, default=10, help="Number of top bytes to list (default: %(default)s).")
    args = parser.parse_args(argv)

    analyzer = Analyzer()
    analyzer.restore(args.model)

    print("=" * 60)
    print(f"Byte Distribution: {args.model}")
    print("=" * 60)
    if analyzer.size == 0:
        print("Model is untrained.")
        return 0

    analyze_distribution(analyzer.counts, top_k=args.top)
    return 0


if __name__ == "__main__":
    sys.exit(main())
