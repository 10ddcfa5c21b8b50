"""
Pre-trained reference histograms.

Each preset is a hard-coded table of byte counts. `load_preset` builds a new,
ordinary Analyzer from one; there is no shared instance, so callers that want
one model for the lifetime of the process should build it once at startup and
keep it.
"""
from typing import Dict, List

import numpy as np

from ..config import COUNT_DTYPE, NUM_SYMBOLS
from ..exceptions import UnknownPresetError
from .frequency import Analyzer

# Byte counts per ~100k bytes of plain English prose (ASCII only).
ENGLISH: Dict[str, int] = {
    # Whitespace
    " ": 17500, "\n": 400,
    # Lowercase letters
    "e": 9609, "t": 6855, "a": 6181, "o": 5682, "i": 5273, "n": 5107,
    "s": 4789, "h": 4608, "r": 4532, "d": 3216, "l": 3049, "c": 2103,
    "u": 2088, "m": 1823, "w": 1786, "f": 1687, "g": 1528, "y": 1490,
    "p": 1460, "b": 976, "v": 741, "k": 583, "j": 113, "x": 113,
    "q": 76, "z": 53,
    # Uppercase letters
    "T": 420, "I": 300, "A": 220, "S": 160, "H": 150, "W": 120, "C": 110,
    "B": 100, "M": 100, "P": 90, "E": 80, "O": 80, "N": 70, "D": 70,
    "F": 60, "R": 60, "L": 60, "G": 50, "J": 40, "Y": 30, "U": 20,
    "K": 20, "V": 20, "Q": 5, "X": 3, "Z": 3,
    # Punctuation
    ".": 650, ",": 600, "'": 250, '"': 200, "-": 150, "?": 50, "!": 40,
    ";": 30, ":": 30, "(": 20, ")": 20,
    # Digits
    "0": 60, "1": 50, "2": 40, "3": 30, "4": 25, "5": 25, "6": 20,
    "7": 20, "8": 20, "9": 25,
}

PRESETS: Dict[str, Dict[str, int]] = {
    "english": ENGLISH,
}


def preset_counts(table: Dict[str, int]) -> np.ndarray:
    """Expand a {character: count} table into a 256-entry histogram."""
    counts = np.zeros(NUM_SYMBOLS, dtype=COUNT_DTYPE)
    for char, count in table.items():
        counts[ord(char)] = count
    return counts


def available_presets() -> List[str]:
    return sorted(PRESETS)


def load_preset(name: str) -> Analyzer:
    """
    Build a new Analyzer from a named preset.

    Raises:
        UnknownPresetError: If no preset is registered under `name`
    """
    try:
        table = PRESETS[name]
    except KeyError:
        raise UnknownPresetError(
            f"Unknown preset: {name!r} (available: {', '.join(available_presets())})"
        ) from None
    return Analyzer.from_counts(preset_counts(table))
