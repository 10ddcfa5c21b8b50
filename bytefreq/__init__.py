"""
Byte-frequency analyzer: train on a corpus, score content against it.
"""
from .exceptions import ModelFormatError, UnknownPresetError
from .models import Analyzer, available_presets, load_preset

__all__ = [
    "Analyzer",
    "ModelFormatError",
    "UnknownPresetError",
    "available_presets",
    "load_preset",
]
