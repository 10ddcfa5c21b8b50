"""
Byte-frequency models.
"""
from .frequency import Analyzer
from .presets import available_presets, load_preset

__all__ = ["Analyzer", "available_presets", "load_preset"]
