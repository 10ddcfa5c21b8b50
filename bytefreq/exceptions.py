"""
Errors raised by the analyzer and its presets.
"""

class ModelFormatError(ValueError):
    """Raised when a decoded histogram is not 256 non-negative integer counters."""
    pass

class UnknownPresetError(KeyError):
    """Raised when a preset name has no registered histogram."""
    pass
