"""logbar: a progress bar whose output can be piped straight into a log."""

from logbar.errors import CounterPoisonedError, LogbarError
from logbar.progress import Counter, ProgressBar
from logbar.scale import num_segments
from logbar.style import Style

__version__ = "0.1.0"

__all__ = [
    "Counter",
    "CounterPoisonedError",
    "LogbarError",
    "ProgressBar",
    "Style",
    "num_segments",
]
