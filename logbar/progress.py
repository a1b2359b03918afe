"""Log-friendly progress bar.

Most progress bars redraw a line in place with carriage returns. That output
turns into garbage once stderr is a file, a pipe or a CI log. This bar only
ever appends: a scale is drawn once when the bar is created, then one
indicator glyph is printed each time progress crosses the next column,
and a newline ends the block.

Usage:
    bar = ProgressBar(10)
    bar.inc(1)        # 10%
    bar.inc(3)        # 40%
    bar.finish()      # 100%, newline

    with ProgressBar.with_style(len(items), Style().with_width(80)) as bar:
        for item in items:
            process(item)
            bar.inc(1)
"""

import logging
import sys
import threading
from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import Iterator, Optional

from logbar.errors import CounterPoisonedError
from logbar.scale import draw_bar
from logbar.style import Style

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Counter:
    """Snapshot of a bar's progress.

    ``count`` is the raw progress, ``progress`` the number of indicator
    glyphs already printed and ``finished`` whether the closing newline has
    been written (or the bar was aborted).
    """
    count: int = 0
    progress: int = 0
    finished: bool = False


def _check_amount(name: str, value) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


class ProgressBar:
    """Append-only progress bar, safe to share between threads.

    Args:
        max_progress: Count at which the bar is full. 0 is allowed and
            gives a bar that never prints indicator glyphs.
        style: Look of the bar (default ``Style()``).
        stream: Where to write. When None, ``sys.stderr`` is looked up at
            every write.

    Used as a context manager the bar calls ``finish()`` on exit, including
    when the block raises. Without one, a bar that is never finished or
    aborted is left without its closing newline.
    """

    def __init__(self, max_progress: int, style: Optional[Style] = None, stream=None):
        _check_amount("max_progress", max_progress)
        self._max_progress = max_progress
        self._style = style if style is not None else Style()
        self._stream = stream
        self._lock = threading.Lock()
        self._counter = Counter()
        self._poisoned = False
        # Glyphs written since the last newline
        self._line_open = False
        draw_bar(self._style, self._out)
        logger.debug("Progress bar created: max_progress=%d, %s", max_progress, self._style)

    @classmethod
    def new(cls, max_progress: int, stream=None) -> "ProgressBar":
        """Bar with the default style."""
        return cls(max_progress, stream=stream)

    @classmethod
    def with_style(cls, max_progress: int, style: Style, stream=None) -> "ProgressBar":
        """Bar with a custom style."""
        return cls(max_progress, style, stream=stream)

    @property
    def style(self) -> Style:
        return self._style

    @property
    def max_progress(self) -> int:
        return self._max_progress

    @property
    def _out(self):
        return self._stream if self._stream is not None else sys.stderr

    def _write(self, text: str) -> None:
        out = self._out
        out.write(text)
        out.flush()

    @contextmanager
    def _locked(self) -> Iterator[None]:
        """Hold the counter lock; a failure inside poisons the counter."""
        failed = False
        try:
            with self._lock:
                if self._poisoned:
                    raise CounterPoisonedError(
                        "progress counter is unusable: an earlier update failed"
                    )
                try:
                    yield
                except BaseException:
                    self._poisoned = True
                    failed = True
                    raise
        finally:
            # Logged outside the lock, handlers may call back into the bar
            if failed:
                logger.error("Progress counter update failed, counter poisoned")

    def _scale(self, count: int) -> int:
        """Glyphs that should be visible once ``count`` is reached."""
        if self._max_progress == 0:
            return 0
        return count * self._style.width // self._max_progress

    def snapshot(self) -> Counter:
        """Current counter state."""
        with self._locked():
            return self._counter

    def inc(self, amount: int = 1) -> None:
        """Advance progress by ``amount``, saturating at ``max_progress``.

        Prints however many indicator glyphs the new count has earned. An
        increment after ``finish()`` is allowed but never reopens the bar:
        the closing newline is not written again.
        """
        _check_amount("amount", amount)
        with self._locked():
            c = self._counter
            new_count = min(c.count + amount, self._max_progress)
            new_progress = self._scale(new_count)
            diff = new_progress - c.progress
            self._counter = replace(c, count=new_count, progress=new_progress)
            if diff > 0:
                self._line_open = True
        if diff > 0:
            self._write(self._style.indicator * diff)

    def finish(self) -> None:
        """Fill the bar to 100% and end the line. Safe to call repeatedly."""
        self.inc(self._max_progress)
        with self._locked():
            first = not self._counter.finished
            if first:
                self._counter = replace(self._counter, finished=True)
                self._line_open = False
        if first:
            self._write("\n")
            logger.debug("Progress bar finished")

    def break_line(self) -> bool:
        """End the current glyph run so other output starts on a fresh line.

        Returns True if a newline was written. Later glyphs continue on the
        next line; the closing newline from ``finish()`` is unaffected.
        """
        with self._locked():
            was_open = self._line_open
            self._line_open = False
        if was_open:
            self._write("\n")
        return was_open

    def abort(self) -> None:
        """Mark the bar complete without printing anything."""
        with self._locked():
            self._counter = Counter(
                count=self._max_progress,
                progress=self._scale(self._max_progress),
                finished=True,
            )
        logger.debug("Progress bar aborted")

    def __enter__(self) -> "ProgressBar":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        # A poisoned counter cannot be finished; let the original error through
        if exc_type is not None and issubclass(exc_type, CounterPoisonedError):
            return
        self.finish()

    def __repr__(self) -> str:
        return f"ProgressBar(max_progress={self._max_progress}, style={self._style!r})"
