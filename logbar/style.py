"""Progress bar style: width, labels and the three display glyphs."""

from dataclasses import dataclass, replace

DEFAULT_WIDTH = 50
DEFAULT_TICK = '|'
DEFAULT_BAR = '='
DEFAULT_INDICATOR = '#'


@dataclass(frozen=True, order=True)
class Style:
    """How a progress bar looks.

    Styles are values: equal when their fields are equal, ordered by field
    order, hashable. The ``with_*`` setters return a new style and leave the
    receiver untouched, so they chain:

        style = Style().with_width(80).with_labels(False).with_tick('v')

    Nothing is validated here. A width of 0 or a tick equal to the bar
    glyph is accepted and simply renders less (or nothing).
    """
    width: int = DEFAULT_WIDTH
    labels: bool = True
    tick: str = DEFAULT_TICK
    bar: str = DEFAULT_BAR
    indicator: str = DEFAULT_INDICATOR

    @classmethod
    def new(cls) -> "Style":
        """Default style."""
        return cls()

    def with_width(self, width: int) -> "Style":
        """Set the bar width in characters."""
        return replace(self, width=width)

    def with_labels(self, labels: bool) -> "Style":
        """Toggle the row of XX% labels above the track."""
        return replace(self, labels=labels)

    def with_tick(self, tick: str) -> "Style":
        """Set the glyph separating the track segments."""
        return replace(self, tick=tick)

    def with_bar(self, bar: str) -> "Style":
        """Set the glyph filling the track between ticks."""
        return replace(self, bar=bar)

    def with_indicator(self, indicator: str) -> "Style":
        """Set the glyph printed per unit of progress."""
        return replace(self, indicator=indicator)
