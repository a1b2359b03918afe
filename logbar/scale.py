"""Scale rendering: the label row and tick-marked track drawn once per bar.

Everything here except the ``draw_*`` writers is a pure function of the
style, so the layout can be checked without a stream.
"""

import sys

from logbar.style import Style

# Preferred segment counts, best first
SEGMENTS = (10, 5, 4, 2)

# "100%" needs this many columns after the previous label
LABEL_WIDTH = 3


def num_segments(width: int) -> int:
    """Number of equal segments the track is split into.

    The first candidate that divides ``width`` and leaves segments wider
    than a label wins. Falls back to a single segment.
    """
    for s in SEGMENTS:
        if width % s == 0 and width // s > LABEL_WIDTH:
            return s
    return 1


def format_labels(width: int, segments: int) -> str:
    """Percentage label row, e.g. ``0%      50%     100%``."""
    if width % segments != 0:
        raise ValueError(
            f"width {width} is not divisible into {segments} segments"
        )
    seg_width = width // segments
    parts = ["0% "]
    for p in range(1, segments + 1):
        parts.append(" " * (seg_width - LABEL_WIDTH))
        parts.append(f"{p * 100 // segments}%")
    parts.append("\n")
    return "".join(parts)


def format_tickbar(style: Style, segments: int) -> str:
    """Track line, e.g. ``|====|====|``."""
    width = style.width
    if width % segments != 0:
        raise ValueError(
            f"width {width} is not divisible into {segments} segments"
        )
    segment = style.bar * (width // segments - 1) + style.tick
    return style.tick + segment * segments + "\n"


def format_scale(style: Style) -> str:
    """Full scale for a style: optional label row, then the track.

    Width 1 degenerates to a lone tick; width 0 draws nothing.
    """
    width = style.width
    segments = num_segments(width)
    scale = ""
    if width > LABEL_WIDTH and style.labels:
        scale += format_labels(width, segments)
    if width > 1:
        scale += format_tickbar(style, segments)
    elif width == 1:
        scale += style.tick + "\n"
    return scale


def _write(text: str, stream=None) -> None:
    if not text:
        return
    out = stream if stream is not None else sys.stderr
    out.write(text)
    out.flush()


def draw_labels(width: int, segments: int, stream=None) -> None:
    """Write the label row to *stream* (default stderr)."""
    _write(format_labels(width, segments), stream)


def draw_tickbar(style: Style, segments: int, stream=None) -> None:
    """Write the track line to *stream* (default stderr)."""
    _write(format_tickbar(style, segments), stream)


def draw_bar(style: Style, stream=None) -> None:
    """Write the full scale for *style* to *stream* (default stderr)."""
    _write(format_scale(style), stream)
