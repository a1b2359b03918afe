"""Tests for logbar.style module."""

import dataclasses

import pytest

from logbar.style import (
    DEFAULT_BAR,
    DEFAULT_INDICATOR,
    DEFAULT_TICK,
    DEFAULT_WIDTH,
    Style,
)


class TestStyleDefaults:
    """Tests for the default style."""

    def test_defaults(self):
        style = Style()
        assert style.width == DEFAULT_WIDTH == 50
        assert style.labels is True
        assert style.tick == DEFAULT_TICK == '|'
        assert style.bar == DEFAULT_BAR == '='
        assert style.indicator == DEFAULT_INDICATOR == '#'

    def test_new_is_default(self):
        assert Style.new() == Style()


class TestStyleBuilder:
    """Tests for the with_* setters."""

    def test_each_setter(self):
        assert Style().with_width(80).width == 80
        assert Style().with_labels(False).labels is False
        assert Style().with_tick('v').tick == 'v'
        assert Style().with_bar('-').bar == '-'
        assert Style().with_indicator('█').indicator == '█'

    def test_chaining(self):
        style = (
            Style()
            .with_indicator('█')
            .with_labels(False)
            .with_tick('↓')
            .with_bar('-')
        )
        assert style == Style(50, False, '↓', '-', '█')

    def test_setters_leave_receiver_unchanged(self):
        base = Style()
        base.with_width(10)
        assert base.width == 50

    def test_no_cross_field_validation(self):
        """Zero width and duplicate glyphs are accepted."""
        style = Style().with_width(0).with_tick('x').with_bar('x').with_indicator('x')
        assert style.width == 0
        assert style.tick == style.bar == style.indicator == 'x'

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            Style().width = 3


class TestStyleValueSemantics:
    """Equality, hashing and ordering."""

    def test_structural_equality(self):
        assert Style().with_width(20) == Style(width=20)
        assert Style().with_width(20) != Style()

    def test_hashable(self):
        styles = {Style(), Style.new(), Style().with_labels(False)}
        assert len(styles) == 2

    def test_ordered_by_field_order(self):
        narrow = Style().with_width(10)
        no_labels = Style().with_labels(False)
        assert sorted([Style(), narrow, no_labels]) == [narrow, no_labels, Style()]
