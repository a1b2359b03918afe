"""Exceptions raised by logbar."""


class LogbarError(Exception):
    """Base class for logbar errors."""


class CounterPoisonedError(LogbarError, RuntimeError):
    """A previous holder of a bar's counter lock failed mid-update.

    The counter may be half-written, so the bar refuses all further
    operations instead of guessing at its state.
    """
