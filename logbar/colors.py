"""ANSI color codes for logbar's own log messages.

The progress bar never uses these; they only decorate log level prefixes.
"""

import sys

_CODES = {
    'RED': '\033[0;31m',
    'GREEN': '\033[0;32m',
    'YELLOW': '\033[1;33m',
    'CYAN': '\033[0;36m',
    'NC': '\033[0m',  # No Color
}


class Colors:
    """ANSI color codes, blanked out when the log stream is not a TTY."""
    RED = _CODES['RED']
    GREEN = _CODES['GREEN']
    YELLOW = _CODES['YELLOW']
    CYAN = _CODES['CYAN']
    NC = _CODES['NC']

    @classmethod
    def disable(cls):
        """Replace every code with an empty string."""
        for name in _CODES:
            setattr(cls, name, '')

    @classmethod
    def enable(cls):
        """Restore the ANSI codes."""
        for name, code in _CODES.items():
            setattr(cls, name, code)

    @classmethod
    def auto(cls, stream=None):
        """Enable colors only if *stream* (default stderr) is a TTY."""
        stream = stream if stream is not None else sys.stderr
        isatty = getattr(stream, 'isatty', None)
        if isatty is not None and isatty():
            cls.enable()
        else:
            cls.disable()
