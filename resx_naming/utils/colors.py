"""ANSI color codes for terminal output."""

import os
import sys


class Colors:
    """ANSI color codes for terminal output."""

    HEADER = '\033[95m'
    OKBLUE = '\033[94m'
    OKCYAN = '\033[96m'
    OKGREEN = '\033[92m'
    WARNING = '\033[93m'
    FAIL = '\033[91m'
    ENDC = '\033[0m'
    BOLD = '\033[1m'
    DIM = '\033[2m'

    @staticmethod
    def supported(stream=None) -> bool:
        """Check if a stream should receive color codes (honours NO_COLOR)."""
        if os.environ.get('NO_COLOR'):
            return False
        stream = stream or sys.stdout
        return hasattr(stream, 'isatty') and stream.isatty()

    @classmethod
    def paint(cls, code: str, text: str) -> str:
        return f"{code}{text}{cls.ENDC}"

    @classmethod
    def success(cls, text: str) -> str:
        """Return text in green color."""
        return cls.paint(cls.OKGREEN, text)

    @classmethod
    def error(cls, text: str) -> str:
        """Return text in red color."""
        return cls.paint(cls.FAIL, text)

    @classmethod
    def warning(cls, text: str) -> str:
        """Return text in yellow color."""
        return cls.paint(cls.WARNING, text)

    @classmethod
    def info(cls, text: str) -> str:
        return cls.paint(cls.OKCYAN, text)

    @classmethod
    def bold(cls, text: str) -> str:
        return cls.paint(cls.BOLD, text)

    @classmethod
    def dim(cls, text: str) -> str:
        return cls.paint(cls.DIM, text)
