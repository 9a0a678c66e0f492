"""Logging setup for resx-naming."""

import logging
import sys
from pathlib import Path
from typing import Optional

from .colors import Colors

LOGGER_NAME = 'resx_naming'


class ColoredFormatter(logging.Formatter):
    """
    Formatter that colors console messages by level.

    File output uses a plain formatter, so log files stay free of ANSI codes.
    """

    LEVEL_COLORS = {
        logging.DEBUG: Colors.DIM,
        logging.INFO: Colors.OKCYAN,
        logging.WARNING: Colors.WARNING,
        logging.ERROR: Colors.FAIL,
        logging.CRITICAL: Colors.FAIL + Colors.BOLD,
    }

    def __init__(self, fmt: Optional[str] = None, use_colors: bool = True):
        """
        Initialize the formatter.

        Args:
            fmt: Format string for log messages
            use_colors: Whether to use ANSI colors
        """
        super().__init__(fmt)
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)

        if self.use_colors:
            color = self.LEVEL_COLORS.get(record.levelno, '')
            message = f"{color}{message}{Colors.ENDC}"

        return message


class Logger:
    """
    Owner of the ``resx_naming`` logger and its handlers.

    Modules log through ``logging.getLogger(__name__)``; since all of them
    live below the ``resx_naming`` package, the handlers configured here
    apply to every module. Console output goes to stderr so that command
    output on stdout stays machine readable.
    """

    _instance: Optional['Logger'] = None
    _initialized: bool = False

    def __new__(cls) -> 'Logger':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if Logger._initialized:
            return

        self._logger = logging.getLogger(LOGGER_NAME)
        self._logger.setLevel(logging.DEBUG)
        self._logger.handlers = []

        self._console_handler = self._create_console_handler()
        self._logger.addHandler(self._console_handler)

        self._file_handler: Optional[logging.FileHandler] = None

        Logger._initialized = True

    def _create_console_handler(
        self,
        level: int = logging.WARNING,
        use_colors: Optional[bool] = None
    ) -> logging.StreamHandler:
        """
        Create a stderr handler.

        Args:
            level: Minimum log level for console output
            use_colors: Whether to use ANSI colors (auto-detected if None)

        Returns:
            Configured StreamHandler
        """
        if use_colors is None:
            use_colors = Colors.supported(sys.stderr)

        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(level)
        handler.setFormatter(ColoredFormatter(fmt='%(levelname)s: %(message)s', use_colors=use_colors))
        return handler

    def _create_file_handler(self, file_path: Path, level: int = logging.DEBUG) -> logging.FileHandler:
        """
        Create a file handler.

        Args:
            file_path: Path to log file
            level: Minimum log level for file output

        Returns:
            Configured FileHandler
        """
        file_path.parent.mkdir(parents=True, exist_ok=True)

        handler = logging.FileHandler(file_path, encoding='utf-8')
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(
            fmt='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        return handler

    def configure(
        self,
        verbose: bool = False,
        quiet: bool = False,
        log_file: Optional[Path] = None,
        use_colors: Optional[bool] = None
    ) -> None:
        """
        Configure the logger.

        Args:
            verbose: Show DEBUG messages on the console
            quiet: Show only errors on the console
            log_file: Optional file that receives all messages
            use_colors: Whether to use colors on the console
        """
        if quiet:
            console_level = logging.ERROR
        elif verbose:
            console_level = logging.DEBUG
        else:
            console_level = logging.WARNING

        self._logger.removeHandler(self._console_handler)
        self._console_handler.close()
        self._console_handler = self._create_console_handler(level=console_level, use_colors=use_colors)
        self._logger.addHandler(self._console_handler)

        if log_file:
            if self._file_handler:
                self._logger.removeHandler(self._file_handler)
                self._file_handler.close()
            self._file_handler = self._create_file_handler(Path(log_file))
            self._logger.addHandler(self._file_handler)

    @property
    def console_level(self) -> int:
        return self._console_handler.level

    @property
    def file_handler(self) -> Optional[logging.FileHandler]:
        return self._file_handler


_logger: Optional[Logger] = None


def get_logger() -> Logger:
    """Return the global logger owner."""
    global _logger
    if _logger is None:
        _logger = Logger()
    return _logger


def configure_logging(
    verbose: bool = False,
    quiet: bool = False,
    log_file: Optional[Path] = None,
    use_colors: Optional[bool] = None
) -> None:
    """Configure the global logger (see Logger.configure)."""
    get_logger().configure(
        verbose=verbose,
        quiet=quiet,
        log_file=log_file,
        use_colors=use_colors
    )


def reset_logger() -> None:
    """Reset the global logger (mainly for testing)."""
    global _logger
    if _logger is not None:
        for handler in _logger._logger.handlers[:]:
            handler.close()
            _logger._logger.removeHandler(handler)
    _logger = None
    Logger._instance = None
    Logger._initialized = False
