"""Tests for the logging setup."""

import pytest
import logging
import tempfile
from pathlib import Path

from resx_naming.utils.logging import (
    LOGGER_NAME,
    ColoredFormatter,
    Logger,
    configure_logging,
    get_logger,
    reset_logger,
)
from resx_naming.utils.colors import Colors


def make_record(level=logging.INFO, msg='Test message'):
    return logging.LogRecord(
        name='test',
        level=level,
        pathname='',
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None
    )


@pytest.fixture(autouse=True)
def clean_logger():
    """Reset the global logger around each test."""
    reset_logger()
    yield
    reset_logger()


class TestColoredFormatter:
    """Test cases for ColoredFormatter."""

    def test_format_without_colors(self):
        formatter = ColoredFormatter(fmt='%(message)s', use_colors=False)
        result = formatter.format(make_record())

        assert result == 'Test message'
        assert Colors.ENDC not in result

    def test_format_with_colors(self):
        formatter = ColoredFormatter(fmt='%(message)s', use_colors=True)
        result = formatter.format(make_record(logging.WARNING))

        assert result.startswith(Colors.WARNING)
        assert result.endswith(Colors.ENDC)

    def test_different_levels_have_different_colors(self):
        formatter = ColoredFormatter(fmt='%(message)s', use_colors=True)

        for level, color in [
            (logging.DEBUG, Colors.DIM),
            (logging.INFO, Colors.OKCYAN),
            (logging.ERROR, Colors.FAIL),
        ]:
            assert formatter.format(make_record(level)).startswith(color)


class TestLogger:
    """Test cases for Logger."""

    def test_singleton(self):
        assert Logger() is Logger()
        assert get_logger() is get_logger()

    def test_default_console_level(self):
        """Only warnings and errors reach the console by default."""
        assert get_logger().console_level == logging.WARNING

    def test_verbose(self):
        configure_logging(verbose=True)
        assert get_logger().console_level == logging.DEBUG

    def test_quiet(self):
        configure_logging(quiet=True)
        assert get_logger().console_level == logging.ERROR

    def test_quiet_wins_over_verbose(self):
        configure_logging(verbose=True, quiet=True)
        assert get_logger().console_level == logging.ERROR

    def test_console_goes_to_stderr(self, capsys):
        configure_logging(use_colors=False)
        logging.getLogger(f'{LOGGER_NAME}.test').warning('watch out')

        captured = capsys.readouterr()
        assert 'watch out' in captured.err
        assert 'watch out' not in captured.out

    def test_module_loggers_are_package_children(self):
        from resx_naming.core import scanner

        assert scanner.logger.name == f'{LOGGER_NAME}.core.scanner'

    def test_log_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            log_file = Path(tmpdir) / 'logs' / 'resx.log'
            configure_logging(log_file=log_file, use_colors=False)

            logging.getLogger('resx_naming.core.scanner').debug('scanning %s', 'Strings')
            get_logger().file_handler.flush()

            content = log_file.read_text(encoding='utf-8')
            reset_logger()

        assert 'scanning Strings' in content
        assert '[DEBUG] resx_naming.core.scanner' in content
        assert '\033[' not in content

    def test_reset_logger(self):
        first = get_logger()
        reset_logger()
        assert get_logger() is not first
