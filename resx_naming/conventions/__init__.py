"""Resource file naming conventions."""

from typing import Optional

from ..core.culture import CultureHelper
from ..errors import UnsupportedFileFormatError
from .base import BaseConvention
from .resw import ReswConvention
from .resx import ResxConvention

RESX = ResxConvention.extension
RESW = ReswConvention.extension

SUPPORTED_EXTENSIONS = (RESX, RESW)


def is_supported_file_extension(extension: Optional[str]) -> bool:
    """Check if an extension belongs to a supported convention (case-insensitive)."""
    return bool(extension) and extension.lower() in SUPPORTED_EXTENSIONS


def get_convention(
    extension: Optional[str],
    culture_helper: Optional[CultureHelper] = None
) -> BaseConvention:
    """
    Return the naming convention for an extension.

    Args:
        extension: File extension including the dot
        culture_helper: Culture name predicate passed to the convention

    Returns:
        Convention instance

    Raises:
        UnsupportedFileFormatError: If the extension is not supported
    """
    for convention_class in (ResxConvention, ReswConvention):
        if convention_class.handles(extension):
            return convention_class(culture_helper)
    raise UnsupportedFileFormatError(extension or '')


__all__ = [
    'BaseConvention',
    'ResxConvention',
    'ReswConvention',
    'RESX',
    'RESW',
    'SUPPORTED_EXTENSIONS',
    'is_supported_file_extension',
    'get_convention',
]
