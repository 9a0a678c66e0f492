"""Base interface for resource file naming conventions."""

import logging
from abc import ABC, abstractmethod
from typing import Optional, Tuple

from ..core import paths
from ..core.culture import CultureHelper, CultureKey, get_default_culture_helper
from ..errors import DirectoryNotFoundError, InvalidResourceFileError

logger = logging.getLogger(__name__)


class BaseConvention(ABC):
    """
    Base class for the naming convention of a resource file type.

    The culture-directory layout helpers are shared by all conventions:
    a culture directory is the first directory segment, scanning from left
    to right, that the culture helper accepts as a culture name.
    """

    #: File extension handled by the convention, including the dot
    extension: str = ''

    #: Whether the file path must contain a culture directory
    requires_culture_directory: bool = False

    def __init__(self, culture_helper: Optional[CultureHelper] = None):
        """
        Initialize convention.

        Args:
            culture_helper: Culture name predicate (default helper if omitted)
        """
        self.culture_helper = culture_helper or get_default_culture_helper()

    @classmethod
    def handles(cls, extension: Optional[str]) -> bool:
        """Check if the convention handles an extension (case-insensitive)."""
        return bool(extension) and extension.lower() == cls.extension.lower()

    # Culture directory layout

    def _find_culture_segment(self, file_path: str) -> Optional[Tuple[str, str, int, int]]:
        """
        Locate the culture directory segment of a path.

        Returns:
            Tuple of (directory, segment, start, end) or None
        """
        directory = paths.directory_name(file_path)
        if not directory:
            return None

        for segment, start, end in paths.iter_segments(directory):
            if self.culture_helper.is_valid_culture_name(segment):
                return directory, segment, start, end
        return None

    def get_language_name(self, file_path: str) -> str:
        """
        Return the culture directory name of a path.

        Example: /project/Strings/en-US/sub/View.resw -> en-US

        Args:
            file_path: Resource file path

        Returns:
            Culture name like 'en-US', or '' if no directory is a culture name
        """
        found = self._find_culture_segment(file_path)
        return found[1] if found else ''

    def get_base_language_directory(self, file_path: str) -> str:
        """
        Return the directory that contains the culture directories.

        Example: /project/Strings/en-US/sub/View.resw -> /project/Strings

        Args:
            file_path: Resource file path

        Returns:
            Directory path

        Raises:
            DirectoryNotFoundError: If no directory can be determined
        """
        found = self._find_culture_segment(file_path)
        if found:
            directory, _, start, _ = found
            base_directory = paths.trim_separators(directory[:start]) if start else ''
            logger.debug("Base language directory of %s: %r", file_path, base_directory)
            return base_directory

        fallback = self.get_fallback_directory(file_path)
        if fallback is None:
            raise DirectoryNotFoundError(file_path)
        return fallback

    def get_sub_directory(self, file_path: str) -> str:
        """
        Return the directory path between the culture directory and the file.

        Example: /project/Strings/en-US/sub/View.resw -> sub

        Args:
            file_path: Resource file path

        Returns:
            Relative sub directory, '' if the file is directly in the culture
            directory or, for conventions without culture directories, if the
            path has none

        Raises:
            InvalidResourceFileError: If the convention requires a culture
                directory and the path has none
        """
        found = self._find_culture_segment(file_path)
        if not found:
            if not self.requires_culture_directory:
                return ''
            raise InvalidResourceFileError(file_path, "No culture directory in path")

        directory, _, _, end = found
        return paths.trim_separators(directory[end:], leading=True)

    @abstractmethod
    def get_fallback_directory(self, file_path: str) -> Optional[str]:
        """Base directory used when the path has no culture directory."""
        pass

    # Convention specific naming

    @abstractmethod
    def is_resource_file(self, file_path: str) -> bool:
        """Check if a path with this convention's extension is a resource file."""
        pass

    @abstractmethod
    def get_culture_key(
        self,
        file_path: str,
        neutral_resources_language: Optional[str] = None
    ) -> CultureKey:
        """
        Return the culture of a resource file.

        Args:
            file_path: Resource file path
            neutral_resources_language: Culture whose files count as neutral

        Returns:
            Culture key
        """
        pass

    @abstractmethod
    def get_base_name(self, file_path: str) -> str:
        """Return the file name without extension and culture qualifier."""
        pass

    @abstractmethod
    def get_language_file_name(
        self,
        file_path: str,
        culture: CultureKey,
        neutral_resources_language: Optional[str] = None
    ) -> str:
        """
        Return the path of the sibling resource file for a culture.

        Args:
            file_path: Resource file path
            culture: Target culture
            neutral_resources_language: Culture that stands for the neutral key

        Returns:
            Sibling file path
        """
        pass
