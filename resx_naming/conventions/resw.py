"""Naming convention for .resw files (culture as a directory)."""

from typing import Optional

from ..core import paths
from ..core.culture import CultureKey
from ..errors import InvalidResourceFileError
from .base import BaseConvention


class ReswConvention(BaseConvention):
    """
    .resw files live below a directory named after their culture.

    Example: Strings/en-US/Settings/View.resw -> en-US
    """

    extension = '.resw'
    requires_culture_directory = True

    PATTERN_MESSAGE = (
        "Invalid file. File name does not conform to the pattern "
        "'.\\<cultureName>\\<basename>.resw'"
    )

    def get_fallback_directory(self, file_path: str) -> Optional[str]:
        directory = paths.directory_name(file_path)
        if directory is None:
            return None
        return paths.directory_name(directory)

    def is_resource_file(self, file_path: str) -> bool:
        return bool(self.get_language_name(file_path))

    def get_culture_key(
        self,
        file_path: str,
        neutral_resources_language: Optional[str] = None
    ) -> CultureKey:
        culture_name = self.get_language_name(file_path)
        if not culture_name:
            raise InvalidResourceFileError(file_path, self.PATTERN_MESSAGE)

        if CultureKey.parse(neutral_resources_language) == CultureKey(culture_name):
            return CultureKey.NEUTRAL
        return CultureKey(culture_name)

    def get_base_name(self, file_path: str) -> str:
        return paths.file_name_without_extension(file_path)

    def get_language_file_name(
        self,
        file_path: str,
        culture: CultureKey,
        neutral_resources_language: Optional[str] = None
    ) -> str:
        if culture.is_neutral:
            if not neutral_resources_language:
                raise ValueError(
                    "The neutral culture of a .resw file needs a neutral resources language"
                )
            culture = CultureKey(neutral_resources_language)

        return paths.join(
            paths.separator_for(file_path),
            self.get_base_language_directory(file_path),
            str(culture),
            self.get_sub_directory(file_path),
            paths.file_name(file_path),
        )
