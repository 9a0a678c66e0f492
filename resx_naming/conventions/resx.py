"""Naming convention for .resx files (culture as a file name qualifier)."""

from typing import Optional

from ..core import paths
from ..core.culture import CultureKey
from .base import BaseConvention


class ResxConvention(BaseConvention):
    """
    .resx files carry the culture as a pseudo-extension.

    Examples:
        Resources.resx       -> neutral
        Resources.fr.resx    -> fr
        Resources.de-AT.resx -> de-AT
    """

    extension = '.resx'

    def get_fallback_directory(self, file_path: str) -> Optional[str]:
        return paths.directory_name(file_path)

    def is_resource_file(self, file_path: str) -> bool:
        return True

    def _split_qualifier(self, file_path: str):
        """Return (base name, culture qualifier) where the qualifier may be ''."""
        name = paths.file_name_without_extension(file_path)
        base_name, inner_extension = paths.split_extension(name)
        qualifier = inner_extension[1:]

        if self.culture_helper.is_valid_culture_name(qualifier):
            return base_name, qualifier
        return name, ''

    def get_culture_key(
        self,
        file_path: str,
        neutral_resources_language: Optional[str] = None
    ) -> CultureKey:
        _, qualifier = self._split_qualifier(file_path)
        return CultureKey.parse(qualifier)

    def get_base_name(self, file_path: str) -> str:
        return self._split_qualifier(file_path)[0]

    def get_language_file_name(
        self,
        file_path: str,
        culture: CultureKey,
        neutral_resources_language: Optional[str] = None
    ) -> str:
        name = paths.file_name(file_path)
        directory = file_path[:len(file_path) - len(name)]
        extension = paths.split_extension(name)[1]

        base_name = self.get_base_name(file_path)
        if culture.is_neutral:
            return f"{directory}{base_name}{extension}"
        return f"{directory}{base_name}.{culture}{extension}"
