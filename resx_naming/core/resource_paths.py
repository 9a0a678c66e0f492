"""
Resource file naming metadata.

Derives culture keys, base names, directory layout and sibling file names
from resource file paths. Two conventions are supported:

* ``.resx``: the culture is a file name qualifier (``Resources.fr.resx``)
* ``.resw``: the culture is a directory (``Strings/fr/Resources.resw``)

Usage:
    from resx_naming import ProjectFile, get_culture_key, get_language_file_name

    project_file = ProjectFile('Strings/en-US/View.resw')
    get_culture_key(project_file)                 # CultureKey('en-US')
    get_language_file_name(project_file, 'de')    # 'Strings/de/View.resw'
"""

import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional, Union

from . import paths
from .culture import CultureHelper, CultureKey, get_default_culture_helper
from .project_file import ProjectFile
from ..errors import ResourceNamingError
from ..conventions import (
    BaseConvention,
    ResxConvention,
    RESW,
    get_convention,
    is_supported_file_extension as is_supported_convention_extension,
)

logger = logging.getLogger(__name__)

DESIGNER_SUFFIX = '.Designer'
VISUAL_BASIC_EXTENSION = '.vb'
CSHARP_EXTENSION = '.cs'

CultureLike = Union[str, CultureKey, None]


class ResourcePaths:
    """
    Resource path operations bound to a culture helper.

    All operations are pure functions of the file path and extension of a
    project file; nothing touches the file system.
    """

    def __init__(
        self,
        culture_helper: Optional[CultureHelper] = None,
        neutral_resources_language: Optional[str] = None
    ):
        """
        Initialize resource path operations.

        Args:
            culture_helper: Culture name predicate (default helper if omitted)
            neutral_resources_language: Default culture that .resw files
                treat as neutral
        """
        self.culture_helper = culture_helper or get_default_culture_helper()
        self.neutral_resources_language = neutral_resources_language or None

    def _convention(self, extension: Optional[str]) -> BaseConvention:
        """Return the convention for an extension, raising for unsupported ones."""
        return get_convention(extension, self.culture_helper)

    def _layout_convention(self, extension: Optional[str]) -> BaseConvention:
        """Return the convention whose directory layout applies to an extension."""
        if extension and extension.lower() == RESW:
            return self._convention(extension)
        return ResxConvention(self.culture_helper)

    def _neutral(self, neutral_resources_language: Optional[str]) -> Optional[str]:
        return neutral_resources_language or self.neutral_resources_language

    @staticmethod
    def is_supported_file_extension(extension: Optional[str]) -> bool:
        """Check if the extension is .resx or .resw (case-insensitive)."""
        return is_supported_convention_extension(extension)

    def is_resource_file(self, file_path: str, extension: Optional[str] = None) -> bool:
        """
        Check if a path is a supported resource file.

        .resw files additionally need a culture directory in their path.

        Args:
            file_path: File path
            extension: Extension to use instead of the one of the path

        Returns:
            True if the file is a resource file
        """
        if extension is None:
            extension = paths.extension_of(file_path)

        if not is_supported_convention_extension(extension):
            return False

        return self._convention(extension).is_resource_file(file_path)

    def is_project_resource_file(self, project_file: ProjectFile) -> bool:
        """Check if a project file is a supported resource file."""
        return self.is_resource_file(project_file.file_path, project_file.extension)

    def get_language_name(self, file_path: str) -> str:
        """
        Return the first directory segment of a path that is a culture name.

        Args:
            file_path: File path

        Returns:
            Culture name like 'en-US', or '' if there is none
        """
        return ResxConvention(self.culture_helper).get_language_name(file_path)

    def get_base_language_directory(self, project_file: ProjectFile) -> str:
        """
        Return the directory that contains the culture directories.

        Without a culture directory in the path, this is the parent of the
        file's directory for .resw files and the file's directory otherwise.

        Raises:
            DirectoryNotFoundError: If no directory can be determined
        """
        convention = self._layout_convention(project_file.extension)
        return convention.get_base_language_directory(project_file.file_path)

    def get_base_directory(self, project_file: ProjectFile) -> str:
        """
        Return the base directory of a resource file.

        Raises:
            DirectoryNotFoundError: If no directory can be determined
        """
        return self.get_base_language_directory(project_file)

    def get_sub_directory(self, project_file: ProjectFile) -> str:
        """
        Return the sub directory below the culture directory.

        Example: D:/project/Strings/en-US/sub/View.resw -> sub

        Returns '' for .resx files without a culture directory.

        Raises:
            InvalidResourceFileError: If a .resw path has no culture directory
        """
        convention = self._layout_convention(project_file.extension)
        return convention.get_sub_directory(project_file.file_path)

    def get_culture_key(
        self,
        project_file: ProjectFile,
        neutral_resources_language: Optional[str] = None
    ) -> CultureKey:
        """
        Return the culture of a resource file.

        Args:
            project_file: Resource file
            neutral_resources_language: Culture of .resw files that is
                reported as neutral (overrides the instance default)

        Returns:
            Culture key; neutral for .resx files without a culture qualifier

        Raises:
            InvalidResourceFileError: If a .resw path has no culture directory
            UnsupportedFileFormatError: If the extension is not supported
        """
        convention = self._convention(project_file.extension)
        culture_key = convention.get_culture_key(
            project_file.file_path,
            self._neutral(neutral_resources_language),
        )
        logger.debug("Culture of %s: %r", project_file.file_path, str(culture_key))
        return culture_key

    def get_base_name(self, project_file: ProjectFile) -> str:
        """
        Return the file name without extension and culture qualifier.

        Examples:
            View.fr.resx   -> View
            View.resx      -> View
            en/View.resw   -> View
            Form.Designer.cs -> Form.Designer
        """
        if is_supported_convention_extension(project_file.extension):
            return self._convention(project_file.extension).get_base_name(project_file.file_path)
        return paths.file_name_without_extension(project_file.file_path)

    def get_language_file_name(
        self,
        project_file: ProjectFile,
        culture: CultureLike,
        neutral_resources_language: Optional[str] = None
    ) -> str:
        """
        Return the path of the sibling resource file for a culture.

        Examples:
            View.resx,             fr -> View.fr.resx
            View.de.resx,          fr -> View.fr.resx
            Strings/en/a/View.resw, fr -> Strings/fr/a/View.resw

        Args:
            project_file: Resource file
            culture: Target culture name or key ('' / None for neutral)
            neutral_resources_language: Culture used for a neutral .resw target

        Returns:
            Sibling file path

        Raises:
            InvalidResourceFileError: If a .resw path has no culture directory
            UnsupportedFileFormatError: If the extension is not supported
        """
        convention = self._convention(project_file.extension)
        return convention.get_language_file_name(
            project_file.file_path,
            CultureKey.parse(culture),
            self._neutral(neutral_resources_language),
        )

    def is_designer_file(self, project_file: ProjectFile) -> bool:
        """Check if a file is generated by a designer (base name ends with .Designer)."""
        return self.get_base_name(project_file).lower().endswith(DESIGNER_SUFFIX.lower())

    @staticmethod
    def is_visual_basic_file(project_file: ProjectFile) -> bool:
        return paths.extension_of(project_file.file_path).lower() == VISUAL_BASIC_EXTENSION

    @staticmethod
    def is_csharp_file(project_file: ProjectFile) -> bool:
        return paths.extension_of(project_file.file_path).lower() == CSHARP_EXTENSION

    def is_source_file(self, project_file: ProjectFile) -> bool:
        """Check if a file is C# or Visual Basic source code."""
        return self.is_csharp_file(project_file) or self.is_visual_basic_file(project_file)


_default_paths = ResourcePaths()


def get_default_resource_paths() -> ResourcePaths:
    """Return the resource path operations bound to the default culture helper."""
    return _default_paths


def is_supported_file_extension(extension: Optional[str]) -> bool:
    return ResourcePaths.is_supported_file_extension(extension)


def is_resource_file(
    file: Union[str, ProjectFile],
    extension: Optional[str] = None
) -> bool:
    """Check if a path or project file is a supported resource file."""
    if isinstance(file, ProjectFile):
        return _default_paths.is_project_resource_file(file)
    return _default_paths.is_resource_file(file, extension)


def get_language_name(file_path: str) -> str:
    return _default_paths.get_language_name(file_path)


def get_base_language_directory(project_file: ProjectFile) -> str:
    return _default_paths.get_base_language_directory(project_file)


def get_base_directory(project_file: ProjectFile) -> str:
    return _default_paths.get_base_directory(project_file)


def get_sub_directory(project_file: ProjectFile) -> str:
    return _default_paths.get_sub_directory(project_file)


def get_culture_key(
    project_file: ProjectFile,
    neutral_resources_language: Optional[str] = None
) -> CultureKey:
    return _default_paths.get_culture_key(project_file, neutral_resources_language)


def get_base_name(project_file: ProjectFile) -> str:
    return _default_paths.get_base_name(project_file)


def get_language_file_name(
    project_file: ProjectFile,
    culture: CultureLike,
    neutral_resources_language: Optional[str] = None
) -> str:
    return _default_paths.get_language_file_name(project_file, culture, neutral_resources_language)


def is_designer_file(project_file: ProjectFile) -> bool:
    return _default_paths.is_designer_file(project_file)


def is_visual_basic_file(project_file: ProjectFile) -> bool:
    return ResourcePaths.is_visual_basic_file(project_file)


def is_csharp_file(project_file: ProjectFile) -> bool:
    return ResourcePaths.is_csharp_file(project_file)


def is_source_file(project_file: ProjectFile) -> bool:
    return _default_paths.is_source_file(project_file)


@dataclass
class ResourceFileInfo:
    """Naming metadata of a single file."""
    file_path: str
    extension: str
    is_resource_file: bool
    culture: Optional[str] = None
    base_name: str = ''
    base_directory: str = ''
    sub_directory: str = ''
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def describe(
    project_file: ProjectFile,
    resource_paths: Optional[ResourcePaths] = None
) -> ResourceFileInfo:
    """
    Collect the naming metadata of a file.

    Errors are recorded in the result instead of being raised, so that a
    batch of paths can be reported in one go.

    Args:
        project_file: File to describe
        resource_paths: Resource path operations (default helper if omitted)

    Returns:
        ResourceFileInfo
    """
    resource_paths = resource_paths or _default_paths
    info = ResourceFileInfo(
        file_path=project_file.file_path,
        extension=project_file.extension,
        is_resource_file=resource_paths.is_project_resource_file(project_file),
        base_name=resource_paths.get_base_name(project_file),
    )

    try:
        info.culture = str(resource_paths.get_culture_key(project_file))
        info.base_directory = resource_paths.get_base_directory(project_file)
        if project_file.extension.lower() == RESW:
            info.sub_directory = resource_paths.get_sub_directory(project_file)
    except ResourceNamingError as e:
        info.error = str(e)

    return info
