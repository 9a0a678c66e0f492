"""
resx-naming
===========

Culture and naming metadata for .resx and .resw resource files.

Usage:
    from resx_naming import ProjectFile, get_culture_key, get_language_file_name

    project_file = ProjectFile('Properties/Resources.resx')
    get_culture_key(project_file)                # CultureKey.NEUTRAL
    get_language_file_name(project_file, 'fr')   # 'Properties/Resources.fr.resx'

CLI:
    resx-naming inspect Strings/en-US/View.resw
    resx-naming sibling Properties/Resources.resx --culture de
    resx-naming scan ./src
"""

from .__version__ import __version__, __author__, __description__

from .core.culture import CultureHelper, CultureKey, is_valid_culture_name
from .core.project_file import ProjectFile
from .core.resource_paths import (
    ResourcePaths,
    ResourceFileInfo,
    describe,
    is_supported_file_extension,
    is_resource_file,
    get_language_name,
    get_base_language_directory,
    get_base_directory,
    get_sub_directory,
    get_culture_key,
    get_base_name,
    get_language_file_name,
    is_designer_file,
    is_visual_basic_file,
    is_csharp_file,
    is_source_file,
)
from .core.scanner import ResourceFileScanner, ResourceSet
from .errors import (
    ResourceNamingError,
    InvalidResourceFileError,
    UnsupportedFileFormatError,
    DirectoryNotFoundError,
)

__all__ = [
    '__version__',
    '__author__',
    '__description__',
    'CultureHelper',
    'CultureKey',
    'is_valid_culture_name',
    'ProjectFile',
    'ResourcePaths',
    'ResourceFileInfo',
    'describe',
    'is_supported_file_extension',
    'is_resource_file',
    'get_language_name',
    'get_base_language_directory',
    'get_base_directory',
    'get_sub_directory',
    'get_culture_key',
    'get_base_name',
    'get_language_file_name',
    'is_designer_file',
    'is_visual_basic_file',
    'is_csharp_file',
    'is_source_file',
    'ResourceFileScanner',
    'ResourceSet',
    'ResourceNamingError',
    'InvalidResourceFileError',
    'UnsupportedFileFormatError',
    'DirectoryNotFoundError',
]
