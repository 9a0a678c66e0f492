"""Core modules for resource file naming."""

from .culture import CultureHelper, CultureKey, is_valid_culture_name
from .project_file import ProjectFile
from .resource_paths import ResourcePaths, ResourceFileInfo, describe
from .scanner import ResourceFileScanner, ResourceSet

__all__ = [
    'CultureHelper',
    'CultureKey',
    'is_valid_culture_name',
    'ProjectFile',
    'ResourcePaths',
    'ResourceFileInfo',
    'describe',
    'ResourceFileScanner',
    'ResourceSet',
]
