"""Project file record."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from . import paths


@dataclass(frozen=True)
class ProjectFile:
    """
    A file that belongs to a project.

    Attributes:
        file_path: Absolute or relative path of the file
        extension: File suffix including the dot (derived from the path if omitted)
        project_name: Name of the owning project, if known
        root_directory: Directory the relative file path is computed against
    """
    file_path: str
    extension: str = field(default='')
    project_name: str = ''
    root_directory: Optional[str] = None

    def __post_init__(self):
        if isinstance(self.file_path, os.PathLike):
            object.__setattr__(self, 'file_path', os.fspath(self.file_path))
        if not self.extension:
            object.__setattr__(self, 'extension', paths.extension_of(self.file_path))

    @classmethod
    def from_path(
        cls,
        file_path: Union[str, Path],
        root_directory: Optional[Union[str, Path]] = None,
        project_name: str = ''
    ) -> 'ProjectFile':
        """
        Create a project file from a path.

        Args:
            file_path: Path of the file
            root_directory: Optional root for the relative file path
            project_name: Optional project name

        Returns:
            ProjectFile instance
        """
        return cls(
            file_path=os.fspath(file_path),
            project_name=project_name,
            root_directory=os.fspath(root_directory) if root_directory is not None else None,
        )

    @property
    def relative_file_path(self) -> str:
        """Path relative to the root directory, or the file path itself."""
        if not self.root_directory:
            return self.file_path

        root = paths.trim_separators(self.root_directory)
        if not self.file_path.lower().startswith(root.lower()):
            return self.file_path

        rest = self.file_path[len(root):]
        if rest.startswith(paths.SEPARATORS) or root.endswith(paths.SEPARATORS):
            return paths.trim_separators(rest, leading=True)
        return self.file_path
