"""Resource file discovery and grouping."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

from . import paths
from .culture import CultureKey
from .project_file import ProjectFile
from .resource_paths import ResourcePaths, get_default_resource_paths
from ..conventions import RESW
from ..errors import ResourceNamingError

logger = logging.getLogger(__name__)

DEFAULT_EXCLUDE_DIRS = {
    'bin', 'obj', '.git', '.vs', '.idea', 'node_modules', 'packages',
    'TestResults', 'AppPackages',
}


@dataclass
class ResourceSet:
    """
    All culture variants of one resource.

    Attributes:
        base_directory: Directory containing the culture directories (or files)
        sub_directory: Directory below the culture directory (.resw only)
        base_name: File name without culture qualifier and extension
        files: Culture key -> project file
    """
    base_directory: str
    sub_directory: str
    base_name: str
    files: Dict[CultureKey, ProjectFile] = field(default_factory=dict)

    @property
    def key(self) -> Tuple[str, str, str]:
        return self.base_directory, self.sub_directory, self.base_name

    @property
    def cultures(self) -> List[CultureKey]:
        """Cultures of the set, neutral first, then by name."""
        return sorted(self.files, key=lambda culture: (not culture.is_neutral, str(culture).lower()))

    @property
    def has_neutral(self) -> bool:
        return CultureKey.NEUTRAL in self.files


class ResourceFileScanner:
    """
    Finds resource files below a directory and groups them by resource.

    Files are grouped by (base directory, sub directory, base name), so
    'Strings/en/View.resw' and 'Strings/de/View.resw' end up in one set,
    as do 'Resources.resx' and 'Resources.fr.resx' in the same directory.
    """

    def __init__(
        self,
        root: Path,
        resource_paths: Optional[ResourcePaths] = None,
        exclude: Optional[Iterable[str]] = None
    ):
        """
        Initialize scanner.

        Args:
            root: Directory to scan
            resource_paths: Resource path operations (default helper if omitted)
            exclude: Extra directory names or 'name/' patterns to skip
        """
        self.root = Path(root)
        self.resource_paths = resource_paths or get_default_resource_paths()
        self.exclude_dirs = set(DEFAULT_EXCLUDE_DIRS)
        for pattern in exclude or []:
            name = pattern.strip().strip('/\\')
            if name:
                self.exclude_dirs.add(name)
        self.skipped: List[Tuple[str, str]] = []  # (file path, reason)

    def should_exclude_dir(self, name: str) -> bool:
        return name in self.exclude_dirs

    def find_resource_files(self) -> List[ProjectFile]:
        """
        Walk the root directory and collect resource files.

        Returns:
            Project files sorted by path
        """
        if not self.root.is_dir():
            logger.warning("Directory not found: %s", self.root)
            return []

        found = []
        for dirpath, dirnames, filenames in os.walk(self.root):
            # Prune excluded directories in place
            dirnames[:] = sorted(d for d in dirnames if not self.should_exclude_dir(d))

            for filename in sorted(filenames):
                file_path = os.path.join(dirpath, filename)
                project_file = ProjectFile.from_path(file_path, root_directory=self.root)
                if not self.resource_paths.is_resource_file(
                    project_file.relative_file_path, project_file.extension
                ):
                    continue

                if self.resource_paths.is_designer_file(project_file):
                    logger.debug("Skipping designer file: %s", file_path)
                    continue
                found.append(project_file)

        logger.info("Found %d resource files in %s", len(found), self.root)
        return found

    def group(self, project_files: Iterable[ProjectFile]) -> List[ResourceSet]:
        """
        Group project files into resource sets.

        Culture and layout are derived from the path below the scan root, so
        directories above the root never count as culture directories.
        Files whose metadata cannot be derived are recorded in ``skipped``.

        Args:
            project_files: Resource files

        Returns:
            Resource sets sorted by key
        """
        sets: Dict[Tuple[str, str, str], ResourceSet] = {}

        for project_file in project_files:
            relative_file = self._relative(project_file)
            try:
                base_directory = self._base_directory(project_file, relative_file)
                sub_directory = self._sub_directory(relative_file)
                base_name = self.resource_paths.get_base_name(relative_file)
                culture = self.resource_paths.get_culture_key(relative_file)
            except ResourceNamingError as e:
                logger.warning("Skipping %s: %s", project_file.file_path, e)
                self.skipped.append((project_file.file_path, str(e)))
                continue

            key = (base_directory, sub_directory, base_name)
            resource_set = sets.setdefault(key, ResourceSet(*key))

            if culture in resource_set.files:
                logger.warning(
                    "Duplicate culture '%s' for %s: %s",
                    culture, base_name, project_file.file_path
                )
                continue
            resource_set.files[culture] = project_file

        return [sets[key] for key in sorted(sets)]

    def scan(self) -> List[ResourceSet]:
        """Find and group all resource files below the root directory."""
        self.skipped = []
        return self.group(self.find_resource_files())

    @staticmethod
    def _relative(project_file: ProjectFile) -> ProjectFile:
        """Return the project file with its path relative to its root directory."""
        relative_path = project_file.relative_file_path
        if relative_path == project_file.file_path:
            return project_file
        return ProjectFile(
            relative_path,
            extension=project_file.extension,
            project_name=project_file.project_name,
        )

    def _base_directory(self, project_file: ProjectFile, relative_file: ProjectFile) -> str:
        # .resx variants sit side by side, whatever directories lie above them
        if project_file.extension.lower() != RESW:
            return paths.directory_name(project_file.file_path) or ''

        base_directory = self.resource_paths.get_base_directory(relative_file)
        if relative_file is project_file:
            return base_directory

        root = paths.trim_separators(project_file.root_directory)
        return paths.join(paths.separator_for(project_file.file_path), root, base_directory)

    def _sub_directory(self, relative_file: ProjectFile) -> str:
        if relative_file.extension.lower() != RESW:
            return ''
        return self.resource_paths.get_sub_directory(relative_file)
