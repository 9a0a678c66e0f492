"""Console report generator."""

from typing import Iterable, List

from ..core.resource_paths import ResourceFileInfo
from ..core.scanner import ResourceSet
from ..utils.colors import Colors

WIDTH = 70


class ConsoleReporter:
    """Print inspection and scan results to the terminal."""

    def __init__(self, use_colors: bool = True):
        self.use_colors = use_colors

    def _c(self, style, text: str) -> str:
        return style(text) if self.use_colors else text

    def print_inspection(self, infos: Iterable[ResourceFileInfo]):
        """
        Print naming metadata of files.

        Args:
            infos: Described files
        """
        for info in infos:
            print(self._c(Colors.bold, info.file_path))

            if not info.is_resource_file:
                print(f"   {self._c(Colors.warning, 'not a resource file')}")

            rows = [
                ('culture', info.culture if info.culture else '(neutral)'),
                ('base name', info.base_name),
                ('base directory', info.base_directory or '.'),
            ]
            if info.sub_directory:
                rows.append(('sub directory', info.sub_directory))

            if info.error:
                rows = [('base name', info.base_name)]
                print(f"   {self._c(Colors.error, info.error)}")

            for label, value in rows:
                print(f"   {label:<15} {value}")
            print()

    def print_scan(self, resource_sets: List[ResourceSet], skipped: list = None):
        """
        Print resource sets found by a scan.

        Args:
            resource_sets: Grouped resource files
            skipped: (file path, reason) tuples of files that were skipped
        """
        print("\n" + "=" * WIDTH)
        print(self._c(Colors.bold, 'RESOURCE FILES'))
        print("=" * WIDTH)

        if not resource_sets:
            print("No resource files found")

        for resource_set in resource_sets:
            title = resource_set.base_name
            if resource_set.sub_directory:
                title = f"{resource_set.sub_directory}/{title}"
            print(f"\n{self._c(Colors.bold, title)}  {self._c(Colors.dim, resource_set.base_directory or '.')}")

            if not resource_set.has_neutral:
                print(f"   {self._c(Colors.warning, 'no neutral file')}")

            for culture in resource_set.cultures:
                label = str(culture) or '(neutral)'
                print(f"   {label:<15} {resource_set.files[culture].relative_file_path}")

        if skipped:
            print(f"\n{self._c(Colors.warning, f'Skipped {len(skipped)} files:')}")
            for file_path, reason in skipped:
                print(f"   {file_path}: {reason}")

        total_files = sum(len(resource_set.files) for resource_set in resource_sets)
        print("-" * WIDTH)
        print(f"{len(resource_sets)} resources, {total_files} files")
