"""JSON report generator."""

import json
from datetime import datetime
from pathlib import Path
from typing import Iterable, List, Optional

from ..__version__ import __version__
from ..core.resource_paths import ResourceFileInfo
from ..core.scanner import ResourceSet


class JSONReporter:
    """Generate JSON reports for inspection and scan results."""

    @staticmethod
    def build_inspection(infos: Iterable[ResourceFileInfo]) -> dict:
        """Build the report structure for inspected files."""
        files = [info.to_dict() for info in infos]
        return {
            'metadata': JSONReporter._metadata('inspect'),
            'files': files,
            'summary': {
                'total': len(files),
                'resource_files': sum(1 for item in files if item['is_resource_file']),
                'errors': sum(1 for item in files if item['error']),
            },
        }

    @staticmethod
    def build_scan(
        root: Path,
        resource_sets: List[ResourceSet],
        skipped: Optional[list] = None
    ) -> dict:
        """Build the report structure for a directory scan."""
        return {
            'metadata': JSONReporter._metadata('scan'),
            'root': str(root),
            'resource_sets': [
                {
                    'base_directory': resource_set.base_directory,
                    'sub_directory': resource_set.sub_directory,
                    'base_name': resource_set.base_name,
                    'files': {
                        str(culture): resource_set.files[culture].relative_file_path
                        for culture in resource_set.cultures
                    },
                }
                for resource_set in resource_sets
            ],
            'skipped': [
                {'file': file_path, 'reason': reason}
                for file_path, reason in (skipped or [])
            ],
        }

    @staticmethod
    def write(report: dict, output_path: Path, pretty: bool = True) -> Path:
        """
        Write a report to disk.

        Args:
            report: Report dictionary
            output_path: Output file path
            pretty: Pretty print JSON

        Returns:
            Path to the written report
        """
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, 'w', encoding='utf-8') as f:
            if pretty:
                json.dump(report, f, indent=2, ensure_ascii=False)
            else:
                json.dump(report, f, ensure_ascii=False)

        return output_path

    @staticmethod
    def load(report_path: Path) -> dict:
        """Load a JSON report from file."""
        with open(report_path, 'r', encoding='utf-8') as f:
            return json.load(f)

    @staticmethod
    def _metadata(command: str) -> dict:
        return {
            'generated_at': datetime.now().isoformat(),
            'version': __version__,
            'command': command,
        }
