"""Tests for resource file discovery and grouping."""

import pytest
from pathlib import Path

from resx_naming.core.culture import CultureHelper, CultureKey
from resx_naming.core.project_file import ProjectFile
from resx_naming.core.resource_paths import ResourcePaths
from resx_naming.core.scanner import ResourceFileScanner, ResourceSet


def create_project(root: Path):
    """Create a project tree with .resx and .resw files."""
    files = [
        'Strings/en-US/View.resw',
        'Strings/de-DE/View.resw',
        'Strings/en-US/Settings/Page.resw',
        'Strings/Orphan.resw',
        'Properties/Resources.resx',
        'Properties/Resources.fr.resx',
        'Properties/Resources.Designer.cs',
        'Forms/Form1.Designer.resx',
        'bin/Debug/Resources.resx',
        'obj/Release/Strings/en-US/View.resw',
    ]
    for relative in files:
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text('<root />', encoding='utf-8')
    return root


class TestFindResourceFiles:
    """Test cases for ResourceFileScanner.find_resource_files()."""

    def test_finds_resource_files(self, tmp_path):
        create_project(tmp_path)
        scanner = ResourceFileScanner(tmp_path)

        found = sorted(pf.relative_file_path for pf in scanner.find_resource_files())

        assert found == [
            'Properties/Resources.fr.resx',
            'Properties/Resources.resx',
            'Strings/de-DE/View.resw',
            'Strings/en-US/Settings/Page.resw',
            'Strings/en-US/View.resw',
        ]

    def test_skips_excluded_directories(self, tmp_path):
        create_project(tmp_path)
        found = ResourceFileScanner(tmp_path).find_resource_files()

        assert not any('bin' in pf.relative_file_path.split('/') for pf in found)
        assert not any('obj' in pf.relative_file_path.split('/') for pf in found)

    def test_custom_exclude(self, tmp_path):
        create_project(tmp_path)
        scanner = ResourceFileScanner(tmp_path, exclude=['Properties/'])

        found = [pf.relative_file_path for pf in scanner.find_resource_files()]

        assert not any(path.startswith('Properties') for path in found)
        assert 'Strings/en-US/View.resw' in found

    def test_missing_directory(self, tmp_path):
        scanner = ResourceFileScanner(tmp_path / 'missing')
        assert scanner.find_resource_files() == []


class TestScan:
    """Test cases for ResourceFileScanner.scan()."""

    def test_groups_by_resource(self, tmp_path):
        create_project(tmp_path)
        sets = ResourceFileScanner(tmp_path).scan()

        assert [s.base_name for s in sets] == ['Resources', 'View', 'Page']

        resources, view, page = sets
        assert resources.base_directory == str(tmp_path / 'Properties')
        assert resources.cultures == [CultureKey.NEUTRAL, CultureKey('fr')]
        assert resources.has_neutral

        assert view.base_directory == str(tmp_path / 'Strings')
        assert view.sub_directory == ''
        assert view.cultures == [CultureKey('de-DE'), CultureKey('en-US')]
        assert not view.has_neutral

        assert page.sub_directory == 'Settings'
        assert page.cultures == [CultureKey('en-US')]

    def test_neutral_resources_language(self, tmp_path):
        create_project(tmp_path)
        resource_paths = ResourcePaths(neutral_resources_language='en-US')

        sets = ResourceFileScanner(tmp_path, resource_paths=resource_paths).scan()
        view = next(s for s in sets if s.base_name == 'View')

        assert view.has_neutral
        assert view.files[CultureKey.NEUTRAL].relative_file_path == 'Strings/en-US/View.resw'

    def test_custom_cultures(self, tmp_path):
        path = tmp_path / 'Strings' / 'tlh-x' / 'View.resw'
        path.parent.mkdir(parents=True)
        path.write_text('<root />', encoding='utf-8')

        assert ResourceFileScanner(tmp_path).scan() == []

        resource_paths = ResourcePaths(CultureHelper(additional_cultures=['tlh-x']))
        sets = ResourceFileScanner(tmp_path, resource_paths=resource_paths).scan()

        assert len(sets) == 1
        assert sets[0].cultures == [CultureKey('tlh-x')]

    def test_culture_named_directory_above_root(self, tmp_path):
        """Directories above the scan root never count as culture directories."""
        root = tmp_path / 'it' / 'App'
        create_project(root)

        sets = ResourceFileScanner(root).scan()
        view = next(s for s in sets if s.base_name == 'View')

        assert [s.base_name for s in sets] == ['Resources', 'View', 'Page']
        assert view.base_directory == str(root / 'Strings')
        assert view.sub_directory == ''
        assert view.cultures == [CultureKey('de-DE'), CultureKey('en-US')]

    def test_resx_grouped_by_own_directory(self, tmp_path):
        for relative in [
            'ts/ProjA/Resources.resx',
            'ts/ProjB/Resources.resx',
            'ts/ProjB/Resources.fr.resx',
        ]:
            path = tmp_path / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text('<root />', encoding='utf-8')

        scanner = ResourceFileScanner(tmp_path)
        sets = scanner.scan()

        assert [s.base_directory for s in sets] == [
            str(tmp_path / 'ts' / 'ProjA'),
            str(tmp_path / 'ts' / 'ProjB'),
        ]
        assert sets[0].cultures == [CultureKey.NEUTRAL]
        assert sets[1].cultures == [CultureKey.NEUTRAL, CultureKey('fr')]
        assert scanner.skipped == []


class TestGroup:
    """Test cases for ResourceFileScanner.group()."""

    def test_skips_files_without_metadata(self, tmp_path):
        scanner = ResourceFileScanner(tmp_path)
        sets = scanner.group([
            ProjectFile('view.resw'),
            ProjectFile('Strings/en/View.resw'),
        ])

        assert len(sets) == 1
        assert len(scanner.skipped) == 1
        assert scanner.skipped[0][0] == 'view.resw'

    def test_duplicate_culture_keeps_first(self, tmp_path):
        scanner = ResourceFileScanner(tmp_path)
        sets = scanner.group([
            ProjectFile('Strings/en-US/View.resw'),
            ProjectFile('Strings/en-us/View.resw'),
        ])

        assert len(sets) == 1
        assert sets[0].files[CultureKey('en-US')].file_path == 'Strings/en-US/View.resw'

    def test_resx_below_culture_directory_not_merged(self, tmp_path):
        scanner = ResourceFileScanner(tmp_path)
        sets = scanner.group([
            ProjectFile('de/A/Resources.resx'),
            ProjectFile('de/B/Resources.resx'),
        ])

        assert [s.base_directory for s in sets] == ['de/A', 'de/B']

    def test_metadata_relative_to_root_directory(self):
        scanner = ResourceFileScanner('/work/no/App')
        sets = scanner.group([
            ProjectFile('/work/no/App/Strings/en/View.resw', root_directory='/work/no/App'),
            ProjectFile('/work/no/App/Strings/fr/View.resw', root_directory='/work/no/App'),
        ])

        assert len(sets) == 1
        assert sets[0].key == ('/work/no/App/Strings', '', 'View')
        assert sets[0].cultures == [CultureKey('en'), CultureKey('fr')]


class TestResourceSet:
    """Test cases for ResourceSet."""

    def test_key(self):
        resource_set = ResourceSet('Strings', 'Settings', 'Page')
        assert resource_set.key == ('Strings', 'Settings', 'Page')

    def test_cultures_neutral_first(self):
        resource_set = ResourceSet('', '', 'Resources', files={
            CultureKey('fr'): ProjectFile('Resources.fr.resx'),
            CultureKey.NEUTRAL: ProjectFile('Resources.resx'),
            CultureKey('de'): ProjectFile('Resources.de.resx'),
        })

        assert resource_set.cultures == [CultureKey.NEUTRAL, CultureKey('de'), CultureKey('fr')]
