"""Command-line interface for resx-naming."""

import logging
import sys
import argparse
from pathlib import Path

from .__version__ import __version__
from .core.project_file import ProjectFile
from .core.resource_paths import describe
from .core.scanner import ResourceFileScanner
from .errors import ResourceNamingError
from .reports.console_reporter import ConsoleReporter
from .reports.json_reporter import JSONReporter
from .utils.colors import Colors
from .utils.config import Config, ConfigValidationError, create_default_config, CONFIG_FILE_NAME
from .utils.logging import configure_logging

logger = logging.getLogger(__name__)


def load_and_validate_config(validate: bool = True, verbose: bool = False) -> Config:
    """
    Load configuration and optionally validate it.

    Args:
        validate: Whether to validate the config
        verbose: Whether to print warnings

    Returns:
        Loaded Config object

    Raises:
        ConfigValidationError: If validation fails with errors
    """
    config = Config.from_file()

    if validate:
        errors, warnings = config.validate()

        if verbose and warnings:
            for warning in warnings:
                logger.warning("Config warning: %s", warning)

        if errors:
            print(f"{Colors.error('Configuration errors:')}", file=sys.stderr)
            for error in errors:
                print(f"   - {error}", file=sys.stderr)
            raise ConfigValidationError(errors)

    return config


def cmd_init(args):
    """Initialize configuration file."""
    config_path = Path.cwd() / CONFIG_FILE_NAME

    if config_path.exists() and not args.force:
        print(f"{Colors.error('Config already exists:')} {config_path}")
        print("   Use --force to overwrite")
        return 1

    config = create_default_config(args.neutral or '')
    config.save(config_path)

    print(f"{Colors.success('Created:')} {config_path}")
    return 0


def cmd_inspect(args):
    """Print naming metadata of files."""
    config = load_and_validate_config(verbose=args.verbose)
    resource_paths = config.resource_paths()
    if args.neutral:
        resource_paths.neutral_resources_language = args.neutral

    infos = [describe(ProjectFile(path), resource_paths) for path in args.paths]

    if args.json:
        output = JSONReporter.write(JSONReporter.build_inspection(infos), Path(args.json))
        print(f"{Colors.success('JSON report:')} {output}")
    else:
        ConsoleReporter(use_colors=Colors.supported()).print_inspection(infos)

    return 1 if any(info.error for info in infos) else 0


def cmd_sibling(args):
    """Print the sibling resource file of a path for a culture."""
    config = load_and_validate_config(verbose=args.verbose)
    resource_paths = config.resource_paths()
    project_file = ProjectFile(args.path)
    culture = resource_paths.culture_helper.normalize(args.culture)

    try:
        sibling = resource_paths.get_language_file_name(
            project_file,
            culture,
            neutral_resources_language=args.neutral,
        )
    except (ResourceNamingError, ValueError) as e:
        print(f"{Colors.error('Error:')} {e}", file=sys.stderr)
        return 1

    print(sibling)
    return 0


def cmd_scan(args):
    """List resource sets below a directory."""
    config = load_and_validate_config(verbose=args.verbose)
    root = Path(args.directory)

    if not root.is_dir():
        print(f"{Colors.error('Directory not found:')} {root}", file=sys.stderr)
        return 1

    scanner = ResourceFileScanner(
        root,
        resource_paths=config.resource_paths(),
        exclude=config.scan.exclude,
    )
    resource_sets = scanner.scan()

    json_path = args.json
    if json_path is None and config.reports.format == 'json':
        json_path = config.reports.output

    if json_path:
        report = JSONReporter.build_scan(root, resource_sets, scanner.skipped)
        output = JSONReporter.write(report, Path(json_path))
        print(f"{Colors.success('JSON report:')} {output}")
    else:
        ConsoleReporter(use_colors=Colors.supported()).print_scan(resource_sets, scanner.skipped)

    return 0


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog='resx-naming',
        description='Culture and naming metadata for .resx and .resw resource files',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--verbose', '-v', action='store_true', help='Show debug output')
    parser.add_argument('--quiet', '-q', action='store_true', help='Only show errors')
    parser.add_argument('--log-file', metavar='PATH', help='Write a debug log to PATH')

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # Init command
    init_parser = subparsers.add_parser('init', help='Initialize configuration file')
    init_parser.add_argument('--neutral', metavar='CODE', help='Neutral resources language (e.g. en-US)')
    init_parser.add_argument('--force', action='store_true', help='Overwrite existing config')

    # Inspect command
    inspect_parser = subparsers.add_parser('inspect', help='Show naming metadata of resource files')
    inspect_parser.add_argument('paths', nargs='+', metavar='PATH', help='Resource file paths')
    inspect_parser.add_argument('--neutral', metavar='CODE', help='Neutral resources language for .resw files')
    inspect_parser.add_argument('--json', metavar='PATH', help='Output JSON report')

    # Sibling command
    sibling_parser = subparsers.add_parser('sibling', help='Print the file path of another culture')
    sibling_parser.add_argument('path', metavar='PATH', help='Resource file path')
    sibling_parser.add_argument('--culture', '-c', required=True,
                                help="Target culture ('' for the neutral file)")
    sibling_parser.add_argument('--neutral', metavar='CODE', help='Neutral resources language for .resw files')

    # Scan command
    scan_parser = subparsers.add_parser('scan', help='Find and group resource files below a directory')
    scan_parser.add_argument('directory', nargs='?', default='.', help='Directory to scan (default: .)')
    scan_parser.add_argument('--json', metavar='PATH', help='Output JSON report')

    args = parser.parse_args(argv)

    configure_logging(
        verbose=args.verbose,
        quiet=args.quiet,
        log_file=Path(args.log_file) if args.log_file else None,
    )

    try:
        if args.command == 'init':
            return cmd_init(args)
        elif args.command == 'inspect':
            return cmd_inspect(args)
        elif args.command == 'sibling':
            return cmd_sibling(args)
        elif args.command == 'scan':
            return cmd_scan(args)
        else:
            parser.print_help()
            return 0
    except ConfigValidationError:
        return 1


if __name__ == '__main__':
    sys.exit(main())
