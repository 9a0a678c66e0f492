"""Configuration management for resx-naming."""

import yaml
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from ..core.culture import CultureHelper
from ..core.resource_paths import ResourcePaths

CONFIG_FILE_NAME = '.resx-naming.yml'


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""

    def __init__(self, errors: List[str]):
        self.errors = errors
        super().__init__(f"Configuration validation failed: {'; '.join(errors)}")


class ConfigValidationWarning:
    """Represents a configuration warning (non-fatal)."""

    def __init__(self, message: str):
        self.message = message

    def __str__(self):
        return self.message


@dataclass
class CulturesConfig:
    """Culture configuration."""
    # Culture of .resw files that is reported as the neutral culture
    neutral_resources_language: str = ""
    # Custom culture names accepted in addition to the built-in ones
    additional: List[str] = field(default_factory=list)


@dataclass
class ScanConfig:
    """Directory scan configuration."""
    exclude: List[str] = field(default_factory=lambda: ['bin/', 'obj/', '.git/', '.vs/'])


@dataclass
class ReportsConfig:
    """Reports configuration."""
    format: str = "console"  # console | json
    output: str = "./resx_naming_report.json"


VALID_REPORT_FORMATS = ['console', 'json']


@dataclass
class Config:
    """Main configuration class."""
    cultures: CulturesConfig = field(default_factory=CulturesConfig)
    scan: ScanConfig = field(default_factory=ScanConfig)
    reports: ReportsConfig = field(default_factory=ReportsConfig)

    @classmethod
    def from_file(cls, config_path: Optional[Path] = None) -> 'Config':
        """
        Load configuration from a YAML file.

        Without a path, .resx-naming.yml in the current directory is used
        if present; otherwise the default configuration is returned.
        """
        if config_path is None:
            config_path = Path.cwd() / CONFIG_FILE_NAME

            if not config_path.exists():
                return cls()

        with open(config_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}

        return cls(
            cultures=CulturesConfig(**data.get('cultures', {})),
            scan=ScanConfig(**data.get('scan', {})),
            reports=ReportsConfig(**data.get('reports', {})),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return {
            'cultures': {
                'neutral_resources_language': self.cultures.neutral_resources_language,
                'additional': self.cultures.additional,
            },
            'scan': {
                'exclude': self.scan.exclude,
            },
            'reports': {
                'format': self.reports.format,
                'output': self.reports.output,
            },
        }

    def save(self, config_path: Optional[Path] = None):
        """Save configuration to a YAML file."""
        if config_path is None:
            config_path = Path.cwd() / CONFIG_FILE_NAME

        with open(config_path, 'w', encoding='utf-8') as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)

    def culture_helper(self) -> CultureHelper:
        """Create the culture helper described by this configuration."""
        return CultureHelper(additional_cultures=self.cultures.additional)

    def resource_paths(self) -> ResourcePaths:
        """Create resource path operations described by this configuration."""
        return ResourcePaths(
            culture_helper=self.culture_helper(),
            neutral_resources_language=self.cultures.neutral_resources_language or None,
        )

    def validate(self, raise_on_error: bool = False) -> Tuple[List[str], List[ConfigValidationWarning]]:
        """
        Validate configuration and return errors and warnings.

        Args:
            raise_on_error: If True, raise ConfigValidationError on validation errors

        Returns:
            Tuple of (errors, warnings) lists
        """
        errors = []
        warnings = []
        helper = self.culture_helper()

        for name in self.cultures.additional:
            if not isinstance(name, str) or not name.strip():
                errors.append(f"Invalid additional culture name: {name!r}")
            elif any(sep in name for sep in ('/', '\\', '.')):
                errors.append(
                    f"Additional culture name '{name}' must not contain '/', '\\' or '.'"
                )

        neutral = self.cultures.neutral_resources_language
        if neutral and not helper.is_valid_culture_name(neutral):
            errors.append(
                f"Invalid neutral resources language: '{neutral}'. "
                f"Use a culture name such as 'en' or 'en-US'"
            )

        if self.reports.format not in VALID_REPORT_FORMATS:
            errors.append(
                f"Unknown report format: '{self.reports.format}'. "
                f"Valid options: {', '.join(VALID_REPORT_FORMATS)}"
            )

        if not neutral:
            warnings.append(ConfigValidationWarning(
                "cultures.neutral_resources_language is not set; "
                ".resw files of every culture are reported with their culture"
            ))

        for pattern in self.scan.exclude:
            if not str(pattern).strip().strip('/\\'):
                warnings.append(ConfigValidationWarning(f"Empty scan exclude pattern: {pattern!r}"))

        if raise_on_error and errors:
            raise ConfigValidationError(errors)

        return errors, warnings


def create_default_config(neutral_resources_language: str = "") -> Config:
    """Create the default configuration."""
    config = Config()
    config.cultures.neutral_resources_language = neutral_resources_language
    return config
