"""Build configuration for IPP CLI.

Values come from three layers, lowest priority first: built-in defaults, the
``build`` section of ``ipp.yml`` in the base directory, and command-line
overrides.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from .assembly.constants import (
    CONFIG_FILENAME,
    DEFAULT_BASE_DIR,
    DEFAULT_FRAGMENTS,
    DEFAULT_OUTPUT,
    DEFAULT_PRIMARY,
    DEFAULT_SOURCE_DIR,
    HEADER_TOKEN,
)
from .assembly.models import Fragment
from .errors import ConfigError

_STRING_KEYS = ('source_dir', 'primary', 'output', 'header')


@dataclass
class BuildConfig:
    """Configuration for a single assembly run."""
    base_dir: str = DEFAULT_BASE_DIR
    source_dir: str = DEFAULT_SOURCE_DIR
    primary: str = DEFAULT_PRIMARY
    output: str = DEFAULT_OUTPUT
    header: str = HEADER_TOKEN
    fragments: List[Union[str, Dict[str, Any]]] = field(default_factory=lambda: list(DEFAULT_FRAGMENTS))
    dry_run: bool = False

    @property
    def base_path(self) -> Path:
        return Path(self.base_dir)

    @property
    def primary_path(self) -> Path:
        """Primary file, looked up under the source directory."""
        return self.base_path / self.source_dir / self.primary

    @property
    def output_path(self) -> Path:
        return self.base_path / self.output

    def fragment_specs(self) -> List[Fragment]:
        """Resolve configured fragment entries into ordered Fragment records.

        Returns:
            List[Fragment]: One record per entry, in configured order.
        Raises:
            ConfigError: If an entry is neither a name nor a mapping with a name.
        """
        specs = []
        for entry in self.fragments:
            if isinstance(entry, str):
                specs.append(Fragment(name=entry, path=self.base_path / self.source_dir / entry))
                continue

            if not isinstance(entry, dict) or not entry.get('name'):
                raise ConfigError(f"Invalid fragment entry: {entry!r} (expected a name or a mapping with 'name')")

            name = str(entry['name'])
            if entry.get('path'):
                path = self.base_path / str(entry['path'])
            else:
                path = self.base_path / self.source_dir / name
            marker = entry.get('marker')
            specs.append(Fragment(name=name, path=path, marker=str(marker) if marker else None))
        return specs

    @classmethod
    def load(cls, base_dir: str = DEFAULT_BASE_DIR, config_file: Optional[str] = None,
             **overrides) -> 'BuildConfig':
        """Create configuration from ipp.yml with command-line overrides.

        Args:
            base_dir: Directory the build runs in.
            config_file: Explicit config path; defaults to ``<base_dir>/ipp.yml``.
            **overrides: Values that override the config file (``None`` is ignored).

        Returns:
            BuildConfig: Configuration with file values and overrides applied.

        Raises:
            ConfigError: If the config file cannot be parsed or is malformed.
        """
        config = cls(base_dir=base_dir)

        path = Path(config_file) if config_file else Path(base_dir) / CONFIG_FILENAME
        if config_file and not path.exists():
            raise ConfigError(f"Config file not found: {path}")

        if path.exists():
            build_config = _read_build_section(path)
            for key in _STRING_KEYS:
                value = build_config.get(key)
                if value is None:
                    continue
                if not isinstance(value, str) or not value:
                    raise ConfigError(f"'{key}' in {path} must be a non-empty string, got {value!r}")
                setattr(config, key, value)
            if 'fragments' in build_config:
                fragments = build_config['fragments']
                if not isinstance(fragments, list):
                    raise ConfigError(f"'fragments' in {path} must be a list")
                config.fragments = fragments

        for key, value in overrides.items():
            if value is not None:
                setattr(config, key, value)

        return config


def _read_build_section(path: Path) -> Dict[str, Any]:
    """Return the ``build`` mapping from a YAML config file."""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a mapping")

    build_config = data.get('build', {}) or {}
    if not isinstance(build_config, dict):
        raise ConfigError(f"'build' section in {path} must be a mapping")
    return build_config
