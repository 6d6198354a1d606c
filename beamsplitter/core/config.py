"""
Configuration management for binding generation.

Handles loading and merging configuration from JSON files,
providing per-target defaults and validation for generator settings.
"""

import json
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ..logging_config import get_logger
from .errors import GeneratorError
from .naming import DEFAULT_ROOT_IDENTIFIER
from .patcher import DEFAULT_MARKER

logger = get_logger(__name__)


class ConfigError(GeneratorError):
    """Exception raised for configuration-related errors."""

    pass


@dataclass
class GeneratorConfig:
    """Base configuration for binding generators."""

    # Naming settings
    namespace: str = ""
    root_identifier: str = DEFAULT_ROOT_IDENTIFIER

    # Output settings
    output_dir: str = "."
    marker: str = DEFAULT_MARKER

    # Native glue settings (javascript)
    includes: List[str] = field(default_factory=list)
    native_namespace: str = ""

    # Declaration file (typescript)
    declaration_file: str = "filament.d.ts"

    # Managed class (java); empty means one class per outermost scope
    java_class: str = ""

    # Custom settings (target-specific)
    custom: Dict[str, Any] = field(default_factory=dict)

    @property
    def output_path(self) -> Path:
        return Path(self.output_dir)


class ConfigManager:
    """Manages configuration loading and merging."""

    def __init__(self):
        """Initialize configuration manager."""
        self._configs: Dict[str, Dict[str, Any]] = {}
        self._load_defaults()

    def _load_defaults(self):
        """Load default configurations for supported targets."""
        self._configs["javascript"] = {
            "includes": [],
            "native_namespace": "filament",
        }

        self._configs["typescript"] = {
            "declaration_file": "filament.d.ts",
        }

        self._configs["java"] = {
            "java_class": "",
        }

    def get_config(
        self,
        target: Optional[str] = None,
        custom_config: Optional[Dict[str, Any]] = None,
        config_file: Optional[Union[str, Path]] = None,
    ) -> GeneratorConfig:
        """
        Get complete configuration for a target.

        Args:
            target: Target name
            custom_config: Custom configuration overrides
            config_file: Path to JSON configuration file

        Returns:
            Merged configuration for the target
        """
        # Start with defaults
        base_config = dict(self._configs.get(target or "", {}))

        # Load from file if provided
        if config_file:
            file_config = self._load_config_file(config_file)
            # A file may hold per-target sections next to shared keys
            sections = {k: file_config.pop(k) for k in list(file_config) if k in self._configs}
            base_config.update(file_config)
            if target in sections:
                base_config.update(sections[target])

        # Apply custom overrides
        if custom_config:
            base_config.update(custom_config)

        return self._dict_to_config(base_config)

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from JSON file."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if not path.suffix.lower() == ".json":
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {str(e)}")
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigError(f"Failed to load configuration file {path}: {str(e)}")

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        logger.debug("Loaded configuration from %s", path)
        return config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> GeneratorConfig:
        """Convert dictionary to GeneratorConfig instance."""
        known_fields = {f.name for f in fields(GeneratorConfig)}

        config_args = {}
        custom_args = {}

        for key, value in config_dict.items():
            if key in known_fields:
                config_args[key] = value
            else:
                custom_args[key] = value

        # Add custom fields to the custom dict
        if custom_args:
            existing_custom = dict(config_args.get("custom", {}))
            existing_custom.update(custom_args)
            config_args["custom"] = existing_custom

        return GeneratorConfig(**config_args)

    def save_config(self, config: GeneratorConfig, output_path: Union[str, Path]):
        """Save configuration to JSON file."""
        path = Path(output_path)

        config_dict = {
            f.name: getattr(config, f.name)
            for f in fields(GeneratorConfig)
            if f.name != "custom"
        }
        config_dict.update(config.custom)

        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(config_dict, f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise ConfigError(f"Failed to save configuration to {path}: {str(e)}")

    def list_targets(self) -> List[str]:
        """Get list of targets with default configurations."""
        return list(self._configs.keys())

    def validate_config(self, config: GeneratorConfig, target: str) -> List[str]:
        """
        Validate configuration for a target.

        Returns:
            List of validation warnings
        """
        warnings = []

        if config.namespace and not config.namespace.isidentifier():
            warnings.append(f"Invalid namespace identifier: {config.namespace}")

        if not config.root_identifier.isidentifier():
            warnings.append(f"Invalid root identifier: {config.root_identifier}")

        if not config.marker.strip():
            warnings.append("Marker text is blank")

        if target == "java" and config.java_class and not config.java_class.isidentifier():
            warnings.append(f"Invalid Java class name: {config.java_class}")

        if target == "typescript" and not config.declaration_file.endswith(".d.ts"):
            warnings.append(
                f"Declaration file should end with .d.ts: {config.declaration_file}"
            )

        return warnings


# Global configuration manager instance
_config_manager = None


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(
    target: Optional[str] = None,
    custom_config: Optional[Dict[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> GeneratorConfig:
    """
    Convenience function to load configuration.

    Args:
        target: Target name
        custom_config: Custom configuration overrides
        config_file: Path to JSON configuration file

    Returns:
        Merged configuration for the target
    """
    manager = get_config_manager()
    return manager.get_config(target, custom_config, config_file)
