"""
Configuration management for code generation.

Handles loading and merging configuration from JSON files,
providing defaults and validation for generator settings.
"""

import json
from dataclasses import dataclass, field, fields, asdict
from pathlib import Path
from typing import Dict, Any, List, Optional, Union

from ...logging_config import get_logger
from .schema import EmissionMode, SurfaceSyntax

logger = get_logger(__name__)


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""
    pass


@dataclass
class GeneratorConfig:
    """Base configuration for code generators."""

    # Output settings
    output_dir: Optional[str] = None
    package_name: str = "org.example.generated"

    # Code style settings
    indent_size: int = 4
    use_tabs: bool = False
    line_ending: str = "\n"

    # Naming settings
    interface_prefix: str = "I"
    builder_name: str = "Builder"
    interface_implements: List[str] = field(default_factory=list)

    # Emission modes
    immutable_pojos: bool = False
    fluent_setters: bool = False

    # Annotations
    generated_annotation: bool = True
    generate_jpa_annotations: bool = False
    jpa_namespace: str = "jakarta.persistence"
    generate_validation_annotations: bool = False
    validation_namespace: str = "jakarta.validation.constraints"

    # Documentation
    add_comments: bool = True
    doc_width: int = 80

    # Type handling
    strict_types: bool = False
    type_overrides: Dict[str, str] = field(default_factory=dict)

    # Custom settings (language-specific)
    custom: Dict[str, Any] = field(default_factory=dict)

    def emission_mode(self, syntax: SurfaceSyntax) -> EmissionMode:
        """Build the explicit emission flags for one generation run."""
        return EmissionMode(
            immutable_pojos=self.immutable_pojos,
            fluent_setters=self.fluent_setters,
            surface_syntax=syntax,
        )


class ConfigManager:
    """Manages configuration loading and merging."""

    def __init__(self):
        """Initialize configuration manager."""
        self._configs: Dict[str, Dict[str, Any]] = {}
        self._load_defaults()

    def _load_defaults(self):
        """Load default configurations for supported languages."""
        self._configs["java"] = {
            "indent_size": 4,
            "generated_annotation": True,
            "add_comments": True,
        }

        self._configs["scala"] = {
            "indent_size": 2,
            "generated_annotation": True,
            "add_comments": True,
        }

    def get_config(self, language: Optional[str] = None,
                   custom_config: Optional[Dict[str, Any]] = None,
                   config_file: Optional[Union[str, Path]] = None) -> GeneratorConfig:
        """
        Get complete configuration for a language.

        Args:
            language: Target language name
            custom_config: Custom configuration overrides
            config_file: Path to JSON configuration file

        Returns:
            Merged configuration for the language
        """
        # Start with defaults
        base_config = dict(self._configs.get((language or "").lower(), {}))

        # Load from file if provided
        if config_file:
            file_config = self._load_config_file(config_file)
            base_config.update(file_config)

        # Apply custom overrides
        if custom_config:
            base_config.update(custom_config)

        return self._dict_to_config(base_config)

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from JSON file."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if not path.suffix.lower() == '.json':
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {str(e)}")
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {path}: {str(e)}")

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        logger.debug("Loaded configuration file %s", path)
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

        # Unknown keys end up in the custom dict
        if custom_args:
            existing_custom = dict(config_args.get('custom', {}))
            existing_custom.update(custom_args)
            config_args['custom'] = existing_custom

        return GeneratorConfig(**config_args)

    def save_config(self, config: GeneratorConfig, output_path: Union[str, Path]):
        """Save configuration to JSON file."""
        path = Path(output_path)

        config_dict = asdict(config)
        custom = config_dict.pop("custom")
        config_dict.update(custom)

        try:
            with open(path, 'w', encoding='utf-8') as f:
                json.dump(config_dict, f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise ConfigError(f"Failed to save configuration to {path}: {str(e)}")

    def list_languages(self) -> list[str]:
        """Get list of languages with default settings."""
        return list(self._configs.keys())

    def validate_config(self, config: GeneratorConfig) -> list[str]:
        """
        Validate configuration.

        Returns:
            List of validation warnings
        """
        warnings = []

        parts = config.package_name.split(".") if config.package_name else []
        if not parts or not all(part.isidentifier() for part in parts):
            warnings.append(f"Invalid package name: {config.package_name!r}")

        if config.interface_prefix and not config.interface_prefix.isidentifier():
            warnings.append(f"Invalid interface prefix: {config.interface_prefix!r}")

        if not config.builder_name.isidentifier():
            warnings.append(f"Invalid builder name: {config.builder_name!r}")

        if config.indent_size < 1:
            warnings.append(f"Invalid indent_size: {config.indent_size}")

        if config.doc_width < 20:
            warnings.append(f"doc_width too small: {config.doc_width}")

        if config.immutable_pojos and config.fluent_setters:
            warnings.append("fluent_setters has no effect when immutable_pojos is set")

        return warnings


# Global configuration manager instance
_config_manager = None


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(language: Optional[str] = None,
                custom_config: Optional[Dict[str, Any]] = None,
                config_file: Optional[Union[str, Path]] = None) -> GeneratorConfig:
    """
    Convenience function to load configuration.

    Args:
        language: Target language name
        custom_config: Custom configuration overrides
        config_file: Path to JSON configuration file

    Returns:
        Merged configuration for the language
    """
    manager = get_config_manager()
    return manager.get_config(language, custom_config, config_file)


# Example configuration file for reference
EXAMPLE_CONFIG = {
    "package_name": "com.example.db",
    "immutable_pojos": False,
    "fluent_setters": True,
    "generate_jpa_annotations": True,
    "generate_validation_annotations": True,
    "type_overrides": {"citext": "java.lang.String"},
}
