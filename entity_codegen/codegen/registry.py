"""
Language registry for the interface generators.

Maps language names and aliases ("java", "scala", "sc") to generator classes
and builds configured generator instances for the CLI and the public API.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Type, Optional, Any, List, Tuple, Union

from ..logging_config import get_logger
from .core.generator import CodeGenerator
from .core.config import GeneratorConfig, load_config

logger = get_logger(__name__)


class RegistryError(Exception):
    """Exception raised for registry-related errors."""

    pass


@dataclass(frozen=True)
class RegisteredLanguage:
    """A generator class with the names it answers to."""

    name: str
    generator_class: Type[CodeGenerator]
    aliases: Tuple[str, ...] = ()


class GeneratorRegistry:
    """Lookup of generator classes by language name or alias."""

    def __init__(self):
        self._languages: Dict[str, RegisteredLanguage] = {}
        self._names: Dict[str, str] = {}  # name or alias -> primary name

    def register(
        self,
        language: str,
        generator_class: Type[CodeGenerator],
        aliases: Optional[List[str]] = None,
    ):
        """
        Register a generator for a language.

        Args:
            language: Primary language name (e.g., 'java', 'scala')
            generator_class: Generator class implementing CodeGenerator
            aliases: Alternative names for this language

        Raises:
            RegistryError: If the class is not a generator or a name is taken
        """
        if not (isinstance(generator_class, type) and issubclass(generator_class, CodeGenerator)):
            raise RegistryError("Generator class must inherit from CodeGenerator")

        language_key = language.lower()
        alias_keys = []
        for alias in aliases or []:
            alias_key = alias.lower()
            if alias_key != language_key and alias_key not in alias_keys:
                alias_keys.append(alias_key)

        for key in [language_key] + alias_keys:
            if key in self._names:
                raise RegistryError(
                    f"Name '{key}' is already registered for '{self._names[key]}'"
                )

        self._languages[language_key] = RegisteredLanguage(
            language_key, generator_class, tuple(alias_keys)
        )
        for key in [language_key] + alias_keys:
            self._names[key] = language_key

        logger.debug("Registered %s as %s", generator_class.__name__, language_key)

    def resolve_language(self, language: str) -> str:
        """
        Resolve a language name or alias to its primary name.

        Raises:
            RegistryError: If nothing is registered under that name
        """
        language_key = language.lower()
        if language_key not in self._names:
            raise RegistryError(
                f"No generator registered for language: {language}. "
                f"Available: {', '.join(self.list_languages())}"
            )
        return self._names[language_key]

    def get_generator_class(self, language: str) -> Type[CodeGenerator]:
        """Get the generator class registered for a language or alias."""
        return self._languages[self.resolve_language(language)].generator_class

    def create_generator(
        self,
        language: str,
        config: Optional[Union[GeneratorConfig, Dict[str, Any], str, Path]] = None,
    ) -> CodeGenerator:
        """
        Create a configured generator instance.

        Args:
            language: Language name or alias
            config: Configuration as GeneratorConfig, dict, or config file path

        Returns:
            Configured generator instance

        Raises:
            RegistryError: If the language is unknown or the config cannot be loaded
        """
        language_key = self.resolve_language(language)
        generator_class = self._languages[language_key].generator_class

        try:
            if isinstance(config, GeneratorConfig):
                final_config = config
            elif isinstance(config, (str, Path)):
                final_config = load_config(language_key, config_file=config)
            elif isinstance(config, dict):
                final_config = load_config(language_key, custom_config=config)
            elif config is None:
                final_config = load_config(language_key)
            else:
                raise RegistryError(f"Invalid config type: {type(config)}")

            logger.debug("Creating %s generator", language_key)
            return generator_class(final_config)

        except RegistryError:
            raise
        except Exception as e:
            raise RegistryError(f"Failed to create {language_key} generator: {e}") from e

    def list_languages(self) -> List[str]:
        """Get sorted primary language names."""
        return sorted(self._languages)

    def is_supported(self, language: str) -> bool:
        """Check whether a language name or alias is registered."""
        return language.lower() in self._names

    def get_language_info(self, language: str) -> Dict[str, Any]:
        """
        Describe a registered language for listings.

        Args:
            language: Language name or alias

        Returns:
            Dict with name, class, file extension, surface syntax, aliases and module
        """
        entry = self._languages[self.resolve_language(language)]
        generator = entry.generator_class(load_config(entry.name))

        return {
            "name": generator.language_name,
            "class": entry.generator_class.__name__,
            "file_extension": generator.file_extension,
            "surface_syntax": generator.surface_syntax.value,
            "aliases": sorted(entry.aliases),
            "module": entry.generator_class.__module__,
        }


_global_registry: Optional[GeneratorRegistry] = None


def get_registry() -> GeneratorRegistry:
    """Get the global generator registry, initializing if needed."""
    global _global_registry
    if _global_registry is None:
        _global_registry = _create_default_registry()
    return _global_registry


def _create_default_registry() -> GeneratorRegistry:
    """Registry holding the built-in Java and Scala generators."""
    from .languages.java import JavaGenerator
    from .languages.scala import ScalaGenerator

    registry = GeneratorRegistry()
    registry.register("java", JavaGenerator)
    registry.register("scala", ScalaGenerator, aliases=["sc"])
    return registry


# Public API functions using the global registry


def get_generator(
    language: str,
    config: Optional[Union[GeneratorConfig, Dict[str, Any], str, Path]] = None,
) -> CodeGenerator:
    """
    Get generator instance from global registry.

    Args:
        language: Language name or alias
        config: Configuration

    Returns:
        Generator instance
    """
    return get_registry().create_generator(language, config)


def resolve_language(language: str) -> str:
    """Primary name for a language or alias in the global registry."""
    return get_registry().resolve_language(language)


def list_supported_languages() -> List[str]:
    """List all supported languages from global registry."""
    return get_registry().list_languages()


def is_language_supported(language: str) -> bool:
    """Check if language is supported by global registry."""
    return get_registry().is_supported(language)


def get_language_info(language: str) -> Dict[str, Any]:
    """Get information about a supported language."""
    return get_registry().get_language_info(language)


def list_all_language_info() -> Dict[str, Dict[str, Any]]:
    """Get information about all supported languages."""
    return {
        language: get_language_info(language) for language in list_supported_languages()
    }
