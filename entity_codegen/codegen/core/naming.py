"""
Naming utilities for safe code generation.

Turns schema identifiers into type, accessor and package names and keeps
them clear of reserved words.
"""

import re
from typing import Set, Dict


class NameSanitizer:
    """Handles name sanitization and case conversion."""

    def __init__(self, reserved_words: Set[str] = None, builtin_types: Set[str] = None):
        """
        Initialize name sanitizer.

        Args:
            reserved_words: Set of language reserved words
            builtin_types: Set of builtin names that generated names must avoid
        """
        self.reserved_words = reserved_words or set()
        self.builtin_types = builtin_types or set()
        self._name_cache: Dict[str, str] = {}

    def sanitize_name(self, name: str, suffix_on_conflict: str = "_") -> str:
        """
        Sanitize a name into a PascalCase identifier.

        The same input always yields the same output, so setter and getter
        names derived from one member stay consistent.

        Args:
            name: Schema identifier to sanitize
            suffix_on_conflict: Suffix to add for reserved word conflicts

        Returns:
            Sanitized name safe for use
        """
        cache_key = f"{name}_{suffix_on_conflict}"
        if cache_key in self._name_cache:
            return self._name_cache[cache_key]

        cleaned = self._clean_basic(name)
        final_name = self.resolve_reserved(self._to_pascal_case(cleaned), suffix_on_conflict)

        self._name_cache[cache_key] = final_name
        return final_name

    def package_segment(self, name: str) -> str:
        """Lower-case package component for a schema name, e.g. ``public_``."""
        segment = self._to_snake_case(self._clean_basic(name))
        return self.resolve_reserved(segment)

    def _clean_basic(self, name: str) -> str:
        """Basic name cleanup - remove invalid characters."""
        # Remove non-alphanumeric chars except underscore and hyphen
        cleaned = re.sub(r'[^a-zA-Z0-9_-]', '_', name)

        # Remove leading/trailing underscores and hyphens
        cleaned = cleaned.strip('_-')

        # Ensure doesn't start with number
        if cleaned and cleaned[0].isdigit():
            cleaned = f"_{cleaned}"

        # Ensure not empty
        if not cleaned:
            cleaned = "field"

        return cleaned

    def _to_snake_case(self, name: str) -> str:
        """Convert to snake_case."""
        # Replace hyphens with underscores
        name = name.replace('-', '_')

        # Insert underscore before uppercase letters
        name = re.sub(r'([a-z0-9])([A-Z])', r'\1_\2', name)

        # Convert to lowercase and clean up multiple underscores
        name = name.lower()
        name = re.sub(r'_+', '_', name)

        # Keep a leading underscore added for names starting with a digit
        if name.startswith('_') and name[1:2].isdigit():
            return f"_{name.strip('_')}"
        return name.strip('_')

    def _to_pascal_case(self, name: str) -> str:
        """Convert to PascalCase."""
        snake = self._to_snake_case(name)
        parts = snake.split('_')

        pascal = ''.join(part.capitalize() for part in parts if part)
        if snake.startswith('_'):
            return f"_{pascal}"
        return pascal

    def resolve_reserved(self, name: str, suffix: str = "_") -> str:
        """Append ``suffix`` when the name clashes with a reserved word or builtin."""
        if name in self.reserved_words or name in self.builtin_types:
            return f"{name}{suffix}"
        return name
