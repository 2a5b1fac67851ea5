"""
Entity interface code generation module.

Generates Java interfaces and Scala traits from table and UDT definitions.
"""

from typing import Any, Dict, Optional

from .registry import GeneratorRegistry, get_generator, list_supported_languages
from .core.generator import CodeGenerator, GenerationResult, generate_code
from .core.schema import (
    EntityDefinition,
    MemberDefinition,
    DataTypeReference,
    SchemaError,
    load_entities,
)
from .core.config import GeneratorConfig, ConfigManager, load_config


# Convenience functions
def generate_from_document(
    document: Dict[str, Any], language: str = "java", config: Optional[Any] = None
) -> GenerationResult:
    """
    Generate interfaces from an entity document.

    Args:
        document: Parsed entity document (``{"schema": ..., "entities": [...]}``)
        language: Target language name or alias
        config: Generator configuration as GeneratorConfig, dict or file path

    Returns:
        GenerationResult with one generated file per entity
    """
    try:
        entities = load_entities(document)
    except SchemaError as e:
        return GenerationResult.error(f"Invalid entity document: {e}", exception=e)

    generator = get_generator(language, config)
    return generate_code(generator, entities)


def quick_generate(document: Dict[str, Any], language: str = "java", **options) -> str:
    """
    Quick code generation from an entity document.

    Args:
        document: Parsed entity document
        language: Target language
        **options: Generator options

    Returns:
        All generated sources joined into one string
    """
    result = generate_from_document(document, language, options)

    if result.success:
        return result.code
    else:
        raise RuntimeError(f"Code generation failed: {result.error_message}")


# Export main interfaces
__all__ = [
    "GeneratorRegistry",
    "CodeGenerator",
    "GenerationResult",
    "EntityDefinition",
    "MemberDefinition",
    "DataTypeReference",
    "GeneratorConfig",
    "ConfigManager",
    "load_config",
    "load_entities",
    "generate_code",
    "generate_from_document",
    "quick_generate",
    "get_generator",
    "list_supported_languages",
]
