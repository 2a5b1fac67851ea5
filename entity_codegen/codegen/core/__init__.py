"""
Core code generation components.

Provides the entity model, the interface emitter and the base classes used
by all language generators.
"""

from .generator import CodeGenerator, GeneratorError, GenerationResult, generate_code
from .schema import (
    DataTypeReference,
    EmissionMode,
    EntityDefinition,
    EntityKind,
    MemberDefinition,
    SchemaError,
    SurfaceSyntax,
    load_entities,
    parse_type,
)
from .emitter import emit_interface
from .services import EmitterServices, no_footer
from .writer import CodeWriter
from .naming import NameSanitizer
from .config import GeneratorConfig, ConfigManager, ConfigError, load_config
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "GeneratorError",
    "GenerationResult",
    "generate_code",
    # Entity model
    "DataTypeReference",
    "EmissionMode",
    "EntityDefinition",
    "EntityKind",
    "MemberDefinition",
    "SchemaError",
    "SurfaceSyntax",
    "load_entities",
    "parse_type",
    # Emitter and its collaborators
    "emit_interface",
    "EmitterServices",
    "no_footer",
    "CodeWriter",
    # Naming utilities - language-agnostic
    "NameSanitizer",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system - language-agnostic
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
