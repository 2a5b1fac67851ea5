"""
Base generator interface for all code generation targets.

Defines the contract that all language generators must implement.
"""

from abc import ABC, abstractmethod
from pathlib import PurePosixPath
from typing import Dict, List, Any, Optional, Union

from ...logging_config import get_logger
from .config import GeneratorConfig, load_config
from .emitter import emit_interface
from .schema import EntityDefinition, SurfaceSyntax, index_entities
from .services import EmitterServices
from .templates import TemplateEngine, create_template_engine
from .writer import CodeWriter

logger = get_logger(__name__)


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class CodeGenerator(ABC):
    """Abstract base class for all code generators."""

    def __init__(self, config: Optional[Union[GeneratorConfig, Dict[str, Any]]] = None):
        """Initialize generator with optional configuration."""
        if isinstance(config, GeneratorConfig):
            self.config = config
        else:
            self.config = load_config(self.language_name, custom_config=config)
        self._template_engine = None

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'java', 'scala')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.java')."""
        pass

    @property
    @abstractmethod
    def surface_syntax(self) -> SurfaceSyntax:
        """Return the textual dialect this generator renders."""
        pass

    @abstractmethod
    def build_services(self, entities: List[EntityDefinition]) -> EmitterServices:
        """
        Build the naming, typing, annotation and doc services for a run.

        Args:
            entities: Every entity of the run, for cross-entity references

        Returns:
            Services handed to the emitter
        """
        pass

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._template_engine = create_template_engine()
        return self._template_engine

    def new_writer(self) -> CodeWriter:
        """Create an empty sink configured with this generator's style."""
        return CodeWriter(
            syntax=self.surface_syntax,
            indent_size=self.config.indent_size,
            use_tabs=self.config.use_tabs,
            line_ending=self.config.line_ending,
        )

    def generate(self, entities: List[EntityDefinition]) -> Dict[str, str]:
        """
        Generate one source file per entity.

        Args:
            entities: Entities to generate interfaces for

        Returns:
            Mapping of relative file path to generated source

        Raises:
            GeneratorError: If two entities map to the same file
        """
        services = self.build_services(entities)
        files = {}
        owners = {}

        for entity in entities:
            path = self.file_path(entity, services)
            if path in owners:
                raise GeneratorError(
                    f"Entities {owners[path]} and {entity.qualified_name} "
                    f"both generate {path}"
                )
            owners[path] = entity.qualified_name
            files[path] = self.generate_single_entity(entity, services)
            logger.debug("Generated %s for %s", path, entity.qualified_name)

        return files

    def generate_single_entity(
        self, entity: EntityDefinition, services: Optional[EmitterServices] = None
    ) -> str:
        """
        Generate the interface source for a single entity.

        Args:
            entity: Entity to generate code for
            services: Services of the run (built for this entity alone if omitted)

        Returns:
            Generated source for this entity only
        """
        if services is None:
            services = self.build_services([entity])

        sink = self.new_writer()
        mode = self.config.emission_mode(self.surface_syntax)
        emit_interface(entity, mode, sink, services)
        return self.format_code(sink.getvalue())

    def file_path(self, entity: EntityDefinition, services: EmitterServices) -> str:
        """Relative path of the generated file, derived from its package."""
        package = services.names.package_name(entity)
        interface = services.names.interface_name(entity)
        return str(PurePosixPath(*package.split("."), interface + self.file_extension))

    def validate_entities(self, entities: List[EntityDefinition]) -> List[str]:
        """
        Validate entities for basic structural issues.

        Language generators should override this to add language-specific validation.

        Args:
            entities: Entities to validate

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []
        known = index_entities(entities)
        udt_names = {e.qualified_name.lower() for e in known.values() if not e.is_table}

        for entity in entities:
            if not entity.members:
                warnings.append(f"Entity '{entity.qualified_name}' has no members")

            for member in entity.members:
                if member.type.is_udt and member.type.udt_name not in udt_names:
                    warnings.append(
                        f"Member {member.qualified_name} references unknown UDT "
                        f"'{member.type.udt_name}'"
                    )

            if entity.is_table and len(entity.primary_key) > 1:
                warnings.append(
                    f"Table '{entity.qualified_name}' has a composite primary key"
                )

        return warnings

    def format_code(self, code: str) -> str:
        """
        Apply language-specific formatting to generated code.

        Args:
            code: Raw generated code

        Returns:
            Formatted code
        """
        # Basic cleanup - remove excessive blank lines
        line_ending = self.config.line_ending
        lines = code.split(line_ending)
        formatted_lines = []
        blank_count = 0

        for line in lines:
            stripped = line.rstrip()
            if not stripped:
                blank_count += 1
                if blank_count <= 1:
                    formatted_lines.append("")
            else:
                blank_count = 0
                formatted_lines.append(stripped)

        return line_ending.join(formatted_lines)


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self,
        files: Dict[str, str],
        warnings: List[str] = None,
        metadata: Dict[str, Any] = None,
    ):
        """
        Initialize generation result.

        Args:
            files: Generated sources keyed by relative path
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.files = files
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message = None
        self.exception = None

    @property
    def code(self) -> str:
        """All generated sources joined, in generation order."""
        return "\n".join(self.files.values())

    @classmethod
    def error(cls, message: str, exception: Exception = None) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(files={})
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def generate_code(
    generator: CodeGenerator, entities: List[EntityDefinition]
) -> GenerationResult:
    """
    Generate code using the specified generator with error handling.

    Args:
        generator: Code generator instance
        entities: Entities to generate code for

    Returns:
        GenerationResult with files, warnings, and metadata
    """
    try:
        warnings = generator.validate_entities(entities)

        files = generator.generate(entities)

        metadata = {
            "language": generator.language_name,
            "file_extension": generator.file_extension,
            "surface_syntax": generator.surface_syntax.value,
            "entity_count": len(entities),
            "member_count": sum(len(e.members) for e in entities),
            "immutable_pojos": generator.config.immutable_pojos,
            "fluent_setters": generator.config.fluent_setters,
        }

        logger.info(
            "Generated %d %s interfaces (%d warnings)",
            len(files),
            generator.language_name,
            len(warnings),
        )
        return GenerationResult(files, warnings, metadata)

    except Exception as e:
        logger.error("Code generation failed: %s", e)
        return GenerationResult.error(f"Code generation failed: {str(e)}", exception=e)
