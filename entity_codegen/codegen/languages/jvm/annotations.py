"""
Annotation policy for generated JVM interfaces.

Produces the @Generated marker, JPA mapping annotations and Bean Validation
constraints. Annotation types are registered on the sink so they end up in
the import block.
"""

from typing import List

from ...core.config import GeneratorConfig
from ...core.schema import EntityDefinition, MemberDefinition, SurfaceSyntax
from ...core.writer import CodeWriter

GENERATED_ANNOTATION = "javax.annotation.processing.Generated"
GENERATOR_NAME = "entity-codegen"
GENERATED_COMMENT = "This interface is generated by entity-codegen"

# SQL types whose length is a size constraint
_SIZED_TYPES = {
    "char",
    "character",
    "varchar",
    "character varying",
    "nchar",
    "nvarchar",
    "binary",
    "varbinary",
}


def _quote(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


class JvmAnnotationPolicy:
    """AnnotationPolicy shared by the Java and Scala generators."""

    def __init__(self, config: GeneratorConfig, syntax: SurfaceSyntax):
        self.config = config
        self.syntax = syntax

    def entity_annotations(self, entity: EntityDefinition, sink: CodeWriter) -> List[str]:
        lines = []

        if self.config.generated_annotation:
            if self.syntax == SurfaceSyntax.TRAIT_BASED:
                value = f"Array({_quote(GENERATOR_NAME)})"
            else:
                value = _quote(GENERATOR_NAME)
            lines.append(
                f"@{sink.ref(GENERATED_ANNOTATION)}("
                f"value = {value}, comments = {_quote(GENERATED_COMMENT)})"
            )

        if self.config.generate_jpa_annotations and entity.is_table:
            lines.append(f"@{sink.ref(self._jpa('Entity'))}")

            arguments = [f"name = {_quote(entity.name)}"]
            if entity.schema:
                arguments.append(f"schema = {_quote(entity.schema)}")
            lines.append(f"@{sink.ref(self._jpa('Table'))}({', '.join(arguments)})")

        return lines

    def member_annotations(
        self, entity: EntityDefinition, member: MemberDefinition, sink: CodeWriter
    ) -> List[str]:
        lines = []

        # Only table columns carry JPA mappings, UDT attributes do not
        if self.config.generate_jpa_annotations and entity.is_table and member.is_column:
            lines.extend(self._column_annotations(member, sink))

        if self.config.generate_validation_annotations:
            lines.extend(self._validation_annotations(member, sink))

        return lines

    def _column_annotations(self, member: MemberDefinition, sink: CodeWriter) -> List[str]:
        lines = []
        data_type = member.type

        if member.primary_key:
            lines.append(f"@{sink.ref(self._jpa('Id'))}")

        arguments = [f"name = {_quote(member.name)}"]
        if not data_type.nullable:
            arguments.append("nullable = false")
        if data_type.length:
            arguments.append(f"length = {data_type.length}")
        if data_type.precision:
            arguments.append(f"precision = {data_type.precision}")
        if data_type.scale:
            arguments.append(f"scale = {data_type.scale}")

        lines.append(f"@{sink.ref(self._jpa('Column'))}({', '.join(arguments)})")
        return lines

    def _validation_annotations(self, member: MemberDefinition, sink: CodeWriter) -> List[str]:
        lines = []
        data_type = member.type

        if not data_type.nullable and not data_type.defaulted and not data_type.identity:
            lines.append(f"@{sink.ref(self._validation('NotNull'))}")

        if data_type.length and data_type.type_name in _SIZED_TYPES and not data_type.is_array:
            lines.append(f"@{sink.ref(self._validation('Size'))}(max = {data_type.length})")

        return lines

    def _jpa(self, name: str) -> str:
        return f"{self.config.jpa_namespace}.{name}"

    def _validation(self, name: str) -> str:
        return f"{self.config.validation_namespace}.{name}"
