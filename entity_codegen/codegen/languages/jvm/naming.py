"""
JVM naming utilities.

Derives packages, interface names and accessor names for generated
interfaces, shared by the Java and Scala generators.
"""

from typing import Iterable, List

from ...core.config import GeneratorConfig
from ...core.naming import NameSanitizer
from ...core.schema import EntityDefinition, MemberDefinition

# Accessors that would clash with final methods of java.lang.Object
OBJECT_METHOD_NAMES = {"getClass"}

# Java and Scala keywords that cannot be used as package components
JVM_KEYWORDS = {
    "abstract", "assert", "boolean", "break", "byte", "case", "catch", "char",
    "class", "const", "continue", "def", "default", "do", "double", "else",
    "enum", "extends", "false", "final", "finally", "float", "for", "forSome",
    "goto", "if", "implements", "implicit", "import", "instanceof", "int",
    "interface", "lazy", "long", "match", "native", "new", "null", "object",
    "override", "package", "private", "protected", "public", "return", "sealed",
    "short", "static", "strictfp", "super", "switch", "synchronized", "this",
    "throw", "throws", "trait", "transient", "true", "try", "type", "val",
    "var", "void", "volatile", "while", "with", "yield",
}

TABLES_SUBPACKAGE = "tables"
UDT_SUBPACKAGE = "udt"
INTERFACES_SUBPACKAGE = "interfaces"


def create_jvm_sanitizer() -> NameSanitizer:
    """Create a name sanitizer configured for JVM accessor names."""
    return NameSanitizer(reserved_words=JVM_KEYWORDS, builtin_types=OBJECT_METHOD_NAMES)


class JvmNameResolver:
    """
    NameResolver for JVM interfaces: ``<package>.tables.interfaces.IPerson``.

    When the entities of a run span more than one schema, each schema gets its
    own package component (``<package>.hr.tables.interfaces``).
    """

    def __init__(self, config: GeneratorConfig, entities: Iterable[EntityDefinition] = ()):
        self.config = config
        self.sanitizer = create_jvm_sanitizer()
        self.schema_packages = len({entity.schema for entity in entities}) > 1

    def class_name(self, entity: EntityDefinition) -> str:
        return self.sanitizer.sanitize_name(entity.name)

    def package_name(self, entity: EntityDefinition) -> str:
        parts = [self.config.package_name]
        if self.schema_packages and entity.schema:
            parts.append(self.sanitizer.package_segment(entity.schema))
        parts.append(TABLES_SUBPACKAGE if entity.is_table else UDT_SUBPACKAGE)
        parts.append(INTERFACES_SUBPACKAGE)
        return ".".join(parts)

    def interface_name(self, entity: EntityDefinition) -> str:
        return f"{self.config.interface_prefix}{self.class_name(entity)}"

    def qualified_interface_name(self, entity: EntityDefinition) -> str:
        return f"{self.package_name(entity)}.{self.interface_name(entity)}"

    def builder_name(self, entity: EntityDefinition) -> str:
        return self.config.builder_name

    def base_builder_name(self, entity: EntityDefinition) -> str:
        return f"{self.interface_name(entity)}_Builder"

    def supertypes(self, entity: EntityDefinition) -> List[str]:
        """Entity-declared supertypes first, then configured ones, without repeats."""
        result = []
        for name in list(entity.supertypes) + list(self.config.interface_implements):
            if name not in result:
                result.append(name)
        return result

    def setter_name(self, member: MemberDefinition) -> str:
        return self._accessor("set", member)

    def getter_name(self, member: MemberDefinition) -> str:
        return self._accessor("get", member)

    def _accessor(self, prefix: str, member: MemberDefinition) -> str:
        base = self.sanitizer.sanitize_name(member.name)
        return self.sanitizer.resolve_reserved(f"{prefix}{base}")
