"""
Service contracts consumed by the entity interface emitter.

The emitter decides what to print; everything it prints about names, types,
annotations and documentation comes from these injected collaborators.
"""

from dataclasses import dataclass
from typing import Callable, List, Protocol

from .schema import EntityDefinition, MemberDefinition
from .writer import CodeWriter


class TypeResolver(Protocol):
    """Maps a member's semantic type to a target type name."""

    def resolve(self, entity: EntityDefinition, member: MemberDefinition) -> str: ...


class NameResolver(Protocol):
    """Provides every identifier the emitter prints."""

    def package_name(self, entity: EntityDefinition) -> str: ...

    def interface_name(self, entity: EntityDefinition) -> str: ...

    def qualified_interface_name(self, entity: EntityDefinition) -> str: ...

    def builder_name(self, entity: EntityDefinition) -> str: ...

    def base_builder_name(self, entity: EntityDefinition) -> str: ...

    def supertypes(self, entity: EntityDefinition) -> List[str]: ...

    def setter_name(self, member: MemberDefinition) -> str: ...

    def getter_name(self, member: MemberDefinition) -> str: ...


class AnnotationPolicy(Protocol):
    """Decorative metadata lines placed at fixed points of the output."""

    def entity_annotations(
        self, entity: EntityDefinition, sink: CodeWriter
    ) -> List[str]: ...

    def member_annotations(
        self, entity: EntityDefinition, member: MemberDefinition, sink: CodeWriter
    ) -> List[str]: ...


class DocPolicy(Protocol):
    """Formats documentation comments into lines."""

    def entity_doc(self, entity: EntityDefinition) -> List[str]: ...

    def format(self, text: str) -> List[str]: ...

    def section(self, title: str) -> List[str]: ...


FooterHook = Callable[[EntityDefinition, CodeWriter], None]


def no_footer(entity: EntityDefinition, sink: CodeWriter) -> None:
    """Default footer hook: nothing between the last member and the brace."""
    return None


@dataclass(frozen=True)
class EmitterServices:
    """Bundle of collaborators handed to ``emit_interface``."""

    types: TypeResolver
    names: NameResolver
    annotations: AnnotationPolicy
    docs: DocPolicy
    footer: FooterHook = no_footer
