"""
Shared generator implementation for JVM interface targets.

Wires the JVM naming, type, annotation and documentation services into the
emitter. Java and Scala generators only differ in surface syntax.
"""

from typing import Dict, List

from ...core.config import get_config_manager
from ...core.generator import CodeGenerator
from ...core.schema import EntityDefinition
from ...core.services import EmitterServices
from .annotations import JvmAnnotationPolicy
from .docs import JvmDocPolicy
from .naming import JvmNameResolver
from .types import JvmTypeConfig, JvmTypeMapper


class JvmGenerator(CodeGenerator):
    """Base class for generators emitting JVM interfaces or traits."""

    def build_type_mapper(self, entities: List[EntityDefinition]) -> JvmTypeMapper:
        """Build a type mapper that knows the interfaces of the run's UDTs."""
        names = JvmNameResolver(self.config, entities)
        udt_interfaces: Dict[str, str] = {
            entity.qualified_name.lower(): names.qualified_interface_name(entity)
            for entity in entities
            if not entity.is_table
        }

        type_config = JvmTypeConfig(
            syntax=self.surface_syntax,
            strict=self.config.strict_types,
            type_overrides=self.config.type_overrides,
        )
        return JvmTypeMapper(type_config, udt_interfaces)

    def build_services(self, entities: List[EntityDefinition]) -> EmitterServices:
        return EmitterServices(
            types=self.build_type_mapper(entities),
            names=JvmNameResolver(self.config, entities),
            annotations=JvmAnnotationPolicy(self.config, self.surface_syntax),
            docs=JvmDocPolicy(
                self.template_engine,
                width=self.config.doc_width,
                enabled=self.config.add_comments,
            ),
        )

    def validate_entities(self, entities: List[EntityDefinition]) -> List[str]:
        """Validate entities and configuration for JVM generation."""
        warnings = super().validate_entities(entities)
        warnings.extend(get_config_manager().validate_config(self.config))

        # Unmapped types only produce hints outside strict mode
        if not self.config.strict_types:
            mapper = self.build_type_mapper(entities)
            jvm_types = [
                mapper.map_type(member.type, member.qualified_name)
                for entity in entities
                for member in entity.members
            ]
            warnings.extend(mapper.get_validation_summary(jvm_types))

        # Distinct members that collapse into the same accessor name
        names = JvmNameResolver(self.config, entities)
        for entity in entities:
            seen = {}
            for member in entity.members:
                getter = names.getter_name(member)
                if getter in seen:
                    warnings.append(
                        f"Members {seen[getter]} and {member.name} of "
                        f"{entity.qualified_name} both map to {getter}()"
                    )
                else:
                    seen[getter] = member.name

        return warnings
