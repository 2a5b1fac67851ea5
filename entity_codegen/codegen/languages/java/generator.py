"""
Java code generator implementation.

Generates Java interfaces annotated for FreeBuilder, with a nested Builder
stub, accessor declarations and from/into copy methods.
"""

from typing import Dict, Any, Optional

from ...core.config import load_config
from ...core.schema import SurfaceSyntax
from ..jvm.generator import JvmGenerator


class JavaGenerator(JvmGenerator):
    """Code generator for Java interfaces."""

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "java"

    @property
    def file_extension(self) -> str:
        """Return Java file extension."""
        return ".java"

    @property
    def surface_syntax(self) -> SurfaceSyntax:
        return SurfaceSyntax.CLASS_BASED


# Factory functions
def create_java_generator(config: Optional[Dict[str, Any]] = None) -> JavaGenerator:
    """Create a Java generator with default configuration."""
    return JavaGenerator(load_config("java", custom_config=config))


def create_jpa_generator(package_name: str = "org.example.generated") -> JavaGenerator:
    """Create generator for interfaces carrying JPA and validation annotations."""
    return create_java_generator(
        {
            "package_name": package_name,
            "generate_jpa_annotations": True,
            "generate_validation_annotations": True,
        }
    )


def create_fluent_generator(package_name: str = "org.example.generated") -> JavaGenerator:
    """Create generator whose setters return the interface for chaining."""
    return create_java_generator(
        {
            "package_name": package_name,
            "fluent_setters": True,
        }
    )


def create_immutable_generator(package_name: str = "org.example.generated") -> JavaGenerator:
    """Create generator for read-only interfaces (getters only, no copy methods)."""
    return create_java_generator(
        {
            "package_name": package_name,
            "immutable_pojos": True,
        }
    )
