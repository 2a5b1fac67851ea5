"""
Scala code generator implementation.

Generates Scala traits with abstract accessors and from/into copy methods.
Traits get no builder stub.
"""

from typing import Dict, Any, Optional

from ...core.config import load_config
from ...core.schema import SurfaceSyntax
from ..jvm.generator import JvmGenerator


class ScalaGenerator(JvmGenerator):
    """Code generator for Scala traits."""

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "scala"

    @property
    def file_extension(self) -> str:
        """Return Scala file extension."""
        return ".scala"

    @property
    def surface_syntax(self) -> SurfaceSyntax:
        return SurfaceSyntax.TRAIT_BASED


def create_scala_generator(config: Optional[Dict[str, Any]] = None) -> ScalaGenerator:
    """Create a Scala generator with default configuration."""
    return ScalaGenerator(load_config("scala", custom_config=config))


def create_immutable_generator(package_name: str = "org.example.generated") -> ScalaGenerator:
    """Create generator for read-only traits."""
    return create_scala_generator(
        {
            "package_name": package_name,
            "immutable_pojos": True,
        }
    )
