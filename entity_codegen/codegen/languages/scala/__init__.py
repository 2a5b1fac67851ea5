"""
Scala code generator module.

Generates Scala traits from entity definitions.
"""

from .generator import ScalaGenerator, create_scala_generator, create_immutable_generator

__all__ = [
    "ScalaGenerator",
    "create_scala_generator",
    "create_immutable_generator",
]
