"""
Language-specific code generators.

This module contains generators for different programming languages.
"""

from .java import JavaGenerator, create_java_generator
from .scala import ScalaGenerator, create_scala_generator

__all__ = [
    "JavaGenerator",
    "create_java_generator",
    "ScalaGenerator",
    "create_scala_generator",
]
