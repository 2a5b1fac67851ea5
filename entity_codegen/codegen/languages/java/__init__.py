"""
Java code generator module.

Generates FreeBuilder-ready Java interfaces from entity definitions.
"""

from .generator import (
    JavaGenerator,
    create_java_generator,
    create_jpa_generator,
    create_fluent_generator,
    create_immutable_generator,
)

__all__ = [
    "JavaGenerator",
    "create_java_generator",
    "create_jpa_generator",
    "create_fluent_generator",
    "create_immutable_generator",
]
