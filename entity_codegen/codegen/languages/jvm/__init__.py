"""
Shared JVM support for the Java and Scala interface generators.
"""

from .annotations import JvmAnnotationPolicy
from .docs import JvmDocPolicy
from .generator import JvmGenerator
from .naming import JvmNameResolver, create_jvm_sanitizer
from .types import (
    JvmType,
    JvmTypeConfig,
    JvmTypeMapper,
    TypeResolutionError,
    SQL_TYPE_MAP,
)

__all__ = [
    "JvmGenerator",
    "JvmAnnotationPolicy",
    "JvmDocPolicy",
    "JvmNameResolver",
    "create_jvm_sanitizer",
    "JvmType",
    "JvmTypeConfig",
    "JvmTypeMapper",
    "TypeResolutionError",
    "SQL_TYPE_MAP",
]
