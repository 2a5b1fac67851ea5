"""
JVM type system for code generation.

Maps SQL data types to the Java types used by both the Java and the Scala
generators, with configuration-driven overrides and conflict handling.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from ...core.schema import DataTypeReference, EntityDefinition, MemberDefinition, SurfaceSyntax

OBJECT_TYPE = "java.lang.Object"
BYTE_ARRAY = "byte[]"
SCALA_BYTE_ARRAY = "scala.Array[scala.Byte]"
BIG_DECIMAL = "java.math.BigDecimal"
BIG_INTEGER = "java.math.BigInteger"
STRING_TYPE = "java.lang.String"


class TypeResolutionError(Exception):
    """Raised in strict mode when a SQL type has no JVM mapping."""

    pass


# SQL type name -> JVM type
SQL_TYPE_MAP = {
    # Integers
    "tinyint": "java.lang.Byte",
    "smallint": "java.lang.Short",
    "int2": "java.lang.Short",
    "smallserial": "java.lang.Short",
    "integer": "java.lang.Integer",
    "int": "java.lang.Integer",
    "int4": "java.lang.Integer",
    "mediumint": "java.lang.Integer",
    "serial": "java.lang.Integer",
    "bigint": "java.lang.Long",
    "int8": "java.lang.Long",
    "bigserial": "java.lang.Long",
    # Decimals and floating point
    "numeric": BIG_DECIMAL,
    "decimal": BIG_DECIMAL,
    "real": "java.lang.Float",
    "float4": "java.lang.Float",
    "float": "java.lang.Double",
    "float8": "java.lang.Double",
    "double": "java.lang.Double",
    "double precision": "java.lang.Double",
    # Booleans
    "boolean": "java.lang.Boolean",
    "bool": "java.lang.Boolean",
    "bit": "java.lang.Boolean",
    # Character data
    "char": STRING_TYPE,
    "character": STRING_TYPE,
    "nchar": STRING_TYPE,
    "varchar": STRING_TYPE,
    "character varying": STRING_TYPE,
    "nvarchar": STRING_TYPE,
    "text": STRING_TYPE,
    "longtext": STRING_TYPE,
    "clob": STRING_TYPE,
    "json": STRING_TYPE,
    "jsonb": STRING_TYPE,
    "xml": STRING_TYPE,
    # Temporal
    "date": "java.time.LocalDate",
    "time": "java.time.LocalTime",
    "time without time zone": "java.time.LocalTime",
    "timetz": "java.time.OffsetTime",
    "time with time zone": "java.time.OffsetTime",
    "timestamp": "java.time.LocalDateTime",
    "timestamp without time zone": "java.time.LocalDateTime",
    "datetime": "java.time.LocalDateTime",
    "timestamptz": "java.time.OffsetDateTime",
    "timestamp with time zone": "java.time.OffsetDateTime",
    "interval": "java.time.Duration",
    # Binary and misc
    "uuid": "java.util.UUID",
    "bytea": BYTE_ARRAY,
    "blob": BYTE_ARRAY,
    "binary": BYTE_ARRAY,
    "varbinary": BYTE_ARRAY,
    "longblob": BYTE_ARRAY,
}

# Precision bounds for exact numerics without a scale
_INTEGER_PRECISION = (
    (3, "java.lang.Byte"),
    (5, "java.lang.Short"),
    (10, "java.lang.Integer"),
    (19, "java.lang.Long"),
)


@dataclass(frozen=True)
class JvmType:
    """
    Resolved JVM type with the hints collected while mapping it.

    ``name`` is fully qualified for reference types (``java.lang.String``),
    ``byte[]`` for binary data, and already wrapped in the array syntax of
    the target language for SQL arrays.
    """

    name: str
    validation_hints: Tuple[str, ...] = field(default=())


@dataclass
class JvmTypeConfig:
    """Configuration for JVM type mapping behavior."""

    syntax: SurfaceSyntax = SurfaceSyntax.CLASS_BASED
    strict: bool = False
    unknown_type: str = OBJECT_TYPE
    type_overrides: Dict[str, str] = field(default_factory=dict)


class JvmTypeMapper:
    """
    Central engine for mapping member types to JVM types.

    UDT references resolve to the generated interface of the referenced UDT,
    supplied through ``udt_interfaces`` (lower-cased qualified UDT name ->
    qualified interface name).
    """

    def __init__(
        self,
        config: Optional[JvmTypeConfig] = None,
        udt_interfaces: Optional[Dict[str, str]] = None,
    ):
        """Initialize with type configuration."""
        self.config = config or JvmTypeConfig()
        self.udt_interfaces = udt_interfaces or {}
        self._overrides = {k.lower(): v for k, v in self.config.type_overrides.items()}

    def map_type(self, data_type: DataTypeReference, context: str = "") -> JvmType:
        """
        Map a member's data type to a JVM type.

        Args:
            data_type: Declared type of the member
            context: Qualified member name used in hints and errors

        Returns:
            JvmType with any validation hints
        """
        element = self._map_element(data_type, context)

        name = element.name
        if self.config.syntax == SurfaceSyntax.TRAIT_BASED and name == BYTE_ARRAY:
            name = SCALA_BYTE_ARRAY
        if data_type.is_array:
            name = self._array_of(name)

        return JvmType(name=name, validation_hints=element.validation_hints)

    def resolve(self, entity: EntityDefinition, member: MemberDefinition) -> str:
        """TypeResolver entry point used by the emitter."""
        return self.map_type(member.type, member.qualified_name).name

    def _map_element(self, data_type: DataTypeReference, context: str) -> JvmType:
        type_name = data_type.type_name

        if type_name in self._overrides:
            return JvmType(name=self._overrides[type_name])

        if data_type.is_udt:
            interface = self.udt_interfaces.get(data_type.udt_name)
            if interface:
                return JvmType(name=interface)
            return self._fallback(data_type, context, f"unknown UDT '{data_type.udt_name}'")

        if type_name in ("numeric", "decimal"):
            return JvmType(name=self._exact_numeric(data_type))

        mapped = SQL_TYPE_MAP.get(type_name)
        if mapped:
            return JvmType(name=mapped)

        return self._fallback(data_type, context, f"unsupported type '{type_name}'")

    def _exact_numeric(self, data_type: DataTypeReference) -> str:
        """NUMERIC(p) and NUMERIC(p, 0) map to the smallest fitting integer type."""
        if data_type.precision is None or (data_type.scale or 0) > 0:
            return BIG_DECIMAL

        for bound, jvm_type in _INTEGER_PRECISION:
            if data_type.precision < bound:
                return jvm_type
        return BIG_INTEGER

    def _fallback(self, data_type: DataTypeReference, context: str, reason: str) -> JvmType:
        if self.config.strict:
            raise TypeResolutionError(f"Cannot map {context or data_type.type_name}: {reason}")

        return JvmType(
            name=self.config.unknown_type,
            validation_hints=(
                f"{context or data_type.type_name}: {reason}, using {self.config.unknown_type}",
            ),
        )

    def _array_of(self, element: str) -> str:
        if self.config.syntax == SurfaceSyntax.TRAIT_BASED:
            return f"scala.Array[{element}]"
        return f"{element}[]"

    def get_validation_summary(self, types: List[JvmType]) -> List[str]:
        """Get all validation hints from a list of types."""
        all_hints = []
        for jvm_type in types:
            all_hints.extend(jvm_type.validation_hints)
        return all_hints
