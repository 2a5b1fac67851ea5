"""
Core entity representation for code generation.

Converts entity documents (tables and user-defined types described as JSON)
into a normalized internal format that generators can work with consistently.
"""

import re
from dataclasses import dataclass
from typing import Dict, List, Optional, Any
from enum import Enum


class SchemaError(Exception):
    """Exception raised for malformed entity documents."""

    pass


class EntityKind(Enum):
    """Kinds of entities that can be generated."""

    TABLE = "table"
    UDT = "udt"


class SurfaceSyntax(Enum):
    """Textual dialect used to render the same logical declarations."""

    CLASS_BASED = "class"  # Java interfaces with a nested builder
    TRAIT_BASED = "trait"  # Scala traits with abstract members


@dataclass(frozen=True)
class DataTypeReference:
    """Semantic type of a member as declared in the schema."""

    type_name: str
    length: Optional[int] = None
    precision: Optional[int] = None
    scale: Optional[int] = None
    nullable: bool = True
    defaulted: bool = False
    identity: bool = False
    is_array: bool = False
    udt_name: Optional[str] = None  # Set when the type names another UDT

    @property
    def is_udt(self) -> bool:
        return self.udt_name is not None


@dataclass(frozen=True)
class MemberDefinition:
    """One column of a table or attribute of a UDT."""

    name: str
    qualified_name: str
    type: DataTypeReference
    comment: Optional[str] = None
    position: int = 0
    primary_key: bool = False
    is_column: bool = True  # False for UDT attributes


@dataclass(frozen=True)
class EntityDefinition:
    """A table or UDT with its ordered members."""

    name: str
    schema: str
    kind: EntityKind = EntityKind.TABLE
    comment: Optional[str] = None
    members: tuple = ()
    supertypes: tuple = ()

    @property
    def qualified_name(self) -> str:
        if not self.schema:
            return self.name
        return f"{self.schema}.{self.name}"

    @property
    def is_table(self) -> bool:
        return self.kind == EntityKind.TABLE

    def get_member(self, name: str) -> Optional[MemberDefinition]:
        """Get member by name."""
        for member in self.members:
            if member.name == name:
                return member
        return None

    @property
    def primary_key(self) -> List[MemberDefinition]:
        return [m for m in self.members if m.primary_key]


@dataclass(frozen=True)
class EmissionMode:
    """Flags that select which constructs the emitter produces."""

    immutable_pojos: bool = False
    fluent_setters: bool = False
    surface_syntax: SurfaceSyntax = SurfaceSyntax.CLASS_BASED


# name (possibly schema-qualified), optional "(a)" or "(a, b)" arguments, optional "[]" suffix
_TYPE_PATTERN = re.compile(
    r"^\s*(?P<name>[A-Za-z_][\w .]*?)\s*"
    r"(?:\(\s*(?P<first>\d+)\s*(?:,\s*(?P<second>\d+)\s*)?\))?"
    r"\s*(?P<array>\[\])?\s*$"
)

# Types whose single argument is a length rather than a precision
_LENGTH_TYPES = {
    "char",
    "character",
    "varchar",
    "character varying",
    "nchar",
    "nvarchar",
    "binary",
    "varbinary",
    "bit",
}


def parse_type(
    declaration: str,
    nullable: bool = True,
    defaulted: bool = False,
    identity: bool = False,
    udt_names: Optional[set] = None,
    schema: str = "",
) -> DataTypeReference:
    """
    Parse a SQL type declaration such as ``numeric(10, 2)`` or ``text[]``.

    Args:
        declaration: Type as written in the entity document
        nullable: Whether the member accepts NULL
        defaulted: Whether the member has a default value
        identity: Whether the member is an identity/serial column
        udt_names: Lower-cased qualified names of UDTs that can be referenced
        schema: Schema of the referencing entity, searched first for UDTs

    Returns:
        DataTypeReference describing the declaration
    """
    if not isinstance(declaration, str):
        raise SchemaError(f"Type declaration must be a string, got {declaration!r}")

    match = _TYPE_PATTERN.match(declaration)
    if not match:
        raise SchemaError(f"Invalid type declaration: {declaration!r}")

    type_name = re.sub(r"\s+", " ", match.group("name").strip().lower())
    first = match.group("first")
    second = match.group("second")

    length = precision = scale = None
    if first is not None:
        if type_name in _LENGTH_TYPES and second is None:
            length = int(first)
        else:
            precision = int(first)
            scale = int(second) if second is not None else None

    udt_name = _resolve_udt(type_name, schema, udt_names or set())

    return DataTypeReference(
        type_name=type_name,
        length=length,
        precision=precision,
        scale=scale,
        nullable=nullable,
        defaulted=defaulted,
        identity=identity or type_name in {"serial", "bigserial", "smallserial"},
        is_array=match.group("array") is not None,
        udt_name=udt_name,
    )


def _resolve_udt(type_name: str, schema: str, udt_names: set) -> Optional[str]:
    """Qualified name of the UDT a type refers to, own schema first."""
    candidates = [f"{schema.lower()}.{type_name}"] if schema else []
    candidates.append(type_name)
    for candidate in candidates:
        if candidate in udt_names:
            return candidate

    # Unqualified reference to a UDT of another schema
    matches = sorted(q for q in udt_names if q.rpartition(".")[2] == type_name)
    if len(matches) > 1:
        raise SchemaError(
            f"Ambiguous UDT reference {type_name!r}: {', '.join(matches)}"
        )
    return matches[0] if matches else None


def load_entities(document: Dict[str, Any]) -> List[EntityDefinition]:
    """
    Convert an entity document into EntityDefinition objects.

    Args:
        document: Parsed JSON with a "schema" name and an "entities" list

    Returns:
        Entities in document order
    """
    if not isinstance(document, dict):
        raise SchemaError("Entity document must be a JSON object")

    schema_name = document.get("schema", "")
    raw_entities = document.get("entities")
    if not isinstance(raw_entities, list):
        raise SchemaError("Entity document must contain an 'entities' list")

    # UDT names are needed up front so member types can reference them
    udt_names = {
        _qualify(raw.get("schema", schema_name), str(raw.get("name", ""))).lower()
        for raw in raw_entities
        if isinstance(raw, dict) and raw.get("kind") == EntityKind.UDT.value
    }

    entities = []
    seen = set()
    for raw in raw_entities:
        entity = _convert_entity(raw, schema_name, udt_names)
        if entity.qualified_name in seen:
            raise SchemaError(f"Duplicate entity: {entity.qualified_name}")
        seen.add(entity.qualified_name)
        entities.append(entity)

    return entities


def _convert_entity(
    raw: Dict[str, Any], default_schema: str, udt_names: set
) -> EntityDefinition:
    """Convert a single entity node."""
    if not isinstance(raw, dict) or not raw.get("name"):
        raise SchemaError(f"Entity must be an object with a name: {raw!r}")

    name = raw["name"]
    schema_name = raw.get("schema", default_schema)

    try:
        kind = EntityKind(raw.get("kind", EntityKind.TABLE.value))
    except ValueError:
        raise SchemaError(f"Unknown entity kind for {name}: {raw.get('kind')!r}")

    qualified_entity = _qualify(schema_name, name)
    members = []
    for position, raw_member in enumerate(raw.get("members", []), start=1):
        if not isinstance(raw_member, dict) or not raw_member.get("name"):
            raise SchemaError(f"Member of {name} must be an object with a name")
        if "type" not in raw_member:
            raise SchemaError(f"Member {name}.{raw_member['name']} has no type")

        member_type = parse_type(
            raw_member["type"],
            nullable=raw_member.get("nullable", True),
            defaulted=raw_member.get("default") is not None,
            identity=raw_member.get("identity", False),
            udt_names=udt_names,
            schema=schema_name,
        )
        members.append(
            MemberDefinition(
                name=raw_member["name"],
                qualified_name=f"{qualified_entity}.{raw_member['name']}",
                type=member_type,
                comment=raw_member.get("comment"),
                position=position,
                primary_key=raw_member.get("primary_key", False),
                is_column=kind == EntityKind.TABLE,
            )
        )

    names = [m.name for m in members]
    duplicates = sorted({n for n in names if names.count(n) > 1})
    if duplicates:
        raise SchemaError(f"Duplicate members in {name}: {', '.join(duplicates)}")

    return EntityDefinition(
        name=name,
        schema=schema_name,
        kind=kind,
        comment=raw.get("comment"),
        members=tuple(members),
        supertypes=tuple(raw.get("supertypes", [])),
    )


def _qualify(schema: str, name: str) -> str:
    return f"{schema}.{name}" if schema else name


def index_entities(entities: List[EntityDefinition]) -> Dict[str, EntityDefinition]:
    """Map qualified entity names to entities."""
    return {entity.qualified_name: entity for entity in entities}
