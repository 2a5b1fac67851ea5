import copy

import pytest

from entity_codegen.codegen.core.config import GeneratorConfig
from entity_codegen.codegen.core.emitter import emit_interface
from entity_codegen.codegen.core.schema import (
    DataTypeReference,
    EmissionMode,
    EntityDefinition,
    EntityKind,
    MemberDefinition,
    SurfaceSyntax,
    load_entities,
)
from entity_codegen.codegen.core.services import EmitterServices
from entity_codegen.codegen.core.writer import CodeWriter


SHOP_DOCUMENT = {
    "schema": "public",
    "entities": [
        {
            "name": "person",
            "kind": "table",
            "members": [
                {"name": "id", "type": "serial", "nullable": False, "primary_key": True},
                {
                    "name": "name",
                    "type": "varchar(100)",
                    "nullable": False,
                    "comment": "Full name",
                },
                {"name": "email", "type": "text", "comment": "   "},
                {"name": "home", "type": "address"},
                {"name": "tags", "type": "text[]"},
                {"name": "balance", "type": "numeric(12, 2)", "default": "0"},
            ],
        },
        {
            "name": "address",
            "kind": "udt",
            "comment": "Postal address",
            "members": [
                {"name": "street", "type": "text"},
                {"name": "zip_code", "type": "char(5)", "nullable": False},
            ],
        },
    ],
}


@pytest.fixture
def shop_document():
    """A fresh copy of the sample document with one table and one UDT."""
    return copy.deepcopy(SHOP_DOCUMENT)


@pytest.fixture
def shop_entities(shop_document):
    return load_entities(shop_document)


@pytest.fixture
def person_table(shop_entities):
    return shop_entities[0]


@pytest.fixture
def address_udt(shop_entities):
    return shop_entities[1]


@pytest.fixture
def config():
    return GeneratorConfig()


# ═══════════════════════════════════════════════════════════════════════════
# Stub services: plain names, so assertions read like the rendered output
# ═══════════════════════════════════════════════════════════════════════════


def make_member(entity_name, name, type_name, comment=None):
    return MemberDefinition(
        name=name,
        qualified_name=f"{entity_name}.{name}",
        type=DataTypeReference(type_name=type_name),
        comment=comment,
    )


class StubNames:
    def __init__(self, supertypes=()):
        self._supertypes = list(supertypes)

    def package_name(self, entity):
        return "demo"

    def interface_name(self, entity):
        return entity.name

    def qualified_interface_name(self, entity):
        return f"demo.{entity.name}"

    def builder_name(self, entity):
        return "Builder"

    def base_builder_name(self, entity):
        return f"{entity.name}_Builder"

    def supertypes(self, entity):
        return list(self._supertypes)

    def setter_name(self, member):
        return "set" + member.name.capitalize()

    def getter_name(self, member):
        return "get" + member.name.capitalize()


class StubTypes:
    TYPES = {"integer": "Integer", "text": "String"}

    def resolve(self, entity, member):
        return self.TYPES.get(member.type.type_name, "Object")


class StubAnnotations:
    def __init__(self, member_lines=()):
        self.member_lines = list(member_lines)
        self.member_calls = []

    def entity_annotations(self, entity, sink):
        return []

    def member_annotations(self, entity, member, sink):
        self.member_calls.append(member.name)
        return list(self.member_lines)


class StubDocs:
    def entity_doc(self, entity):
        return []

    def format(self, text):
        return [f"// {text}"]

    def section(self, title):
        return [f"// {title}"]


@pytest.fixture
def person():
    """The two-member Person entity used throughout the emitter tests."""
    return EntityDefinition(
        name="Person",
        schema="",
        kind=EntityKind.TABLE,
        members=(
            make_member("Person", "id", "integer"),
            make_member("Person", "name", "text"),
        ),
    )


@pytest.fixture
def stub_services():
    return EmitterServices(
        types=StubTypes(),
        names=StubNames(),
        annotations=StubAnnotations(),
        docs=StubDocs(),
    )


@pytest.fixture
def emit(stub_services):
    """Run the emitter into a fresh writer and return the writer."""

    def _emit(
        entity,
        immutable_pojos=False,
        fluent_setters=False,
        syntax=SurfaceSyntax.CLASS_BASED,
        services=None,
    ):
        mode = EmissionMode(
            immutable_pojos=immutable_pojos,
            fluent_setters=fluent_setters,
            surface_syntax=syntax,
        )
        sink = CodeWriter(syntax)
        emit_interface(entity, mode, sink, services or stub_services)
        return sink

    return _emit
