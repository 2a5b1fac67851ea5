import pytest

from entity_codegen.codegen.core.schema import (
    EntityKind,
    SchemaError,
    index_entities,
    load_entities,
    parse_type,
)


# ═══════════════════════════════════════════════════════════════════════════
# Type declarations
# ═══════════════════════════════════════════════════════════════════════════


class TestParseType:
    def test_plain_type(self):
        data_type = parse_type("text")

        assert data_type.type_name == "text"
        assert data_type.length is None
        assert data_type.precision is None
        assert not data_type.is_array
        assert not data_type.is_udt

    def test_length_argument(self):
        data_type = parse_type("VARCHAR(255)")

        assert data_type.type_name == "varchar"
        assert data_type.length == 255
        assert data_type.precision is None

    def test_precision_and_scale(self):
        data_type = parse_type("numeric( 10 , 2 )")

        assert data_type.type_name == "numeric"
        assert data_type.precision == 10
        assert data_type.scale == 2
        assert data_type.length is None

    def test_precision_only(self):
        data_type = parse_type("decimal(5)")

        assert data_type.precision == 5
        assert data_type.scale is None

    def test_multi_word_type(self):
        data_type = parse_type("timestamp   with time zone")

        assert data_type.type_name == "timestamp with time zone"

    def test_array_suffix(self):
        data_type = parse_type("integer[]")

        assert data_type.type_name == "integer"
        assert data_type.is_array

    def test_serial_is_identity(self):
        assert parse_type("bigserial").identity
        assert not parse_type("bigint").identity
        assert parse_type("bigint", identity=True).identity

    def test_udt_reference(self):
        data_type = parse_type("Address", udt_names={"address"})

        assert data_type.is_udt
        assert data_type.udt_name == "address"

    def test_udt_reference_prefers_own_schema(self):
        udts = {"hr.address", "sales.address"}

        assert parse_type("address", udt_names=udts, schema="HR").udt_name == "hr.address"
        assert parse_type("sales.address", udt_names=udts, schema="hr").udt_name == "sales.address"

    def test_udt_reference_in_other_schema(self):
        assert parse_type("address", udt_names={"hr.address"}, schema="sales").udt_name == "hr.address"

    def test_ambiguous_udt_reference(self):
        with pytest.raises(SchemaError, match="Ambiguous UDT reference 'address'"):
            parse_type("address", udt_names={"hr.address", "sales.address"}, schema="shop")

    def test_flags_are_kept(self):
        data_type = parse_type("text", nullable=False, defaulted=True)

        assert not data_type.nullable
        assert data_type.defaulted

    @pytest.mark.parametrize("declaration", ["", "varchar(", "numeric(a, b)", "9lives"])
    def test_invalid_declaration(self, declaration):
        with pytest.raises(SchemaError):
            parse_type(declaration)

    def test_non_string_declaration(self):
        with pytest.raises(SchemaError, match="must be a string"):
            parse_type(42)


# ═══════════════════════════════════════════════════════════════════════════
# Entity documents
# ═══════════════════════════════════════════════════════════════════════════


class TestLoadEntities:
    def test_entities_in_document_order(self, shop_entities):
        assert [e.qualified_name for e in shop_entities] == ["public.person", "public.address"]

    def test_table_members(self, person_table):
        assert person_table.kind == EntityKind.TABLE
        assert person_table.is_table
        assert [m.name for m in person_table.members] == [
            "id",
            "name",
            "email",
            "home",
            "tags",
            "balance",
        ]
        assert [m.position for m in person_table.members] == [1, 2, 3, 4, 5, 6]
        assert all(m.is_column for m in person_table.members)

    def test_member_details(self, person_table):
        id_member = person_table.get_member("id")
        name_member = person_table.get_member("name")
        balance = person_table.get_member("balance")

        assert id_member.qualified_name == "public.person.id"
        assert id_member.primary_key
        assert id_member.type.identity
        assert not id_member.type.nullable
        assert name_member.comment == "Full name"
        assert name_member.type.length == 100
        assert balance.type.defaulted
        assert person_table.primary_key == [id_member]

    def test_udt_reference_resolved(self, person_table):
        home = person_table.get_member("home")

        assert home.type.is_udt
        assert home.type.udt_name == "public.address"

    def test_udt_members_are_not_columns(self, address_udt):
        assert address_udt.kind == EntityKind.UDT
        assert not address_udt.is_table
        assert address_udt.comment == "Postal address"
        assert not any(m.is_column for m in address_udt.members)

    def test_get_member_missing(self, person_table):
        assert person_table.get_member("missing") is None

    def test_entity_schema_override(self):
        entities = load_entities(
            {
                "schema": "public",
                "entities": [{"name": "audit", "schema": "log", "members": []}],
            }
        )

        assert entities[0].qualified_name == "log.audit"

    def test_same_udt_name_in_two_schemas(self):
        entities = load_entities(
            {
                "schema": "sales",
                "entities": [
                    {"name": "address", "kind": "udt", "members": []},
                    {"name": "address", "schema": "hr", "kind": "udt", "members": []},
                    {"name": "customer", "members": [{"name": "home", "type": "address"}]},
                    {
                        "name": "employee",
                        "schema": "hr",
                        "members": [{"name": "home", "type": "address"}],
                    },
                ],
            }
        )

        customer, employee = entities[2], entities[3]
        assert customer.get_member("home").type.udt_name == "sales.address"
        assert employee.get_member("home").type.udt_name == "hr.address"

    def test_supertypes(self):
        entities = load_entities(
            {"entities": [{"name": "t", "supertypes": ["java.io.Serializable"]}]}
        )

        assert entities[0].supertypes == ("java.io.Serializable",)
        assert entities[0].qualified_name == "t"

    def test_index_entities(self, shop_entities):
        index = index_entities(shop_entities)

        assert set(index) == {"public.person", "public.address"}

    @pytest.mark.parametrize(
        "document, message",
        [
            ([], "JSON object"),
            ({"schema": "public"}, "'entities' list"),
            ({"entities": [{"kind": "table"}]}, "with a name"),
            ({"entities": [{"name": "t", "kind": "view"}]}, "Unknown entity kind"),
            ({"entities": [{"name": "t", "members": [{"name": "a"}]}]}, "has no type"),
            ({"entities": [{"name": "t", "members": ["a"]}]}, "must be an object"),
        ],
    )
    def test_invalid_documents(self, document, message):
        with pytest.raises(SchemaError, match=message):
            load_entities(document)

    def test_duplicate_entity(self):
        document = {"entities": [{"name": "t"}, {"name": "t"}]}

        with pytest.raises(SchemaError, match="Duplicate entity"):
            load_entities(document)

    def test_duplicate_member(self):
        document = {
            "entities": [
                {
                    "name": "t",
                    "members": [{"name": "a", "type": "int"}, {"name": "a", "type": "text"}],
                }
            ]
        }

        with pytest.raises(SchemaError, match="Duplicate members in t: a"):
            load_entities(document)
