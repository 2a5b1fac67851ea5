import pytest

from entity_codegen.codegen.core.schema import EntityDefinition, EntityKind
from entity_codegen.codegen.core.templates import (
    TemplateEngine,
    TemplateError,
    create_template_engine,
)
from entity_codegen.codegen.languages.jvm.docs import SECTION_RULE_WIDTH, JvmDocPolicy


@pytest.fixture
def engine():
    return create_template_engine()


# ═══════════════════════════════════════════════════════════════════════════
# Template engine
# ═══════════════════════════════════════════════════════════════════════════


class TestTemplateEngine:
    def test_builtin_templates_registered(self, engine):
        assert engine.template_exists("doc_comment")
        assert engine.template_exists("section")
        assert not engine.template_exists("missing")

    def test_missing_variable_is_an_error(self, engine):
        with pytest.raises(TemplateError, match="section"):
            engine.render_template("section", {"width": 10})

    def test_missing_template_is_an_error(self, engine):
        with pytest.raises(TemplateError):
            engine.render_template("missing", {})

    def test_added_template(self):
        engine = TemplateEngine()
        engine.add_template("greeting", "Hello {{ name }}")

        assert engine.render_template("greeting", {"name": "IPerson"}) == "Hello IPerson"

    def test_markup_is_not_escaped(self, engine):
        rendered = engine.render_template("doc_comment", {"text": "<code>a.b</code>", "width": 80})

        assert "<code>a.b</code>" in rendered


# ═══════════════════════════════════════════════════════════════════════════
# Documentation policy
# ═══════════════════════════════════════════════════════════════════════════


class TestJvmDocPolicy:
    def test_single_line_comment(self, engine):
        docs = JvmDocPolicy(engine)

        assert docs.format("Getter for <code>public.person.id</code>.") == [
            "/**",
            " * Getter for <code>public.person.id</code>.",
            " */",
        ]

    def test_long_text_is_wrapped(self, engine):
        docs = JvmDocPolicy(engine, width=20)
        lines = docs.format("one two three four five six seven eight")

        assert lines[0] == "/**"
        assert lines[-1] == " */"
        assert len(lines) > 3
        for line in lines[1:-1]:
            assert line.startswith(" * ")
            assert len(line) <= 23

    def test_comment_terminator_is_escaped(self, engine):
        lines = JvmDocPolicy(engine).format("a */ b")

        assert lines[1] == " * a *&#47; b"

    def test_multi_line_text_keeps_blank_lines(self, engine):
        lines = JvmDocPolicy(engine).format("first\n\nsecond")

        assert lines == ["/**", " * first", " *", " * second", " */"]

    def test_section_banner(self, engine):
        rule = "// " + "-" * SECTION_RULE_WIDTH

        assert JvmDocPolicy(engine).section("FROM and INTO") == [rule, "// FROM and INTO", rule]

    def test_disabled_policy_renders_nothing(self, engine):
        docs = JvmDocPolicy(engine, enabled=False)
        entity = EntityDefinition(name="person", schema="public")

        assert docs.format("anything") == []
        assert docs.section("FROM and INTO") == []
        assert docs.entity_doc(entity) == []

    def test_entity_doc_uses_comment(self, engine):
        entity = EntityDefinition(name="person", schema="public", comment=" People ")

        assert JvmDocPolicy(engine).entity_doc(entity) == ["/**", " * People", " */"]

    @pytest.mark.parametrize(
        "kind, expected",
        [
            (EntityKind.TABLE, " * The table <code>public.person</code>."),
            (EntityKind.UDT, " * The UDT <code>public.person</code>."),
        ],
    )
    def test_entity_doc_fallback(self, engine, kind, expected):
        entity = EntityDefinition(name="person", schema="public", kind=kind, comment="  ")

        assert JvmDocPolicy(engine).entity_doc(entity)[1] == expected
