from entity_codegen.codegen.core.schema import SurfaceSyntax
from entity_codegen.codegen.core.writer import CodeWriter


# ═══════════════════════════════════════════════════════════════════════════
# Type references
# ═══════════════════════════════════════════════════════════════════════════


class TestRef:
    def test_import_is_registered(self):
        writer = CodeWriter()

        assert writer.ref("java.time.LocalDate") == "LocalDate"
        assert writer.imports == ["java.time.LocalDate"]

    def test_java_lang_is_implicit(self):
        writer = CodeWriter()

        assert writer.ref("java.lang.String") == "String"
        assert writer.imports == []

    def test_scala_package_is_implicit_for_traits(self):
        writer = CodeWriter(SurfaceSyntax.TRAIT_BASED)

        assert writer.ref("scala.Array[java.lang.Byte]") == "Array[Byte]"
        assert writer.imports == []

    def test_array_suffix(self):
        writer = CodeWriter()

        assert writer.ref("java.util.UUID[]") == "UUID[]"
        assert writer.ref("byte[]") == "byte[]"
        assert writer.imports == ["java.util.UUID"]

    def test_generic_argument_is_imported(self):
        writer = CodeWriter(SurfaceSyntax.TRAIT_BASED)

        assert writer.ref("scala.Array[java.math.BigDecimal]") == "Array[BigDecimal]"
        assert writer.imports == ["java.math.BigDecimal"]

    def test_same_package_not_imported(self):
        writer = CodeWriter()
        writer.set_package("com.example")

        assert writer.ref("com.example.IAddress") == "IAddress"
        assert writer.imports == []

    def test_conflicting_simple_name_stays_qualified(self):
        writer = CodeWriter()

        assert writer.ref("java.sql.Date") == "Date"
        assert writer.ref("java.util.Date") == "java.util.Date"
        assert writer.ref("java.sql.Date") == "Date"
        assert writer.imports == ["java.sql.Date"]

    def test_local_name_stays_qualified(self):
        writer = CodeWriter()
        writer.declare_local("IPerson")

        assert writer.ref("other.pkg.IPerson") == "other.pkg.IPerson"
        assert writer.imports == []

    def test_unqualified_names_pass_through(self):
        writer = CodeWriter()

        assert writer.ref("int") == "int"
        assert writer.ref("Integer") == "Integer"
        assert writer.imports == []


# ═══════════════════════════════════════════════════════════════════════════
# Rendering
# ═══════════════════════════════════════════════════════════════════════════


class TestGetValue:
    def test_indentation_by_depth(self):
        writer = CodeWriter(indent_size=2)
        writer.println("a {").println("b;", depth=1).println("c;", depth=2).println("}")

        assert writer.getvalue() == "a {\n  b;\n    c;\n}\n"

    def test_tabs_and_blank_lines(self):
        writer = CodeWriter(use_tabs=True)
        writer.println("a {").println("", depth=1).println("b;", depth=1).println("}")

        assert writer.getvalue() == "a {\n\n\tb;\n}\n"

    def test_imports_follow_package_line(self):
        writer = CodeWriter()
        writer.println("package com.example;")
        writer.println()
        writer.println(f"{writer.ref('java.util.UUID')} id;")
        writer.println(f"{writer.ref('java.math.BigDecimal')} amount;")

        assert writer.getvalue() == (
            "package com.example;\n"
            "\n"
            "import java.math.BigDecimal;\n"
            "import java.util.UUID;\n"
            "\n"
            "UUID id;\n"
            "BigDecimal amount;\n"
        )

    def test_scala_imports_have_no_semicolon(self):
        writer = CodeWriter(SurfaceSyntax.TRAIT_BASED)
        writer.println("package com.example")
        writer.println()
        writer.println(f"val id : {writer.ref('java.util.UUID')}")

        assert writer.getvalue() == (
            "package com.example\n\nimport java.util.UUID\n\nval id : UUID\n"
        )

    def test_imports_without_package_line(self):
        writer = CodeWriter()
        writer.println(f"{writer.ref('java.util.UUID')} id;")

        assert writer.getvalue() == "import java.util.UUID;\n\nUUID id;\n"

    def test_line_ending(self):
        writer = CodeWriter(line_ending="\r\n")
        writer.println("a").println("b")

        assert writer.getvalue() == "a\r\nb\r\n"

    def test_lines_and_len(self):
        writer = CodeWriter()
        writer.println("a").println("b", depth=3)

        assert writer.lines == ["a", "b"]
        assert len(writer) == 2
