"""
Module syntax unit tests

Tests tree-sitter parsing, statement selection and escape cooking
"""

import pytest

from code_snippets.core.errors import ErrorKind, ModuleSyntaxError
from code_snippets.syntax.parser import (
    SyntaxKind,
    cook_escapes,
    language_for_path,
    parse_module,
)


class TestCookEscapes:
    """Test JS escape cooking"""

    def test_plain_text_unchanged(self):
        assert cook_escapes("const x = 1;") == "const x = 1;"

    def test_simple_escapes(self):
        assert cook_escapes(r"a\nb\tc") == "a\nb\tc"

    def test_escaped_backtick_and_dollar(self):
        assert cook_escapes(r"\`\${x}") == "`${x}"

    def test_escaped_backslash(self):
        assert cook_escapes(r"a\\n") == "a\\n"

    def test_hex_and_unicode(self):
        assert cook_escapes(r"\x41B\u{43}") == "ABC"

    def test_line_continuation(self):
        assert cook_escapes("line\\\ncont") == "linecont"

    def test_crlf_normalised(self):
        assert cook_escapes("a\r\nb\rc") == "a\nb\nc"

    def test_highest_code_point(self):
        assert cook_escapes(r"\u{10FFFF}") == "\U0010ffff"

    def test_code_point_out_of_range(self):
        with pytest.raises(ModuleSyntaxError) as exc_info:
            cook_escapes(r"\u{110000}", origin="demo.ts")
        assert exc_info.value.details["path"] == "demo.ts"

    def test_unknown_escape_is_literal(self):
        assert cook_escapes(r"\q") == "q"


class TestLanguageForPath:
    """Test grammar selection"""

    @pytest.mark.parametrize(
        "path,language",
        [
            ("demo.ts", "typescript"),
            ("demo.mts", "typescript"),
            ("demo.tsx", "tsx"),
            ("demo.js", "javascript"),
            ("demo.jsx", "javascript"),
            ("index", "javascript"),
        ],
    )
    def test_language(self, path, language):
        assert language_for_path(path) == language


class TestParseModule:
    """Test parse_module"""

    def test_syntax_error(self):
        with pytest.raises(ModuleSyntaxError) as exc_info:
            parse_module("const x = ;\n", origin="demo.js")
        error = exc_info.value
        assert error.kind == ErrorKind.SYNTAX
        assert error.details["line"] == 1
        assert error.details["path"] == "demo.js"
        assert "demo.js" in error.message

    def test_typescript_annotation(self):
        syntax = parse_module("export const s: string = `x`;\n", "typescript")
        assert len(syntax.statements(SyntaxKind.VARIABLE_DECLARATION)) == 1

    def test_top_level_statements(self):
        syntax = parse_module(
            "import {a} from 'x';\n"
            "export const b = `b`;\n"
            "let c = 1;\n"
            "var d = 2;\n"
            "function f() { const e = `e`; }\n"
        )
        imports = syntax.statements(SyntaxKind.IMPORT_DECLARATION)
        declarations = syntax.statements(SyntaxKind.VARIABLE_DECLARATION)

        assert len(imports) == 1
        assert [syntax.text(d).split("=")[0].strip() for d in declarations] == [
            "const b",
            "let c",
            "var d",
        ]

    def test_visit_calls_handler_per_statement(self):
        syntax = parse_module("import a from 'a';\nimport {b} from 'b';\n")
        seen = []
        syntax.visit(SyntaxKind.IMPORT_DECLARATION, seen.append)
        assert len(seen) == 2

    def test_string_value(self):
        syntax = parse_module("import {a} from \"./a\\u0062\";\n")
        decl = syntax.statements(SyntaxKind.IMPORT_DECLARATION)[0]
        assert syntax.string_value(decl.child_by_field_name("source")) == "./ab"
