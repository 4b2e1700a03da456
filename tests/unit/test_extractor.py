"""
Export extractor unit tests

Tests finding template literal exports in module files
"""

import pytest

from code_snippets.core.errors import ErrorKind, ExtractionError, ModuleSyntaxError
from code_snippets.syntax.extractor import extract_export


def module(tmp_path, source, name="demo.ts"):
    path = tmp_path / name
    path.write_text(source, encoding="utf-8")
    return str(path)


class TestExtractExport:
    """Test extract_export"""

    def test_exported_template(self, tmp_path):
        path = module(tmp_path, "export const snippetA = `const x = 1;`;\n")
        assert extract_export(path, "snippetA") == "const x = 1;"

    def test_text_is_not_trimmed(self, tmp_path):
        path = module(tmp_path, "export const s = `\n  a();\n  b();\n`;\n")
        assert extract_export(path, "s") == "\n  a();\n  b();\n"

    def test_non_exported_declaration(self, tmp_path):
        path = module(tmp_path, "const s = `local`;\n", "demo.js")
        assert extract_export(path, "s") == "local"

    def test_typescript_type_annotation(self, tmp_path):
        path = module(tmp_path, "export const s: string = `typed`;\n")
        assert extract_export(path, "s") == "typed"

    def test_tsx_module(self, tmp_path):
        path = module(
            tmp_path,
            "export const s = `<Button />`;\nexport const View = () => <div />;\n",
            "demo.tsx",
        )
        assert extract_export(path, "s") == "<Button />"

    def test_last_declarator_wins(self, tmp_path):
        path = module(tmp_path, "var s = `one`;\nvar s = `two`;\n", "demo.js")
        assert extract_export(path, "s") == "two"

    def test_multiple_declarators(self, tmp_path):
        path = module(tmp_path, "export const a = `A`, s = `S`;\n")
        assert extract_export(path, "a") == "A"
        assert extract_export(path, "s") == "S"

    def test_escapes_cooked(self, tmp_path):
        path = module(tmp_path, "export const s = `a\\`b \\${c}\\n`;\n")
        assert extract_export(path, "s") == "a`b ${c}\n"

    def test_placeholders_dropped(self, tmp_path):
        """Test only the literal segments of an interpolated template are kept"""
        path = module(tmp_path, "const name = 'x';\nexport const s = `a${name}b${name}c`;\n")
        assert extract_export(path, "s") == "abc"

    def test_empty_template(self, tmp_path):
        path = module(tmp_path, "export const s = ``;\n")
        assert extract_export(path, "s") == ""


class TestExtractionFailure:
    """Test extraction failures"""

    def test_missing_identifier(self, tmp_path):
        path = module(tmp_path, "export const other = `x`;\n")
        with pytest.raises(ExtractionError) as exc_info:
            extract_export(path, "snippetA")

        error = exc_info.value
        assert error.kind == ErrorKind.EXTRACTION
        assert error.path == path
        assert error.identifier == "snippetA"
        assert "snippetA" in error.message and path in error.message

    def test_string_literal_not_extracted(self, tmp_path):
        path = module(tmp_path, "export const s = 'plain';\n")
        with pytest.raises(ExtractionError):
            extract_export(path, "s")

    def test_nested_declaration_not_extracted(self, tmp_path):
        path = module(tmp_path, "export function f() {\n  const s = `x`;\n  return s;\n}\n")
        with pytest.raises(ExtractionError):
            extract_export(path, "s")

    def test_destructuring_not_extracted(self, tmp_path):
        path = module(tmp_path, "const {s} = {s: `x`};\n")
        with pytest.raises(ExtractionError):
            extract_export(path, "s")

    def test_syntax_error(self, tmp_path):
        path = module(tmp_path, "export const s = `x`\nconst = ;\n")
        with pytest.raises(ModuleSyntaxError) as exc_info:
            extract_export(path, "s")
        assert exc_info.value.details["path"] == path

    def test_invalid_utf8_replaced(self, tmp_path):
        """Test undecodable bytes become U+FFFD instead of failing the read"""
        path = tmp_path / "demo.ts"
        path.write_bytes(b"export const s = `caf\xe9`;\n")
        assert extract_export(str(path), "s") == "caf\ufffd"

    def test_code_point_out_of_range(self, tmp_path):
        path = module(tmp_path, "export const s = `\\u{110000}`;\n")
        with pytest.raises(ModuleSyntaxError) as exc_info:
            extract_export(path, "s")
        assert exc_info.value.details["path"] == path
        assert exc_info.value.details["escape"] == "\\u{110000}"

    def test_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            extract_export(str(tmp_path / "missing.ts"), "s")
