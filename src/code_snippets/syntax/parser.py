"""
Module syntax

Parses JavaScript/TypeScript module source with tree-sitter and exposes the
two statement kinds the transform cares about: import declarations and
top-level variable declarations.
"""

import os
import re
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from tree_sitter_language_pack import get_parser

from ..core.errors import ModuleSyntaxError

_LANGUAGE_BY_EXTENSION = {
    ".ts": "typescript",
    ".mts": "typescript",
    ".cts": "typescript",
    ".tsx": "tsx",
}

_VARIABLE_DECLARATIONS = {"lexical_declaration", "variable_declaration"}

_SIMPLE_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "b": "\b",
    "f": "\f",
    "v": "\v",
    "0": "\0",
}

_LINE_TERMINATORS = {"\n", "\r\n", "\r", "\u2028", "\u2029"}

MAX_CODE_POINT = 0x10FFFF

ESCAPE_PATTERN = re.compile(
    r"\\(u\{[0-9a-fA-F]+\}|u[0-9a-fA-F]{4}|x[0-9a-fA-F]{2}|\r\n|[\s\S])"
)


class SyntaxKind(str, Enum):
    """Statement kinds visited by ModuleSyntax.visit"""

    IMPORT_DECLARATION = "import_declaration"
    VARIABLE_DECLARATION = "variable_declaration"


def language_for_path(path: str) -> str:
    """Grammar name for a module file"""
    ext = os.path.splitext(path)[1].lower()
    return _LANGUAGE_BY_EXTENSION.get(ext, "javascript")


def _code_point(body: str, digits: str, origin: Optional[str]) -> str:
    value = int(digits, 16)
    if value > MAX_CODE_POINT:
        details: Dict[str, Any] = {"escape": "\\" + body}
        if origin:
            details["path"] = origin
        raise ModuleSyntaxError(
            f"Undefined Unicode code-point \\{body} in {origin or '<module>'}", details
        )
    return chr(value)


def _replace_escape(match: "re.Match[str]", origin: Optional[str] = None) -> str:
    body = match.group(1)
    if body in _LINE_TERMINATORS:
        return ""
    if body.startswith("u{"):
        return _code_point(body, body[2:-1], origin)
    if body.startswith("u") and len(body) == 5:
        return chr(int(body[1:], 16))
    if body.startswith("x") and len(body) == 3:
        return chr(int(body[1:], 16))
    return _SIMPLE_ESCAPES.get(body, body)


def cook_escapes(raw: str, origin: Optional[str] = None) -> str:
    """
    Cook the escape sequences of raw literal text

    CRLF and CR are normalised to LF first; a backslash before a line
    terminator is a line continuation and yields nothing.

    Raises:
        ModuleSyntaxError: A `\\u{...}` escape is above U+10FFFF
    """
    raw = raw.replace("\r\n", "\n").replace("\r", "\n")
    return ESCAPE_PATTERN.sub(lambda match: _replace_escape(match, origin), raw)


class ModuleSyntax:
    """Parsed module: tree-sitter tree plus the source bytes it indexes"""

    def __init__(
        self, tree: Any, source: bytes, language: str, origin: Optional[str] = None
    ):
        self.tree = tree
        self.source = source
        self.language = language
        self.origin = origin

    @property
    def root(self) -> Any:
        return self.tree.root_node

    def text(self, node: Any) -> str:
        if node is None:
            return ""
        return self.source[node.start_byte : node.end_byte].decode("utf-8")

    def statements(self, kind: SyntaxKind) -> List[Any]:
        """Top-level statements of the given kind, in source order"""
        kind = SyntaxKind(kind)
        found = []
        for child in self.root.children:
            if kind == SyntaxKind.IMPORT_DECLARATION:
                if child.type == "import_statement":
                    found.append(child)
            elif child.type in _VARIABLE_DECLARATIONS:
                found.append(child)
            elif child.type == "export_statement":
                declaration = child.child_by_field_name("declaration")
                if declaration is not None and declaration.type in _VARIABLE_DECLARATIONS:
                    found.append(declaration)
        return found

    def visit(self, kind: SyntaxKind, handler: Callable[[Any], None]) -> None:
        for node in self.statements(kind):
            handler(node)

    def string_value(self, node: Any) -> str:
        """Cooked value of a quoted string literal node"""
        raw = self.source[node.start_byte + 1 : node.end_byte - 1].decode("utf-8")
        return cook_escapes(raw, self.origin)

    def template_literal_segments(self, node: Any) -> List[str]:
        """
        Cooked literal segments of a template literal

        Placeholders (`${...}`) split segments and are not part of the result.
        """
        segments = []
        cursor = node.start_byte + 1
        for child in node.children:
            if child.type == "template_substitution":
                segments.append(self.source[cursor : child.start_byte])
                cursor = child.end_byte
        segments.append(self.source[cursor : node.end_byte - 1])
        return [cook_escapes(segment.decode("utf-8"), self.origin) for segment in segments]


def _first_error(node: Any) -> Optional[Any]:
    if node.type == "ERROR" or node.is_missing:
        return node
    if not node.has_error:
        return None
    for child in node.children:
        found = _first_error(child)
        if found is not None:
            return found
    return node


def parse_module(
    source: str, language: str = "javascript", origin: Optional[str] = None
) -> ModuleSyntax:
    """
    Parse module source

    Args:
        source: Module source text
        language: tree-sitter grammar name (javascript, typescript, tsx)
        origin: File name used in error messages

    Returns:
        ModuleSyntax

    Raises:
        ModuleSyntaxError: The source contains a syntax error
    """
    parser = get_parser(language)
    data = source.encode("utf-8")
    tree = parser.parse(data)

    error = _first_error(tree.root_node)
    if error is not None:
        line, column = error.start_point[0] + 1, error.start_point[1] + 1
        where = origin or "<module>"
        details: Dict[str, Any] = {"line": line, "column": column, "language": language}
        if origin:
            details["path"] = origin
        raise ModuleSyntaxError(
            f"Syntax error in {where} at line {line}, column {column}", details
        )

    return ModuleSyntax(tree, data, language, origin)
