"""
Export extractor

Finds `const <name> = `...`` at the top level of a module and returns the
text of its template literal.
"""

import logging
from typing import Any, Optional

from ..core.errors import ExtractionError
from .parser import ModuleSyntax, SyntaxKind, language_for_path, parse_module

logger = logging.getLogger(__name__)


def find_template_export(syntax: ModuleSyntax, identifier: str) -> Optional[str]:
    """
    Text of the last top-level declarator binding identifier to a template literal

    Placeholders are dropped; only the literal segments are concatenated.

    Returns:
        Snippet text, or None if no declarator matches
    """
    found: Optional[str] = None

    def handle(decl: Any) -> None:
        nonlocal found
        for declarator in decl.children:
            if declarator.type != "variable_declarator":
                continue
            name = declarator.child_by_field_name("name")
            value = declarator.child_by_field_name("value")
            if name is None or name.type != "identifier" or syntax.text(name) != identifier:
                continue
            if value is None or value.type != "template_string":
                continue

            segments = syntax.template_literal_segments(value)
            if len(segments) > 1:
                logger.debug(
                    "Dropping %d placeholder(s) from template literal '%s'",
                    len(segments) - 1,
                    identifier,
                )
            found = "".join(segments)

    syntax.visit(SyntaxKind.VARIABLE_DECLARATION, handle)
    return found


def extract_export(path: str, identifier: str) -> str:
    """
    Read, parse and extract a snippet export from a module file

    Args:
        path: Resolved module path
        identifier: Exported variable name

    Returns:
        Raw snippet text (untrimmed)

    Raises:
        ModuleSyntaxError: The module does not parse
        ExtractionError: No matching declaration
    """
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        source = f.read()

    syntax = parse_module(source, language_for_path(path), origin=path)
    snippet = find_template_export(syntax, identifier)
    if snippet is None:
        raise ExtractionError(path, identifier)

    logger.debug("Extracted '%s' from %s (%d chars)", identifier, path, len(snippet))
    return snippet
