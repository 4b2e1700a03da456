"""
Import index

Maps every locally bound name of a named import in the document's ESM
blocks to the module specifier it is imported from.
"""

import logging
from typing import Any, Dict

from ..core.document import Document, EsmNode, NodeKind
from ..core.errors import MalformedImportError, ModuleSyntaxError
from .parser import ModuleSyntax, SyntaxKind, parse_module

logger = logging.getLogger(__name__)


def _record_named_imports(syntax: ModuleSyntax, decl: Any, index: Dict[str, str]) -> None:
    source = decl.child_by_field_name("source")
    if source is None:
        return
    specifier = syntax.string_value(source)

    for clause in decl.children:
        if clause.type != "import_clause":
            continue
        for group in clause.children:
            # default and namespace imports are not indexed
            if group.type != "named_imports":
                continue
            for spec in group.children:
                if spec.type != "import_specifier":
                    continue
                local = spec.child_by_field_name("alias")
                if local is None:
                    local = spec.child_by_field_name("name")
                name = syntax.text(local)
                index[name] = specifier
                logger.debug("Import binding %s -> %s", name, specifier)


def index_module_imports(source: str, index: Dict[str, str]) -> None:
    """
    Add the named imports of one ESM block to index

    Raises:
        MalformedImportError: The block does not parse as a module
    """
    try:
        syntax = parse_module(source, "javascript")
    except ModuleSyntaxError as e:
        raise MalformedImportError(
            f"Malformed import block: {e.message}\n{source}",
            {**e.details, "source": source},
        ) from e

    syntax.visit(
        SyntaxKind.IMPORT_DECLARATION,
        lambda decl: _record_named_imports(syntax, decl, index),
    )


def build_import_index(document: Document) -> Dict[str, str]:
    """
    Build localName -> module specifier for the whole document

    Later bindings overwrite earlier ones with the same local name.

    Args:
        document: Parsed document

    Returns:
        Import index
    """
    index: Dict[str, str] = {}

    def handle(node: EsmNode) -> None:
        index_module_imports(node.value, index)

    document.visit(NodeKind.ESM, handle)
    return index
