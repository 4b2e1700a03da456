"""JS/TS module syntax: parsing, import index, snippet extraction"""

from .parser import (
    ModuleSyntax,
    SyntaxKind,
    cook_escapes,
    language_for_path,
    parse_module,
)
from .imports import build_import_index, index_module_imports
from .extractor import extract_export, find_template_export

__all__ = [
    "ModuleSyntax",
    "SyntaxKind",
    "cook_escapes",
    "language_for_path",
    "parse_module",
    "build_import_index",
    "index_module_imports",
    "extract_export",
    "find_template_export",
]
