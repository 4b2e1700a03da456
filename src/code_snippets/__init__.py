"""
Code Snippets - splice exported snippets into Markdown/MDX code blocks

A code block written as

    ```ts code={snippetA}
    ```

in a document that imports `snippetA` from a module gets its content
replaced by the template literal that module exports as `snippetA`.
"""

__version__ = "0.1.0"

from .core import (
    # Errors
    CodeSnippetsError,
    ErrorKind,
    ModuleSyntaxError,
    MalformedImportError,
    UnresolvedReferenceError,
    ResolutionError,
    ExtractionError,
    FormattingError,
    # Core classes
    SnippetOptions,
    merge_options,
    load_options,
    Document,
    NodeKind,
    EsmNode,
    CodeNode,
    ContentNode,
    FileContext,
    parse_document,
    CodeBlockAnnotation,
    ModuleResolver,
)
from .formatting import Formatter, PrettierFormatter, parser_for_lang
from .syntax import build_import_index, extract_export
from .transform import CodeSnippetsTransform, transform_file, transform_markdown

__all__ = [
    "__version__",
    # Errors
    "CodeSnippetsError",
    "ErrorKind",
    "ModuleSyntaxError",
    "MalformedImportError",
    "UnresolvedReferenceError",
    "ResolutionError",
    "ExtractionError",
    "FormattingError",
    # Core
    "SnippetOptions",
    "merge_options",
    "load_options",
    "Document",
    "NodeKind",
    "EsmNode",
    "CodeNode",
    "ContentNode",
    "FileContext",
    "parse_document",
    "CodeBlockAnnotation",
    "ModuleResolver",
    # Formatting
    "Formatter",
    "PrettierFormatter",
    "parser_for_lang",
    # Syntax
    "build_import_index",
    "extract_export",
    # Transform
    "CodeSnippetsTransform",
    "transform_file",
    "transform_markdown",
]
