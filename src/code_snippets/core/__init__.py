"""Code snippets core: errors, options, document model, annotations, resolver"""

from .errors import (
    CodeSnippetsError,
    ErrorKind,
    ModuleSyntaxError,
    MalformedImportError,
    UnresolvedReferenceError,
    ResolutionError,
    ExtractionError,
    FormattingError,
)
from .config import (
    SnippetOptions,
    DEFAULT_EXTENSIONS,
    DEFAULT_PRETTIER_OPTIONS,
    default_aliases,
    merge_options,
    load_options,
)
from .document import (
    Document,
    DocumentNode,
    NodeKind,
    EsmNode,
    CodeNode,
    ContentNode,
    FileContext,
    parse_document,
)
from .annotation import CodeBlockAnnotation
from .resolver import ModuleResolver

__all__ = [
    # Errors
    "CodeSnippetsError",
    "ErrorKind",
    "ModuleSyntaxError",
    "MalformedImportError",
    "UnresolvedReferenceError",
    "ResolutionError",
    "ExtractionError",
    "FormattingError",
    # Options
    "SnippetOptions",
    "DEFAULT_EXTENSIONS",
    "DEFAULT_PRETTIER_OPTIONS",
    "default_aliases",
    "merge_options",
    "load_options",
    # Document
    "Document",
    "DocumentNode",
    "NodeKind",
    "EsmNode",
    "CodeNode",
    "ContentNode",
    "FileContext",
    "parse_document",
    # Annotation
    "CodeBlockAnnotation",
    # Resolver
    "ModuleResolver",
]
