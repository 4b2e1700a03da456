"""
Code snippet exception definitions

Every failure of the transform is one of these types. Only FormattingError
is recovered locally; everything else aborts the document transform.
"""

from enum import Enum
from typing import Any, Dict, List, Optional


class ErrorKind(str, Enum):
    """Tag carried by every CodeSnippetsError"""

    SYNTAX = "syntax"
    MALFORMED_IMPORT = "malformed_import"
    UNRESOLVED_REFERENCE = "unresolved_reference"
    RESOLUTION = "resolution"
    EXTRACTION = "extraction"
    FORMATTING = "formatting"


class CodeSnippetsError(Exception):
    """Code snippets base exception"""

    kind: ErrorKind = ErrorKind.SYNTAX

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ModuleSyntaxError(CodeSnippetsError):
    """
    Module syntax error

    The source text of a module (or of an embedded import block) does not
    parse. details carries the 1-based line/column of the first error.
    """

    kind = ErrorKind.SYNTAX


class MalformedImportError(ModuleSyntaxError):
    """An import block embedded in the document fails to parse"""

    kind = ErrorKind.MALFORMED_IMPORT


class UnresolvedReferenceError(CodeSnippetsError):
    """
    Unresolved reference

    A code block references an identifier that no import in the document binds.
    """

    kind = ErrorKind.UNRESOLVED_REFERENCE

    def __init__(self, identifier: str):
        message = (
            f'No import path found for variable "{identifier}".\n'
            f"Make sure the variable is imported in the document, for example:\n\n"
            f"import {{{identifier}}} from 'codeSnippetsPath'\n\n"
            f"If the snippet is exported with `export default`, export it by name instead."
        )
        super().__init__(message, {"identifier": identifier})
        self.identifier = identifier


class ResolutionError(CodeSnippetsError):
    """
    Module resolution error

    No candidate path exists after alias substitution and extension probing.
    """

    kind = ErrorKind.RESOLUTION

    def __init__(self, specifier: str, attempted: List[str]):
        tried = "\n".join(f"- {path}" for path in attempted)
        message = (
            f'Unable to resolve "{specifier}"; none of the following paths exist:\n'
            f"{tried}\n"
            f"If you renamed or moved the file, restart the build."
        )
        super().__init__(message, {"specifier": specifier, "attempted": list(attempted)})
        self.specifier = specifier
        self.attempted = list(attempted)


class ExtractionError(CodeSnippetsError):
    """The resolved module has no matching literal-valued declaration"""

    kind = ErrorKind.EXTRACTION

    def __init__(self, path: str, identifier: str):
        super().__init__(
            f"export const {identifier} not found in {path}",
            {"path": path, "identifier": identifier},
        )
        self.path = path
        self.identifier = identifier


class FormattingError(CodeSnippetsError):
    """
    Formatting error

    Raised by formatter capabilities. The transform recovers from it by
    falling back to the unformatted snippet.
    """

    kind = ErrorKind.FORMATTING
