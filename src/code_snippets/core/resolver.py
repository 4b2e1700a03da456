"""
Module path resolver

Turns an import specifier into an existing file path:
- `alias/rest` -> `<alias base>/rest` for the first matching alias
- anything else is resolved relative to the document directory
- each extension is appended in order, the first existing path wins
"""

import logging
import os
from typing import Callable, List, Mapping, Optional, Sequence, Tuple

from .errors import ResolutionError

logger = logging.getLogger(__name__)


class ModuleResolver:
    """
    Module resolver

    Examples (aliases={"@code": "/project/src/code-snippets"}):
    - @code/demo      -> /project/src/code-snippets/demo.ts
    - ./snippets/demo -> <document dir>/snippets/demo.ts
    - @codex/demo     -> <document dir>/@codex/demo.ts (alias matches whole segments only)
    """

    def __init__(
        self,
        aliases: Mapping[str, str],
        extensions: Sequence[str],
        file_exists: Optional[Callable[[str], bool]] = None,
    ):
        self.aliases = dict(aliases)
        self.extensions = list(extensions)
        self.file_exists = file_exists or os.path.isfile

    def apply_alias(self, specifier: str) -> Optional[str]:
        """
        Substitute the first alias whose `alias/` prefix matches

        Returns:
            Absolute base path, or None if no alias matched
        """
        for alias, alias_path in self.aliases.items():
            prefix = f"{alias}/"
            if specifier.startswith(prefix):
                return os.path.abspath(os.path.join(alias_path, specifier[len(prefix) :]))
        return None

    def base_path(self, specifier: str, dirname: str) -> str:
        """Base path before extension probing"""
        aliased = self.apply_alias(specifier)
        if aliased is not None:
            return aliased
        return os.path.abspath(os.path.join(dirname, specifier))

    def candidates(self, specifier: str, dirname: str) -> Tuple[str, List[str]]:
        base = self.base_path(specifier, dirname)
        return base, [base + ext for ext in self.extensions]

    def resolve(self, specifier: str, dirname: str) -> str:
        """
        Resolve a specifier to an existing file

        Args:
            specifier: Module specifier from an import statement
            dirname: Directory of the document doing the import

        Returns:
            Absolute path of the first existing candidate

        Raises:
            ResolutionError: No candidate exists
        """
        _, candidates = self.candidates(specifier, dirname)

        for path in candidates:
            if self.file_exists(path):
                logger.debug("Resolved '%s' to %s", specifier, path)
                return path
            logger.debug("Probed %s for '%s': not found", path, specifier)

        raise ResolutionError(specifier, candidates)
