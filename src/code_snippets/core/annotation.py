"""
Code block annotations

A code block references a snippet with a `code={identifier}` marker in its
metadata string.
"""

import re
from typing import Optional

from pydantic import BaseModel

MARKER_PREFIX = "code={"
MARKER_PATTERN = re.compile(r"code=\{(?P<identifier>[a-zA-Z0-9_]+)\}\s*")


class CodeBlockAnnotation(BaseModel):
    """
    Parsed code block metadata

    - raw_meta: metadata string as found on the block
    - referenced_identifier: identifier named by the marker, None if absent
    - language_tag: language of the block, None if absent
    """

    raw_meta: Optional[str] = None
    referenced_identifier: Optional[str] = None
    language_tag: Optional[str] = None

    @classmethod
    def parse(cls, meta: Optional[str], lang: Optional[str] = None) -> "CodeBlockAnnotation":
        identifier = None
        if meta and MARKER_PREFIX in meta:
            match = MARKER_PATTERN.search(meta)
            if match:
                identifier = match.group("identifier")
        return cls(raw_meta=meta, referenced_identifier=identifier, language_tag=lang or None)

    @property
    def has_reference(self) -> bool:
        return self.referenced_identifier is not None

    def stripped_meta(self) -> Optional[str]:
        """
        Metadata with the marker and its trailing whitespace removed

        Returns None when nothing but the marker was present.
        """
        if not self.raw_meta:
            return self.raw_meta
        match = MARKER_PATTERN.search(self.raw_meta)
        if not match:
            return self.raw_meta
        stripped = (self.raw_meta[: match.start()] + self.raw_meta[match.end() :]).strip()
        return stripped or None
