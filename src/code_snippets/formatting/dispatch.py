"""Language tag -> prettier parser"""

from typing import Optional

DEFAULT_PARSER = "babel"

PARSER_BY_LANG = {
    "js": "babel",
    "jsx": "babel",
    "javascript": "babel",
    "ts": "typescript",
    "tsx": "typescript",
    "typescript": "typescript",
    "css": "css",
    "scss": "scss",
    "sass": "scss",
    "html": "html",
    "xml": "html",
    "svg": "html",
    "json": "json",
    "md": "markdown",
    "markdown": "markdown",
    "yaml": "yaml",
    "yml": "yaml",
    "graphql": "graphql",
    "gql": "graphql",
}


def parser_for_lang(lang: Optional[str]) -> str:
    """Prettier parser for a code block language; unknown languages use babel"""
    if not lang:
        return DEFAULT_PARSER
    return PARSER_BY_LANG.get(lang.lower(), DEFAULT_PARSER)
