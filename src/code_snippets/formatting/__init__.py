"""Snippet formatting"""

from .dispatch import DEFAULT_PARSER, parser_for_lang
from .prettier import Formatter, PrettierFormatter, prettier_args

__all__ = [
    "DEFAULT_PARSER",
    "parser_for_lang",
    "Formatter",
    "PrettierFormatter",
    "prettier_args",
]
