"""Shared fixtures: snippet module trees and formatter doubles"""

from pathlib import Path
from typing import Any, Dict, List, Mapping, Tuple

import pytest

from code_snippets.core.errors import FormattingError
from code_snippets.formatting.prettier import Formatter


class RecordingFormatter(Formatter):
    """Returns the text with a trailing newline, like prettier does"""

    def __init__(self):
        self.calls: List[Tuple[str, Dict[str, Any]]] = []

    async def format(self, text: str, options: Mapping[str, Any]) -> str:
        self.calls.append((text, dict(options)))
        return text + "\n"


class FailingFormatter(Formatter):
    """Always fails, like prettier on invalid input"""

    def __init__(self):
        self.calls = 0

    async def format(self, text: str, options: Mapping[str, Any]) -> str:
        self.calls += 1
        raise FormattingError("SyntaxError: Unexpected token (1:7)")


def write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def snippets_dir(tmp_path: Path) -> Path:
    """`<tmp>/src/code-snippets` with demo.ts exporting snippetA"""
    root = tmp_path / "src" / "code-snippets"
    write(root / "demo.ts", "export const snippetA = `const x = 1;`;\n")
    return root


@pytest.fixture
def docs_dir(tmp_path: Path) -> Path:
    path = tmp_path / "docs"
    path.mkdir()
    return path


@pytest.fixture
def recording_formatter() -> RecordingFormatter:
    return RecordingFormatter()


@pytest.fixture
def failing_formatter() -> FailingFormatter:
    return FailingFormatter()
