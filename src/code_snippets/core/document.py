"""
Document tree

A minimal mdast-like model of a Markdown/MDX document: import-like ESM
blocks, fenced code blocks and opaque content blocks. Nodes are mutated in
place by the transform; to_markdown() renders the source back with only the
changed code blocks rewritten.
"""

import os
import re
from enum import Enum
from pathlib import Path
from typing import Callable, List, Literal, Optional, Tuple, Union

from markdown_it import MarkdownIt
from pydantic import BaseModel, Field, PrivateAttr

ESM_PATTERN = re.compile(r"^\s*(?:import|export)\b")


class NodeKind(str, Enum):
    """Node kinds the transform visits"""

    ESM = "mdxjsEsm"
    CODE = "code"
    CONTENT = "content"


class DocumentNode(BaseModel):
    """
    Document node base class

    start_line/end_line is the 0-based [start, end) line span in the source,
    None for nodes built by hand.
    """

    start_line: Optional[int] = None
    end_line: Optional[int] = None


class EsmNode(DocumentNode):
    """Import-like node embedding module syntax"""

    type: Literal[NodeKind.ESM] = NodeKind.ESM
    value: str


class ContentNode(DocumentNode):
    """Any other block, kept as raw text"""

    type: Literal[NodeKind.CONTENT] = NodeKind.CONTENT
    value: str = ""


class CodeNode(DocumentNode):
    """
    Fenced code block

    - lang: first word of the info string
    - meta: remainder of the info string, None when absent
    - value: block content without the trailing newline
    """

    type: Literal[NodeKind.CODE] = NodeKind.CODE
    lang: Optional[str] = None
    meta: Optional[str] = None
    value: str = ""
    markup: str = "```"
    prefix: str = ""

    _original: Optional[Tuple[Optional[str], Optional[str], str]] = PrivateAttr(
        default=None
    )
    _trailing_newline: bool = PrivateAttr(default=True)

    @property
    def info(self) -> str:
        return " ".join(part for part in (self.lang, self.meta) if part)

    def is_modified(self) -> bool:
        return self._original != (self.lang, self.meta, self.value)

    def render(self) -> str:
        """Render the block as fenced Markdown, re-applying its line prefix"""
        continuation = re.sub(r"[^>\s]", " ", self.prefix)
        value = self.value[:-1] if self.value.endswith("\n") else self.value

        lines = [f"{self.prefix}{self.markup}{self.info}"]
        if value:
            for line in value.split("\n"):
                lines.append(f"{continuation}{line}" if line else continuation.rstrip())
        lines.append(f"{continuation}{self.markup}")

        text = "\n".join(lines)
        return text + "\n" if self._trailing_newline else text


NodeType = Union[EsmNode, CodeNode, ContentNode]


class Document(BaseModel):
    """Parsed document: ordered nodes plus the source they came from"""

    children: List[NodeType] = Field(default_factory=list)
    source: str = ""

    def visit(self, kind: Union[NodeKind, str], handler: Callable[[NodeType], None]) -> None:
        """
        Call handler for every node of the given kind, in document order

        Args:
            kind: Node kind (NodeKind or its string value)
            handler: Callback receiving the mutable node
        """
        kind = NodeKind(kind)
        for node in list(self.children):
            if node.type == kind:
                handler(node)

    def nodes(self, kind: Union[NodeKind, str]) -> List[NodeType]:
        kind = NodeKind(kind)
        return [node for node in self.children if node.type == kind]

    def to_markdown(self) -> str:
        """Render the source back, rewriting changed code blocks only"""
        if not self.source:
            return "\n\n".join(_render_detached(node) for node in self.children)

        lines = self.source.splitlines(keepends=True)
        out: List[str] = []
        cursor = 0

        changed = [
            node
            for node in self.children
            if isinstance(node, CodeNode)
            and node.start_line is not None
            and node.end_line is not None
            and node.is_modified()
        ]
        for node in sorted(changed, key=lambda n: n.start_line):
            out.extend(lines[cursor : node.start_line])
            out.append(node.render())
            cursor = node.end_line

        out.extend(lines[cursor:])
        return "".join(out)


class FileContext(BaseModel):
    """File the document was read from; dirname anchors relative specifiers"""

    path: Optional[str] = None
    dirname: str = Field(default_factory=os.getcwd)

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> "FileContext":
        absolute = os.path.abspath(str(path))
        return cls(path=absolute, dirname=os.path.dirname(absolute))


def _render_detached(node: NodeType) -> str:
    if isinstance(node, CodeNode):
        return node.render().rstrip("\n")
    return node.value


def _split_info(info: str) -> Tuple[Optional[str], Optional[str]]:
    info = info.strip()
    if not info:
        return None, None
    parts = info.split(None, 1)
    lang = parts[0]
    meta = parts[1].strip() if len(parts) > 1 else None
    return lang, meta or None


def _fence_prefix(line: str, markup: str) -> str:
    index = line.find(markup)
    return line[:index] if index > 0 else ""


def parse_document(text: str) -> Document:
    """
    Parse Markdown/MDX source into a Document

    - every fenced block (at any nesting depth) becomes a CodeNode
    - top-level paragraphs starting with import/export become EsmNodes
    - other top-level blocks become ContentNodes

    Args:
        text: Markdown source

    Returns:
        Document
    """
    md = MarkdownIt("commonmark")
    tokens = md.parse(text)
    lines = text.splitlines(keepends=True)
    children: List[NodeType] = []

    def raw(span: List[int]) -> str:
        return "".join(lines[span[0] : span[1]]).rstrip("\n")

    for i, token in enumerate(tokens):
        if token.type == "fence" and token.map:
            start, end = token.map
            lang, meta = _split_info(token.info)
            content = token.content[:-1] if token.content.endswith("\n") else token.content
            node = CodeNode(
                lang=lang,
                meta=meta,
                value=content,
                markup=token.markup,
                prefix=_fence_prefix(lines[start], token.markup),
                start_line=start,
                end_line=end,
            )
            node._original = (node.lang, node.meta, node.value)
            node._trailing_newline = end > 0 and end <= len(lines) and lines[end - 1].endswith("\n")
            children.append(node)
            continue

        if token.level != 0 or token.nesting == -1 or not token.map:
            continue

        if token.type == "paragraph_open":
            inline = tokens[i + 1] if i + 1 < len(tokens) else None
            if inline is not None and ESM_PATTERN.match(inline.content):
                children.append(
                    EsmNode(value=raw(token.map), start_line=token.map[0], end_line=token.map[1])
                )
                continue

        children.append(
            ContentNode(value=raw(token.map), start_line=token.map[0], end_line=token.map[1])
        )

    return Document(children=children, source=text)
