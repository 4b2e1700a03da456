"""
Code snippet transform

Replaces the content of every code block annotated with `code={name}` by
the template literal exported as `name` from the module the document
imports it from.

All lookups, file reads and metadata edits happen during one synchronous
pass over the document. Formatting is the only asynchronous work: one task
per block, scheduled during the pass and joined once after it.
"""

import asyncio
import logging
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from .core.annotation import CodeBlockAnnotation
from .core.config import SnippetOptions, merge_options
from .core.document import CodeNode, Document, FileContext, NodeKind, parse_document
from .core.errors import UnresolvedReferenceError
from .core.resolver import ModuleResolver
from .formatting.dispatch import parser_for_lang
from .formatting.prettier import Formatter, PrettierFormatter
from .syntax.extractor import extract_export
from .syntax.imports import build_import_index

logger = logging.getLogger(__name__)

OptionsType = Union[SnippetOptions, Mapping[str, Any], None]


class CodeSnippetsTransform:
    """
    Per-document transform

    Options are merged over the defaults once, at construction.
    """

    def __init__(
        self,
        options: OptionsType = None,
        formatter: Optional[Formatter] = None,
        file_exists: Optional[Callable[[str], bool]] = None,
    ):
        self.options = merge_options(options)
        self.resolver = ModuleResolver(
            self.options.aliases, self.options.extensions, file_exists=file_exists
        )
        self.formatter = formatter or PrettierFormatter(self.options.prettier_command)

    def load_snippet(self, identifier: str, import_index: Dict[str, str], dirname: str) -> str:
        """
        Resolve and extract the snippet a block references

        Raises:
            UnresolvedReferenceError: identifier is not imported by the document
            ResolutionError: the module file does not exist
            ExtractionError: the module has no matching export
        """
        specifier = import_index.get(identifier)
        if not specifier:
            raise UnresolvedReferenceError(identifier)

        path = self.resolver.resolve(specifier, dirname)
        return extract_export(path, identifier)

    async def format_into(self, node: CodeNode, code: str, lang: str) -> None:
        """Format code into node.value, falling back to the raw code on failure"""
        options = {**self.options.prettier_options, "parser": parser_for_lang(lang)}
        try:
            node.value = await self.formatter.format(code, options)
        except Exception as e:
            logger.warning("Failed to format code snippet: %s. Using raw code.", e)
            node.value = code

    async def __call__(self, document: Document, file: Optional[FileContext] = None) -> None:
        """
        Transform document in place

        Args:
            document: Parsed document
            file: Context of the file the document came from
        """
        file = file or FileContext()
        import_index = build_import_index(document)
        tasks: List["asyncio.Task[None]"] = []
        substituted = 0

        def handle(node: CodeNode) -> None:
            nonlocal substituted
            annotation = CodeBlockAnnotation.parse(node.meta, node.lang)
            if not annotation.has_reference:
                return

            snippet = self.load_snippet(
                annotation.referenced_identifier, import_index, file.dirname
            )
            code = snippet.strip()

            if annotation.language_tag is None:
                node.value = code
            else:
                tasks.append(
                    asyncio.create_task(self.format_into(node, code, annotation.language_tag))
                )

            node.meta = annotation.stripped_meta()
            substituted += 1

        try:
            document.visit(NodeKind.CODE, handle)
        except BaseException:
            for task in tasks:
                task.cancel()
            raise

        await asyncio.gather(*tasks)

        if substituted:
            logger.info(
                "Substituted %d code block(s) in %s", substituted, file.path or file.dirname
            )


async def transform_markdown(
    text: str,
    file: Optional[FileContext] = None,
    options: OptionsType = None,
    formatter: Optional[Formatter] = None,
) -> str:
    """Parse, transform and render Markdown/MDX source"""
    document = parse_document(text)
    await CodeSnippetsTransform(options, formatter=formatter)(document, file)
    return document.to_markdown()


async def transform_file(
    path: Union[str, Path],
    options: OptionsType = None,
    formatter: Optional[Formatter] = None,
) -> str:
    """
    Transform a Markdown/MDX file

    The file is not written; the rendered text is returned.
    """
    with open(path, "r", encoding="utf-8") as f:
        text = f.read()
    return await transform_markdown(text, FileContext.from_path(path), options, formatter)
