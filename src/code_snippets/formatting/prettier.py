"""
Formatter capability

Formatters turn snippet text into formatted text and raise FormattingError
on failure. PrettierFormatter runs the prettier CLI as a subprocess, feeding
the snippet on stdin.
"""

import asyncio
import re
from abc import ABC, abstractmethod
from typing import Any, List, Mapping, Optional, Sequence

from ..core.config import DEFAULT_PRETTIER_COMMAND
from ..core.errors import FormattingError


class Formatter(ABC):
    """Formatter interface"""

    @abstractmethod
    async def format(self, text: str, options: Mapping[str, Any]) -> str:
        """
        Format text

        Args:
            text: Source text
            options: Formatter options, including the `parser` to use

        Returns:
            Formatted text

        Raises:
            FormattingError: Formatting failed
        """
        pass


def _kebab(name: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "-", name).lower()


def prettier_args(options: Mapping[str, Any]) -> List[str]:
    """
    Convert prettier options to CLI flags

    - printWidth=80  -> --print-width 80
    - useTabs=True   -> --use-tabs
    - semi=False     -> --no-semi
    - None values are skipped
    """
    args: List[str] = []
    for key, value in options.items():
        if value is None:
            continue
        flag = _kebab(key)
        if isinstance(value, bool):
            args.append(f"--{flag}" if value else f"--no-{flag}")
        else:
            args.extend([f"--{flag}", str(value)])
    return args


class PrettierFormatter(Formatter):
    """
    Prettier CLI formatter

    There is no timeout: a hung prettier process stalls the caller.
    """

    def __init__(self, command: Optional[Sequence[str]] = None):
        self.command = list(command or DEFAULT_PRETTIER_COMMAND)

    async def format(self, text: str, options: Mapping[str, Any]) -> str:
        cmd = self.command + prettier_args(options)

        try:
            process = await asyncio.create_subprocess_exec(
                *cmd,
                stdin=asyncio.subprocess.PIPE,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            raise FormattingError(
                f"Unable to launch prettier ({' '.join(self.command)}): {e}",
                {"command": cmd},
            ) from e

        stdout, stderr = await process.communicate(text.encode("utf-8"))
        if process.returncode != 0:
            message = stderr.decode("utf-8", errors="replace").strip()
            raise FormattingError(
                message or f"prettier exited with status {process.returncode}",
                {"command": cmd, "returncode": process.returncode},
            )

        return stdout.decode("utf-8")
