"""
Code snippets configuration

Default options, merge semantics and loading options from a YAML or JSON file.
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field

DEFAULT_EXTENSIONS: List[str] = [
    ".ts",
    ".tsx",
    ".js",
    ".jsx",
    "/index.ts",
    "/index.tsx",
    "/index.js",
    "/index.jsx",
]

DEFAULT_PRETTIER_OPTIONS: Dict[str, Any] = {
    "printWidth": 80,
    "tabWidth": 2,
    "useTabs": False,
    "semi": True,
    "singleQuote": True,
    "trailingComma": "es5",
    "bracketSpacing": True,
    "arrowParens": "avoid",
}

DEFAULT_PRETTIER_COMMAND: List[str] = ["npx", "prettier"]


def default_aliases() -> Dict[str, str]:
    """Built-in aliases, resolved against the current working directory"""
    return {"@code": os.path.abspath(os.path.join(os.getcwd(), "src", "code-snippets"))}


class SnippetOptions(BaseModel):
    """
    Transform options

    - aliases: alias prefix -> absolute base path, matched in insertion order
    - extensions: candidate suffixes, probed in order
    - prettier_options: forwarded verbatim to the formatter
    - prettier_command: argv prefix used to launch prettier
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    aliases: Dict[str, str] = Field(default_factory=dict)
    extensions: List[str] = Field(default_factory=list)
    prettier_options: Dict[str, Any] = Field(
        default_factory=dict, validation_alias="prettierOptions"
    )
    prettier_command: Optional[List[str]] = Field(
        default=None, validation_alias="prettierCommand"
    )


def merge_options(
    options: Union[SnippetOptions, Mapping[str, Any], None] = None,
) -> SnippetOptions:
    """
    Merge caller options over the defaults

    - aliases: per-key override, default keys keep their position
    - extensions: caller list appended after the defaults
    - prettier_options: per-key override

    Args:
        options: Caller options (None, a mapping or SnippetOptions)

    Returns:
        Fully populated SnippetOptions
    """
    if options is None:
        user = SnippetOptions()
    elif isinstance(options, SnippetOptions):
        user = options
    else:
        user = SnippetOptions.model_validate(dict(options))

    return SnippetOptions(
        aliases={**default_aliases(), **user.aliases},
        extensions=[*DEFAULT_EXTENSIONS, *user.extensions],
        prettier_options={**DEFAULT_PRETTIER_OPTIONS, **user.prettier_options},
        prettier_command=list(user.prettier_command or DEFAULT_PRETTIER_COMMAND),
    )


def load_options(config_path: Union[str, Path]) -> SnippetOptions:
    """
    Load options from a JSON or YAML file and merge them over the defaults

    Args:
        config_path: Path to configuration file

    Returns:
        Merged SnippetOptions
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        if config_path.suffix.lower() in [".yaml", ".yml"]:
            data = yaml.safe_load(f)
        elif config_path.suffix.lower() == ".json":
            data = json.load(f)
        else:
            raise ValueError(f"Unsupported config file format: {config_path.suffix}")

    return merge_options(data or {})
