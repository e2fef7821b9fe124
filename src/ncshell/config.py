"""Configuration system with a minimal YAML parser.

Supports loading configuration from YAML files in the configs/ directory.
The parser (no external dependencies) understands the subset ncshell
configs use:
- Scalars (strings, numbers, booleans, null)
- Nested mappings (key: value syntax, indented children)
- Comments (# ...)
- Quoted strings (single and double), so prompts can keep trailing spaces
"""

from __future__ import annotations

from dataclasses import dataclass, field
from importlib.resources import as_file, files
from pathlib import Path

from ncshell.constants import DEFAULT_CURSOR_MARGIN, DEFAULT_PROMPT

# --- Minimal YAML Parser ---


def parse_simple_yaml(text: str) -> dict:
    """Parse a simple YAML mapping document into a Python dict."""
    lines = []
    for raw in text.split("\n"):
        stripped = raw.strip()
        if not stripped or stripped.startswith("#"):
            continue
        lines.append((len(raw) - len(raw.lstrip()), stripped))
    return _parse_mapping(lines, 0, 0)[0]


def _parse_mapping(lines: list[tuple[int, str]], start: int, indent: int) -> tuple[dict, int]:
    """Parse entries at exactly ``indent`` starting at ``start``."""
    result: dict = {}
    i = start
    while i < len(lines):
        line_indent, content = lines[i]
        if line_indent < indent:
            break
        if line_indent > indent:
            # Stray over-indented line; skip it
            i += 1
            continue

        colon = _find_unquoted_colon(content)
        if colon <= 0:
            i += 1
            continue
        key = content[:colon].strip()
        value = _remove_inline_comment(content[colon + 1:].strip())
        i += 1

        if value:
            result[key] = _parse_value(value)
        elif i < len(lines) and lines[i][0] > indent:
            result[key], i = _parse_mapping(lines, i, lines[i][0])
        else:
            result[key] = None
    return result, i


def _find_unquoted_colon(s: str) -> int:
    """Find the position of the first colon not inside quotes."""
    quote = None
    for i, c in enumerate(s):
        if quote:
            if c == quote:
                quote = None
        elif c in ("'", '"'):
            quote = c
        elif c == ":":
            return i
    return -1


def _remove_inline_comment(s: str) -> str:
    """Strip a trailing ``# comment`` that sits outside quotes."""
    quote = None
    for i, c in enumerate(s):
        if quote:
            if c == quote:
                quote = None
        elif c in ("'", '"'):
            quote = c
        elif c == "#" and (i == 0 or s[i - 1] == " "):
            return s[:i].rstrip()
    return s


_ESCAPES = {"n": "\n", "t": "\t", "\\": "\\", '"': '"'}


def _parse_value(s: str) -> str | int | float | bool | None:
    """Parse a scalar YAML value."""
    s = s.strip()
    if not s or s.lower() in ("null", "~", "none"):
        return None

    if s.lower() in ("true", "yes", "on"):
        return True
    if s.lower() in ("false", "no", "off"):
        return False

    if len(s) >= 2 and s[0] == s[-1] and s[0] in ("'", '"'):
        body = s[1:-1]
        if s[0] == "'":
            return body.replace("''", "'")
        out = []
        i = 0
        while i < len(body):
            if body[i] == "\\" and i + 1 < len(body):
                out.append(_ESCAPES.get(body[i + 1], body[i:i + 2]))
                i += 2
            else:
                out.append(body[i])
                i += 1
        return "".join(out)

    try:
        if "." in s:
            return float(s)
        return int(s)
    except ValueError:
        return s


# --- Configuration Dataclasses ---


@dataclass
class ShellConfig:
    """Prompt and input line settings."""

    prompt: str = DEFAULT_PROMPT
    cursor_margin: int = DEFAULT_CURSOR_MARGIN
    welcome: str | None = "Type 'help' for a list of commands."


@dataclass
class DebugConfig:
    """Debug log settings."""

    enabled: bool = False
    directory: str = "."


@dataclass
class Config:
    """Complete application configuration."""

    shell: ShellConfig = field(default_factory=ShellConfig)
    debug: DebugConfig = field(default_factory=DebugConfig)


# --- Config Loading ---


def _get_user_data_dir() -> Path:
    """Get the user's ncshell data directory ($HOME/.ncshell)."""
    return Path.home() / ".ncshell"


def _looks_like_path(name: str) -> bool:
    return "/" in name or "\\" in name or name.endswith(".yml")


def _find_config_file(config_name_or_path: str) -> Path | None:
    """Find a config file by name or path.

    Search order:
    1. If it looks like a path (contains / or \\ or ends in .yml), treat as path
    2. $HOME/.ncshell/configs/<name>.yml
    3. Current working directory configs/<name>.yml
    4. Bundled ncshell.configs package
    """
    if _looks_like_path(config_name_or_path):
        path = Path(config_name_or_path).expanduser()
        return path if path.is_file() else None

    config_filename = f"{config_name_or_path}.yml"

    user_config = _get_user_data_dir() / "configs" / config_filename
    if user_config.is_file():
        return user_config

    cwd_config = Path.cwd() / "configs" / config_filename
    if cwd_config.is_file():
        return cwd_config

    try:
        config_ref = files("ncshell.configs").joinpath(config_filename)
        with as_file(config_ref) as p:
            if p.is_file():
                return Path(p)
    except (ModuleNotFoundError, FileNotFoundError, TypeError):
        pass

    return None


def _get_config_search_paths(config_name: str) -> list[str]:
    """Get list of paths that would be searched for a config name."""
    config_filename = f"{config_name}.yml"
    return [
        str(_get_user_data_dir() / "configs" / config_filename),
        str(Path.cwd() / "configs" / config_filename),
        f"ncshell.configs/{config_filename} (bundled)",
    ]


def load_config(config_name_or_path: str | None = None) -> Config:
    """Load configuration from a YAML file.

    Args:
        config_name_or_path: Name of config file (without .yml extension),
                            or path to a config file. If None or empty, uses 'default'.

    Returns:
        Config object with loaded values merged over defaults.

    Raises:
        FileNotFoundError: If a non-default config is specified but not found.
    """
    if not config_name_or_path:
        config_name_or_path = "default"

    config_path = _find_config_file(config_name_or_path)
    config = Config()

    if config_path is None:
        if config_name_or_path == "default":
            return config
        if _looks_like_path(config_name_or_path):
            raise FileNotFoundError(f"Config file not found: {config_name_or_path}")
        paths_str = "\n  - ".join(_get_config_search_paths(config_name_or_path))
        raise FileNotFoundError(
            f"Config '{config_name_or_path}' not found. Searched:\n  - {paths_str}"
        )

    with open(config_path, encoding="utf-8") as f:
        _merge_config(config, parse_simple_yaml(f.read()))
    return config


def _merge_config(config: Config, data: dict):
    """Merge parsed YAML data into a Config object.

    Values of the wrong type are ignored and the default is kept.
    """
    if not isinstance(data, dict):
        return

    shell = data.get("shell")
    if isinstance(shell, dict):
        if isinstance(shell.get("prompt"), str):
            config.shell.prompt = shell["prompt"]
        margin = shell.get("cursor_margin")
        if isinstance(margin, int) and not isinstance(margin, bool) and margin >= 0:
            config.shell.cursor_margin = margin
        if "welcome" in shell and (shell["welcome"] is None or isinstance(shell["welcome"], str)):
            config.shell.welcome = shell["welcome"]

    debug = data.get("debug")
    if isinstance(debug, dict):
        if isinstance(debug.get("enabled"), bool):
            config.debug.enabled = debug["enabled"]
        if isinstance(debug.get("directory"), str):
            config.debug.directory = debug["directory"]


def get_default_config() -> Config:
    """Return a Config with all default values."""
    return Config()
