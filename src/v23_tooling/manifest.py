"""Project/tool registry read from a JSON manifest.

Manifest format:
- projects: map project name -> { path }  (path relative to the root unless absolute)
- tools: map tool name -> { project, data }  (data relative to the project path)
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from v23_tooling.errors import ParseError, ToolingIOError

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Project:
    name: str
    path: Path


@dataclass(frozen=True)
class Tool:
    name: str
    project: str
    data: str


@dataclass
class Registry:
    projects: dict[str, Project] = field(default_factory=dict)
    tools: dict[str, Tool] = field(default_factory=dict)


def _section(data: dict[str, Any], key: str, path: Path) -> dict[str, dict[str, Any]]:
    section = data.get(key) or {}
    if not isinstance(section, dict) or not all(isinstance(v, dict) for v in section.values()):
        msg = f"{path}: {key!r} must map names to objects"
        raise ParseError(msg)
    return section


def registry_from_dict(
    data: dict[str, Any], root: Path, source: Path = Path("<manifest>")
) -> Registry:
    """Build a Registry from parsed manifest data. Relative project paths join ``root``."""
    registry = Registry()
    for name, proj in _section(data, "projects", source).items():
        path = Path(str(proj.get("path") or name))
        if not path.is_absolute():
            path = root / path
        registry.projects[name] = Project(name=name, path=path)
    for name, tool in _section(data, "tools", source).items():
        registry.tools[name] = Tool(
            name=name,
            project=str(tool.get("project", "")),
            data=str(tool.get("data", "")),
        )
    return registry


def load_registry(path: Path, root: Path) -> Registry:
    """Load the registry from the JSON manifest at ``path``."""
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        msg = f"decoding manifest {path} failed: {e}"
        raise ParseError(msg) from e
    except OSError as e:
        msg = f"reading manifest {path} failed: {e}"
        raise ToolingIOError(msg) from e
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        msg = f"parsing manifest {path} failed: {e}"
        raise ParseError(msg) from e
    if not isinstance(data, dict):
        msg = f"{path}: manifest must be a JSON object"
        raise ParseError(msg)
    registry = registry_from_dict(data, root, path)
    log.debug(
        "loaded %d projects and %d tools from %s",
        len(registry.projects),
        len(registry.tools),
        path,
    )
    return registry
