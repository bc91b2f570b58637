"""Tool configuration (conf.json) and per-tool data directories.

conf.json format (only the keys read here):
- goWorkspaces: root-relative Go workspace directories (appended to GOPATH)
- vdlWorkspaces: root-relative VDL workspace directories (appended to VDLPATH)
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from v23_tooling.context import DEFAULT_TOOL, Context
from v23_tooling.errors import NotFoundError, ParseError, ToolingIOError

log = logging.getLogger(__name__)

CONFIG_FILE = "conf.json"
BUILD_COP_FILE = "buildcop.xml"


@dataclass
class Config:
    go_workspaces: list[str] = field(default_factory=list)
    vdl_workspaces: list[str] = field(default_factory=list)
    raw: dict[str, Any] = field(default_factory=dict)


def _string_list(data: dict[str, Any], key: str, path: Path) -> list[str]:
    value = data.get(key) or []
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        msg = f"{path}: {key!r} must be a list of strings"
        raise ParseError(msg)
    return list(value)


def config_from_dict(data: dict[str, Any], source: Path = Path(CONFIG_FILE)) -> Config:
    return Config(
        go_workspaces=_string_list(data, "goWorkspaces", source),
        vdl_workspaces=_string_list(data, "vdlWorkspaces", source),
        raw=data,
    )


def data_dir_path(ctx: Context, tool_name: str = "") -> Path:
    """Data directory of ``tool_name`` (default ``v23``): <project path>/<tool data>."""
    registry = ctx.load_registry()
    name = tool_name or DEFAULT_TOOL
    tool = registry.tools.get(name)
    if tool is None:
        msg = f"tool {name!r} not found in the manifest"
        raise NotFoundError(msg)
    project = registry.projects.get(tool.project)
    if project is None:
        msg = f"project {tool.project!r} not found in the manifest"
        raise NotFoundError(msg)
    return project.path / tool.data


def load_config(ctx: Context) -> Config:
    """Read and parse <data dir>/conf.json for the context's tool."""
    path = data_dir_path(ctx, ctx.tool_name) / CONFIG_FILE
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        msg = f"decoding {path} failed: {e}"
        raise ParseError(msg) from e
    except OSError as e:
        msg = f"reading {path} failed: {e}"
        raise ToolingIOError(msg) from e
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        msg = f"parsing {path} failed: {e}"
        raise ParseError(msg) from e
    if not isinstance(data, dict):
        msg = f"{path}: config must be a JSON object"
        raise ParseError(msg)
    config = config_from_dict(data, path)
    log.debug("loaded config %s", path)
    return config


def build_cop_rotation_path(ctx: Context) -> Path:
    """Path of the build cop rotation file for the context's tool."""
    return data_dir_path(ctx, ctx.tool_name) / BUILD_COP_FILE
