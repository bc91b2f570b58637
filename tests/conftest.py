"""Pytest fixtures for v23 tooling tests."""

import json
from pathlib import Path

import pytest

from v23_tooling.context import Context
from v23_tooling.platforms import Platform

HOST = Platform(os="linux", arch="amd64")


@pytest.fixture
def v23_root(tmp_path: Path) -> Path:
    """Fake root: default manifest registering tool v23 in project devtools, plus conf.json."""
    root = (tmp_path / "v23").resolve()
    manifest_dir = root / ".manifest" / "v2"
    manifest_dir.mkdir(parents=True)
    (manifest_dir / "default").write_text(
        json.dumps(
            {
                "projects": {"devtools": {"path": "devtools"}},
                "tools": {"v23": {"project": "devtools", "data": "data"}},
            }
        )
    )
    data_dir = root / "devtools" / "data"
    data_dir.mkdir(parents=True)
    (data_dir / "conf.json").write_text(
        json.dumps({"goWorkspaces": ["release/go"], "vdlWorkspaces": ["release/go/src"]})
    )
    return root


@pytest.fixture
def environ(v23_root: Path) -> dict[str, str]:
    return {"V23_ROOT": str(v23_root), "PATH": "/usr/bin:/bin"}


@pytest.fixture
def ctx(environ: dict[str, str]) -> Context:
    return Context(environ=environ, host=HOST)
