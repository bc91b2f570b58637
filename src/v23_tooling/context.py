"""Invocation context: the environment, host and registry a command runs against."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

from v23_tooling.manifest import Registry, load_registry
from v23_tooling.paths import resolve_manifest_path, v23_root
from v23_tooling.platforms import Platform, host_platform

DEFAULT_TOOL = "v23"


@dataclass
class Context:
    """Explicit inputs for resolution.

    ``environ`` is the environment captured when the command started; every
    resolution starts from a fresh copy of it.
    """

    environ: Mapping[str, str] = field(default_factory=dict)
    tool_name: str = DEFAULT_TOOL
    host: Platform = field(default_factory=host_platform)
    registry: Registry | None = None
    manifest: str = ""
    _registry_manifest: str | None = field(default=None, init=False, repr=False, compare=False)

    @classmethod
    def from_os(cls, tool_name: str = DEFAULT_TOOL, manifest: str = "") -> Context:
        return cls(environ=dict(os.environ), tool_name=tool_name or DEFAULT_TOOL, manifest=manifest)

    def load_registry(self) -> Registry:
        """Registry from the resolved manifest, cached until ``manifest`` changes.

        A registry passed to the constructor is always used as is.
        """
        stale = self._registry_manifest is not None and self._registry_manifest != self.manifest
        if self.registry is None or stale:
            path = resolve_manifest_path(self.manifest, self.environ)
            self.registry = load_registry(path, v23_root(self.environ))
            self._registry_manifest = self.manifest
        return self.registry
