"""Environment snapshots: a private, mutable copy of environment variables.

A ``Snapshot`` starts as a copy of some base mapping (usually ``os.environ``)
and is mutated locally. Nothing is written back to the process environment;
callers hand ``to_dict()`` to ``subprocess.run(env=...)``.
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping


class Snapshot:
    """Mutable copy of an environment with helpers for token-list variables."""

    def __init__(self, base: Mapping[str, str] | None = None) -> None:
        self._base: dict[str, str] = dict(base or {})
        self._current: dict[str, str] = dict(self._base)

    @classmethod
    def from_os(cls) -> Snapshot:
        """Snapshot of the live process environment."""
        return cls(os.environ)

    def __contains__(self, key: object) -> bool:
        return key in self._current

    def get(self, key: str, default: str = "") -> str:
        return self._current.get(key, default)

    def set(self, key: str, value: str) -> None:
        self._current[key] = value

    def get_tokens(self, key: str, sep: str) -> list[str]:
        """Split ``key`` on ``sep``. Unset and empty variables yield ``[]``."""
        value = self._current.get(key, "")
        if not value:
            return []
        return [token for token in value.split(sep) if token]

    def set_tokens(self, key: str, tokens: Iterable[str], sep: str) -> None:
        self._current[key] = sep.join(tokens)

    def to_dict(self) -> dict[str, str]:
        return dict(self._current)

    def delta(self) -> dict[str, str]:
        """Variables whose value was added or changed since the snapshot was taken."""
        return {k: v for k, v in self._current.items() if self._base.get(k) != v}
