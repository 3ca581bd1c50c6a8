from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Literal, Protocol

DatabaseProvider = Literal[
    "none",
    "mysql",
    "postgres",
    "sqlite",
    "planetscale",
]

DATABASE_PROVIDERS: tuple[DatabaseProvider, ...] = (
    "none",
    "mysql",
    "postgres",
    "sqlite",
    "planetscale",
)

# Providers that ship a start-database/<provider>.sh template.
_DB_CONTAINER_PROVIDERS: frozenset[str] = frozenset({"mysql", "postgres"})


@dataclass(frozen=True)
class InstallerOptions:
    project_dir: str | os.PathLike[str]
    database_provider: str
    project_name: str


class Installer(Protocol):
    def __call__(self, opts: InstallerOptions) -> None: ...


def parse_database_provider(raw: Any) -> DatabaseProvider | None:
    v = str(raw or "").strip().lower()
    if v in DATABASE_PROVIDERS:
        return v  # type: ignore[return-value]
    return None


def uses_db_container(provider: str | None) -> bool:
    """Whether the start/stop database scripts apply to this provider."""
    return parse_database_provider(provider) in _DB_CONTAINER_PROVIDERS
