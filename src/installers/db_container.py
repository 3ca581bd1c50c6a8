"""Database container installer step.

Writes ``start-database.sh`` and ``stop-database.sh`` into a freshly scaffolded
project. The start script comes from a provider-specific template in which every
``project1`` is replaced by the Docker-safe project name; the stop script is the
same for all providers and is copied verbatim. Both end up with mode 0o755.

Errors are not handled here: a missing template raises TemplateNotFoundError
before anything is written, every other OSError reaches the caller as-is.
Re-running simply overwrites both files.
"""

from __future__ import annotations

import asyncio
import errno
import logging
import os
import re
import shutil
from pathlib import Path

from src.installers.config import template_root as _configured_template_root
from src.installers.registry import InstallerOptions
from src.utils.parse_name_and_path import parse_name_and_path

logger = logging.getLogger(__name__)

# Template authors rely on this exact token. Bump the version if it ever changes.
PLACEHOLDER = "project1"
PLACEHOLDER_VERSION = 1

START_SCRIPT_NAME = "start-database.sh"
STOP_SCRIPT_NAME = "stop-database.sh"
SCRIPT_MODE = 0o755

_UNSAFE_NAME_RE = re.compile(r"[^a-zA-Z0-9_.-]")


class TemplateNotFoundError(FileNotFoundError):
    """No start-database template exists for the requested provider."""

    def __init__(self, provider: str, path: str | os.PathLike[str]) -> None:
        super().__init__(
            errno.ENOENT,
            f"No start-database template for provider {provider!r}",
            os.fspath(path),
        )
        self.provider = provider


def sanitize_name(name: str) -> str:
    """Map a project name onto Docker container name characters.

    Each character outside ``[a-zA-Z0-9_.-]`` becomes ``_``, then the result is
    lowercased. Length is preserved. Empty or all-underscore results are
    returned unchanged.
    """
    return _UNSAFE_NAME_RE.sub("_", name).lower()


def render_start_script(template_text: str, project_name: str) -> str:
    return template_text.replace(PLACEHOLDER, sanitize_name(project_name))


def _effective_project_name(project_dir: str | os.PathLike[str], project_name: str) -> str:
    # "." means "scaffold into the current directory": name it after the directory.
    if project_name == ".":
        name, _path = parse_name_and_path(project_dir)
        return name
    return project_name


def _start_template_path(root: Path, database_provider: str) -> Path:
    return root / "start-database" / f"{database_provider}.sh"


def _stop_template_path(root: Path) -> Path:
    return root / "start-database" / STOP_SCRIPT_NAME


def install_db_container(
    *,
    project_dir: str | os.PathLike[str],
    database_provider: str,
    project_name: str,
    template_root: str | os.PathLike[str] | None = None,
) -> None:
    root = Path(template_root) if template_root is not None else _configured_template_root()
    dest_dir = Path(project_dir)

    script_src = _start_template_path(root, database_provider)
    logger.debug("start-database template: %s", script_src)
    try:
        raw = script_src.read_bytes()
    except FileNotFoundError as exc:
        raise TemplateNotFoundError(database_provider, script_src) from exc
    # Undecodable bytes become U+FFFD rather than failing the step.
    script_text = raw.decode("utf-8", errors="replace")

    name = _effective_project_name(project_dir, project_name)
    logger.debug("effective project name: %r -> %r", name, sanitize_name(name))

    script_dest = dest_dir / START_SCRIPT_NAME
    script_dest.write_bytes(render_start_script(script_text, name).encode("utf-8"))
    os.chmod(script_dest, SCRIPT_MODE)
    logger.info("Wrote %s (provider=%s)", script_dest, database_provider)

    stop_src = _stop_template_path(root)
    stop_dest = dest_dir / STOP_SCRIPT_NAME
    logger.debug("stop-database template: %s", stop_src)
    shutil.copyfile(stop_src, stop_dest)
    os.chmod(stop_dest, SCRIPT_MODE)
    logger.info("Wrote %s", stop_dest)


async def install_db_container_async(
    *,
    project_dir: str | os.PathLike[str],
    database_provider: str,
    project_name: str,
    template_root: str | os.PathLike[str] | None = None,
) -> None:
    await asyncio.to_thread(
        install_db_container,
        project_dir=project_dir,
        database_provider=database_provider,
        project_name=project_name,
        template_root=template_root,
    )


def db_container_installer(opts: InstallerOptions) -> None:
    install_db_container(
        project_dir=opts.project_dir,
        database_provider=opts.database_provider,
        project_name=opts.project_name,
    )
