from __future__ import annotations

import os
from pathlib import Path

# src/ is the package root; bundled templates live under it.
PKG_ROOT = Path(__file__).resolve().parents[1]


def default_template_root() -> Path:
    return PKG_ROOT / "template" / "extras"


def template_root() -> Path:
    # Explicit override, otherwise the templates shipped with the package.
    raw = (os.environ.get("SCAFFOLD_TEMPLATE_ROOT") or "").strip()
    if not raw:
        return default_template_root()
    return Path(raw).expanduser()
