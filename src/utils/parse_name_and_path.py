from __future__ import annotations

import os


def remove_trailing_slash(s: str) -> str:
    # Only one slash is dropped: "a//" -> "a/".
    if len(s) > 1 and s.endswith("/"):
        s = s[:-1]
    return s


def parse_name_and_path(raw: str | os.PathLike[str]) -> tuple[str, str]:
    """Split a CLI project argument into ``(app_name, path)``.

    - ``my-app`` -> ``("my-app", "my-app")``
    - ``.`` -> name of the current working directory, path ``.``
    - ``@scope/app`` -> ``("@scope/app", "app")`` (npm scoped package name)
    - ``~/projects/@scope/app`` -> ``("@scope/app", "~/projects/app")``
    """
    text = remove_trailing_slash(os.fspath(raw))
    parts = text.split("/")

    app_name = parts[-1]
    if app_name == ".":
        app_name = os.path.basename(os.path.abspath(os.getcwd()))

    scope_idx = next((i for i, p in enumerate(parts) if p.startswith("@")), -1)
    if scope_idx != -1:
        app_name = "/".join(parts[scope_idx:])

    path = "/".join(p for p in parts if not p.startswith("@"))
    return app_name, path
