import sys
from pathlib import Path

import pytest

# Ensure the repo root is on sys.path so tests can import the local `src/` package.
ROOT = str(Path(__file__).resolve().parents[1])
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)


@pytest.fixture(autouse=True)
def _use_bundled_templates_by_default(monkeypatch: pytest.MonkeyPatch) -> None:
    # A developer shell may point at a local template checkout; tests opt in per test.
    monkeypatch.delenv("SCAFFOLD_TEMPLATE_ROOT", raising=False)


@pytest.fixture()
def template_root(tmp_path: Path) -> Path:
    root = tmp_path / "templates"
    d = root / "start-database"
    d.mkdir(parents=True)
    (d / "postgres.sh").write_text(
        "#!/usr/bin/env bash\n"
        'DB_CONTAINER_NAME="project1-postgres"\n'
        "docker run --name project1-postgres -e POSTGRES_DB=project1 postgres\n",
        encoding="utf-8",
    )
    (d / "mysql.sh").write_text(
        "#!/usr/bin/env bash\ndocker run --name project1-mysql mysql\n",
        encoding="utf-8",
    )
    (d / "stop-database.sh").write_bytes(
        b"#!/usr/bin/env bash\r\n# stop \xe2\x9c\x8b project1 stays as-is\r\ndocker stop $NAME\r\n"
    )
    return root


@pytest.fixture()
def project_dir(tmp_path: Path) -> Path:
    d = tmp_path / "work" / "my-app"
    d.mkdir(parents=True)
    return d
