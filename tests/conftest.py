import os
import sys
from pathlib import Path
from typing import Any, Optional

from click.testing import CliRunner
import pytest


def _ensure_repo_on_path() -> None:
    repo_root = Path(__file__).resolve().parent.parent
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))


_ensure_repo_on_path()

BASE_MTIME_NS = 1_700_000_000 * 1_000_000_000


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv("SMAKE_FILE", raising=False)
    monkeypatch.setattr(Path, "home", lambda: tmp_path)


@pytest.fixture
def work_dir(tmp_path: Path, monkeypatch) -> Path:
    root = tmp_path / "project"
    root.mkdir()
    monkeypatch.chdir(root)
    return root


@pytest.fixture
def touch():
    """Create a file whose mtime is ``age`` seconds after a fixed base time."""

    def _touch(path: Path, age: int = 0, content: str = "") -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        stamp = BASE_MTIME_NS + age * 1_000_000_000
        os.utime(path, ns=(stamp, stamp))
        return path

    return _touch


@pytest.fixture
def write_smakefile():
    def _write(root: Path, text: str, name: Optional[str] = None) -> Path:
        path = root / (name or "SMakefile")
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def cli_runner(tmp_path: Path) -> CliRunner:
    class HomeCliRunner(CliRunner):
        def invoke(self, cli: Any, args: Any = None, **kwargs: Any):  # type: ignore[override]
            env = dict(kwargs.pop("env", {}) or {})
            env.setdefault("HOME", str(tmp_path))
            kwargs["env"] = env
            return super().invoke(cli, args=args, **kwargs)

    return HomeCliRunner()
