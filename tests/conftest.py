from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable, Optional

import pytest
from git import Repo

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def _init_repo(root: Path, remote_url: Optional[str] = None, branch: str = "main") -> Repo:
    root.mkdir(parents=True, exist_ok=True)
    repo = Repo.init(root)
    repo.git.symbolic_ref("HEAD", f"refs/heads/{branch}")
    with repo.config_writer() as writer:
        writer.set_value("user", "name", "Test User")
        writer.set_value("user", "email", "test@example.com")

    pkg = root / "src" / "pkg"
    pkg.mkdir(parents=True, exist_ok=True)
    (root / "README.md").write_text("widget\n")
    (pkg / "__init__.py").write_text("")
    repo.index.add(["README.md", "src/pkg/__init__.py"])
    repo.index.commit("initial commit")

    if remote_url is not None:
        repo.create_remote("origin", remote_url)
    return repo


@pytest.fixture
def make_repo() -> Callable[..., Repo]:
    """Build a committed repository with a ``src/pkg`` directory."""

    return _init_repo
