"""
Pytest configuration and shared test utilities.

This module provides shared fixtures for all goscaffold tests.
"""

import pytest

from goscaffold.utils import config


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Run every test without a user configuration file.

    Clears GOSCAFFOLD_CONFIG, moves the working directory away from any
    goscaffold.yml and drops the cached configuration before and after.
    """
    monkeypatch.delenv("GOSCAFFOLD_CONFIG", raising=False)
    workdir = tmp_path / "cwd"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    config.reset_config()
    yield
    config.reset_config()


@pytest.fixture
def template_tree(tmp_path):
    """Build a small template tree with one file per kind of entry.

    Returns the tree root. Contains common files, component-owned
    directories and a component-owned single file.
    """
    root = tmp_path / "tree"
    files = {
        "README.md.tmpl": "# {{ project }}\n",
        "go.mod.tmpl": "module {{ module }}\n",
        "cmd/api/main.go.tmpl": "// {{ project }} api on {{ port }}\n",
        "cmd/admin/main.go.tmpl": "// {{ project }} admin\n",
        "internal/router/router.go": "package router\n",
        "internal/router/router_api.go.tmpl": "// {{ module }} api routes\n",
        "internal/router/router_admin.go.tmpl": "// {{ module }} admin routes\n",
        "internal/app/task/runner.go": "package task\n",
    }
    for rel, content in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
    return root
