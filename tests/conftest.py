"""
docshelf Test Suite — Shared fixtures and configuration.

Run:  pytest tests/ -v
"""

from __future__ import annotations

import pytest

from docshelf.engine.paths import ENV_DOCUMENTS_DIR


# ---------------------------------------------------------------------------
# Isolation — never touch the real Documents folder or a stray docshelf.yaml
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch):
    """Reset global singletons between tests."""
    import docshelf.engine.config as cfg_mod
    import docshelf.filesystem as fs_mod

    cfg_mod._config = cfg_mod.DocShelfConfig()
    fs_mod._file_system = None
    monkeypatch.delenv(ENV_DOCUMENTS_DIR, raising=False)
    yield
    cfg_mod._config = None
    fs_mod._file_system = None


@pytest.fixture
def docs_root(tmp_path):
    """An existing, empty Documents folder."""
    root = tmp_path / "Documents"
    root.mkdir()
    return root


@pytest.fixture
def fs(docs_root):
    """A FileSystem rooted at docs_root."""
    from docshelf.engine.paths import DocumentsLocator
    from docshelf.filesystem import FileSystem

    return FileSystem(DocumentsLocator(docs_root))


@pytest.fixture
def missing_fs(tmp_path):
    """A FileSystem whose Documents folder does not resolve."""
    from docshelf.engine.paths import DocumentsLocator
    from docshelf.filesystem import FileSystem

    return FileSystem(DocumentsLocator(tmp_path / "no-such-folder"))
