"""
docshelf Paths — Resolve the per-user Documents folder for the current host.

Resolution order (first hit wins):
    1. Explicit root passed to DocumentsLocator
    2. ``documents_dir`` from docshelf.yaml
    3. DOCSHELF_DOCUMENTS_DIR environment variable
    4. Platform default (Windows / macOS / XDG user-dirs)

A candidate only counts if it is an existing directory. When nothing
resolves the locator returns None and callers decide how to report it.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Optional, Union

from docshelf.engine.config import get_config
from docshelf.engine.errors import ConfigError

logger = logging.getLogger("docshelf.engine.paths")

ENV_DOCUMENTS_DIR = "DOCSHELF_DOCUMENTS_DIR"

iswindows = sys.platform.startswith("win")
ismacos = sys.platform == "darwin"


def _home() -> Optional[Path]:
    try:
        return Path.home()
    except RuntimeError:
        # No HOME / USERPROFILE and no passwd entry
        return None


def _xdg_user_dirs_documents(home: Path) -> Optional[Path]:
    """Read XDG_DOCUMENTS_DIR from $XDG_CONFIG_HOME/user-dirs.dirs."""
    config_home = os.environ.get("XDG_CONFIG_HOME") or str(home / ".config")
    user_dirs = Path(config_home) / "user-dirs.dirs"
    try:
        lines = user_dirs.read_text(encoding="utf-8").splitlines()
    except OSError:
        return None

    for line in lines:
        line = line.strip()
        if not line.startswith("XDG_DOCUMENTS_DIR="):
            continue
        value = line.split("=", 1)[1].strip().strip('"')
        value = value.replace("$HOME", str(home))
        return Path(value)
    return None


def platform_documents_dir() -> Optional[Path]:
    """Return the host's conventional Documents folder, or None."""
    if iswindows:
        profile = os.environ.get("USERPROFILE")
        if profile:
            return Path(profile) / "Documents"
        home = _home()
        return home / "Documents" if home else None

    home = _home()
    if home is None:
        return None
    if ismacos:
        return home / "Documents"

    xdg = os.environ.get("XDG_DOCUMENTS_DIR")
    if xdg:
        return Path(os.path.expanduser(xdg))
    return _xdg_user_dirs_documents(home) or home / "Documents"


class DocumentsLocator:
    """
    Resolves the Documents root. Nothing is cached: every call re-reads the
    config, environment and file system.

    Usage:
        locator = DocumentsLocator()                # host default
        locator = DocumentsLocator("/srv/docs")     # injected root
        root = locator.documents_dir()              # Path or None
    """

    def __init__(self, root: Optional[Union[str, Path]] = None):
        self._root = Path(root) if root is not None else None

    def candidate(self) -> Optional[Path]:
        """The path that would be used, whether or not it exists."""
        if self._root is not None:
            return self._root

        try:
            configured = get_config().documents_dir
        except ConfigError as e:
            logger.warning(f"Ignoring documents_dir from unreadable config: {e.message}")
            configured = None
        if configured:
            return Path(os.path.expanduser(configured))

        from_env = os.environ.get(ENV_DOCUMENTS_DIR)
        if from_env:
            return Path(os.path.expanduser(from_env))

        return platform_documents_dir()

    def documents_dir(self) -> Optional[Path]:
        """Return the Documents root if it resolves to an existing directory."""
        path = self.candidate()
        if path is None:
            return None
        try:
            if path.is_dir():
                return path
        except OSError as e:
            logger.debug(f"Cannot stat documents candidate {path}: {e}")
            return None
        return None
