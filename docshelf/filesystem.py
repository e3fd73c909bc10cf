"""
docshelf File System — Read, write and list files in the Documents folder.

Handles:
- Documents root resolution (recomputed on every call)
- Shallow listing of the root or any folder
- Existence checks that never raise
- Atomic UTF-8 text writes, raw byte reads
- Canonical-JSON object persistence with a pluggable decoder

Every host OSError (and ValueError for unusable paths, e.g. embedded NUL)
is wrapped in ``Failed``; an unresolvable root is always
``DocumentsFolderNotFound``. Decoding errors are not wrapped.

Usage:
    fs = FileSystem()
    fs.encode_and_save_to_documents(settings, "settings.json")
    settings = fs.load_and_decode_from_documents("settings.json", Settings)
"""

from __future__ import annotations

import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import Any, List, Optional, Type, TypeVar, Union

from docshelf.engine.codec import Decoder, JSONDecoder
from docshelf.engine.codec import encode as _encode
from docshelf.engine.errors import DocumentsFolderNotFound, Failed, FileSystemError, UnableToPersist
from docshelf.engine.paths import DocumentsLocator

logger = logging.getLogger("docshelf.filesystem")

T = TypeVar("T")

PathLike = Union[str, "os.PathLike[str]"]


class FileSystem:
    """
    Conveniences for working with the per-user Documents folder.

    Construct one per root you care about; tests inject a locator pointing
    at a temporary directory.
    """

    def __init__(
        self,
        locator: Optional[DocumentsLocator] = None,
        decoder: Optional[Decoder] = None,
    ):
        self._locator = locator or DocumentsLocator()
        self._decoder: Decoder = decoder or JSONDecoder()

    @property
    def locator(self) -> DocumentsLocator:
        return self._locator

    @property
    def decoder(self) -> Decoder:
        return self._decoder

    # -------------------------------------------------------------------
    # Root resolution
    # -------------------------------------------------------------------

    @property
    def documents_url(self) -> Optional[Path]:
        """The Documents folder if it resolves; None otherwise."""
        return self._locator.documents_dir()

    def documents_root(self) -> Path:
        """Return the Documents folder or raise DocumentsFolderNotFound."""
        root = self.documents_url
        if root is None:
            logger.warning("Documents folder not found")
            raise DocumentsFolderNotFound(candidate=self._locator.candidate())
        return root

    def log_documents_url(self) -> None:
        """Log the Documents folder path (DEBUG) or its absence (WARNING)."""
        try:
            root = self.documents_url
        except Exception:
            logger.debug("Documents folder lookup failed while logging", exc_info=True)
            return
        if root is not None:
            logger.debug(f"Documents folder path: {root}")
        else:
            logger.warning("Documents folder not found")

    # -------------------------------------------------------------------
    # Listing & existence
    # -------------------------------------------------------------------

    def documents_contents(self) -> List[Path]:
        """Shallow listing of the Documents folder."""
        return self.contents_of(self.documents_root())

    def contents_of(self, folder: PathLike) -> List[Path]:
        """Shallow listing of an arbitrary folder."""
        folder = Path(folder)
        try:
            contents = list(folder.iterdir())
        except (OSError, ValueError) as e:
            raise Failed(e, folder=str(folder)) from e
        logger.debug(f"Listed {folder} ({len(contents)} entries)")
        return contents

    def file_exists_in_documents(self, filename: str) -> bool:
        """True if ``filename`` exists under Documents. Never raises."""
        try:
            root = self.documents_url
            if root is None:
                return False
            return (root / filename).exists()
        except (FileSystemError, OSError, ValueError) as e:
            logger.debug(f"Existence check for {filename} failed: {e}")
            return False

    # -------------------------------------------------------------------
    # Text & bytes
    # -------------------------------------------------------------------

    def save_to_documents(self, text: str, filename: str) -> None:
        """
        Write ``text`` as UTF-8 to ``filename`` in Documents.

        The file is written to a temporary sibling first and moved into place,
        so readers see either the old or the new contents.
        """
        path = self.documents_root() / filename
        try:
            _write_atomic(path, text.encode("utf-8"))
        except (OSError, ValueError) as e:
            raise Failed(e, filename=filename) from e
        logger.debug(f"Saved {filename} to {path}")

    def load_from_documents(self, filename: str) -> bytes:
        """Read the raw contents of ``filename`` in Documents."""
        path = self.documents_root() / filename
        try:
            data = path.read_bytes()
        except (OSError, ValueError) as e:
            raise Failed(e, filename=filename) from e
        logger.debug(f"Loaded {filename} ({len(data)} bytes)")
        return data

    def load_from_file(self, path: PathLike) -> bytes:
        """Read the raw contents of an explicit file path."""
        path = Path(path)
        try:
            return path.read_bytes()
        except (OSError, ValueError) as e:
            raise Failed(e, filename=str(path)) from e

    # -------------------------------------------------------------------
    # Objects
    # -------------------------------------------------------------------

    def encode_and_save_to_documents(self, value: Any, filename: str) -> None:
        """
        Encode ``value`` as canonical JSON and save it to ``filename``.

        Raises UnableToPersist when the encoded bytes are not valid UTF-8.
        """
        data = _encode(value)
        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise UnableToPersist(value, filename) from e
        self.save_to_documents(text, filename)

    def load_and_decode_from_documents(
        self,
        filename: str,
        target: Optional[Type[T]] = None,
        decoder: Optional[Decoder] = None,
    ) -> T:
        """
        Load ``filename`` and decode it into ``target``.

        Args:
            filename: File in Documents.
            target: Type to decode into. None returns the parsed JSON.
            decoder: Overrides the instance decoder for this call.
        """
        data = self.load_from_documents(filename)
        return (decoder or self._decoder)(target, data)

    def encode(self, value: Any) -> bytes:
        """Canonical JSON bytes for ``value``."""
        return _encode(value)


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


def _target_mode(path: Path) -> int:
    """Mode the replaced file should end up with: existing mode, else umask default."""
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        return 0o666 & ~_current_umask()


def _write_atomic(path: Path, data: bytes) -> None:
    mode = _target_mode(path)
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        # mkstemp always creates 0600
        os.chmod(tmp_name, mode)
        os.replace(tmp_name, path)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except OSError:
            pass
        raise


# ---------------------------------------------------------------------------
# Module-level conveniences over a default FileSystem
# ---------------------------------------------------------------------------

_file_system: Optional[FileSystem] = None


def get_file_system() -> FileSystem:
    """Get the default FileSystem, building it on first use."""
    global _file_system
    if _file_system is None:
        _file_system = FileSystem()
    return _file_system


def reset_file_system() -> None:
    """Drop the default FileSystem so the next call rebuilds it."""
    global _file_system
    _file_system = None


def save_to_documents(text: str, filename: str) -> None:
    get_file_system().save_to_documents(text, filename)


def load_from_documents(filename: str) -> bytes:
    return get_file_system().load_from_documents(filename)


def load_from_file(path: PathLike) -> bytes:
    return get_file_system().load_from_file(path)


def encode_and_save_to_documents(value: Any, filename: str) -> None:
    get_file_system().encode_and_save_to_documents(value, filename)


def load_and_decode_from_documents(
    filename: str,
    target: Optional[Type[T]] = None,
    decoder: Optional[Decoder] = None,
) -> T:
    return get_file_system().load_and_decode_from_documents(filename, target, decoder)


def encode(value: Any) -> bytes:
    return _encode(value)
