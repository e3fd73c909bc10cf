"""
docshelf — Conveniences for the per-user Documents folder.

Locate the Documents folder, list it, and read/write text, bytes and
JSON-encoded objects in it:

    from docshelf import FileSystem

    fs = FileSystem()
    fs.save_to_documents("hello", "greeting.txt")
    fs.encode_and_save_to_documents({"theme": "dark"}, "prefs.json")
    prefs = fs.load_and_decode_from_documents("prefs.json", dict)
"""

__version__ = "1.0.0"

from docshelf.engine.codec import JSONDecoder, encode  # noqa: E402
from docshelf.engine.errors import (  # noqa: E402
    CachesFolderNotFound,
    CloudContainerNotFound,
    ConfigError,
    DocumentsFolderNotFound,
    Failed,
    FileSystemError,
    UnableToFetch,
    UnableToPersist,
)
from docshelf.engine.paths import DocumentsLocator  # noqa: E402
from docshelf.filesystem import (  # noqa: E402
    FileSystem,
    encode_and_save_to_documents,
    get_file_system,
    load_and_decode_from_documents,
    load_from_documents,
    load_from_file,
    reset_file_system,
    save_to_documents,
)

__all__ = [
    "FileSystem",
    "DocumentsLocator",
    "JSONDecoder",
    "encode",
    "get_file_system",
    "reset_file_system",
    "save_to_documents",
    "load_from_documents",
    "load_from_file",
    "encode_and_save_to_documents",
    "load_and_decode_from_documents",
    "FileSystemError",
    "DocumentsFolderNotFound",
    "CachesFolderNotFound",
    "CloudContainerNotFound",
    "UnableToPersist",
    "UnableToFetch",
    "Failed",
    "ConfigError",
]
