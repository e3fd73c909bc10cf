"""docshelf Engine — Errors, configuration, logging, path resolution, codec."""

from docshelf.engine.codec import JSONDecoder, encode  # noqa: F401
from docshelf.engine.errors import (  # noqa: F401
    CachesFolderNotFound,
    CloudContainerNotFound,
    ConfigError,
    DocumentsFolderNotFound,
    Failed,
    FileSystemError,
    UnableToFetch,
    UnableToPersist,
)
from docshelf.engine.paths import DocumentsLocator  # noqa: F401

__all__ = [
    "JSONDecoder",
    "encode",
    "FileSystemError",
    "DocumentsFolderNotFound",
    "CachesFolderNotFound",
    "CloudContainerNotFound",
    "UnableToPersist",
    "UnableToFetch",
    "Failed",
    "ConfigError",
    "DocumentsLocator",
]
