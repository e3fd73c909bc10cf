"""
docshelf Error Hierarchy — Closed set of structured file-system errors.

Every error carries its context as keyword arguments and serializes to JSON
so it can be logged the same way regardless of where it was raised.

Hierarchy:
    FileSystemError
    ├── DocumentsFolderNotFound  — Documents root could not be resolved
    ├── CachesFolderNotFound     — Caches folder could not be resolved
    ├── CloudContainerNotFound   — Cloud container could not be resolved
    ├── UnableToPersist          — Encoded value is not persistable text
    ├── UnableToFetch            — Named file could not be fetched
    ├── Failed                   — Underlying OS-level failure
    └── ConfigError              — Invalid docshelf.yaml
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any, Dict, Optional


class FileSystemError(Exception):
    """
    Base error for all docshelf failures.
    All context is kept on the instance and serializable to JSON.
    """

    def __init__(self, message: str, **context: Any):
        self.message = message
        self.filename: Optional[str] = context.get("filename")
        self.error_type: str = self.__class__.__name__
        self.context: Dict[str, Any] = context
        self.timestamp: str = datetime.now(timezone.utc).isoformat()
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize error to a JSON-compatible dict."""
        return {
            "error_type": self.error_type,
            "message": self.message,
            "filename": self.filename,
            "timestamp": self.timestamp,
            "context": {
                k: str(v) for k, v in self.context.items()
                if k != "filename"
            },
        }

    def to_json(self) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), default=str)

    def __repr__(self) -> str:
        parts = [f"{self.error_type}: {self.message}"]
        if self.filename:
            parts.append(f"filename={self.filename}")
        return " | ".join(parts)


class DocumentsFolderNotFound(FileSystemError):
    """The host could not supply a per-user Documents folder."""

    def __init__(self, message: str = "Unable to find the Documents folder.", **context: Any):
        super().__init__(message, **context)


class CachesFolderNotFound(FileSystemError):
    """The host could not supply a caches folder."""

    def __init__(self, message: str = "Unable to find the caches folder.", **context: Any):
        super().__init__(message, **context)


class CloudContainerNotFound(FileSystemError):
    """The host could not supply a cloud-synced container."""

    def __init__(self, message: str = "Cloud container not found", **context: Any):
        super().__init__(message, **context)


class UnableToPersist(FileSystemError):
    """
    An encoded value could not be turned into text for writing.
    Keeps a reference to the value that was being saved.
    """

    def __init__(self, value: Any, filename: str, message: Optional[str] = None, **context: Any):
        self.value = value
        super().__init__(
            message or f"Unable to save {value!r} to file {filename}",
            filename=filename,
            **context,
        )

    def to_dict(self) -> Dict[str, Any]:
        d = super().to_dict()
        d["value"] = repr(self.value)
        return d


class UnableToFetch(FileSystemError):
    """A named file could not be fetched from Documents."""

    def __init__(self, filename: str, message: Optional[str] = None, **context: Any):
        super().__init__(
            message or f"Unable to fetch {filename} from Documents.",
            filename=filename,
            **context,
        )


class Failed(FileSystemError):
    """Wraps the OSError (or other failure) raised by the host file system."""

    def __init__(self, cause: BaseException, **context: Any):
        self.cause = cause
        super().__init__(str(cause), **context)
        self.__cause__ = cause

    def to_dict(self) -> Dict[str, Any]:
        d = super().to_dict()
        d["cause_type"] = type(self.cause).__name__
        d["errno"] = getattr(self.cause, "errno", None)
        return d


class ConfigError(FileSystemError):
    """Configuration error — unreadable or invalid docshelf.yaml."""

    def __init__(self, message: str, **context: Any):
        self.config_path: Optional[str] = context.get("config_path")
        super().__init__(message, **context)
