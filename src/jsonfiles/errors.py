"""Error taxonomy for jsonfiles operations."""

from __future__ import annotations

from pathlib import Path


class JsonFilesError(RuntimeError):
    """Base class for every error raised by the storage facade."""


class DocumentsRootUnavailable(JsonFilesError):
    """Raised when the host cannot supply the base storage directory."""

    def __init__(self, underlying_error: BaseException) -> None:
        self.underlying_error = underlying_error
        super().__init__(
            f"Failed to resolve the documents directory. Underlying error: {underlying_error}"
        )


class DirectoryNotFound(JsonFilesError):
    """Raised when a directory targeted for deletion does not exist."""

    def __init__(self, directory_name: str) -> None:
        self.directory_name = directory_name
        super().__init__(f"Directory '{directory_name}' not found.")


class FileNotFound(JsonFilesError):
    """Raised when a file targeted for deletion does not exist."""

    def __init__(self, file_name: str) -> None:
        self.file_name = file_name
        super().__init__(f"File '{file_name}' not found.")


class BundleFileNotFound(JsonFilesError):
    """Raised when the bundle source has no resource for a file name."""

    def __init__(self, file_name: str) -> None:
        self.file_name = file_name
        super().__init__(f"File '{file_name}' not found in the provided bundle.")


class DecodeError(JsonFilesError):
    """Raised when stored bytes cannot be decoded into the requested target."""

    def __init__(self, file_name: str, reason: str) -> None:
        self.file_name = file_name
        self.reason = reason
        super().__init__(f"Could not decode '{file_name}': {reason}")


class EncodeError(JsonFilesError):
    """Raised when the codec cannot encode an object."""

    def __init__(self, file_name: str, reason: str) -> None:
        self.file_name = file_name
        self.reason = reason
        super().__init__(f"Could not encode '{file_name}': {reason}")


class StorageIOError(JsonFilesError):
    """Wraps a host-level OS error raised while touching the filesystem."""

    def __init__(self, operation: str, path: Path, underlying_error: OSError) -> None:
        self.operation = operation
        self.path = path
        self.underlying_error = underlying_error
        super().__init__(f"Failed to {operation} {path}: {underlying_error}")


class InvalidName(JsonFilesError, ValueError):
    """Raised when a file or directory name is empty, or in strict mode not a single safe segment."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"Invalid name {name!r}: {reason}")


__all__ = [
    "BundleFileNotFound",
    "DecodeError",
    "DirectoryNotFound",
    "DocumentsRootUnavailable",
    "EncodeError",
    "FileNotFound",
    "InvalidName",
    "JsonFilesError",
    "StorageIOError",
]
