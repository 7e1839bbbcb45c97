"""Path utilities centralising the storage layout.

Every stored document lives at ``<documents_root>/<directory_name>/<file_name>.json``.
The resolver functions here are pure; only :func:`resolve_documents_root` consults the host.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_data_dir

from jsonfiles.errors import DocumentsRootUnavailable, InvalidName

JSON_SUFFIX = ".json"


@dataclass(frozen=True)
class DefaultDirectory:
    """Marker for "whatever the facade's default directory name currently is"."""

    def __repr__(self) -> str:
        return "DEFAULT"


@dataclass(frozen=True)
class Named:
    """An explicitly named directory under the documents root."""

    name: str

    def __post_init__(self) -> None:
        if not self.name:
            raise InvalidName(self.name, "name is empty")


DEFAULT = DefaultDirectory()

DirectoryReference = DefaultDirectory | Named


def as_directory_reference(value: DirectoryReference | str | None) -> DirectoryReference:
    """Normalise ``None``, a reference or a bare directory name into a reference."""
    if value is None:
        return DEFAULT
    if isinstance(value, (DefaultDirectory, Named)):
        return value
    if isinstance(value, str):
        return Named(value)
    raise TypeError(f"Expected a directory reference or name, got {type(value)!r}")


def resolve_directory_name(ref: DirectoryReference, default_name: str) -> str:
    """Return the concrete directory name for ``ref``."""
    if isinstance(ref, Named):
        return ref.name
    return default_name


def directory_path(docs_root: Path, ref: DirectoryReference, default_name: str) -> Path:
    return docs_root / resolve_directory_name(ref, default_name)


def file_path(docs_root: Path, file_name: str, ref: DirectoryReference, default_name: str) -> Path:
    """Return the JSON file path; the suffix is appended, never substituted."""
    return directory_path(docs_root, ref, default_name) / f"{file_name}{JSON_SUFFIX}"


def check_segment(name: str) -> str:
    """Reject names that would escape or span directories."""
    if not name:
        raise InvalidName(name, "name is empty")
    if name in {".", ".."}:
        raise InvalidName(name, "relative directory markers are not allowed")
    separators = {os.sep, "/"} | ({os.altsep} if os.altsep else set())
    if any(sep in name for sep in separators):
        raise InvalidName(name, "path separators are not allowed")
    if Path(name).is_absolute() or Path(name).drive:
        raise InvalidName(name, "absolute paths are not allowed")
    return name


def resolve_documents_root(documents_root: str | Path | None, *, app_name: str) -> Path:
    """Return the base storage directory, wrapping host failures.

    An explicit ``documents_root`` wins; otherwise the per-user application data
    directory for ``app_name`` is used.
    """
    try:
        if documents_root is not None:
            root = Path(documents_root).expanduser().resolve()
        else:
            root = Path(user_data_dir(app_name, appauthor=False)).resolve()
    except (OSError, RuntimeError, ValueError) as exc:
        raise DocumentsRootUnavailable(exc) from exc

    if root.exists() and not root.is_dir():
        raise DocumentsRootUnavailable(NotADirectoryError(f"{root} is not a directory"))
    return root


__all__ = [
    "DEFAULT",
    "DefaultDirectory",
    "DirectoryReference",
    "JSON_SUFFIX",
    "Named",
    "as_directory_reference",
    "check_segment",
    "directory_path",
    "file_path",
    "resolve_directory_name",
    "resolve_documents_root",
]
