"""Shared typing helpers for jsonfiles modules."""

from __future__ import annotations

from pathlib import Path
from typing import Any, BinaryIO, Protocol, runtime_checkable


@runtime_checkable
class SupportsDict(Protocol):
    """Objects that expose a dict-like representation."""

    def to_dict(self) -> dict[str, object]:
        """Return a dictionary representation of the object."""
        ...


@runtime_checkable
class Codec(Protocol):
    """Turns objects into stored bytes and back."""

    def encode(self, obj: Any) -> bytes:
        ...

    def decode(self, data: bytes) -> Any:
        ...


@runtime_checkable
class BundleSource(Protocol):
    """Read-only store of pre-packaged JSON resources."""

    def open_resource(self, file_name: str) -> BinaryIO | None:
        """Return a binary stream for ``<file_name>.json`` or ``None`` when absent."""
        ...


@runtime_checkable
class DocumentStore(Protocol):
    """Storage surface of :class:`jsonfiles.facade.JsonFiles`.

    Code that only saves, loads and seeds documents can depend on this and accept an
    in-memory stand-in in tests. ``directory`` is ``DEFAULT``, a ``Named`` reference or a
    bare directory name.
    """

    @property
    def write_directory_name(self) -> str:
        ...

    def save(self, obj: Any, file_name: str, directory: Any = ..., **kwargs: Any) -> Path:
        ...

    def load(self, file_name: str, directory: Any = ..., **kwargs: Any) -> Any:
        ...

    def delete_file(self, file_name: str, directory: Any = ...) -> None:
        ...

    def delete_directory(self, directory: Any = ...) -> None:
        ...

    def copy_file_from_bundle(self, file_name: str, directory: Any = ..., **kwargs: Any) -> Path:
        ...

    def get_file_path(self, file_name: str, directory: Any = ...) -> Path | None:
        ...

    def is_in_directory(self, file_name: str, directory: Any = ...) -> bool:
        ...


__all__ = ["BundleSource", "Codec", "DocumentStore", "SupportsDict"]
