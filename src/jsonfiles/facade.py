"""Storage facade persisting objects as JSON documents under the documents root.

Layout: ``<documents_root>/<directory_name>/<file_name>.json``. ``directory`` arguments accept
:data:`~jsonfiles.util.paths.DEFAULT`, a :class:`~jsonfiles.util.paths.Named` reference or a
bare directory name.

Example::

    files = JsonFiles(FacadeConfig(documents_root=Path("~/appdata")))
    files.save({"firstName": "A", "lastName": "B"}, "User")
    user = files.load("User")
"""

from __future__ import annotations

import logging
import shutil
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

from jsonfiles.config.models import FacadeConfig, JsonFilesConfig
from jsonfiles.errors import (
    BundleFileNotFound,
    DecodeError,
    DirectoryNotFound,
    EncodeError,
    FileNotFound,
    InvalidName,
    StorageIOError,
)
from jsonfiles.io.atomic import atomic_copy_stream, atomic_write_bytes
from jsonfiles.io.bundle import bundle_from_config
from jsonfiles.io.codecs import JsonCodec
from jsonfiles.util import paths
from jsonfiles.util.paths import DEFAULT, DirectoryReference
from jsonfiles.util.typing import BundleSource, Codec

logger = logging.getLogger(__name__)

DirectoryArg = DirectoryReference | str


@contextmanager
def _host_errors(operation: str, path: Path) -> Iterator[None]:
    try:
        yield
    except OSError as exc:
        raise StorageIOError(operation, path, exc) from exc


class JsonFiles:
    """Save, load, delete and seed JSON documents."""

    def __init__(self, config: FacadeConfig | None = None, *, codec: Codec | None = None) -> None:
        self.config = config if config is not None else FacadeConfig()
        self.codec: Codec = codec if codec is not None else JsonCodec()

    @classmethod
    def from_config(cls, settings: JsonFilesConfig, *, codec: Codec | None = None) -> "JsonFiles":
        """Build a facade from loaded settings (see :func:`jsonfiles.config.load_config`)."""

        storage = settings.storage
        config = FacadeConfig(
            default_directory_name=storage.default_directory_name,
            bundle_source=bundle_from_config(settings.bundle),
            documents_root=storage.documents_root,
            app_name=storage.app_name,
            strict_names=storage.strict_names,
        )
        return cls(config, codec=codec)

    def __repr__(self) -> str:
        return (
            f"JsonFiles(default_directory={self.write_directory_name!r}, "
            f"bundle={self.config.bundle_source!r})"
        )

    # -- configuration -------------------------------------------------

    @property
    def write_directory_name(self) -> str:
        """Name of the directory ``DEFAULT`` currently resolves to."""
        return self.config.default_directory_name

    def set_default_directory_name(self, name: str) -> None:
        """Point ``DEFAULT`` at ``name`` for all subsequent operations."""
        if not name:
            raise InvalidName(name, "name is empty")
        if self.config.strict_names:
            paths.check_segment(name)
        self.config.default_directory_name = name
        logger.debug("Default directory set to %s", name)

    def set_bundle_source(self, source: BundleSource | None) -> None:
        if source is not None and not isinstance(source, BundleSource):
            raise TypeError(f"Expected a bundle source exposing open_resource(), got {type(source)!r}")
        self.config.bundle_source = source

    # -- path resolution -----------------------------------------------

    def documents_root(self) -> Path:
        return paths.resolve_documents_root(self.config.documents_root, app_name=self.config.app_name)

    def directory_path(self, directory: DirectoryArg = DEFAULT) -> Path:
        """Resolved directory path; the directory may not exist."""
        return paths.directory_path(self.documents_root(), self._reference(directory), self.write_directory_name)

    def file_path(self, file_name: str, directory: DirectoryArg = DEFAULT) -> Path:
        """Resolved document path; the file may not exist."""
        return paths.file_path(
            self.documents_root(),
            self._file_name(file_name),
            self._reference(directory),
            self.write_directory_name,
        )

    def get_file_path(self, file_name: str, directory: DirectoryArg = DEFAULT) -> Path | None:
        """Return the document path if it exists on disk, else ``None``."""
        path = self.file_path(file_name, directory)
        return path if path.is_file() else None

    def is_in_directory(self, file_name: str, directory: DirectoryArg = DEFAULT) -> bool:
        return self.get_file_path(file_name, directory) is not None

    # -- persistence ---------------------------------------------------

    def save(
        self,
        obj: Any,
        file_name: str,
        directory: DirectoryArg = DEFAULT,
        *,
        codec: Codec | None = None,
    ) -> Path:
        """Encode ``obj`` and atomically write it, creating the directory if needed.

        Returns the path of the written document.
        """
        dir_path = self.directory_path(directory)
        dest = self.file_path(file_name, directory)
        payload = self._encode(codec or self.codec, obj, file_name)

        self._ensure_directory(dir_path)
        with _host_errors("write", dest):
            atomic_write_bytes(dest, payload)
        logger.debug("Saved %s (%d bytes)", dest, len(payload))
        return dest

    def load(
        self,
        file_name: str,
        directory: DirectoryArg = DEFAULT,
        *,
        codec: Codec | None = None,
    ) -> Any:
        """Read and decode a document, seeding it from the bundle when absent."""
        path = self._copy_from_bundle_if_needed(file_name, directory)
        with _host_errors("read", path):
            data = path.read_bytes()
        return self._decode(codec or self.codec, data, file_name)

    def delete_file(self, file_name: str, directory: DirectoryArg = DEFAULT) -> None:
        path = self.file_path(file_name, directory)
        if not path.is_file():
            raise FileNotFound(file_name)
        with _host_errors("remove", path):
            path.unlink()
        logger.debug("Deleted %s", path)

    def delete_directory(self, directory: DirectoryArg = DEFAULT) -> None:
        """Remove a directory and everything in it."""
        ref = self._reference(directory)
        dir_path = self.directory_path(ref)
        if not dir_path.is_dir():
            raise DirectoryNotFound(paths.resolve_directory_name(ref, self.write_directory_name))
        with _host_errors("remove", dir_path):
            shutil.rmtree(dir_path)
        logger.debug("Deleted directory %s", dir_path)

    def copy_file_from_bundle(
        self,
        file_name: str,
        directory: DirectoryArg = DEFAULT,
        *,
        bundle: BundleSource | None = None,
    ) -> Path:
        """Copy ``<file_name>.json`` from ``bundle`` (default: the configured bundle source).

        An existing document at the target is replaced.
        """
        self._file_name(file_name)
        source = bundle if bundle is not None else self.config.bundle_source
        if source is None:
            raise BundleFileNotFound(file_name)
        with _host_errors("open bundle resource", Path(file_name)):
            stream = source.open_resource(file_name)
        if stream is None:
            raise BundleFileNotFound(file_name)

        with stream:
            dir_path = self.directory_path(directory)
            dest = self.file_path(file_name, directory)
            self._ensure_directory(dir_path)
            if dest.exists():
                with _host_errors("remove", dest):
                    dest.unlink()
            with _host_errors("copy bundle resource to", dest):
                atomic_copy_stream(stream, dest)
        logger.debug("Copied bundle resource %s from %r to %s", file_name, source, dest)
        return dest

    # -- helpers -------------------------------------------------------

    def _reference(self, directory: DirectoryArg | None) -> DirectoryReference:
        ref = paths.as_directory_reference(directory)
        if self.config.strict_names:
            paths.check_segment(paths.resolve_directory_name(ref, self.write_directory_name))
        return ref

    def _file_name(self, file_name: str) -> str:
        if self.config.strict_names:
            paths.check_segment(file_name)
        return file_name

    def _copy_from_bundle_if_needed(self, file_name: str, directory: DirectoryArg) -> Path:
        existing = self.get_file_path(file_name, directory)
        if existing is not None:
            return existing
        logger.debug("%s missing from %s, seeding from bundle", file_name, directory)
        return self.copy_file_from_bundle(file_name, directory)

    @staticmethod
    def _ensure_directory(dir_path: Path) -> None:
        if dir_path.is_dir():
            return
        with _host_errors("create directory", dir_path):
            dir_path.mkdir(parents=True, exist_ok=True)

    @staticmethod
    def _encode(codec: Codec, obj: Any, file_name: str) -> bytes:
        try:
            return codec.encode(obj)
        except (TypeError, ValueError) as exc:
            raise EncodeError(file_name, str(exc)) from exc

    @staticmethod
    def _decode(codec: Codec, data: bytes, file_name: str) -> Any:
        try:
            return codec.decode(data)
        except (TypeError, ValueError) as exc:
            raise DecodeError(file_name, str(exc)) from exc


__all__ = ["DirectoryArg", "JsonFiles"]
