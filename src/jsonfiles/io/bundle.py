"""Read-only bundle sources used to seed documents."""

from __future__ import annotations

import io
import logging
from collections.abc import Mapping
from importlib import resources
from pathlib import Path
from typing import BinaryIO

from jsonfiles.config.models import BundleConfig
from jsonfiles.util.paths import JSON_SUFFIX
from jsonfiles.util.typing import BundleSource

logger = logging.getLogger(__name__)


def resource_name(file_name: str) -> str:
    """Return the bundle resource name for a logical file name."""
    return f"{file_name}{JSON_SUFFIX}"


class DirectoryBundle:
    """Bundle backed by a directory of ``*.json`` files."""

    def __init__(self, root: str | Path) -> None:
        self.root = Path(root).expanduser()

    def open_resource(self, file_name: str) -> BinaryIO | None:
        candidate = self.root / resource_name(file_name)
        if not candidate.is_file():
            return None
        return candidate.open("rb")

    def __repr__(self) -> str:
        return f"DirectoryBundle({str(self.root)!r})"


class PackageBundle:
    """Bundle backed by data files shipped inside an importable package."""

    def __init__(self, package: str, subdirectory: str = "") -> None:
        self.package = package
        self.subdirectory = subdirectory

    def open_resource(self, file_name: str) -> BinaryIO | None:
        try:
            base = resources.files(self.package)
        except (ModuleNotFoundError, TypeError) as exc:
            # Missing modules and plain (non-package) modules hold no resources.
            logger.debug("Package bundle %s unavailable: %s", self.package, exc)
            return None
        if self.subdirectory:
            base = base.joinpath(self.subdirectory)
        candidate = base.joinpath(resource_name(file_name))
        if not candidate.is_file():
            return None
        return candidate.open("rb")

    def __repr__(self) -> str:
        return f"PackageBundle({self.package!r}, subdirectory={self.subdirectory!r})"


class MappingBundle:
    """In-memory bundle keyed by logical file name."""

    def __init__(self, resources_by_name: Mapping[str, bytes | str] | None = None) -> None:
        self._resources: dict[str, bytes] = {}
        for name, payload in (resources_by_name or {}).items():
            self.add(name, payload)

    def add(self, file_name: str, payload: bytes | str) -> None:
        self._resources[file_name] = payload.encode("utf-8") if isinstance(payload, str) else bytes(payload)

    def open_resource(self, file_name: str) -> BinaryIO | None:
        payload = self._resources.get(file_name)
        if payload is None:
            return None
        return io.BytesIO(payload)

    def __repr__(self) -> str:
        return f"MappingBundle({sorted(self._resources)!r})"


def bundle_from_config(config: BundleConfig) -> BundleSource | None:
    """Build the bundle source described by ``config``, if any."""

    if config.path is not None:
        logger.debug("Using directory bundle at %s", config.path)
        return DirectoryBundle(config.path)
    if config.package:
        logger.debug("Using package bundle %s/%s", config.package, config.subdirectory)
        return PackageBundle(config.package, config.subdirectory)
    return None


__all__ = [
    "DirectoryBundle",
    "MappingBundle",
    "PackageBundle",
    "bundle_from_config",
    "resource_name",
]
