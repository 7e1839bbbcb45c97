from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

from pydantic import BaseModel

from jsonfiles.config import FacadeConfig
from jsonfiles.facade import JsonFiles
from jsonfiles.io.bundle import DirectoryBundle
from jsonfiles.util.typing import BundleSource

FIXTURES = Path(__file__).resolve().parent / "fixtures"
BUNDLE_DIR = FIXTURES / "bundle"

TESTS_DIRECTORY = "TestsDirectory"
ANOTHER_TESTS_DIRECTORY = "AnotherTestsDirectory"


class User(BaseModel):
    firstName: str
    lastName: str

    @classmethod
    def fake(cls) -> "User":
        return cls(firstName="First name", lastName="LastName")


def make_facade(
    root: Path,
    *,
    bundle: BundleSource | None = None,
    strict_names: bool = False,
    default_directory_name: str | None = None,
) -> JsonFiles:
    """Build a facade rooted at ``root`` backed by the fixture bundle unless told otherwise."""

    config = FacadeConfig(
        documents_root=root,
        bundle_source=bundle if bundle is not None else DirectoryBundle(BUNDLE_DIR),
        strict_names=strict_names,
    )
    if default_directory_name:
        config.default_directory_name = default_directory_name
    return JsonFiles(config)


def write_bundle(root: Path, documents: Mapping[str, Any]) -> Path:
    """Write ``documents`` as ``<name>.json`` files under ``root``."""

    root.mkdir(parents=True, exist_ok=True)
    for name, payload in documents.items():
        (root / f"{name}.json").write_text(json.dumps(payload), encoding="utf-8")
    return root
