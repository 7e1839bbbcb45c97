"""Pydantic models describing jsonfiles configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from jsonfiles.util.typing import BundleSource

DEFAULT_DIRECTORY_NAME = "JsonFilesDirectory"
DEFAULT_APP_NAME = "jsonfiles"


class StorageConfig(BaseModel):
    """Where documents live and how names are treated."""

    model_config = ConfigDict(extra="allow")

    documents_root: Optional[Path] = None
    app_name: str = Field(default=DEFAULT_APP_NAME, min_length=1)
    default_directory_name: str = Field(default=DEFAULT_DIRECTORY_NAME, min_length=1)
    strict_names: bool = False


class BundleConfig(BaseModel):
    """Read-only resource set used to seed missing documents.

    ``path`` points at a directory on disk; ``package`` (plus ``subdirectory``) at data
    shipped inside an importable package.
    """

    model_config = ConfigDict(extra="allow")

    path: Optional[Path] = None
    package: Optional[str] = None
    subdirectory: str = ""

    @model_validator(mode="after")
    def _validate_source(self) -> "BundleConfig":
        if self.path is not None and self.package:
            raise ValueError("bundle.path and bundle.package are mutually exclusive.")
        return self


class LoggingConfig(BaseModel):
    model_config = ConfigDict(extra="allow")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    log_path: Optional[Path] = None

    @field_validator("level", mode="before")
    @classmethod
    def _upper_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value


class JsonFilesConfig(BaseModel):
    """Root configuration object loaded from YAML/TOML/JSON settings files."""

    model_config = ConfigDict(extra="allow")

    storage: StorageConfig = Field(default_factory=StorageConfig)
    bundle: BundleConfig = Field(default_factory=BundleConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


class FacadeConfig(BaseModel):
    """Caller-owned, mutable runtime configuration read by every facade operation."""

    model_config = ConfigDict(validate_assignment=True)

    default_directory_name: str = Field(default=DEFAULT_DIRECTORY_NAME, min_length=1)
    bundle_source: Any = None
    documents_root: Optional[Path] = None
    app_name: str = Field(default=DEFAULT_APP_NAME, min_length=1)
    strict_names: bool = False

    @field_validator("bundle_source")
    @classmethod
    def _check_bundle_source(cls, value: Any) -> Any:
        if value is not None and not isinstance(value, BundleSource):
            raise ValueError(f"bundle_source must provide open_resource(), got {type(value)!r}")
        return value


__all__ = [
    "BundleConfig",
    "DEFAULT_APP_NAME",
    "DEFAULT_DIRECTORY_NAME",
    "FacadeConfig",
    "JsonFilesConfig",
    "LoggingConfig",
    "StorageConfig",
]
