"""Codecs translating Python objects to stored JSON bytes.

Codecs raise the underlying library's ``ValueError``/``TypeError`` subclasses; the facade
wraps them into :class:`~jsonfiles.errors.EncodeError` and
:class:`~jsonfiles.errors.DecodeError` together with the file name involved.
"""

from __future__ import annotations

import dataclasses
import json
from typing import Any, Generic, TypeVar

from pydantic import TypeAdapter

from jsonfiles.util.typing import SupportsDict

T = TypeVar("T")

ENCODING = "utf-8"


def _to_jsonable(obj: Any) -> Any:
    """``json.dumps`` fallback for models, dataclasses and ``to_dict`` objects."""
    model_dump = getattr(obj, "model_dump", None)
    if callable(model_dump):
        return model_dump(mode="json")
    if isinstance(obj, SupportsDict):
        return obj.to_dict()
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


class JsonCodec:
    """Plain JSON codec producing and consuming UTF-8 bytes."""

    def __init__(self, *, indent: int | None = None, sort_keys: bool = False, ensure_ascii: bool = False) -> None:
        self.indent = indent
        self.sort_keys = sort_keys
        self.ensure_ascii = ensure_ascii

    def encode(self, obj: Any) -> bytes:
        text = json.dumps(
            obj,
            indent=self.indent,
            sort_keys=self.sort_keys,
            ensure_ascii=self.ensure_ascii,
            default=_to_jsonable,
        )
        return text.encode(ENCODING)

    def decode(self, data: bytes) -> Any:
        return json.loads(data.decode(ENCODING))


class ModelCodec(Generic[T]):
    """Typed codec validating decoded JSON into ``target``.

    ``target`` may be anything pydantic can adapt: a ``BaseModel`` subclass, a dataclass,
    or a parametrised container such as ``list[User]``.
    """

    def __init__(self, target: type[T] | Any, *, indent: int | None = None) -> None:
        self.target = target
        self.indent = indent
        self._adapter: TypeAdapter[T] = TypeAdapter(target)

    def encode(self, obj: T) -> bytes:
        return self._adapter.dump_json(obj, indent=self.indent)

    def decode(self, data: bytes) -> T:
        return self._adapter.validate_json(data)


__all__ = ["ENCODING", "JsonCodec", "ModelCodec"]
