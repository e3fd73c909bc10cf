"""
docshelf Codec — Canonical JSON encoding and pluggable decoding.

Encoded output is deterministic and diff-friendly:
- pretty-printed, 2-space indent, ``"key" : value`` separators
- object keys sorted at every nesting level
- non-ASCII emitted as-is, ``/`` never escaped
- NaN / Infinity rejected

Any value pydantic can serialize is accepted: JSON-native values, pydantic
models, dataclasses, datetimes, UUIDs and containers of those.
"""

from __future__ import annotations

import json
from functools import lru_cache
from typing import Any, Callable, Optional, Type, TypeVar

from pydantic import TypeAdapter

T = TypeVar("T")

INDENT = 2
SEPARATORS = (",", " : ")

# A decoder takes the target type and the raw bytes and returns an instance
Decoder = Callable[[Optional[Type[T]], bytes], T]

_ANY_ADAPTER: TypeAdapter[Any] = TypeAdapter(Any)


@lru_cache(maxsize=128)
def _adapter_for(target: Any) -> TypeAdapter[Any]:
    return TypeAdapter(target)


def _key(key: Any) -> str:
    """Object keys are always strings; scalars are spelled the way JSON spells them."""
    if isinstance(key, str):
        return key
    if key is None or isinstance(key, (bool, int, float)):
        return json.dumps(key)
    return str(to_jsonable(key))


def to_jsonable(value: Any) -> Any:
    """
    Convert a value to plain JSON-native Python objects.

    Native scalars and containers are walked directly; anything else
    (models, dataclasses, datetimes, ...) is handed to pydantic.
    """
    if value is None or isinstance(value, (str, bool, int, float)):
        return value
    if isinstance(value, dict):
        return {_key(k): to_jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(v) for v in value]
    return _ANY_ADAPTER.dump_python(value, mode="json")


def encode_text(value: Any) -> str:
    """Serialize a value to canonical JSON text."""
    return json.dumps(
        to_jsonable(value),
        indent=INDENT,
        separators=SEPARATORS,
        sort_keys=True,
        ensure_ascii=False,
        allow_nan=False,
    )


def encode(value: Any) -> bytes:
    """
    Serialize a value to canonical JSON bytes.

    Lone surrogates in strings are carried through (``surrogatepass``), so
    the result is not guaranteed to be valid UTF-8. Callers persisting text
    must check it.

    Raises:
        pydantic_core.PydanticSerializationError: unsupported value type.
        ValueError: NaN or Infinity in the value.
    """
    return encode_text(value).encode("utf-8", "surrogatepass")


class JSONDecoder:
    """
    Default decoder: parse JSON bytes and validate into the target type.

    Target may be any type pydantic accepts (models, dataclasses, typing
    generics, builtins). With a target of None or Any the parsed JSON is
    returned as-is.

    Usage:
        decoder = JSONDecoder()
        settings = decoder(Settings, data)
    """

    def __call__(self, target: Optional[Type[T]], data: bytes) -> T:
        return self.decode(target, data)

    def decode(self, target: Optional[Type[T]], data: bytes) -> T:
        obj = json.loads(data)
        if target is None or target is Any:
            return obj
        return _adapter_for(target).validate_python(obj)
