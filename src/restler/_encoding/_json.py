from functools import lru_cache
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from ..models.errors import DecodingError, EncodingError

T = TypeVar("T")

_ANY_ADAPTER: TypeAdapter[Any] = TypeAdapter(Any)


@lru_cache(maxsize=256)
def _adapter(type_: Any) -> TypeAdapter[Any]:
    return TypeAdapter(type_)


class JSONEncoder:
    """Serializes request bodies to JSON bytes with pydantic.

    Pydantic models are dumped by alias, dataclasses and plain containers are
    serialized by inference.
    """

    def __init__(self, *, exclude_none: bool = False) -> None:
        self.exclude_none = exclude_none

    def encode(self, obj: Any) -> bytes:
        try:
            return _ANY_ADAPTER.dump_json(
                obj, by_alias=True, exclude_none=self.exclude_none
            )
        except (PydanticSerializationError, TypeError, ValueError) as e:
            raise EncodingError(f"Cannot encode {type(obj).__name__} as JSON: {e}") from e


class JSONDecoder:
    """Validates JSON response bytes into the requested type with pydantic."""

    def __init__(self, *, strict: bool = False) -> None:
        self.strict = strict

    def decode(self, type_: type[T], data: bytes) -> T:
        try:
            adapter = _adapter(type_)
        except TypeError:
            # unhashable annotations bypass the cache
            adapter = TypeAdapter(type_)
        try:
            return adapter.validate_json(data, strict=self.strict)
        except ValidationError as e:
            raise DecodingError(f"Cannot decode response as {type_!r}: {e}") from e
