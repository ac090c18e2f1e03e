from typing import Any, Protocol, TypeVar

T = TypeVar("T")


class JSONEncoderType(Protocol):
    def encode(self, obj: Any) -> bytes: ...


class JSONDecoderType(Protocol):
    def decode(self, type_: type[T], data: bytes) -> T: ...


class QueryEncoderType(Protocol):
    def encode(self, obj: Any) -> list[tuple[str, str]]: ...


class MultipartEncoderType(Protocol):
    def encode(self, obj: Any, boundary: str) -> bytes: ...
