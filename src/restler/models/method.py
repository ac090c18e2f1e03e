from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Sequence


class HTTPMethodKind(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"


_QUERY_METHODS = frozenset({HTTPMethodKind.GET})
_BODY_METHODS = frozenset({HTTPMethodKind.POST, HTTPMethodKind.PUT, HTTPMethodKind.PATCH})


@dataclass(frozen=True)
class HTTPMethod:
    """HTTP verb together with the payload it is allowed to carry.

    Only GET carries query items and only POST, PUT and PATCH carry a body.
    Use the factory class methods rather than the constructor; they enforce
    that payload is only attached where the verb supports it.
    """

    kind: HTTPMethodKind
    query: tuple[tuple[str, str], ...] = field(default=())
    content: Optional[bytes] = None

    def __post_init__(self) -> None:
        if self.query and not self.is_query_available:
            raise ValueError(f"{self.kind.value} cannot carry query items")
        if self.content is not None and not self.is_body_available:
            raise ValueError(f"{self.kind.value} cannot carry a body")

    @classmethod
    def get(cls, query: Sequence[tuple[str, str]] = ()) -> "HTTPMethod":
        return cls(HTTPMethodKind.GET, query=tuple(query))

    @classmethod
    def post(cls, content: Optional[bytes] = None) -> "HTTPMethod":
        return cls(HTTPMethodKind.POST, content=content)

    @classmethod
    def put(cls, content: Optional[bytes] = None) -> "HTTPMethod":
        return cls(HTTPMethodKind.PUT, content=content)

    @classmethod
    def patch(cls, content: Optional[bytes] = None) -> "HTTPMethod":
        return cls(HTTPMethodKind.PATCH, content=content)

    @classmethod
    def delete(cls) -> "HTTPMethod":
        return cls(HTTPMethodKind.DELETE)

    @classmethod
    def head(cls) -> "HTTPMethod":
        return cls(HTTPMethodKind.HEAD)

    @property
    def name(self) -> str:
        return self.kind.value

    @property
    def is_query_available(self) -> bool:
        return self.kind in _QUERY_METHODS

    @property
    def is_body_available(self) -> bool:
        return self.kind in _BODY_METHODS

    @property
    def is_multipart_available(self) -> bool:
        return self.kind in _BODY_METHODS

    def with_payload(
        self,
        query: Optional[Sequence[tuple[str, str]]] = None,
        content: Optional[bytes] = None,
    ) -> "HTTPMethod":
        """Copy of this method with the payload the verb supports; the rest is dropped."""
        return HTTPMethod(
            self.kind,
            query=tuple(query or ()) if self.is_query_available else (),
            content=content if self.is_body_available else None,
        )
