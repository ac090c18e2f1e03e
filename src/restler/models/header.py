import base64
from collections.abc import Iterator, Mapping, MutableMapping
from enum import Enum
from typing import Optional, Union


class HeaderKey(str, Enum):
    """Well-known header names. Any other header can be addressed by a plain string."""

    ACCEPT = "Accept"
    ACCEPT_CHARSET = "Accept-Charset"
    ACCEPT_ENCODING = "Accept-Encoding"
    ACCEPT_LANGUAGE = "Accept-Language"
    AUTHORIZATION = "Authorization"
    CACHE_CONTROL = "Cache-Control"
    CONTENT_LENGTH = "Content-Length"
    CONTENT_TYPE = "Content-Type"
    COOKIE = "Cookie"
    DATE = "Date"
    EXPECT = "Expect"
    FORWARDED = "Forwarded"
    FROM = "From"
    HOST = "Host"
    ORIGIN = "Origin"
    PRAGMA = "Pragma"
    REFERER = "Referer"
    USER_AGENT = "User-Agent"

    def __str__(self) -> str:
        return self.value


HeaderKeyLike = Union[HeaderKey, str]


def _key_name(key: HeaderKeyLike) -> str:
    return key.value if isinstance(key, HeaderKey) else str(key)


class Header(MutableMapping[str, str]):
    """Ordered, case-insensitive mapping of HTTP header fields.

    Assigning ``None`` or an empty string removes the field. Copies are
    independent, so a client's default header can be handed to every request
    without one request's changes leaking into another.

    Examples:
        ```python
        header = Header({"Accept": "application/json"})
        header[HeaderKey.AUTHORIZATION] = "Bearer token"
        header["accept"]  # 'application/json'
        header[HeaderKey.AUTHORIZATION] = None  # removed
        ```
    """

    def __init__(self, raw: Optional[Mapping[HeaderKeyLike, str]] = None) -> None:
        # lowercased name -> (name as first set, value)
        self._fields: dict[str, tuple[str, str]] = {}
        for key, value in (raw or {}).items():
            self[key] = value

    def __getitem__(self, key: HeaderKeyLike) -> str:
        return self._fields[_key_name(key).lower()][1]

    def __setitem__(self, key: HeaderKeyLike, value: Optional[str]) -> None:
        name = _key_name(key)
        if not value:
            self._fields.pop(name.lower(), None)
            return
        existing = self._fields.get(name.lower())
        self._fields[name.lower()] = (existing[0] if existing else name, value)

    def __delitem__(self, key: HeaderKeyLike) -> None:
        del self._fields[_key_name(key).lower()]

    def __iter__(self) -> Iterator[str]:
        return (name for name, _ in self._fields.values())

    def __len__(self) -> int:
        return len(self._fields)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        return _key_name(key).lower() in self._fields

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Header):
            return self._normalized() == other._normalized()
        if isinstance(other, Mapping):
            return self._normalized() == Header(other)._normalized()
        return NotImplemented

    def __repr__(self) -> str:
        return f"Header({self.raw!r})"

    def _normalized(self) -> dict[str, str]:
        return {lower: value for lower, (_, value) in self._fields.items()}

    def set(self, key: HeaderKeyLike, value: Optional[str]) -> None:
        self[key] = value

    def remove_value(self, key: HeaderKeyLike) -> bool:
        """Remove ``key`` and report whether it was present."""
        return self._fields.pop(_key_name(key).lower(), None) is not None

    def copy(self) -> "Header":
        clone = Header()
        clone._fields = dict(self._fields)
        return clone

    @property
    def raw(self) -> dict[str, str]:
        return {name: value for name, value in self._fields.values()}

    def set_basic_authentication(self, username: str, password: str) -> None:
        credentials = base64.b64encode(f"{username}:{password}".encode()).decode("ascii")
        self[HeaderKey.AUTHORIZATION] = f"Basic {credentials}"
