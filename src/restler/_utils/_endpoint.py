from typing import Protocol, Union, runtime_checkable


@runtime_checkable
class Endpointable(Protocol):
    """Anything that can be resolved to a path appended to the base URL."""

    @property
    def endpoint_value(self) -> str: ...


class Endpoint(str):
    """A string-based endpoint.

    Leading and trailing slashes are normalized away so that joining with the
    base URL always produces exactly one separator.

    Examples:
        >>> Endpoint("/users/") + "1"
        'users/1'
    """

    def __new__(cls, value: str) -> "Endpoint":
        return super().__new__(cls, value.strip("/"))

    @property
    def endpoint_value(self) -> str:
        return str(self)

    def __add__(self, other: str) -> "Endpoint":
        return Endpoint(f"{self}/{other.lstrip('/')}")


EndpointLike = Union[Endpointable, str]


def endpoint_value(endpoint: EndpointLike) -> str:
    if isinstance(endpoint, Endpointable):
        return endpoint.endpoint_value
    if isinstance(endpoint, str):
        return endpoint
    raise TypeError(
        f"Expected a str or an object exposing 'endpoint_value', got {type(endpoint).__name__}"
    )
