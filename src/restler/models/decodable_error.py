from typing import ClassVar, Generic, Optional, Protocol, TypeVar, runtime_checkable

from pydantic import BaseModel, ValidationError

from .errors import RestlerError
from .response import Response

PayloadT = TypeVar("PayloadT", bound=BaseModel)


@runtime_checkable
class ErrorDecodable(Protocol):
    """An error type that can recognize itself in a failed response.

    ``from_response`` returns an instance when the response matches and
    ``None`` otherwise.
    """

    @classmethod
    def from_response(cls, response: Response) -> Optional[BaseException]: ...


class DecodableError(RestlerError, Generic[PayloadT]):
    """Error whose details are parsed from a JSON error body.

    Subclasses set ``payload_model`` and, optionally, ``status_codes`` to
    restrict which responses they claim.

    Examples:
        ```python
        class ApiErrorBody(BaseModel):
            code: int
            message: str


        class ApiError(DecodableError[ApiErrorBody]):
            payload_model = ApiErrorBody
            status_codes = frozenset({400, 422})


        client.get("users").failure_decode(ApiError).decode(User)
        ```
    """

    payload_model: ClassVar[type[BaseModel]]
    status_codes: ClassVar[Optional[frozenset[int]]] = None

    def __init__(self, payload: PayloadT, response: Response) -> None:
        self.payload = payload
        self.response = response
        super().__init__(str(payload))

    @property
    def status_code(self) -> Optional[int]:
        return self.response.status_code

    @classmethod
    def from_response(cls, response: Response) -> Optional["DecodableError[PayloadT]"]:
        if cls.status_codes is not None and response.status_code not in cls.status_codes:
            return None
        if not response.data:
            return None
        try:
            payload = cls.payload_model.model_validate_json(response.data)
        except ValidationError:
            return None
        return cls(payload, response)  # type: ignore[arg-type]
