import types
import uuid
from logging import getLogger
from typing import Any, Optional, TypeVar, Union, get_args, get_origin, overload

from httpx import URL

from .._encoding import (
    JSONDecoderType,
    JSONEncoderType,
    MultipartEncoderType,
    QueryEncoderType,
)
from .._utils import EndpointLike, url_for
from .._utils.constants import (
    CONTENT_TYPE_FORM_URLENCODED,
    CONTENT_TYPE_JSON,
    CONTENT_TYPE_MULTIPART,
    LOGGER_NAME,
    MULTIPART_BOUNDARY_PREFIX,
)
from ..models.errors import CommonError, ErrorType
from ..models.header import Header, HeaderKey, HeaderKeyLike
from ..models.method import HTTPMethod
from ._dispatch import DispatchQueueManagerType
from ._error_parser import ErrorParser
from ._networking import NetworkingType, RequestModification
from ._request import DecodableRequest, OptionalDecodableRequest, Request, VoidRequest

T = TypeVar("T")

_NONE_TYPE = type(None)


def _optional_inner(type_: Any) -> Optional[Any]:
    """``X`` for ``Optional[X]`` / ``X | None``, ``None`` for anything else."""
    if get_origin(type_) not in (Union, types.UnionType):
        return None
    args = get_args(type_)
    if _NONE_TYPE not in args:
        return None
    rest = tuple(arg for arg in args if arg is not _NONE_TYPE)
    return rest[0] if len(rest) == 1 else Union[rest]  # type: ignore[return-value]


class RequestBuilder:
    """Collects the configuration of a single request.

    Every configuration method returns the builder itself. Encoding problems
    never raise here; they are kept and reported as the request's failure
    when it is started. Configuration that the HTTP method cannot carry (a
    query on POST, a body on GET) is ignored.

    A builder is meant to be finished with exactly one ``decode`` call.
    """

    def __init__(
        self,
        *,
        base_url: Union[URL, str],
        networking: NetworkingType,
        encoder: JSONEncoderType,
        decoder: JSONDecoderType,
        query_encoder: QueryEncoderType,
        multipart_encoder: MultipartEncoderType,
        dispatch_queue_manager: DispatchQueueManagerType,
        error_parser: ErrorParser,
        method: HTTPMethod,
        endpoint: EndpointLike,
        header: Header,
    ) -> None:
        self._logger = getLogger(LOGGER_NAME)
        self._base_url = base_url
        self._networking = networking
        self._encoder = encoder
        self._decoder = decoder
        self._query_encoder = query_encoder
        self._multipart_encoder = multipart_encoder
        self._dispatch_queue_manager = dispatch_queue_manager
        self._error_parser = error_parser
        self._method = method
        self._endpoint = endpoint

        self._header = header.copy()
        self._query: Optional[list[tuple[str, str]]] = None
        self._body: Optional[bytes] = None
        self._errors: list[BaseException] = []
        self._custom_request_modification: Optional[RequestModification] = None

    @property
    def method(self) -> HTTPMethod:
        return self._method

    @property
    def header(self) -> Header:
        return self._header.copy()

    @property
    def errors(self) -> tuple[BaseException, ...]:
        return tuple(self._errors)

    def query(self, obj: Any) -> "RequestBuilder":
        """Encode ``obj`` into the query string. Only applies to GET."""
        if not self._method.is_query_available:
            return self
        try:
            self._query = self._query_encoder.encode(obj)
            self._header[HeaderKey.CONTENT_TYPE] = CONTENT_TYPE_FORM_URLENCODED
        except Exception as e:
            self._add_error(e)
        return self

    def body(self, obj: Any) -> "RequestBuilder":
        """Encode ``obj`` as the JSON body. Only applies to POST, PUT and PATCH."""
        if not self._method.is_body_available:
            return self
        try:
            self._body = self._encoder.encode(obj)
            self._header[HeaderKey.CONTENT_TYPE] = CONTENT_TYPE_JSON
        except Exception as e:
            self._add_error(e)
        return self

    def multipart(self, obj: Any, boundary: Optional[str] = None) -> "RequestBuilder":
        """Encode ``obj`` as a multipart/form-data body.

        Only applies to POST, PUT and PATCH. A fresh boundary is generated
        when none is given.
        """
        if not self._method.is_multipart_available:
            return self
        boundary = boundary or f"{MULTIPART_BOUNDARY_PREFIX}{str(uuid.uuid4()).upper()}"
        try:
            self._body = self._multipart_encoder.encode(obj, boundary)
            self._header[HeaderKey.CONTENT_TYPE] = CONTENT_TYPE_MULTIPART.format(
                boundary=boundary
            )
        except Exception as e:
            self._add_error(e)
        return self

    def set_in_header(self, value: Optional[str], key: HeaderKeyLike) -> "RequestBuilder":
        """Set a header field for this request only; ``None`` removes it."""
        self._header[key] = value
        return self

    def failure_decode(self, error_type: type) -> "RequestBuilder":
        """Try ``error_type`` when a request of this client fails.

        The registration is kept by the client's error parser and applies to
        every later request of the same client.
        """
        self._error_parser.decode(error_type)
        return self

    def custom_request_modification(
        self, modification: Optional[RequestModification]
    ) -> "RequestBuilder":
        """Mutate the ``httpx.Request`` right before it is sent."""
        self._custom_request_modification = modification
        return self

    @overload
    def decode(self, type_: None) -> VoidRequest: ...

    @overload
    def decode(self, type_: type[T]) -> DecodableRequest[T]: ...

    @overload
    def decode(self, type_: Any) -> Request[Any]: ...

    def decode(self, type_: Any) -> Request[Any]:
        """Finish the builder with the expected response type.

        - ``None``: the body is ignored.
        - ``Optional[X]`` (or ``X | None``): the body is decoded into ``X``
          when possible, otherwise the request succeeds with ``None``.
        - any other type: the body must decode into it.
        """
        if type_ is None or type_ is _NONE_TYPE:
            return VoidRequest(**self._request_kwargs())
        inner = _optional_inner(type_)
        if inner is not None:
            return OptionalDecodableRequest(inner, **self._request_kwargs())
        return DecodableRequest(type_, **self._request_kwargs())

    def decode_optional(self, type_: type[T]) -> OptionalDecodableRequest[T]:
        return OptionalDecodableRequest(type_, **self._request_kwargs())

    def _add_error(self, error: Exception) -> None:
        self._logger.debug(f"Invalid parameters for {self._method.name} {self._endpoint}: {error}")
        self._errors.append(CommonError(ErrorType.INVALID_PARAMETERS, base=error))

    def _build_method(self) -> HTTPMethod:
        return self._method.with_payload(query=self._query, content=self._body)

    def _request_kwargs(self) -> dict[str, Any]:
        return {
            "url": url_for(self._base_url, self._endpoint),
            "networking": self._networking,
            "decoder": self._decoder,
            "dispatch_queue_manager": self._dispatch_queue_manager,
            "method": self._build_method(),
            "errors": self._errors,
            "error_parser": self._error_parser,
            "header": self._header,
            "custom_request_modification": self._custom_request_modification,
        }
