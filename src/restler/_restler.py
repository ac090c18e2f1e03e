from typing import Any, Mapping, Optional

from dotenv import load_dotenv

from ._config import Config
from ._encoding import (
    JSONDecoder,
    JSONDecoderType,
    JSONEncoder,
    JSONEncoderType,
    MultipartEncoder,
    QueryEncoder,
)
from ._services import (
    DispatchQueueManager,
    DispatchQueueManagerType,
    ErrorParser,
    Networking,
    NetworkingType,
    RequestBuilder,
)
from ._utils import EndpointLike, setup_logging
from .models.header import Header, HeaderKeyLike
from .models.method import HTTPMethod

load_dotenv()


class Restler:
    """
    Entry point for building requests against one base URL.

    Each verb method returns a fresh ``RequestBuilder``. The client's header
    is copied into every builder, so per-request header changes never affect
    the client or other requests.

    Examples:
        ```python
        from restler import Restler

        with Restler("https://api.example.com") as client:
            client.header["Authorization"] = "Bearer token"

            request = (
                client.get("users")
                .query({"page": 2})
                .decode(list[User])
                .on_success(print)
                .start()
            )
            request.wait()
        ```
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        encoder: Optional[JSONEncoderType] = None,
        decoder: Optional[JSONDecoderType] = None,
        header: Optional[Mapping[HeaderKeyLike, str]] = None,
        timeout: Optional[float] = None,
        debug: bool = False,
        networking: Optional[NetworkingType] = None,
        dispatch_queue_manager: Optional[DispatchQueueManagerType] = None,
        error_parser: Optional[ErrorParser] = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            base_url (Optional[str]): Base for every endpoint. If not provided, it
                will be read from the `RESTLER_BASE_URL` environment variable.
            encoder (Optional[JSONEncoderType]): Encoder for request bodies and nested
                query values. Defaults to the pydantic based `JSONEncoder`.
            decoder (Optional[JSONDecoderType]): Decoder for response bodies.
                Defaults to the pydantic based `JSONDecoder`.
            header (Optional[Mapping]): Initial default header sent with every request.
            timeout (Optional[float]): Transport timeout in seconds. If not provided, it
                will be read from `RESTLER_TIMEOUT`, defaulting to 30 seconds.
            debug (bool): Enable debug logging if set to True. Defaults to False.
            networking (Optional[NetworkingType]): Transport override.
            dispatch_queue_manager (Optional[DispatchQueueManagerType]): Scheduler used
                to deliver completion handlers.
            error_parser (Optional[ErrorParser]): Error parser override. Each client
                gets its own parser unless one is shared explicitly.

        Raises:
            BaseUrlMissingError: If no base URL is provided or configured.
        """
        self._config = Config.from_env(base_url=base_url, timeout=timeout)
        self._logger = setup_logging(debug)

        self.encoder: JSONEncoderType = encoder or JSONEncoder()
        self.decoder: JSONDecoderType = decoder or JSONDecoder()
        self.error_parser = error_parser or ErrorParser()
        self._header = Header(header)

        self._owns_networking = networking is None
        self._owns_dispatch_queue_manager = dispatch_queue_manager is None
        self._networking: NetworkingType = networking or Networking(self._config)
        self._dispatch_queue_manager: DispatchQueueManagerType = (
            dispatch_queue_manager or DispatchQueueManager()
        )

    def __enter__(self) -> "Restler":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    @property
    def base_url(self) -> str:
        return self._config.base_url

    @property
    def header(self) -> Header:
        """Default header sent with every request built after a change."""
        return self._header

    @header.setter
    def header(self, value: Mapping[HeaderKeyLike, str]) -> None:
        self._header = value.copy() if isinstance(value, Header) else Header(value)

    @property
    def query_encoder(self) -> QueryEncoder:
        return QueryEncoder(json_encoder=self.encoder)

    @property
    def multipart_encoder(self) -> MultipartEncoder:
        return MultipartEncoder()

    def get(self, endpoint: EndpointLike) -> RequestBuilder:
        return self._request_builder(HTTPMethod.get(), endpoint)

    def post(self, endpoint: EndpointLike) -> RequestBuilder:
        return self._request_builder(HTTPMethod.post(), endpoint)

    def put(self, endpoint: EndpointLike) -> RequestBuilder:
        return self._request_builder(HTTPMethod.put(), endpoint)

    def patch(self, endpoint: EndpointLike) -> RequestBuilder:
        return self._request_builder(HTTPMethod.patch(), endpoint)

    def delete(self, endpoint: EndpointLike) -> RequestBuilder:
        return self._request_builder(HTTPMethod.delete(), endpoint)

    def head(self, endpoint: EndpointLike) -> RequestBuilder:
        return self._request_builder(HTTPMethod.head(), endpoint)

    def close(self) -> None:
        """Release the transport and scheduler created by this client.

        Objects passed in through the constructor are left to their owner.
        """
        try:
            if self._owns_networking and isinstance(self._networking, Networking):
                self._networking.close()
        finally:
            if self._owns_dispatch_queue_manager and isinstance(
                self._dispatch_queue_manager, DispatchQueueManager
            ):
                self._dispatch_queue_manager.shutdown()

    def _request_builder(self, method: HTTPMethod, endpoint: EndpointLike) -> RequestBuilder:
        return RequestBuilder(
            base_url=self._config.base_url,
            networking=self._networking,
            encoder=self.encoder,
            decoder=self.decoder,
            query_encoder=self.query_encoder,
            multipart_encoder=self.multipart_encoder,
            dispatch_queue_manager=self._dispatch_queue_manager,
            error_parser=self.error_parser,
            method=method,
            endpoint=endpoint,
            header=self._header,
        )
