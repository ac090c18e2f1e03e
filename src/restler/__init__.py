from ._config import Config
from ._encoding import JSONDecoder, JSONEncoder, MultipartEncoder, QueryEncoder
from ._restler import Restler
from ._services import (
    DecodableRequest,
    DispatchContext,
    DispatchQueueManager,
    ErrorParser,
    Networking,
    OptionalDecodableRequest,
    Request,
    RequestBuilder,
    RequestState,
    SyncPolicy,
    Task,
    VoidRequest,
)
from ._utils import Endpoint, Endpointable, setup_logging
from .models import (
    BaseUrlMissingError,
    CommonError,
    DecodableError,
    DecodingError,
    EncodingError,
    ErrorDecodable,
    ErrorType,
    Failure,
    Header,
    HeaderKey,
    HTTPMethod,
    MultipartFile,
    MultipleErrors,
    NetworkError,
    Response,
    RestlerError,
    Success,
)

__all__ = [
    "BaseUrlMissingError",
    "CommonError",
    "Config",
    "DecodableError",
    "DecodableRequest",
    "DecodingError",
    "DispatchContext",
    "DispatchQueueManager",
    "EncodingError",
    "Endpoint",
    "Endpointable",
    "ErrorDecodable",
    "ErrorParser",
    "ErrorType",
    "Failure",
    "Header",
    "HeaderKey",
    "HTTPMethod",
    "JSONDecoder",
    "JSONEncoder",
    "MultipartEncoder",
    "MultipartFile",
    "MultipleErrors",
    "NetworkError",
    "Networking",
    "OptionalDecodableRequest",
    "QueryEncoder",
    "Request",
    "RequestBuilder",
    "RequestState",
    "Response",
    "Restler",
    "RestlerError",
    "Success",
    "SyncPolicy",
    "Task",
    "VoidRequest",
    "setup_logging",
]
