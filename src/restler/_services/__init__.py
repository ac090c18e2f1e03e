from ._dispatch import (
    DispatchContext,
    DispatchQueueManager,
    DispatchQueueManagerType,
    SyncPolicy,
)
from ._error_parser import ErrorParser
from ._networking import Networking, NetworkingType, RequestModification, Task
from ._request import (
    DecodableRequest,
    OptionalDecodableRequest,
    Request,
    RequestState,
    VoidRequest,
)
from ._request_builder import RequestBuilder

__all__ = [
    "DecodableRequest",
    "DispatchContext",
    "DispatchQueueManager",
    "DispatchQueueManagerType",
    "ErrorParser",
    "Networking",
    "NetworkingType",
    "OptionalDecodableRequest",
    "Request",
    "RequestBuilder",
    "RequestModification",
    "RequestState",
    "SyncPolicy",
    "Task",
    "VoidRequest",
]
