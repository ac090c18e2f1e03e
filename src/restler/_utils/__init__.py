from ._endpoint import Endpoint, Endpointable, EndpointLike, endpoint_value
from ._logs import masked_headers, setup_logging
from ._url import url_for

__all__ = [
    "Endpoint",
    "Endpointable",
    "EndpointLike",
    "endpoint_value",
    "masked_headers",
    "setup_logging",
    "url_for",
]
