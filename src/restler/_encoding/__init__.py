from ._json import JSONDecoder, JSONEncoder
from ._multipart import MultipartEncoder
from ._protocols import (
    JSONDecoderType,
    JSONEncoderType,
    MultipartEncoderType,
    QueryEncoderType,
)
from ._query import QueryEncoder

__all__ = [
    "JSONDecoder",
    "JSONDecoderType",
    "JSONEncoder",
    "JSONEncoderType",
    "MultipartEncoder",
    "MultipartEncoderType",
    "QueryEncoder",
    "QueryEncoderType",
]
