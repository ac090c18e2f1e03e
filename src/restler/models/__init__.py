from .decodable_error import DecodableError, ErrorDecodable
from .errors import (
    BaseUrlMissingError,
    CommonError,
    DecodingError,
    EncodingError,
    ErrorType,
    MultipleErrors,
    NetworkError,
    RestlerError,
    internal_error,
)
from .header import Header, HeaderKey, HeaderKeyLike
from .method import HTTPMethod, HTTPMethodKind
from .multipart import MultipartFile
from .response import Response
from .result import Failure, Result, Success

__all__ = [
    "BaseUrlMissingError",
    "CommonError",
    "DecodableError",
    "DecodingError",
    "EncodingError",
    "ErrorDecodable",
    "ErrorType",
    "Failure",
    "Header",
    "HeaderKey",
    "HeaderKeyLike",
    "HTTPMethod",
    "HTTPMethodKind",
    "MultipartFile",
    "MultipleErrors",
    "NetworkError",
    "Response",
    "RestlerError",
    "Result",
    "Success",
    "internal_error",
]
