from typing import Optional

from httpx import Headers
from pydantic import BaseModel

from restler import (
    CommonError,
    DecodableError,
    ErrorParser,
    ErrorType,
    NetworkError,
    Response,
)
from tests.sdk.mocks import SomeError


class ApiErrorBody(BaseModel):
    code: int
    message: str


class ApiError(DecodableError[ApiErrorBody]):
    payload_model = ApiErrorBody


class NotFoundError(DecodableError[ApiErrorBody]):
    payload_model = ApiErrorBody
    status_codes = frozenset({404})


class ExplodingError(Exception):
    @classmethod
    def from_response(cls, response: Response) -> Optional["ExplodingError"]:
        raise RuntimeError("boom")


def network_error(status_code: Optional[int], data: Optional[bytes] = None) -> NetworkError:
    return NetworkError(
        "failed",
        Response(status_code=status_code, headers=Headers(), data=data),
    )


class TestErrorParser:
    def test_no_registered_errors_wraps_in_common_error(self):
        error = network_error(500, b"oops")

        parsed = ErrorParser().parse(error)

        assert parsed == CommonError(ErrorType.SERVER_ERROR, base=error)

    def test_first_matching_type_wins(self):
        parser = ErrorParser()
        parser.decode(NotFoundError)
        parser.decode(ApiError)

        parsed = parser.parse(network_error(400, b'{"code": 7, "message": "bad"}'))

        assert isinstance(parsed, ApiError)
        assert parsed.payload == ApiErrorBody(code=7, message="bad")
        assert parsed.status_code == 400

    def test_registration_order_is_respected(self):
        parser = ErrorParser()
        parser.decode(NotFoundError)
        parser.decode(ApiError)

        parsed = parser.parse(network_error(404, b'{"code": 1, "message": "missing"}'))

        assert isinstance(parsed, NotFoundError)

    def test_unmatched_body_falls_back(self):
        parser = ErrorParser([ApiError])
        error = network_error(422, b"not json")

        parsed = parser.parse(error)

        assert parsed == CommonError(ErrorType.VALIDATION_ERROR, base=error)

    def test_decoder_raising_is_treated_as_no_match(self):
        parser = ErrorParser([ExplodingError, ApiError])

        parsed = parser.parse(network_error(400, b'{"code": 7, "message": "bad"}'))

        assert isinstance(parsed, ApiError)

    def test_type_without_from_response_is_skipped(self):
        parser = ErrorParser([SomeError])
        error = network_error(None)

        parsed = parser.parse(error)

        assert parsed == CommonError(ErrorType.REQUEST_FAILED, base=error)

    def test_duplicates_are_kept(self):
        parser = ErrorParser()
        parser.decode(ApiError)
        parser.decode(ApiError)

        assert parser.decoded_errors == (ApiError, ApiError)

    def test_copy_is_independent(self):
        parser = ErrorParser([ApiError])

        copy = parser.copy()
        copy.decode(NotFoundError)

        assert parser.decoded_errors == (ApiError,)
        assert copy.decoded_errors == (ApiError, NotFoundError)

    def test_restler_errors_pass_through(self):
        error = CommonError(ErrorType.INVALID_PARAMETERS)

        assert ErrorParser().parse(error) is error

    def test_foreign_errors_are_wrapped(self):
        error = SomeError()

        assert ErrorParser().parse(error) == CommonError(ErrorType.UNKNOWN_ERROR, base=error)


class TestErrorType:
    def test_from_status(self):
        assert ErrorType.from_status(None) is ErrorType.REQUEST_FAILED
        assert ErrorType.from_status(401) is ErrorType.UNAUTHORIZED
        assert ErrorType.from_status(403) is ErrorType.FORBIDDEN
        assert ErrorType.from_status(404) is ErrorType.NOT_FOUND
        assert ErrorType.from_status(409) is ErrorType.CLIENT_ERROR
        assert ErrorType.from_status(422) is ErrorType.VALIDATION_ERROR
        assert ErrorType.from_status(503) is ErrorType.SERVER_ERROR
        assert ErrorType.from_status(302) is ErrorType.UNKNOWN_ERROR
