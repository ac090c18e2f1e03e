import re
from typing import Any, Optional

import pytest
from httpx import URL
from pydantic import BaseModel

from restler import (
    CommonError,
    DecodableRequest,
    EncodingError,
    ErrorType,
    Header,
    HeaderKey,
    HTTPMethod,
    OptionalDecodableRequest,
    Restler,
    VoidRequest,
)
from tests.sdk.mocks import NetworkingMock, SomeError, SomeObject


class FailingEncoder:
    def __init__(self) -> None:
        self.error = SomeError("cannot encode")

    def encode(self, obj: Any, *args: Any) -> Any:
        raise self.error


class Form(BaseModel):
    title: str


class TestRequestBuilder:
    class TestQuery:
        def test_query_sets_pairs_and_content_type(self, client: Restler):
            request = client.get("mock").query({"some": "value"}).decode(None)

            assert request.method == HTTPMethod.get([("some", "value")])
            assert request.header[HeaderKey.CONTENT_TYPE] == "application/x-www-form-urlencoded"
            assert request.errors == ()

        @pytest.mark.parametrize("verb", ["post", "put", "patch", "delete", "head"])
        def test_query_is_noop_for_query_incapable_methods(self, client: Restler, verb: str):
            builder = getattr(client, verb)("mock")
            header_before = builder.header

            returned = builder.query({"some": "value"})

            assert returned is builder
            assert builder.header == header_before
            assert builder.errors == ()
            assert builder.decode(None).method.query == ()

        def test_query_encoding_failure_keeps_previous_query(self, client: Restler):
            builder = client.get("mock").query({"first": "1"})
            builder._query_encoder = FailingEncoder()  # type: ignore[assignment]

            request = builder.query({"second": "2"}).decode(None)

            assert request.method == HTTPMethod.get([("first", "1")])
            assert len(request.errors) == 1
            error = request.errors[0]
            assert isinstance(error, CommonError)
            assert error.type is ErrorType.INVALID_PARAMETERS
            assert isinstance(error.base, SomeError)

    class TestBody:
        @pytest.mark.parametrize("verb", ["post", "put", "patch"])
        def test_body_sets_json_content(self, client: Restler, verb: str):
            request = getattr(client, verb)("mock").body(SomeObject(id=1, name="a")).decode(None)

            assert request.method.content == b'{"id":1,"name":"a"}'
            assert request.header[HeaderKey.CONTENT_TYPE] == "application/json"

        @pytest.mark.parametrize("verb", ["get", "delete", "head"])
        def test_body_is_noop_for_body_incapable_methods(self, client: Restler, verb: str):
            builder = getattr(client, verb)("mock")

            assert builder.body({"a": 1}) is builder
            assert builder.errors == ()
            assert builder.decode(None).method.content is None

        def test_body_encoding_failure_is_collected(self, client: Restler):
            request = client.post("mock").body({"value": object()}).decode(None)

            assert request.method.content is None
            assert len(request.errors) == 1
            error = request.errors[0]
            assert isinstance(error, CommonError)
            assert error.type is ErrorType.INVALID_PARAMETERS
            assert isinstance(error.base, EncodingError)

    class TestMultipart:
        def test_multipart_with_boundary(self, client: Restler):
            request = client.post("mock").multipart(Form(title="x"), boundary="B").decode(None)

            assert request.header[HeaderKey.CONTENT_TYPE] == (
                "multipart/form-data; charset=utf-8; boundary=B"
            )
            assert request.method.content == (
                b'--B\r\nContent-Disposition: form-data; name="title"\r\n\r\nx\r\n--B--\r\n'
            )

        def test_multipart_generates_unique_boundaries(self, client: Restler):
            first = client.put("mock").multipart(Form(title="x")).decode(None)
            second = client.put("mock").multipart(Form(title="x")).decode(None)

            pattern = r"boundary=(Boundary--[0-9A-F-]{36})$"
            first_match = re.search(pattern, first.header[HeaderKey.CONTENT_TYPE])
            second_match = re.search(pattern, second.header[HeaderKey.CONTENT_TYPE])
            assert first_match is not None and second_match is not None
            assert first_match.group(1) != second_match.group(1)
            assert first.method.content is not None
            assert first.method.content.endswith(f"--{first_match.group(1)}--\r\n".encode())

        def test_multipart_is_noop_for_get(self, client: Restler):
            builder = client.get("mock")

            assert builder.multipart(Form(title="x")) is builder
            assert HeaderKey.CONTENT_TYPE not in builder.header

        def test_multipart_failure_is_collected(self, client: Restler):
            request = client.patch("mock").multipart({"nested": {"a": 1}}).decode(None)

            assert len(request.errors) == 1
            assert request.errors[0].type is ErrorType.INVALID_PARAMETERS  # type: ignore[attr-defined]

    class TestHeader:
        def test_set_in_header_only_affects_this_request(self, client: Restler):
            client.header["X-Default"] = "1"

            request = (
                client.get("mock")
                .set_in_header("abc", "X-Custom")
                .set_in_header(None, "X-Default")
                .decode(None)
            )

            assert request.header == Header({"X-Custom": "abc"})
            assert client.header == Header({"X-Default": "1"})

        def test_client_header_changes_after_creation_do_not_leak(self, client: Restler):
            builder = client.get("mock")

            client.header[HeaderKey.AUTHORIZATION] = "Bearer token"

            assert HeaderKey.AUTHORIZATION not in builder.header

    class TestFailureDecode:
        def test_registers_with_shared_error_parser(self, client: Restler):
            builder = client.get("mock")

            returned = builder.failure_decode(SomeError)

            assert returned is builder
            assert client.error_parser.decoded_errors == (SomeError,)
            assert builder.decode(None).errors == ()

    class TestCustomRequestModification:
        def test_last_modification_wins(self, client: Restler, networking: NetworkingMock):
            def first(request: Any) -> None:
                pass

            def second(request: Any) -> None:
                pass

            client.get("mock").custom_request_modification(first).custom_request_modification(
                second
            ).decode(None).start()

            assert networking.make_request_params[0].custom_request_modification is second

    class TestDecode:
        def test_void(self, client: Restler):
            assert isinstance(client.get("mock").decode(None), VoidRequest)
            assert isinstance(client.get("mock").decode(type(None)), VoidRequest)

        def test_required(self, client: Restler):
            request = client.get("mock").decode(SomeObject)

            assert isinstance(request, DecodableRequest)
            assert request.decode_type is SomeObject

        @pytest.mark.parametrize("type_", [Optional[SomeObject], SomeObject | None])
        def test_optional(self, client: Restler, type_: Any):
            request = client.get("mock").decode(type_)

            assert isinstance(request, OptionalDecodableRequest)
            assert request.decode_type is SomeObject

        def test_decode_optional(self, client: Restler):
            request = client.get("mock").decode_optional(list[int])

            assert isinstance(request, OptionalDecodableRequest)
            assert request.decode_type == list[int]

        def test_url_is_base_plus_endpoint(self, client: Restler):
            request = client.delete("/users/1").decode(None)

            assert request.url == URL("https://example.com/users/1")
            assert request.method == HTTPMethod.delete()

        def test_errors_are_snapshotted(self, client: Restler):
            builder = client.post("mock").body({"value": object()})
            request = builder.decode(None)

            builder.body({"value": object()})

            assert len(request.errors) == 1
