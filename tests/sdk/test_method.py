import pytest

from restler import HTTPMethod
from restler.models import HTTPMethodKind


class TestHTTPMethod:
    @pytest.mark.parametrize(
        "method, query, body, multipart",
        [
            (HTTPMethod.get(), True, False, False),
            (HTTPMethod.post(), False, True, True),
            (HTTPMethod.put(), False, True, True),
            (HTTPMethod.patch(), False, True, True),
            (HTTPMethod.delete(), False, False, False),
            (HTTPMethod.head(), False, False, False),
        ],
    )
    def test_capabilities(self, method: HTTPMethod, query: bool, body: bool, multipart: bool):
        assert method.is_query_available is query
        assert method.is_body_available is body
        assert method.is_multipart_available is multipart

    def test_name(self):
        assert HTTPMethod.patch().name == "PATCH"

    def test_equality_includes_payload(self):
        assert HTTPMethod.get([("some", "value")]) == HTTPMethod.get([("some", "value")])
        assert HTTPMethod.get([("some", "value")]) != HTTPMethod.get()
        assert HTTPMethod.post(b"{}") != HTTPMethod.put(b"{}")

    def test_query_rejected_for_post(self):
        with pytest.raises(ValueError):
            HTTPMethod(HTTPMethodKind.POST, query=(("a", "b"),))

    def test_body_rejected_for_delete(self):
        with pytest.raises(ValueError):
            HTTPMethod(HTTPMethodKind.DELETE, content=b"{}")

    def test_with_payload_keeps_only_supported_payload(self):
        get = HTTPMethod.get().with_payload(query=[("a", "1")], content=b"ignored")
        post = HTTPMethod.post().with_payload(query=[("a", "1")], content=b"{}")
        head = HTTPMethod.head().with_payload(query=[("a", "1")], content=b"{}")

        assert get == HTTPMethod.get([("a", "1")])
        assert post == HTTPMethod.post(b"{}")
        assert head == HTTPMethod.head()
