import pytest

from httpbridge._services._builder import RequestBuilder
from httpbridge.models.request import HttpMethod, RequestSpec


@pytest.fixture
def builder() -> RequestBuilder:
    return RequestBuilder(user_agent="Test/1.0")


class TestRequestBuilder:
    def test_get_without_body_has_no_content_type(self, builder: RequestBuilder):
        request = builder.build(RequestSpec(url="https://example.com", method="get"))

        assert request.method is HttpMethod.GET
        assert request.headers == {"User-Agent": "Test/1.0"}
        assert request.timeout == 30.0

    def test_body_adds_json_content_type(self, builder: RequestBuilder):
        request = builder.build(
            RequestSpec(url="https://example.com", method="POST", body='{"a": 1}')
        )

        assert request.headers["Content-Type"] == "application/json"
        assert request.body == '{"a": 1}'

    def test_caller_headers_win_and_keep_order(self, builder: RequestBuilder):
        spec = RequestSpec(
            url="https://example.com",
            method="put",
            body="<a/>",
            headers={"X-First": "1", "content-type": "text/xml", "user-agent": "Mine/2.0"},
        )

        request = builder.build(spec)

        assert request.method is HttpMethod.PUT
        assert request.headers == {
            "X-First": "1",
            "content-type": "text/xml",
            "user-agent": "Mine/2.0",
        }

    def test_does_not_mutate_spec(self, builder: RequestBuilder):
        spec = RequestSpec(url="https://example.com", method="post", body="x", headers={"A": "b"})

        builder.build(spec)

        assert dict(spec.headers) == {"A": "b"}
        assert spec.method == "post"

    def test_spec_headers_are_read_only(self):
        headers = {"A": "b"}
        spec = RequestSpec(url="https://example.com", headers=headers)
        headers["C"] = "d"

        assert dict(spec.headers) == {"A": "b"}
        with pytest.raises(TypeError):
            spec.headers["E"] = "f"  # type: ignore[index]

    def test_spec_is_hashable(self):
        first = RequestSpec(url="https://example.com", method="POST", body="x", headers={"A": "b"})
        second = RequestSpec(url="https://example.com", method="POST", body="x", headers={"A": "b"})
        other = RequestSpec(url="https://example.com", method="POST", body="x", headers={"A": "c"})

        assert first == second
        assert hash(first) == hash(second)
        assert first != other
        assert len({first, second, other}) == 2
