import pytest

from httpbridge import extract_domain, is_valid_url
from httpbridge._utils._urls import check_url
from httpbridge.models.errors import ErrorKind


class TestExtractDomain:
    @pytest.mark.parametrize(
        "url, expected",
        [
            ("https://api.example.com/v1/data?x=1", "api.example.com"),
            ("http://x.com", "x.com"),
            ("https://example.com?q=1/2", "example.com"),
            ("http://localhost:8080/health", "localhost:8080"),
            ("example.org/path", "example.org"),
            ("https://", ""),
        ],
    )
    def test_extract_domain(self, url: str, expected: str):
        assert extract_domain(url) == expected


class TestIsValidUrl:
    @pytest.mark.parametrize(
        "url",
        ["http://example.com", "https://api.example.com/v1?x=1", "https://a", "HTTPS://Example.com"],
    )
    def test_valid(self, url: str):
        assert is_valid_url(url) is True

    @pytest.mark.parametrize(
        "url, kind",
        [
            ("", ErrorKind.MISSING_URL),
            ("ftp://example.com", ErrorKind.INVALID_URL_SCHEME),
            ("example.com", ErrorKind.INVALID_URL_SCHEME),
            ("https://", ErrorKind.INVALID_URL_EMPTY),
            ("http://", ErrorKind.INVALID_URL_EMPTY),
            ("https://exa mple.com", ErrorKind.INVALID_URL_CHARACTERS),
            ("https://example.com/<script>", ErrorKind.INVALID_URL_CHARACTERS),
        ],
    )
    def test_invalid(self, url: str, kind: ErrorKind):
        assert is_valid_url(url) is False
        assert check_url(url) is kind

    def test_repeated_calls_agree(self):
        results = {is_valid_url("https://example.com/a b") for _ in range(10)}
        assert results == {False}
