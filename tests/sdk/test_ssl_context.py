import ssl

import pytest

from httpbridge._utils._ssl_context import (
    _env_path,
    create_ssl_context,
    get_httpx_client_kwargs,
)


class TestSslContext:
    def test_env_path_expands_user_and_vars(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("HOME", "/home/tester")
        monkeypatch.setenv("CERTS", "/etc/certs")
        monkeypatch.setenv("SSL_CERT_FILE", "~/ca.pem")
        monkeypatch.setenv("SSL_CERT_DIR", "$CERTS/extra")

        assert _env_path("SSL_CERT_FILE") == "/home/tester/ca.pem"
        assert _env_path("SSL_CERT_DIR") == "/etc/certs/extra"

    def test_env_path_unset_or_empty(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.delenv("SSL_CERT_FILE", raising=False)
        monkeypatch.setenv("SSL_CERT_DIR", "")

        assert _env_path("SSL_CERT_FILE") is None
        assert _env_path("SSL_CERT_DIR") is None

    def test_context_verifies_peers(self):
        context = create_ssl_context()

        assert isinstance(context, ssl.SSLContext)
        assert context.verify_mode == ssl.CERT_REQUIRED

    def test_client_kwargs_carry_context(self):
        kwargs = get_httpx_client_kwargs()

        assert isinstance(kwargs["verify"], ssl.SSLContext)
