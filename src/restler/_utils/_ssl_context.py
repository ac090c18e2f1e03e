import os
import ssl
from typing import Any, Optional, Union

from .._config import Config

_CA_FILE_VARIABLES = ("SSL_CERT_FILE", "REQUESTS_CA_BUNDLE")
_CA_DIR_VARIABLE = "SSL_CERT_DIR"


def expand_path(path: Optional[str]) -> Optional[str]:
    """Expand environment variables and ``~`` in a path read from the environment."""
    if not path:
        return None
    return os.path.expanduser(os.path.expandvars(path))


def _ca_file() -> Optional[str]:
    for variable in _CA_FILE_VARIABLES:
        path = expand_path(os.environ.get(variable))
        if path:
            return path
    return None


def create_ssl_context() -> ssl.SSLContext:
    """SSL context trusting the system store when ``truststore`` is installed.

    Without it, ``SSL_CERT_FILE`` / ``REQUESTS_CA_BUNDLE`` / ``SSL_CERT_DIR``
    are honored and certifi's bundle is the fallback.
    """
    try:
        import truststore

        return truststore.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
    except ImportError:
        import certifi

        return ssl.create_default_context(
            cafile=_ca_file() or certifi.where(),
            capath=expand_path(os.environ.get(_CA_DIR_VARIABLE)),
        )


def get_httpx_client_kwargs(config: Config) -> dict[str, Any]:
    """Keyword arguments for ``httpx.Client`` derived from the configuration."""
    verify: Union[ssl.SSLContext, bool] = (
        create_ssl_context() if config.verify_ssl else False
    )
    return {
        "verify": verify,
        "timeout": config.timeout,
        "follow_redirects": config.follow_redirects,
    }
