import os
import ssl
from logging import getLogger
from typing import TYPE_CHECKING, Any, Union

import httpx

from .constants import (
    ENV_REQUESTS_CA_BUNDLE,
    ENV_SSL_CERT_DIR,
    ENV_SSL_CERT_FILE,
    LOGGER_NAME,
)

if TYPE_CHECKING:
    from .._config import ClientConfig

logger = getLogger(LOGGER_NAME)


def expand_path(path):
    """Expand environment variables and user home directory in path."""
    if not path:
        return path
    path = os.path.expandvars(path)
    path = os.path.expanduser(path)
    return path


def create_ssl_context() -> ssl.SSLContext:
    # Try truststore first (system certificates)
    try:
        import truststore

        return truststore.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
    except ImportError:
        # Fallback to manual certificate configuration
        import certifi

        ssl_cert_file = expand_path(os.environ.get(ENV_SSL_CERT_FILE))
        requests_ca_bundle = expand_path(os.environ.get(ENV_REQUESTS_CA_BUNDLE))
        ssl_cert_dir = expand_path(os.environ.get(ENV_SSL_CERT_DIR))

        return ssl.create_default_context(
            cafile=ssl_cert_file or requests_ca_bundle or certifi.where(),
            capath=ssl_cert_dir,
        )


def get_httpx_client_kwargs(config: "ClientConfig") -> dict[str, Any]:
    """Translate a client configuration into ``httpx`` client keyword arguments.

    The same kwargs are used for the sync and the async client so both share
    one set of network and TLS limits.

    Args:
        config: The configuration to translate.

    Returns:
        dict[str, Any]: Keyword arguments for ``httpx.Client`` / ``httpx.AsyncClient``.
    """
    verify: Union[ssl.SSLContext, bool]
    if config.verify_tls:
        verify = create_ssl_context()
    else:
        logger.warning(
            "TLS certificate verification is disabled; "
            "server certificates will not be checked"
        )
        verify = False

    return {
        "verify": verify,
        "timeout": httpx.Timeout(config.timeout, connect=config.connect_timeout),
        "limits": httpx.Limits(
            max_connections=config.max_connections,
            max_keepalive_connections=config.max_keepalive_connections,
            keepalive_expiry=config.keepalive_expiry,
        ),
        "http2": config.http2,
        "follow_redirects": config.follow_redirects,
        "headers": dict(config.default_headers),
    }
