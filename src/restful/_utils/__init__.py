from ._logs import setup_logging
from ._ssl_context import create_ssl_context, get_httpx_client_kwargs

__all__ = [
    "create_ssl_context",
    "get_httpx_client_kwargs",
    "setup_logging",
]
