from ._api import (
    default_client,
    delete,
    delete_async,
    get,
    get_async,
    patch,
    patch_async,
    post,
    post_async,
    put,
    put_async,
    request,
    request_async,
)
from ._client import RestClient
from ._config import ClientConfig
from ._utils import setup_logging
from .models import (
    DecodeError,
    HttpMethod,
    HttpStatusError,
    RestfulError,
    SerializationError,
)

__all__ = [
    "ClientConfig",
    "DecodeError",
    "HttpMethod",
    "HttpStatusError",
    "RestClient",
    "RestfulError",
    "SerializationError",
    "default_client",
    "delete",
    "delete_async",
    "get",
    "get_async",
    "patch",
    "patch_async",
    "post",
    "post_async",
    "put",
    "put_async",
    "request",
    "request_async",
    "setup_logging",
]
