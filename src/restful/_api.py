"""Module-level request helpers bound to a process-wide default client.

The default client is built once, on first use, from ``ClientConfig()`` and is
shared by every call that does not pass its own ``client``. It lives for the
rest of the process.
"""

import threading
from typing import Any, Optional, Union

from httpx import URL

from ._client import HeaderMapping, RestClient
from .models.methods import HttpMethod

_default_client: Optional[RestClient] = None
_default_client_lock = threading.Lock()


def default_client() -> RestClient:
    """Return the process-wide client, creating it on first call."""
    global _default_client
    if _default_client is None:
        with _default_client_lock:
            if _default_client is None:
                _default_client = RestClient()
    return _default_client


def _resolve(client: Optional[RestClient]) -> RestClient:
    return client if client is not None else default_client()


def request(
    method: Union[HttpMethod, str],
    url: Union[URL, str],
    headers: HeaderMapping = None,
    body: Any = None,
    *,
    result_type: Any = Any,
    timeout: Optional[float] = None,
    client: Optional[RestClient] = None,
) -> Any:
    """Send one request through ``client`` or the default client.

    See :meth:`RestClient.request` for the arguments and raised errors.
    """
    return _resolve(client).request(
        method, url, headers, body, result_type=result_type, timeout=timeout
    )


def get(
    url: Union[URL, str],
    headers: HeaderMapping = None,
    *,
    result_type: Any = Any,
    timeout: Optional[float] = None,
    client: Optional[RestClient] = None,
) -> Any:
    return _resolve(client).get(url, headers, result_type=result_type, timeout=timeout)


def post(
    url: Union[URL, str],
    headers: HeaderMapping = None,
    body: Any = None,
    *,
    result_type: Any = Any,
    timeout: Optional[float] = None,
    client: Optional[RestClient] = None,
) -> Any:
    return _resolve(client).post(
        url, headers, body, result_type=result_type, timeout=timeout
    )


def put(
    url: Union[URL, str],
    headers: HeaderMapping = None,
    body: Any = None,
    *,
    result_type: Any = Any,
    timeout: Optional[float] = None,
    client: Optional[RestClient] = None,
) -> Any:
    return _resolve(client).put(
        url, headers, body, result_type=result_type, timeout=timeout
    )


def patch(
    url: Union[URL, str],
    headers: HeaderMapping = None,
    body: Any = None,
    *,
    result_type: Any = Any,
    timeout: Optional[float] = None,
    client: Optional[RestClient] = None,
) -> Any:
    return _resolve(client).patch(
        url, headers, body, result_type=result_type, timeout=timeout
    )


def delete(
    url: Union[URL, str],
    headers: HeaderMapping = None,
    body: Any = None,
    *,
    result_type: Any = Any,
    timeout: Optional[float] = None,
    client: Optional[RestClient] = None,
) -> Any:
    return _resolve(client).delete(
        url, headers, body, result_type=result_type, timeout=timeout
    )


async def request_async(
    method: Union[HttpMethod, str],
    url: Union[URL, str],
    headers: HeaderMapping = None,
    body: Any = None,
    *,
    result_type: Any = Any,
    timeout: Optional[float] = None,
    client: Optional[RestClient] = None,
) -> Any:
    return await _resolve(client).request_async(
        method, url, headers, body, result_type=result_type, timeout=timeout
    )


async def get_async(
    url: Union[URL, str],
    headers: HeaderMapping = None,
    *,
    result_type: Any = Any,
    timeout: Optional[float] = None,
    client: Optional[RestClient] = None,
) -> Any:
    return await _resolve(client).get_async(
        url, headers, result_type=result_type, timeout=timeout
    )


async def post_async(
    url: Union[URL, str],
    headers: HeaderMapping = None,
    body: Any = None,
    *,
    result_type: Any = Any,
    timeout: Optional[float] = None,
    client: Optional[RestClient] = None,
) -> Any:
    return await _resolve(client).post_async(
        url, headers, body, result_type=result_type, timeout=timeout
    )


async def put_async(
    url: Union[URL, str],
    headers: HeaderMapping = None,
    body: Any = None,
    *,
    result_type: Any = Any,
    timeout: Optional[float] = None,
    client: Optional[RestClient] = None,
) -> Any:
    return await _resolve(client).put_async(
        url, headers, body, result_type=result_type, timeout=timeout
    )


async def patch_async(
    url: Union[URL, str],
    headers: HeaderMapping = None,
    body: Any = None,
    *,
    result_type: Any = Any,
    timeout: Optional[float] = None,
    client: Optional[RestClient] = None,
) -> Any:
    return await _resolve(client).patch_async(
        url, headers, body, result_type=result_type, timeout=timeout
    )


async def delete_async(
    url: Union[URL, str],
    headers: HeaderMapping = None,
    body: Any = None,
    *,
    result_type: Any = Any,
    timeout: Optional[float] = None,
    client: Optional[RestClient] = None,
) -> Any:
    return await _resolve(client).delete_async(
        url, headers, body, result_type=result_type, timeout=timeout
    )
