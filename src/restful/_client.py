import json
from functools import lru_cache
from logging import getLogger
from typing import Any, Mapping, Optional, Union

from httpx import (
    URL,
    AsyncClient,
    Client,
    Headers,
    HTTPStatusError,
    Response,
)
from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError, to_jsonable_python

from ._config import ClientConfig
from ._utils._ssl_context import get_httpx_client_kwargs
from ._utils.constants import APPLICATION_JSON, HEADER_CONTENT_TYPE, LOGGER_NAME
from .models.exceptions import DecodeError, HttpStatusError, SerializationError
from .models.methods import HttpMethod

HeaderMapping = Optional[Mapping[str, str]]


@lru_cache(maxsize=256)
def _cached_type_adapter(result_type: Any) -> TypeAdapter[Any]:
    return TypeAdapter(result_type)


def _type_adapter(result_type: Any) -> TypeAdapter[Any]:
    try:
        hash(result_type)
    except TypeError:
        return TypeAdapter(result_type)
    return _cached_type_adapter(result_type)


def encode_body(body: Any) -> bytes:
    """Serialize a request payload to JSON bytes.

    Anything pydantic can dump is accepted: builtin containers and scalars,
    pydantic models, dataclasses, datetimes, UUIDs and so on. NaN and
    infinities have no JSON representation and are rejected.

    Raises:
        SerializationError: If the payload cannot be represented as JSON.
    """
    try:
        return json.dumps(
            to_jsonable_python(body), allow_nan=False, separators=(",", ":")
        ).encode("utf-8")
    except (PydanticSerializationError, TypeError, ValueError) as e:
        raise SerializationError(
            f"Failed to encode request body of type {type(body).__name__} as JSON: {e}"
        ) from e


def decode_body(content: bytes, result_type: Any) -> Any:
    """Decode a JSON response body into ``result_type``.

    ``result_type=None`` skips decoding and returns ``None``.

    Raises:
        DecodeError: If the body is not valid JSON for ``result_type``.
    """
    if result_type is None:
        return None
    try:
        return _type_adapter(result_type).validate_json(content)
    except ValidationError as e:
        raise DecodeError(
            f"Failed to decode response body as {getattr(result_type, '__name__', result_type)}: {e}",
            body=content,
            result_type=result_type,
        ) from e


class RestClient:
    """JSON-over-HTTP client backed by a shared ``httpx`` connection pool.

    One instance holds a sync ``httpx`` client and, once an async method is
    first called, an async one built from the same :class:`ClientConfig`. Instances are safe to share between threads, and
    the async methods can run concurrently in one event loop.

    Every request follows the same round trip: encode the optional JSON payload,
    send, reject non-2xx responses with :class:`HttpStatusError`, decode the
    body into the requested result type. Nothing is retried.
    """

    def __init__(self, config: Optional[ClientConfig] = None) -> None:
        self._logger = getLogger(LOGGER_NAME)
        self._config = config if config is not None else ClientConfig()

        self._client_kwargs = get_httpx_client_kwargs(self._config)

        self._client = Client(**self._client_kwargs)
        self._client_async: Optional[AsyncClient] = None

    @property
    def config(self) -> ClientConfig:
        return self._config

    def _get_client_async(self) -> AsyncClient:
        if self._client.is_closed:
            raise RuntimeError(
                "Cannot send a request, as the client has been closed."
            )
        if self._client_async is None:
            self._client_async = AsyncClient(**self._client_kwargs)
        return self._client_async

    def _log_request(
        self, method: HttpMethod, url: Union[URL, str], headers: Headers
    ) -> None:
        # client defaults merged with the per-call headers, as httpx sends them
        effective = Headers(self._client.headers)
        effective.update(headers)
        self._logger.debug(f"Request: {method.value} {url}")
        self._logger.debug(f"HEADERS: {list(effective.keys())}")

    def _build_request_kwargs(
        self,
        method: Union[HttpMethod, str],
        headers: HeaderMapping,
        body: Any,
        timeout: Optional[float],
    ) -> tuple[HttpMethod, dict[str, Any]]:
        http_method = HttpMethod.parse(method)

        request_headers = Headers()
        kwargs: dict[str, Any] = {"headers": request_headers}

        if http_method is not HttpMethod.GET:
            if body is not None:
                kwargs["content"] = encode_body(body)
            request_headers[HEADER_CONTENT_TYPE] = APPLICATION_JSON

        # caller headers win, including over Content-Type
        if headers:
            for key, value in headers.items():
                request_headers[key] = value

        if timeout is not None:
            kwargs["timeout"] = timeout

        return http_method, kwargs

    def _process_response(self, response: Response, result_type: Any) -> Any:
        self._logger.debug(
            f"Response: {response.status_code} {response.request.method} {response.request.url}"
        )
        try:
            response.raise_for_status()
        except HTTPStatusError as e:
            # include the http response in the error message
            raise HttpStatusError.from_httpx(e) from e

        return decode_body(response.content, result_type)

    def request(
        self,
        method: Union[HttpMethod, str],
        url: Union[URL, str],
        headers: HeaderMapping = None,
        body: Any = None,
        *,
        result_type: Any = Any,
        timeout: Optional[float] = None,
    ) -> Any:
        """Send one request and decode the JSON response.

        Args:
            method: One of GET, POST, PUT, PATCH, DELETE (case-insensitive).
            url: Absolute URL of the target.
            headers: Extra headers. They are applied last and replace any
                default with the same (case-insensitive) name, including
                ``Content-Type``.
            body: Payload serialized as JSON for non-GET methods. ``None``
                sends no body. GET requests never carry a body.
            result_type: Shape the response body is decoded into; anything a
                pydantic ``TypeAdapter`` accepts. Defaults to plain JSON values.
                ``None`` skips decoding.
            timeout: Per-call timeout in seconds overriding the client default.

        Returns:
            Any: The decoded response body.

        Raises:
            ValueError: If the method is not supported.
            SerializationError: If ``body`` cannot be encoded. Nothing is sent.
            HttpStatusError: If the status code is outside ``[200, 300)``.
            DecodeError: If the response body does not match ``result_type``.
            httpx.TransportError: On connection, DNS, TLS or timeout failures.
        """
        http_method, kwargs = self._build_request_kwargs(method, headers, body, timeout)

        self._log_request(http_method, url, kwargs["headers"])

        response = self._client.request(http_method.value, url, **kwargs)
        try:
            return self._process_response(response, result_type)
        finally:
            response.close()

    async def request_async(
        self,
        method: Union[HttpMethod, str],
        url: Union[URL, str],
        headers: HeaderMapping = None,
        body: Any = None,
        *,
        result_type: Any = Any,
        timeout: Optional[float] = None,
    ) -> Any:
        """Asynchronous counterpart of :meth:`request`."""
        http_method, kwargs = self._build_request_kwargs(method, headers, body, timeout)

        self._log_request(http_method, url, kwargs["headers"])

        response = await self._get_client_async().request(
            http_method.value, url, **kwargs
        )
        try:
            return self._process_response(response, result_type)
        finally:
            await response.aclose()

    def get(
        self,
        url: Union[URL, str],
        headers: HeaderMapping = None,
        *,
        result_type: Any = Any,
        timeout: Optional[float] = None,
    ) -> Any:
        return self.request(
            HttpMethod.GET, url, headers, result_type=result_type, timeout=timeout
        )

    def post(
        self,
        url: Union[URL, str],
        headers: HeaderMapping = None,
        body: Any = None,
        *,
        result_type: Any = Any,
        timeout: Optional[float] = None,
    ) -> Any:
        return self.request(
            HttpMethod.POST, url, headers, body, result_type=result_type, timeout=timeout
        )

    def put(
        self,
        url: Union[URL, str],
        headers: HeaderMapping = None,
        body: Any = None,
        *,
        result_type: Any = Any,
        timeout: Optional[float] = None,
    ) -> Any:
        return self.request(
            HttpMethod.PUT, url, headers, body, result_type=result_type, timeout=timeout
        )

    def patch(
        self,
        url: Union[URL, str],
        headers: HeaderMapping = None,
        body: Any = None,
        *,
        result_type: Any = Any,
        timeout: Optional[float] = None,
    ) -> Any:
        return self.request(
            HttpMethod.PATCH, url, headers, body, result_type=result_type, timeout=timeout
        )

    def delete(
        self,
        url: Union[URL, str],
        headers: HeaderMapping = None,
        body: Any = None,
        *,
        result_type: Any = Any,
        timeout: Optional[float] = None,
    ) -> Any:
        return self.request(
            HttpMethod.DELETE, url, headers, body, result_type=result_type, timeout=timeout
        )

    async def get_async(
        self,
        url: Union[URL, str],
        headers: HeaderMapping = None,
        *,
        result_type: Any = Any,
        timeout: Optional[float] = None,
    ) -> Any:
        return await self.request_async(
            HttpMethod.GET, url, headers, result_type=result_type, timeout=timeout
        )

    async def post_async(
        self,
        url: Union[URL, str],
        headers: HeaderMapping = None,
        body: Any = None,
        *,
        result_type: Any = Any,
        timeout: Optional[float] = None,
    ) -> Any:
        return await self.request_async(
            HttpMethod.POST, url, headers, body, result_type=result_type, timeout=timeout
        )

    async def put_async(
        self,
        url: Union[URL, str],
        headers: HeaderMapping = None,
        body: Any = None,
        *,
        result_type: Any = Any,
        timeout: Optional[float] = None,
    ) -> Any:
        return await self.request_async(
            HttpMethod.PUT, url, headers, body, result_type=result_type, timeout=timeout
        )

    async def patch_async(
        self,
        url: Union[URL, str],
        headers: HeaderMapping = None,
        body: Any = None,
        *,
        result_type: Any = Any,
        timeout: Optional[float] = None,
    ) -> Any:
        return await self.request_async(
            HttpMethod.PATCH, url, headers, body, result_type=result_type, timeout=timeout
        )

    async def delete_async(
        self,
        url: Union[URL, str],
        headers: HeaderMapping = None,
        body: Any = None,
        *,
        result_type: Any = Any,
        timeout: Optional[float] = None,
    ) -> Any:
        return await self.request_async(
            HttpMethod.DELETE, url, headers, body, result_type=result_type, timeout=timeout
        )

    def close(self) -> None:
        """Release the sync connection pool.

        An async pool opened by the ``*_async`` methods can only be released
        from a running event loop; use :meth:`aclose` for clients used both ways.
        """
        self._client.close()
        if self._client_async is not None and not self._client_async.is_closed:
            self._logger.warning(
                "RestClient.close() left the async connection pool open; "
                "use aclose() to release it"
            )

    async def aclose(self) -> None:
        if self._client_async is not None:
            await self._client_async.aclose()
        self._client.close()

    def __enter__(self) -> "RestClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    async def __aenter__(self) -> "RestClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()
