from typing import Any, Optional

from httpx import HTTPStatusError


class RestfulError(Exception):
    """Base class for errors raised by restful."""


class SerializationError(RestfulError):
    """The request payload could not be encoded as JSON. No request was sent."""


class HttpStatusError(RestfulError):
    """The server answered with a status code outside ``[200, 300)``.

    Carries the status code, the reason phrase and the raw response body so
    callers can inspect error details sent by the server.
    """

    def __init__(
        self,
        status_code: int,
        reason_phrase: str,
        body: bytes,
        method: str,
        url: str,
    ) -> None:
        self.status_code = status_code
        self.reason_phrase = reason_phrase
        self.body = body
        self.method = method
        self.url = url

        super().__init__(
            f"code: {status_code}, status: {reason_phrase}, body: {self.text}"
        )

    @classmethod
    def from_httpx(cls, error: HTTPStatusError) -> "HttpStatusError":
        response = error.response
        return cls(
            status_code=response.status_code,
            reason_phrase=response.reason_phrase,
            body=response.content,
            method=error.request.method,
            url=str(error.request.url),
        )

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")

    def __reduce__(self) -> tuple[Any, ...]:
        return (
            self.__class__,
            (self.status_code, self.reason_phrase, self.body, self.method, self.url),
        )


class DecodeError(RestfulError):
    """The response body could not be decoded into the requested result type."""

    def __init__(
        self, message: str, body: bytes, result_type: Optional[object] = None
    ) -> None:
        self.body = body
        self.result_type = result_type
        super().__init__(message)

    def __reduce__(self) -> tuple[Any, ...]:
        return (self.__class__, (str(self), self.body, self.result_type))
