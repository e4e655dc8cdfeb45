from enum import Enum
from typing import Union


class HttpMethod(str, Enum):
    """HTTP methods supported by the request helpers."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"  # RFC 5789
    DELETE = "DELETE"

    @classmethod
    def parse(cls, method: Union["HttpMethod", str]) -> "HttpMethod":
        """Normalise a method given as an enum member or a case-insensitive string.

        Raises:
            ValueError: If the method is not one of the supported ones.
        """
        if isinstance(method, HttpMethod):
            return method
        try:
            return cls(method.upper())
        except (AttributeError, ValueError):
            supported = ", ".join(m.value for m in cls)
            raise ValueError(
                f"Unsupported HTTP method {method!r}; expected one of {supported}"
            ) from None
