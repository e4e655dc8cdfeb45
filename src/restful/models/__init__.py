from .exceptions import DecodeError, HttpStatusError, RestfulError, SerializationError
from .methods import HttpMethod

__all__ = [
    "DecodeError",
    "HttpMethod",
    "HttpStatusError",
    "RestfulError",
    "SerializationError",
]
