from . import params
from .errors import (
    ClientCreationError,
    DeserializeError,
    HttpError,
    InvalidArgumentError,
    ResponseError,
    TransportError,
)

__all__ = [
    "ClientCreationError",
    "DeserializeError",
    "HttpError",
    "InvalidArgumentError",
    "ResponseError",
    "TransportError",
    "params",
]
