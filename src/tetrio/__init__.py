"""Typed client for the TETRA CHANNEL API (https://ch.tetr.io/api/)."""
import logging

from . import models
from .api import params
from .api.ch_client import Client
from .api.errors import (
    ClientCreationError,
    DeserializeError,
    HttpError,
    InvalidArgumentError,
    ResponseError,
    TransportError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "Client",
    "ClientCreationError",
    "DeserializeError",
    "HttpError",
    "InvalidArgumentError",
    "ResponseError",
    "TransportError",
    "models",
    "params",
]
