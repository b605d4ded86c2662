# src/tetrio/api/errors.py
from http import HTTPStatus
from typing import Optional


class InvalidArgumentError(ValueError):
    """Raised when a caller passes a value the API would never accept."""


class ClientCreationError(Exception):
    """Raised when a client cannot be built from the given settings."""


class ResponseError(Exception):
    """Base class for everything that can go wrong during a request."""


class TransportError(ResponseError):
    """The HTTP call itself could not complete (DNS, connection, timeout...)."""


class DeserializeError(ResponseError):
    """
    The response body did not match the expected shape.

    Usually means the upstream schema changed under this library.
    """


class HttpError(ResponseError):
    """A non-success HTTP status came back without a readable error body."""

    def __init__(self, status_code: Optional[int]) -> None:
        self.status_code = status_code
        super().__init__(self._describe())

    @property
    def is_valid_status(self) -> bool:
        return self.status_code is not None and 100 <= self.status_code <= 599

    def _describe(self) -> str:
        if not self.is_valid_status:
            return "HTTP error (Invalid HTTP status code)"
        try:
            phrase = HTTPStatus(self.status_code).phrase
        except ValueError:
            return f"HTTP error {self.status_code}"
        return f"HTTP error {self.status_code} {phrase}"
