# src/tetrio/api/response.py
import logging
from typing import Any, Optional, Type

import requests
from pydantic import ValidationError

from ..models.common import ErrorEnvelope, Response
from .errors import DeserializeError, HttpError

LOGGER = logging.getLogger(__name__)


def _is_success_status(status_code: Optional[int]) -> bool:
    return status_code is not None and 200 <= status_code <= 299


def _decode_error_only(payload: Any) -> Optional[ErrorEnvelope]:
    try:
        return ErrorEnvelope.model_validate(payload)
    except ValidationError:
        return None


def decode_response(
    response: requests.Response, envelope: Type[Response[Any]]
) -> Response[Any]:
    """
    Turn an HTTP response into the expected envelope.

    Even a failed request may come with a readable ``{"error": ...}`` body,
    so that is tried before falling back to a bare HTTP error.

    Raises:
        DeserializeError: 2xx status but the body has an unexpected shape.
        HttpError: non-2xx status and no error message could be read.
    """
    status_code = response.status_code
    is_success = _is_success_status(status_code)

    try:
        payload = response.json()
    except ValueError as exc:
        if is_success:
            raise DeserializeError(f"Response body is not valid JSON: {exc}") from exc
        raise HttpError(status_code) from exc

    try:
        return envelope.model_validate(payload)
    except ValidationError as exc:
        if is_success:
            raise DeserializeError(str(exc)) from exc

        failure = _decode_error_only(payload)
        if failure is None:
            raise HttpError(status_code) from exc

        LOGGER.debug("HTTP %s carried an error body: %s", status_code, failure.error.msg)
        return envelope.model_validate(
            {"success": False, "error": failure.error, "cache": failure.cache}
        )
