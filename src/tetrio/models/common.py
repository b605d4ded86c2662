"""
Pieces shared by every endpoint: the response envelope, cache metadata,
prisecters and the ``get_user`` shortcut.
"""
from datetime import datetime, timezone
from enum import Enum
from typing import TYPE_CHECKING, Any, ClassVar, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

if TYPE_CHECKING:
    from ..api.ch_client import Client

DataT = TypeVar("DataT")


class TetrioModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


def to_unix_ts(ts: str) -> int:
    """Parse an RFC 3339 / ISO 8601 timestamp into UNIX seconds."""
    parsed = datetime.fromisoformat(ts.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return int(parsed.timestamp())


class ErrorResponse(TetrioModel):
    msg: Optional[str] = None
    key: Optional[str] = None
    context: Optional[Any] = None

    @model_validator(mode="before")
    @classmethod
    def _accept_bare_message(cls, value: Any) -> Any:
        # some endpoints send "error": "message" instead of an object
        if isinstance(value, str):
            return {"msg": value}
        return value


class CacheStatus(str, Enum):
    HIT = "hit"
    MISS = "miss"
    AWAITED = "awaited"


class CacheData(TetrioModel):
    """Whether (and until when) the upstream server answered from cache."""

    status: CacheStatus
    cached_at: int
    cached_until: int

    @property
    def cached_at_seconds(self) -> int:
        return self.cached_at // 1000

    @property
    def cached_until_seconds(self) -> int:
        return self.cached_until // 1000


class Response(TetrioModel, Generic[DataT]):
    """
    Envelope around every endpoint's payload.

    A successful response always carries ``data``; a failed one never does
    and should carry ``error`` instead.
    """

    is_success: bool = Field(alias="success")
    error: Optional[ErrorResponse] = None
    cache: Optional[CacheData] = None
    data: Optional[DataT] = None

    @model_validator(mode="after")
    def _check_data(self) -> "Response[DataT]":
        if self.is_success and self.data is None:
            raise ValueError("a successful response must carry `data`")
        if not self.is_success and self.data is not None:
            raise ValueError("a failed response must not carry `data`")
        return self


class ErrorEnvelope(TetrioModel):
    """The part of an envelope that is still readable when ``data`` is not."""

    is_success: bool = Field(default=False, alias="success")
    error: ErrorResponse
    cache: Optional[CacheData] = None


class Prisecter(TetrioModel):
    """
    Sort position of a paginated entry: primary, secondary and tertiary keys.

    Feed ``to_array()`` into ``SearchCriteria.after`` / ``before`` to
    continue paginating from this entry.
    """

    pri: float
    sec: float
    ter: float

    def to_array(self) -> List[float]:
        return [self.pri, self.sec, self.ter]


class UserLookup:
    """Adds ``get_user()`` to models that carry a user id or username."""

    user_key_field: ClassVar[str] = "id"

    def get_user(self, client: Optional["Client"] = None) -> "Response[Any]":
        from ..api.ch_client import Client

        key = str(getattr(self, self.user_key_field))
        if client is not None:
            return client.get_user(key)
        with Client() as owned:
            return owned.get_user(key)


def country_flag_url(country: Optional[str]) -> Optional[str]:
    if country is None:
        return None
    return f"https://tetr.io/res/flags/{country.lower()}.png"
