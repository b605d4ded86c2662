# src/tetrio/api/params/pagination.py
"""
Bounded cursoring shared by every paginated endpoint.

A paginated entry carries a prisecter: three floats (primary, secondary,
tertiary) compared lexicographically. To get the next page, pass the
prisecter of the last entry you saw back through ``after`` (continue
scrolling down) or ``before`` (scroll up; the server then returns entries
in ascending order).
"""
import dataclasses
import math
from dataclasses import dataclass
from decimal import Decimal
from typing import ClassVar, List, Optional, Sequence, Tuple

from ..errors import InvalidArgumentError

Triple = Tuple[float, float, float]


def _to_triple(values: Sequence[float]) -> Triple:
    if isinstance(values, (str, bytes)) or len(values) != 3:
        raise InvalidArgumentError(
            f"A bound needs exactly three sort keys. Received: {values!r}"
        )
    return (float(values[0]), float(values[1]), float(values[2]))


def format_key(value: float) -> str:
    """
    Render a sort key the way the API expects bare numbers.

    500000.0 -> "500000", 0.25 -> "0.25", 1e-07 -> "0.0000001"
    """
    if not math.isfinite(value):
        return repr(value)
    if value.is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), "f")


@dataclass(frozen=True)
class Bound:
    keys: Triple
    param: ClassVar[str] = ""

    def __init__(self, keys: Sequence[float]) -> None:
        object.__setattr__(self, "keys", _to_triple(keys))

    def to_query_param(self) -> Tuple[str, str]:
        return self.param, ":".join(format_key(k) for k in self.keys)

    def to_array(self) -> List[float]:
        return list(self.keys)


class After(Bound):
    """Upper bound. Entries strictly below the keys, in descending order."""

    param = "after"


class Before(Bound):
    """Lower bound. Entries strictly above the keys, order reversed."""

    param = "before"


def validate_limit(limit: object, minimum: int = 1, maximum: int = 100) -> int:
    # bool is an int subclass, but limit(True) is always a caller bug
    if isinstance(limit, bool) or not isinstance(limit, int):
        raise InvalidArgumentError(
            f"The argument `limit` must be an integer. Received: {limit!r}"
        )
    if not minimum <= limit <= maximum:
        raise InvalidArgumentError(
            f"The argument `limit` must be between {minimum} and {maximum}. "
            f"Received: {limit}"
        )
    return limit


@dataclass
class PaginatedCriteria:
    """
    Bound and result limit shared by every search criteria family.

    Setters return a new criteria and leave the receiver untouched, so they
    compose in any order. ``init()`` resets the receiver in place.
    """

    bound: Optional[Bound] = None
    entry_limit: Optional[int] = None

    min_limit: ClassVar[int] = 1
    max_limit: ClassVar[int] = 100

    def after(self, keys: Sequence[float]):
        return dataclasses.replace(self, bound=After(keys))

    def before(self, keys: Sequence[float]):
        return dataclasses.replace(self, bound=Before(keys))

    def limit(self, limit: int):
        validate_limit(limit, self.min_limit, self.max_limit)
        return dataclasses.replace(self, entry_limit=limit)

    def init(self) -> None:
        for f in dataclasses.fields(self):
            setattr(self, f.name, f.default)

    def validate_limit(self) -> None:
        """Check the limit again, for criteria filled in by assignment."""
        if self.entry_limit is not None:
            validate_limit(self.entry_limit, self.min_limit, self.max_limit)

    def _filters(self) -> List[Tuple[str, str]]:
        return []

    def build(self) -> List[Tuple[str, str]]:
        params: List[Tuple[str, str]] = []
        if self.bound is not None:
            params.append(self.bound.to_query_param())
        if self.entry_limit is not None:
            params.append(("limit", str(self.entry_limit)))
        params.extend(self._filters())
        return params
