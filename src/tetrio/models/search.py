from typing import Optional

from pydantic import Field

from .common import TetrioModel, UserLookup


class UserInfo(TetrioModel, UserLookup):
    id: str = Field(alias="_id")
    username: str


class SearchedUser(TetrioModel):
    """Result of a social-connection search. ``user`` is None when nobody matched."""

    user: Optional[UserInfo] = None
