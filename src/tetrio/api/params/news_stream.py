from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class NewsStream:
    """The global news stream, or the news stream of one user."""

    user_id: Optional[str] = None

    @classmethod
    def user(cls, user_id: str) -> "NewsStream":
        return cls(user_id=user_id)

    def to_param(self) -> str:
        if self.user_id is None:
            return "global"
        return f"user_{self.user_id}"


NewsStream.GLOBAL = NewsStream()
