from enum import Enum


class Role(str, Enum):
    USER = "user"
    ANON = "anon"
    BOT = "bot"
    SYSOP = "sysop"
    ADMIN = "admin"
    MOD = "mod"
    HALFMOD = "halfmod"
    BANNED = "banned"
    HIDDEN = "hidden"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES = {
    Role.USER: "User",
    Role.ANON: "Anonymous",
    Role.BOT: "Bot",
    Role.SYSOP: "SYSOP",
    Role.ADMIN: "Administrator",
    Role.MOD: "Moderator",
    Role.HALFMOD: "Community moderator",
    Role.BANNED: "Banned user",
    Role.HIDDEN: "Hidden user",
}


class RoleMixin:
    """Role predicates for models with a ``role`` field."""

    @property
    def is_normal_user(self) -> bool:
        return self.role is Role.USER

    @property
    def is_anon(self) -> bool:
        return self.role is Role.ANON

    @property
    def is_bot(self) -> bool:
        return self.role is Role.BOT

    @property
    def is_sysop(self) -> bool:
        return self.role is Role.SYSOP

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMIN

    @property
    def is_mod(self) -> bool:
        return self.role is Role.MOD

    @property
    def is_halfmod(self) -> bool:
        return self.role is Role.HALFMOD

    @property
    def is_banned(self) -> bool:
        return self.role is Role.BANNED

    @property
    def is_hidden(self) -> bool:
        return self.role is Role.HIDDEN
