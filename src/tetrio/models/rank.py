from enum import Enum


class Rank(str, Enum):
    """A TETRA LEAGUE letter rank. ``z`` means unranked."""

    D = "d"
    D_PLUS = "d+"
    C_MINUS = "c-"
    C = "c"
    C_PLUS = "c+"
    B_MINUS = "b-"
    B = "b"
    B_PLUS = "b+"
    A_MINUS = "a-"
    A = "a"
    A_PLUS = "a+"
    S_MINUS = "s-"
    S = "s"
    S_PLUS = "s+"
    SS = "ss"
    U = "u"
    X = "x"
    X_PLUS = "x+"
    Z = "z"

    @property
    def display_name(self) -> str:
        if self is Rank.Z:
            return "Unranked"
        return self.value.upper()

    @property
    def is_unranked(self) -> bool:
        return self is Rank.Z

    @property
    def icon_url(self) -> str:
        return f"https://tetr.io/res/league-ranks/{self.value}.png"

    @property
    def color(self) -> int:
        return RANK_COLORS[self]


RANK_COLORS = {
    Rank.D: 0x907591,
    Rank.D_PLUS: 0x8E6091,
    Rank.C_MINUS: 0x79558C,
    Rank.C: 0x733E8F,
    Rank.C_PLUS: 0x552883,
    Rank.B_MINUS: 0x5650C7,
    Rank.B: 0x4F64C9,
    Rank.B_PLUS: 0x4F99C0,
    Rank.A_MINUS: 0x3BB687,
    Rank.A: 0x46AD51,
    Rank.A_PLUS: 0x1FA834,
    Rank.S_MINUS: 0xB2972B,
    Rank.S: 0xE0A71B,
    Rank.S_PLUS: 0xD8AF0E,
    Rank.SS: 0xDB8B1F,
    Rank.U: 0xFF3813,
    Rank.X: 0xFF45FF,
    Rank.X_PLUS: 0xA763EA,
    Rank.Z: 0x767671,
}

# Color of the unofficial "XX" rank. No rank maps to it any more.
LEGACY_XX_COLOR = 0xFF8FFF
