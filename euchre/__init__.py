"""Euchre trick resolution.

Compare cards under a lead card and trump suit (bowers included), reduce
partially played tricks and decide which team takes a trick.
"""

from euchre.models import (
    ALL_SPECIALS,
    ALL_SUITS,
    Card,
    HandParams,
    InvalidRankError,
    LeftRight,
    PlayedCard,
    Special,
    Suit,
    TeamPlay,
    Trick,
    compare_optional,
    pick_best,
    resolve_teams,
)

__all__ = [
    "ALL_SPECIALS",
    "ALL_SUITS",
    "Card",
    "HandParams",
    "InvalidRankError",
    "LeftRight",
    "PlayedCard",
    "Special",
    "Suit",
    "TeamPlay",
    "Trick",
    "compare_optional",
    "pick_best",
    "resolve_teams",
]
