"""Euchre domain models."""

from euchre.models.card import Card, InvalidRankError
from euchre.models.enums import ALL_SPECIALS, ALL_SUITS, LeftRight, Special, Suit
from euchre.models.hand_params import HandParams
from euchre.models.team_play import TeamPlay, compare_optional, pick_best, resolve_teams
from euchre.models.trick import PlayedCard, Trick

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
