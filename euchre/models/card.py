"""Card model."""

from dataclasses import dataclass

from euchre.constants import ACE_RANK, JACK_RANK, MAX_PIP_RANK, MIN_PIP_RANK
from euchre.models.enums import ALL_SPECIALS, ALL_SUITS, Special, Suit


class InvalidRankError(ValueError):
    """Raised when a card is built with a rank outside the deck."""

    def __init__(self, rank: object, low: int = MIN_PIP_RANK, high: int = MAX_PIP_RANK) -> None:
        self.rank = rank
        super().__init__(f"Invalid rank: {rank!r} (expected {low}-{high})")


def _check_rank(rank: object, low: int, high: int) -> int:
    # bool is an int subclass; True must not pass as rank 1
    if isinstance(rank, bool) or not isinstance(rank, int):
        raise InvalidRankError(rank, low, high)
    if rank < low or rank > high:
        raise InvalidRankError(rank, low, high)
    return rank


_SPECIAL_BY_RANK: dict[int, Special] = {special.rank: special for special in ALL_SPECIALS}
_SPECIAL_BY_LETTER: dict[str, Special] = {special.letter: special for special in ALL_SPECIALS}
_SUIT_BY_LETTER: dict[str, Suit] = {suit.letter: suit for suit in ALL_SUITS}


@dataclass(frozen=True)
class Card:
    """A playing card.

    Attributes:
        suit: Printed suit
        rank: 2-10 for pip cards, 11-14 for Jack, Queen, King, Ace

    Build pip cards with ``Card.new`` and face cards with ``Card.new_special``.

    """

    suit: Suit
    rank: int

    def __post_init__(self) -> None:
        """Reject ranks that no card in the deck carries."""
        _check_rank(self.rank, MIN_PIP_RANK, ACE_RANK)

    @classmethod
    def new(cls, suit: Suit, rank: int) -> "Card":
        """Create a pip card.

        Args:
            suit: Card suit
            rank: Numeric rank, 2 to 10

        Raises:
            InvalidRankError: If rank is outside 2-10. Face cards and the
                ace go through ``new_special``.

        """
        return cls(suit, _check_rank(rank, MIN_PIP_RANK, MAX_PIP_RANK))

    @classmethod
    def new_special(cls, suit: Suit, special: Special) -> "Card":
        """Create a face card or ace."""
        return cls(suit, special.rank)

    @classmethod
    def from_string(cls, label: str) -> "Card":
        """Parse a short label such as ``"10H"``, ``"JS"`` or ``"ad"``."""
        text = label.strip().upper()
        if len(text) < 2:
            raise ValueError(f"Invalid card label: {label!r}")

        rank_text, suit_text = text[:-1], text[-1]
        suit = _SUIT_BY_LETTER.get(suit_text)
        if suit is None:
            raise ValueError(f"Invalid suit in card label: {label!r}")

        special = _SPECIAL_BY_LETTER.get(rank_text)
        if special is not None:
            return cls.new_special(suit, special)
        if not rank_text.isdigit():
            raise ValueError(f"Invalid rank in card label: {label!r}")
        return cls.new(suit, int(rank_text))

    def is_jack(self) -> bool:
        """Check if card is a Jack (a bower candidate)."""
        return self.rank == JACK_RANK

    @property
    def special(self) -> Special | None:
        """Face value of the card, None for pip cards."""
        return _SPECIAL_BY_RANK.get(self.rank)

    def short(self) -> str:
        """Short label, e.g. '10H', 'JS'."""
        special = self.special
        rank_label = special.letter if special else str(self.rank)
        return f"{rank_label}{self.suit.letter}"

    def __str__(self) -> str:
        """Return string representation of card."""
        special = self.special
        rank_label = special.value.title() if special else str(self.rank)
        return f"{rank_label} of {self.suit.value.title()}"
