"""Enums for suits, face cards and comparison outcomes."""

from enum import Enum

from euchre.constants import ACE_RANK, JACK_RANK, KING_RANK, QUEEN_RANK


class Suit(str, Enum):
    """Card suits, in deck order."""

    SPADES = "spades"
    HEARTS = "hearts"
    DIAMONDS = "diamonds"
    CLUBS = "clubs"

    def opposite_color(self) -> "Suit":
        """Return the other suit of the same color.

        Only used to find the left bower.
        """
        match self:
            case Suit.SPADES:
                return Suit.CLUBS
            case Suit.HEARTS:
                return Suit.DIAMONDS
            case Suit.DIAMONDS:
                return Suit.HEARTS
            case Suit.CLUBS:
                return Suit.SPADES

    @property
    def letter(self) -> str:
        """Single-letter label (S, H, D, C)."""
        return self.value[0].upper()


class Special(str, Enum):
    """Face cards and the ace."""

    JACK = "jack"
    QUEEN = "queen"
    KING = "king"
    ACE = "ace"

    @property
    def rank(self) -> int:
        """Numeric rank used for ordering."""
        match self:
            case Special.JACK:
                return JACK_RANK
            case Special.QUEEN:
                return QUEEN_RANK
            case Special.KING:
                return KING_RANK
            case Special.ACE:
                return ACE_RANK

    @property
    def letter(self) -> str:
        """Single-letter label (J, Q, K, A)."""
        return self.value[0].upper()


class LeftRight(str, Enum):
    """Which of two compared operands prevails.

    INDETERMINATE means the two operands alone do not establish an order,
    e.g. two off-suit discards. It is a real outcome, not an error.
    """

    LEFT = "left"
    RIGHT = "right"
    INDETERMINATE = "indeterminate"

    @property
    def decided(self) -> bool:
        """Check if one side won."""
        return self is not LeftRight.INDETERMINATE

    def mirror(self) -> "LeftRight":
        """Return the outcome with the operands swapped."""
        match self:
            case LeftRight.LEFT:
                return LeftRight.RIGHT
            case LeftRight.RIGHT:
                return LeftRight.LEFT
            case LeftRight.INDETERMINATE:
                return LeftRight.INDETERMINATE


ALL_SUITS: tuple[Suit, ...] = tuple(Suit)
ALL_SPECIALS: tuple[Special, ...] = tuple(Special)
