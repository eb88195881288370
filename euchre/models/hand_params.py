"""Trick context and the pairwise card comparator."""

from dataclasses import dataclass

from euchre import config
from euchre.models.card import Card
from euchre.models.enums import LeftRight, Suit
from euchre.services.log_service import LogService

log_service = LogService(__name__)


@dataclass(frozen=True)
class HandParams:
    """Per-trick context: the lead card and the trump suit.

    Built once per trick and passed to every comparison.

    Attributes:
        lead: First card played in the trick
        trump: Trump suit for the hand

    """

    lead: Card
    trump: Suit

    def is_right_bower(self, card: Card) -> bool:
        """Check if card is the Jack of trump."""
        return card.is_jack() and card.suit == self.trump

    def is_left_bower(self, card: Card) -> bool:
        """Check if card is the Jack of trump's color partner."""
        return card.is_jack() and card.suit == self.trump.opposite_color()

    def effective_suit(self, card: Card) -> Suit:
        """Suit the card plays as; the left bower belongs to trump."""
        if self.is_left_bower(card):
            return self.trump
        return card.suit

    def is_trump(self, card: Card) -> bool:
        """Check if card plays as trump (bowers included)."""
        return self.effective_suit(card) == self.trump

    @property
    def lead_suit(self) -> Suit:
        """Suit that must be followed.

        A led left bower establishes trump, not its printed suit.
        """
        return self.effective_suit(self.lead)

    def follows_suit(self, card: Card) -> bool:
        """Check if card is of the suit to follow."""
        return self.effective_suit(card) == self.lead_suit

    def compare(self, left: Card, right: Card) -> LeftRight:
        """Decide which of two cards outranks the other.

        Precedence: right bower, left bower, other trumps by rank, then
        cards of the suit to follow by rank. Two non-trump cards that both
        fail to follow suit cannot be ordered and yield INDETERMINATE; the
        caller decides using play order.

        Args:
            left: First operand
            right: Second operand

        Returns:
            LEFT or RIGHT for the winning operand, or INDETERMINATE

        """
        outcome = self._compare(left, right)
        if config.settings.trace_comparisons:
            log_service.debug(
                {
                    "event": "compare",
                    "lead": self.lead.short(),
                    "trump": self.trump.value,
                    "left": left.short(),
                    "right": right.short(),
                    "outcome": outcome.value,
                }
            )
        return outcome

    def _compare(self, left: Card, right: Card) -> LeftRight:  # noqa: PLR0911
        # Bowers
        if self.is_right_bower(left):
            return LeftRight.LEFT
        if self.is_right_bower(right):
            return LeftRight.RIGHT
        if self.is_left_bower(left):
            return LeftRight.LEFT
        if self.is_left_bower(right):
            return LeftRight.RIGHT

        # Trump
        match (self.is_trump(left), self.is_trump(right)):
            case (True, True):
                return _higher_rank(left, right)
            case (True, False):
                return LeftRight.LEFT
            case (False, True):
                return LeftRight.RIGHT

        # Suit to follow
        match (self.follows_suit(left), self.follows_suit(right)):
            case (True, True):
                return _higher_rank(left, right)
            case (True, False):
                return LeftRight.LEFT
            case (False, True):
                return LeftRight.RIGHT
            case _:
                return LeftRight.INDETERMINATE


def _higher_rank(left: Card, right: Card) -> LeftRight:
    """Compare two cards of the same effective suit by rank."""
    if left.rank > right.rank:
        return LeftRight.LEFT
    if left.rank < right.rank:
        return LeftRight.RIGHT
    # Duplicate cards; callers never pass them
    return LeftRight.INDETERMINATE
