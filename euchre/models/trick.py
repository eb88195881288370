"""Trick model tracking plays in order."""

from dataclasses import dataclass, field

from euchre.constants import NUM_PLAYERS, NUM_TEAMS
from euchre.models.card import Card
from euchre.models.enums import LeftRight, Suit
from euchre.models.hand_params import HandParams
from euchre.models.team_play import TeamPlay
from euchre.services.log_service import LogService

log_service = LogService(__name__)


@dataclass(frozen=True)
class PlayedCard:
    """A card played from a seat (0-3)."""

    seat: int
    card: Card


@dataclass
class Trick:
    """A single trick, played card by card.

    The comparator cannot order two off-suit discards, so the winner is
    tracked as an incumbent in play order: a later card takes over only
    when it strictly outranks the current best. Seats 0 and 2 form team 0,
    seats 1 and 3 form team 1.

    Attributes:
        params: Lead card and trump for this trick
        plays: Cards played so far, in order
        winner: Winning play once determined

    """

    params: HandParams
    plays: list[PlayedCard] = field(default_factory=list)
    winner: PlayedCard | None = None

    @classmethod
    def start(cls, trump: Suit, seat: int, lead: Card) -> "Trick":
        """Open a trick with its lead card already played."""
        trick = cls(HandParams(lead=lead, trump=trump))
        trick.add_card(seat, lead)
        return trick

    @staticmethod
    def team_of(seat: int) -> int:
        """Get the team index for a seat."""
        _check_seat(seat)
        return seat % NUM_TEAMS

    def has_seat_played(self, seat: int) -> bool:
        """Check if a seat has already played in this trick."""
        return any(play.seat == seat for play in self.plays)

    def card_of(self, seat: int) -> Card | None:
        """Get the card a seat played, None if it has not played."""
        for play in self.plays:
            if play.seat == seat:
                return play.card
        return None

    def add_card(self, seat: int, card: Card) -> bool:
        """Add a played card to this trick.

        The first play must be the lead card of ``params``; ``Trick.start``
        builds the context and records the lead in one call.

        Returns:
            True if the card was added, False if the seat already played,
            the card is already on the table, the trick is full, or a first
            play is not the lead card.

        Raises:
            ValueError: If seat is not 0-3.

        """
        _check_seat(seat)
        if self.is_complete() or self.has_seat_played(seat):
            return False
        if not self.plays and card != self.params.lead:
            return False
        if any(play.card == card for play in self.plays):
            return False
        self.plays.append(PlayedCard(seat, card))
        self.winner = None
        return True

    def is_complete(self) -> bool:
        """Check if all players have played."""
        return len(self.plays) == NUM_PLAYERS

    def determine_winner(self) -> PlayedCard | None:
        """Determine the best play so far.

        Returns:
            The winning play, or None if nothing was played.

        """
        if not self.plays:
            return None

        best = self.plays[0]
        for challenger in self.plays[1:]:
            # INDETERMINATE keeps the earlier card
            if self.params.compare(best.card, challenger.card) is LeftRight.RIGHT:
                best = challenger

        self.winner = best
        if log_service.is_debug_enabled():
            log_service.debug(
                {
                    "event": "trick_winner",
                    "trump": self.params.trump.value,
                    "plays": " ".join(play.card.short() for play in self.plays),
                    "seat": best.seat,
                    "card": best.card.short(),
                }
            )
        return best

    def winning_team(self) -> int | None:
        """Get the team index of the current best play."""
        best = self.determine_winner()
        return self.team_of(best.seat) if best else None

    def team_plays(self) -> tuple[TeamPlay, TeamPlay]:
        """Snapshot the plays grouped by team, absent seats left empty."""
        return (
            TeamPlay(self.card_of(0), self.card_of(2)),
            TeamPlay(self.card_of(1), self.card_of(3)),
        )

    def __str__(self) -> str:
        """Return string representation of the trick."""
        if self.winner:
            return f"Trick: Winner seat {self.winner.seat} with {self.winner.card}"
        return f"Trick: {len(self.plays)} cards played"


def _check_seat(seat: int) -> None:
    if not 0 <= seat < NUM_PLAYERS:
        raise ValueError(f"Invalid seat: {seat} (expected 0-{NUM_PLAYERS - 1})")
