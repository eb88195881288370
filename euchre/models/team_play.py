"""Optional-card reduction and team trick resolution."""

from dataclasses import dataclass

from euchre.models.card import Card
from euchre.models.enums import LeftRight
from euchre.models.hand_params import HandParams
from euchre.services.log_service import LogService

log_service = LogService(__name__)


def compare_optional(params: HandParams, left: Card | None, right: Card | None) -> LeftRight:
    """Compare two plays where either player may not have played yet.

    A present card beats an absent one without consulting the comparator.
    """
    if left is None and right is None:
        return LeftRight.INDETERMINATE
    if right is None:
        return LeftRight.LEFT
    if left is None:
        return LeftRight.RIGHT
    return params.compare(left, right)


def pick_best(params: HandParams, left: Card | None, right: Card | None) -> Card | None:
    """Return the winning card of two optional plays, None if undecided."""
    outcome = compare_optional(params, left, right)
    if not outcome.decided:
        return None
    return left if outcome is LeftRight.LEFT else right


@dataclass(frozen=True)
class TeamPlay:
    """Cards played so far by the two members of one team.

    Attributes:
        first: Card of the first partner, None if not yet played
        second: Card of the second partner, None if not yet played

    """

    first: Card | None = None
    second: Card | None = None

    def cards(self) -> list[Card]:
        """Get the cards actually played."""
        return [card for card in (self.first, self.second) if card is not None]

    def highest_card(self, params: HandParams) -> Card | None:
        """Get the team's best card, or None if it cannot be decided."""
        return pick_best(params, self.first, self.second)


def resolve_teams(params: HandParams, team0: TeamPlay, team1: TeamPlay) -> LeftRight:
    """Decide which team's best card wins the trick.

    Each team is reduced to its best card first, then the two candidates
    are compared.

    Args:
        params: Trick context
        team0: Plays of the first team
        team1: Plays of the second team

    Returns:
        LEFT if team0 wins, RIGHT if team1 wins, INDETERMINATE if no
        ordering could be derived

    """
    best0 = team0.highest_card(params)
    best1 = team1.highest_card(params)
    outcome = compare_optional(params, best0, best1)

    if log_service.is_debug_enabled():
        log_service.debug(
            {
                "event": "resolve_teams",
                "lead": params.lead.short(),
                "trump": params.trump.value,
                "team0": best0.short() if best0 else "-",
                "team1": best1.short() if best1 else "-",
                "outcome": outcome.value,
            }
        )
    return outcome
