"""Tests for optional-card reduction and team resolution."""

from euchre.models.card import Card
from euchre.models.enums import LeftRight, Suit
from euchre.models.hand_params import HandParams
from euchre.models.team_play import TeamPlay, compare_optional, pick_best, resolve_teams


def c(label: str) -> Card:
    """Build a card from its short label."""
    return Card.from_string(label)


class TestCompareOptional:
    """Reduction over possibly absent plays."""

    def test_both_absent(self):
        """No cards means no winner."""
        hp = HandParams(lead=c("9H"), trump=Suit.HEARTS)
        assert compare_optional(hp, None, None) == LeftRight.INDETERMINATE
        assert pick_best(hp, None, None) is None

    def test_present_card_wins(self):
        """A present card beats an absent one regardless of rank."""
        hp = HandParams(lead=c("AH"), trump=Suit.SPADES)
        assert compare_optional(hp, c("9D"), None) == LeftRight.LEFT
        assert compare_optional(hp, None, c("9D")) == LeftRight.RIGHT
        assert pick_best(hp, None, c("9C")) == c("9C")

    def test_present_card_does_not_consult_comparator(self):
        """The comparator is only used when both cards are present."""

        class ExplodingParams(HandParams):
            def compare(self, left, right):
                raise AssertionError("compare should not be called")

        hp = ExplodingParams(lead=c("AH"), trump=Suit.SPADES)
        assert compare_optional(hp, c("9D"), None) == LeftRight.LEFT
        assert compare_optional(hp, None, c("9D")) == LeftRight.RIGHT

    def test_both_present_delegates(self):
        """Two cards use the comparator."""
        hp = HandParams(lead=c("10H"), trump=Suit.SPADES)
        assert compare_optional(hp, c("9H"), c("10D")) == LeftRight.LEFT
        assert pick_best(hp, c("9H"), c("JS")) == c("JS")

    def test_indeterminate_propagates(self):
        """Two discards stay indeterminate."""
        hp = HandParams(lead=c("10H"), trump=Suit.SPADES)
        assert compare_optional(hp, c("10D"), c("10C")) == LeftRight.INDETERMINATE
        assert pick_best(hp, c("10D"), c("10C")) is None


class TestTeamPlay:
    """TeamPlay snapshot."""

    def test_cards(self):
        """Only played cards are listed."""
        assert TeamPlay().cards() == []
        assert TeamPlay(None, c("9H")).cards() == [c("9H")]
        assert TeamPlay(c("AS"), c("9H")).cards() == [c("AS"), c("9H")]

    def test_highest_card(self):
        """Team's best card under the trick context."""
        hp = HandParams(lead=c("9H"), trump=Suit.HEARTS)
        assert TeamPlay(c("9H"), c("9D")).highest_card(hp) == c("9H")
        assert TeamPlay(c("JD"), c("AH")).highest_card(hp) == c("JD")
        assert TeamPlay(None, c("AS")).highest_card(hp) == c("AS")
        assert TeamPlay().highest_card(hp) is None


class TestResolveTeams:
    """Team trick resolution."""

    def test_team_following_suit_wins(self):
        """Team with the trump lead card beats two discards."""
        hp = HandParams(lead=c("9H"), trump=Suit.HEARTS)
        team_a = TeamPlay(c("9H"), c("9D"))
        team_b = TeamPlay(c("9S"), c("9C"))
        assert resolve_teams(hp, team_a, team_b) == LeftRight.LEFT
        assert resolve_teams(hp, team_b, team_a) == LeftRight.RIGHT

    def test_bower_wins_for_team(self):
        """Right bower takes the trick for its team."""
        hp = HandParams(lead=c("AS"), trump=Suit.CLUBS)
        team_a = TeamPlay(c("AS"), c("AC"))
        team_b = TeamPlay(c("9S"), c("JC"))
        assert resolve_teams(hp, team_a, team_b) == LeftRight.RIGHT

    def test_left_bower_beats_trump_ace_across_teams(self):
        """Left bower beats the opposing trump ace."""
        hp = HandParams(lead=c("KS"), trump=Suit.CLUBS)
        team_a = TeamPlay(c("KS"), c("JS"))
        team_b = TeamPlay(c("AS"), c("AC"))
        assert resolve_teams(hp, team_a, team_b) == LeftRight.LEFT

    def test_partial_trick(self):
        """A team that has played beats a team that has not."""
        hp = HandParams(lead=c("9D"), trump=Suit.SPADES)
        assert resolve_teams(hp, TeamPlay(c("9D")), TeamPlay()) == LeftRight.LEFT
        assert resolve_teams(hp, TeamPlay(), TeamPlay(None, c("9C"))) == LeftRight.RIGHT

    def test_all_absent(self):
        """Nothing played resolves to indeterminate."""
        hp = HandParams(lead=c("9D"), trump=Suit.SPADES)
        assert resolve_teams(hp, TeamPlay(), TeamPlay()) == LeftRight.INDETERMINATE

    def test_all_discards(self):
        """Only unrankable discards resolve to indeterminate."""
        hp = HandParams(lead=c("9H"), trump=Suit.SPADES)
        team_a = TeamPlay(c("9D"), c("9C"))
        team_b = TeamPlay(c("10D"), c("10C"))
        assert resolve_teams(hp, team_a, team_b) == LeftRight.INDETERMINATE
