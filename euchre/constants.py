"""Card and table constants."""

# Pip cards are built from a numeric rank; face cards map above it.
MIN_PIP_RANK = 2
MAX_PIP_RANK = 10

JACK_RANK = 11
QUEEN_RANK = 12
KING_RANK = 13
ACE_RANK = 14

NUM_TEAMS = 2
PLAYERS_PER_TEAM = 2
NUM_PLAYERS = NUM_TEAMS * PLAYERS_PER_TEAM
