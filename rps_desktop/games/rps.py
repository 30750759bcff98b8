import logging
import random
from dataclasses import dataclass

from rps_desktop.games.base import Move, Outcome
from rps_desktop.games.tally import Tally, apply

LOG = logging.getLogger("rps.game")

# each move beats the one it maps to
BEATS = {
    Move.ROCK: Move.SCISSORS,
    Move.SCISSORS: Move.PAPER,
    Move.PAPER: Move.ROCK,
}


def resolve(player: Move, computer: Move) -> Outcome:
    if player == computer:
        return Outcome.TIE
    if BEATS[player] == computer:
        return Outcome.PLAYER_WIN
    return Outcome.COMPUTER_WIN


class MoveSelector:
    """Uniform random pick for the computer.

    ``rng`` only needs a ``choice(seq)`` method, so a seeded
    ``random.Random`` or a scripted stub can stand in for the default.
    """

    def __init__(self, rng=None):
        self.rng = rng or random.Random()
        self._moves = tuple(Move)

    def choose(self) -> Move:
        return self.rng.choice(self._moves)


@dataclass(frozen=True)
class RoundUpdate:
    player: Move
    computer: Move
    outcome: Outcome
    tally: Tally
    text: str = ""


class RPSGame:
    def __init__(self, selector: MoveSelector | None = None):
        self.selector = selector or MoveSelector()
        self.tally = Tally()

    def play(self, player: Move) -> RoundUpdate:
        computer = self.selector.choose()
        outcome = resolve(player, computer)
        self.tally = apply(self.tally, outcome)
        update = RoundUpdate(player, computer, outcome, self.tally, self.describe(player, computer, outcome))
        LOG.info("Round %d: %s (%s)", self.tally.rounds, update.text, self.tally.summary())
        return update

    @staticmethod
    def describe(player: Move, computer: Move, outcome: Outcome) -> str:
        return f"{player.value} vs {computer.value}: {outcome.label}"
