import logging
import random
from collections import Counter

from rps_desktop.games.base import Move, Outcome
from rps_desktop.games.rps import MoveSelector, RPSGame
from rps_desktop.games.tally import Tally


class ScriptedRng:
    def __init__(self, picks):
        self.picks = list(picks)
        self.calls = 0

    def choice(self, seq):
        self.calls += 1
        pick = self.picks.pop(0)
        assert pick in seq
        return pick


def test_selector_uses_injected_rng():
    selector = MoveSelector(ScriptedRng([Move.PAPER, Move.ROCK]))
    assert selector.choose() == Move.PAPER
    assert selector.choose() == Move.ROCK


def test_selector_picks_evenly():
    selector = MoveSelector(random.Random(7))
    counts = Counter(selector.choose() for _ in range(3000))
    assert set(counts) == set(Move)
    for move in Move:
        assert 850 < counts[move] < 1150


def test_play_round():
    game = RPSGame(MoveSelector(ScriptedRng([Move.SCISSORS])))
    update = game.play(Move.ROCK)
    assert update.player == Move.ROCK
    assert update.computer == Move.SCISSORS
    assert update.outcome == Outcome.PLAYER_WIN
    assert update.tally == Tally(player_wins=1)
    assert game.tally == update.tally
    assert update.text == "Rock vs Scissors: Player Wins"


def test_session_accumulates():
    rng = ScriptedRng([Move.SCISSORS, Move.PAPER, Move.PAPER, Move.ROCK])
    game = RPSGame(MoveSelector(rng))
    outcomes = [game.play(move).outcome for move in (Move.ROCK, Move.PAPER, Move.ROCK, Move.PAPER)]
    assert outcomes == [Outcome.PLAYER_WIN, Outcome.TIE, Outcome.COMPUTER_WIN, Outcome.PLAYER_WIN]
    assert game.tally == Tally(player_wins=2, computer_wins=1, ties=1)
    assert rng.calls == 4


def test_round_is_logged(caplog):
    game = RPSGame(MoveSelector(ScriptedRng([Move.PAPER])))
    with caplog.at_level(logging.INFO, logger="rps.game"):
        game.play(Move.PAPER)
    assert "Paper vs Paper: Tie" in caplog.text


def test_describe():
    assert RPSGame.describe(Move.SCISSORS, Move.ROCK, Outcome.COMPUTER_WIN) == "Scissors vs Rock: Computer Wins"
