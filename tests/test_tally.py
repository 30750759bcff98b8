import random

from rps_desktop.games.base import Outcome
from rps_desktop.games.tally import Tally, apply


def test_starts_at_zero():
    tally = Tally()
    assert (tally.player_wins, tally.computer_wins, tally.ties) == (0, 0, 0)
    assert tally.rounds == 0


def test_player_win_only_bumps_player_wins():
    tally = Tally(player_wins=3, computer_wins=2, ties=1)
    result = apply(tally, Outcome.PLAYER_WIN)
    assert result.player_wins == 4
    assert result.computer_wins == 2
    assert result.ties == 1


def test_apply_leaves_input_untouched():
    tally = Tally()
    apply(tally, Outcome.TIE)
    assert tally == Tally()


def test_sequence():
    tally = Tally()
    for outcome in [Outcome.PLAYER_WIN, Outcome.TIE, Outcome.COMPUTER_WIN, Outcome.PLAYER_WIN]:
        tally = apply(tally, outcome)
    assert tally == Tally(player_wins=2, computer_wins=1, ties=1)


def test_counters_sum_to_rounds_played():
    rng = random.Random(1234)
    tally = Tally()
    for n in range(1, 201):
        tally = apply(tally, rng.choice(list(Outcome)))
        assert tally.player_wins + tally.computer_wins + tally.ties == n
        assert tally.rounds == n


def test_summary():
    assert Tally(1, 2, 3).summary() == "Wins: 1  Losses: 2  Ties: 3"
