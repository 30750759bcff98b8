from dataclasses import dataclass, replace

from rps_desktop.games.base import Outcome


@dataclass(frozen=True)
class Tally:
    player_wins: int = 0
    computer_wins: int = 0
    ties: int = 0

    @property
    def rounds(self) -> int:
        return self.player_wins + self.computer_wins + self.ties

    def summary(self) -> str:
        return f"Wins: {self.player_wins}  Losses: {self.computer_wins}  Ties: {self.ties}"


_FIELDS = {
    Outcome.PLAYER_WIN: "player_wins",
    Outcome.COMPUTER_WIN: "computer_wins",
    Outcome.TIE: "ties",
}


def apply(tally: Tally, outcome: Outcome) -> Tally:
    """Return a copy of ``tally`` with the counter for ``outcome`` bumped by one."""
    field = _FIELDS[outcome]
    return replace(tally, **{field: getattr(tally, field) + 1})
