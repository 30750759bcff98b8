from enum import Enum


class Move(Enum):
    ROCK = "Rock"
    PAPER = "Paper"
    SCISSORS = "Scissors"


class Outcome(Enum):
    PLAYER_WIN = "Player Wins"
    COMPUTER_WIN = "Computer Wins"
    TIE = "Tie"

    @property
    def label(self) -> str:
        return self.value
