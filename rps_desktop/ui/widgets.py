import logging
from pathlib import Path

from PySide6.QtCore import Signal
from PySide6.QtGui import QIcon
from PySide6.QtWidgets import QGroupBox, QTextEdit, QLabel, QLineEdit, QPushButton, QGridLayout, QHBoxLayout

from rps_desktop.games.base import Move
from rps_desktop.games.tally import Tally

LOG = logging.getLogger("rps.ui")

ICON_FILES = {
    Move.ROCK: "rock.jpg",
    Move.PAPER: "paper.jpg",
    Move.SCISSORS: "scissors.jpg",
}
QUIT_ICON = "end game.png"


def load_icon(icon_dir: Path, filename: str):
    path = icon_dir / filename
    if not path.exists():
        LOG.warning("Icon not found: %s", path)
        return None
    icon = QIcon(str(path))
    if icon.isNull():
        LOG.warning("Icon could not be loaded: %s", path)
        return None
    return icon


class ButtonPanel(QGroupBox):
    moveClicked = Signal(object)
    quitClicked = Signal()

    def __init__(self, icon_dir: Path, parent=None):
        super().__init__("Game Options", parent)
        layout = QHBoxLayout(self)
        self.buttons = {}

        for move in Move:
            btn = self._create_button(move.value, icon_dir, ICON_FILES[move])
            btn.setObjectName("gameBtn")
            btn.clicked.connect(lambda checked=False, m=move: self.moveClicked.emit(m))
            layout.addWidget(btn)
            self.buttons[move] = btn

        self.quit_button = self._create_button("Quit", icon_dir, QUIT_ICON)
        self.quit_button.setObjectName("danger")
        self.quit_button.clicked.connect(self.quitClicked.emit)
        layout.addWidget(self.quit_button)

    def _create_button(self, label: str, icon_dir: Path, icon_file: str):
        btn = QPushButton(label)
        icon = load_icon(icon_dir, icon_file)
        if icon is not None:
            btn.setIcon(icon)
        return btn


class StatsPanel(QGroupBox):
    def __init__(self, parent=None):
        super().__init__("Game Stats", parent)
        grid = QGridLayout(self)
        self.player_wins_field = self._create_stat_field()
        self.computer_wins_field = self._create_stat_field()
        self.ties_field = self._create_stat_field()

        rows = [
            ("Player Wins:", self.player_wins_field),
            ("Computer Wins:", self.computer_wins_field),
            ("Ties:", self.ties_field),
        ]
        for row, (text, field) in enumerate(rows):
            grid.addWidget(QLabel(text), row, 0)
            grid.addWidget(field, row, 1)

    def _create_stat_field(self):
        field = QLineEdit()
        field.setObjectName("statField")
        field.setReadOnly(True)
        return field

    def set_tally(self, tally: Tally):
        self.player_wins_field.setText(str(tally.player_wins))
        self.computer_wins_field.setText(str(tally.computer_wins))
        self.ties_field.setText(str(tally.ties))


class ResultsLog(QTextEdit):
    def __init__(self, parent=None):
        super().__init__(parent)
        self.setReadOnly(True)
        self.setObjectName("results")
        self.setMinimumHeight(180)

    def add_line(self, text: str):
        self.append(text)
        self.verticalScrollBar().setValue(self.verticalScrollBar().maximum())
