from pathlib import Path

from PySide6.QtCore import Signal
from PySide6.QtGui import QKeySequence, QShortcut
from PySide6.QtWidgets import QMainWindow, QWidget, QVBoxLayout

from rps_desktop.games.base import Move
from rps_desktop.games.tally import Tally
from rps_desktop.ui.widgets import ButtonPanel, StatsPanel, ResultsLog


class MainWindow(QMainWindow):
    moveClicked = Signal(object)
    quitClicked = Signal()

    def __init__(self, title: str, icon_dir: Path):
        super().__init__()
        self.setWindowTitle(title)

        central = QWidget()
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)

        self.button_panel = ButtonPanel(icon_dir)
        self.button_panel.moveClicked.connect(self.moveClicked.emit)
        self.button_panel.quitClicked.connect(self.quitClicked.emit)
        layout.addWidget(self.button_panel)

        self.stats_panel = StatsPanel()
        layout.addWidget(self.stats_panel)

        self.results = ResultsLog()
        layout.addWidget(self.results)
        layout.setStretchFactor(self.results, 2)

        # keyed by shortcut letter
        self.shortcuts = {}
        for move in Move:
            self._add_shortcut(move.value[0], lambda m=move: self.moveClicked.emit(m))
        self._add_shortcut("Q", self.quitClicked.emit)

    def _add_shortcut(self, key: str, slot):
        shortcut = QShortcut(QKeySequence(key), self)
        shortcut.activated.connect(slot)
        self.shortcuts[key] = shortcut

    def set_tally(self, tally: Tally):
        self.stats_panel.set_tally(tally)

    def append_result(self, text: str):
        self.results.add_line(text)

    def center_on_screen(self):
        self.adjustSize()
        screen = self.screen()
        if screen is None:
            return
        frame = self.frameGeometry()
        frame.moveCenter(screen.availableGeometry().center())
        self.move(frame.topLeft())
