import sys
import logging
from pathlib import Path

from PySide6.QtCore import QObject
from PySide6.QtWidgets import QApplication

from rps_desktop.ui.main_window import MainWindow
from rps_desktop.ui.theme import apply_theme
from rps_desktop.storage.settings import SettingsManager, AppSettings
from rps_desktop.games.base import Move
from rps_desktop.games.rps import RPSGame

LOG = logging.getLogger("rps")

ASSETS_DIR = Path(__file__).resolve().parent / "assets"


class GameController(QObject):
    def __init__(self, settings: AppSettings, game: RPSGame | None = None):
        super().__init__()
        self.settings = settings
        self.game = game or RPSGame()

        icon_dir = Path(settings.icon_dir).expanduser() if settings.icon_dir else ASSETS_DIR
        self.ui = MainWindow(settings.window_title, icon_dir)
        self.ui.moveClicked.connect(self.handle_move)
        self.ui.quitClicked.connect(self.quit)
        self.ui.set_tally(self.game.tally)

    def start(self):
        self.ui.center_on_screen()
        self.ui.show()
        LOG.info("Window shown: %s", self.settings.window_title)

    def handle_move(self, move: Move):
        update = self.game.play(move)
        self.ui.set_tally(update.tally)
        self.ui.append_result(update.text)

    def quit(self):
        LOG.info("Quitting after %d rounds (%s)", self.game.tally.rounds, self.game.tally.summary())
        QApplication.instance().quit()


def setup_logging(data_dir: Path, settings: AppSettings):
    handlers = [logging.StreamHandler(sys.stdout)]
    if settings.log_to_file:
        handlers.insert(0, logging.FileHandler(data_dir / "rps.log", encoding="utf-8"))
    logging.basicConfig(
        level=settings.log_level_value(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=handlers,
    )


def main():
    app = QApplication(sys.argv)

    settings_manager = SettingsManager()
    settings, error = settings_manager.load_or_default()
    setup_logging(settings_manager.data_dir, settings)
    if error is not None:
        LOG.error("Using default settings: %s", error)
    apply_theme(app, settings.theme)

    controller = GameController(settings)
    controller.start()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
