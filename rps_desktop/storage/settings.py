import json
import logging
from dataclasses import dataclass, asdict
from pathlib import Path

LOG = logging.getLogger("rps.settings")


class SettingsError(Exception):
    pass


@dataclass
class AppSettings:
    window_title: str = "Rock Paper Scissors Game"
    icon_dir: str = ""  # empty: bundled assets directory
    theme: str = "light"  # light | plain
    log_level: str = "INFO"
    log_to_file: bool = True

    def log_level_value(self) -> int:
        level = logging.getLevelName(str(self.log_level).upper())
        return level if isinstance(level, int) else logging.INFO


class SettingsManager:
    def __init__(self, data_dir: Path | None = None):
        self.data_dir = data_dir or self._default_data_dir()
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self.path = self.data_dir / "settings.json"

    def _default_data_dir(self) -> Path:
        return Path.home() / ".rps_desktop"

    def load(self) -> AppSettings:
        if not self.path.exists():
            return AppSettings()
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as exc:
            raise SettingsError(f"{self.path} is not valid JSON: {exc}") from exc
        except UnicodeDecodeError as exc:
            raise SettingsError(f"{self.path} is not UTF-8 text: {exc}") from exc
        except OSError as exc:
            raise SettingsError(f"{self.path} could not be read: {exc}") from exc
        if not isinstance(data, dict):
            raise SettingsError(f"{self.path} must hold a JSON object")
        return self._from_dict(data)

    def load_or_default(self):
        """Return (settings, error).

        A first run writes the defaults out so they can be edited; a broken
        file yields the defaults plus the SettingsError for the caller to log.
        """
        if not self.path.exists():
            settings = AppSettings()
            self.save(settings)
            return settings, None
        try:
            return self.load(), None
        except SettingsError as exc:
            return AppSettings(), exc

    def save(self, settings: AppSettings):
        with self.path.open("w", encoding="utf-8") as f:
            json.dump(asdict(settings), f, indent=2)

    def _from_dict(self, data: dict) -> AppSettings:
        settings = AppSettings()
        for key, value in data.items():
            if not hasattr(settings, key):
                LOG.debug("Ignoring unknown setting %s", key)
                continue
            expected = type(getattr(settings, key))
            if type(value) is not expected:
                LOG.warning("Ignoring setting %s: expected %s, got %r", key, expected.__name__, value)
                continue
            setattr(settings, key, value)
        return settings
