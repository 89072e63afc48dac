import json
import logging
import os
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

_DEFAULT_SETTINGS_PATH = "~/.config/classfold/settings.json"


def get_settings_path() -> Path:
    return Path(os.getenv("CLASSFOLD_SETTINGS", _DEFAULT_SETTINGS_PATH)).expanduser()


class JsonFileConfigurationStore:
    """Flat ``{"classfold.autoFold": true, ...}`` settings file.

    The file is re-read on every access so external edits are picked up; a
    missing or unreadable file behaves as an empty one.
    """

    def __init__(self, path: str | Path | None = None) -> None:
        self.path = Path(path).expanduser() if path is not None else get_settings_path()

    def read_all(self) -> dict[str, Any]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except OSError:
            logger.warning("Could not read settings file %s", self.path, exc_info=True)
            return {}
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            logger.warning("Ignoring malformed settings file %s: %s", self.path, exc)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring settings file %s: top level is not an object", self.path)
            return {}
        return data

    def write_all(self, values: dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(values, indent=2, sort_keys=True) + "\n", encoding="utf-8")

    def get(self, key: str) -> Any:
        return self.read_all().get(key)

    def set(self, key: str, value: Any) -> None:
        values = self.read_all()
        values[key] = value
        self.write_all(values)
        logger.debug("Wrote %s=%r to %s", key, value, self.path)
