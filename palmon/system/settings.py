from __future__ import annotations
import json, os
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Callable, List, Optional
from palmon.core.logging import logger, LEVELS

SETTINGS_FILENAME = ".palmon_settings.json"

@dataclass
class SettingsData:
    log_level: str = "INFO"        # DEBUG / INFO / WARN / ERROR
    debug: bool = False            # Show pending deferred steps in the terminal view
    text_speed: int = 2            # 1 fast, 2 normal, 3 slow
    wild_count: int = 5            # Wild creatures spawned per new game
    rng_seed: Optional[int] = None

    def normalize(self):
        if self.text_speed not in {1,2,3}:
            self.text_speed = 2
        if self.log_level not in LEVELS:
            self.log_level = "INFO"
        if not isinstance(self.wild_count, int) or not 1 <= self.wild_count <= 20:
            self.wild_count = 5
        if self.rng_seed is not None and not isinstance(self.rng_seed, int):
            self.rng_seed = None
        self.debug = bool(self.debug)

    @property
    def pacing(self) -> float:
        """Wall-clock seconds per virtual second of battle pacing."""
        return {1: 0.5, 2: 1.0, 3: 1.5}[self.text_speed]

class Settings:
    def __init__(self, data: SettingsData, path: Path):
        self.data = data
        self.path = path
        self._listeners: List[Callable[[SettingsData], None]] = []

    @classmethod
    def _resolve_path(cls) -> Path:
        home = Path(os.path.expanduser("~"))
        if home.is_dir() and os.access(home, os.W_OK):
            return home / SETTINGS_FILENAME
        return Path.cwd() / SETTINGS_FILENAME

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "Settings":
        path = path or cls._resolve_path()
        if path.exists():
            try:
                raw = json.loads(path.read_text(encoding="utf-8"))
                # Backfill missing fields; unknown keys are dropped
                field_names = {f.name for f in fields(SettingsData)}
                data = SettingsData(**{k: v for k, v in raw.items() if k in field_names})
                data.normalize()
                logger.debug("SettingsLoaded", path=str(path))
                return cls(data, path)
            except (OSError, ValueError, TypeError, AttributeError) as e:
                logger.warn("SettingsParseFailedUsingDefaults", path=str(path), error=str(e))
        data = SettingsData()
        data.normalize()
        return cls(data, path)

    def save(self):
        try:
            self.path.write_text(json.dumps(asdict(self.data), indent=2), encoding="utf-8")
            logger.debug("SettingsSaved", path=str(self.path))
        except OSError as e:
            logger.error("SettingsSaveFailed", error=str(e))

    def on_change(self, fn: Callable[[SettingsData], None]):
        self._listeners.append(fn)

    def _notify(self):
        for fn in self._listeners:
            fn(self.data)

    def update(self, **changes):
        for k, v in changes.items():
            if not hasattr(self.data, k):
                raise AttributeError(f"Unknown setting '{k}'")
            setattr(self.data, k, v)
        self.data.normalize()
        logger.set_level(self.data.log_level)
        self.save()
        self._notify()
