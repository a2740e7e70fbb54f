"""Runtime settings for the telemetry console."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


@dataclass(frozen=True)
class Settings:
    """
    Console settings with defaults and optional YAML overrides.

    ``catalog_path`` of None means the bundled solar car catalog.
    """

    interval_s: float = 2.0
    catalog_path: Optional[Path] = None
    imperial_units: bool = False
    seed: Optional[int] = None
    log_level: str = "INFO"
    json_logs: bool = False

    @classmethod
    def load(cls, path: str | Path | None = None) -> "Settings":
        """
        Load settings from a YAML file.

        Args:
            path: Settings file. Defaults are returned when None.

        Returns:
            Settings instance. Keys that are not settings are ignored.
        """
        if path is None:
            return cls()

        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"settings file not found: {path}")

        with path.open("r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        if not isinstance(raw, dict):
            raise ValueError("Settings YAML must be a mapping")

        known = {f.name for f in fields(cls)}
        return cls().with_overrides(**{k: v for k, v in raw.items() if k in known})

    def with_overrides(self, **overrides: Any) -> "Settings":
        """Return a copy with the non-None overrides applied and validated."""
        values: Dict[str, Any] = {k: v for k, v in overrides.items() if v is not None}

        if "interval_s" in values:
            try:
                values["interval_s"] = float(values["interval_s"])
            except (TypeError, ValueError) as e:
                raise ValueError("interval_s must be numeric") from e
            if values["interval_s"] <= 0:
                raise ValueError("interval_s must be > 0")

        if "catalog_path" in values:
            values["catalog_path"] = Path(values["catalog_path"])

        if "seed" in values:
            if isinstance(values["seed"], bool) or not isinstance(values["seed"], int):
                raise ValueError("seed must be an integer")

        for flag in ("imperial_units", "json_logs"):
            if flag in values and not isinstance(values[flag], bool):
                raise ValueError(f"{flag} must be true or false")

        if "log_level" in values:
            values["log_level"] = str(values["log_level"]).upper()

        return replace(self, **values)
