from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Any, Dict, Iterator, Optional

from solar_telemetry.signals_def import RawValue, SignalReading

TIMESTAMP_FIELDS = ("tstamp_unix", "tstamp_hr", "tstamp_mn", "tstamp_sc", "tstamp_ms")


@dataclass(frozen=True, slots=True, eq=False)
class TelemetrySnapshot(Mapping):
    """One complete set of signal values captured at a single instant.

    Indexing yields the dashboard value (float, text or bool); ``reading``
    gives the typed form. Snapshots are never mutated, the next tick
    produces a new one. Equality and hashing are by identity: two ticks
    with the same values are still different snapshots.
    """

    readings: Mapping[str, SignalReading]
    tstamp_unix: int
    tstamp_hr: int
    tstamp_mn: int
    tstamp_sc: int
    tstamp_ms: int
    _raw: Mapping[str, RawValue] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        readings = dict(self.readings)
        object.__setattr__(self, "readings", MappingProxyType(readings))
        object.__setattr__(
            self, "_raw", MappingProxyType({k: r.raw for k, r in readings.items()})
        )

    @classmethod
    def at(cls, readings: Mapping[str, SignalReading], when: datetime) -> "TelemetrySnapshot":
        return cls(
            readings=readings,
            tstamp_unix=int(when.timestamp() * 1000),
            tstamp_hr=when.hour,
            tstamp_mn=when.minute,
            tstamp_sc=when.second,
            tstamp_ms=when.microsecond // 1000,
        )

    def __getitem__(self, name: str) -> RawValue:
        return self._raw[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._raw)

    def __len__(self) -> int:
        return len(self._raw)

    __eq__ = object.__eq__
    __hash__ = object.__hash__

    def reading(self, name: str) -> Optional[SignalReading]:
        return self.readings.get(name)

    @property
    def timestamps(self) -> Dict[str, int]:
        return {name: getattr(self, name) for name in TIMESTAMP_FIELDS}

    def as_dict(self) -> Dict[str, Any]:
        """Flat form: every signal value followed by the five timestamp fields."""
        out: Dict[str, Any] = dict(self._raw)
        out.update(self.timestamps)
        return out
