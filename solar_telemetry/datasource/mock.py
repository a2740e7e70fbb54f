"""
Mock telemetry source: samples every catalog signal independently.

Stands in for the live car feed. Boolean signals are a coin flip regardless
of their expected state, so safety signals routinely show up as warnings.
"""

from __future__ import annotations

import random
from datetime import datetime
from typing import Callable, Dict, Optional

from solar_telemetry.catalog import Catalog, default_catalog
from solar_telemetry.signals_def import SignalDef, SignalReading
from solar_telemetry.snapshot import TelemetrySnapshot

Clock = Callable[[], datetime]


class MockTelemetryGenerator:
    def __init__(
        self,
        catalog: Optional[Catalog] = None,
        rng: Optional[random.Random] = None,
        clock: Optional[Clock] = None,
    ):
        self._catalog = catalog if catalog is not None else default_catalog()
        self._rng = rng if rng is not None else random.Random()
        self._clock = clock if clock is not None else datetime.now

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    def generate(self) -> TelemetrySnapshot:
        readings: Dict[str, SignalReading] = {}
        for _, sig in self._catalog.iter_signals():
            readings[sig.name] = self._sample(sig)

        # one clock read per snapshot
        return TelemetrySnapshot.at(readings, self._clock())

    def _sample(self, sig: SignalDef) -> SignalReading:
        if sig.is_bool:
            return SignalReading(self._rng.random() > 0.5)

        value = self._rng.uniform(sig.min, sig.max)
        # rounding to the display precision must not push past an endpoint
        scale = 10 ** sig.precision
        rounded = round(value, sig.precision)
        if rounded < sig.min:
            rounded = _ceil_to(sig.min, scale)
        elif rounded > sig.max:
            rounded = _floor_to(sig.max, scale)
        rounded = max(sig.min, min(sig.max, rounded))
        return SignalReading(rounded, precision=sig.precision, numeric=sig.numeric)


def _ceil_to(value: float, scale: int) -> float:
    return -(-value * scale // 1) / scale


def _floor_to(value: float, scale: int) -> float:
    return (value * scale // 1) / scale


_default_generator: Optional[MockTelemetryGenerator] = None


def generate_snapshot() -> TelemetrySnapshot:
    """One snapshot over the bundled catalog, using a process-wide random source."""
    global _default_generator
    if _default_generator is None:
        _default_generator = MockTelemetryGenerator()
    return _default_generator.generate()
