from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Tuple, Union

BOOL_TYPE = "bool"

RawValue = Union[float, str, bool]


class Status(str, Enum):
    NORMAL = "normal"
    WARNING = "warning"
    CRITICAL = "critical"
    # internal only; collapses to NORMAL at the public boundary
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class SignalDef:
    name: str
    unit: str
    min: float
    max: float
    description: str = ""
    type: Optional[str] = None
    precision: int = 2
    numeric: bool = False

    @property
    def is_bool(self) -> bool:
        return self.type == BOOL_TYPE

    @property
    def range(self) -> Tuple[float, float]:
        return (self.min, self.max)

    @property
    def expected_state(self) -> Optional[float]:
        """Steady-state value of a boolean signal, or None when either state is fine."""
        if not self.is_bool or self.min != self.max:
            return None
        return self.min


@dataclass(frozen=True, slots=True)
class CategoryDef:
    name: str
    icon: str
    color: str
    signals: Mapping[str, SignalDef] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # insertion order is display order
        object.__setattr__(self, "signals", MappingProxyType(dict(self.signals)))


@dataclass(frozen=True, slots=True)
class SignalReading:
    """One sampled value together with the rule used to present it.

    ``raw`` is the dashboard form: booleans as-is, ``numeric`` readings as
    rounded floats, everything else as text with ``precision`` decimals.
    """

    magnitude: Union[float, bool]
    precision: int = 2
    numeric: bool = False

    @property
    def is_bool(self) -> bool:
        return isinstance(self.magnitude, bool)

    @property
    def raw(self) -> RawValue:
        if self.is_bool:
            return self.magnitude
        if self.numeric:
            return round(self.magnitude, self.precision)
        return f"{self.magnitude:.{self.precision}f}"

    def __float__(self) -> float:
        return float(self.magnitude)
