"""
Display formatting and status classification for single signal values.

Both public functions are total: an unknown signal, a missing value or an
unparseable value never raises. Such cases map to the internal
``Status.UNKNOWN`` tier, which the dashboard sees as ``normal``.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Optional

from solar_telemetry.catalog import Catalog, default_catalog
from solar_telemetry.signals_def import SignalDef, Status

logger = logging.getLogger(__name__)

WARNING_BAND = 0.10
MISSING_VALUE = "--"


def _lookup(signal_name: str, category: str, catalog: Optional[Catalog]) -> Optional[SignalDef]:
    cat = catalog if catalog is not None else default_catalog()
    sig = cat.signal_definition(category, signal_name)
    if sig is None:
        logger.debug(
            "Signal lookup missed catalog.",
            extra={
                "event": "telemetry.lookup_miss",
                "signal": signal_name,
                "category": category,
            },
        )
    return sig


def _to_number(value: Any) -> Optional[float]:
    if value is None:
        return None
    try:
        number = float(value)
    except OverflowError:
        # integers beyond float range sit past either endpoint
        return math.inf if value > 0 else -math.inf
    except (TypeError, ValueError):
        return None
    if math.isnan(number):
        return None
    return number


def format_display_value(
    signal_name: str, value: Any, category: str, catalog: Optional[Catalog] = None
) -> Any:
    sig = _lookup(signal_name, category, catalog)
    if sig is None:
        return value

    if sig.is_bool:
        return "ON" if value else "OFF"

    shown = MISSING_VALUE if value is None else value
    return f"{shown}{sig.unit}"


def evaluate(
    signal_name: str, value: Any, category: str, catalog: Optional[Catalog] = None
) -> Status:
    """Classify a value, keeping ``Status.UNKNOWN`` for anything that cannot be judged."""
    sig = _lookup(signal_name, category, catalog)
    if sig is None or value is None:
        return Status.UNKNOWN

    number = _to_number(value)

    if sig.is_bool:
        # compared as 0/1; a non-numeric value never matches an expected state
        expected = sig.expected_state
        if expected is not None and number != expected:
            return Status.WARNING
        return Status.NORMAL

    if number is None:
        logger.debug(
            "Signal value is not numeric.",
            extra={
                "event": "telemetry.unparseable_value",
                "signal": signal_name,
                "category": category,
                "value": repr(value),
            },
        )
        return Status.UNKNOWN

    if number < sig.min or number > sig.max:
        return Status.CRITICAL

    band = WARNING_BAND * (sig.max - sig.min)
    if number < sig.min + band or number > sig.max - band:
        return Status.WARNING

    return Status.NORMAL


def classify_status(
    signal_name: str, value: Any, category: str, catalog: Optional[Catalog] = None
) -> Status:
    status = evaluate(signal_name, value, category, catalog)
    return Status.NORMAL if status is Status.UNKNOWN else status
