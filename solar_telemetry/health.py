"""Per-category health rollups and signal search over a catalog."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Mapping, Optional, Tuple

from solar_telemetry.catalog import Catalog, default_catalog
from solar_telemetry.evaluator import classify_status
from solar_telemetry.signals_def import SignalDef, Status


@dataclass(frozen=True, slots=True)
class CategoryHealth:
    category: str
    total: int
    critical: int
    warning: int

    @property
    def healthy(self) -> int:
        return self.total - self.critical - self.warning

    @property
    def score(self) -> int:
        """Percentage of signals that are neither warning nor critical."""
        if self.total == 0:
            return 100
        return round(self.healthy / self.total * 100)

    @property
    def status(self) -> Status:
        if self.critical > 0:
            return Status.CRITICAL
        if self.warning > 0:
            return Status.WARNING
        return Status.NORMAL


def summarize_category(
    category: str, snapshot: Mapping[str, object], catalog: Optional[Catalog] = None
) -> Optional[CategoryHealth]:
    """
    Count warning and critical signals of one category in a snapshot.

    Signals missing from the snapshot are left out of both counts but still
    count towards the total. Returns None for an unknown category.
    """
    cat = catalog if catalog is not None else default_catalog()
    signals = cat.signals(category)
    if signals is None:
        return None

    critical = warning = 0
    for name in signals:
        value = snapshot.get(name)
        if value is None:
            continue
        status = classify_status(name, value, category, cat)
        if status is Status.CRITICAL:
            critical += 1
        elif status is Status.WARNING:
            warning += 1

    return CategoryHealth(category=category, total=len(signals), critical=critical, warning=warning)


def summarize_all(
    snapshot: Mapping[str, object], catalog: Optional[Catalog] = None
) -> List[CategoryHealth]:
    cat = catalog if catalog is not None else default_catalog()
    out: List[CategoryHealth] = []
    for name in cat.category_names():
        summary = summarize_category(name, snapshot, cat)
        if summary is not None:
            out.append(summary)
    return out


def search_signals(
    query: str, category: Optional[str] = None, catalog: Optional[Catalog] = None
) -> List[Tuple[str, SignalDef]]:
    """Case-insensitive match on signal name, description or unit, in display order."""
    cat = catalog if catalog is not None else default_catalog()
    term = query.strip().lower()

    hits: List[Tuple[str, SignalDef]] = []
    for cat_name, sig in cat.iter_signals():
        if category is not None and cat_name != category:
            continue
        if (
            term in sig.name.lower()
            or term in sig.description.lower()
            or term in sig.unit.lower()
        ):
            hits.append((cat_name, sig))
    return hits
