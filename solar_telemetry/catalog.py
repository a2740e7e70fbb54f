from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Mapping, Optional, Tuple

from solar_telemetry.signals_def import BOOL_TYPE, CategoryDef, SignalDef

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent / "config" / "signals.yaml"


class CatalogError(ValueError):
    """Raised when a signal catalog breaks one of its structural rules."""


class Catalog:
    """Read-only registry of signal categories.

    Lookups for an unknown category or signal return ``None``.
    """

    def __init__(self, categories: Iterable[CategoryDef]):
        by_name: Dict[str, CategoryDef] = {}
        owner: Dict[str, str] = {}

        for cat in categories:
            if cat.name in by_name:
                raise CatalogError(f"Duplicate category: {cat.name}")
            for name, sig in cat.signals.items():
                if name != sig.name:
                    raise CatalogError(
                        f"Signal key '{name}' does not match definition name '{sig.name}'"
                    )
                if name in owner:
                    raise CatalogError(
                        f"Signal '{name}' defined in both '{owner[name]}' and '{cat.name}'"
                    )
                if sig.min > sig.max:
                    raise CatalogError(f"Signal '{name}' min must be <= max")
                if sig.type is not None and sig.type != BOOL_TYPE:
                    raise CatalogError(f"Signal '{name}' has unsupported type '{sig.type}'")
                owner[name] = cat.name
            by_name[cat.name] = cat

        if not by_name:
            raise CatalogError("Catalog requires at least one category")

        self._categories: Mapping[str, CategoryDef] = MappingProxyType(by_name)
        self._owner: Mapping[str, str] = MappingProxyType(owner)

    def __repr__(self) -> str:
        return f"Catalog({len(self._categories)} categories, {self.signal_count} signals)"

    def __contains__(self, category: object) -> bool:
        return category in self._categories

    @property
    def categories(self) -> Mapping[str, CategoryDef]:
        return self._categories

    @property
    def signal_count(self) -> int:
        return len(self._owner)

    def category_names(self) -> Tuple[str, ...]:
        return tuple(self._categories)

    def category(self, category: str) -> Optional[CategoryDef]:
        return self._categories.get(category)

    def signals(self, category: str) -> Optional[Mapping[str, SignalDef]]:
        cat = self._categories.get(category)
        return None if cat is None else cat.signals

    def signal_definition(self, category: str, signal_name: str) -> Optional[SignalDef]:
        cat = self._categories.get(category)
        if cat is None:
            return None
        return cat.signals.get(signal_name)

    def find_signal(self, signal_name: str) -> Optional[Tuple[str, SignalDef]]:
        """Locate a signal by name alone."""
        category = self._owner.get(signal_name)
        if category is None:
            return None
        return category, self._categories[category].signals[signal_name]

    def iter_signals(self) -> Iterator[Tuple[str, SignalDef]]:
        for cat in self._categories.values():
            for sig in cat.signals.values():
                yield cat.name, sig


@lru_cache(maxsize=1)
def default_catalog() -> Catalog:
    """The bundled solar car catalog, built once per process."""
    from solar_telemetry.config_loader import load_catalog

    return load_catalog(DEFAULT_CATALOG_PATH)
