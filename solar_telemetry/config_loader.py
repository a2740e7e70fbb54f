from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List

import yaml

from solar_telemetry.catalog import Catalog, CatalogError
from solar_telemetry.signals_def import BOOL_TYPE, CategoryDef, SignalDef


def load_catalog(yaml_path: str | Path) -> Catalog:
    path = Path(yaml_path)
    if not path.exists():
        raise FileNotFoundError(f"signal catalog not found: {path}")

    raw: Dict[str, Any]
    with path.open("r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)

    return parse_catalog(raw)


def parse_catalog(raw: Any) -> Catalog:
    if not isinstance(raw, dict) or "categories" not in raw:
        raise CatalogError("YAML must be a mapping with a top-level 'categories:' key")

    categories = raw["categories"]
    if not isinstance(categories, dict) or len(categories) == 0:
        raise CatalogError("'categories' must be a non-empty mapping")

    parsed: List[CategoryDef] = []
    for cat_name, cat_cfg in categories.items():
        if not isinstance(cat_cfg, dict):
            raise CatalogError(f"Category '{cat_name}' must map to a dictionary")

        signals = cat_cfg.get("signals")
        if not isinstance(signals, dict) or len(signals) == 0:
            raise CatalogError(f"Category '{cat_name}' needs a non-empty 'signals' mapping")

        parsed.append(
            CategoryDef(
                name=str(cat_name),
                icon=str(cat_cfg.get("icon", "")).strip(),
                color=str(cat_cfg.get("color", "")).strip(),
                signals={str(name): _parse_signal(str(name), cfg) for name, cfg in signals.items()},
            )
        )

    return Catalog(parsed)


def _parse_signal(name: str, cfg: Any) -> SignalDef:
    if not isinstance(cfg, dict):
        raise CatalogError(f"Signal '{name}' must map to a dictionary")

    bounds = cfg.get("range")
    if not isinstance(bounds, (list, tuple)) or len(bounds) != 2:
        raise CatalogError(f"Signal '{name}' must have a two-element 'range'")

    try:
        vmin = float(bounds[0])
        vmax = float(bounds[1])
    except (TypeError, ValueError) as e:
        raise CatalogError(f"Signal '{name}' must have numeric range bounds") from e

    if vmin > vmax:
        raise CatalogError(f"Signal '{name}' range min must be <= max")

    sig_type = cfg.get("type")
    if sig_type is not None:
        sig_type = str(sig_type).strip()
        if sig_type != BOOL_TYPE:
            raise CatalogError(f"Signal '{name}' has unsupported type '{sig_type}'")

    try:
        precision = int(cfg.get("precision", 2))
    except (TypeError, ValueError) as e:
        raise CatalogError(f"Signal '{name}' precision must be an integer") from e
    if precision < 0:
        raise CatalogError(f"Signal '{name}' precision must be >= 0")

    unit = cfg.get("unit", "")
    return SignalDef(
        name=name,
        unit="" if unit is None else str(unit),
        min=vmin,
        max=vmax,
        description=str(cfg.get("description", "")).strip(),
        type=sig_type,
        precision=precision,
        numeric=bool(cfg.get("numeric", False)),
    )
