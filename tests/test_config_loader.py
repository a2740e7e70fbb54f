from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from solar_telemetry.catalog import CatalogError
from solar_telemetry.config_loader import load_catalog, parse_catalog

from tests.conftest import SMALL_CATALOG


def test_load_catalog_from_yaml(tmp_path: Path) -> None:
    path = tmp_path / "signals.yaml"
    path.write_text(yaml.safe_dump(SMALL_CATALOG, allow_unicode=True), encoding="utf-8")

    catalog = load_catalog(path)

    assert catalog.category_names() == ("Battery System", "Navigation", "Vehicle Controls")
    lat = catalog.signal_definition("Navigation", "lat")
    assert lat is not None
    assert lat.numeric is True
    assert lat.precision == 6
    assert lat.unit == "°"


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_catalog(tmp_path / "nope.yaml")


def test_requires_categories_key() -> None:
    with pytest.raises(CatalogError, match="categories"):
        parse_catalog({"signals": {}})


def test_requires_signals_per_category() -> None:
    with pytest.raises(CatalogError, match="Empty"):
        parse_catalog({"categories": {"Empty": {"icon": "x", "signals": {}}}})


@pytest.mark.parametrize(
    ("cfg", "message"),
    [
        ({"unit": "V", "range": [0]}, "two-element"),
        ({"unit": "V", "range": ["a", 1]}, "numeric range"),
        ({"unit": "V", "range": [10, 1]}, "min must be <= max"),
        ({"unit": "", "range": [0, 1], "type": "flag"}, "unsupported type"),
        ({"unit": "V", "range": [0, 1], "precision": -1}, "precision"),
    ],
)
def test_rejects_bad_signal(cfg: dict, message: str) -> None:
    raw = {"categories": {"Power": {"signals": {"bus": cfg}}}}
    with pytest.raises(CatalogError, match=message):
        parse_catalog(raw)


def test_unit_defaults_to_empty() -> None:
    catalog = parse_catalog(
        {"categories": {"Controls": {"signals": {"mcc_state": {"range": [0, 7]}}}}}
    )
    sig = catalog.signal_definition("Controls", "mcc_state")
    assert sig is not None
    assert sig.unit == ""
    assert sig.type is None
    assert sig.precision == 2
