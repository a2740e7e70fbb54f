from __future__ import annotations

import random
from datetime import datetime

import pytest

from solar_telemetry.catalog import Catalog
from solar_telemetry.config_loader import parse_catalog
from solar_telemetry.datasource.mock import MockTelemetryGenerator

FIXED_TIME = datetime(2024, 6, 15, 13, 45, 30, 123456)

SMALL_CATALOG = {
    "categories": {
        "Battery System": {
            "icon": "battery-charging",
            "color": "#C9302C",
            "signals": {
                "soc": {"unit": "%", "range": [0, 100], "description": "State of Charge"},
                "pack_amphours": {"unit": "Ah", "range": [57, 57], "description": "Pack Amp Hours"},
                "cell_balancing_active": {
                    "unit": "",
                    "range": [1, 1],
                    "description": "Cell Balancing",
                    "type": "bool",
                },
            },
        },
        "Navigation": {
            "icon": "navigate",
            "color": "#C9302C",
            "signals": {
                "lat": {
                    "unit": "°",
                    "range": [43.07, 43.076],
                    "description": "Latitude",
                    "numeric": True,
                    "precision": 6,
                },
                "elev": {"unit": "m", "range": [260, 280], "description": "Elevation"},
            },
        },
        "Vehicle Controls": {
            "icon": "settings",
            "color": "#C9302C",
            "signals": {
                "eco": {"unit": "", "range": [0, 1], "description": "Eco Mode", "type": "bool"},
                "hazards": {
                    "unit": "",
                    "range": [0, 0],
                    "description": "Hazard Lights",
                    "type": "bool",
                },
            },
        },
    }
}


@pytest.fixture
def small_catalog() -> Catalog:
    return parse_catalog(SMALL_CATALOG)


@pytest.fixture
def seeded_generator(small_catalog: Catalog) -> MockTelemetryGenerator:
    return MockTelemetryGenerator(small_catalog, rng=random.Random(1234), clock=lambda: FIXED_TIME)
