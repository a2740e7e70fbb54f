# Solar car telemetry core
from solar_telemetry.catalog import Catalog, CatalogError, default_catalog
from solar_telemetry.datasource.mock import MockTelemetryGenerator, generate_snapshot
from solar_telemetry.evaluator import classify_status, evaluate, format_display_value
from solar_telemetry.signals_def import CategoryDef, SignalDef, SignalReading, Status
from solar_telemetry.snapshot import TelemetrySnapshot

__all__ = [
    "Catalog",
    "CatalogError",
    "CategoryDef",
    "MockTelemetryGenerator",
    "SignalDef",
    "SignalReading",
    "Status",
    "TelemetrySnapshot",
    "classify_status",
    "default_catalog",
    "evaluate",
    "format_display_value",
    "generate_snapshot",
]
