from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from typing import List, Optional, Sequence

from solar_telemetry.catalog import Catalog, default_catalog
from solar_telemetry.config_loader import load_catalog
from solar_telemetry.datasource.mock import MockTelemetryGenerator
from solar_telemetry.evaluator import classify_status, format_display_value
from solar_telemetry.feed import TelemetryFeed
from solar_telemetry.health import summarize_all
from solar_telemetry.logging_setup import setup_logging
from solar_telemetry.settings import Settings
from solar_telemetry.snapshot import TelemetrySnapshot
from solar_telemetry.units import CELSIUS, convert_temperature, temperature_unit

logger = logging.getLogger("solar_telemetry")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="solar-telemetry", description="Solar car telemetry console")
    p.add_argument("--settings", help="YAML settings file")
    p.add_argument("--catalog", help="YAML signal catalog (defaults to the bundled one)")
    p.add_argument("--interval", type=float, help="Seconds between snapshots")
    p.add_argument("--ticks", type=int, help="Stop after this many snapshots")
    p.add_argument("--seed", type=int, help="Seed for the mock data generator")
    p.add_argument(
        "--category",
        action="append",
        default=[],
        help="Print every signal of this category (repeatable)",
    )
    p.add_argument("--imperial", action="store_true", default=None, help="Show temperatures in °F")
    p.add_argument("--log-level", help="Logging level (DEBUG, INFO, ...)")
    p.add_argument("--json-logs", action="store_true", default=None, help="Emit JSON log records")
    return p.parse_args(argv)


def display_value(
    signal_name: str, value: object, category: str, catalog: Catalog, imperial: bool
) -> str:
    sig = catalog.signal_definition(category, signal_name)
    if imperial and sig is not None and sig.unit == CELSIUS and value is not None:
        try:
            return f"{convert_temperature(float(value), True)}{temperature_unit(True)}"
        except (TypeError, ValueError, OverflowError):
            pass
    return str(format_display_value(signal_name, value, category, catalog))


def render_snapshot(
    snapshot: TelemetrySnapshot,
    catalog: Catalog,
    categories: Sequence[str] = (),
    imperial: bool = False,
) -> List[str]:
    lines = [
        f"[{snapshot.tstamp_hr:02d}:{snapshot.tstamp_mn:02d}:{snapshot.tstamp_sc:02d}"
        f".{snapshot.tstamp_ms:03d}]"
    ]
    for health in summarize_all(snapshot, catalog):
        lines.append(
            f"  {health.category:<18} {health.score:>3d}%  "
            f"{health.critical} critical  {health.warning} warning  ({health.status})"
        )

    for category in categories:
        signals = catalog.signals(category)
        if signals is None:
            lines.append(f"  unknown category: {category}")
            continue
        lines.append(f"  -- {category} --")
        for name, sig in signals.items():
            value = snapshot.get(name)
            shown = display_value(name, value, category, catalog, imperial)
            status = classify_status(name, value, category, catalog)
            lines.append(f"    {sig.description:<26} {shown:>14}  {status}")
    return lines


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)

    try:
        settings = Settings.load(args.settings).with_overrides(
            interval_s=args.interval,
            catalog_path=args.catalog,
            seed=args.seed,
            imperial_units=args.imperial,
            log_level=args.log_level,
            json_logs=args.json_logs,
        )
        setup_logging(settings.log_level, settings.json_logs)
        catalog = (
            load_catalog(settings.catalog_path)
            if settings.catalog_path is not None
            else default_catalog()
        )
    except (OSError, ValueError) as e:
        print(f"solar-telemetry: {e}", file=sys.stderr)
        return 2

    logger.info(
        "Catalog loaded.",
        extra={
            "event": "telemetry.catalog_loaded",
            "categories": len(catalog.category_names()),
            "signals": catalog.signal_count,
        },
    )

    generator = MockTelemetryGenerator(catalog, rng=random.Random(settings.seed))
    feed = TelemetryFeed(generator, interval=settings.interval_s)
    feed.subscribe(
        lambda snap: print(
            "\n".join(render_snapshot(snap, catalog, args.category, settings.imperial_units)),
            flush=True,
        )
    )

    if args.ticks is not None:
        for i in range(args.ticks):
            if i:
                time.sleep(settings.interval_s)
            feed.tick()
        return 0

    feed.start()
    try:
        while feed.running:
            time.sleep(0.5)
    except KeyboardInterrupt:
        print("\nStopping...")
    finally:
        feed.stop()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
