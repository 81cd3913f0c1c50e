#!/usr/bin/env python3
"""Print live sensor readings from an attached Quadro.

Attaches to the controller, waits for status reports and prints a
``sensors``-style table plus the device diagnostics.

Usage
-----
::

    python scripts/dump_sensors.py
    python scripts/dump_sensors.py --list
    python scripts/dump_sensors.py --path /dev/hidraw3 --samples 5 --json

Options::

    --list               List attached controllers and exit
    --path PATH          hidapi device path (default: first matching vid/pid)
    --samples N          Number of reports to print (default: 1)
    --timeout SECONDS    Seconds to wait for each report (default: 3)
    --json               Output as machine-readable JSON
    --hwmon              Print hwmon attribute names instead of labels
    -v, --verbose        Enable debug logging
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any

# Allow running from the repo root without installing the package.
_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from pyquadro import (  # noqa: E402
    CHANNELS,
    QuadroConfig,
    QuadroDevice,
    QuadroError,
    SensorSnapshot,
    discover_devices,
)

_UNIT_FORMATS: dict[str, tuple[float, str]] = {
    "temperature": (1000.0, "°C"),
    "speed": (1.0, "RPM"),
    "power": (1_000_000.0, "W"),
    "voltage": (1000.0, "V"),
    "current": (1000.0, "A"),
}


def _format_value(kind: str, value: int) -> str:
    divisor, unit = _UNIT_FORMATS[kind]
    if divisor == 1.0:
        return f"{value} {unit}"
    return f"{value / divisor:.2f} {unit}"


def _render_table(device: QuadroDevice, snapshot: SensorSnapshot) -> str:
    lines = [f"{device.diagnostics.directory_name}"]
    for info in CHANNELS:
        value = snapshot.values(info.kind)[info.channel]
        lines.append(f"  {info.label + ':':<20} {_format_value(info.kind.value, value):>12}")
    lines.append("")
    for key, value in device.diagnostics.as_dict().items():
        lines.append(f"  {key + ':':<20} {value:>12}")
    return "\n".join(lines)


def _render_json(device: QuadroDevice, snapshot: SensorSnapshot, hwmon: bool) -> dict[str, Any]:
    if hwmon:
        sensors: dict[str, Any] = dict(device.hwmon_attributes())
    else:
        sensors = {info.label: snapshot.values(info.kind)[info.channel] for info in CHANNELS}
    return {
        "device": device.name,
        "sensors": sensors,
        "diagnostics": device.diagnostics.as_dict(),
    }


async def _run(args: argparse.Namespace) -> int:
    overrides: dict[str, Any] = {}
    if args.path:
        overrides["path"] = args.path.encode()
    config = QuadroConfig.from_env(**overrides)

    with QuadroDevice(config) as device:
        for _ in range(args.samples):
            snapshot = await device.wait_for_update(timeout=args.timeout)
            if args.json:
                print(json.dumps(_render_json(device, snapshot, args.hwmon), indent=2))
            elif args.hwmon:
                for name, value in device.hwmon_attributes().items():
                    print(f"{name}: {value}")
            else:
                print(_render_table(device, snapshot))
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description="Dump Aquacomputer Quadro sensor readings")
    parser.add_argument("--list", action="store_true", help="List attached controllers and exit")
    parser.add_argument("--path", help="hidapi device path")
    parser.add_argument("--samples", type=int, default=1, help="Number of reports to print")
    parser.add_argument("--timeout", type=float, default=3.0, help="Seconds to wait for each report")
    parser.add_argument("--json", action="store_true", help="Output as JSON")
    parser.add_argument("--hwmon", action="store_true", help="Use hwmon attribute names")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.list:
        config = QuadroConfig.from_env()
        for info in discover_devices(config.vendor_id, config.product_id):
            print(f"{info.name}  serial={info.serial_number or '-'}  {info.product_string}")
        return 0

    try:
        return asyncio.run(_run(args))
    except QuadroError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
