#!/usr/bin/env python3
"""Watch fleet alarms in the terminal.

A minimal host for the alarm monitor: the summary view prints one line per
category whenever counts change, the detail view prints the vehicles of the
selected category.

Usage
-----
Set environment variables and run::

    export ALARMS_LOGIN="office@example.com"
    export ALARMS_PASSWORD="your-password"
    python scripts/watch_alarms.py --select "EXT ТС в движении"

Options::

    --select NAME     Category to show in the detail list
    --interval SEC    Polling interval (default: ALARMS_POLL_INTERVAL or 30)
    --once            Run a single cycle and exit
    --verbose, -v     Enable debug logging
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

# Allow running from the repo root without installing the package.
_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from pyalarms import AlarmFact, AlarmMonitor, AlarmsConfig, AlarmsError, SummaryRow  # noqa: E402
from pyalarms._constants import DETAIL_TITLE, SUMMARY_TITLE  # noqa: E402


def _section(title: str) -> str:
    line = "=" * 60
    return f"\n{line}\n  {title}\n{line}"


class ConsoleSummaryView:
    def __init__(self) -> None:
        self._rows: dict[str, SummaryRow] = {}
        self._callbacks: list[Callable[[str], None]] = []

    def add_rows(self, rows: Sequence[SummaryRow]) -> None:
        for row in rows:
            self._rows[row.key] = row

    def set_count(self, key: str, count: int) -> None:
        row = self._rows.get(key)
        if row is not None:
            self._rows[key] = row.model_copy(update={"count": count})

    def on_select(self, callback: Callable[[str], None]) -> None:
        self._callbacks.append(callback)

    def select(self, key: str) -> None:
        for callback in self._callbacks:
            callback(key)

    def render(self) -> None:
        print(_section(SUMMARY_TITLE))
        for row in self._rows.values():
            print(f"  {row.label:<40} {row.count:>5}")


class ConsoleDetailView:
    def __init__(self) -> None:
        self._title = DETAIL_TITLE
        self._rows: list[AlarmFact] = []

    def replace_rows(self, rows: Sequence[AlarmFact]) -> None:
        self._rows = list(rows)

    def set_title(self, title: str) -> None:
        self._title = title

    def render(self) -> None:
        print(_section(self._title))
        if not self._rows:
            print("  (none)")
        for fact in self._rows:
            when = fact.event_time.astimezone().strftime("%d.%m.%Y %H:%M:%S") if fact.event_time else "-"
            print(f"  {fact.vehicle_number:<20} {fact.value:<10} {when}")


async def main() -> int:
    parser = argparse.ArgumentParser(description="Watch fleet telemetry alarms in the terminal.")
    parser.add_argument("--select", help="Category (sensor name) to list in the detail view")
    parser.add_argument("--interval", type=float, help="Polling interval in seconds")
    parser.add_argument("--once", action="store_true", help="Run a single cycle and exit")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    overrides: dict[str, Any] = {}
    if args.interval is not None:
        overrides["poll_interval"] = args.interval
    config = AlarmsConfig.from_env(**overrides)

    summary = ConsoleSummaryView()
    detail = ConsoleDetailView()

    def _render(_aggregate: Any) -> None:
        summary.render()
        if args.select:
            detail.render()

    monitor = AlarmMonitor(config, summary=summary, detail=detail, on_aggregate=_render)
    try:
        await monitor.start()
    except AlarmsError as exc:
        print(f"Cannot start: {exc}", file=sys.stderr)
        return 2

    try:
        if args.select:
            summary.select(args.select)
        if args.once:
            await monitor.wait_for_cycles()
        else:
            await asyncio.Event().wait()
    finally:
        await monitor.teardown()
    return 0


if __name__ == "__main__":
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        sys.exit(130)
