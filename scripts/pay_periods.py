"""Print the configured pay-period table, or resolve a date against it."""

from __future__ import annotations

import argparse
import json
import sys
from datetime import date
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from pay_period_events.config import Settings, configure_logging
from pay_period_events.pay_periods import generate, resolve


def main() -> None:
    settings = Settings.from_env()
    configure_logging(settings.log_level)

    parser = argparse.ArgumentParser(description="Show generated pay periods")
    parser.add_argument("--anchor", type=date.fromisoformat, default=settings.anchor_date, help="First period start (YYYY-MM-DD)")
    parser.add_argument("--count", type=int, default=settings.period_count, help="Number of periods")
    parser.add_argument("--date", type=date.fromisoformat, help="Resolve this date to its pay period")
    args = parser.parse_args()

    try:
        periods = generate(args.anchor, args.count)
    except ValueError as exc:
        parser.error(str(exc))

    if args.date is not None:
        print(json.dumps({"date": args.date.isoformat(), "pay_period": resolve(args.date, periods)}))
        return

    table = [
        {"start": period.start.isoformat(), "end": period.end.isoformat(), "label": period.label}
        for period in periods
    ]
    print(json.dumps(table, indent=2))


if __name__ == "__main__":
    main()
