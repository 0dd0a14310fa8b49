"""Run the projection for a stored simulation and print its yearly path."""

from __future__ import annotations

import argparse
import asyncio
import sys
from datetime import date
from decimal import Decimal
from uuid import UUID

from app.core.logging import setup_logging
from app.db.session import Database
from app.services.projection import ProjectionRequest, run_projection


def _parse_date(value: str) -> date:
    return date.fromisoformat(value)


async def _run(args: argparse.Namespace) -> int:
    database = Database(args.database_url)
    request = ProjectionRequest(
        start_date=args.start,
        end_date=args.end,
        interest_rate=Decimal(args.interest) if args.interest is not None else None,
        inflation_rate=Decimal(args.inflation) if args.inflation is not None else None,
        life_status=args.life_status,
        life_status_change_date=args.change_date,
    )
    try:
        async with database.session() as session:
            result = await run_projection(args.simulation_id, session, request)
    except (LookupError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    finally:
        await database.dispose()

    projection_input = result.projection_input
    summary = result.output.summary
    print(
        f"{result.simulation.name}: {projection_input.start_date} to {projection_input.end_date} "
        f"at {projection_input.interest_rate:.4f}% / inflation {projection_input.inflation_rate:.4f}%"
    )
    for row in result.output.yearly:
        print(f"{row.year}  financial={row.financial_assets:,.2f}  property={row.property_assets:,.2f}  "
              f"total={row.total_assets:,.2f}")
    print(
        f"initial={summary.initial_assets:,.2f} final={summary.final_assets:,.2f} "
        f"growth={summary.total_growth_percent:.2f}% insurance_impact={summary.insurance_impact:,.2f}"
    )
    return 0


def main() -> None:
    parser = argparse.ArgumentParser(description="Project a stored simulation month by month")
    parser.add_argument("simulation_id", type=UUID)
    parser.add_argument("--start", type=_parse_date, default=None)
    parser.add_argument("--end", type=_parse_date, default=None)
    parser.add_argument("--interest", default=None, help="Annual nominal return, percent or decimal")
    parser.add_argument("--inflation", default=None, help="Annual inflation, percent or decimal")
    parser.add_argument("--life-status", default=None, choices=["normal", "dead", "invalid"])
    parser.add_argument("--change-date", type=_parse_date, default=None)
    parser.add_argument("--database-url", default=None)
    parser.add_argument("--log-level", default="INFO")
    args = parser.parse_args()
    setup_logging(args.log_level)
    sys.exit(asyncio.run(_run(args)))


if __name__ == "__main__":
    main()
