"""Command-line entry point: aggregate one wallet and print the result."""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError
from rich.console import Console
from rich.table import Table
from rich.text import Text

from config.settings import LOG_LEVELS, Settings, get_settings
from src.core.exceptions import InvalidAddressError
from src.core.models import AggregationResult, AlertType, RiskLevel
from src.data.pipeline import PositionAggregator

logger = logging.getLogger(__name__)

RISK_COLORS = {
    RiskLevel.LOW: "green",
    RiskLevel.MEDIUM: "yellow",
    RiskLevel.HIGH: "red",
}

ALERT_COLORS = {
    AlertType.SUCCESS: "green",
    AlertType.INFO: "cyan",
    AlertType.WARNING: "yellow",
    AlertType.DANGER: "red",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="yield-aggregator",
        description="Aggregate lending positions across Aave, Compound and Maker.",
    )
    parser.add_argument(
        "address",
        nargs="?",
        help="Wallet address (defaults to the first configured WALLET_ADDRESSES entry)",
    )
    parser.add_argument(
        "--refresh",
        action="store_true",
        help="Clear cached source data before fetching",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=LOG_LEVELS,
        help="Log level (defaults to LOG_LEVEL from settings)",
    )
    return parser


def positions_table(result: AggregationResult) -> Table:
    table = Table(title="Positions")
    table.add_column("Protocol")
    table.add_column("Token")
    table.add_column("Principal", justify="right")
    table.add_column("Balance", justify="right")
    table.add_column("APY", justify="right")
    table.add_column("Earnings", justify="right")
    table.add_column("Source")

    for p in result.positions:
        table.add_row(
            p.protocol_name,
            p.token,
            f"{p.principal:,.2f}",
            f"{p.balance:,.2f}",
            f"{p.apy:.2f}%",
            f"{p.earnings:,.2f}",
            Text(p.freshness.value, style="dim" if p.is_sample else "green"),
        )
    return table


def health_table(result: AggregationResult) -> Table:
    table = Table(title="Protocol Health")
    table.add_column("Protocol")
    table.add_column("Health", justify="right")
    table.add_column("TVL", justify="right")
    table.add_column("Utilization", justify="right")
    table.add_column("Risk")

    for h in result.protocol_health:
        table.add_row(
            h.name,
            f"{h.health_score:.0f}",
            h.tvl,
            f"{h.utilization}%",
            Text(h.risk_level.value, style=RISK_COLORS[h.risk_level]),
        )
    return table


def render(result: AggregationResult, console: Console) -> None:
    console.print(positions_table(result))
    console.print(health_table(result))
    for alert in result.alerts:
        console.print(Text(f"{alert.title}: {alert.message}", style=ALERT_COLORS[alert.type]))


async def run(address: str, force_refresh: bool, settings: Settings) -> AggregationResult:
    aggregator = PositionAggregator(settings=settings)
    try:
        return await aggregator.fetch_user_positions(address, force_refresh=force_refresh)
    finally:
        await aggregator.close()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    console = Console()
    try:
        settings = get_settings()
    except ValidationError as e:
        console.print(Text(f"Invalid configuration: {e}", style="red"))
        return 2

    logging.basicConfig(level=args.log_level or settings.log_level)

    address = args.address or next(iter(settings.wallet_addresses), "")
    try:
        result = asyncio.run(run(address, args.refresh, settings))
    except InvalidAddressError as e:
        console.print(Text(f"Error: {e}", style="red"))
        return 2

    render(result, console)
    return 0


if __name__ == "__main__":
    sys.exit(main())
