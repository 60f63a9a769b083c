"""CLI helpers for date range resolution."""

from datetime import date

import click

from cashflow.utils.date_parser import get_date_range, month_range, parse_date


def date_range_options(command):
    """Attach the shared period options to a command."""
    options = [
        click.option("--month", help="Month to show (YYYY-MM)"),
        click.option("--start-date", help="Start date (YYYY-MM-DD or 'today', 'yesterday')"),
        click.option("--end-date", help="End date (YYYY-MM-DD or 'today', 'yesterday')"),
        click.option("--this-month", is_flag=True, help="Filter to current month"),
        click.option("--last-month", is_flag=True, help="Filter to previous month"),
    ]
    for option in reversed(options):
        command = option(command)
    return command


def resolve_cli_date_range(
    ctx,
    *,
    month: str | None,
    start_date: str | None,
    end_date: str | None,
    period_flags: dict[str, bool],
) -> tuple[date | None, date | None]:
    """Resolve CLI date range from --month, period flags or explicit dates."""
    period_count = sum(1 for is_set in period_flags.values() if is_set)
    if month:
        period_count += 1

    if period_count > 1:
        click.echo(
            "Error: Only one of --month, --this-month or --last-month can be specified at a time.",
            err=True,
        )
        ctx.exit(1)

    if period_count > 0 and (start_date or end_date):
        click.echo(
            "Error: Period options (--month, --this-month, --last-month) cannot be combined with --start-date or --end-date.",
            err=True,
        )
        ctx.exit(1)

    if month:
        try:
            return month_range(month)
        except ValueError as e:
            click.echo(f"Error: Invalid month: {e}", err=True)
            ctx.exit(1)

    for period, is_set in period_flags.items():
        if is_set:
            return get_date_range(period)

    start = None
    end = None
    if start_date:
        try:
            start = parse_date(start_date)
        except ValueError as e:
            click.echo(f"Error: Invalid start date: {e}", err=True)
            ctx.exit(1)

    if end_date:
        try:
            end = parse_date(end_date)
        except ValueError as e:
            click.echo(f"Error: Invalid end date: {e}", err=True)
            ctx.exit(1)

    return start, end
