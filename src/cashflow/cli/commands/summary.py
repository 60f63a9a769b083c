"""Summary commands."""

import click
from cashflow.cli.commands.view import filter_options
from cashflow.cli.date_filters import date_range_options, resolve_cli_date_range
from cashflow.cli.error_handling import handle_domain_error
from cashflow.domain.errors import DomainError
from cashflow.domain.summary import SummaryService


@click.command("summary")
@date_range_options
@filter_options
@click.option("--daily/--no-daily", default=True, help="Show the per-day breakdown")
@click.pass_context
def summary(
    ctx,
    month: str | None,
    start_date: str | None,
    end_date: str | None,
    this_month: bool,
    last_month: bool,
    selected_filter: str,
    search: str | None,
    daily: bool,
):
    """Show income, expenses and balance for a period.

    Examples:
        cashflow summary --this-month
        cashflow summary --month 2024-01 --filter fixed-expenses
    """
    db = ctx.obj["db"]
    service = SummaryService(db)

    start, end = resolve_cli_date_range(
        ctx,
        month=month,
        start_date=start_date,
        end_date=end_date,
        period_flags={"this-month": this_month, "last-month": last_month},
    )

    try:
        report = service.summarize_period(
            start_date=start, end_date=end, selected_filter=selected_filter, search=search
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not report.daily_series:
        click.echo("No transactions found.")
        return

    period = f"{start or 'open start'} to {end or 'open end'}"
    click.echo(f"\nSummary ({period})")
    click.echo("=" * 40)
    click.echo(f"{'Income':<20} {report.total_income:>19,.2f}")
    click.echo(f"{'Expenses':<20} {report.total_expenses:>19,.2f}")
    click.echo(f"{'Balance':<20} {report.net_balance:>19,.2f}")
    click.echo(f"{'Pending':<20} {report.pending_total:>19,.2f}")

    if daily:
        click.echo(f"\n{'Date':<12} {'Income':>13} {'Expenses':>13}")
        click.echo("-" * 40)
        for day in report.daily_series:
            click.echo(f"{str(day.date):<12} {day.income:>13,.2f} {day.expenses:>13,.2f}")


def register_commands(cli):
    """Register summary command with main CLI."""
    cli.add_command(summary)
