"""Transaction viewing commands."""

import click
from cashflow.cli.date_filters import date_range_options, resolve_cli_date_range
from cashflow.cli.error_handling import handle_domain_error
from cashflow.domain.errors import DomainError
from cashflow.domain.filters import FILTER_KEYS
from cashflow.domain.transaction import TransactionService


def filter_options(command):
    """Attach --filter and --search to a command."""
    command = click.option(
        "--search", help="Only transactions whose description or counterparty contains this text"
    )(command)
    command = click.option(
        "--filter",
        "selected_filter",
        type=click.Choice(FILTER_KEYS),
        default="all",
        show_default=True,
        help="Transaction filter",
    )(command)
    return command


@click.command("view")
@date_range_options
@filter_options
@click.pass_context
def view_transactions(
    ctx,
    month: str | None,
    start_date: str | None,
    end_date: str | None,
    this_month: bool,
    last_month: bool,
    selected_filter: str,
    search: str | None,
):
    """View transactions, newest first."""
    db = ctx.obj["db"]
    service = TransactionService(db)

    start, end = resolve_cli_date_range(
        ctx,
        month=month,
        start_date=start_date,
        end_date=end_date,
        period_flags={"this-month": this_month, "last-month": last_month},
    )

    try:
        transactions = service.list_transactions(
            start_date=start, end_date=end, selected_filter=selected_filter, search=search
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not transactions:
        click.echo("No transactions found.")
        return

    click.echo(f"\nFound {len(transactions)} transaction(s):")
    click.echo(
        f"{'ID':<6} {'Date':<12} {'Description':<28} {'Counterparty':<20} "
        f"{'Category':<12} {'Method':<9} {'Amount':>12} Status"
    )
    click.echo("-" * 110)
    for txn in transactions:
        status = "paid" if txn.is_paid else "pending"
        click.echo(
            f"{txn.id:<6} {str(txn.date):<12} {txn.description[:28]:<28} "
            f"{txn.counterparty[:20]:<20} {txn.category_name[:12]:<12} "
            f"{txn.payment_method.value:<9} {txn.signed_amount:>12,.2f} {status}"
        )


def register_commands(cli):
    """Register view command with main CLI."""
    cli.add_command(view_transactions)
