"""Add transaction command."""

import click
from cashflow.cli.error_handling import handle_domain_error
from cashflow.domain.entities import (
    IntervalKind,
    PaymentMethod,
    RecurrencePolicy,
    TransactionDraft,
)
from cashflow.domain.errors import DomainError, DuplicateTransactionError
from cashflow.domain.filters import FILTER_KEYS, default_category_for_filter
from cashflow.domain.transaction import TransactionService
from cashflow.utils.date_parser import parse_date
from cashflow.utils.amount_parser import parse_amount


@click.command("add")
@click.option(
    "--date",
    default="today",
    show_default=True,
    help="Transaction date (YYYY-MM-DD or relative like 'today', 'yesterday')",
)
@click.option("--description", required=True, help="Transaction description")
@click.option("--counterparty", required=True, help="Who paid you or whom you paid")
@click.option("--amount", required=True, help="Transaction amount (e.g., 123.45)")
@click.option("--category", help="Category name (defaults to the filter's category)")
@click.option(
    "--payment-method",
    required=True,
    type=click.Choice([method.value for method in PaymentMethod]),
    help="Payment method",
)
@click.option("--unpaid", is_flag=True, help="Mark the transaction as not yet paid")
@click.option(
    "--filter",
    "selected_filter",
    type=click.Choice(FILTER_KEYS),
    default="all",
    show_default=True,
    help="Filter the transaction is entered under",
)
@click.option(
    "--recurring",
    type=click.Choice([kind.value for kind in IntervalKind]),
    help="Repeat the transaction at this interval",
)
@click.option("--day", type=int, help="Day of month for later occurrences (default: day of --date)")
@click.option("--count", type=int, help="Total number of occurrences, including this one")
@click.option("--force", is_flag=True, help="Save even if it looks like a duplicate")
@click.pass_context
def add_transaction(
    ctx,
    date: str,
    description: str,
    counterparty: str,
    amount: str,
    category: str | None,
    payment_method: str,
    unpaid: bool,
    selected_filter: str,
    recurring: str | None,
    day: int | None,
    count: int | None,
    force: bool,
):
    """Add a transaction, optionally repeating it.

    Examples:
        cashflow add --description "Salary" --counterparty "ACME" --amount 5000 --category income --payment-method transfer
        cashflow add --date 2024-01-31 --description "Rent" --counterparty "Landlord" --amount 1200 --category fixed --payment-method pix --recurring monthly --day 31 --count 12
    """
    db = ctx.obj["db"]
    service = TransactionService(db)

    try:
        txn_date = parse_date(date)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)

    try:
        raw_amount = parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount format: {e}", err=True)
        ctx.exit(1)

    if day is not None and not 1 <= day <= 31:
        click.echo("Error: Day of month must be between 1 and 31", err=True)
        ctx.exit(1)
    if recurring is None and (day is not None or count is not None):
        click.echo("Error: --day and --count require --recurring", err=True)
        ctx.exit(1)
    if recurring is not None and count is None:
        click.echo("Error: --recurring requires --count", err=True)
        ctx.exit(1)

    policy = None
    if recurring is not None:
        policy = RecurrencePolicy(
            interval_kind=IntervalKind(recurring),
            day_of_month=day if day is not None else txn_date.day,
            occurrence_count=count,
        )

    draft = TransactionDraft(
        date=txn_date,
        description=description,
        counterparty=counterparty,
        raw_amount=raw_amount,
        category_name=category or default_category_for_filter(selected_filter),
        payment_method=PaymentMethod(payment_method),
        is_paid=not unpaid,
        recurrence_policy=policy,
    )

    try:
        ids = service.create_transaction(
            draft, selected_filter=selected_filter, allow_duplicate=force
        )
    except DuplicateTransactionError as e:
        click.echo(f"Warning: {e}", err=True)
        click.echo("Use --force to save it anyway.", err=True)
        ctx.exit(1)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created {len(ids)} transaction(s)")
    for transaction_id in ids:
        record = service.get_transaction(transaction_id)
        status = "paid" if record.is_paid else "pending"
        click.echo(
            f"  [{transaction_id}] {record.date}  {record.signed_amount:>12,.2f}  {status}"
        )


def register_commands(cli):
    """Register add command with main CLI."""
    cli.add_command(add_transaction)
