"""Transaction management commands."""

import click
from cashflow.cli.date_filters import date_range_options, resolve_cli_date_range
from cashflow.cli.error_handling import handle_domain_error
from cashflow.domain.errors import DomainError
from cashflow.domain.transaction import TransactionService


@click.group()
def transaction_group():
    """Manage transactions."""
    pass


@transaction_group.command("toggle-paid")
@click.argument("transaction_id", type=int)
@click.pass_context
def toggle_paid(ctx, transaction_id: int) -> None:
    """Flip a transaction between paid and pending."""
    db = ctx.obj["db"]
    service = TransactionService(db)

    try:
        is_paid = service.toggle_paid(transaction_id)
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Transaction {transaction_id} marked as {'paid' if is_paid else 'pending'}")


@transaction_group.command("delete")
@click.argument("transaction_id", type=int)
@click.option("--yes", is_flag=True, help="Skip confirmation prompt")
@click.pass_context
def delete_transaction(ctx, transaction_id: int, yes: bool) -> None:
    """Delete a transaction."""
    db = ctx.obj["db"]
    service = TransactionService(db)

    try:
        txn = service.require_transaction(transaction_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not yes:
        click.confirm(
            f"Delete transaction {transaction_id} ({txn.date} {txn.description} "
            f"{txn.signed_amount:,.2f})?",
            abort=True,
        )

    service.delete_transaction(transaction_id)
    click.echo(f"Deleted transaction {transaction_id}")


@transaction_group.command("duplicates")
@date_range_options
@click.pass_context
def list_duplicates(
    ctx,
    month: str | None,
    start_date: str | None,
    end_date: str | None,
    this_month: bool,
    last_month: bool,
) -> None:
    """List stored transactions that look like duplicate entries."""
    db = ctx.obj["db"]
    service = TransactionService(db)

    start, end = resolve_cli_date_range(
        ctx,
        month=month,
        start_date=start_date,
        end_date=end_date,
        period_flags={"this-month": this_month, "last-month": last_month},
    )

    groups = service.find_duplicates(start_date=start, end_date=end)
    if not groups:
        click.echo("No duplicates found.")
        return

    click.echo(f"Found {len(groups)} group(s) of possible duplicates:")
    for group in groups:
        first = group[0]
        ids = ", ".join(str(record.id) for record in group)
        click.echo(
            f"  {first.date} {first.description} ({first.counterparty}) "
            f"{first.signed_amount:,.2f}: IDs {ids}"
        )


def register_commands(cli):
    """Register transaction commands with main CLI."""
    cli.add_command(transaction_group, name="transaction")
