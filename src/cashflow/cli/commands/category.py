"""Category management commands."""

import click
from cashflow.cli.error_handling import handle_domain_error
from cashflow.domain.category import CategoryService
from cashflow.domain.entities import CategoryType
from cashflow.domain.errors import DomainError


@click.group()
def category_group():
    """Manage categories."""
    pass


@category_group.command("list")
@click.pass_context
def list_categories(ctx):
    """List all categories with their type."""
    db = ctx.obj["db"]
    service = CategoryService(db)

    categories = service.list_categories()
    if not categories:
        click.echo("No categories found. Run 'init-categories' to create default categories.")
        return

    click.echo("\nCategories:")
    for cat in categories:
        click.echo(f"  {cat.name:<30} {cat.category_type.value:<8} (ID: {cat.id})")


@category_group.command("create")
@click.argument("name")
@click.option(
    "--type",
    "category_type",
    type=click.Choice([t.value for t in CategoryType], case_sensitive=False),
    default=CategoryType.EXPENSE.value,
    help="Category type (default: expense)",
)
@click.pass_context
def create_category(ctx, name: str, category_type: str):
    """Create a new category."""
    db = ctx.obj["db"]
    service = CategoryService(db)

    try:
        category_id = service.create_category(
            name=name, category_type=CategoryType(category_type.lower())
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created category '{name}' (ID: {category_id})")


@click.command("init-categories")
@click.pass_context
def init_categories(ctx):
    """Create the default categories (income, fixed, variable, people, taxes, transfer)."""
    db = ctx.obj["db"]
    service = CategoryService(db)

    created = service.init_default_categories()
    if created:
        click.echo(f"Successfully created {len(created)} categories: {', '.join(created)}")
    else:
        click.echo("Default categories already exist.")


def register_commands(cli):
    """Register category commands with main CLI."""
    cli.add_command(category_group, name="category")
    cli.add_command(init_categories)
