import click
from flask.cli import with_appcontext
from app.categories.models import Category
from app.packages.models import Package
from app.plugins.models import Plugin


@click.command("list-catalog")
@with_appcontext
def list_catalog():
    """List categories (with their packages and plugins)."""

    categories = Category.query.filter_by(parent_id=None).order_by(Category.name).all()

    if not categories:
        click.echo("📭 Catalog is empty. Run 'flask seed-catalog' to create it.")
        return

    click.echo("📋 Catalog:")
    click.echo("=" * 50)

    for category in categories:
        status = "" if category.is_active else " (inactive)"
        click.echo(f"📁 {category.name}{status}")
        _echo_items(category, indent="   ")

        for subcat in sorted(category.children, key=lambda c: c.name):
            click.echo(f"   📂 {subcat.name} ({subcat.slug})")
            _echo_items(subcat, indent="      ")

        click.echo()

    click.echo(
        f"Totals: {Category.query.count()} categories, "
        f"{Package.query.count()} packages, {Plugin.query.count()} plugins"
    )


def _echo_items(category, indent):
    for package in category.packages:
        click.echo(f"{indent}• [package] {package.title} - {package.price}")
    for plugin in category.plugins:
        click.echo(f"{indent}• [plugin] {plugin.name} v{plugin.version}")
