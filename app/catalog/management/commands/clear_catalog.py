import click
from flask.cli import with_appcontext
from external.database import db
from app.categories.models import Category
from app.packages.models import Package
from app.plugins.models import Plugin


@click.command("clear-catalog")
@click.option("--confirm", is_flag=True, help="Confirm deletion without prompting")
@with_appcontext
def clear_catalog(confirm):
    """Remove all packages, plugins and categories from the database."""

    if not confirm:
        if not click.confirm("⚠️  Are you sure you want to delete the whole catalog?"):
            click.echo("❌ Operation cancelled.")
            return

    try:
        counts = {
            "packages": Package.query.delete(),
            "plugins": Plugin.query.delete(),
            # Children before parents to satisfy the self-reference
            "categories": Category.query.filter(Category.parent_id.isnot(None)).delete()
            + Category.query.delete(),
        }
        db.session.commit()
        click.echo(
            "🗑️  Deleted "
            + ", ".join(f"{count} {name}" for name, count in counts.items())
            + "."
        )
    except Exception as e:
        db.session.rollback()
        click.echo(f"❌ Error clearing catalog: {str(e)}")
        raise
