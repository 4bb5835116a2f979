import click
from flask.cli import with_appcontext
from external.database import db, init_db
from app.categories.models import Category
from app.packages.models import Package
from app.plugins.models import Plugin
from app.catalog.management.data import (
    MAIN_CATEGORIES,
    SUBCATEGORIES,
    PACKAGES,
    PLUGINS,
)


def _record_fields(data):
    return {k: v for k, v in data.items() if k not in ("category_slug", "parent_slug")}


@click.command("seed-catalog")
@click.option(
    "--force",
    is_flag=True,
    help="Delete existing packages, plugins and categories first",
)
@with_appcontext
def seed_catalog(force):
    """Populate the catalogs with sample categories, packages and plugins."""
    init_db()

    if force:
        click.echo("🗑️  Deleting existing catalog...")
        Package.query.delete()
        Plugin.query.delete()
        Category.query.filter(Category.parent_id.isnot(None)).delete()
        Category.query.delete()
        db.session.commit()
    elif Category.query.count():
        click.echo("📦 Catalog already populated. Use --force to recreate it.")
        return

    try:
        categories = {}
        click.echo("📦 Creating categories...")
        for cat_data in MAIN_CATEGORIES:
            category = Category(**_record_fields(cat_data), is_active=True)
            db.session.add(category)
            categories[cat_data["slug"]] = category
        db.session.flush()  # Get the IDs

        for subcat_data in SUBCATEGORIES:
            parent = categories[subcat_data["parent_slug"]]
            subcategory = Category(
                **_record_fields(subcat_data), parent_id=parent.id, is_active=True
            )
            db.session.add(subcategory)
            categories[subcat_data["slug"]] = subcategory
        db.session.flush()

        click.echo("📦 Creating packages...")
        for package_data in PACKAGES:
            db.session.add(
                Package(
                    **_record_fields(package_data),
                    category_id=categories[package_data["category_slug"]].id,
                )
            )

        click.echo("📦 Creating plugins...")
        for plugin_data in PLUGINS:
            db.session.add(
                Plugin(
                    **_record_fields(plugin_data),
                    category_id=categories[plugin_data["category_slug"]].id,
                )
            )

        db.session.commit()
        click.echo(
            f"🎉 Created {len(categories)} categories, {len(PACKAGES)} packages "
            f"and {len(PLUGINS)} plugins."
        )
    except Exception as e:
        db.session.rollback()
        click.echo(f"❌ Error seeding catalog: {str(e)}")
        raise
