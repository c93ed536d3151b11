import click
from flask.cli import with_appcontext
from extensions import db
from sqlalchemy import text


@click.command("init-db")
@with_appcontext
def init_db():
    """Wipe the database so the brain starts empty.

    Every user, saved item and share link is lost. Run 'flask create-db'
    afterwards to recreate the tables.
    """
    dialect_name = db.engine.dialect.name

    if dialect_name == "postgresql":
        click.echo("PostgreSQL detected. Recreating the 'public' schema...")
        with db.engine.connect() as connection:
            connection.execute(text("DROP SCHEMA public CASCADE;"))
            connection.execute(text("CREATE SCHEMA public;"))
            if db.engine.url.username:
                connection.execute(
                    text(f"GRANT ALL ON SCHEMA public TO {db.engine.url.username};")
                )
            connection.commit()
    else:
        click.echo(f"{dialect_name.capitalize()} detected. Dropping all tables...")
        db.drop_all()

    click.echo(
        "Database has been wiped. Run 'flask create-db' to recreate the tables."
    )


@click.command("create-db")
@with_appcontext
def create_db():
    """Create any missing tables directly from the models."""
    db.create_all()
    click.echo("Database tables created.")
