import click
from flask.cli import with_appcontext

from errors import BrainError
from services.identity_service import register_user


@click.command("create-user")
@click.option("--username", prompt=True, help="Login name of the new user")
@click.option(
    "--password",
    prompt=True,
    hide_input=True,
    confirmation_prompt=True,
    help="Password for the new user",
)
@with_appcontext
def create_user(username, password):
    """Register a new user from the command line."""
    try:
        user = register_user(username, password)
    except BrainError as e:
        click.echo(f"Could not create user {username}: {e.message}")
        return
    click.echo(f"User {user.username} created successfully.")
