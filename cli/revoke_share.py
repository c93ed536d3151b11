import click
from flask.cli import with_appcontext

from models import User
from services.share_service import disable_share


@click.command("revoke-share")
@click.option("--username", prompt=True, help="User whose share link to remove")
@with_appcontext
def revoke_share(username):
    """Remove a user's public share link."""
    user = User.find_by_username(username)
    if not user:
        click.echo(f"User {username} does not exist.")
        return

    if disable_share(user.id):
        click.echo(f"Share link for {username} has been removed.")
    else:
        click.echo(f"User {username} has no share link.")
