from cli.init_db import init_db, create_db
from cli.create_user import create_user
from cli.revoke_share import revoke_share

# Export all commands for use in the app
__all__ = [
    "init_db",
    "create_db",
    "create_user",
    "revoke_share",
]
