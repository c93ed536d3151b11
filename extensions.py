from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager
from flask_migrate import Migrate

db = SQLAlchemy()
login_manager = LoginManager()
migrate = Migrate()

# Identity comes from bearer tokens, there are no cookie sessions to protect
login_manager.session_protection = None
