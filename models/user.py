"""
User model for authentication.
"""

import base64
import hashlib
from datetime import datetime
import bcrypt
from flask import current_app
from extensions import db


def _prehash(password):
    """Reduce a password of any length to a fixed 44-byte bcrypt input.

    bcrypt only reads the first 72 bytes and newer releases reject anything
    longer, so the SHA-256 digest is hashed instead of the raw password.
    """
    digest = hashlib.sha256(password.encode("utf-8")).digest()
    return base64.b64encode(digest)


class User(db.Model):
    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.Text, unique=True, nullable=False)
    password_hash = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    content = db.relationship(
        "Content",
        back_populates="owner",
        lazy="dynamic",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    share_link = db.relationship(
        "ShareLink",
        back_populates="owner",
        uselist=False,
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def set_password(self, password):
        """Hash password with bcrypt using the configured work factor."""
        rounds = current_app.config.get("BCRYPT_ROUNDS", 13)
        salt = bcrypt.gensalt(rounds=rounds)
        self.password_hash = bcrypt.hashpw(_prehash(password), salt).decode("utf-8")

    def check_password(self, password):
        """Check if provided password matches the hash."""
        if not self.password_hash:
            return False
        return bcrypt.checkpw(_prehash(password), self.password_hash.encode("utf-8"))

    @classmethod
    def find_by_username(cls, username):
        return cls.query.filter_by(username=username).first()

    def __repr__(self):
        return f"<User {self.username}>"
