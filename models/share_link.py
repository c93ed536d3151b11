from datetime import datetime
from extensions import db


class ShareLink(db.Model):
    """A public, read-only link to one user's content, addressed by its hash."""

    __tablename__ = "share_links"

    id = db.Column(db.Integer, primary_key=True)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    # One live link per user
    user_id = db.Column(
        db.Integer,
        db.ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )
    hash = db.Column(db.Text, nullable=False, unique=True)

    owner = db.relationship("User", back_populates="share_link")

    def __repr__(self):
        return f"<ShareLink {self.hash} for user {self.user_id}>"

    @classmethod
    def find_by_user(cls, user_id):
        return cls.query.filter_by(user_id=user_id).first()

    @classmethod
    def find_by_hash(cls, hash_value):
        return cls.query.filter_by(hash=hash_value).first()
