"""
Content model for saved links (articles, videos, tweets, etc.).
"""

from datetime import datetime
from extensions import db


class Content(db.Model):
    __tablename__ = "content"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(
        db.Integer,
        db.ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    link = db.Column(db.Text, nullable=False)
    type = db.Column(db.Text, nullable=False)  # Free-form, e.g. 'video', 'article'
    title = db.Column(db.Text, nullable=False)
    tags = db.Column(db.JSON, nullable=False, default=list)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    owner = db.relationship("User", back_populates="content")

    def to_dict(self, username=None):
        """Serialize for API responses, optionally annotated with the owner's name."""
        data = {
            "id": self.id,
            "link": self.link,
            "type": self.type,
            "title": self.title,
            "tags": list(self.tags or []),
            "userId": self.user_id,
        }
        if username is not None:
            data["username"] = username
        return data

    @classmethod
    def owned_by(cls, user_id):
        """Query for all content owned by a user, oldest first."""
        return cls.query.filter_by(user_id=user_id).order_by(cls.id)

    def __repr__(self):
        return f"<Content {self.id}: {self.title}>"
