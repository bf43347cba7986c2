from skillswap.extensions import db
from skillswap.models.base import CreatedAtMixin, PKType


class SystemMessage(CreatedAtMixin, db.Model):
    __tablename__ = "system_messages"

    id = db.Column(PKType, primary_key=True, autoincrement=True)
    message = db.Column(db.Text, nullable=False)
    sent_by = db.Column(db.String(64), nullable=False, server_default="admin")
