from skillswap.extensions import db
from skillswap.models.base import CreatedAtMixin, PKType


class AdminLog(CreatedAtMixin, db.Model):
    __tablename__ = "admin_logs"

    id = db.Column(PKType, primary_key=True, autoincrement=True)
    action = db.Column(db.String(64), nullable=False)
    target_type = db.Column(db.String(64), nullable=False)
    target_id = db.Column(PKType, nullable=True)
    details = db.Column(db.Text, nullable=True)
    admin_id = db.Column(db.String(64), nullable=False, server_default="admin")
