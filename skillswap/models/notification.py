from sqlalchemy import false

from skillswap.extensions import db
from skillswap.models.base import CreatedAtMixin, PKType

NOTIFICATION_TYPES = ("swap_request", "swap_response", "chat_message")


class Notification(CreatedAtMixin, db.Model):
    __tablename__ = "notifications"

    id = db.Column(PKType, primary_key=True, autoincrement=True)
    user_id = db.Column(PKType, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    type = db.Column(db.String(24), nullable=False, index=True)
    title = db.Column(db.String(180), nullable=False)
    message = db.Column(db.Text, nullable=False)
    # Points at swap_requests or chat_messages depending on ``type``.
    related_id = db.Column(PKType, nullable=True, index=True)
    is_read = db.Column(db.Boolean, nullable=False, server_default=false(), index=True)

    __table_args__ = (
        db.Index("ix_notifications_user_read", "user_id", "is_read"),
        db.CheckConstraint(
            "type IN (" + ", ".join(f"'{kind}'" for kind in NOTIFICATION_TYPES) + ")",
            name="ck_notification_type",
        ),
    )
