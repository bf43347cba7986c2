from skillswap.extensions import db
from skillswap.models.base import CreatedAtMixin, PKType


class ChatMessage(CreatedAtMixin, db.Model):
    __tablename__ = "chat_messages"

    id = db.Column(PKType, primary_key=True, autoincrement=True)
    swap_request_id = db.Column(
        PKType, db.ForeignKey("swap_requests.id", ondelete="CASCADE"), nullable=False, index=True
    )
    sender_id = db.Column(PKType, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    receiver_id = db.Column(PKType, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    message = db.Column(db.Text, nullable=False)
