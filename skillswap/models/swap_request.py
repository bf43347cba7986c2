from skillswap.extensions import db
from skillswap.models.base import PKType, TimestampMixin

SWAP_STATUSES = ("pending", "accepted", "rejected")


class SwapRequest(TimestampMixin, db.Model):
    __tablename__ = "swap_requests"

    id = db.Column(PKType, primary_key=True, autoincrement=True)
    from_user_id = db.Column(PKType, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    to_user_id = db.Column(PKType, db.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    offered_skill = db.Column(db.String(120), nullable=False)
    wanted_skill = db.Column(db.String(120), nullable=False)
    message = db.Column(db.Text, nullable=True)
    status = db.Column(db.String(16), nullable=False, server_default="pending", index=True)

    __table_args__ = (
        db.Index("ix_swap_requests_to_user_status", "to_user_id", "status"),
        db.Index("ix_swap_requests_from_user_status", "from_user_id", "status"),
        db.CheckConstraint("status IN ('pending', 'accepted', 'rejected')", name="ck_swap_request_status"),
    )
