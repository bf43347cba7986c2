from skillswap.extensions import db
from skillswap.models.base import CreatedAtMixin, PKType

USER_STATUSES = ("active", "flagged", "banned")


class User(CreatedAtMixin, db.Model):
    __tablename__ = "users"

    id = db.Column(PKType, primary_key=True, autoincrement=True)
    name = db.Column(db.String(120), nullable=False)
    email = db.Column(db.String(255), nullable=False, unique=True, index=True)
    password_hash = db.Column(db.String(255), nullable=False)
    status = db.Column(db.String(16), nullable=False, server_default="active", index=True)

    __table_args__ = (
        db.CheckConstraint("status IN ('active', 'flagged', 'banned')", name="ck_user_status"),
    )
