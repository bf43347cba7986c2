from sqlalchemy import BigInteger, Integer, func

from skillswap.extensions import db

# Use BIGINT in PostgreSQL, but INTEGER in SQLite so autoincrement works.
PKType = BigInteger().with_variant(Integer, "sqlite")


class CreatedAtMixin:
    # Rows are written through SqlGateway, so defaults must live in the schema.
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, server_default=func.now(), index=True)


class TimestampMixin(CreatedAtMixin):
    updated_at = db.Column(db.DateTime(timezone=True), nullable=False, server_default=func.now())
