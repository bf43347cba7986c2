from flask import current_app

from skillswap.errors import ConflictError, NotFoundError, ValidationError
from skillswap.extensions import bcrypt
from skillswap.models import USER_STATUSES
from skillswap.services.inputs import clean_text, parse_id, require_fields

PUBLIC_COLUMNS = "id, name, email, status, created_at"


class UserService:
    def __init__(self, gateway, admin):
        self.gateway = gateway
        self.admin = admin

    def create_user(self, name, email, password):
        name = clean_text(name)
        email = (clean_text(email) or "").lower() or None
        password = str(password) if password not in (None, "") else None
        require_fields(name=name, email=email, password=password)
        if self.gateway.query_one("SELECT id FROM users WHERE email = ?", (email,)):
            raise ConflictError("Email already registered.", 409)

        password_hash = bcrypt.generate_password_hash(password).decode("utf-8")
        result = self.gateway.execute(
            "INSERT INTO users (name, email, password_hash, status) VALUES (?, ?, ?, ?)",
            (name, email, password_hash, "active"),
        )
        self.gateway.commit()
        return {"id": result.generated_id, "name": name, "email": email}

    def get_user(self, user_id):
        user_id = parse_id(user_id, "user_id")
        row = self.gateway.query_one(f"SELECT {PUBLIC_COLUMNS} FROM users WHERE id = ?", (user_id,))
        if row is None:
            raise NotFoundError("User not found")
        return row

    def list_users(self):
        return self.gateway.query_all(f"SELECT {PUBLIC_COLUMNS} FROM users ORDER BY id ASC")

    def set_status(self, user_id, status):
        status = (clean_text(status) or "").lower()
        if status not in USER_STATUSES:
            raise ValidationError("Status must be one of: " + ", ".join(USER_STATUSES))
        user = self.get_user(user_id)

        self.gateway.execute("UPDATE users SET status = ? WHERE id = ?", (status, user["id"]))
        self.admin.log_action("update_user_status", "user", user["id"], f"User status changed to {status}")
        self.gateway.commit()
        current_app.logger.info("User %s status set to %s", user["id"], status)
        return {"success": True}
