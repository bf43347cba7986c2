from flask import current_app

from skillswap.services.inputs import clean_text, require_fields


class AdminService:
    """Broadcast messages and the admin action log."""

    def __init__(self, gateway):
        self.gateway = gateway

    def log_action(self, action, target_type, target_id, details, admin_id="admin"):
        # Joins the caller's unit of work; the caller commits.
        self.gateway.execute(
            "INSERT INTO admin_logs (action, target_type, target_id, details, admin_id) VALUES (?, ?, ?, ?, ?)",
            (action, target_type, target_id, details, admin_id),
        )

    def send_message(self, message, sent_by="admin"):
        text = clean_text(message)
        require_fields(message=text)
        result = self.gateway.execute(
            "INSERT INTO system_messages (message, sent_by) VALUES (?, ?)",
            (text, sent_by),
        )
        self.log_action("send_message", "system_message", result.generated_id, "Broadcast message sent", sent_by)
        self.gateway.commit()
        current_app.logger.info("System message %s broadcast by %s", result.generated_id, sent_by)
        return {"success": True, "id": result.generated_id}

    def recent_messages(self, limit=None):
        if limit is None:
            limit = current_app.config.get("SYSTEM_MESSAGE_LIMIT", 10)
        return self.gateway.query_all(
            "SELECT * FROM system_messages ORDER BY created_at DESC, id DESC LIMIT ?",
            (limit,),
        )

    def recent_logs(self, limit=None):
        if limit is None:
            limit = current_app.config.get("ADMIN_LOG_LIMIT", 50)
        return self.gateway.query_all(
            "SELECT * FROM admin_logs ORDER BY created_at DESC, id DESC LIMIT ?",
            (limit,),
        )
