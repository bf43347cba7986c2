from dataclasses import dataclass

from flask import current_app

from skillswap.errors import StoreError


class NotificationType:
    SWAP_REQUEST = "swap_request"
    SWAP_RESPONSE = "swap_response"
    CHAT_MESSAGE = "chat_message"


@dataclass(frozen=True)
class SwapRequestRef:
    swap_request_id: int


@dataclass(frozen=True)
class ChatMessageRef:
    chat_message_id: int


TARGET_BY_TYPE = {
    NotificationType.SWAP_REQUEST: SwapRequestRef,
    NotificationType.SWAP_RESPONSE: SwapRequestRef,
    NotificationType.CHAT_MESSAGE: ChatMessageRef,
}


def _related_id(target):
    if isinstance(target, SwapRequestRef):
        return target.swap_request_id
    return target.chat_message_id


class NotificationService:
    def __init__(self, gateway):
        self.gateway = gateway

    @staticmethod
    def target_of(row):
        """Decode the polymorphic ``related_id`` of a stored notification."""
        target_cls = TARGET_BY_TYPE.get(row.get("type"))
        if target_cls is None or row.get("related_id") is None:
            return None
        return target_cls(int(row["related_id"]))

    def emit(self, user_id, notification_type, title, message, target):
        """Best-effort insert; failures are logged and never raised."""
        expected = TARGET_BY_TYPE.get(notification_type)
        if expected is None:
            raise TypeError(f"Unknown notification type: {notification_type}")
        if not isinstance(target, expected):
            raise TypeError(f"{notification_type} notifications must target a {expected.__name__}")

        try:
            result = self.gateway.execute(
                "INSERT INTO notifications (user_id, type, title, message, related_id, is_read) "
                "VALUES (?, ?, ?, ?, ?, ?)",
                (user_id, notification_type, title, message, _related_id(target), False),
            )
            self.gateway.commit()
        except StoreError as exc:
            self.gateway.rollback()
            current_app.logger.exception(
                "Dropped %s notification for user %s: %s", notification_type, user_id, exc.message
            )
            return None
        return result.generated_id

    def list_for_user(self, user_id, limit=None):
        if limit is None:
            limit = current_app.config.get("NOTIFICATION_FEED_LIMIT", 50)
        rows = self.gateway.query_all(
            "SELECT * FROM notifications WHERE user_id = ? ORDER BY created_at DESC, id DESC LIMIT ?",
            (user_id, limit),
        )
        for row in rows:
            row["is_read"] = bool(row["is_read"])
        return rows

    def mark_read(self, notification_id):
        self.gateway.execute("UPDATE notifications SET is_read = ? WHERE id = ?", (True, notification_id))
        self.gateway.commit()

    def mark_all_read(self, user_id):
        self.gateway.execute(
            "UPDATE notifications SET is_read = ? WHERE user_id = ? AND is_read = ?",
            (True, user_id, False),
        )
        self.gateway.commit()

    def unread_count(self, user_id):
        row = self.gateway.query_one(
            "SELECT COUNT(*) AS count FROM notifications WHERE user_id = ? AND is_read = ?",
            (user_id, False),
        )
        return int(row["count"] or 0) if row else 0
