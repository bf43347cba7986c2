from flask import current_app

from skillswap.errors import ConflictError
from skillswap.services.inputs import clean_text, parse_id, require_fields
from skillswap.services.notification_service import ChatMessageRef, NotificationType


class ChatService:
    def __init__(self, gateway, notifications, swap_requests):
        self.gateway = gateway
        self.notifications = notifications
        self.swap_requests = swap_requests

    def list_messages(self, swap_request_id):
        swap_request_id = parse_id(swap_request_id, "swap_request_id")
        return self.gateway.query_all(
            """
            SELECT cm.*, u.name AS sender_name
            FROM chat_messages cm
            JOIN users u ON cm.sender_id = u.id
            WHERE cm.swap_request_id = ?
            ORDER BY cm.created_at ASC, cm.id ASC
            """,
            (swap_request_id,),
        )

    def post_message(self, swap_request_id, sender_id, receiver_id, message):
        swap_request_id = parse_id(swap_request_id, "swap_request_id")
        sender_id = parse_id(sender_id, "sender_id")
        receiver_id = parse_id(receiver_id, "receiver_id")
        text = clean_text(message)
        require_fields(
            swap_request_id=swap_request_id,
            sender_id=sender_id,
            receiver_id=receiver_id,
            message=text,
        )

        swap_request = self.swap_requests.get_request(swap_request_id)
        if swap_request["status"] != "accepted":
            raise ConflictError("Chat is only available for accepted swap requests")

        result = self.gateway.execute(
            "INSERT INTO chat_messages (swap_request_id, sender_id, receiver_id, message) VALUES (?, ?, ?, ?)",
            (swap_request_id, sender_id, receiver_id, text),
        )
        self.gateway.commit()
        message_id = result.generated_id
        current_app.logger.info("Chat message %s posted on swap request %s", message_id, swap_request_id)

        self.notifications.emit(
            receiver_id,
            NotificationType.CHAT_MESSAGE,
            "New Message",
            f"You have a new message from user {sender_id}",
            ChatMessageRef(message_id),
        )
        return {
            "id": message_id,
            "swap_request_id": swap_request_id,
            "sender_id": sender_id,
            "receiver_id": receiver_id,
            "message": text,
        }

    def list_conversations(self, user_id):
        user_id = parse_id(user_id, "user_id")
        rows = self.gateway.query_all(
            """
            SELECT
                sr.id AS swap_request_id,
                sr.offered_skill,
                sr.wanted_skill,
                sr.created_at AS request_date,
                u.name AS other_user_name,
                u.id AS other_user_id,
                (
                    SELECT COUNT(*) FROM chat_messages cm
                    WHERE cm.swap_request_id = sr.id
                    AND cm.receiver_id = ?
                    AND cm.id NOT IN (
                        SELECT n.related_id FROM notifications n
                        WHERE n.user_id = ? AND n.type = ? AND n.is_read = ?
                        AND n.related_id IS NOT NULL
                    )
                ) AS unread_count
            FROM swap_requests sr
            JOIN users u ON (sr.from_user_id = u.id OR sr.to_user_id = u.id)
            WHERE sr.status = ?
            AND (sr.from_user_id = ? OR sr.to_user_id = ?)
            AND u.id != ?
            ORDER BY sr.updated_at DESC, sr.id DESC
            """,
            (user_id, user_id, NotificationType.CHAT_MESSAGE, True, "accepted", user_id, user_id, user_id),
        )
        for row in rows:
            row["unread_count"] = int(row["unread_count"] or 0)
        return rows
