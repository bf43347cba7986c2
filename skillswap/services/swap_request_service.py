from flask import current_app

from skillswap.errors import ConflictError, NotFoundError, ValidationError
from skillswap.services.inputs import clean_text, parse_id, require_fields
from skillswap.services.notification_service import NotificationType, SwapRequestRef

SWAP_TRANSITIONS = {
    "pending": {"accepted", "rejected"},
    "accepted": set(),
    "rejected": set(),
}

RESPONSE_WORDING = {
    "accepted": ("Swap Request Accepted", "Your swap request has been accepted!"),
    "rejected": ("Swap Request Rejected", "Your swap request has been rejected."),
}

LIST_DIRECTIONS = {
    # direction: (column matched against the user, counterpart column, counterpart alias prefix)
    "received": ("to_user_id", "from_user_id", "from_user"),
    "sent": ("from_user_id", "to_user_id", "to_user"),
}


class SwapRequestService:
    def __init__(self, gateway, notifications):
        self.gateway = gateway
        self.notifications = notifications

    def create_request(self, from_user_id, to_user_id, offered_skill, wanted_skill, message=None):
        from_user_id = parse_id(from_user_id, "from_user_id")
        to_user_id = parse_id(to_user_id, "to_user_id")
        offered_skill = clean_text(offered_skill)
        wanted_skill = clean_text(wanted_skill)
        message = clean_text(message)
        require_fields(
            from_user_id=from_user_id,
            to_user_id=to_user_id,
            offered_skill=offered_skill,
            wanted_skill=wanted_skill,
        )

        result = self.gateway.execute(
            "INSERT INTO swap_requests (from_user_id, to_user_id, offered_skill, wanted_skill, message, status) "
            "VALUES (?, ?, ?, ?, ?, ?)",
            (from_user_id, to_user_id, offered_skill, wanted_skill, message, "pending"),
        )
        self.gateway.commit()
        request_id = result.generated_id
        current_app.logger.info("Swap request %s created: user %s -> user %s", request_id, from_user_id, to_user_id)

        self.notifications.emit(
            to_user_id,
            NotificationType.SWAP_REQUEST,
            "New Swap Request",
            f"You have a new swap request from {from_user_id}",
            SwapRequestRef(request_id),
        )
        return {
            "id": request_id,
            "from_user_id": from_user_id,
            "to_user_id": to_user_id,
            "offered_skill": offered_skill,
            "wanted_skill": wanted_skill,
            "message": message,
            "status": "pending",
        }

    def get_request(self, request_id):
        request_id = parse_id(request_id, "id")
        row = None
        if request_id is not None:
            row = self.gateway.query_one("SELECT * FROM swap_requests WHERE id = ?", (request_id,))
        if row is None:
            raise NotFoundError("Swap request not found")
        return row

    def transition_request(self, request_id, new_status):
        if not isinstance(new_status, str) or new_status not in RESPONSE_WORDING:
            raise ValidationError('Invalid status. Must be "accepted" or "rejected"')

        swap_request = self.get_request(request_id)
        current = swap_request["status"]
        if new_status not in SWAP_TRANSITIONS.get(current, set()):
            current_app.logger.warning(
                "Rejected transition of swap request %s from %s to %s", swap_request["id"], current, new_status
            )
            raise ConflictError(f"Swap request already {current}")

        result = self.gateway.execute(
            "UPDATE swap_requests SET status = ?, updated_at = CURRENT_TIMESTAMP WHERE id = ? AND status = ?",
            (new_status, swap_request["id"], current),
        )
        if result.affected_rows == 0:
            # Another transition committed between the read and the update.
            self.gateway.rollback()
            raise ConflictError("Swap request was already resolved")
        self.gateway.commit()
        current_app.logger.info("Swap request %s %s", swap_request["id"], new_status)

        title, body = RESPONSE_WORDING[new_status]
        self.notifications.emit(
            swap_request["from_user_id"],
            NotificationType.SWAP_RESPONSE,
            title,
            body,
            SwapRequestRef(swap_request["id"]),
        )
        return {"success": True, "status": new_status}

    def list_requests(self, user_id, direction):
        if direction not in LIST_DIRECTIONS:
            raise ValidationError('Direction must be "received" or "sent"')
        user_id = parse_id(user_id, "user_id")
        own_column, other_column, prefix = LIST_DIRECTIONS[direction]
        return self.gateway.query_all(
            f"""
            SELECT sr.*, u.name AS {prefix}_name, u.email AS {prefix}_email
            FROM swap_requests sr
            JOIN users u ON sr.{other_column} = u.id
            WHERE sr.{own_column} = ?
            ORDER BY sr.created_at DESC, sr.id DESC
            """,
            (user_id,),
        )
