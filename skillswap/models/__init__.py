from skillswap.models.admin_log import AdminLog
from skillswap.models.chat_message import ChatMessage
from skillswap.models.notification import NOTIFICATION_TYPES, Notification
from skillswap.models.swap_request import SWAP_STATUSES, SwapRequest
from skillswap.models.system_message import SystemMessage
from skillswap.models.user import USER_STATUSES, User

__all__ = [
    "User",
    "SwapRequest",
    "Notification",
    "ChatMessage",
    "AdminLog",
    "SystemMessage",
    "USER_STATUSES",
    "SWAP_STATUSES",
    "NOTIFICATION_TYPES",
]
