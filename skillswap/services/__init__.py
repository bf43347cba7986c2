from flask import current_app

from skillswap.services.admin_service import AdminService
from skillswap.services.chat_service import ChatService
from skillswap.services.notification_service import NotificationService
from skillswap.services.reporting_service import ReportingService
from skillswap.services.swap_request_service import SwapRequestService
from skillswap.services.user_service import UserService


class Services:
    """Service graph wired around a single injected gateway."""

    def __init__(self, gateway, notifications=None):
        self.gateway = gateway
        self.notifications = notifications or NotificationService(gateway)
        self.swap_requests = SwapRequestService(gateway, self.notifications)
        self.chat = ChatService(gateway, self.notifications, self.swap_requests)
        self.admin = AdminService(gateway)
        self.users = UserService(gateway, self.admin)
        self.reporting = ReportingService(gateway)


def get_services():
    return current_app.extensions["skillswap_services"]


__all__ = [
    "AdminService",
    "ChatService",
    "NotificationService",
    "ReportingService",
    "Services",
    "SwapRequestService",
    "UserService",
    "get_services",
]
