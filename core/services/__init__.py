# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .todo_service import TodoService
from .profile_service import ProfileService
from .notification_service import NotificationService

__all__ = [
    "TodoService",
    "ProfileService",
    "NotificationService",
]
