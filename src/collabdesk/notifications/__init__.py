"""Status notifications to business contacts."""

from collabdesk.notifications.background import BackgroundTasks
from collabdesk.notifications.dispatcher import NotificationDispatcher
from collabdesk.notifications.templates import TEMPLATES, NotificationTemplate, render_notification

__all__ = [
    "TEMPLATES",
    "BackgroundTasks",
    "NotificationDispatcher",
    "NotificationTemplate",
    "render_notification",
]
