# Reminder mail relay (/send-reminder).

from .contracts import MailDeliveryError, ReminderEmail, ReminderSender
from .sender import NullReminderSender, SmtpConfig, SmtpReminderSender, build_reminder_sender

__all__ = [
    "MailDeliveryError",
    "ReminderEmail",
    "ReminderSender",
    "NullReminderSender",
    "SmtpConfig",
    "SmtpReminderSender",
    "build_reminder_sender",
]
