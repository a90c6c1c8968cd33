"""Reminder email delivery over SMTP (STARTTLS, Gmail app-password friendly)."""

from __future__ import annotations

import smtplib
from dataclasses import dataclass
from email.message import EmailMessage

from src.log import get_logger
from .contracts import MailDeliveryError, ReminderEmail, ReminderSender

logger = get_logger(__name__)


@dataclass(frozen=True)
class SmtpConfig:
    """SMTP account used as the sender of every reminder."""

    host: str
    port: int
    username: str
    password: str
    timeout: float = 30.0


def build_message(email: ReminderEmail, from_address: str) -> EmailMessage:
    msg = EmailMessage()
    msg["From"] = from_address
    msg["To"] = email.to_address
    msg["Subject"] = email.subject
    if email.text:
        msg.set_content(email.text)
        if email.html:
            msg.add_alternative(email.html, subtype="html")
    else:
        msg.set_content(email.html or "", subtype="html")
    return msg


class SmtpReminderSender:
    def __init__(self, config: SmtpConfig) -> None:
        self._config = config

    def send(self, email: ReminderEmail) -> None:
        cfg = self._config
        msg = build_message(email, from_address=cfg.username)
        try:
            with smtplib.SMTP(cfg.host, cfg.port, timeout=cfg.timeout) as smtp:
                smtp.starttls()
                smtp.login(cfg.username, cfg.password)
                smtp.send_message(msg)
        except (smtplib.SMTPException, OSError) as exc:
            logger.error("SMTP delivery failed to=%s subject=%s: %s", email.to_address, email.subject, exc)
            raise MailDeliveryError(str(exc)) from exc
        logger.info("Reminder sent to=%s subject=%s", email.to_address, email.subject)


class NullReminderSender:
    """Drops reminders when no SMTP account is configured."""

    def send(self, email: ReminderEmail) -> None:
        logger.warning("SMTP not configured; dropping reminder to=%s subject=%s", email.to_address, email.subject)


def build_reminder_sender(settings) -> ReminderSender:
    if settings.SMTP_USER and settings.SMTP_PASSWORD:
        return SmtpReminderSender(
            SmtpConfig(
                host=settings.SMTP_HOST,
                port=settings.SMTP_PORT,
                username=settings.SMTP_USER,
                password=settings.SMTP_PASSWORD,
                timeout=settings.SMTP_TIMEOUT,
            )
        )
    return NullReminderSender()
