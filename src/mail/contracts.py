"""Contracts for reminder email delivery."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol


@dataclass(frozen=True)
class ReminderEmail:
    """One reminder email; at least one of text/html is set."""

    to_address: str
    subject: str
    text: Optional[str] = None
    html: Optional[str] = None


class MailDeliveryError(Exception):
    """The mail transport refused or failed to deliver a message."""


class ReminderSender(Protocol):
    """Delivery contract for reminder emails."""

    def send(self, email: ReminderEmail) -> None:
        """Send one email synchronously or raise MailDeliveryError."""
