from __future__ import annotations

import logging
import smtplib
from dataclasses import dataclass
from email.message import EmailMessage
from email.utils import parseaddr
from typing import Protocol

from ..core.exceptions import ConfigurationError, NotificationError

logger = logging.getLogger(__name__)


class Mailer(Protocol):
    def send(self, *, to: str, subject: str, body: str) -> None:
        """Deliver one plain-text message; raise NotificationError on failure."""

        raise NotImplementedError


@dataclass(frozen=True)
class SmtpConfig:
    host: str
    port: int = 587
    user: str = ""
    password: str = ""
    sender: str = "Confession Attendance <no-reply@example.com>"
    use_tls: bool = True
    timeout: int = 15


class SmtpMailer(Mailer):
    def __init__(self, config: SmtpConfig):
        self._config = config

    def send(self, *, to: str, subject: str, body: str) -> None:
        msg = EmailMessage()
        msg["From"] = self._config.sender
        msg["To"] = to
        msg["Subject"] = subject
        msg.set_content(body or "")

        try:
            with smtplib.SMTP(self._config.host, self._config.port, timeout=self._config.timeout) as server:
                if self._config.use_tls:
                    server.starttls()
                if self._config.user:
                    server.login(self._config.user, self._config.password)
                server.send_message(msg)
        except (smtplib.SMTPException, OSError) as e:
            raise NotificationError(f"Could not send '{subject}' to {to}: {e}") from e

        logger.info("Sent '%s' to %s", subject, to)


class ConsoleMailer(Mailer):
    """Writes messages to the log instead of sending them (development)."""

    def __init__(self, sender: str = ""):
        self._sender = sender

    def send(self, *, to: str, subject: str, body: str) -> None:
        logger.info("EMAIL (console)\nFrom: %s\nTo: %s\nSubject: %s\n\n%s", self._sender, to, subject, body)


def build_mailer(settings) -> Mailer:
    """Pick the mail backend from the settings module (EMAIL_BACKEND)."""
    backend = str(getattr(settings, "EMAIL_BACKEND", "console") or "console").lower()
    sender = str(getattr(settings, "EMAIL_FROM", "") or "")

    if backend == "console":
        return ConsoleMailer(sender)
    if backend == "smtp":
        host = str(getattr(settings, "SMTP_HOST", "") or "")
        if not host:
            raise ConfigurationError("SMTP_HOST is not set (required for the smtp backend)")
        if not parseaddr(sender)[1]:
            raise ConfigurationError("EMAIL_FROM is not a valid address")
        return SmtpMailer(
            SmtpConfig(
                host=host,
                port=int(getattr(settings, "SMTP_PORT", 587)),
                user=str(getattr(settings, "SMTP_USER", "") or ""),
                password=str(getattr(settings, "SMTP_PASSWORD", "") or ""),
                sender=sender,
                use_tls=bool(getattr(settings, "SMTP_USE_TLS", True)),
            )
        )
    raise ConfigurationError(f"Unknown EMAIL_BACKEND={backend} (use 'smtp' or 'console')")
