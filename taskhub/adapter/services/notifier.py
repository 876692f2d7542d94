"""
Notifier implementations.

SmtpNotifier sends through aiosmtplib; LoggingNotifier is the
development fallback used when no SMTP host is configured.
"""

import logging
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from typing import Optional

import aiosmtplib
from pydantic import BaseModel

from taskhub.app.services.notifier import NotificationError, Notifier
from taskhub.domain.entities import NotificationKind

logger = logging.getLogger(__name__)


class SMTPSettings(BaseModel):
    """Configuration settings for the SMTP notifier."""

    host: str
    port: int = 587
    username: str = ""
    password: str = ""
    use_tls: bool = True
    timeout: int = 10
    from_email: str
    from_name: str = "TaskHub"


_SUBJECTS = {
    NotificationKind.verification: "Verify Your Email",
    NotificationKind.password_reset: "Reset Your Password",
}

_BODIES = {
    NotificationKind.verification: (
        "Please verify your email by entering the following code: {code}\n\n"
        "This code will expire in 24 hours."
    ),
    NotificationKind.password_reset: (
        "You requested to reset your password. Use this code to reset your password: {code}\n\n"
        "This code will expire in 1 hour.\n"
        "If you didn't request a password reset, you can ignore this email."
    ),
}


def render_message(kind: NotificationKind, code: str, name: Optional[str]) -> tuple[str, str, str]:
    """Return (subject, text_body, html_body) for a one-time code email"""
    greeting = f"Hello {name}," if name else "Hello,"
    body = _BODIES[kind].format(code=code)
    text_body = f"{greeting}\n\n{body}"
    html_lines = "".join(f"<p>{line}</p>" for line in body.split("\n") if line)
    html_body = f"<p>{greeting}</p>{html_lines}"
    return _SUBJECTS[kind], text_body, html_body


def redact_email(email: str) -> str:
    """Redact an email address for logging to avoid PII leakage."""
    if "@" not in email:
        return "redacted"
    local, domain = email.split("@", 1)
    return f"{local[:2]}***@{domain}"


class SmtpNotifier(Notifier):
    """Sends one-time codes via SMTP"""

    def __init__(self, settings: SMTPSettings):
        self.settings = settings

    async def send(
        self,
        recipient: str,
        kind: NotificationKind,
        code: str,
        name: Optional[str] = None,
    ) -> None:
        subject, text_body, html_body = render_message(kind, code, name)

        message = MIMEMultipart("alternative")
        message["Subject"] = subject
        message["From"] = f"{self.settings.from_name} <{self.settings.from_email}>"
        message["To"] = recipient
        message.attach(MIMEText(text_body, "plain"))
        message.attach(MIMEText(html_body, "html"))

        try:
            async with aiosmtplib.SMTP(
                hostname=self.settings.host,
                port=self.settings.port,
                timeout=self.settings.timeout,
                start_tls=self.settings.use_tls,
            ) as smtp:
                if self.settings.username:
                    await smtp.login(self.settings.username, self.settings.password)
                await smtp.send_message(message)
        except (aiosmtplib.SMTPException, OSError) as e:
            logger.error(
                "Failed to send %s email to %s: %s",
                kind.value,
                redact_email(recipient),
                e,
            )
            raise NotificationError(f"Failed to send {kind.value} email") from e

        logger.info("Sent %s email to %s", kind.value, redact_email(recipient))


class LoggingNotifier(Notifier):
    """Development notifier: logs the code instead of sending it"""

    async def send(
        self,
        recipient: str,
        kind: NotificationKind,
        code: str,
        name: Optional[str] = None,
    ) -> None:
        logger.info(
            "DEVELOPMENT MODE: %s email not sent (to=%s, code=%s)",
            kind.value,
            redact_email(recipient),
            code,
        )
