"""
SMTP notifier adapter - Implements Notifier protocol via fastapi-mail.

Sends the verification code as an HTML email. Any failure raised by the
mail client surfaces as DeliveryError; the domain decides what to report.
"""

import logging
from pathlib import Path

from fastapi_mail import ConnectionConfig, FastMail, MessageSchema, MessageType
from jinja2 import Environment, FileSystemLoader

from src.config.settings import Settings
from src.domain.exceptions import DeliveryError

logger = logging.getLogger(__name__)

SUBJECT = "Tu código de verificación de Barista Coffee"

TEMPLATE_DIR = Path(__file__).parent / "templates"
BODY_TEMPLATE = "verification_code.html"

env = Environment(loader=FileSystemLoader(TEMPLATE_DIR), autoescape=True)


def build_connection_config(settings: Settings) -> ConnectionConfig:
    """Build fastapi-mail connection settings from application settings."""
    return ConnectionConfig(
        MAIL_USERNAME=settings.mail_username,
        MAIL_PASSWORD=settings.mail_password,
        MAIL_FROM=settings.mail_from,
        MAIL_FROM_NAME=settings.mail_from_name,
        MAIL_PORT=settings.mail_port,
        MAIL_SERVER=settings.mail_server,
        MAIL_STARTTLS=settings.mail_starttls,
        MAIL_SSL_TLS=settings.mail_ssl_tls,
        USE_CREDENTIALS=bool(settings.mail_username),
        VALIDATE_CERTS=True,
    )


def render_body(name: str, code: str, ttl_seconds: int) -> str:
    return env.get_template(BODY_TEMPLATE).render(
        name=name,
        code=code,
        minutes=max(ttl_seconds // 60, 1),
    )


class FastMailNotifier:
    """
    Implements Notifier protocol by sending email through fastapi-mail.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self, mailer: FastMail, ttl_seconds: int = 600) -> None:
        self._mailer = mailer
        self._ttl_seconds = ttl_seconds

    @classmethod
    def from_settings(cls, settings: Settings) -> "FastMailNotifier":
        return cls(FastMail(build_connection_config(settings)), settings.code_ttl_seconds)

    async def send_verification_code(self, name: str, email: str, code: str) -> None:
        message = MessageSchema(
            subject=SUBJECT,
            recipients=[email],
            body=render_body(name, code, self._ttl_seconds),
            subtype=MessageType.html,
        )
        try:
            await self._mailer.send_message(message)
        except Exception as e:
            logger.error("Failed to send verification email to %s: %s", email, e)
            raise DeliveryError("Failed to send verification code") from e

        logger.info("Verification email sent to %s", email)
