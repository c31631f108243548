"""
EmailNotifier: renders registration confirmations and hands them to SMTP.
Delivery is best effort. Failures are logged and reported as False, never raised.
"""
import logging
import os
import smtplib
from datetime import datetime
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from email.utils import formataddr
from typing import List, Optional

import jinja2

from highlandgames.config import (
    BASE_DIR, EMAIL_HOST, EMAIL_PORT, EMAIL_USER, EMAIL_PASS, EMAIL_SECURE, EMAIL_FROM_NAME
)
from highlandgames.models.event import Event

logger = logging.getLogger(__name__)

SITE_NAME = 'Paisley Highland Games'

# Autoescaping keeps submitter-supplied names from injecting markup into the email
_jinja_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(os.path.join(BASE_DIR, 'templates')),
    autoescape=jinja2.select_autoescape(['html', 'xml'])
)


def render_registration_email(name: str, events: List[Event]) -> str:
    """Render the confirmation HTML for one submitter and their resolved events."""
    template = _jinja_env.get_template('emails/registration_confirmation.html')
    return template.render(
        name=name,
        events=events,
        site_name=SITE_NAME,
        year=datetime.now().year
    )


class EmailNotifier:

    def __init__(
        self,
        host: str = EMAIL_HOST,
        port: int = EMAIL_PORT,
        username: str = EMAIL_USER,
        password: str = EMAIL_PASS,
        secure: bool = EMAIL_SECURE,
        from_name: str = EMAIL_FROM_NAME
    ):
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.secure = secure
        self.from_name = from_name

    def is_configured(self) -> bool:
        return bool(self.host and self.username)

    def verify(self) -> bool:
        """Open and close one SMTP session to check the credentials at startup."""
        if not self.is_configured():
            logger.warning("SMTP not configured; confirmation emails are disabled")
            return False
        try:
            with self._connect():
                pass
        except (smtplib.SMTPException, OSError) as e:
            logger.error("SMTP Connection Error: %s", e)
            return False
        logger.info("SMTP Server is ready")
        return True

    def _connect(self) -> smtplib.SMTP:
        if self.secure:
            server = smtplib.SMTP_SSL(self.host, self.port)
        else:
            server = smtplib.SMTP(self.host, self.port)
        try:
            if not self.secure:
                server.starttls()
            if self.password:
                server.login(self.username, self.password)
        except (smtplib.SMTPException, OSError):
            server.close()
            raise
        return server

    def send(self, to_email: str, subject: str, html_body: str, to_name: Optional[str] = None) -> bool:
        """Send an HTML email. Returns True if successful, False otherwise."""
        if not self.is_configured() or not to_email:
            logger.warning("Email not sent to %s: missing configuration or recipient", to_email)
            return False

        msg = MIMEMultipart('alternative')
        msg['From'] = formataddr((self.from_name, self.username))
        msg['To'] = formataddr((to_name, to_email)) if to_name else to_email
        msg['Subject'] = subject
        msg.attach(MIMEText(html_body, 'html'))

        try:
            with self._connect() as server:
                server.send_message(msg)
        except (smtplib.SMTPException, OSError) as e:
            logger.error("Failed to send email to %s: %s", to_email, e)
            return False

        logger.info("Email sent successfully to %s", to_email)
        return True

    def notify_registration(self, name: str, email: str, events: List[Event]) -> bool:
        """Send one confirmation listing every event of the submission."""
        html_body = render_registration_email(name, events)
        return self.send(email, 'Registration Confirmed', html_body, to_name=name)
