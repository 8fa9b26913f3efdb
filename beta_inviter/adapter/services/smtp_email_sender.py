import logging
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from email.utils import formatdate, make_msgid, parseaddr

from fastapi.concurrency import run_in_threadpool

from beta_inviter.app.services.email_sender import (
    EmailDeliveryError,
    EmailMessage,
    IEmailSender,
)

logger = logging.getLogger(__name__)


class SmtpEmailSender(IEmailSender):
    """
    Delivers messages through an SMTP server with server-held credentials.

    SMTP_SECURE selects implicit TLS (SMTP_SSL, usually port 465); otherwise
    the connection is upgraded with STARTTLS when the server offers it.
    """

    def __init__(self, config):
        self.host = config.SMTP_HOST
        self.port = config.SMTP_PORT
        self.secure = config.SMTP_SECURE
        self.username = config.SMTP_USER
        self.password = config.SMTP_PASS
        self.from_email = config.SMTP_FROM or config.SMTP_USER

    async def send(self, message: EmailMessage) -> str:
        return await run_in_threadpool(self._send_email, message)

    def _build_message(self, message: EmailMessage, message_id: str) -> MIMEMultipart:
        mime = MIMEMultipart("alternative")
        mime["From"] = self.from_email
        mime["To"] = message.to
        mime["Subject"] = message.subject
        mime["Date"] = formatdate(localtime=False)
        mime["Message-ID"] = message_id

        mime.attach(MIMEText(message.text, "plain", "utf-8"))
        mime.attach(MIMEText(message.html, "html", "utf-8"))
        return mime

    def _send_email(self, message: EmailMessage) -> str:
        if not self.host or not self.from_email:
            raise EmailDeliveryError("SMTP is not configured")

        domain = parseaddr(self.from_email)[1].rsplit("@", 1)[-1]
        message_id = make_msgid(domain=domain)
        mime = self._build_message(message, message_id)

        try:
            if self.secure:
                server = smtplib.SMTP_SSL(self.host, self.port)
            else:
                server = smtplib.SMTP(self.host, self.port)
            with server:
                if not self.secure:
                    server.ehlo()
                    if server.has_extn("starttls"):
                        server.starttls()
                        server.ehlo()
                if self.username and self.password:
                    server.login(self.username, self.password)
                server.send_message(mime)
        except (smtplib.SMTPException, OSError) as e:
            logger.error(f"Error sending email: {e}")
            raise EmailDeliveryError(str(e)) from e

        return message_id
