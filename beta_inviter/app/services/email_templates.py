"""
Fixed email templates.

Each template renders a plain-text and an HTML body. The greeting name and the
invite code appear exactly once in each body.
"""

from html import escape
from typing import Optional

from beta_inviter.app.services.email_sender import EmailMessage

INVITATION_SUBJECT = "Your Helium Beta Invitation"
REMINDER_SUBJECT = "Reminder – Your Helium invite code is expiring soon!"
TEST_SUBJECT = "Helium Inviter - Test Email"

_SIGNATURE_TEXT = """Cheers,
Team Helium
https://he2.ai"""

_SIGNATURE_HTML = """
      <p>Cheers,<br>Team Helium</p>
      <p><a href="https://he2.ai" style="color: #333; text-decoration: none;">www.he2.ai</a></p>
      <div style="margin-top: 30px; font-size: 12px; color: #666;">
        Helium AI by Neural Arc Inc. <a href="https://neuralarc.ai" style="color: #666; text-decoration: none;">https://neuralarc.ai</a>
      </div>"""


def greeting_name(first_name: str, last_name: Optional[str] = None) -> str:
    first_name = first_name.strip()
    if last_name and last_name.strip():
        return f"{first_name} {last_name.strip()}"
    return first_name


def _wrap_html(inner: str) -> str:
    return f"""
<div style="background-color: #CDCDCD; padding: 40px; font-family: Arial, sans-serif; line-height: 1.6; color: #333;">
  <div style="max-width: 600px; margin: 0 auto;">{inner}{_SIGNATURE_HTML}
  </div>
</div>"""


def _code_block_html(invite_code: str) -> str:
    return (
        '<div style="background-color: #fff; padding: 20px; margin: 20px 0; '
        'border-radius: 4px; text-align: center; font-size: 18px; font-weight: bold; '
        f'letter-spacing: 2px; color: #333;">{escape(invite_code)}</div>'
    )


def render_invitation(to: str, invite_code: str, name: str) -> EmailMessage:
    text = f"""Dear {name},

Congratulations! You have been selected to join Helium, the OS for your business, in our first-ever Public Beta experience for businesses.

Your account has been credited with 1500 free Helium credits to explore and experience the power of Helium. Use the invite code below to activate your invite and get started:

{invite_code}

Helium is designed to be the operating system for business intelligence, giving you a single, seamless layer to connect data, decisions, and workflows. As this is our first public beta, you may notice minor bugs or quirks. If you do, your feedback will help us make Helium even better.

You are not just testing a product. You are helping shape the future of business intelligence.

Welcome to Helium OS. The future of work is here.

{_SIGNATURE_TEXT}"""

    html = _wrap_html(f"""
    <p>Dear {escape(name)},</p>
    <p><strong>Congratulations!</strong> You have been selected to join <strong>Helium</strong>, the <strong>OS</strong> for your business, in our first-ever Public Beta experience for businesses.</p>
    <p>Your account has been credited with <strong>1500 free Helium credits</strong> to explore and experience the power of Helium. Use the invite code below to activate your invite and get started:</p>
    {_code_block_html(invite_code)}
    <p>Helium is designed to be the operating system for business intelligence, giving you a single, seamless layer to connect data, decisions, and workflows. As this is our first public beta, you may notice minor bugs or quirks. If you do, your feedback will help us make Helium even better.</p>
    <p>You are not just testing a product. You are helping shape the future of business intelligence.</p>
    <p>Welcome to <strong>Helium OS</strong>. The future of work is here.</p>""")

    return EmailMessage(to=to, subject=INVITATION_SUBJECT, text=text, html=html)


def render_reminder(to: str, invite_code: str, name: str) -> EmailMessage:
    text = f"""Dear {name},

Just a quick reminder: your exclusive Helium invite code is about to expire.

{invite_code}

We'd hate for you to miss out on your 1500 free Helium credits and a special 30% discount available only during this early access period.

Welcome (again) to Helium OS. The future of work is here, make sure you're part of it.

{_SIGNATURE_TEXT}"""

    html = _wrap_html(f"""
    <p>Dear {escape(name)},</p>
    <p>Just a quick reminder: your exclusive Helium invite code is about to expire.</p>
    {_code_block_html(invite_code)}
    <p>We'd hate for you to miss out on your <strong>1500 free Helium credits</strong> and a special 30% discount available only during this early access period.</p>
    <p>Welcome (again) to <strong>Helium OS</strong>. The future of work is here, make sure you're part of it.</p>""")

    return EmailMessage(to=to, subject=REMINDER_SUBJECT, text=text, html=html)


def render_test(to: str) -> EmailMessage:
    body = (
        "This is a test email from Helium Inviter. If you receive this, "
        "your email configuration is working correctly!"
    )
    return EmailMessage(to=to, subject=TEST_SUBJECT, text=body, html=f"<p>{body}</p>")
