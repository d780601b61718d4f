"""
Notification Composer - Renders the email announcing a new contact submission.

Text body:
    Name: <name>
    Email: <email>

    <message>

HTML body escapes every user-supplied field and turns message newlines into <br/>.
"""

from html import escape

from contact_api.domain.entities.contact_submission import ContactSubmission
from contact_api.domain.entities.notification_email import NotificationEmail

SUBJECT_PREFIX = "New contact from "


def _subject_for(name: str) -> str:
    # Header values must stay on one line
    return SUBJECT_PREFIX + " ".join(name.splitlines())


def render_text_body(submission: ContactSubmission) -> str:
    return f"Name: {submission.name}\nEmail: {submission.email}\n\n{submission.message}"


def render_html_body(submission: ContactSubmission) -> str:
    message_html = escape(submission.message).replace("\r\n", "\n").replace("\n", "<br/>")
    return (
        f"<p><strong>Name:</strong> {escape(submission.name)}</p>\n"
        f"<p><strong>Email:</strong> {escape(str(submission.email))}</p>\n"
        f"<p><strong>Message:</strong><br/>{message_html}</p>"
    )


def compose_notification(
    submission: ContactSubmission, sender: str, recipient: str
) -> NotificationEmail:
    """
    Build the notification for a validated submission.

    Args:
        submission: Validated contact submission
        sender: Service sending identity (From)
        recipient: Configured notification recipient (To)

    Returns:
        NotificationEmail with Reply-To pointing at the submitter
    """
    return NotificationEmail(
        sender=sender,
        reply_to=str(submission.email),
        to=recipient,
        subject=_subject_for(submission.name),
        text_body=render_text_body(submission),
        html_body=render_html_body(submission),
    )
