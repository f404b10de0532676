import email.utils
import os
import smtplib

import jinja2
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

from fixitpapa.helpers import format_currency
from fixitpapa.logger import logger


SMTP_HOST = os.environ.get("SMTP_HOST", "smtp.gmail.com")
SMTP_PORT = int(os.environ.get("SMTP_PORT", 587))
SMTP_USERNAME = os.environ.get("SMTP_USERNAME", "")
SMTP_PASSWORD = os.environ.get("SMTP_PASSWORD", "")
MAIL_FROM = os.environ.get("MAIL_FROM", "noreply@fixitpapa.com")
ADMIN_NOTIFICATION_EMAIL = os.environ.get("ADMIN_NOTIFICATION_EMAIL", "")
TEMPLATE_PATH = os.path.join(os.path.dirname(__file__), "templates")


def mail_configured():
    return bool(SMTP_USERNAME and SMTP_PASSWORD)


def render_email_template(template_file="email.htm", path=TEMPLATE_PATH, **kwargs):
    templateLoader = jinja2.FileSystemLoader(searchpath=path)
    templateEnv = jinja2.Environment(loader=templateLoader, autoescape=True)
    templateEnv.filters["currency"] = format_currency
    template = templateEnv.get_template(template_file)
    return template.render(**kwargs)


def deliver(recipient, subject, html):
    msg = MIMEMultipart()
    msg.attach(MIMEText(html, 'html'))
    msg['Subject'] = subject
    msg['From'] = email.utils.formataddr(("Fix it, papa!", MAIL_FROM))
    msg['To'] = recipient

    s = smtplib.SMTP(SMTP_HOST, SMTP_PORT)
    try:
        s.ehlo()
        s.starttls()
        s.login(SMTP_USERNAME, SMTP_PASSWORD)
        s.sendmail(MAIL_FROM, [recipient], msg.as_string())
    finally:
        s.quit()


def send_quote_notification(quote):
    """
    Email the admin a summary of a new quote request.

    Best effort: returns False when mail is unconfigured or delivery fails,
    never raises. The submission it describes is already stored.
    """
    if not mail_configured() or not ADMIN_NOTIFICATION_EMAIL:
        logger.warning("Mail is not configured. Skipping quote notification")
        return False

    subject = f"New Quote Request: {quote.get('service_name') or 'General'} - {quote.get('contact_name')}"

    try:
        html = render_email_template("email.htm", quote=quote, answers=quote.get("answers") or {})
        deliver(ADMIN_NOTIFICATION_EMAIL, subject, html)
        logger.info(f"Quote notification sent to {ADMIN_NOTIFICATION_EMAIL}")
        return True
    except Exception as e:
        logger.error(f"Failed to send quote notification. Error: {e}")
        return False


def send_magic_link(recipient, link):
    if not mail_configured():
        logger.warning(f"Mail is not configured. Sign-in link for {recipient}: {link}")
        return False

    html = render_email_template("magic_link_email.htm", link=link)
    try:
        deliver(recipient, "Your Fix it, papa! admin sign-in link", html)
        logger.info(f"Sign-in link sent to {recipient}")
        return True
    except Exception as e:
        logger.error(f"Failed to send sign-in link. Error: {e}")
        return False
