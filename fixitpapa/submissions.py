"""
Public submission services shared by the JSON endpoints and the HTML forms.

Each function validates its payload, then either stores a row or, when the
data layer is unconfigured, logs the submission and reports success without
an id. Validation problems raise SubmissionValidationError, store failures
raise SubmissionError; callers map them to 400 and 500.
"""
import asyncio
from decimal import Decimal, InvalidOperation
from enum import Enum

from fixitpapa import mail
from fixitpapa.logger import logger


class QuoteStatus(Enum):
    NEW = "new"
    CONTACTED = "contacted"
    SCHEDULED = "scheduled"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class ContactStatus(Enum):
    NEW = "new"
    READ = "read"
    REPLIED = "replied"
    ARCHIVED = "archived"


class SubmissionValidationError(ValueError):
    pass


class SubmissionError(Exception):
    pass


def parse_status(status_enum, value):
    try:
        return status_enum(value)
    except ValueError:
        raise SubmissionValidationError(f"Invalid status '{value}'")


def _text(payload, key):
    value = payload.get(key)
    if value is None:
        return ""
    return str(value).strip()


def _optional(payload, key):
    return _text(payload, key) or None


def _price(value):
    if value is None or value == "" or isinstance(value, bool):
        return None
    try:
        return Decimal(str(value))
    except InvalidOperation:
        return None


def _require_mapping(payload):
    if not isinstance(payload, dict):
        raise SubmissionValidationError("Invalid request body")


async def submit_contact(data_layer, payload):
    _require_mapping(payload)
    name, email, message = _text(payload, "name"), _text(payload, "email"), _text(payload, "message")
    if not name or not email or not message:
        raise SubmissionValidationError("Name, email, and message are required")

    record = {
        "name": name,
        "email": email,
        "phone": _optional(payload, "phone"),
        "service": _optional(payload, "service"),
        "message": message,
        "status": ContactStatus.NEW.value,
    }

    if not data_layer.configured:
        logger.info(f"Contact submission (store not configured): {name} <{email}>")
        return {"success": True, "message": "Message received"}

    try:
        submission_id = await data_layer.create_contact_submission(record)
    except Exception as e:
        logger.error(f"Error inserting contact submission: {e}")
        raise SubmissionError("Failed to submit message") from e

    logger.info(f"Contact submission {submission_id} stored for {email}")
    return {"success": True, "message": "Message submitted successfully", "id": submission_id}


async def submit_quote(data_layer, payload):
    _require_mapping(payload)
    contact_name, contact_email = _text(payload, "contactName"), _text(payload, "contactEmail")
    if not contact_name or not contact_email:
        raise SubmissionValidationError("Name and email are required")

    answers = payload.get("answers")
    record = {
        "service_id": _optional(payload, "serviceId"),
        "service_name": _optional(payload, "serviceName"),
        "answers": answers if isinstance(answers, dict) else {},
        "estimated_price": _price(payload.get("estimatedPrice")),
        "contact_name": contact_name,
        "contact_email": contact_email,
        "contact_phone": _optional(payload, "contactPhone"),
        "contact_address": _optional(payload, "contactAddress"),
        "preferred_date": _optional(payload, "preferredDate"),
        "notes": _optional(payload, "notes"),
        "status": QuoteStatus.NEW.value,
    }

    if not data_layer.configured:
        logger.info(f"Quote submission (store not configured): {record['service_name']} for {contact_email}")
        return {"success": True, "message": "Quote request received"}

    try:
        submission_id = await data_layer.create_quote_submission(record)
    except Exception as e:
        logger.error(f"Error inserting quote submission: {e}")
        raise SubmissionError("Failed to submit quote request") from e

    logger.info(f"Quote submission {submission_id} stored for {contact_email}")
    loop = asyncio.get_running_loop()
    await loop.run_in_executor(None, mail.send_quote_notification, dict(record, id=submission_id))

    return {"success": True, "message": "Quote request submitted successfully", "id": submission_id}


async def record_analytics_event(data_layer, payload, user_agent=None, ip_address=None):
    """Store one analytics event. Only a missing event type is reported; everything else is swallowed."""
    _require_mapping(payload)
    event_type = _text(payload, "eventType")
    if not event_type:
        raise SubmissionValidationError("Event type is required")

    if not data_layer.configured:
        return {"success": True}

    metadata = payload.get("metadata")
    try:
        await data_layer.create_analytics_event({
            "event_type": event_type,
            "page_path": _optional(payload, "pagePath"),
            "service_id": _optional(payload, "serviceId"),
            "metadata": metadata if isinstance(metadata, dict) else {},
            "session_id": _optional(payload, "sessionId"),
            "user_agent": user_agent,
            "ip_address": ip_address,
        })
    except Exception as e:
        logger.error(f"Analytics error: {e}")

    return {"success": True}
