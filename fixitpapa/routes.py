import json
import aiohttp_jinja2
from urllib.parse import urlencode
from aiohttp import web

from fixitpapa import content
from fixitpapa.auth import with_auth_context
from fixitpapa.data.default_config import TRUST_INDICATORS
from fixitpapa.quote.calculator import calculate_quote
from fixitpapa.quote.configurations import QUOTE_CONFIGURATIONS, get_quote_config
from fixitpapa.quote.wizard import (
    QuoteWizard, WizardError, coerce_answer, CONTACT_FIELDS, STEPS, SELECT_SERVICE, DETAILS, CONTACT_INFO, REVIEW
)
from fixitpapa.submissions import (
    submit_contact, submit_quote, record_analytics_event, SubmissionValidationError, SubmissionError
)


UNEXPECTED_ERROR = "An unexpected error occurred"
STEP_INCOMPLETE_MESSAGES = {
    SELECT_SERVICE: "Please select a service to continue.",
    DETAILS: "Please answer all required questions before continuing.",
    CONTACT_INFO: "Please provide your name, email, and phone number.",
}
QUOTE_RETRY_MESSAGE = "We couldn't submit your quote request. Please try again."
SUBMITTED_QUOTES_KEPT = 1000


def _client_ip(request):
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.remote


@with_auth_context
async def get_index(request, auth):
    data_layer = request.app.data_layer
    page_content = await content.get_page_content(data_layer)

    context = {
        "hero": page_content["hero"],
        "cta": page_content["cta"],
        "services": await content.get_services(data_layer),
        "testimonials": await content.get_featured_testimonials(data_layer, 3),
        "trust_indicators": TRUST_INDICATORS,
    }
    return aiohttp_jinja2.render_template("index.htm", request, context=context)


@with_auth_context
async def get_about(request, auth):
    page_content = await content.get_page_content(request.app.data_layer)
    return aiohttp_jinja2.render_template("about.htm", request, context={"about": page_content["about"]})


@with_auth_context
async def get_services(request, auth):
    data_layer = request.app.data_layer
    page_content = await content.get_page_content(data_layer)
    context = {
        "page": page_content["services_page"],
        "cta": page_content["cta"],
        "services": await content.get_services(data_layer),
    }
    return aiohttp_jinja2.render_template("services.htm", request, context=context)


@with_auth_context
async def get_service_detail(request, auth):
    data_layer = request.app.data_layer
    service = await content.get_service_by_slug(data_layer, request.match_info["slug"])
    if not service:
        raise web.HTTPNotFound()

    context = {
        "service": service,
        "related_services": await content.get_related_services(data_layer, service),
        "testimonials": await content.get_testimonials_for_service(data_layer, service["name"]),
        "has_quote": get_quote_config(service["slug"]) is not None,
    }
    return aiohttp_jinja2.render_template("service_detail.htm", request, context=context)


@with_auth_context
async def get_contact(request, auth):
    context = {
        "services": await content.get_services(request.app.data_layer),
        "sent": request.query.get("sent") == "1",
        "error": request.query.get("error"),
    }
    return aiohttp_jinja2.render_template("contact.htm", request, context=context)


async def post_contact(request):
    """HTML form fallback for the contact page"""
    data = await request.post() or {}
    try:
        await submit_contact(request.app.data_layer, dict(data))
    except SubmissionValidationError as e:
        raise web.HTTPFound(f"/contact?{urlencode({'error': str(e)})}")
    except SubmissionError as e:
        raise web.HTTPFound(f"/contact?{urlencode({'error': str(e)})}")

    raise web.HTTPFound("/contact?sent=1")


async def _legal_page(request, page_key):
    page = await content.get_legal_page(request.app.data_layer, page_key)
    return aiohttp_jinja2.render_template("legal.htm", request, context={"page": page})


@with_auth_context
async def get_privacy(request, auth):
    return await _legal_page(request, "privacy")


@with_auth_context
async def get_terms(request, auth):
    return await _legal_page(request, "terms")


# Quote wizard
def _quote_context(wizard):
    return {
        "wizard": wizard,
        "steps": STEPS,
        "configurations": QUOTE_CONFIGURATIONS,
        "state": json.dumps(wizard.to_dict()),
        "contact_fields": CONTACT_FIELDS,
        "step_select_service": SELECT_SERVICE,
        "step_details": DETAILS,
        "step_contact": CONTACT_INFO,
        "step_review": REVIEW,
    }


def _apply_step_fields(wizard, data):
    """Copy the fields of the current step from the submitted form into the wizard"""
    if wizard.step == SELECT_SERVICE and "service_id" in data:
        wizard.select_service(data.get("service_id", ""))

    elif wizard.step == DETAILS and wizard.config:
        for question in wizard.config.questions:
            name = f"q-{question.id}"
            if question.type == "checkbox":
                # Unchecked boxes are not posted at all
                wizard.set_answer(question.id, data.getall(name, []))
            elif name in data:
                wizard.set_answer(question.id, data.get(name))

    elif wizard.step == CONTACT_INFO:
        wizard.update_contact(**{key: data.get(key) for key in CONTACT_FIELDS if key in data})


async def _submit_wizard(request, wizard):
    submitted = request.app.submitted_quotes
    if wizard.token in submitted:
        request.app.logger.info(f"Quote form {wizard.token} was already submitted")
        wizard.mark_submitted(submitted[wizard.token])
        return

    try:
        result = await submit_quote(request.app.data_layer, wizard.submission_payload())
    except SubmissionValidationError as e:
        wizard.mark_failed(str(e))
        return
    except SubmissionError:
        wizard.mark_failed(QUOTE_RETRY_MESSAGE)
        return
    submitted[wizard.token] = result.get("id")
    while len(submitted) > SUBMITTED_QUOTES_KEPT:
        submitted.popitem(last=False)
    wizard.mark_submitted(result.get("id"))


@with_auth_context
async def get_quote(request, auth):
    wizard = QuoteWizard()
    service_id = request.query.get("service")
    if service_id and get_quote_config(service_id):
        wizard.select_service(service_id)

    return aiohttp_jinja2.render_template("quote.htm", request, context=_quote_context(wizard))


@with_auth_context
async def post_quote(request, auth):
    data = await request.post()
    try:
        state = json.loads(data.get("state") or "{}")
    except ValueError:
        state = {}

    wizard = QuoteWizard.from_dict(state)
    action = data.get("action", "update")

    if action == "reset":
        wizard.reset()
    elif not wizard.submitted:
        try:
            _apply_step_fields(wizard, data)
            if action == "next":
                if not wizard.next():
                    wizard.mark_failed(STEP_INCOMPLETE_MESSAGES.get(wizard.step))
            elif action == "back":
                wizard.back()
            elif action == "submit":
                await _submit_wizard(request, wizard)
        except WizardError as e:
            wizard.mark_failed(str(e))

    return aiohttp_jinja2.render_template("quote.htm", request, context=_quote_context(wizard))


# JSON API
async def _read_json(request):
    try:
        return await request.json()
    except ValueError:
        raise SubmissionValidationError("Invalid request body")


async def post_contact_api(request):
    try:
        result = await submit_contact(request.app.data_layer, await _read_json(request))
    except SubmissionValidationError as e:
        return web.json_response({"error": str(e)}, status=400)
    except SubmissionError as e:
        return web.json_response({"error": str(e)}, status=500)
    except Exception as e:
        request.app.logger.error(f"Error processing contact form: {e}")
        return web.json_response({"error": UNEXPECTED_ERROR}, status=500)

    return web.json_response(result)


async def post_quote_api(request):
    try:
        result = await submit_quote(request.app.data_layer, await _read_json(request))
    except SubmissionValidationError as e:
        return web.json_response({"error": str(e)}, status=400)
    except SubmissionError as e:
        return web.json_response({"error": str(e)}, status=500)
    except Exception as e:
        request.app.logger.error(f"Error processing quote request: {e}")
        return web.json_response({"error": UNEXPECTED_ERROR}, status=500)

    return web.json_response(result)


async def post_analytics_api(request):
    try:
        payload = await _read_json(request)
        await record_analytics_event(
            request.app.data_layer,
            payload,
            user_agent=request.headers.get("User-Agent"),
            ip_address=_client_ip(request),
        )
    except SubmissionValidationError as e:
        return web.json_response({"error": str(e)}, status=400)
    except Exception as e:
        request.app.logger.error(f"Analytics error: {e}")

    return web.json_response({"success": True})


async def post_quote_estimate_api(request):
    try:
        payload = await _read_json(request)
    except SubmissionValidationError as e:
        return web.json_response({"error": str(e)}, status=400)

    payload = payload if isinstance(payload, dict) else {}
    config = get_quote_config(payload.get("serviceId"))
    if not config:
        return web.json_response({"error": "Unknown service"}, status=404)

    raw_answers = payload.get("answers") if isinstance(payload.get("answers"), dict) else {}
    answers = {}
    for question in config.questions:
        value = coerce_answer(question, raw_answers.get(question.id))
        if value is not None:
            answers[question.id] = value

    return web.json_response({"serviceId": config.service_id, "estimatedPrice": calculate_quote(config, answers)})
