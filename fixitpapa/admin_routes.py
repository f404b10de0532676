"""
Back office pages. Every handler here is wrapped in admin_required, so it only
runs for an allow-listed session and receives the resolved AuthContext.

Successful mutations leave a flash event on the session and redirect to the
list page; failed ones re-render the form with the submitted values and the
raw error message.
"""
from datetime import datetime, timezone, timedelta, date
from decimal import Decimal, InvalidOperation

import aiohttp_jinja2
from aiohttp import web

from fixitpapa import content
from fixitpapa.analytics import summarize, PAGE_VIEW
from fixitpapa.auth import admin_required
from fixitpapa.content_form import (
    build_form_fields, parse_form, parse_lines, parse_records, format_records, ContentFormError
)
from fixitpapa.data.default_config import EDITABLE_PAGE_KEYS, DEFAULT_LEGAL_PAGES
from fixitpapa.helpers import slugify, is_valid_slug, parse_int
from fixitpapa.icons import get_available_icons, resolve_icon
from fixitpapa.settings import SETTINGS_CATEGORIES, SettingsValidationError
from fixitpapa.submissions import QuoteStatus, ContactStatus, parse_status, SubmissionValidationError


ADMIN_NAVIGATION = [
    ("/admin", "Dashboard"),
    ("/admin/services", "Services"),
    ("/admin/testimonials", "Testimonials"),
    ("/admin/quotes", "Quotes"),
    ("/admin/contacts", "Messages"),
    ("/admin/content", "Page Content"),
    ("/admin/settings", "Contact Settings"),
    ("/admin/branding", "Branding"),
    ("/admin/seo", "SEO"),
    ("/admin/theme", "Theme"),
    ("/admin/legal", "Legal Pages"),
    ("/admin/analytics", "Analytics"),
]

SETTINGS_SECTIONS = {
    "settings": ("contact", "Contact Settings"),
    "branding": ("branding", "Branding"),
    "seo": ("seo", "SEO"),
    "theme": ("theme", "Theme"),
}

PROCESS_COLUMNS = ["title", "description"]
FAQ_COLUMNS = ["question", "answer"]


class AdminFormError(ValueError):
    pass


async def _render(request, auth, template, **context):
    event, event_type = await request.app.data_layer.get_event(auth.cookie)
    context.update(auth=auth, event=event, event_type=event_type, admin_navigation=ADMIN_NAVIGATION)
    return aiohttp_jinja2.render_template(template, request, context=context)


async def _flash_redirect(request, auth, location, message, event_type="success"):
    await request.app.data_layer.create_event(auth.cookie, message, event_type)
    raise web.HTTPFound(location)


def _row_id(request):
    row_id = parse_int(request.match_info.get("id"))
    if row_id is None:
        raise web.HTTPNotFound()
    return row_id


def _checked(form, name):
    return form.get(name) in ("on", "true", "1", "yes")


@admin_required
async def get_dashboard(request, auth):
    data_layer = request.app.data_layer
    since = datetime.now(timezone.utc) - timedelta(hours=24)

    services = await data_layer.get_services(active_only=False)
    testimonials = await data_layer.get_testimonials(active_only=False)
    quotes = await data_layer.get_quote_submissions()
    contacts = await data_layer.get_contact_submissions()
    page_views = await data_layer.get_analytics_events(since=since, event_type=PAGE_VIEW)

    stats = {
        "active_services": len([s for s in services if s.get("is_active")]),
        "testimonials": len(testimonials),
        "new_quotes": len([q for q in quotes if q.get("status") == QuoteStatus.NEW.value]),
        "new_contacts": len([c for c in contacts if c.get("status") == ContactStatus.NEW.value]),
        "page_views_24h": len(page_views),
    }
    return await _render(
        request, auth, "admin/dashboard.htm",
        stats=stats, recent_quotes=quotes[:5], recent_contacts=contacts[:5]
    )


# Services
def _service_form_values(service=None):
    service = service or {}
    return {
        "name": service.get("name", ""),
        "slug": service.get("slug", ""),
        "short_description": service.get("short_description") or "",
        "full_description": service.get("full_description") or "",
        "icon": service.get("icon") or "Zap",
        "image": service.get("image") or "",
        "starting_price": "" if service.get("starting_price") is None else str(service.get("starting_price")),
        "price_note": service.get("price_note") or "",
        "duration": service.get("duration") or "",
        "features": "\n".join(service.get("features") or []),
        "process": format_records(service.get("process"), PROCESS_COLUMNS),
        "faq": format_records(service.get("faq"), FAQ_COLUMNS),
        "related_services": ", ".join(service.get("related_services") or []),
        "sort_order": str(service.get("sort_order") or 0),
        "is_active": service.get("is_active", True),
    }


def parse_service_form(form):
    """Build a service record from the admin form"""
    name = (form.get("name") or "").strip()
    if not name:
        raise AdminFormError("Name is required")

    slug = (form.get("slug") or "").strip() or slugify(name)
    if not is_valid_slug(slug):
        raise AdminFormError("Slug may only contain lowercase letters, numbers and single hyphens")

    raw_price = (form.get("starting_price") or "").strip()
    try:
        starting_price = Decimal(raw_price) if raw_price else Decimal(0)
    except InvalidOperation:
        raise AdminFormError("Starting price must be a number")

    try:
        process = parse_records(form.get("process") or "", PROCESS_COLUMNS, "Process")
        faq = parse_records(form.get("faq") or "", FAQ_COLUMNS, "FAQ")
    except ContentFormError as e:
        raise AdminFormError(str(e))

    return {
        "name": name,
        "slug": slug,
        "short_description": (form.get("short_description") or "").strip(),
        "full_description": (form.get("full_description") or "").strip(),
        "icon": resolve_icon(form.get("icon")).value,
        "image": (form.get("image") or "").strip(),
        "starting_price": starting_price,
        "price_note": (form.get("price_note") or "").strip(),
        "duration": (form.get("duration") or "").strip(),
        "features": parse_lines(form.get("features") or ""),
        # Steps are renumbered in the order they were entered
        "process": [dict(step=number, **step) for number, step in enumerate(process, start=1)],
        "faq": faq,
        "related_services": [s.strip() for s in (form.get("related_services") or "").split(",") if s.strip()],
        "sort_order": parse_int(form.get("sort_order"), 0),
        "is_active": _checked(form, "is_active"),
    }


@admin_required
async def get_services_admin(request, auth):
    services = await request.app.data_layer.get_services(active_only=False)
    return await _render(request, auth, "admin/services.htm", services=services)


@admin_required
async def get_service_form(request, auth):
    service = None
    if "id" in request.match_info:
        service = await request.app.data_layer.get_service(_row_id(request))
        if not service:
            raise web.HTTPNotFound()

    return await _render(
        request, auth, "admin/service_form.htm",
        service=service, values=_service_form_values(service), icons=get_available_icons(), error=None
    )


@admin_required
async def post_service_form(request, auth):
    data_layer = request.app.data_layer
    form = await request.post()
    service_id = _row_id(request) if "id" in request.match_info else None

    try:
        record = parse_service_form(form)
        if service_id is None:
            await data_layer.create_service(record)
        elif not await data_layer.update_service(service_id, record):
            raise web.HTTPNotFound()
    except web.HTTPException:
        raise
    except Exception as e:
        request.app.logger.error(f"Error saving service: {e}")
        values = dict(_service_form_values(), **{k: v for k, v in form.items()})
        values["is_active"] = _checked(form, "is_active")
        return await _render(
            request, auth, "admin/service_form.htm",
            service={"id": service_id} if service_id else None,
            values=values, icons=get_available_icons(), error=str(e)
        )

    request.app.logger.info(f"Service '{record['name']}' saved")
    await _flash_redirect(request, auth, "/admin/services", f"Service '{record['name']}' saved")


@admin_required
async def post_service_toggle(request, auth):
    data_layer = request.app.data_layer
    service = await data_layer.get_service(_row_id(request))
    if not service:
        raise web.HTTPNotFound()

    await data_layer.set_service_active(service["id"], not service.get("is_active"))
    state = "hidden" if service.get("is_active") else "visible"
    await _flash_redirect(request, auth, "/admin/services", f"Service '{service['name']}' is now {state}")


@admin_required
async def get_service_delete(request, auth):
    service = await request.app.data_layer.get_service(_row_id(request))
    if not service:
        raise web.HTTPNotFound()
    return await _render(
        request, auth, "admin/confirm_delete.htm",
        kind="service", label=service["name"],
        action=f"/admin/services/{service['id']}/delete", cancel="/admin/services"
    )


@admin_required
async def post_service_delete(request, auth):
    data_layer = request.app.data_layer
    form = await request.post()
    service = await data_layer.get_service(_row_id(request))
    if not service:
        raise web.HTTPNotFound()
    if form.get("confirm") != "yes":
        raise web.HTTPFound(f"/admin/services/{service['id']}/delete")

    await data_layer.delete_service(service["id"])
    request.app.logger.info(f"Service '{service['name']}' deleted")
    await _flash_redirect(request, auth, "/admin/services", f"Service '{service['name']}' deleted")


# Testimonials
def _testimonial_form_values(testimonial=None):
    testimonial = testimonial or {}
    return {
        "name": testimonial.get("name", ""),
        "location": testimonial.get("location") or "",
        "rating": str(testimonial.get("rating") or 5),
        "text": testimonial.get("text", ""),
        "service": testimonial.get("service") or "",
        "date": str(testimonial.get("date") or date.today().isoformat()),
        "image": testimonial.get("image") or "",
        "is_featured": testimonial.get("is_featured", False),
        "is_active": testimonial.get("is_active", True),
    }


def parse_testimonial_form(form):
    name = (form.get("name") or "").strip()
    text = (form.get("text") or "").strip()
    if not name or not text:
        raise AdminFormError("Name and testimonial text are required")

    rating = parse_int(form.get("rating"))
    if rating is None or not 1 <= rating <= 5:
        raise AdminFormError("Rating must be a whole number from 1 to 5")

    raw_date = (form.get("date") or "").strip()
    try:
        testimonial_date = date.fromisoformat(raw_date) if raw_date else date.today()
    except ValueError:
        raise AdminFormError("Date must be in YYYY-MM-DD format")

    return {
        "name": name,
        "location": (form.get("location") or "").strip() or None,
        "rating": rating,
        "text": text,
        "service": (form.get("service") or "").strip() or None,
        "date": testimonial_date,
        "image": (form.get("image") or "").strip() or None,
        "is_featured": _checked(form, "is_featured"),
        "is_active": _checked(form, "is_active"),
    }


@admin_required
async def get_testimonials_admin(request, auth):
    testimonials = await request.app.data_layer.get_testimonials(active_only=False)
    return await _render(request, auth, "admin/testimonials.htm", testimonials=testimonials)


@admin_required
async def get_testimonial_form(request, auth):
    data_layer = request.app.data_layer
    testimonial = None
    if "id" in request.match_info:
        testimonial = await data_layer.get_testimonial(_row_id(request))
        if not testimonial:
            raise web.HTTPNotFound()

    return await _render(
        request, auth, "admin/testimonial_form.htm",
        testimonial=testimonial, values=_testimonial_form_values(testimonial),
        services=await data_layer.get_services(active_only=False), error=None
    )


@admin_required
async def post_testimonial_form(request, auth):
    data_layer = request.app.data_layer
    form = await request.post()
    testimonial_id = _row_id(request) if "id" in request.match_info else None

    try:
        record = parse_testimonial_form(form)
        if testimonial_id is None:
            await data_layer.create_testimonial(record)
        elif not await data_layer.update_testimonial(testimonial_id, record):
            raise web.HTTPNotFound()
    except web.HTTPException:
        raise
    except Exception as e:
        request.app.logger.error(f"Error saving testimonial: {e}")
        values = dict(_testimonial_form_values(), **{k: v for k, v in form.items()})
        values["is_featured"] = _checked(form, "is_featured")
        values["is_active"] = _checked(form, "is_active")
        return await _render(
            request, auth, "admin/testimonial_form.htm",
            testimonial={"id": testimonial_id} if testimonial_id else None, values=values,
            services=await data_layer.get_services(active_only=False), error=str(e)
        )

    await _flash_redirect(request, auth, "/admin/testimonials", f"Testimonial from {record['name']} saved")


async def _flip_testimonial_flag(request, auth, flag, on_label, off_label):
    data_layer = request.app.data_layer
    testimonial = await data_layer.get_testimonial(_row_id(request))
    if not testimonial:
        raise web.HTTPNotFound()

    value = not testimonial.get(flag)
    await data_layer.set_testimonial_flag(testimonial["id"], flag, value)
    await _flash_redirect(
        request, auth, "/admin/testimonials",
        f"Testimonial from {testimonial['name']} is now {on_label if value else off_label}"
    )


@admin_required
async def post_testimonial_toggle(request, auth):
    await _flip_testimonial_flag(request, auth, "is_active", "visible", "hidden")


@admin_required
async def post_testimonial_feature(request, auth):
    await _flip_testimonial_flag(request, auth, "is_featured", "featured", "not featured")


@admin_required
async def get_testimonial_delete(request, auth):
    testimonial = await request.app.data_layer.get_testimonial(_row_id(request))
    if not testimonial:
        raise web.HTTPNotFound()
    return await _render(
        request, auth, "admin/confirm_delete.htm",
        kind="testimonial", label=f"the testimonial from {testimonial['name']}",
        action=f"/admin/testimonials/{testimonial['id']}/delete", cancel="/admin/testimonials"
    )


@admin_required
async def post_testimonial_delete(request, auth):
    data_layer = request.app.data_layer
    form = await request.post()
    testimonial = await data_layer.get_testimonial(_row_id(request))
    if not testimonial:
        raise web.HTTPNotFound()
    if form.get("confirm") != "yes":
        raise web.HTTPFound(f"/admin/testimonials/{testimonial['id']}/delete")

    await data_layer.delete_testimonial(testimonial["id"])
    await _flash_redirect(request, auth, "/admin/testimonials", f"Testimonial from {testimonial['name']} deleted")


# Quote and contact submissions
def _status_counts(rows, status_enum):
    return [
        {"status": status.value, "count": len([r for r in rows if r.get("status") == status.value])}
        for status in status_enum
    ]


@admin_required
async def get_quotes_admin(request, auth):
    quotes = await request.app.data_layer.get_quote_submissions()
    return await _render(
        request, auth, "admin/quotes.htm",
        quotes=quotes, status_counts=_status_counts(quotes, QuoteStatus), statuses=[s.value for s in QuoteStatus]
    )


@admin_required
async def get_contacts_admin(request, auth):
    contacts = await request.app.data_layer.get_contact_submissions()
    return await _render(
        request, auth, "admin/contacts.htm",
        contacts=contacts, status_counts=_status_counts(contacts, ContactStatus),
        statuses=[s.value for s in ContactStatus]
    )


async def _update_status(request, auth, status_enum, update, location, kind):
    form = await request.post()
    row_id = _row_id(request)
    try:
        status = parse_status(status_enum, form.get("status"))
    except SubmissionValidationError as e:
        await _flash_redirect(request, auth, location, str(e), "error")

    if not await update(row_id, status=status.value):
        raise web.HTTPNotFound()
    await _flash_redirect(request, auth, location, f"{kind} marked as {status.value}")


async def _update_notes(request, auth, update, location):
    form = await request.post()
    row_id = _row_id(request)
    if not await update(row_id, admin_notes=(form.get("admin_notes") or "").strip()):
        raise web.HTTPNotFound()
    await _flash_redirect(request, auth, location, "Notes saved")


async def _delete_submission(request, auth, delete, location, kind):
    form = await request.post()
    row_id = _row_id(request)
    if form.get("confirm") != "yes":
        raise web.HTTPFound(location)
    if not await delete(row_id):
        raise web.HTTPNotFound()
    await _flash_redirect(request, auth, location, f"{kind} deleted")


@admin_required
async def post_quote_status(request, auth):
    await _update_status(
        request, auth, QuoteStatus, request.app.data_layer.update_quote_submission, "/admin/quotes", "Quote"
    )


@admin_required
async def post_quote_notes(request, auth):
    await _update_notes(request, auth, request.app.data_layer.update_quote_submission, "/admin/quotes")


@admin_required
async def post_quote_delete(request, auth):
    await _delete_submission(request, auth, request.app.data_layer.delete_quote_submission, "/admin/quotes", "Quote")


@admin_required
async def post_contact_status(request, auth):
    await _update_status(
        request, auth, ContactStatus, request.app.data_layer.update_contact_submission, "/admin/contacts", "Message"
    )


@admin_required
async def post_contact_notes(request, auth):
    await _update_notes(request, auth, request.app.data_layer.update_contact_submission, "/admin/contacts")


@admin_required
async def post_contact_delete(request, auth):
    await _delete_submission(
        request, auth, request.app.data_layer.delete_contact_submission, "/admin/contacts", "Message"
    )


# Page content
def _content_page_key(value):
    return value if value in EDITABLE_PAGE_KEYS else EDITABLE_PAGE_KEYS[0]


@admin_required
async def get_content_admin(request, auth):
    page_key = _content_page_key(request.query.get("page"))
    page_content = await content.get_page_content(request.app.data_layer)
    return await _render(
        request, auth, "admin/content.htm",
        page_key=page_key, page_keys=EDITABLE_PAGE_KEYS,
        fields=build_form_fields(page_key, page_content[page_key]), error=None
    )


@admin_required
async def post_content_admin(request, auth):
    data_layer = request.app.data_layer
    form = await request.post()
    page_key = _content_page_key(form.get("page_key"))
    current = (await content.get_page_content(data_layer))[page_key]

    try:
        blob = parse_form(page_key, form, current)
        await data_layer.upsert_page_content(page_key, blob)
    except Exception as e:
        request.app.logger.error(f"Error saving {page_key} content: {e}")
        fields = build_form_fields(page_key, current)
        for field in fields:
            if field["name"] in form:
                field["value"] = form[field["name"]]
        return await _render(
            request, auth, "admin/content.htm",
            page_key=page_key, page_keys=EDITABLE_PAGE_KEYS, fields=fields, error=str(e)
        )

    await _flash_redirect(request, auth, f"/admin/content?page={page_key}", f"{page_key.capitalize()} content saved")


# Settings
def _settings_section(request):
    return request.path.rstrip("/").rsplit("/", 1)[-1]


@admin_required
async def get_settings_admin(request, auth):
    section = _settings_section(request)
    category, title = SETTINGS_SECTIONS[section]
    settings = await content.get_settings(request.app.data_layer, category)
    return await _render(
        request, auth, "admin/settings_form.htm",
        title=title, action=request.path, fields=settings.form_fields(), category=category, error=None
    )


@admin_required
async def post_settings_admin(request, auth):
    section = _settings_section(request)
    category, title = SETTINGS_SECTIONS[section]
    settings_cls = SETTINGS_CATEGORIES[category]
    form = await request.post()

    try:
        settings = settings_cls.from_form(form)
        await request.app.data_layer.upsert_settings(category, settings.to_rows())
    except Exception as e:
        if not isinstance(e, SettingsValidationError):
            request.app.logger.error(f"Error saving {category} settings: {e}")
        fields = settings_cls().form_fields()
        for field in fields:
            if field["name"] in form:
                field["value"] = form[field["name"]]
        return await _render(
            request, auth, "admin/settings_form.htm",
            title=title, action=request.path, fields=fields, category=category, error=str(e)
        )

    request.app.logger.info(f"{title} settings updated")
    await _flash_redirect(request, auth, request.path, f"{title} saved")


# Legal pages
def _legal_page_key(value):
    return value if value in DEFAULT_LEGAL_PAGES else "privacy"


@admin_required
async def get_legal_admin(request, auth):
    page_key = _legal_page_key(request.query.get("page"))
    page = await content.get_legal_page(request.app.data_layer, page_key)
    return await _render(
        request, auth, "admin/legal.htm",
        page_key=page_key, page_keys=list(DEFAULT_LEGAL_PAGES), page=page, error=None
    )


@admin_required
async def post_legal_admin(request, auth):
    form = await request.post()
    page_key = _legal_page_key(form.get("page_key"))
    title = (form.get("title") or "").strip()
    body = form.get("content") or ""

    try:
        if not title:
            raise AdminFormError("Title is required")
        await request.app.data_layer.upsert_legal_page(page_key, title, body)
    except Exception as e:
        return await _render(
            request, auth, "admin/legal.htm",
            page_key=page_key, page_keys=list(DEFAULT_LEGAL_PAGES),
            page={"page_key": page_key, "title": title, "content": body, "last_updated": None}, error=str(e)
        )

    await _flash_redirect(request, auth, f"/admin/legal?page={page_key}", f"{title} saved")


@admin_required
async def get_analytics_admin(request, auth):
    data_layer = request.app.data_layer
    summary = summarize(
        await data_layer.get_analytics_events(),
        await data_layer.get_quote_submissions(),
        await data_layer.get_contact_submissions(),
    )
    return await _render(request, auth, "admin/analytics.htm", summary=summary)
