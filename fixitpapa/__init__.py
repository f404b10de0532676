import os
from collections import OrderedDict
from datetime import datetime, date

import aiohttp_jinja2
import jinja2
from aiohttp import web

from fixitpapa.content import get_site_settings
from fixitpapa.data.data_layer import PostgresDataLayer
from fixitpapa.data.portal_mock import MockPortalRepository
from fixitpapa.helpers import format_currency
from fixitpapa.icons import icon_class
from fixitpapa.logger import logger

PACKAGE_PATH = os.path.dirname(__file__)
TEMPLATE_PATH = os.path.join(PACKAGE_PATH, "templates")
STATIC_PATH = os.path.join(PACKAGE_PATH, "static")

NAVIGATION = [
    ("/", "Home"),
    ("/services", "Services"),
    ("/quote", "Get a Quote"),
    ("/about", "About"),
    ("/contact", "Contact"),
]


def date_format(value, fmt="%B %d, %Y"):
    if not value:
        return ""
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return value
    if isinstance(value, (datetime, date)):
        return value.strftime(fmt)
    return str(value)


async def site_context_processor(request):
    """Settings every page needs for its header, footer, meta tags and theme"""
    settings = await get_site_settings(request.app.data_layer)
    return {
        "branding": settings["branding"],
        "seo": settings["seo"],
        "theme": settings["theme"],
        "contact": settings["contact"],
        "navigation": NAVIGATION,
        "current_path": request.path,
        "current_year": datetime.now().year,
    }


@web.middleware
async def not_found_middleware(request, handler):
    try:
        return await handler(request)
    except web.HTTPNotFound:
        if request.path.startswith("/api/"):
            return web.json_response({"error": "Not found"}, status=404)
        response = aiohttp_jinja2.render_template("not_found.htm", request, context={})
        response.set_status(404)
        return response


def add_routes(app):
    from .routes import (
        get_index, get_about, get_services, get_service_detail, get_contact, post_contact,
        get_privacy, get_terms, get_quote, post_quote, post_contact_api, post_quote_api,
        post_analytics_api, post_quote_estimate_api
    )
    from .auth import get_admin_login, post_admin_login, post_magic_link, get_auth_callback, get_logout
    from .portal_routes import (
        get_portal_login, post_portal_login, get_portal_dashboard, get_portal_history,
        get_portal_payments, get_portal_profile
    )
    from .admin_routes import (
        get_dashboard, get_services_admin, get_service_form, post_service_form, post_service_toggle,
        get_service_delete, post_service_delete, get_testimonials_admin, get_testimonial_form,
        post_testimonial_form, post_testimonial_toggle, post_testimonial_feature, get_testimonial_delete,
        post_testimonial_delete, get_quotes_admin, post_quote_status, post_quote_notes, post_quote_delete,
        get_contacts_admin, post_contact_status, post_contact_notes, post_contact_delete,
        get_content_admin, post_content_admin, get_settings_admin, post_settings_admin,
        get_legal_admin, post_legal_admin, get_analytics_admin
    )

    app.router.add_get('/', get_index)
    app.router.add_get('/about', get_about)
    app.router.add_get('/services', get_services)
    app.router.add_get('/services/{slug}', get_service_detail)
    app.router.add_get('/contact', get_contact)
    app.router.add_post('/contact', post_contact)
    app.router.add_get('/quote', get_quote)
    app.router.add_post('/quote', post_quote)
    app.router.add_get('/privacy', get_privacy)
    app.router.add_get('/terms', get_terms)

    app.router.add_post('/api/contact', post_contact_api)
    app.router.add_post('/api/quote', post_quote_api)
    app.router.add_post('/api/quote/estimate', post_quote_estimate_api)
    app.router.add_post('/api/analytics', post_analytics_api)
    app.router.add_get('/api/auth/callback', get_auth_callback)

    app.router.add_get('/portal/login', get_portal_login)
    app.router.add_post('/portal/login', post_portal_login)
    app.router.add_get('/portal', get_portal_dashboard)
    app.router.add_get('/portal/history', get_portal_history)
    app.router.add_get('/portal/payments', get_portal_payments)
    app.router.add_get('/portal/profile', get_portal_profile)

    app.router.add_get('/admin/login', get_admin_login)
    app.router.add_post('/admin/login', post_admin_login)
    app.router.add_post('/admin/login/magic', post_magic_link)
    app.router.add_get('/admin/logout', get_logout)
    app.router.add_get('/admin', get_dashboard)

    app.router.add_get('/admin/services', get_services_admin)
    app.router.add_get('/admin/services/new', get_service_form)
    app.router.add_post('/admin/services/new', post_service_form)
    app.router.add_get('/admin/services/{id}', get_service_form)
    app.router.add_post('/admin/services/{id}', post_service_form)
    app.router.add_post('/admin/services/{id}/toggle', post_service_toggle)
    app.router.add_get('/admin/services/{id}/delete', get_service_delete)
    app.router.add_post('/admin/services/{id}/delete', post_service_delete)

    app.router.add_get('/admin/testimonials', get_testimonials_admin)
    app.router.add_get('/admin/testimonials/new', get_testimonial_form)
    app.router.add_post('/admin/testimonials/new', post_testimonial_form)
    app.router.add_get('/admin/testimonials/{id}', get_testimonial_form)
    app.router.add_post('/admin/testimonials/{id}', post_testimonial_form)
    app.router.add_post('/admin/testimonials/{id}/toggle', post_testimonial_toggle)
    app.router.add_post('/admin/testimonials/{id}/feature', post_testimonial_feature)
    app.router.add_get('/admin/testimonials/{id}/delete', get_testimonial_delete)
    app.router.add_post('/admin/testimonials/{id}/delete', post_testimonial_delete)

    app.router.add_get('/admin/quotes', get_quotes_admin)
    app.router.add_post('/admin/quotes/{id}/status', post_quote_status)
    app.router.add_post('/admin/quotes/{id}/notes', post_quote_notes)
    app.router.add_post('/admin/quotes/{id}/delete', post_quote_delete)

    app.router.add_get('/admin/contacts', get_contacts_admin)
    app.router.add_post('/admin/contacts/{id}/status', post_contact_status)
    app.router.add_post('/admin/contacts/{id}/notes', post_contact_notes)
    app.router.add_post('/admin/contacts/{id}/delete', post_contact_delete)

    app.router.add_get('/admin/content', get_content_admin)
    app.router.add_post('/admin/content', post_content_admin)
    for section in ("settings", "branding", "seo", "theme"):
        app.router.add_get(f'/admin/{section}', get_settings_admin)
        app.router.add_post(f'/admin/{section}', post_settings_admin)
    app.router.add_get('/admin/legal', get_legal_admin)
    app.router.add_post('/admin/legal', post_legal_admin)
    app.router.add_get('/admin/analytics', get_analytics_admin)


def create_app(data_layer=None, portal_repository=None):
    app = web.Application(middlewares=[not_found_middleware])
    app.data_layer = data_layer or PostgresDataLayer()
    app.portal_repository = portal_repository or MockPortalRepository()
    app.logger = logger
    app.submitted_quotes = OrderedDict()

    env = aiohttp_jinja2.setup(
        app,
        loader=jinja2.FileSystemLoader(TEMPLATE_PATH),
        context_processors=[aiohttp_jinja2.request_processor, site_context_processor],
        autoescape=jinja2.select_autoescape(["htm", "html"]),
    )
    env.filters["currency"] = format_currency
    env.filters["icon_class"] = icon_class
    env.filters["date_format"] = date_format

    app.add_routes([web.static('/static', STATIC_PATH)])
    add_routes(app)
    return app
