"""
Read paths for the public pages.

Every function here answers from the data layer when it is configured and
has rows, and from the static tables in default_config otherwise. Store
errors are logged and never reach the page.
"""
import asyncio
import copy

import pypandoc

from fixitpapa.data.default_config import (
    DEFAULT_SERVICES, DEFAULT_TESTIMONIALS, DEFAULT_PAGE_CONTENT, DEFAULT_LEGAL_PAGES
)
from fixitpapa.logger import logger
from fixitpapa.settings import SETTINGS_CATEGORIES


def _normalize_service(row):
    service = dict(row)
    service["icon"] = service.get("icon") or "Zap"
    service["starting_price"] = service.get("starting_price") or 0
    for key in ("features", "process", "faq", "related_services"):
        if not isinstance(service.get(key), list):
            service[key] = []
    for key in ("short_description", "full_description", "image", "duration"):
        service[key] = service.get(key) or ""
    return service


def _normalize_testimonial(row):
    testimonial = dict(row)
    testimonial["location"] = testimonial.get("location") or ""
    testimonial["rating"] = testimonial.get("rating") or 5
    testimonial["service"] = testimonial.get("service") or ""
    return testimonial


def _static_services():
    return [_normalize_service(s) for s in DEFAULT_SERVICES if s.get("is_active", True)]


def _static_testimonials():
    return [_normalize_testimonial(t) for t in DEFAULT_TESTIMONIALS]


async def get_services(data_layer):
    """Active services ordered by sort order"""
    if not data_layer.configured:
        return _static_services()

    try:
        rows = await data_layer.get_services(active_only=True)
    except Exception as e:
        logger.error(f"Error fetching services: {e}")
        return _static_services()

    if not rows:
        logger.info("No services in database, using static data")
        return _static_services()
    return [_normalize_service(row) for row in rows]


async def get_service_by_slug(data_layer, slug):
    for service in await get_services(data_layer):
        if service["slug"] == slug:
            return service
    return None


async def get_related_services(data_layer, service):
    related = set(service.get("related_services") or [])
    return [
        s for s in await get_services(data_layer)
        if s["slug"] in related or str(s.get("id")) in related
    ]


async def get_testimonials(data_layer):
    """Active testimonials, newest first"""
    if not data_layer.configured:
        return _static_testimonials()

    try:
        rows = await data_layer.get_testimonials(active_only=True)
    except Exception as e:
        logger.error(f"Error fetching testimonials: {e}")
        return _static_testimonials()

    if not rows:
        return _static_testimonials()
    return [_normalize_testimonial(row) for row in rows]


async def get_featured_testimonials(data_layer, count=3):
    if data_layer.configured:
        try:
            rows = await data_layer.get_testimonials(active_only=True, featured_only=True, limit=count)
            if rows:
                return [_normalize_testimonial(row) for row in rows]
        except Exception as e:
            logger.error(f"Error fetching featured testimonials: {e}")

    # No featured testimonials, show the most recent ones
    return (await get_testimonials(data_layer))[:count]


async def get_testimonials_for_service(data_layer, service_name):
    needle = (service_name or "").lower()
    return [t for t in await get_testimonials(data_layer) if needle in t["service"].lower()]


async def get_settings(data_layer, category):
    settings_cls = SETTINGS_CATEGORIES[category]
    if not data_layer.configured:
        return settings_cls()

    try:
        rows = await data_layer.get_settings(category)
    except Exception as e:
        logger.error(f"Error fetching {category} settings: {e}")
        return settings_cls()
    return settings_cls.from_rows(rows or {})


async def get_site_settings(data_layer):
    """All settings categories keyed by category name"""
    return {category: await get_settings(data_layer, category) for category in SETTINGS_CATEGORIES}


async def get_page_content(data_layer):
    """Default page content with any stored blobs merged over it key by key"""
    content = copy.deepcopy(DEFAULT_PAGE_CONTENT)
    if not data_layer.configured:
        return content

    try:
        stored = await data_layer.get_page_content()
    except Exception as e:
        logger.error(f"Error fetching page content: {e}")
        return content

    for page_key, blob in (stored or {}).items():
        if page_key in content and isinstance(blob, dict):
            content[page_key].update(blob)
    return content


def render_markdown(text):
    return pypandoc.convert_text(text or "", 'html', format='md')


async def get_legal_page(data_layer, page_key):
    """Legal page with its Markdown rendered to HTML; None for unknown keys"""
    if page_key not in DEFAULT_LEGAL_PAGES:
        return None

    page = None
    if data_layer.configured:
        try:
            page = await data_layer.get_legal_page(page_key)
        except Exception as e:
            logger.error(f"Error fetching legal page {page_key}: {e}")

    if page:
        page = dict(page)
    else:
        page = dict(DEFAULT_LEGAL_PAGES[page_key], page_key=page_key, last_updated=None)

    page["html"] = await asyncio.get_running_loop().run_in_executor(None, render_markdown, page["content"])
    return page
