"""
Customer portal pages. The portal is a demo over MockPortalRepository; the
login form does not check credentials.
"""
import aiohttp_jinja2
from aiohttp import web


PORTAL_NAVIGATION = [
    ("/portal", "Dashboard"),
    ("/portal/history", "Service History"),
    ("/portal/payments", "Payments"),
    ("/portal/profile", "Profile"),
]


async def _render(request, template, **context):
    repository = request.app.portal_repository
    context["customer"] = await repository.get_customer()
    context["portal_navigation"] = PORTAL_NAVIGATION
    return aiohttp_jinja2.render_template(template, request, context=context)


async def get_portal_login(request):
    return aiohttp_jinja2.render_template("portal/login.htm", request, context={})


async def post_portal_login(request):
    await request.post()
    raise web.HTTPFound("/portal")


async def get_portal_dashboard(request):
    repository = request.app.portal_repository
    return await _render(
        request,
        "portal/dashboard.htm",
        stats=await repository.get_stats(),
        appointments=await repository.get_appointments(upcoming_only=True),
        recent_history=(await repository.get_service_history())[:3],
    )


async def get_portal_history(request):
    return await _render(request, "portal/history.htm", history=await request.app.portal_repository.get_service_history())


async def get_portal_payments(request):
    repository = request.app.portal_repository
    return await _render(
        request,
        "portal/payments.htm",
        payments=await repository.get_payments(),
        payment_methods=await repository.get_payment_methods(),
    )


async def get_portal_profile(request):
    return await _render(request, "portal/profile.htm")
