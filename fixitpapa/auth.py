import asyncio
import aiohttp_jinja2
from dataclasses import dataclass
from functools import wraps
from typing import Optional
from urllib.parse import urlencode
from aiohttp import web

from fixitpapa import mail
from fixitpapa.helpers import fetch_session_cookie, set_session_cookie, clear_session_cookie, safe_next_path


UNAUTHORIZED_MESSAGE = "You are not authorized to access the admin panel."
LOGIN_ERROR_MARKERS = ("unauthorized", "auth_failed")
UNAUTHORIZED_REDIRECT = "/admin/login?error=unauthorized"


@dataclass(frozen=True)
class AuthContext:
    """Who is making the request, resolved once from the session cookie and the admin allow-list"""
    cookie: Optional[str] = None
    email: Optional[str] = None
    admin_id: Optional[int] = None
    admin_name: Optional[str] = None

    @property
    def is_authenticated(self):
        return bool(self.email)

    @property
    def is_admin(self):
        return self.admin_id is not None


async def resolve_auth_context(app, cookie):
    data_layer = app.data_layer
    if not cookie or not data_layer.configured:
        return AuthContext(cookie=cookie)

    try:
        session = await data_layer.verify_session(cookie)
        if not session:
            return AuthContext(cookie=cookie)
        admin = await data_layer.get_admin_by_email(session["email"])
    except Exception as e:
        app.logger.error(f"Error resolving session: {e}")
        return AuthContext(cookie=cookie)

    if not admin:
        return AuthContext(cookie=cookie, email=session["email"])
    return AuthContext(cookie=cookie, email=session["email"], admin_id=admin["id"], admin_name=admin.get("name"))


def with_auth_context(func):
    @fetch_session_cookie
    @wraps(func)
    async def wrapper(request, cookie):
        auth = await resolve_auth_context(request.app, cookie)
        request["auth"] = auth
        return await func(request, auth)
    return wrapper


def admin_required(func):
    @with_auth_context
    @wraps(func)
    async def wrapper(request, auth):
        if not auth.is_admin:
            request.app.logger.warning(f"Rejected admin request for {request.path}")
            raise web.HTTPFound(UNAUTHORIZED_REDIRECT)
        return await func(request, auth)
    return wrapper


async def _start_admin_session(request, email, location):
    cookie = await request.app.data_layer.create_session(email)
    response = web.HTTPFound(location)
    set_session_cookie(request, response, cookie)
    return cookie, response


@with_auth_context
async def get_admin_login(request, auth):
    if auth.is_admin:
        raise web.HTTPFound("/admin")

    error = request.query.get("error")
    context = {
        "error": UNAUTHORIZED_MESSAGE if error in LOGIN_ERROR_MARKERS else None,
        "sent": request.query.get("sent") == "1",
        "store_configured": request.app.data_layer.configured,
    }
    return aiohttp_jinja2.render_template("admin/login.htm", request, context=context)


async def post_admin_login(request):
    data = await request.post() or {}
    email = (data.get("email") or "").strip().lower()
    password = data.get("password") or ""
    data_layer = request.app.data_layer

    if not data_layer.configured:
        request.app.logger.warning("Admin sign-in attempted without a configured data store")
        raise web.HTTPFound(UNAUTHORIZED_REDIRECT)

    try:
        authenticated = await data_layer.authenticate_user(email, password)
        admin = await data_layer.get_admin_by_email(email) if authenticated else None
    except Exception as e:
        request.app.logger.error(f"Admin sign-in error: {e}")
        raise web.HTTPFound(UNAUTHORIZED_REDIRECT)

    if not admin:
        request.app.logger.warning(f"Rejected admin sign-in for '{email}'")
        raise web.HTTPFound(UNAUTHORIZED_REDIRECT)

    cookie, response = await _start_admin_session(request, email, "/admin")
    await data_layer.create_event(cookie, f"Welcome back, {admin.get('name') or email}!", "success")
    request.app.logger.info(f"Admin '{email}' signed in")
    raise response


async def post_magic_link(request):
    """Issue a one-time sign-in link. The reply is the same whether or not the address is an admin."""
    data = await request.post() or {}
    email = (data.get("email") or "").strip().lower()
    data_layer = request.app.data_layer

    if email and data_layer.configured:
        try:
            code = await data_layer.create_auth_code(email)
            query = urlencode({"code": code, "next": "/admin"})
            link = f"{request.url.origin()}/api/auth/callback?{query}"
            await asyncio.get_running_loop().run_in_executor(None, mail.send_magic_link, email, link)
        except Exception as e:
            request.app.logger.error(f"Error issuing sign-in link: {e}")
    elif not data_layer.configured:
        request.app.logger.warning("Sign-in link requested without a configured data store")

    raise web.HTTPFound("/admin/login?sent=1")


async def get_auth_callback(request):
    code = request.query.get("code")
    next_path = safe_next_path(request.query.get("next"))
    data_layer = request.app.data_layer

    if not code or not data_layer.configured:
        raise web.HTTPFound("/admin/login?error=auth_failed")

    try:
        email = await data_layer.exchange_auth_code(code)
    except Exception as e:
        request.app.logger.error(f"Error exchanging sign-in code: {e}")
        email = None

    if not email:
        raise web.HTTPFound("/admin/login?error=auth_failed")

    cookie, response = await _start_admin_session(request, email, next_path)
    if await data_layer.get_admin_by_email(email):
        request.app.logger.info(f"Admin '{email}' signed in with a one-time link")
        raise response

    # Authenticated but not allow-listed: undo the session immediately
    request.app.logger.warning(f"Signed out non-admin '{email}' after code exchange")
    await data_layer.sign_out_session(cookie)
    response = web.HTTPFound(UNAUTHORIZED_REDIRECT)
    clear_session_cookie(response)
    raise response


@with_auth_context
async def get_logout(request, auth):
    if auth.cookie and request.app.data_layer.configured:
        await request.app.data_layer.sign_out_session(auth.cookie)

    response = web.HTTPFound("/admin/login")
    clear_session_cookie(response)
    raise response
