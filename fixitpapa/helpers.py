import os
import re
import unicodedata
from decimal import Decimal, InvalidOperation
from functools import wraps

SESSION_COOKIE_NAME = os.environ.get("SESSION_COOKIE_NAME", "FIXITPAPA")


def fetch_session_cookie(func):
    @wraps(func)
    async def wrapper(request):
        cookie = request.cookies.get(SESSION_COOKIE_NAME)
        return await func(request, cookie)
    return wrapper


def set_session_cookie(request, response, cookie):
    # Only use secure flag for HTTPS connections
    is_secure = request.scheme == 'https'
    response.set_cookie(
        name=SESSION_COOKIE_NAME,
        value=cookie,
        secure=is_secure,
        httponly=True,
        samesite="Lax",
        path="/"
    )


def clear_session_cookie(response):
    response.del_cookie(SESSION_COOKIE_NAME, path="/")


def format_currency(value):
    """$125 for whole amounts, $99.50 otherwise, with thousands separators"""
    if value is None or value == "":
        return ""
    try:
        amount = Decimal(str(value))
    except InvalidOperation:
        return str(value)
    if amount == amount.to_integral_value():
        return f"${amount:,.0f}"
    return f"${amount:,.2f}"


def slugify(text):
    """Generate a URL-safe slug: lowercase ascii words joined by single hyphens"""
    text = unicodedata.normalize("NFKD", text or "").encode("ascii", "ignore").decode("ascii")
    text = re.sub(r"[^a-z0-9]+", "-", text.lower())
    return text.strip("-")


SLUG_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")


def is_valid_slug(slug):
    return bool(SLUG_PATTERN.match(slug or ""))


def parse_int(value, default=None):
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return default


def safe_next_path(path, default="/admin"):
    """Only same-site absolute paths are allowed as redirect targets"""
    if not path or not path.startswith("/") or path.startswith("//") or "\\" in path:
        return default
    return path
