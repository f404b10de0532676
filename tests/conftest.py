import pytest

from fixitpapa import create_app, mail
from fixitpapa.data.default_config import DEFAULT_SERVICES, DEFAULT_TESTIMONIALS
from fixitpapa.helpers import SESSION_COOKIE_NAME
from tests.fakes import FakeDataLayer

ADMIN_EMAIL = "papa@fixitpapa.com"
ADMIN_PASSWORD = "correct-horse"


@pytest.fixture
def data_layer():
    return FakeDataLayer()


@pytest.fixture
def seeded_data_layer(data_layer):
    for service in DEFAULT_SERVICES:
        data_layer.services.append(data_layer._new_row(service))
    for index, testimonial in enumerate(DEFAULT_TESTIMONIALS):
        data_layer.testimonials.append(
            data_layer._new_row(dict(testimonial, is_active=True, is_featured=index < 3))
        )
    return data_layer


@pytest.fixture
async def client(aiohttp_client, data_layer):
    return await aiohttp_client(create_app(data_layer=data_layer))


@pytest.fixture
async def admin_client(client, data_layer):
    await data_layer.create_admin(ADMIN_EMAIL, "Papa")
    await data_layer.create_auth_user(ADMIN_EMAIL, ADMIN_PASSWORD)
    cookie = await data_layer.create_session(ADMIN_EMAIL)
    client.session.cookie_jar.update_cookies({SESSION_COOKIE_NAME: cookie})
    return client


@pytest.fixture
def sent_mail(monkeypatch):
    """Configure mail and capture deliveries instead of talking to SMTP"""
    outbox = []
    monkeypatch.setattr(mail, "SMTP_USERNAME", "mailer@fixitpapa.com")
    monkeypatch.setattr(mail, "SMTP_PASSWORD", "secret")
    monkeypatch.setattr(mail, "ADMIN_NOTIFICATION_EMAIL", "owner@fixitpapa.com")
    monkeypatch.setattr(mail, "deliver", lambda recipient, subject, html: outbox.append(
        {"to": recipient, "subject": subject, "html": html}
    ))
    return outbox
