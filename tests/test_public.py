import json

import pytest

from fixitpapa import create_app
from fixitpapa.quote.wizard import QuoteWizard
from tests.fakes import FakeDataLayer


@pytest.fixture
async def degraded_client(aiohttp_client):
    return await aiohttp_client(create_app(data_layer=FakeDataLayer(configured=False)))


@pytest.mark.parametrize("path", ["/", "/about", "/services", "/contact", "/quote", "/privacy", "/terms"])
async def test_pages_render_without_a_store(degraded_client, path):
    resp = await degraded_client.get(path)
    assert resp.status == 200
    assert "Fix it, papa!" in await resp.text()


async def test_home_page_falls_back_to_static_services(client):
    resp = await client.get("/")
    text = await resp.text()
    assert "Ceiling Fan Replacement" in text
    assert "Expert Electrical &amp;" in text


async def test_home_page_uses_stored_content(client, seeded_data_layer):
    seeded_data_layer.page_content["hero"] = {"headline": "Bright Ideas"}
    text = await (await client.get("/")).text()
    assert "Bright Ideas" in text
    # Keys missing from the stored blob keep their defaults
    assert "Handyman Services" in text


async def test_hidden_services_are_not_listed(client, seeded_data_layer):
    seeded_data_layer.services[0]["is_active"] = False
    text = await (await client.get("/services")).text()
    assert "Ceiling Fan Replacement" not in text
    assert "Light Fixture Replacement" in text


async def test_store_errors_fall_back_to_defaults(client, data_layer):
    data_layer.failing.update({"get_services", "get_settings", "get_page_content", "get_testimonials"})
    resp = await client.get("/")
    assert resp.status == 200
    assert "Ceiling Fan Replacement" in await resp.text()


async def test_service_detail(client, seeded_data_layer):
    resp = await client.get("/services/light-fixture-replacement")
    text = await resp.text()
    assert resp.status == 200
    assert 'data-service-id="light-fixture-replacement"' in text
    assert "/quote?service=light-fixture-replacement" in text


async def test_unknown_service_renders_branded_404(client):
    resp = await client.get("/services/roof-repair")
    assert resp.status == 404
    assert "404 - Page Not Found" in await resp.text()


async def test_unknown_page_renders_branded_404(client):
    resp = await client.get("/no-such-page")
    assert resp.status == 404
    assert "404 - Page Not Found" in await resp.text()


async def test_unknown_api_path_returns_json_404(client):
    resp = await client.get("/api/nothing")
    assert resp.status == 404
    assert await resp.json() == {"error": "Not found"}


async def test_contact_form_redirects_after_sending(client, data_layer):
    resp = await client.post("/contact", data={
        "name": "Sam", "email": "sam@example.com", "message": "Outlet sparks"
    }, allow_redirects=False)
    assert resp.status == 302
    assert resp.headers["Location"] == "/contact?sent=1"
    assert data_layer.contacts[0]["message"] == "Outlet sparks"

    text = await (await client.get("/contact?sent=1")).text()
    assert "Your message has been sent" in text


async def test_contact_form_reports_validation_error(client, data_layer):
    resp = await client.post("/contact", data={"name": "Sam"})
    assert resp.status == 200
    assert "Name, email, and message are required" in await resp.text()
    assert data_layer.contacts == []


async def test_legal_page_renders_stored_markdown(client, data_layer):
    await data_layer.upsert_legal_page("terms", "Terms", "## Be Nice\n\nPlease.")
    text = await (await client.get("/terms")).text()
    assert "Be Nice</h2>" in text


async def test_quote_preselects_service(client):
    text = await (await client.get("/quote?service=ceiling-fan-replacement")).text()
    assert 'value="ceiling-fan-replacement" checked' in text
    assert 'id="estimate-price">$125<' in text


async def test_quote_wizard_requires_a_service(client):
    resp = await client.post("/quote", data={"state": "{}", "action": "next"})
    assert "Please select a service to continue." in await resp.text()


async def test_quote_wizard_moves_to_details(client):
    resp = await client.post("/quote", data={
        "state": "{}", "action": "next", "service_id": "ceiling-fan-replacement"
    })
    text = await resp.text()
    assert "Ceiling Fan Replacement details" in text
    assert 'name="q-fan-count"' in text


def _review_state():
    wizard = QuoteWizard()
    wizard.select_service("ceiling-fan-replacement")
    wizard.next()
    for question_id, value in (("fan-count", 2), ("ceiling-height", "tall"),
                               ("existing-wiring", "yes"), ("remote-control", "yes")):
        wizard.set_answer(question_id, value)
    wizard.next()
    wizard.update_contact(name="Jane", email="jane@example.com", phone="555-0100")
    wizard.next()
    return json.dumps(wizard.to_dict())


async def test_quote_wizard_submits(client, data_layer):
    resp = await client.post("/quote", data={"state": _review_state(), "action": "submit"})
    text = await resp.text()
    assert 'id="quote-success"' in text
    assert "Quote Request Submitted!" in text
    quote = data_layer.quotes[0]
    assert quote["service_id"] == "ceiling-fan-replacement"
    assert quote["estimated_price"] == 300
    assert quote["status"] == "new"


async def test_quote_wizard_store_failure_allows_retry(client, data_layer):
    data_layer.failing.add("create_quote_submission")
    resp = await client.post("/quote", data={"state": _review_state(), "action": "submit"})
    text = await resp.text()
    assert 'id="quote-error"' in text
    assert "Try Again" in text
    assert data_layer.quotes == []


async def test_quote_wizard_rejects_skipped_steps(client, data_layer):
    forged = {
        "step": 4,
        "service_id": "ceiling-fan-replacement",
        "answers": {},
        "contact": {"name": "A", "email": "a@b.c"},
    }
    resp = await client.post("/quote", data={"state": json.dumps(forged), "action": "submit"})
    text = await resp.text()
    assert resp.status == 200
    assert 'id="quote-success"' not in text
    assert "Ceiling Fan Replacement details" in text
    assert data_layer.quotes == []


async def test_quote_wizard_resubmission_is_stored_once(client, data_layer):
    state = _review_state()
    for _ in range(2):
        resp = await client.post("/quote", data={"state": state, "action": "submit"})
        assert "Quote Request Submitted!" in await resp.text()
    assert len(data_layer.quotes) == 1


async def test_quote_wizard_unhashable_step(client):
    resp = await client.post("/quote", data={"state": json.dumps({"step": [4]}), "action": "next"})
    assert resp.status == 200
