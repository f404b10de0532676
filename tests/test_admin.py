from datetime import date
from decimal import Decimal


SERVICE_FORM = {
    "name": "Attic Fan Install",
    "slug": "",
    "short_description": "Keep the attic cool",
    "starting_price": "149.50",
    "features": "Vent check\n\nWiring\n",
    "process": "Inspect | Look at the attic\nInstall | Mount the fan",
    "faq": "Is it loud? | Not really",
    "related_services": "ceiling-fan-replacement, light-switches-replacement",
    "icon": "Fan",
    "sort_order": "9",
    "is_active": "on",
}


async def _flash(data_layer):
    return next(iter(data_layer.events.values()))


async def test_dashboard_counts(admin_client, seeded_data_layer):
    data_layer = seeded_data_layer
    data_layer.services[0]["is_active"] = False
    data_layer.quotes.append(data_layer._new_row({"contact_name": "Jane", "status": "new", "service_name": "Fans"}))
    data_layer.quotes.append(data_layer._new_row({"contact_name": "Joe", "status": "completed"}))
    data_layer.contacts.append(data_layer._new_row({"name": "Sam", "email": "sam@example.com", "status": "new"}))
    await data_layer.create_analytics_event({"event_type": "page_view", "page_path": "/"})

    resp = await admin_client.get("/admin")
    text = await resp.text()
    assert resp.status == 200
    assert "Jane" in text and "Sam" in text
    assert "1 page views in the last 24 hours" in text


async def test_create_service(admin_client, data_layer):
    resp = await admin_client.post("/admin/services/new", data=SERVICE_FORM, allow_redirects=False)
    assert resp.status == 302
    assert resp.headers["Location"] == "/admin/services"

    service = data_layer.services[0]
    assert service["slug"] == "attic-fan-install"
    assert service["starting_price"] == Decimal("149.50")
    assert service["features"] == ["Vent check", "Wiring"]
    assert service["process"] == [
        {"step": 1, "title": "Inspect", "description": "Look at the attic"},
        {"step": 2, "title": "Install", "description": "Mount the fan"},
    ]
    assert service["faq"] == [{"question": "Is it loud?", "answer": "Not really"}]
    assert service["related_services"] == ["ceiling-fan-replacement", "light-switches-replacement"]
    assert service["is_active"] is True
    assert service["sort_order"] == 9
    assert await _flash(data_layer) == ("Service 'Attic Fan Install' saved", "success")


async def test_service_form_errors_keep_input(admin_client, data_layer):
    resp = await admin_client.post("/admin/services/new", data=dict(SERVICE_FORM, slug="Bad Slug!"))
    text = await resp.text()
    assert resp.status == 200
    assert "Slug may only contain" in text
    assert "Keep the attic cool" in text
    assert data_layer.services == []


async def test_service_name_is_required(admin_client, data_layer):
    resp = await admin_client.post("/admin/services/new", data=dict(SERVICE_FORM, name=""))
    assert "Name is required" in await resp.text()


async def test_service_store_error_is_shown_raw(admin_client, data_layer):
    data_layer.failing.add("create_service")
    resp = await admin_client.post("/admin/services/new", data=SERVICE_FORM)
    assert "create_service failed: database unavailable" in await resp.text()


async def test_edit_service(admin_client, seeded_data_layer):
    service = seeded_data_layer.services[0]
    resp = await admin_client.get(f"/admin/services/{service['id']}")
    text = await resp.text()
    assert service["name"] in text
    assert "Assessment | We inspect the existing wiring" in text

    form = dict(SERVICE_FORM, name="Ceiling Fan Swap", slug=service["slug"])
    del form["is_active"]
    resp = await admin_client.post(f"/admin/services/{service['id']}", data=form, allow_redirects=False)
    assert resp.status == 302
    assert service["name"] == "Ceiling Fan Swap"
    assert service["is_active"] is False


async def test_toggle_and_delete_service(admin_client, seeded_data_layer):
    service = seeded_data_layer.services[0]
    await admin_client.post(f"/admin/services/{service['id']}/toggle", allow_redirects=False)
    assert service["is_active"] is False

    resp = await admin_client.get(f"/admin/services/{service['id']}/delete")
    assert service["name"] in await resp.text()

    await admin_client.post(f"/admin/services/{service['id']}/delete", allow_redirects=False)
    assert service in seeded_data_layer.services

    await admin_client.post(f"/admin/services/{service['id']}/delete", data={"confirm": "yes"}, allow_redirects=False)
    assert service not in seeded_data_layer.services


async def test_unknown_service_is_404(admin_client):
    resp = await admin_client.get("/admin/services/999")
    assert resp.status == 404


async def test_empty_service_list_has_guidance(admin_client):
    resp = await admin_client.get("/admin/services")
    assert "No services yet" in await resp.text()


async def test_create_testimonial(admin_client, data_layer):
    resp = await admin_client.post("/admin/testimonials/new", data={
        "name": "Ana", "text": "Great work", "rating": "4", "date": "2025-03-01", "is_active": "on",
    }, allow_redirects=False)
    assert resp.status == 302
    testimonial = data_layer.testimonials[0]
    assert testimonial["rating"] == 4
    assert testimonial["date"] == date(2025, 3, 1)
    assert testimonial["is_featured"] is False


async def test_testimonial_rating_range(admin_client, data_layer):
    resp = await admin_client.post("/admin/testimonials/new", data={"name": "Ana", "text": "Great", "rating": "6"})
    assert "Rating must be a whole number from 1 to 5" in await resp.text()
    assert data_layer.testimonials == []


async def test_feature_and_hide_testimonial(admin_client, seeded_data_layer):
    testimonial = seeded_data_layer.testimonials[5]
    await admin_client.post(f"/admin/testimonials/{testimonial['id']}/feature", allow_redirects=False)
    assert testimonial["is_featured"] is True
    await admin_client.post(f"/admin/testimonials/{testimonial['id']}/toggle", allow_redirects=False)
    assert testimonial["is_active"] is False
    assert testimonial in seeded_data_layer.testimonials


async def test_quote_status_notes_and_delete(admin_client, data_layer):
    data_layer.quotes.append(data_layer._new_row({
        "contact_name": "Jane", "contact_email": "jane@example.com", "status": "new", "admin_notes": None,
        "answers": {"fan-count": 2}, "estimated_price": Decimal("250"),
    }))
    quote = data_layer.quotes[0]

    resp = await admin_client.get("/admin/quotes")
    assert "Jane" in await resp.text()

    await admin_client.post(f"/admin/quotes/{quote['id']}/status", data={"status": "completed"}, allow_redirects=False)
    assert quote["status"] == "completed"
    await admin_client.post(f"/admin/quotes/{quote['id']}/status", data={"status": "new"}, allow_redirects=False)
    assert quote["status"] == "new"

    await admin_client.post(f"/admin/quotes/{quote['id']}/status", data={"status": "lost"}, allow_redirects=False)
    assert quote["status"] == "new"
    assert await _flash(data_layer) == ("Invalid status 'lost'", "error")

    await admin_client.post(f"/admin/quotes/{quote['id']}/notes", data={"admin_notes": "Called back"}, allow_redirects=False)
    assert quote["admin_notes"] == "Called back"

    await admin_client.post(f"/admin/quotes/{quote['id']}/delete", data={"confirm": "yes"}, allow_redirects=False)
    assert data_layer.quotes == []


async def test_contact_status(admin_client, data_layer):
    data_layer.contacts.append(data_layer._new_row({"name": "Sam", "email": "sam@example.com", "status": "new"}))
    contact = data_layer.contacts[0]
    await admin_client.post(f"/admin/contacts/{contact['id']}/status", data={"status": "replied"}, allow_redirects=False)
    assert contact["status"] == "replied"

    resp = await admin_client.get("/admin/contacts")
    assert "replied: 1" in await resp.text()


async def test_flash_message_is_shown_once(admin_client, data_layer):
    data_layer.contacts.append(data_layer._new_row({"name": "Sam", "email": "sam@example.com", "status": "new"}))
    contact = data_layer.contacts[0]
    await admin_client.post(f"/admin/contacts/{contact['id']}/status", data={"status": "read"}, allow_redirects=False)

    first = await (await admin_client.get("/admin/contacts")).text()
    second = await (await admin_client.get("/admin/contacts")).text()
    assert "Message marked as read" in first
    assert "Message marked as read" not in second


async def test_edit_page_content(admin_client, data_layer):
    resp = await admin_client.get("/admin/content?page=hero")
    assert "Expert Electrical &amp;" in await resp.text()

    resp = await admin_client.post("/admin/content", data={
        "page_key": "hero",
        "hero.headline": "Sparky Services",
        "hero.trust_points": "Licensed\nFast",
    }, allow_redirects=False)
    assert resp.status == 302
    assert data_layer.page_content["hero"]["headline"] == "Sparky Services"
    assert data_layer.page_content["hero"]["trust_points"] == ["Licensed", "Fast"]
    assert data_layer.page_content["hero"]["badge_text"].startswith("Trusted by")


async def test_page_content_record_errors(admin_client, data_layer):
    resp = await admin_client.post("/admin/content", data={
        "page_key": "about", "about.values": "Shield | Only two",
    })
    assert "expected 3 values" in await resp.text()
    assert data_layer.page_content == {}


async def test_theme_settings_validation(admin_client, data_layer):
    resp = await admin_client.post("/admin/theme", data={"primary_color": "yellow", "accent_color": "#FF6B35"})
    assert "Primary color must be a hex color" in await resp.text()
    assert data_layer.settings == {}

    resp = await admin_client.post(
        "/admin/theme", data={"primary_color": "#123456", "accent_color": "#FF6B35"}, allow_redirects=False
    )
    assert resp.status == 302
    assert data_layer.settings["primary_color"] == ("#123456", "theme")


async def test_contact_settings_saved(admin_client, data_layer):
    resp = await admin_client.post("/admin/settings", data={"phone": "(999) 000-1111"}, allow_redirects=False)
    assert resp.status == 302
    assert data_layer.settings["phone"] == ("(999) 000-1111", "contact")

    page = await (await admin_client.get("/")).text()
    assert "(999) 000-1111" in page


async def test_branding_requires_business_name(admin_client, data_layer):
    resp = await admin_client.post("/admin/branding", data={"business_name": " ", "tagline": "Hi"})
    assert "Business name is required" in await resp.text()


async def test_edit_legal_page(admin_client, data_layer):
    resp = await admin_client.get("/admin/legal?page=terms")
    assert resp.status == 200

    resp = await admin_client.post("/admin/legal", data={
        "page_key": "terms", "title": "Terms", "content": "# Rules\n\nBe nice.",
    }, allow_redirects=False)
    assert resp.status == 302
    assert resp.headers["Location"] == "/admin/legal?page=terms"
    assert data_layer.legal_pages["terms"]["content"] == "# Rules\n\nBe nice."


async def test_analytics_page(admin_client, data_layer):
    await data_layer.create_analytics_event({"event_type": "page_view", "page_path": "/services"})
    data_layer.quotes.append(data_layer._new_row({"contact_name": "Jane", "status": "new", "service_name": "Fans"}))
    resp = await admin_client.get("/admin/analytics")
    text = await resp.text()
    assert resp.status == 200
    assert "/services" in text
    assert "Jane requested a quote for Fans" in text
