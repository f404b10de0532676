import pytest

from fixitpapa.quote.wizard import (
    QuoteWizard, WizardError, SELECT_SERVICE, DETAILS, CONTACT_INFO, REVIEW
)


def _wizard_at_details(service_id="ceiling-fan-replacement"):
    wizard = QuoteWizard()
    wizard.select_service(service_id)
    assert wizard.next()
    return wizard


def _answer_ceiling_fan(wizard):
    wizard.set_answer("fan-count", "2")
    wizard.set_answer("ceiling-height", "tall")
    wizard.set_answer("existing-wiring", "yes")
    wizard.set_answer("remote-control", "yes")


def test_cannot_leave_first_step_without_a_service():
    wizard = QuoteWizard()
    assert not wizard.next()
    assert wizard.step == SELECT_SERVICE


def test_details_step_requires_select_and_radio_answers():
    wizard = _wizard_at_details()
    wizard.set_answer("fan-count", 2)
    wizard.set_answer("ceiling-height", "tall")
    wizard.set_answer("existing-wiring", "yes")
    assert not wizard.next()
    assert wizard.step == DETAILS

    wizard.set_answer("remote-control", "no")
    assert wizard.next()
    assert wizard.step == CONTACT_INFO


def test_numeric_question_needs_value_at_least_minimum():
    wizard = _wizard_at_details("power-receptacle-replacement")
    wizard.set_answer("outlet-type", "usb")
    wizard.set_answer("outlet-count", "0")
    assert not wizard.next()
    wizard.set_answer("outlet-count", "3")
    assert wizard.next()


def test_checkbox_questions_are_optional():
    wizard = _wizard_at_details("ring-camera-installation")
    wizard.set_answer("device-count", 1)
    wizard.set_answer("wiring", "yes")
    assert wizard.next()
    assert wizard.answers.get("device-type") in (None, [])


def test_switching_service_clears_answers():
    wizard = _wizard_at_details()
    _answer_ceiling_fan(wizard)
    wizard.back()
    wizard.select_service("light-fixture-replacement")
    assert wizard.answers == {}
    assert wizard.estimated_price == 95


def test_reselecting_same_service_keeps_answers():
    wizard = _wizard_at_details()
    _answer_ceiling_fan(wizard)
    wizard.back()
    wizard.select_service("ceiling-fan-replacement")
    assert wizard.answers["fan-count"] == 2


def test_estimate_updates_with_answers():
    wizard = _wizard_at_details()
    assert wizard.estimated_price == 125
    _answer_ceiling_fan(wizard)
    assert wizard.estimated_price == 300


def test_contact_step_requires_name_email_and_phone():
    wizard = _wizard_at_details()
    _answer_ceiling_fan(wizard)
    assert wizard.next()
    wizard.update_contact(name="Jane", email="jane@example.com")
    assert not wizard.next()
    wizard.update_contact(phone="555-0100")
    assert wizard.next()
    assert wizard.step == REVIEW


def test_back_never_validates_and_stops_at_first_step():
    wizard = _wizard_at_details()
    wizard.back()
    wizard.back()
    assert wizard.step == SELECT_SERVICE


def test_submission_payload_only_from_review():
    wizard = _wizard_at_details()
    with pytest.raises(WizardError):
        wizard.submission_payload()

    _answer_ceiling_fan(wizard)
    wizard.next()
    wizard.update_contact(name="Jane", email="jane@example.com", phone="555-0100", notes="Bedroom")
    wizard.next()
    payload = wizard.submission_payload()
    assert payload["serviceId"] == "ceiling-fan-replacement"
    assert payload["serviceName"] == "Ceiling Fan Replacement"
    assert payload["estimatedPrice"] == 300
    assert payload["contactName"] == "Jane"
    assert payload["notes"] == "Bedroom"


def test_submitted_wizard_is_closed_until_reset():
    wizard = _wizard_at_details()
    _answer_ceiling_fan(wizard)
    wizard.next()
    wizard.update_contact(name="Jane", email="jane@example.com", phone="555-0100")
    wizard.next()
    wizard.mark_submitted(7)

    assert wizard.submitted
    with pytest.raises(WizardError):
        wizard.back()

    wizard.reset()
    assert wizard.step == SELECT_SERVICE
    assert not wizard.submitted
    assert wizard.service_id == ""


def test_failed_submission_stays_on_review():
    wizard = _wizard_at_details()
    _answer_ceiling_fan(wizard)
    wizard.next()
    wizard.update_contact(name="Jane", email="jane@example.com", phone="555-0100")
    wizard.next()
    wizard.mark_failed("Try again")
    assert wizard.step == REVIEW
    assert not wizard.submitted
    assert wizard.error == "Try again"


def test_state_round_trip_revalidates_answers():
    wizard = _wizard_at_details()
    _answer_ceiling_fan(wizard)
    state = wizard.to_dict()
    state["answers"]["ceiling-height"] = "skyscraper"

    restored = QuoteWizard.from_dict(state)
    assert restored.step == DETAILS
    assert restored.answers["fan-count"] == 2
    assert "ceiling-height" not in restored.answers


def test_tampered_state_falls_back_to_first_step():
    restored = QuoteWizard.from_dict({"step": 3, "service_id": "no-such-service"})
    assert restored.step == SELECT_SERVICE
    assert restored.service_id == ""
    assert QuoteWizard.from_dict("garbage").step == SELECT_SERVICE


def test_unknown_service_is_rejected():
    wizard = QuoteWizard()
    with pytest.raises(WizardError):
        wizard.select_service("roof-repair")


def test_posted_step_falls_back_to_first_incomplete_step():
    state = {
        "step": REVIEW,
        "service_id": "ceiling-fan-replacement",
        "answers": {},
        "contact": {"name": "A", "email": "a@b.c"},
    }
    assert QuoteWizard.from_dict(state).step == DETAILS

    state["answers"] = {"fan-count": 2, "ceiling-height": "tall", "existing-wiring": "yes", "remote-control": "yes"}
    assert QuoteWizard.from_dict(state).step == CONTACT_INFO

    state["contact"]["phone"] = "555-0100"
    assert QuoteWizard.from_dict(state).step == REVIEW


@pytest.mark.parametrize("step", [[4], {"n": 4}, "4", True, None])
def test_malformed_step_starts_over(step):
    assert QuoteWizard.from_dict({"step": step}).step == SELECT_SERVICE


def test_number_answers_are_capped_at_question_maximum():
    wizard = _wizard_at_details()
    wizard.set_answer("fan-count", "1000")
    assert wizard.answers["fan-count"] == 10
    assert wizard.estimated_price == 1250

    restored = QuoteWizard.from_dict(wizard.to_dict())
    assert restored.answers["fan-count"] == 10


def test_form_token_survives_round_trip_and_changes_on_reset():
    wizard = QuoteWizard()
    assert QuoteWizard.from_dict(wizard.to_dict()).token == wizard.token
    assert QuoteWizard.from_dict({"token": "<script>"}).token != "<script>"

    token = wizard.token
    wizard.reset()
    assert wizard.token != token
