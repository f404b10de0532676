from fixitpapa.quote.calculator import calculate_quote
from fixitpapa.quote.configurations import (
    QUOTE_CONFIGURATIONS, ServiceQuoteConfig, QuoteQuestion, QuoteOption, get_quote_config
)


def test_ceiling_fan_scenario():
    config = get_quote_config("ceiling-fan-replacement")
    answers = {"fan-count": 2, "ceiling-height": "tall", "existing-wiring": "yes", "remote-control": "yes"}
    assert calculate_quote(config, answers) == 300


def test_zero_quantity_falls_back_to_base_price():
    config = get_quote_config("light-fixture-replacement")
    assert calculate_quote(config, {"fixture-count": 0}) == 95
    assert calculate_quote(config, {}) == 95


def test_no_answers_returns_base_price_for_every_service():
    for config in QUOTE_CONFIGURATIONS:
        assert calculate_quote(config, {}) == config.base_price


def test_zero_modifier_answers_fall_back_to_base_price():
    config = get_quote_config("power-receptacle-repair")
    assert calculate_quote(config, {"issue-type": "not-working"}) == 85


def test_numeric_answer_below_minimum_is_clamped():
    config = ServiceQuoteConfig("test", "Test", 10, [
        QuoteQuestion("count", "How many?", "number", min=3, price_per_unit=20),
    ])
    assert calculate_quote(config, {"count": 1}) == 60
    assert calculate_quote(config, {"count": 5}) == 100


def test_numeric_floor_is_never_below_one():
    config = ServiceQuoteConfig("test", "Test", 10, [
        QuoteQuestion("count", "How many?", "number", min=0, price_per_unit=20),
    ])
    assert calculate_quote(config, {"count": 0}) == 20
    assert calculate_quote(config, {"count": -4}) == 20


def test_boolean_is_not_a_quantity():
    config = get_quote_config("ceiling-fan-replacement")
    assert calculate_quote(config, {"fan-count": True}) == 125


def test_checkbox_modifiers_add_up():
    config = get_quote_config("ring-camera-installation")
    base = {"device-count": 1}
    assert calculate_quote(config, dict(base, **{"device-type": []})) == 125
    assert calculate_quote(config, dict(base, **{"device-type": ["outdoor-cam"]})) == 140
    assert calculate_quote(config, dict(base, **{"device-type": ["floodlight"]})) == 160
    assert calculate_quote(config, dict(base, **{"device-type": ["outdoor-cam", "floodlight"]})) == 175


def test_unknown_option_contributes_nothing():
    config = get_quote_config("light-switches-replacement")
    assert calculate_quote(config, {"switch-count": 2, "switch-type": "gold-plated"}) == 130


def test_calculation_is_deterministic():
    config = get_quote_config("lighting-controls-installation")
    answers = {"control-type": "smart-basic", "device-count": 4, "hub-needed": "no"}
    results = {calculate_quote(config, answers) for _ in range(5)}
    assert results == {260}


def test_negative_modifiers_are_not_clamped():
    config = ServiceQuoteConfig("discount", "Discount", 50, [
        QuoteQuestion("coupon", "Coupon?", "radio", options=[QuoteOption("big", "Big", -80)]),
        QuoteQuestion("extra", "Extra?", "radio", options=[QuoteOption("yes", "Yes", 30)]),
    ])
    assert calculate_quote(config, {"coupon": "big", "extra": "yes"}) == -50
