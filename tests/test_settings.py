import pytest

from fixitpapa.settings import (
    ContactSettings, BrandingSettings, ThemeSettings, SEOSettings, SettingsValidationError, SETTINGS_CATEGORIES
)


def test_defaults_when_nothing_is_stored():
    settings = ContactSettings.from_rows({})
    assert settings.phone == "(123) 456-7890"
    assert settings.hours_sunday == "Closed"


def test_stored_rows_override_defaults():
    settings = ContactSettings.from_rows({"phone": "(555) 000-0000", "unknown_key": "ignored", "email": None})
    assert settings.phone == "(555) 000-0000"
    assert settings.email == "hello@fixitpapa.com"


def test_non_string_values_become_json_text():
    settings = ContactSettings.from_rows({"service_radius": 30})
    assert settings.service_radius == "30"


def test_form_values_are_trimmed():
    settings = BrandingSettings.from_form({"business_name": "  Sparky  ", "tagline": "Lights on"})
    assert settings.business_name == "Sparky"
    assert settings.logo_url == ""


def test_business_name_is_required():
    with pytest.raises(SettingsValidationError):
        BrandingSettings.from_form({"business_name": ""})


@pytest.mark.parametrize("color", ["#EEFF00", "#abcdef", "#123456"])
def test_theme_accepts_hex_colors(color):
    assert ThemeSettings.from_form({"primary_color": color}).primary_color == color


@pytest.mark.parametrize("color", ["EEFF00", "#EEF", "#GGGGGG", "yellow"])
def test_theme_rejects_other_colors(color):
    with pytest.raises(SettingsValidationError, match="Primary color"):
        ThemeSettings.from_form({"primary_color": color})


def test_form_fields_use_labels():
    fields = {f["name"]: f for f in ContactSettings().form_fields()}
    assert fields["hours_weekday"]["label"] == "Hours (Mon-Fri)"
    assert fields["service_area"]["label"] == "Service Area"
    assert fields["phone"]["value"] == "(123) 456-7890"


def test_rows_cover_every_field():
    assert set(SEOSettings().to_rows()) == {"meta_title", "meta_description", "meta_keywords"}
    assert set(SETTINGS_CATEGORIES) == {"contact", "branding", "seo", "theme"}
