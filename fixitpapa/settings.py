"""
Typed site settings, one dataclass per category of the key/value
`site_settings` table.

Rows store the value as JSON. Strings are kept as-is when read back, any other
JSON value is re-serialized to its JSON text so every field stays a string.
"""
import json
import re
from dataclasses import dataclass, fields, asdict


HEX_COLOR = re.compile(r"^#[0-9A-Fa-f]{6}$")


class SettingsValidationError(ValueError):
    pass


class BaseSettings:
    category = None
    labels = {}

    @classmethod
    def field_names(cls):
        return [f.name for f in fields(cls)]

    @classmethod
    def from_rows(cls, rows):
        """Build settings from a {key: json_value} mapping, ignoring unknown keys and nulls."""
        values = {}
        for name in cls.field_names():
            if name not in rows or rows[name] is None:
                continue
            value = rows[name]
            values[name] = value if isinstance(value, str) else json.dumps(value)
        return cls(**values)

    @classmethod
    def from_form(cls, form):
        values = {}
        for name in cls.field_names():
            if name in form:
                values[name] = str(form[name]).strip()
        settings = cls(**values)
        settings.validate()
        return settings

    def validate(self):
        pass

    def to_rows(self):
        return asdict(self)

    def form_fields(self):
        return [
            {"name": name, "label": self.labels.get(name, name.replace("_", " ").title()), "value": getattr(self, name)}
            for name in self.field_names()
        ]


@dataclass
class ContactSettings(BaseSettings):
    phone: str = "(123) 456-7890"
    email: str = "hello@fixitpapa.com"
    service_area: str = "Greater Metro Area"
    service_radius: str = "30 miles"
    hours_weekday: str = "8:00 AM - 6:00 PM"
    hours_saturday: str = "9:00 AM - 4:00 PM"
    hours_sunday: str = "Closed"
    facebook_url: str = ""
    instagram_url: str = ""
    twitter_url: str = ""

    category = "contact"
    labels = {
        "hours_weekday": "Hours (Mon-Fri)",
        "hours_saturday": "Hours (Saturday)",
        "hours_sunday": "Hours (Sunday)",
        "facebook_url": "Facebook URL",
        "instagram_url": "Instagram URL",
        "twitter_url": "Twitter URL",
    }


@dataclass
class BrandingSettings(BaseSettings):
    business_name: str = "Fix it, papa!"
    tagline: str = "Handyman Services"
    logo_url: str = ""
    favicon_url: str = ""

    category = "branding"
    labels = {"logo_url": "Logo URL", "favicon_url": "Favicon URL"}

    def validate(self):
        if not self.business_name:
            raise SettingsValidationError("Business name is required")


@dataclass
class SEOSettings(BaseSettings):
    meta_title: str = "Fix it, papa! | Professional Handyman Services"
    meta_description: str = (
        "Expert electrical and handyman services including ceiling fan installation, light fixtures, "
        "switches, power receptacles, and smart home setup. Licensed, reliable, and affordable."
    )
    meta_keywords: str = "handyman, electrician, ceiling fan installation, light fixture, electrical services, home repair"

    category = "seo"


@dataclass
class ThemeSettings(BaseSettings):
    primary_color: str = "#EEFF00"
    accent_color: str = "#FF6B35"

    category = "theme"

    def validate(self):
        for name in self.field_names():
            if not HEX_COLOR.match(getattr(self, name)):
                raise SettingsValidationError(
                    f"{name.replace('_', ' ').capitalize()} must be a hex color like #1A2B3C"
                )


SETTINGS_CATEGORIES = {
    cls.category: cls for cls in (ContactSettings, BrandingSettings, SEOSettings, ThemeSettings)
}
