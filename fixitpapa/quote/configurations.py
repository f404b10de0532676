"""
Static quote configuration table: one entry per service id, each with a base
price and the ordered questions the wizard asks for that service.
"""
from dataclasses import dataclass, field
from typing import List, Optional


QUESTION_TYPES = ("number", "select", "radio", "checkbox")


@dataclass(frozen=True)
class QuoteOption:
    value: str
    label: str
    price_modifier: float = 0


@dataclass(frozen=True)
class QuoteQuestion:
    id: str
    question: str
    type: str
    options: List[QuoteOption] = field(default_factory=list)
    min: Optional[int] = None
    max: Optional[int] = None
    price_per_unit: Optional[float] = None

    def find_option(self, value):
        for option in self.options:
            if option.value == value:
                return option
        return None

    def to_dict(self):
        return {
            "id": self.id,
            "question": self.question,
            "type": self.type,
            "options": [
                {"value": o.value, "label": o.label, "priceModifier": o.price_modifier}
                for o in self.options
            ],
            "min": self.min,
            "max": self.max,
            "pricePerUnit": self.price_per_unit,
        }


@dataclass(frozen=True)
class ServiceQuoteConfig:
    service_id: str
    service_name: str
    base_price: float
    questions: List[QuoteQuestion] = field(default_factory=list)

    def get_question(self, question_id):
        for question in self.questions:
            if question.id == question_id:
                return question
        return None


def _options(*triples):
    return [QuoteOption(value, label, modifier) for value, label, modifier in triples]


CEILING_HEIGHT_FAN = _options(
    ("standard", "Standard (8-9 ft)", 0),
    ("tall", "Tall (10-12 ft)", 35),
    ("vaulted", "Vaulted/Cathedral (12+ ft)", 75),
)

QUOTE_CONFIGURATIONS = [
    ServiceQuoteConfig("ceiling-fan-replacement", "Ceiling Fan Replacement", 125, [
        QuoteQuestion("fan-count", "How many ceiling fans need to be replaced?", "number",
                      min=1, max=10, price_per_unit=125),
        QuoteQuestion("ceiling-height", "What is your ceiling height?", "select",
                      options=CEILING_HEIGHT_FAN),
        QuoteQuestion("existing-wiring", "Is there existing wiring at the location?", "radio", options=_options(
            ("yes", "Yes, there's an existing fan or light fixture", 0),
            ("no", "No, new wiring is needed", 150),
        )),
        QuoteQuestion("remote-control", "Does the new fan have a remote control?", "radio", options=_options(
            ("yes", "Yes, setup remote", 15),
            ("no", "No, wall switch only", 0),
        )),
    ]),
    ServiceQuoteConfig("light-fixture-replacement", "Light Fixture Replacement", 95, [
        QuoteQuestion("fixture-count", "How many fixtures need to be replaced?", "number",
                      min=1, max=20, price_per_unit=95),
        QuoteQuestion("fixture-type", "What type of fixture are you installing?", "select", options=_options(
            ("flush-mount", "Flush Mount", 0),
            ("pendant", "Pendant Light", 15),
            ("chandelier-small", "Small Chandelier", 35),
            ("chandelier-large", "Large Chandelier (heavy)", 75),
        )),
        QuoteQuestion("ceiling-height", "What is your ceiling height?", "select", options=_options(
            ("standard", "Standard (8-9 ft)", 0),
            ("tall", "Tall (10-12 ft)", 25),
            ("vaulted", "Vaulted (12+ ft)", 50),
        )),
    ]),
    ServiceQuoteConfig("light-fixture-installation", "Light Fixture Installation (New Location)", 175, [
        QuoteQuestion("fixture-count", "How many new fixtures need to be installed?", "number",
                      min=1, max=10, price_per_unit=175),
        QuoteQuestion("wiring-distance", "How far is the nearest power source?", "select", options=_options(
            ("close", "Less than 10 feet", 0),
            ("medium", "10-25 feet", 50),
            ("far", "More than 25 feet", 100),
        )),
        QuoteQuestion("new-switch", "Do you need a new switch installed?", "radio", options=_options(
            ("yes", "Yes, install new switch", 50),
            ("no", "No, connect to existing switch", 0),
        )),
    ]),
    ServiceQuoteConfig("light-switches-replacement", "Light Switches Replacement/Upgrade", 65, [
        QuoteQuestion("switch-count", "How many switches need to be replaced?", "number",
                      min=1, max=20, price_per_unit=65),
        QuoteQuestion("switch-type", "What type of switches?", "select", options=_options(
            ("standard", "Standard Toggle/Rocker", 0),
            ("dimmer", "Dimmer Switch", 15),
            ("smart", "Smart Switch", 25),
        )),
        QuoteQuestion("multi-way", "Are any switches part of a 3-way or 4-way setup?", "radio", options=_options(
            ("no", "No, single switches only", 0),
            ("3way", "Yes, some are 3-way", 25),
            ("4way", "Yes, some are 4-way", 40),
        )),
    ]),
    ServiceQuoteConfig("lighting-controls-installation", "Lighting Controls Installation", 150, [
        QuoteQuestion("control-type", "What type of lighting control do you need?", "select", options=_options(
            ("timer", "Timer Switches", 0),
            ("motion", "Motion Sensors", 25),
            ("smart-basic", "Basic Smart Lighting (1-5 devices)", 50),
            ("smart-advanced", "Advanced Smart System (6+ devices)", 150),
        )),
        QuoteQuestion("device-count", "How many devices/switches?", "number",
                      min=1, max=20, price_per_unit=40),
        QuoteQuestion("hub-needed", "Do you already have a smart home hub?", "radio", options=_options(
            ("yes", "Yes, I have a hub", 0),
            ("no", "No, I need help setting up", 50),
        )),
    ]),
    ServiceQuoteConfig("power-receptacle-repair", "Power Receptacle Repair", 85, [
        QuoteQuestion("outlet-count", "How many outlets need repair?", "number",
                      min=1, max=10, price_per_unit=85),
        QuoteQuestion("issue-type", "What seems to be the issue?", "select", options=_options(
            ("not-working", "Outlet not working", 0),
            ("intermittent", "Intermittent power", 0),
            ("sparking", "Sparking or burning smell", 25),
            ("loose", "Loose/wobbly outlet", 0),
        )),
    ]),
    ServiceQuoteConfig("power-receptacle-replacement", "Power Receptacle Replacement", 75, [
        QuoteQuestion("outlet-count", "How many outlets need to be replaced?", "number",
                      min=1, max=20, price_per_unit=75),
        QuoteQuestion("outlet-type", "What type of outlets do you want?", "select", options=_options(
            ("standard", "Standard 3-prong", 0),
            ("usb", "USB Charging Outlets", 15),
            ("gfci", "GFCI Outlets", 25),
            ("usb-c", "USB-C Fast Charging Outlets", 25),
        )),
    ]),
    ServiceQuoteConfig("ring-camera-installation", "Ring Camera Installation", 125, [
        QuoteQuestion("device-count", "How many Ring devices need to be installed?", "number",
                      min=1, max=10, price_per_unit=125),
        QuoteQuestion("device-type", "What type of Ring device?", "checkbox", options=_options(
            ("doorbell", "Ring Doorbell", 0),
            ("indoor-cam", "Indoor Camera", 0),
            ("outdoor-cam", "Outdoor Camera", 15),
            ("floodlight", "Floodlight Cam", 35),
        )),
        QuoteQuestion("wiring", "For doorbells, do you have existing doorbell wiring?", "radio", options=_options(
            ("yes", "Yes, existing wiring available", 0),
            ("no", "No, will use battery power", 0),
            ("need-wired", "No, but I want wired installation", 75),
        )),
    ]),
]


def get_quote_config(service_id):
    for config in QUOTE_CONFIGURATIONS:
        if config.service_id == service_id:
            return config
    return None
