from enum import Enum


class Icon(Enum):
    FAN = "Fan"
    LIGHTBULB = "Lightbulb"
    SUN = "Sun"
    TOGGLE_RIGHT = "ToggleRight"
    SLIDERS = "Sliders"
    PLUG = "Plug"
    ZAP = "Zap"
    CAMERA = "Camera"
    SHIELD = "Shield"
    HEART = "Heart"
    TARGET = "Target"
    CLOCK = "Clock"
    WRENCH = "Wrench"
    HAMMER = "Hammer"
    HOME = "Home"
    STAR = "Star"
    USERS = "Users"
    THUMBS_UP = "ThumbsUp"
    AWARD = "Award"


DEFAULT_ICON = Icon.ZAP

ICON_CLASSES = {
    Icon.FAN: "fas fa-fan",
    Icon.LIGHTBULB: "fas fa-lightbulb",
    Icon.SUN: "fas fa-sun",
    Icon.TOGGLE_RIGHT: "fas fa-toggle-on",
    Icon.SLIDERS: "fas fa-sliders-h",
    Icon.PLUG: "fas fa-plug",
    Icon.ZAP: "fas fa-bolt",
    Icon.CAMERA: "fas fa-video",
    Icon.SHIELD: "fas fa-shield-alt",
    Icon.HEART: "fas fa-heart",
    Icon.TARGET: "fas fa-bullseye",
    Icon.CLOCK: "fas fa-clock",
    Icon.WRENCH: "fas fa-wrench",
    Icon.HAMMER: "fas fa-hammer",
    Icon.HOME: "fas fa-home",
    Icon.STAR: "fas fa-star",
    Icon.USERS: "fas fa-users",
    Icon.THUMBS_UP: "fas fa-thumbs-up",
    Icon.AWARD: "fas fa-award",
}


def resolve_icon(name):
    """Map a stored icon name to an Icon, falling back to DEFAULT_ICON for anything unknown."""
    if isinstance(name, Icon):
        return name
    try:
        return Icon(name)
    except ValueError:
        return DEFAULT_ICON


def icon_class(name):
    return ICON_CLASSES[resolve_icon(name)]


def get_available_icons():
    """Icons offered in the admin service form"""
    return [{"name": icon.value, "class": ICON_CLASSES[icon]} for icon in Icon]
