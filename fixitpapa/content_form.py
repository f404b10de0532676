"""
Admin form fields for the page content blobs.

Fields are derived from the shape of the default blob for each page:
strings become text inputs, lists of strings become one-per-line textareas
and lists of records become one record per line with columns separated by
" | ".
"""
from fixitpapa.data.default_config import DEFAULT_PAGE_CONTENT

RECORD_SEPARATOR = " | "
LONG_TEXT = 80


class ContentFormError(ValueError):
    pass


def _kind(default):
    if isinstance(default, list):
        if default and isinstance(default[0], dict):
            return "records"
        return "lines"
    if isinstance(default, str) and len(default) > LONG_TEXT:
        return "longtext"
    return "text"


def _label(key):
    return key.replace("_", " ").capitalize()


def _columns(default):
    return list(default[0].keys()) if default else []


def field_name(page_key, key):
    return f"{page_key}.{key}"


def format_records(records, columns):
    return "\n".join(RECORD_SEPARATOR.join(str(record.get(c, "")) for c in columns) for record in records or [])


def build_form_fields(page_key, content):
    """Describe every editable field of a page blob with its current value rendered for the form"""
    defaults = DEFAULT_PAGE_CONTENT[page_key]
    fields = []
    for key, default in defaults.items():
        value = content.get(key, default)
        kind = _kind(default)
        field = {"name": field_name(page_key, key), "label": _label(key), "kind": kind}

        if kind == "lines":
            field["value"] = "\n".join(str(v) for v in value or [])
        elif kind == "records":
            columns = _columns(default)
            field["columns"] = columns
            field["value"] = format_records(value, columns)
        else:
            field["value"] = "" if value is None else str(value)
        fields.append(field)
    return fields


def parse_lines(raw):
    return [line.strip() for line in raw.splitlines() if line.strip()]


def parse_records(raw, columns, label):
    records = []
    for number, line in enumerate(parse_lines(raw), start=1):
        parts = [part.strip() for part in line.split("|", len(columns) - 1)]
        if len(parts) < len(columns):
            raise ContentFormError(
                f"{label}, line {number}: expected {len(columns)} values separated by '|' ({', '.join(columns)})"
            )
        records.append(dict(zip(columns, parts)))
    return records


def parse_form(page_key, form, current=None):
    """Build a page blob from submitted form fields. Fields missing from the form keep their current value."""
    if page_key not in DEFAULT_PAGE_CONTENT:
        raise ContentFormError(f"Unknown page '{page_key}'")

    defaults = DEFAULT_PAGE_CONTENT[page_key]
    current = current or defaults
    content = {}
    for key, default in defaults.items():
        name = field_name(page_key, key)
        if name not in form:
            content[key] = current.get(key, default)
            continue

        raw = str(form[name])
        kind = _kind(default)
        if kind == "lines":
            content[key] = parse_lines(raw)
        elif kind == "records":
            content[key] = parse_records(raw, _columns(default), _label(key))
        else:
            content[key] = raw.strip()
    return content
