from skillswap.errors import ValidationError


def clean_text(value):
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def parse_id(value, field):
    """Coerce an id from JSON or a path segment.

    Whole-number floats (``1.0``) are accepted. ``0`` counts as absent,
    since ids start at 1.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, float):
        if not value.is_integer():
            raise ValidationError(f"{field} must be an integer.")
        value = int(value)
    try:
        parsed = int(str(value).strip())
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"{field} must be an integer.") from exc
    return parsed or None


def require_fields(**fields):
    missing = [name for name, value in fields.items() if value is None]
    if missing:
        raise ValidationError("Missing required fields: " + ", ".join(missing))
