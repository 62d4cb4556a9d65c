from decimal import Decimal, InvalidOperation
import math
from typing import Any, Mapping

from pydantic.alias_generators import to_snake
from slugify import slugify


def is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def clean_text(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def as_text(value: Any) -> str | None:
    """Coerce numeric form values to text, leaving strings untouched."""
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float, Decimal)):
        return format_decimal(parse_decimal(value)) or None
    return str(value)


def parse_decimal(value: Any) -> Decimal | None:
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, Decimal):
        return value if value.is_finite() else None

    if isinstance(value, int):
        return Decimal(str(value))

    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return None
        try:
            parsed = Decimal(str(value))
        except (InvalidOperation, ValueError):
            return None
        return parsed if parsed.is_finite() else None

    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        # Thousands separators and currency marks are rejected, not stripped.
        try:
            parsed = Decimal(text)
        except InvalidOperation:
            return None
        return parsed if parsed.is_finite() else None

    return None


def parse_int(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    parsed = parse_decimal(value)
    if parsed is None or parsed != parsed.to_integral_value():
        return None
    return int(parsed)


def format_decimal(value: Decimal | None) -> str:
    if value is None:
        return ""
    if not value.is_finite():
        return ""

    text = format(value.normalize(), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in {"", "-0"}:
        return "0"
    return text


def snake_keys(data: Mapping[str, Any]) -> dict[str, Any]:
    """Return ``data`` with camelCase form keys renamed to snake_case."""
    return {to_snake(str(key)): value for key, value in data.items()}


def suggest_slug(name: str | None) -> str:
    return slugify(name or "")


__all__ = [
    "as_text",
    "clean_text",
    "format_decimal",
    "is_blank",
    "parse_decimal",
    "parse_int",
    "snake_keys",
    "suggest_slug",
]
