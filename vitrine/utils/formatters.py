"""
Formatting utilities for display.

Provides consistent formatting for phones, currency, dates, slugs,
WhatsApp links and status badges.
"""

import re
import unicodedata
from datetime import date, datetime
from typing import Any, Optional
from urllib.parse import quote

from vitrine.core.config import get_settings
from vitrine.utils.validators import only_digits


def format_phone(phone: str) -> str:
    """
    Format a Brazilian phone number.

    Args:
        phone: Raw phone string

    Returns:
        "(21) 99999-9999" for 11 digits, "(21) 3333-4444" for 10 digits,
        or the input unchanged for any other length
    """
    digits = only_digits(phone)
    if len(digits) == 11:
        return f"({digits[:2]}) {digits[2:7]}-{digits[7:]}"
    if len(digits) == 10:
        return f"({digits[:2]}) {digits[2:6]}-{digits[6:]}"
    return phone


def format_currency(value: Optional[float | str]) -> str:
    """
    Format a value as Brazilian currency.

    Args:
        value: Numeric value

    Returns:
        Formatted currency string (R$ 1.234,56)
    """
    if value is None or value == "":
        return "-"

    try:
        amount = float(value)
    except (TypeError, ValueError):
        return str(value)
    return f"R$ {amount:,.2f}".replace(",", "X").replace(".", ",").replace("X", ".")


def _parse_datetime(value: str | date) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def format_date(value: Optional[str | date]) -> str:
    """
    Format a date for display.

    Args:
        value: ISO date string, date or datetime

    Returns:
        Formatted date string (DD/MM/YYYY) or "-"
    """
    if not value:
        return "-"

    try:
        return _parse_datetime(value).strftime("%d/%m/%Y")
    except ValueError:
        return str(value)


def format_datetime(value: Optional[str | datetime]) -> str:
    """Format a datetime as DD/MM/YYYY HH:MM."""
    if not value:
        return "-"

    try:
        return _parse_datetime(value).strftime("%d/%m/%Y %H:%M")
    except ValueError:
        return str(value)


def calculate_age(birth_date: str | date, today: Optional[date] = None) -> Optional[int]:
    """
    Calculate age in full years.

    Args:
        birth_date: ISO date string or date
        today: Reference date (defaults to today)

    Returns:
        Age in years, or None when the date can't be parsed
    """
    if not birth_date:
        return None

    try:
        born = _parse_datetime(birth_date).date()
    except ValueError:
        return None

    today = today or date.today()
    age = today.year - born.year
    if (today.month, today.day) < (born.month, born.day):
        age -= 1
    return age


def slugify(text: str) -> str:
    """Build a URL slug, stripping accents ("São Paulo" -> "sao-paulo")."""
    normalized = unicodedata.normalize("NFD", text.lower())
    ascii_text = "".join(c for c in normalized if unicodedata.category(c) != "Mn")
    ascii_text = re.sub(r"[^\w\s-]", "", ascii_text)
    ascii_text = re.sub(r"\s+", "-", ascii_text.strip())
    return re.sub(r"-{2,}", "-", ascii_text)


def truncate(text: str, length: int) -> str:
    """Truncate text to length characters, adding an ellipsis."""
    if len(text) <= length:
        return text
    return text[:length].strip() + "..."


def get_whatsapp_link(phone: str, message: Optional[str] = None) -> str:
    """
    Build a wa.me deep link.

    The number is reduced to digits and prefixed with the country code
    unless it already starts with it. The message is percent-encoded.
    """
    country_code = get_settings().WHATSAPP_COUNTRY_CODE
    digits = only_digits(phone)
    number = digits if digits.startswith(country_code) else f"{country_code}{digits}"
    query = f"?text={quote(message, safe='')}" if message else ""
    return f"https://wa.me/{number}{query}"


def format_status(status: Optional[str], status_type: str = "moderation") -> tuple[str, str]:
    """
    Format a status with label and color.

    Args:
        status: Status value (wire value or enum)
        status_type: Type of status ('moderation', 'plan')

    Returns:
        Tuple of (display_label, color)
    """
    if not status:
        return "-", "gray"

    status = getattr(status, "value", status)

    moderation_statuses = {
        "publish": ("✅ Ativo", "green"),
        "pending": ("⏳ Em análise", "orange"),
        "draft": ("❌ Reprovado", "red"),
    }

    plan_statuses = {
        "free": ("🆓 Gratuito", "gray"),
        "premium": ("⭐ Premium", "violet"),
        "vip": ("👑 VIP", "orange"),
    }

    status_maps = {
        "moderation": moderation_statuses,
        "plan": plan_statuses,
    }

    status_map = status_maps.get(status_type, {})
    return status_map.get(status, (status, "gray"))


def format_bool(value: Any) -> str:
    """Format a boolean value for display."""
    if value is True:
        return "Sim"
    elif value is False:
        return "Não"
    return "-"
