"""Input validation for catalog items.

Provides:
- is_valid_price / is_non_blank: small predicates
- validate_item_candidate: checks a create payload and returns the cleaned
  name/category/price, raising ValidationError on the first problem
"""

import math
from typing import Any, Dict

from utils.errors import ValidationError


def is_valid_price(value: Any) -> bool:
    """Check if value is a valid item price.

    Valid prices are finite, non-negative real numbers.  Strings are
    rejected even when they look numeric.

    Args:
        value: Price to validate

    Returns:
        True if valid price, False otherwise
    """
    if not isinstance(value, (int, float)):
        return False
    if isinstance(value, bool):  # bool is subclass of int
        return False
    try:
        value = float(value)
    except OverflowError:
        return False
    return math.isfinite(value) and value >= 0


def is_non_blank(value: Any) -> bool:
    """True if *value* is a string with something besides whitespace."""
    return isinstance(value, str) and bool(value.strip())


def validate_item_candidate(candidate: Dict[str, Any] | None) -> Dict[str, Any]:
    """Validate a create-item payload.

    Args:
        candidate: Raw payload with ``name``, ``category`` and ``price``.

    Returns:
        Dict with trimmed ``name``/``category`` and ``price`` as float.

    Raises:
        ValidationError: a field is missing, blank, or has the wrong type,
            or the price is negative.
    """
    candidate = candidate or {}
    name = candidate.get("name")
    category = candidate.get("category")
    price = candidate.get("price")

    if not is_non_blank(name) or not is_non_blank(category) or not isinstance(
        price, (int, float)
    ) or isinstance(price, bool):
        raise ValidationError(
            "Invalid payload. Name, category, and price are required."
        )
    if not is_valid_price(price):
        raise ValidationError("Price must be a non-negative number.")

    return {
        "name": name.strip(),
        "category": category.strip(),
        "price": float(price),
    }
