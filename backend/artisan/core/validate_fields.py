"""Field Validation: pure range and shape checks for item and fair records.

Invariants:
    - check_* functions are PURE: return normalized values or raise ValidationError
    - Item: non-empty name, known category, finite price >= 0, integer quantity >= 0
    - Fair: non-empty name and city, end_date >= start_date
    - Stores call these before every create/update, regardless of caller

Design Decisions:
    - Raise instead of returning error dicts: stores have no partial-success path
      (ADR: a rejected write never reaches the session)
    - Pydantic schemas check types at the HTTP boundary; these check domain rules,
      so direct store callers get the same guarantees
"""

import math
from datetime import date

from artisan.core.domain_types import ItemCategory
from artisan.core.errors import ValidationError


def check_item_fields(
    name: str, category: str, price: float, quantity: int,
) -> dict:
    """Validate item fields. Returns normalized values."""
    name = (name or "").strip()
    if not name:
        raise ValidationError("Item name cannot be empty", "name")

    try:
        normalized_category = ItemCategory(category)
    except ValueError:
        allowed = ", ".join(c.value for c in ItemCategory)
        raise ValidationError(
            f"Invalid category '{category}'. Expected one of: {allowed}",
            "category",
        ) from None

    if price is None or not math.isfinite(price):
        raise ValidationError("Price must be a finite number", "price")
    if price < 0:
        raise ValidationError("Price must be zero or greater", "price")

    if isinstance(quantity, bool) or not isinstance(quantity, int):
        raise ValidationError("Quantity must be a whole number", "quantity")
    if quantity < 0:
        raise ValidationError("Quantity must be zero or greater", "quantity")

    return {
        "name": name,
        "category": normalized_category.value,
        "price": float(price),
        "quantity": quantity,
    }


def check_fair_fields(
    name: str, city: str, start_date: date, end_date: date,
) -> dict:
    """Validate fair fields. Returns normalized values."""
    name = (name or "").strip()
    if not name:
        raise ValidationError("Fair name cannot be empty", "name")
    city = (city or "").strip()
    if not city:
        raise ValidationError("Fair city cannot be empty", "city")
    if end_date < start_date:
        raise ValidationError(
            f"End date {end_date.isoformat()} is before start date "
            f"{start_date.isoformat()}",
            "end_date",
        )
    return {
        "name": name, "city": city,
        "start_date": start_date, "end_date": end_date,
    }
