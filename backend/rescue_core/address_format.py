"""Assemble a one-line address from placemark components."""
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rescue_core.geocoder import Placemark

ADDRESS_SEPARATOR = ", "

# Matches the rescue_location.address column and the add form field.
ADDRESS_MAX_LENGTH = 512

# Fixed order: street, number, city, region, postal code, country.
ADDRESS_COMPONENT_ORDER = (
    "thoroughfare",
    "sub_thoroughfare",
    "locality",
    "administrative_area",
    "postal_code",
    "country",
)


def format_address(placemark: "Placemark") -> str:
    """Join the present components in fixed order with ", ". Returns "" when none are present.

    The result is cut to ADDRESS_MAX_LENGTH characters.
    """
    parts = []
    for field in ADDRESS_COMPONENT_ORDER:
        value = getattr(placemark, field, None)
        if value is None:
            continue
        value = str(value).strip()
        if value:
            parts.append(value)
    return ADDRESS_SEPARATOR.join(parts)[:ADDRESS_MAX_LENGTH].rstrip()
