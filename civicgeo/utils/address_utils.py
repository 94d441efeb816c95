"""
Address string heuristics used by report search.

Neither function parses addresses; both work on the display strings
returned by geocoders such as Nominatim.
"""

import re
from typing import Optional

_DIGIT_PATTERN = re.compile(r"[0-9]")


def is_on_street(address: Optional[str], street_query: Optional[str]) -> bool:
    """
    Check if an address contains a street name.

    Both strings are trimmed and lowercased before a substring check.

    Args:
        address: Full address of the report
        street_query: Street name to search for

    Returns:
        True if the street name is found in the address
    """
    if not address or not street_query:
        return False

    return street_query.strip().lower() in address.strip().lower()


def has_house_number(display_address: Optional[str]) -> bool:
    """
    Check if a display address carries a house number.

    Looks for any digit in the first comma-separated part, e.g. "Via Roma 123"
    in "Via Roma 123, Torino". Tokens such as unit codes that contain digits
    also count.
    """
    if not display_address:
        return False

    first_part = display_address.split(",", 1)[0].strip()
    return bool(_DIGIT_PATTERN.search(first_part))
