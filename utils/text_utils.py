import re
from decimal import Decimal, InvalidOperation

PRICE_PATTERN = re.compile(r"-?\d+(?:\.\d+)?")


def to_data_test_key(name: str) -> str:
    """
    Convert a product display name into the key the shop uses in its
    data-test attributes.

    Example: 'Sauce Labs Backpack' -> 'sauce-labs-backpack'
    """
    return "-".join(name.strip().lower().split())


def exact_text_pattern(text: str) -> re.Pattern:
    """
    Build a pattern matching an element whose whole text equals `text`.

    A plain has_text filter matches substrings, so 'Sauce Labs Backpack'
    would also select a 'Sauce Labs Backpack Deluxe' row. Anchoring the
    pattern avoids that collision.
    """
    return re.compile(rf"^\s*{re.escape(text)}\s*$")


def strip_label(text: str, prefix: str) -> str:
    """
    Remove a fixed label prefix from a summary line.

    Args:
        text (str): The rendered line, e.g. 'Tax: $2.40'.
        prefix (str): The literal label, e.g. 'Tax: '.

    Returns:
        str: The value part, or the whole text when the prefix is missing.
    """
    return text.strip().removeprefix(prefix).strip()


def parse_price(text: str) -> Decimal:
    """Extract the first decimal amount from a price string like '$29.99'."""
    match = PRICE_PATTERN.search(text.replace(",", ""))
    if not match:
        raise ValueError(f"No price found in '{text}'")
    try:
        return Decimal(match.group(0))
    except InvalidOperation as e:
        raise ValueError(f"Invalid price in '{text}'") from e
