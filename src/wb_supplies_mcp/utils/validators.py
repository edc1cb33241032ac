"""Input validation utilities for Supplies API parameters."""

from typing import Any, Dict, List, Optional, Sized

from ..constants import DEFAULT_RETRY_AFTER
from ..exceptions import InvalidArgumentError


def validate_max_items(items: Sized, max_items: int, name: str = "items") -> None:
    """Reject a collection holding more entries than the API accepts.

    Args:
        items: The collection to check
        max_items: Maximum number of entries allowed
        name: Parameter name used in the error message

    Raises:
        InvalidArgumentError: If the collection is too large
    """
    if len(items) > max_items:
        raise InvalidArgumentError(
            f"Maximum number of requested {name} exceeded: {max_items}",
            limit=max_items,
        )


def validate_max_value(value: Optional[int], max_value: int, name: str) -> None:
    """Reject a numeric parameter above its documented maximum.

    None is accepted; the parameter is then left out of the request.

    Raises:
        InvalidArgumentError: If the value is too large
    """
    if value is not None and value > max_value:
        raise InvalidArgumentError(
            f"Maximum value of {name} exceeded: {max_value}",
            limit=max_value,
        )


def validate_positive_integer(value: int, min_value: int = 1, max_value: Optional[int] = None) -> bool:
    """Validate positive integer within range.

    Args:
        value: The integer to validate
        min_value: Minimum allowed value
        max_value: Maximum allowed value, unbounded when None

    Returns:
        True if value is valid
    """
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    if value < min_value:
        return False
    return max_value is None or value <= max_value


def validate_supply_items(items: List[Dict[str, Any]]) -> tuple[bool, List[str]]:
    """Validate goods planned for a supply.

    Args:
        items: List of {"barcode": str, "quantity": int} entries

    Returns:
        Tuple of (is_valid, list_of_errors)
    """
    errors = []

    if not items:
        errors.append("Item list cannot be empty")
        return False, errors

    for idx, item in enumerate(items):
        if not isinstance(item, dict):
            errors.append(f"Item {idx}: Must be an object with 'barcode' and 'quantity'")
            continue

        barcode = item.get("barcode")
        if barcode is None:
            errors.append(f"Item {idx}: Missing required field 'barcode'")
        elif not isinstance(barcode, str) or not barcode.strip():
            errors.append(f"Item {idx}: Invalid barcode")

        if "quantity" not in item:
            errors.append(f"Item {idx}: Missing required field 'quantity'")
        elif not validate_positive_integer(item["quantity"]):
            errors.append(f"Item {idx}: Invalid quantity")

    return len(errors) == 0, errors


def parse_retry_after(value: Any, default: int = DEFAULT_RETRY_AFTER) -> int:
    """Parse a rate-limit retry header into whole seconds.

    Args:
        value: Raw header value, may be missing or malformed
        default: Seconds to use when the value cannot be parsed

    Returns:
        Non-negative number of seconds to wait
    """
    try:
        seconds = int(float(value))
    except (TypeError, ValueError, OverflowError):
        return default
    return seconds if seconds >= 0 else default
