"""Required Fields: presence check run before any parsing or store access.

Invariants:
    - None and "" count as missing; 0 and False are present values
    - Missing names reported in the order given
"""

from typing import Any

from daily_tracker.core.errors import MissingFieldsError


def check_required_fields(fields: dict[str, Any]) -> None:
    """Raise MissingFieldsError listing every absent field."""
    missing = [
        name for name, value in fields.items()
        if value is None or (isinstance(value, str) and not value.strip())
    ]
    if missing:
        raise MissingFieldsError(missing)
