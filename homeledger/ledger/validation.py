"""Mini README: Caller-side validation for new ledger entries.

The store trusts its callers, so every surface that accepts user input (web
form, CLI) runs ``validate_entry_input`` first. Failures raise
``EntryValidationError`` before anything touches storage.
"""

from __future__ import annotations

import math
from typing import Tuple, Union

from ..errors import EntryValidationError

MISSING_FIELDS_MESSAGE = "Please enter both a description and an amount."
INVALID_AMOUNT_MESSAGE = "Please enter a valid amount (a number greater than 0)."


def validate_entry_input(
    description: str, amount: Union[str, int, float]
) -> Tuple[str, float]:
    """Return the cleaned description and numeric amount or raise."""

    cleaned_description = (description or "").strip()
    raw_amount = amount.strip() if isinstance(amount, str) else amount
    if not cleaned_description or raw_amount in ("", None):
        raise EntryValidationError(MISSING_FIELDS_MESSAGE)

    if isinstance(raw_amount, bool):
        raise EntryValidationError(INVALID_AMOUNT_MESSAGE)
    try:
        value = float(raw_amount)
    except (TypeError, ValueError) as error:
        raise EntryValidationError(INVALID_AMOUNT_MESSAGE) from error
    if not math.isfinite(value) or value <= 0:
        raise EntryValidationError(INVALID_AMOUNT_MESSAGE)
    return cleaned_description, value
