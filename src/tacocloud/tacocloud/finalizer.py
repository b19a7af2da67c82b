"""Order finalizer: checkout validation and session close-out."""

import re

from loguru import logger

from .enums import ViolationCode
from .errors import OrderValidationError
from .models import DELIVERY_FIELDS, Confirmation, OrderDetails, TacoOrder, Violation
from .sessions import OrderSessionStore

# MM/YY, month 01-12, year 20-99
EXPIRATION_PATTERN = re.compile(r"(0[1-9]|1[0-2])/([2-9][0-9])")
CVV_PATTERN = re.compile(r"[0-9]{3}")
CARD_NUMBER_PATTERN = re.compile(r"[0-9]+")

DELIVERY_FIELD_MESSAGES = {
    "delivery_name": "Delivery name is required",
    "delivery_street": "Street is required",
    "delivery_city": "City is required",
    "delivery_state": "State is required",
    "delivery_zip": "Zip code is required",
}


def luhn_valid(number: str) -> bool:
    """Return True if a digit string passes the Luhn checksum."""
    total = 0
    for position, char in enumerate(reversed(number)):
        digit = int(char)
        if position % 2 == 1:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
    return total % 10 == 0


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def validate_order(order: TacoOrder) -> list[Violation]:
    """Check an order for checkout and return every violation found."""
    violations: list[Violation] = []

    for field_name in DELIVERY_FIELDS:
        if _is_blank(getattr(order, field_name)):
            violations.append(
                Violation(
                    code=ViolationCode.MISSING_DELIVERY_FIELD,
                    field=field_name,
                    message=DELIVERY_FIELD_MESSAGES[field_name],
                )
            )

    cc_number = order.cc_number or ""
    if not (CARD_NUMBER_PATTERN.fullmatch(cc_number) and luhn_valid(cc_number)):
        violations.append(
            Violation(
                code=ViolationCode.INVALID_CARD_NUMBER,
                field="cc_number",
                message="Not a valid credit card number",
            )
        )

    if not EXPIRATION_PATTERN.fullmatch(order.cc_expiration or ""):
        violations.append(
            Violation(
                code=ViolationCode.INVALID_EXPIRATION,
                field="cc_expiration",
                message="Must be formatted MM/YY",
            )
        )

    if not CVV_PATTERN.fullmatch(order.cc_cvv or ""):
        violations.append(
            Violation(
                code=ViolationCode.INVALID_CVV,
                field="cc_cvv",
                message="Invalid CVV",
            )
        )

    if not order.tacos:
        violations.append(
            Violation(
                code=ViolationCode.EMPTY_ORDER,
                field="tacos",
                message="Your order must contain at least 1 taco",
            )
        )

    return violations


def finalize_order(order: TacoOrder) -> Confirmation:
    """Validate an order and produce its confirmation.

    Raises:
        OrderValidationError: with every violation, if the order is invalid.
    """
    violations = validate_order(order)
    if violations:
        logger.debug(
            "Order {} rejected ({} violations): {}",
            order.order_id,
            len(violations),
            [v.code.value for v in violations],
        )
        raise OrderValidationError(violations)

    confirmation = Confirmation(
        order_id=order.order_id,
        delivery_name=order.delivery_name,
        taco_names=[taco.name for taco in order.tacos],
    )
    logger.info(
        "Order submitted: {} ({} tacos for {})",
        confirmation.order_id,
        confirmation.taco_count,
        confirmation.delivery_name,
    )
    return confirmation


def checkout(
    store: OrderSessionStore, session_id: str, details: OrderDetails
) -> Confirmation:
    """Finalize the session's order with the submitted checkout details.

    On success the session is cleared. On failure the stored order is left
    exactly as it was and OrderValidationError propagates.
    """
    with store.locked(session_id) as order:
        confirmation = finalize_order(details.apply_to(order))
        store.clear(session_id)
    return confirmation
