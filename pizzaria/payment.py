"""Payment form validation."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

from pizzaria.errors import InsufficientChange, MissingAddress, MissingPhone
from pizzaria.models import (
    CARD,
    CASH,
    PIX,
    CardPayment,
    CashPayment,
    PaymentDraft,
    PaymentMethod,
    PaymentSubmission,
    PixPayment,
)

ZERO = Decimal("0")
# Largest change amount the form accepts.
MAX_AMOUNT = Decimal("999999999.99")


def parse_amount(text: str) -> Decimal:
    """
    Parse a typed money amount.

    Accepts either decimal separator ("50.00" or "50,00"). Anything that is
    not a finite, non-negative number up to MAX_AMOUNT reads as zero, the
    same as an empty field.
    """
    raw = text.strip().replace(",", ".")
    if not raw:
        return ZERO
    try:
        value = Decimal(raw)
    except InvalidOperation:
        return ZERO
    if not value.is_finite() or value < 0 or value > MAX_AMOUNT:
        return ZERO
    return value


def validate_payment(draft: PaymentDraft, total: Decimal) -> PaymentSubmission:
    """Check a draft against the order total and return the normalized submission."""
    address = draft.address.strip()
    if not address:
        raise MissingAddress()

    phone = draft.phone.strip()
    if not phone:
        raise MissingPhone()

    method: PaymentMethod
    if draft.method == CASH:
        change_for = draft.change_for if draft.change_for is not None else ZERO
        if change_for < total:
            raise InsufficientChange(change_for=change_for, total=total)
        method = CashPayment(change_for=change_for)
    elif draft.method == CARD:
        method = CardPayment()
    elif draft.method == PIX:
        method = PixPayment()
    else:
        raise ValueError(f"Unknown payment method: {draft.method!r}")

    return PaymentSubmission(
        method=method,
        address=address,
        phone=phone,
        observation=draft.observation.strip(),
    )


def change_due(submission: PaymentSubmission, total: Decimal) -> Decimal | None:
    """Change to bring along for cash orders; None for other methods."""
    if submission.change_for is None:
        return None
    return submission.change_for - total
