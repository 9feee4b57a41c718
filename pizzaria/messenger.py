"""WhatsApp handoff for the order summary."""

from __future__ import annotations

import webbrowser
from typing import Callable
from urllib.parse import quote

from pizzaria import config
from pizzaria.debuglog import log_debug
from pizzaria.message import WHATSAPP_MARKERS, render_summary
from pizzaria.models import Order, PaymentSubmission, PixPayment


def build_whatsapp_url(message: str, number: str | None = None) -> str:
    """Percent-encode the message into a wa.me deep link for the configured number."""
    destination = config.WHATSAPP_NUMBER if number is None else number
    digits = "".join(ch for ch in destination if ch.isdigit())
    if not digits:
        raise ValueError(f"WhatsApp number has no digits: {destination!r}")
    return f"{config.WHATSAPP_BASE_URL}/{digits}?text={quote(message, safe='')}"


def can_send_receipt(submission: PaymentSubmission) -> bool:
    """Only Pix orders send their receipt; the restaurant checks the transfer against it."""
    return isinstance(submission.method, PixPayment)


def send_order_summary(order: Order, opener: Callable[[str], object] = webbrowser.open) -> str:
    """Render the order for WhatsApp, hand the link to `opener` and return the link."""
    message = render_summary(order.entries, order.submission, order.total, markers=WHATSAPP_MARKERS)
    url = build_whatsapp_url(message)
    log_debug("whatsapp_handoff", order_code=order.code, url_length=len(url))
    opener(url)
    return url
