"""Canonical order summary text.

The per-entry line format, the field order of the summary and the money
format (always two decimals, "." separator) are what the messaging handoff
consumes; changing any of them breaks receivers. Only the markers around
each field are presentation and vary per target.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

from pizzaria.config import RESTAURANT_NAME
from pizzaria.constant import PAYMENT_METHOD_LABELS
from pizzaria.models import CartEntry, CashPayment, PaymentSubmission

_CENT = Decimal("0.01")

_ENTRY_LINE_RE = re.compile(
    r"^(?P<quantity>\d+)x (?P<name>.+?)"
    r"(?: \((?P<size>[^()]+)\))?"
    r"(?: - (?P<flavors>.+?))?"
    r" - (?P<amount>-?\d+\.\d{2})$"
)


@dataclass(frozen=True)
class ParsedLine:
    quantity: int
    name: str
    size: str | None
    flavors: tuple[str, ...]
    line_total: Decimal


@dataclass(frozen=True)
class SummaryMarkers:
    """Decorations around each summary field; the fields and their order are fixed."""

    header: str = ""
    items: str = "Itens:\n{items}"
    total: str = "Total: {total}"
    payment: str = "Pagamento: {payment}"
    address: str = "Endereço: {address}"
    phone: str = "Telefone: {phone}"
    observation: str = "Observação: {observation}"
    footer: str = ""
    gap: str = "\n"


PLAIN_MARKERS = SummaryMarkers()

WHATSAPP_MARKERS = SummaryMarkers(
    header=f"🍕 *PEDIDO {RESTAURANT_NAME.upper()}* 🍕",
    items="📋 *ITENS:*\n{items}",
    total="💰 *TOTAL: R$ {total}*",
    payment="💳 *PAGAMENTO:* {payment}",
    address="📍 *ENTREGA:* {address}",
    phone="📞 *TELEFONE:* {phone}",
    observation="📝 *OBS:* {observation}",
    footer="✅ Pedido confirmado!",
    gap="\n\n",
)


def format_money(amount: Decimal) -> str:
    return f"{amount.quantize(_CENT, rounding=ROUND_HALF_UP):f}"


def format_entry_line(entry: CartEntry) -> str:
    """`<qty>x <name>[ (<size>)][ - <flavours>] - <line total>`"""
    text = f"{entry.quantity}x {entry.name}"
    if entry.size:
        text += f" ({entry.size})"
    if entry.flavors:
        text += f" - {', '.join(entry.flavors)}"
    text += f" - {format_money(entry.line_total)}"
    return text


def parse_entry_line(line: str) -> ParsedLine:
    """Read back a line produced by format_entry_line."""
    match = _ENTRY_LINE_RE.match(line)
    if match is None:
        raise ValueError(f"Not an order entry line: {line!r}")
    flavors = match.group("flavors")
    return ParsedLine(
        quantity=int(match.group("quantity")),
        name=match.group("name"),
        size=match.group("size"),
        flavors=tuple(flavors.split(", ")) if flavors else (),
        line_total=Decimal(match.group("amount")),
    )


def format_items(entries: Iterable[CartEntry]) -> str:
    return "\n".join(format_entry_line(entry) for entry in entries)


def payment_label(submission: PaymentSubmission) -> str:
    method = submission.method
    if isinstance(method, CashPayment):
        return f"{PAYMENT_METHOD_LABELS['cash']} (troco para {format_money(method.change_for)})"
    return PAYMENT_METHOD_LABELS[method.code]


def render_summary(
    entries: Iterable[CartEntry],
    submission: PaymentSubmission,
    total: Decimal,
    markers: SummaryMarkers = PLAIN_MARKERS,
) -> str:
    """Compose items, total, payment, address, phone and the optional observation."""
    delivery = [
        markers.address.format(address=submission.address),
        markers.phone.format(phone=submission.phone),
    ]
    if submission.observation:
        delivery.append(markers.observation.format(observation=submission.observation))

    blocks = [
        markers.items.format(items=format_items(entries)),
        markers.total.format(total=format_money(total)),
        markers.payment.format(payment=payment_label(submission)),
        "\n".join(delivery),
    ]
    if markers.header:
        blocks.insert(0, markers.header)
    if markers.footer:
        blocks.append(markers.footer)
    return markers.gap.join(blocks)
