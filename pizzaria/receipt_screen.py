"""Order confirmation screen."""

from __future__ import annotations

from typing import Callable

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.screen import Screen
from textual.widgets import Header, Static

from pizzaria.config import CONTACT_PHONE, DELIVERY_ESTIMATE, RESTAURANT_NAME
from pizzaria.message import format_money, payment_label
from pizzaria.messenger import can_send_receipt
from pizzaria.models import Order
from pizzaria.payment import change_due
from pizzaria.rendering import format_entry_label, format_total


class ReceiptScreen(Screen[None]):
    """Show the confirmed order and offer a new one."""

    BINDINGS = [
        ("w", "send_whatsapp", "Send via WhatsApp"),
        ("n", "new_order", "New order"),
    ]

    CSS = """
    #receipt {
        width: 72;
        height: auto;
        border: round $success;
        background: $panel;
        padding: 1 2;
    }

    #receipt-title {
        text-style: bold;
        color: #5fbf72;
        margin-bottom: 1;
    }

    #receipt-body {
        color: white;
        margin-bottom: 1;
    }

    #receipt-status {
        color: #dddddd;
    }
    """

    def __init__(
        self,
        order: Order,
        on_send: Callable[[Order], str],
        on_new_order: Callable[[], None],
    ) -> None:
        super().__init__()
        self.order = order
        self.on_send = on_send
        self.on_new_order = on_new_order
        self.status = ""

    def compose(self) -> ComposeResult:
        yield Header()
        with Container(id="receipt"):
            yield Static(f"Pedido confirmado! #{self.order.code}", id="receipt-title")
            yield Static(id="receipt-body")
            yield Static(id="receipt-status")

    def on_mount(self) -> None:
        self._refresh_content()

    def action_send_whatsapp(self) -> None:
        if not can_send_receipt(self.order.submission):
            self.status = "Envio do comprovante disponível apenas para Pix."
        else:
            self.on_send(self.order)
            self.status = "Comprovante enviado para o WhatsApp."
        self._refresh_content()

    def action_new_order(self) -> None:
        self.on_new_order()

    def _refresh_content(self) -> None:
        order = self.order
        submission = order.submission

        content = Text(style="white")
        content.append(f"{RESTAURANT_NAME}\n", style="bold #e8a33d")
        content.append("Obrigado por escolher nossa pizzaria!\n\n")

        content.append("Itens do pedido\n", style="bold")
        for entry in order.entries:
            content.append_text(format_entry_label(entry))
            content.append("\n")
        content.append("\n")
        content.append_text(format_total("Total", order.total))

        content.append("\n\nPagamento\n", style="bold")
        content.append(payment_label(submission))
        change = change_due(submission, order.total)
        if change is not None:
            content.append(f"\nTroco: R$ {format_money(change)}")

        content.append("\n\nEntrega\n", style="bold")
        content.append(f"{submission.address}\n")
        content.append(f"Telefone: {submission.phone}")
        if submission.observation:
            content.append(f"\nObservação: {submission.observation}")

        content.append(f"\n\nTempo estimado de entrega: {DELIVERY_ESTIMATE}", style="#2f6db5")
        content.append(f"\nEm caso de dúvidas: {CONTACT_PHONE}", style="dim")

        hints = ["N novo pedido"]
        if can_send_receipt(submission):
            hints.insert(0, "W enviar comprovante via WhatsApp")
        status = self.status or ", ".join(hints)

        self.query_one("#receipt-body", Static).update(content)
        self.query_one("#receipt-status", Static).update(status)
