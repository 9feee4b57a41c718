"""Payment and delivery form screen."""

from __future__ import annotations

from decimal import Decimal
from typing import Callable

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Key
from textual.screen import Screen
from textual.widgets import Header, Static

from pizzaria.constant import PAYMENT_METHOD_LABELS, PAYMENT_METHOD_ORDER
from pizzaria.errors import OrderError
from pizzaria.message import format_money
from pizzaria.models import CASH, PaymentDraft
from pizzaria.payment import parse_amount
from pizzaria.rendering import format_total

_FIELD_LABELS: dict[str, str] = {
    "method": "Forma de pagamento",
    "change_for": "Troco para qual valor?",
    "address": "Endereço de entrega",
    "phone": "Telefone para contato",
    "observation": "Observações (opcional)",
}

_AMOUNT_CHARS = set("0123456789.,")


class PaymentScreen(Screen[None]):
    """Collect payment method and delivery details, then hand them to `on_submit`."""

    CSS = """
    #payment-form {
        width: 72;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #payment-total {
        margin-bottom: 1;
    }

    #payment-body {
        color: white;
        margin-bottom: 1;
    }

    #payment-error {
        color: #ffb3b3;
        margin-bottom: 1;
    }

    #payment-help {
        color: #dddddd;
    }
    """

    def __init__(
        self,
        total: Decimal,
        on_submit: Callable[[PaymentDraft], None],
        on_back: Callable[[], None],
    ) -> None:
        super().__init__()
        self.total = total
        self.on_submit = on_submit
        self.on_back = on_back
        self.draft = PaymentDraft()
        self.change_text = ""
        self.field_index = 0
        self.error = ""

    def compose(self) -> ComposeResult:
        yield Header()
        with Container(id="payment-form"):
            yield Static(id="payment-total")
            yield Static(id="payment-body")
            yield Static(id="payment-error")
            yield Static(
                "↑/↓/Tab move, ←/→ change method, type to fill, Ctrl+S finish, Esc back",
                id="payment-help",
            )

    def on_mount(self) -> None:
        self._refresh_content()

    def on_key(self, event: Key) -> None:
        if event.key == "escape":
            event.stop()
            self.on_back()
            return

        if event.key == "ctrl+s":
            event.stop()
            self._submit()
            return

        if event.key in {"down", "tab", "enter"}:
            self._move_field(1)
            event.stop()
            return

        if event.key in {"up", "shift+tab"}:
            self._move_field(-1)
            event.stop()
            return

        field = self._fields()[self.field_index]
        if field == "method":
            if event.key in {"left", "right", "space"}:
                self._cycle_method(-1 if event.key == "left" else 1)
                event.stop()
            return

        if event.key == "backspace":
            self._edit_field(field, None)
            event.stop()
            return

        if event.is_printable and event.character:
            self._edit_field(field, event.character)
            event.stop()

    def _fields(self) -> list[str]:
        fields = ["method"]
        if self.draft.method == CASH:
            fields.append("change_for")
        fields.extend(["address", "phone", "observation"])
        return fields

    def _move_field(self, delta: int) -> None:
        fields = self._fields()
        self.field_index = (self.field_index + delta) % len(fields)
        self._refresh_content()

    def _cycle_method(self, delta: int) -> None:
        idx = PAYMENT_METHOD_ORDER.index(self.draft.method)
        self.draft.method = PAYMENT_METHOD_ORDER[(idx + delta) % len(PAYMENT_METHOD_ORDER)]
        self.error = ""
        self._refresh_content()

    def _edit_field(self, field: str, character: str | None) -> None:
        """Append `character` to a text field, or delete its last character when None."""
        if field == "change_for":
            if character is None:
                self.change_text = self.change_text[:-1]
            elif character in _AMOUNT_CHARS:
                self.change_text += character
            else:
                return
            self.draft.change_for = parse_amount(self.change_text) if self.change_text else None
        else:
            value = getattr(self.draft, field)
            value = value[:-1] if character is None else value + character
            setattr(self.draft, field, value)
        self.error = ""
        self._refresh_content()

    def _submit(self) -> None:
        try:
            self.on_submit(self.draft)
        except OrderError as exc:
            self.error = exc.message
            self._refresh_content()

    def _field_value(self, field: str) -> str:
        if field == "method":
            return f"◀ {PAYMENT_METHOD_LABELS[self.draft.method]} ▶"
        if field == "change_for":
            return self.change_text
        return getattr(self.draft, field)

    def _refresh_content(self) -> None:
        fields = self._fields()
        if self.field_index >= len(fields):
            self.field_index = len(fields) - 1

        self.query_one("#payment-total", Static).update(format_total("Finalizar pedido - Total", self.total))

        content = Text(style="white")
        for idx, field in enumerate(fields):
            if idx > 0:
                content.append("\n")
            is_current = idx == self.field_index
            pointer = "➤ " if is_current else "  "
            cursor = "|" if is_current and field != "method" else ""
            content.append(f"{pointer}{_FIELD_LABELS[field]}: ", style="bold white" if is_current else "white")
            content.append(f"{self._field_value(field)}{cursor}")

        change_for = self.draft.change_for
        if self.draft.method == CASH and change_for is not None and change_for > 0 and change_for >= self.total:
            content.append(f"\n\n  Troco: R$ {format_money(change_for - self.total)}", style="#5fbf72")

        self.query_one("#payment-body", Static).update(content)
        self.query_one("#payment-error", Static).update(self.error)
