"""Main Textual app class."""

from __future__ import annotations

import webbrowser
from typing import Callable

from rich.text import Text
from textual.app import App, ComposeResult
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.events import Key
from textual.reactive import reactive
from textual.widgets import Header, Static

from pizzaria.config import RESTAURANT_NAME
from pizzaria.constant import CATEGORY_LABELS, MODE_CATEGORY
from pizzaria.data import MenuItem, candidate_for_menu_item, search_menu
from pizzaria.debuglog import log_debug
from pizzaria.errors import OrderError
from pizzaria.flow import OrderFlowController, Phase
from pizzaria.messenger import send_order_summary
from pizzaria.models import PIZZA, CartEntry, ItemCandidate, Order, PaymentDraft, PizzaItem
from pizzaria.payment_screen import PaymentScreen
from pizzaria.pizza_modal import PizzaModal
from pizzaria.receipt_screen import ReceiptScreen
from pizzaria.rendering import badge_style, format_entry_label, format_menu_item, format_total


class OrderApp(App):
    """A Textual app for building a delivery order and checking it out."""

    TITLE = RESTAURANT_NAME
    SUB_TITLE = "Cardápio Virtual"

    CSS = """
    Screen {
        layout: vertical;
    }

    #main-layout {
        height: 1fr;
    }

    #cart-pane {
        width: 3fr;
        border: round $primary;
        padding: 1;
    }

    #menu-pane {
        width: 2fr;
        border: round $secondary;
        padding: 1;
    }

    #search-bar {
        border: heavy $secondary;
        padding: 0 1;
        margin-bottom: 1;
        height: 4;
    }

    #results {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #cart-list {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #cart-total {
        height: 1;
        margin-top: 1;
    }

    .pane-title {
        text-style: bold;
        margin-bottom: 1;
    }
    """

    input_state = reactive("normal")
    category = reactive(PIZZA)
    search_query = reactive("")
    selected_index = reactive(0)
    cart_selected_index = reactive(None)

    BINDINGS = [
        ("up", "cycle_results(-1)", "Previous result"),
        ("down", "cycle_results(1)", "Next result"),
        ("enter", "register_selected", "Add item"),
        ("backspace", "backspace_query", "Delete query char"),
        ("ctrl+s", "checkout", "Checkout"),
        ("escape", "cancel_active_mode", "Exit active mode"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, opener: Callable[[str], object] = webbrowser.open) -> None:
        super().__init__()
        self.controller = OrderFlowController()
        self.opener = opener
        self.system_status = ""
        log_debug("app_init")

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="main-layout"):
            with Vertical(id="cart-pane"):
                yield Static("Carrinho", classes="pane-title")
                yield Static("(carrinho vazio)", id="cart-list")
                yield Static(id="cart-total")
            with Vertical(id="menu-pane"):
                yield Static(id="search-bar")
                yield Static(id="results")

    def on_mount(self) -> None:
        self._refresh_all()

    def on_key(self, event: Key) -> None:
        if self._overlay_open():
            return

        log_debug("on_key", key=event.key, char=event.character, state=self.input_state)

        if self.input_state == "normal" and event.character in {"+", "-"}:
            self._change_selected_quantity(1 if event.character == "+" else -1)
            event.stop()
            return

        if not event.is_printable or event.character is None or len(event.character) != 1:
            return
        if not event.character.isalnum():
            return

        key = event.character.lower()
        if self.input_state == "normal":
            if key == "d":
                self._delete_selected_entry()
                event.stop()
                return

            if key == "j":
                self._move_cart_selection(1)
                event.stop()
                return

            if key == "k":
                self._move_cart_selection(-1)
                event.stop()
                return

            mode = key.upper()
            if mode not in MODE_CATEGORY:
                return

            self.category = MODE_CATEGORY[mode]
            self.input_state = "active"
            self.search_query = ""
            self.selected_index = 0
            self._refresh_search()
            event.stop()
            return

        self.search_query += event.character
        self.selected_index = 0
        self._refresh_search()
        event.stop()

    def action_cancel_active_mode(self) -> None:
        if self._overlay_open():
            return
        if self.input_state == "normal":
            return

        self.input_state = "normal"
        self.search_query = ""
        self.selected_index = 0
        self._refresh_search()

    def action_cycle_results(self, delta: int) -> None:
        if self._overlay_open():
            return
        if self.input_state != "active":
            return

        results = self._filtered_results()
        if not results:
            self.selected_index = 0
            self._refresh_results(results)
            return
        self.selected_index = (self.selected_index + delta) % len(results)
        self._refresh_results(results)

    def action_register_selected(self) -> None:
        if self._overlay_open():
            return
        if self.input_state != "active":
            return

        results = self._filtered_results()
        if not results:
            return

        item = results[self.selected_index]
        if item.category == PIZZA:
            if item.size is None:
                raise ValueError(f"Pizza row without a size: {item.item_id}")
            self.push_screen(PizzaModal(item.size), callback=self._on_pizza_chosen)
            return
        self._add_candidate(candidate_for_menu_item(item))

    def action_backspace_query(self) -> None:
        if self._overlay_open():
            return
        if self.input_state != "active":
            return

        if not self.search_query:
            return
        self.search_query = self.search_query[:-1]
        self.selected_index = 0
        self._refresh_search()

    def action_checkout(self) -> None:
        if self._overlay_open() or self.controller.phase is not Phase.BROWSING:
            return
        if self.input_state != "normal":
            self.system_status = "Finalize a busca antes (Esc)"
            self._refresh_search()
            return

        try:
            self.controller.request_checkout()
        except OrderError as exc:
            self.system_status = exc.message
            self._refresh_search()
            return

        self.push_screen(
            PaymentScreen(
                total=self.controller.cart.total(),
                on_submit=self._submit_payment,
                on_back=self._back_to_menu,
            )
        )

    def _on_pizza_chosen(self, pizza: PizzaItem | None) -> None:
        if pizza is None:
            return
        self._add_candidate(pizza)

    def _add_candidate(self, candidate: ItemCandidate) -> None:
        entry = self.controller.add(candidate)
        self.cart_selected_index = self.controller.cart.entries.index(entry)
        self.system_status = f"Adicionado: {entry.name}"
        self._refresh_all()

    def _submit_payment(self, draft: PaymentDraft) -> None:
        """Raises OrderError back to the payment screen when the draft is refused."""
        self.controller.submit_payment(draft)
        self.pop_screen()
        self.push_screen(ReceiptScreen(self.controller.order(), on_send=self._send_order, on_new_order=self._new_order))

    def _back_to_menu(self) -> None:
        self.controller.back()
        self.pop_screen()
        self._refresh_all()

    def _send_order(self, order: Order) -> str:
        return send_order_summary(order, opener=self.opener)

    def _new_order(self) -> None:
        self.controller.new_order()
        self.pop_screen()
        self.cart_selected_index = None
        self.input_state = "normal"
        self.search_query = ""
        self.system_status = "Novo pedido"
        self._refresh_all()

    def _overlay_open(self) -> bool:
        return len(self.screen_stack) > 1

    def _filtered_results(self) -> list[MenuItem]:
        return search_menu(self.category, self.search_query)

    def _refresh_all(self) -> None:
        self._refresh_cart()
        self._refresh_search()

    def _move_cart_selection(self, delta: int) -> None:
        entries = self.controller.cart.entries
        if not entries:
            return

        if self.cart_selected_index is None:
            self.cart_selected_index = 0 if delta > 0 else len(entries) - 1
        else:
            self.cart_selected_index = (self.cart_selected_index + delta) % len(entries)
        self._refresh_cart()

    def _selected_entry(self) -> CartEntry | None:
        entries = self.controller.cart.entries
        if self.cart_selected_index is None:
            return None
        if not (0 <= self.cart_selected_index < len(entries)):
            return None
        return entries[self.cart_selected_index]

    def _change_selected_quantity(self, delta: int) -> None:
        entry = self._selected_entry()
        if entry is None:
            return
        self.controller.set_quantity(entry.id, entry.quantity + delta)
        self._refresh_cart()

    def _delete_selected_entry(self) -> None:
        entry = self._selected_entry()
        if entry is None:
            return
        self.controller.set_quantity(entry.id, 0)
        self._refresh_cart()

    def _pointer_list(self, widget: Static, rows: list[Text | str], selected: int | None) -> Text:
        """Render `rows` with a pointer on `selected`, scrolled to fit `widget`."""
        start, end = window_bounds(len(rows), widget.size.height or 8, selected)

        lines = Text()
        if start > 0:
            lines.append("⋮\n", style="dim")
        for idx in range(start, end):
            if idx > start:
                lines.append("\n")
            lines.append("➤ " if idx == selected else "  ")
            lines.append(rows[idx])
        if end < len(rows):
            lines.append("\n⋮", style="dim")
        return lines

    def _refresh_cart(self) -> None:
        try:
            cart_widget = self.query_one("#cart-list", Static)
            total_widget = self.query_one("#cart-total", Static)
        except NoMatches:
            return

        cart = self.controller.cart
        self.sub_title = f"{cart.item_count()} itens"
        total_widget.update(format_total("Total", cart.total()))

        entries = cart.entries
        if not entries:
            self.cart_selected_index = None
            cart_widget.update("(carrinho vazio)")
            return

        if self.cart_selected_index is not None and self.cart_selected_index >= len(entries):
            self.cart_selected_index = len(entries) - 1

        cart_widget.update(
            self._pointer_list(cart_widget, [format_entry_label(entry) for entry in entries], self.cart_selected_index)
        )

    def _refresh_search(self) -> None:
        self._refresh_search_bar()
        if self.input_state == "normal":
            self._refresh_results([])
            return
        self._refresh_results(self._filtered_results())

    def _refresh_search_bar(self) -> None:
        try:
            bar = self.query_one("#search-bar", Static)
        except NoMatches:
            return
        if self.input_state == "normal":
            status = self.system_status or "Pronto"
            bar.update(f"P pizza, H hambúrguer, B bebida. J/K +/- D carrinho. Ctrl+S finalizar.\n{status}")
            return

        text = Text()
        mode = next(key for key, category in MODE_CATEGORY.items() if category == self.category)
        text.append(mode, style=badge_style(self.category))
        text.append(f" {CATEGORY_LABELS[self.category]}: {self.search_query}")
        bar.update(text)

    def _refresh_results(self, results: list[MenuItem]) -> None:
        try:
            results_widget = self.query_one("#results", Static)
        except NoMatches:
            return
        if self.input_state == "normal":
            results_widget.update("")
            return

        if not results:
            results_widget.update("Nenhum resultado")
            return

        if self.selected_index >= len(results):
            self.selected_index = 0

        results_widget.update(
            self._pointer_list(results_widget, [format_menu_item(item) for item in results], self.selected_index)
        )


def window_bounds(total: int, rows: int, selected: int | None) -> tuple[int, int]:
    """Slice of a `total`-long list that fits `rows` lines and keeps `selected` centred."""
    rows = max(1, rows)
    if total <= rows:
        return (0, max(0, total))
    if selected is None:
        return (0, rows)
    start = min(max(0, selected - rows // 2), total - rows)
    return (start, start + rows)
