"""Pizza size and flavour picker modal screen."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.reactive import reactive
from textual.screen import ModalScreen
from textual.widgets import Static

from pizzaria.constant import PIZZA_FLAVORS
from pizzaria.data import PIZZA_SIZE_BY_CODE, build_pizza, pizza_size
from pizzaria.message import format_money
from pizzaria.models import PizzaItem


class PizzaModal(ModalScreen[PizzaItem | None]):
    """Centered modal to pick a size, how many flavours and which ones."""

    BINDINGS = [
        ("escape", "close", "Close"),
        ("q", "close", "Close"),
        ("ctrl+c", "close", "Close"),
        ("j", "move_cursor(1)", "Next"),
        ("k", "move_cursor(-1)", "Previous"),
        ("up", "move_cursor(-1)", "Previous"),
        ("down", "move_cursor(1)", "Next"),
        ("enter", "toggle_current", "Toggle"),
        ("a", "add_to_cart", "Add"),
    ]

    CSS = """
    PizzaModal {
        align: center middle;
        background: $background 60%;
    }

    #pizza-dialog {
        width: 64;
        height: auto;
        max-height: 90%;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #pizza-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #pizza-body {
        margin-bottom: 1;
        color: white;
    }

    #pizza-error {
        color: #ffb3b3;
    }

    #pizza-help {
        margin-top: 1;
        color: #dddddd;
    }
    """

    cursor_index = reactive(0)
    _SIZE_KIND = "size"
    _COUNT_KIND = "count"
    _FLAVOR_KIND = "flavor"

    def __init__(self, size_code: str = "M") -> None:
        super().__init__()
        self.size_code = pizza_size(size_code).code
        self.flavor_count = 1
        self.selected_flavors: list[str] = []
        self.error = ""

    def compose(self) -> ComposeResult:
        with Container(id="pizza-dialog"):
            yield Static("Pizza", id="pizza-title")
            yield Static(id="pizza-body")
            yield Static(id="pizza-error")
            yield Static("J/K/↑/↓ move, Enter choose, A add to cart, Esc/q/Ctrl+C close", id="pizza-help")

    def on_mount(self) -> None:
        self._refresh_content()

    def action_close(self) -> None:
        self.dismiss(None)

    def action_move_cursor(self, delta: int) -> None:
        rows = self._rows()
        self.cursor_index = (self.cursor_index + delta) % len(rows)
        self._refresh_content()

    def action_toggle_current(self) -> None:
        row_kind, row_value = self._rows()[self.cursor_index]
        self.error = ""

        if row_kind == self._SIZE_KIND:
            self.size_code = row_value
            self.flavor_count = 1
            self.selected_flavors = []
        elif row_kind == self._COUNT_KIND:
            self.flavor_count = int(row_value)
            self.selected_flavors = []
        elif row_value in self.selected_flavors:
            self.selected_flavors.remove(row_value)
        elif len(self.selected_flavors) < self.flavor_count:
            self.selected_flavors.append(row_value)
        self._refresh_content()

    def action_add_to_cart(self) -> None:
        if len(self.selected_flavors) != self.flavor_count:
            self.error = f"Escolha {self.flavor_count} sabor(es) ({len(self.selected_flavors)}/{self.flavor_count})."
            self._refresh_content()
            return
        self.dismiss(build_pizza(self.size_code, self.selected_flavors))

    def _rows(self) -> list[tuple[str, str]]:
        rows: list[tuple[str, str]] = [(self._SIZE_KIND, code) for code in PIZZA_SIZE_BY_CODE]
        max_flavors = pizza_size(self.size_code).max_flavors
        if max_flavors > 1:
            rows.extend((self._COUNT_KIND, str(count)) for count in range(1, max_flavors + 1))
        rows.extend((self._FLAVOR_KIND, flavor) for flavor in PIZZA_FLAVORS)
        return rows

    def _refresh_content(self) -> None:
        body = self.query_one("#pizza-body", Static)
        error_widget = self.query_one("#pizza-error", Static)

        rows = self._rows()
        if self.cursor_index >= len(rows):
            self.cursor_index = len(rows) - 1

        content = Text(style="white")
        previous_kind = None
        for idx, (row_kind, row_value) in enumerate(rows):
            if previous_kind is not None and row_kind != previous_kind:
                content.append("\n")
            if idx > 0:
                content.append("\n")
            previous_kind = row_kind
            pointer = "➤ " if idx == self.cursor_index else "  "

            if row_kind == self._SIZE_KIND:
                size = PIZZA_SIZE_BY_CODE[row_value]
                checked = "(•)" if row_value == self.size_code else "( )"
                content.append(f"{pointer}{checked} {size.code} {size.label}  {format_money(size.price)}")
            elif row_kind == self._COUNT_KIND:
                checked = "(•)" if int(row_value) == self.flavor_count else "( )"
                content.append(f"{pointer}{checked} {row_value} sabor(es)")
            else:
                is_checked = row_value in self.selected_flavors
                position = f"{self.selected_flavors.index(row_value) + 1}" if is_checked else " "
                style = "bold white" if is_checked else "white"
                content.append(f"{pointer}[{position}] {row_value}", style=style)

        body.update(content)
        error_widget.update(self.error)
