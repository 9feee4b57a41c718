"""Entry point for the order terminal Textual app."""

from __future__ import annotations

from pizzaria.order_app import OrderApp


def main() -> None:
    """Run the Textual application."""
    OrderApp().run()


if __name__ == "__main__":
    main()
