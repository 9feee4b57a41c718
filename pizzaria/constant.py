"""Editable static menu and label configuration."""

from __future__ import annotations

PIZZA_SIZES: dict[str, dict[str, str | int]] = {
    "P": {"label": "Pequena", "price": "25.90", "max_flavors": 1},
    "M": {"label": "Média", "price": "35.90", "max_flavors": 1},
    "G": {"label": "Grande", "price": "45.90", "max_flavors": 2},
    "F": {"label": "Família", "price": "55.90", "max_flavors": 2},
}

PIZZA_FLAVORS: list[str] = [
    "Margherita",
    "Pepperoni",
    "Calabresa",
    "Frango Catupiry",
    "Portuguesa",
    "Quatro Queijos",
    "Bacon",
    "Vegetariana",
    "Napolitana",
    "Toscana",
    "Camarão",
    "Chocolate",
    "Banana Canela",
    "Palmito",
    "Atum",
]

HAMBURGERS: list[dict[str, str]] = [
    {"name": "X-Burger", "price": "18.90"},
    {"name": "X-Salada", "price": "20.90"},
    {"name": "X-Bacon", "price": "23.90"},
    {"name": "X-Egg", "price": "21.90"},
    {"name": "X-Tudo", "price": "28.90"},
    {"name": "Cheddar Duplo", "price": "29.90"},
    {"name": "Frango Crispy", "price": "24.90"},
    {"name": "Veggie Burger", "price": "25.90"},
]

DRINKS: list[dict[str, str]] = [
    {"name": "Coca-Cola Lata", "price": "4.50", "size": "350ml"},
    {"name": "Coca-Cola 1,5L", "price": "8.90", "size": "1,5L"},
    {"name": "Coca-Cola 2L", "price": "10.90", "size": "2L"},
    {"name": "Fanta Laranja Lata", "price": "4.50", "size": "350ml"},
    {"name": "Fanta Laranja 2L", "price": "9.90", "size": "2L"},
    {"name": "Guaraná Antarctica Lata", "price": "4.50", "size": "350ml"},
    {"name": "Guaraná Antarctica 2L", "price": "9.90", "size": "2L"},
    {"name": "Sprite Lata", "price": "4.50", "size": "350ml"},
    {"name": "Sprite 2L", "price": "9.90", "size": "2L"},
    {"name": "Água Mineral", "price": "3.00", "size": "500ml"},
    {"name": "Suco Natural Laranja", "price": "6.90", "size": "300ml"},
    {"name": "Suco Natural Limão", "price": "6.90", "size": "300ml"},
    {"name": "Cerveja Skol Lata", "price": "4.90", "size": "350ml"},
    {"name": "Cerveja Brahma Lata", "price": "4.90", "size": "350ml"},
    {"name": "Suco de Uva Integral", "price": "7.90", "size": "300ml"},
]

# Menu search modes shown in the TUI, keyed by the hotkey that activates them.
MODE_CATEGORY: dict[str, str] = {
    "P": "pizza",
    "H": "hamburger",
    "B": "drink",
}

CATEGORY_LABELS: dict[str, str] = {
    "pizza": "Pizzas",
    "hamburger": "Hambúrgueres",
    "drink": "Bebidas",
}

PAYMENT_METHOD_LABELS: dict[str, str] = {
    "card": "Cartão na entrega",
    "cash": "Dinheiro",
    "pix": "Pix",
}

PAYMENT_METHOD_ORDER: list[str] = ["card", "cash", "pix"]
