from decimal import Decimal
from itertools import count

import pytest

from pizzaria.cart import Cart
from pizzaria.data import build_pizza
from pizzaria.models import DrinkItem, PizzaItem


def sequential_ids():
    counter = count(1)
    return lambda: f"id-{next(counter)}"


def test_adding_equivalent_items_merges_into_one_entry(pizza_media):
    cart = Cart().add(pizza_media).add(build_pizza("M", ["Calabresa"]))

    assert cart.item_count() == 1
    assert cart.entries[0].quantity == 2


def test_flavor_order_distinguishes_entries():
    cart = Cart().add(build_pizza("G", ["Calabresa", "Bacon"])).add(build_pizza("G", ["Bacon", "Calabresa"]))

    assert cart.item_count() == 2
    assert [entry.flavors for entry in cart] == [("Calabresa", "Bacon"), ("Bacon", "Calabresa")]


def test_same_name_different_size_are_distinct(coca_lata):
    two_liters = DrinkItem(name="Coca-Cola Lata", size="2L", unit_price=Decimal("10.90"))

    cart = Cart().add(coca_lata).add(two_liters)

    assert cart.item_count() == 2


def test_new_entries_get_fresh_ids_and_keep_insertion_order(pizza_media, coca_lata, x_burger):
    cart = Cart()
    ids = sequential_ids()
    for candidate in (x_burger, pizza_media, coca_lata, x_burger):
        cart = cart.add(candidate, id_factory=ids)

    assert [entry.id for entry in cart] == ["id-1", "id-2", "id-3"]
    assert [entry.name for entry in cart] == ["X-Burger", "Pizza Média", "Coca-Cola Lata"]
    assert cart.entries[0].quantity == 2


def test_add_returns_new_cart_and_leaves_original_untouched(pizza_media):
    empty = Cart()
    one = empty.add(pizza_media)
    two = one.add(pizza_media)

    assert empty.item_count() == 0
    assert one.entries[0].quantity == 1
    assert two.entries[0].quantity == 2


def test_set_quantity_overwrites_instead_of_adding(pizza_media):
    cart = Cart().add(pizza_media).add(pizza_media)
    entry_id = cart.entries[0].id

    cart = cart.set_quantity(entry_id, 5)

    assert cart.get(entry_id).quantity == 5


def test_set_quantity_zero_removes_entry(pizza_media, coca_lata):
    cart = Cart().add(pizza_media).add(coca_lata)
    before = cart.item_count()

    cart = cart.set_quantity(cart.entries[0].id, 0)

    assert cart.item_count() == before - 1
    assert [entry.name for entry in cart] == ["Coca-Cola Lata"]


def test_set_quantity_zero_on_unknown_id_is_noop(pizza_media):
    cart = Cart().add(pizza_media)

    assert cart.set_quantity("missing", 0) == cart
    assert cart.set_quantity("missing", 3) == cart


def test_set_quantity_rejects_negative(pizza_media):
    cart = Cart().add(pizza_media)

    with pytest.raises(ValueError):
        cart.set_quantity(cart.entries[0].id, -1)


def test_total_is_sum_of_line_totals(pizza_media, coca_lata, x_burger):
    cart = Cart().add(coca_lata).add(coca_lata).add(pizza_media).add(x_burger)

    assert cart.total() == Decimal("4.50") * 2 + Decimal("35.90") + Decimal("18.90")
    assert cart.total() == cart.total()


def test_total_does_not_depend_on_entry_order(pizza_media, coca_lata, x_burger):
    forward = Cart().add(pizza_media).add(coca_lata).add(x_burger)
    backward = Cart(tuple(reversed(forward.entries)))

    assert forward.total() == backward.total()


def test_empty_cart_totals_zero():
    cart = Cart()

    assert cart.total() == Decimal("0")
    assert cart.item_count() == 0
    assert cart.quantity_count() == 0


def test_item_count_counts_entries_not_units(pizza_media, coca_lata):
    cart = Cart().add(pizza_media).add(pizza_media).add(pizza_media).add(coca_lata)

    assert cart.item_count() == 2
    assert cart.quantity_count() == 4


def test_pizza_candidate_carries_size_and_flavors():
    pizza = build_pizza("F", ["Atum", "Palmito"])

    assert pizza == PizzaItem(
        name="Pizza Família", size="F", flavors=("Atum", "Palmito"), unit_price=Decimal("55.90")
    )
    assert pizza.category == "pizza"


def test_find_by_item_key(pizza_media, coca_lata):
    cart = Cart().add(pizza_media)

    assert cart.find(pizza_media.key) is cart.entries[0]
    assert cart.find(coca_lata.key) is None
