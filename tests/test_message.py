from decimal import Decimal

import pytest

from pizzaria.cart import Cart
from pizzaria.message import (
    PLAIN_MARKERS,
    WHATSAPP_MARKERS,
    format_entry_line,
    format_items,
    format_money,
    parse_entry_line,
    payment_label,
    render_summary,
)
from pizzaria.models import (
    CardPayment,
    CartEntry,
    CashPayment,
    DrinkItem,
    HamburgerItem,
    PaymentSubmission,
    PixPayment,
    PizzaItem,
)


def entry(item, quantity=1):
    return CartEntry(id="e1", item=item, quantity=quantity)


PIZZA_TWO_FLAVORS = PizzaItem(
    name="Pizza Média", size="M", flavors=("Calabresa", "Catupiry"), unit_price=Decimal("35.90")
)


@pytest.fixture
def cash_submission():
    return PaymentSubmission(
        method=CashPayment(change_for=Decimal("50")),
        address="Rua das Flores, 10",
        phone="(11) 98888-7777",
    )


def test_pizza_line():
    assert format_entry_line(entry(PIZZA_TWO_FLAVORS, 2)) == "2x Pizza Média (M) - Calabresa, Catupiry - 71.80"


def test_drink_line(coca_lata):
    assert format_entry_line(entry(coca_lata, 3)) == "3x Coca-Cola Lata (350ml) - 13.50"


def test_hamburger_line(x_burger):
    assert format_entry_line(entry(x_burger)) == "1x X-Burger - 18.90"


@pytest.mark.parametrize(
    "item, quantity",
    [
        (PIZZA_TWO_FLAVORS, 2),
        (PizzaItem(name="Pizza Grande", size="G", flavors=("Banana Canela",), unit_price=Decimal("45.90")), 1),
        (DrinkItem(name="Coca-Cola 1,5L", size="1,5L", unit_price=Decimal("8.90")), 4),
        (HamburgerItem(name="X-Tudo", unit_price=Decimal("28.90")), 3),
    ],
)
def test_entry_line_reads_back(item, quantity):
    original = entry(item, quantity)

    parsed = parse_entry_line(format_entry_line(original))

    assert parsed.quantity == quantity
    assert parsed.name == item.name
    assert parsed.size == item.size
    assert parsed.flavors == item.flavors
    assert parsed.line_total == original.line_total


def test_parse_rejects_foreign_text():
    with pytest.raises(ValueError):
        parse_entry_line("Total: 44.90")


@pytest.mark.parametrize(
    "amount, expected",
    [
        (Decimal("44.9"), "44.90"),
        (Decimal("5"), "5.00"),
        (Decimal("0.005"), "0.01"),
        (Decimal("1234.5678"), "1234.57"),
        (Decimal("0"), "0.00"),
    ],
)
def test_format_money(amount, expected):
    assert format_money(amount) == expected


def test_items_keep_cart_order(coca_lata, x_burger, pizza_media):
    cart = Cart().add(x_burger).add(coca_lata).add(pizza_media).add(x_burger)

    assert format_items(cart.entries).splitlines() == [
        "2x X-Burger - 37.80",
        "1x Coca-Cola Lata (350ml) - 4.50",
        "1x Pizza Média (M) - Calabresa - 35.90",
    ]


def test_payment_labels(cash_submission):
    assert payment_label(cash_submission) == "Dinheiro (troco para 50.00)"
    assert payment_label(PaymentSubmission(method=CardPayment(), address="a", phone="p")) == "Cartão na entrega"
    assert payment_label(PaymentSubmission(method=PixPayment(), address="a", phone="p")) == "Pix"


def test_plain_summary_field_order(coca_lata, pizza_media, cash_submission):
    cart = Cart().add(coca_lata).add(coca_lata).add(pizza_media)

    summary = render_summary(cart.entries, cash_submission, cart.total(), markers=PLAIN_MARKERS)

    assert summary == (
        "Itens:\n"
        "2x Coca-Cola Lata (350ml) - 9.00\n"
        "1x Pizza Média (M) - Calabresa - 35.90\n"
        "Total: 44.90\n"
        "Pagamento: Dinheiro (troco para 50.00)\n"
        "Endereço: Rua das Flores, 10\n"
        "Telefone: (11) 98888-7777"
    )


def test_observation_block_only_when_present(pizza_media):
    cart = Cart().add(pizza_media)
    submission = PaymentSubmission(method=PixPayment(), address="Rua B", phone="1199", observation="Sem cebola")

    summary = render_summary(cart.entries, submission, cart.total())

    assert summary.endswith("Telefone: 1199\nObservação: Sem cebola")


def test_whatsapp_summary(coca_lata, pizza_media):
    cart = Cart().add(coca_lata).add(coca_lata).add(pizza_media)
    submission = PaymentSubmission(
        method=CashPayment(change_for=Decimal("50")), address="Rua B, 2", phone="1199", observation="Portão azul"
    )

    summary = render_summary(cart.entries, submission, cart.total(), markers=WHATSAPP_MARKERS)

    assert summary == (
        "🍕 *PEDIDO SABOR DA TERRA* 🍕\n\n"
        "📋 *ITENS:*\n"
        "2x Coca-Cola Lata (350ml) - 9.00\n"
        "1x Pizza Média (M) - Calabresa - 35.90\n\n"
        "💰 *TOTAL: R$ 44.90*\n\n"
        "💳 *PAGAMENTO:* Dinheiro (troco para 50.00)\n\n"
        "📍 *ENTREGA:* Rua B, 2\n"
        "📞 *TELEFONE:* 1199\n"
        "📝 *OBS:* Portão azul\n\n"
        "✅ Pedido confirmado!"
    )


def test_summary_is_deterministic(pizza_media, cash_submission):
    cart = Cart().add(pizza_media)

    first = render_summary(cart.entries, cash_submission, cart.total())
    second = render_summary(cart.entries, cash_submission, cart.total())

    assert first == second


def test_user_text_with_braces_is_kept_verbatim(pizza_media):
    cart = Cart().add(pizza_media)
    submission = PaymentSubmission(method=PixPayment(), address="Rua {centro}", phone="1199")

    assert "Endereço: Rua {centro}" in render_summary(cart.entries, submission, cart.total())
