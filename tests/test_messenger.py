from decimal import Decimal
from urllib.parse import parse_qs, unquote, urlsplit

import pytest

from pizzaria import config
from pizzaria.cart import Cart
from pizzaria.messenger import build_whatsapp_url, can_send_receipt, send_order_summary
from pizzaria.models import CardPayment, CashPayment, Order, PaymentSubmission, PixPayment


@pytest.fixture
def order(pizza_media, coca_lata):
    cart = Cart().add(pizza_media).add(coca_lata)
    return Order(
        code="SB000042",
        entries=cart.entries,
        submission=PaymentSubmission(method=PixPayment(), address="Rua C, 3", phone="1199", observation="Interfone 12"),
        total=cart.total(),
    )


def test_url_targets_configured_number(monkeypatch):
    monkeypatch.setattr(config, "WHATSAPP_NUMBER", "5521988887777")

    url = build_whatsapp_url("Oi")

    assert url == "https://wa.me/5521988887777?text=Oi"


def test_url_percent_encodes_message():
    message = "2x Pizza Média (M) - Calabresa\n💰 *TOTAL: R$ 71.80* & mais"

    url = build_whatsapp_url(message, number="+55 (11) 99999-9999")
    parts = urlsplit(url)

    assert parts.netloc == "wa.me"
    assert parts.path == "/5511999999999"
    assert " " not in url and "\n" not in url and "&" not in parts.query.split("=", 1)[1]
    assert unquote(parts.query.split("=", 1)[1]) == message
    assert parse_qs(parts.query)["text"] == [message]


def test_number_without_digits_is_rejected():
    with pytest.raises(ValueError):
        build_whatsapp_url("Oi", number="---")


def test_only_pix_orders_send_receipt():
    assert can_send_receipt(PaymentSubmission(method=PixPayment(), address="a", phone="p"))
    assert not can_send_receipt(PaymentSubmission(method=CardPayment(), address="a", phone="p"))
    assert not can_send_receipt(
        PaymentSubmission(method=CashPayment(change_for=Decimal("10")), address="a", phone="p")
    )


def test_send_hands_link_to_opener(order):
    opened = []

    url = send_order_summary(order, opener=opened.append)

    assert opened == [url]
    text = parse_qs(urlsplit(url).query)["text"][0]
    assert text.startswith("🍕 *PEDIDO SABOR DA TERRA* 🍕")
    assert "1x Pizza Média (M) - Calabresa - 35.90" in text
    assert "💰 *TOTAL: R$ 40.40*" in text
    assert "💳 *PAGAMENTO:* Pix" in text
    assert "📝 *OBS:* Interfone 12" in text
