"""Tests for the free-text import pipeline."""

from datetime import date
from decimal import Decimal

from portfolio_tracker.domain.parsing.text_import import (
    TEXT_STAGES,
    extract_text_fields,
    parse_transaction_text,
)

CONFIRMATION = (
    "Compra de 0.5 BTC\n"
    "Preço: R$ 550.000,00\n"
    "Total: R$ 275.000,00\n"
    "Data: 05/01/2026"
)


def test_confirmation_email_is_fully_extracted() -> None:
    parsed = parse_transaction_text(CONFIRMATION)

    assert parsed is not None
    assert parsed.ticker == "BTC"
    assert parsed.transaction_type == "buy"
    assert parsed.quantity == Decimal("0.5")
    assert parsed.price_per_unit == Decimal("550000")
    assert parsed.total_value == Decimal("275000")
    assert parsed.date == date(2026, 1, 5)


def test_stage_order_is_fixed() -> None:
    assert [name for name, _stage in TEXT_STAGES] == [
        "side",
        "known_symbol",
        "order_phrase",
        "quantity",
        "price",
        "total",
        "derive_amounts",
        "date_time",
        "date",
    ]


def test_sell_keyword_sets_side() -> None:
    parsed = parse_transaction_text("Venda de 2 ETH\nTotal: 20.000,00")

    assert parsed.transaction_type == "sell"
    assert parsed.ticker == "ETH"
    assert parsed.price_per_unit == Decimal("10000")


def test_known_symbol_wins_over_order_phrase() -> None:
    parsed = parse_transaction_text("Buy 3 XYZ worth of SOL\nTotal: 300")

    assert parsed.ticker == "SOL"
    assert parsed.quantity == Decimal("3")


def test_order_phrase_supplies_unknown_symbol() -> None:
    parsed = parse_transaction_text("Compra de 10 ABCD\nPreço: 2,50")

    assert parsed.ticker == "ABCD"
    assert parsed.total_value == Decimal("25.00")


def test_date_time_wins_over_labelled_date() -> None:
    text = "Buy 1 BTC\nDate: 01/02/2026\n2026-03-04 10:15:00"

    parsed = parse_transaction_text(text)

    assert parsed.date == date(2026, 3, 4)


def test_labelled_quantity_is_used_without_order_phrase() -> None:
    parsed = parse_transaction_text("Asset: DOGE\nQty: 1.000\nPrice: 0,5")

    assert parsed.ticker == "DOGE"
    assert parsed.quantity == Decimal("1.000")
    assert parsed.total_value == Decimal("0.5000")


def test_price_alone_is_not_enough() -> None:
    assert parse_transaction_text("BTC price: 500") is None
    partial = extract_text_fields("BTC price: 500")
    assert partial.ticker == "BTC"
    assert partial.price_per_unit == Decimal("500")


def test_text_without_symbol_is_rejected() -> None:
    assert parse_transaction_text("Total: 100") is None
    assert parse_transaction_text("   ") is None


def test_lowercase_words_are_not_symbols() -> None:
    assert parse_transaction_text("please link the near account, total 5") is None
