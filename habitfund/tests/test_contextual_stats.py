from __future__ import annotations

import pytest

from habitfund.core.contextual_stats import ITEMS, PRICES, Currency, contextual_stats


def test_every_currency_prices_every_item():
    for currency in Currency:
        assert len(PRICES[currency]) == len(ITEMS)
        assert all(price > 0 for price in PRICES[currency])


def test_counts_truncate_toward_zero():
    stats = {item.key: item for item in contextual_stats(100, Currency.USD)}

    assert stats["lunch"].count == 6  # 100 / 15
    assert stats["coffee"].count == 20
    assert stats["gas"].count == 28  # 100 / 3.5
    assert stats["gas"].unit == "L"
    assert stats["streaming"].unit == "mo"
    assert stats["app"].count == 20


def test_items_keep_display_order():
    keys = [item.key for item in contextual_stats(1000, Currency.RUB)]

    assert keys == [item.key for item in ITEMS]
    assert keys[0] == "lunch"
    assert keys[-1] == "app"


def test_nothing_saved_buys_nothing():
    assert all(item.count == 0 for item in contextual_stats(0, Currency.EUR))


@pytest.mark.parametrize(
    "currency,symbol",
    [(Currency.RUB, "₽"), (Currency.USD, "$"), (Currency.JPY, "¥"), (Currency.BRL, "R$")],
)
def test_currency_symbols(currency, symbol):
    assert currency.symbol == symbol


def test_plain_string_currency_is_accepted():
    assert contextual_stats(500, "RUB")[0].count == 1
