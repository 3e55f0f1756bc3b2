"""Express a saved amount as everyday purchases ("42 cups of coffee")."""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, NamedTuple, Tuple

from pydantic import BaseModel


class Currency(str, Enum):
    RUB = "RUB"
    USD = "USD"
    EUR = "EUR"
    GBP = "GBP"
    JPY = "JPY"
    CNY = "CNY"
    INR = "INR"
    BRL = "BRL"
    CAD = "CAD"
    AUD = "AUD"

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]


_SYMBOLS: Dict[Currency, str] = {
    Currency.RUB: "₽",
    Currency.USD: "$",
    Currency.EUR: "€",
    Currency.GBP: "£",
    Currency.JPY: "¥",
    Currency.CNY: "¥",
    Currency.INR: "₹",
    Currency.BRL: "R$",
    Currency.CAD: "C$",
    Currency.AUD: "A$",
}


class _Item(NamedTuple):
    key: str
    icon: str
    title: str
    unit: str
    color: str


# display order; prices below follow the same order
ITEMS: Tuple[_Item, ...] = (
    _Item("lunch", "fork.knife", "Business lunches", "", "#FF6B6B"),
    _Item("coffee", "cup.and.saucer.fill", "Cups of coffee", "", "#8B4513"),
    _Item("pizza", "flame.fill", "Pizzas", "", "#E74C3C"),
    _Item("gas", "fuelpump.fill", "Liters of gas", "L", "#3498DB"),
    _Item("taxi", "car.fill", "Taxi rides", "", "#1ABC9C"),
    _Item("bus", "bus.fill", "Bus tickets", "", "#9B59B6"),
    _Item("movie", "ticket.fill", "Movie tickets", "", "#E91E63"),
    _Item("streaming", "play.tv.fill", "Months of streaming", "mo", "#F44336"),
    _Item("book", "book.fill", "Books", "", "#795548"),
    _Item("gym", "figure.run", "Gym drop-ins", "", "#4CAF50"),
    _Item("yoga", "figure.yoga", "Yoga classes", "", "#00BCD4"),
    _Item("app", "app.badge.fill", "Paid apps", "", "#2196F3"),
)

# approximate local prices
PRICES: Dict[Currency, Tuple[float, ...]] = {
    Currency.RUB: (500, 250, 800, 55, 400, 60, 500, 500, 700, 500, 1000, 300),
    Currency.USD: (15, 5, 20, 3.5, 15, 2.5, 15, 15, 20, 15, 25, 5),
    Currency.EUR: (14, 4.5, 18, 1.8, 12, 2, 12, 13, 18, 12, 22, 5),
    Currency.GBP: (12, 4, 15, 1.5, 10, 1.8, 12, 11, 15, 10, 20, 4),
    Currency.JPY: (1200, 500, 2000, 170, 1500, 200, 1800, 1500, 1500, 1000, 2500, 500),
    Currency.CNY: (50, 25, 80, 8, 30, 3, 50, 40, 50, 50, 100, 25),
    Currency.INR: (300, 150, 500, 100, 200, 30, 300, 200, 400, 300, 500, 100),
    Currency.BRL: (50, 15, 60, 6, 25, 5, 40, 45, 60, 50, 80, 20),
    Currency.CAD: (18, 6, 25, 1.8, 18, 3.5, 16, 17, 25, 18, 30, 6),
    Currency.AUD: (20, 6, 25, 2, 20, 4, 20, 18, 30, 20, 35, 7),
}


class StatItem(BaseModel):
    key: str
    icon: str
    title: str
    count: int
    unit: str
    color: str
    unit_price: float


def contextual_stats(total_savings: float, currency: Currency) -> List[StatItem]:
    """How many of each everyday item ``total_savings`` would buy, truncated."""
    prices = PRICES[Currency(currency)]
    return [
        StatItem(
            key=item.key,
            icon=item.icon,
            title=item.title,
            count=int(total_savings / price),
            unit=item.unit,
            color=item.color,
            unit_price=price,
        )
        for item, price in zip(ITEMS, prices)
    ]
