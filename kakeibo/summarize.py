"""Monthly balance summary of the account book."""

from __future__ import annotations

import datetime as _dt
from collections.abc import Iterable, Mapping

from kakeibo import storage
from kakeibo.models import Item


def target_months(items: Iterable[Item]) -> list[_dt.date]:
    """First days of every month that has entries, in ascending order."""
    return sorted({item.first_day for item in items})


def filter_by_month(items: Iterable[Item], month: _dt.date) -> list[Item]:
    """Entries in the same year and month as the given date."""
    return [
        item for item in items if item.year == month.year and item.month == month.month
    ]


def total(items: Iterable[Item]) -> int:
    """Balance of the entries: income minus expense."""
    return sum(item.signed_price for item in items)


def format_month(date: _dt.date) -> str:
    return f"{date.year}/{date.month}"


def format_price(price: int) -> str:
    return f"+{price}" if price > 0 else str(price)


def format_table(table: Mapping[_dt.date, int]) -> list[str]:
    """One line per month, in date order."""
    return [
        f"{format_month(date)}の収支は{format_price(price)}円でした"
        for date, price in sorted(table.items())
    ]


def run(file_path) -> None:
    """Print the monthly balance of the stored book."""
    print("家計簿の集計を行います")
    items = storage.load_nonempty(file_path)
    table = {month: total(filter_by_month(items, month)) for month in target_months(items)}
    for line in format_table(table):
        print(line)