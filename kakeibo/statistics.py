"""Yearly and monthly balance statistics."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Callable, Iterable

from kakeibo import storage
from kakeibo.models import Item


def _totals_by(items: Iterable[Item], key: Callable[[Item], int]) -> dict[int, int]:
    totals: defaultdict[int, int] = defaultdict(int)
    for item in items:
        totals[key(item)] += item.signed_price
    return dict(sorted(totals.items()))


def yearly_totals(items: Iterable[Item]) -> dict[int, int]:
    """Balance per year, ordered by year."""
    return _totals_by(items, lambda item: item.year)


def monthly_totals(items: Iterable[Item]) -> dict[int, int]:
    """Balance per calendar month across all years, ordered by month."""
    return _totals_by(items, lambda item: item.month)


def run(file_path) -> None:
    """Print yearly and monthly statistics of the stored book."""
    print("統計情報を表示します")
    items = storage.load_nonempty(file_path)

    print("年ごとの統計情報")
    for year, price in yearly_totals(items).items():
        print(f"{year}年: {price}")

    print("月ごとの統計情報")
    for month, price in monthly_totals(items).items():
        print(f"{month}月: {price}")