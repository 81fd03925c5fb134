import datetime as dt

import pytest

from kakeibo import storage, summarize
from kakeibo.models import ExpenseCategory, IncomeCategory, Item
from kakeibo.storage import StorageError


def sample_items():
    return [
        Item("新年会", ExpenseCategory.FOOD, 5000, dt.date(2022, 1, 10)),
        Item("給料", IncomeCategory.SALARY, 300000, dt.date(2022, 1, 20)),
        Item("外食", ExpenseCategory.FOOD, 3000, dt.date(2022, 2, 15)),
        Item("歓迎会", ExpenseCategory.OTHER, 10000, dt.date(2022, 4, 15)),
        Item("旅行", ExpenseCategory.HOBBY, 100000, dt.date(2022, 1, 30)),
    ]


def test_target_months():
    assert summarize.target_months(sample_items()) == [
        dt.date(2022, 1, 1),
        dt.date(2022, 2, 1),
        dt.date(2022, 4, 1),
    ]


def test_filter_by_month():
    result = summarize.filter_by_month(sample_items(), dt.date(2022, 1, 1))
    assert len(result) == 3
    for item in result:
        assert item.year == 2022
        assert item.month == 1


def test_filter_by_month_empty():
    assert summarize.filter_by_month(sample_items(), dt.date(2023, 1, 1)) == []


def test_total():
    filtered = summarize.filter_by_month(sample_items(), dt.date(2022, 1, 1))
    assert summarize.total(filtered) == 195000


def test_total_empty():
    assert summarize.total([]) == 0


def test_format_month():
    assert summarize.format_month(dt.date(2023, 5, 15)) == "2023/5"


@pytest.mark.parametrize(
    "price, expected", [(1000, "+1000"), (-1000, "-1000"), (0, "0")]
)
def test_format_price(price, expected):
    assert summarize.format_price(price) == expected


def test_format_table():
    table = {dt.date(2023, 2, 1): -500, dt.date(2023, 1, 1): 1000}
    assert summarize.format_table(table) == [
        "2023/1の収支は+1000円でした",
        "2023/2の収支は-500円でした",
    ]


def test_run_prints(tmp_path, capsys):
    path = tmp_path / "data.json"
    storage.save(sample_items(), path)
    capsys.readouterr()
    summarize.run(path)
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "家計簿の集計を行います",
        "2022/1の収支は+195000円でした",
        "2022/2の収支は-3000円でした",
        "2022/4の収支は-10000円でした",
    ]


def test_run_empty_book(tmp_path):
    path = tmp_path / "data.json"
    storage.save([], path)
    with pytest.raises(StorageError, match="データが存在しません"):
        summarize.run(path)