"""Interactive registration of a new income or expense entry."""

from __future__ import annotations

import datetime as _dt
import re
from collections.abc import Callable

from kakeibo import storage
from kakeibo.models import Item, get_category
from kakeibo.validate import validate_category_type, validate_register_type

Ask = Callable[[str], str]

_UNSIGNED = re.compile(r"\+?[0-9]+")
_DATE = re.compile(r"([0-9]{4})-([0-9]{1,2})-([0-9]{1,2})")
_U8_MAX = 0xFF
_U32_MAX = 0xFFFFFFFF

_DATE_FORMAT_MESSAGE = "日付はyyyy-mm-ddの形式で入力してください"


def _prompt(message: str) -> str:
    print(message)
    return input()


def _parse_unsigned(text: str, limit: int, message: str) -> int:
    text = text.strip()
    if not _UNSIGNED.fullmatch(text):
        raise ValueError(message)
    value = int(text)
    if value > limit:
        raise ValueError(message)
    return value


def read_register_type(ask: Ask = _prompt) -> int:
    """Ask for 0 (income) or 1 (expense)."""
    answer = ask("登録種別を入力してください(0: 収入, 1: 支出)")
    register_type = _parse_unsigned(answer, _U8_MAX, "登録種別は数値で入力してください")
    validate_register_type(register_type)
    return register_type


def read_name(ask: Ask = _prompt) -> str:
    """Ask for the name of the entry."""
    return ask("品目名を入力してください").strip()


def read_category_type(ask: Ask = _prompt, register_type: int = 0) -> int:
    """Ask for a category number suited to the register type."""
    if register_type == 0:
        choices = "(0:給与, 1:ボーナス, 2:その他)"
    else:
        choices = "(0:食費, 1:趣味, 2:その他)"
    answer = ask(f"カテゴリーを入力してください\n{choices}")
    category_type = _parse_unsigned(answer, _U8_MAX, "カテゴリーは数値で入力してください")
    validate_category_type(register_type, category_type)
    return category_type


def read_price(ask: Ask = _prompt) -> int:
    """Ask for a non-negative amount."""
    answer = ask("金額を入力してください")
    return _parse_unsigned(answer, _U32_MAX, "金額は数値で入力してください")


def read_date(ask: Ask = _prompt) -> _dt.date:
    """Ask for a date in yyyy-mm-dd form."""
    answer = ask("日付を入力してください(yyyy-mm-dd)").strip()
    match = _DATE.fullmatch(answer)
    if match is None:
        raise ValueError(_DATE_FORMAT_MESSAGE)
    year, month, day = (int(part) for part in match.groups())
    try:
        return _dt.date(year, month, day)
    except ValueError as exc:
        raise ValueError(_DATE_FORMAT_MESSAGE) from exc


def run(file_path, ask: Ask = _prompt) -> Item:
    """Ask for a new entry, append it to the book and return it."""
    print("収支の登録を行います")
    register_type = read_register_type(ask)
    name = read_name(ask)
    category_type = read_category_type(ask, register_type)
    price = read_price(ask)
    date = read_date(ask)
    category = get_category(register_type, category_type)

    item = Item(name=name, category=category, price=price, date=date)
    print(item)

    items = storage.load_or_create(file_path)
    items.append(item)
    storage.save(items, file_path)
    return item