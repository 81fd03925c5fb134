"""Household account book entries and their categories."""

from __future__ import annotations

import datetime as _dt
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

INVALID_CATEGORY_MESSAGE = "不正なカテゴリ種別です"
_MAX_PRICE = 0xFFFFFFFF


class IncomeCategory(Enum):
    SALARY = "Salary"
    BONUS = "Bonus"
    OTHER = "Other"


class ExpenseCategory(Enum):
    FOOD = "Food"
    HOBBY = "Hobby"
    OTHER = "Other"


Category = Union[IncomeCategory, ExpenseCategory]

_INCOME_CHOICES = (IncomeCategory.SALARY, IncomeCategory.BONUS, IncomeCategory.OTHER)
_EXPENSE_CHOICES = (ExpenseCategory.FOOD, ExpenseCategory.HOBBY, ExpenseCategory.OTHER)

_KIND_BY_CLASS = {IncomeCategory: "Income", ExpenseCategory: "Expense"}
_CLASS_BY_KIND = {kind: cls for cls, kind in _KIND_BY_CLASS.items()}


def get_category(register_type: int, category_type: int) -> Category:
    """Map the register type (0: income, other: expense) and a category number."""
    choices = _INCOME_CHOICES if register_type == 0 else _EXPENSE_CHOICES
    if not 0 <= category_type < len(choices):
        raise ValueError(INVALID_CATEGORY_MESSAGE)
    return choices[category_type]


@dataclass(frozen=True)
class Item:
    """One income or expense entry."""

    name: str
    category: Category
    price: int
    date: _dt.date

    def __post_init__(self) -> None:
        if not isinstance(self.category, (IncomeCategory, ExpenseCategory)):
            raise TypeError(f"invalid category: {self.category!r}")
        if isinstance(self.price, bool) or not isinstance(self.price, int):
            raise TypeError(f"price must be an integer, got {self.price!r}")
        if not 0 <= self.price <= _MAX_PRICE:
            raise ValueError(f"price out of range: {self.price}")

    @property
    def year(self) -> int:
        return self.date.year

    @property
    def month(self) -> int:
        return self.date.month

    @property
    def first_day(self) -> _dt.date:
        """The first day of the month the entry belongs to."""
        return self.date.replace(day=1)

    @property
    def signed_price(self) -> int:
        """The price counted positive for income and negative for expense."""
        if isinstance(self.category, IncomeCategory):
            return self.price
        return -self.price

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "category": {_KIND_BY_CLASS[type(self.category)]: self.category.value},
            "price": self.price,
            "date": self.date.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Item:
        """Build an item from its stored form; raise ValueError if malformed."""
        try:
            name = data["name"]
            raw_category = data["category"]
            price = data["price"]
            raw_date = data["date"]
            if not isinstance(name, str):
                raise ValueError(f"name must be a string: {name!r}")
            if not isinstance(raw_category, dict) or len(raw_category) != 1:
                raise ValueError(f"malformed category: {raw_category!r}")
            ((kind, value),) = raw_category.items()
            category = _CLASS_BY_KIND[kind](value)
            if not isinstance(raw_date, str):
                raise ValueError(f"date must be a string: {raw_date!r}")
            date = _dt.date.fromisoformat(raw_date)
            return cls(name=name, category=category, price=price, date=date)
        except (KeyError, TypeError, AttributeError) as exc:
            raise ValueError(f"malformed item: {data!r}") from exc