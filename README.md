# kakeibo

A household account book (家計簿) for the terminal. You record income and
expense items. The tool then shows the balance for each month and totals by
year and by calendar month.

Items are kept as JSON, by default in `store/data.json`, relative to the
directory you run the command from. The `store` directory must already exist
before the first item can be saved.

## Installation

```
pip install .
```

## Usage

```
kakeibo
kakeibo --file path/to/data.json
```

The `--file` option names a different data file. The command then reads the
task to run from standard input:

- `0` — 登録 (register): record a new item. You are asked for:
  - its type (0: income, 1: expense)
  - its name
  - its category. Income: 0 salary, 1 bonus, 2 other. Expense: 0 food, 1 hobby, 2 other.
  - its price, a whole number from 0 to 4294967295
  - its date, as `yyyy-mm-dd`

  The new item is added to the items already stored. If the data file cannot
  be opened, the tool starts a new list.
- `1` — 集計 (summary): print the balance of every month that has items, in
  date order, for example `2022/1の収支は+195000円でした`.
- `2` — 統計 (statistics): print totals per year, then totals per calendar
  month summed across years.

Income counts as positive and expenses as negative in every total.

The command exits with status 0 on success. It prints a message to standard
error and exits with status 1 in these cases:

- an unknown task, or a task that is not a number
- an unknown item type or category
- a price that is not a whole number in range
- a date in the wrong format
- input that ends too early
- a data file that cannot be read or parsed
- a summary or statistics run with no stored data

## Use as a library

```python
from kakeibo import statistics, storage, summarize

items = storage.load_nonempty("store/data.json")

table = {
    month: summarize.total(summarize.filter_by_month(items, month))
    for month in summarize.target_months(items)
}
for line in summarize.format_table(table):
    print(line)

print(statistics.yearly_totals(items))   # {year: balance}
print(statistics.monthly_totals(items))  # {month: balance}
```

The modules are:

- `kakeibo.models`: `Item` (name, category, price, date), with `year`,
  `month`, `first_day` and `signed_price`. It also holds `IncomeCategory`,
  `ExpenseCategory` and `get_category(register_type, category_type)`.
- `kakeibo.storage`: `load_or_create`, `load_nonempty` and `save`. Failures
  raise `StorageError`.
- `kakeibo.validate`: checks for the numeric menu choices. A choice out of
  range raises `InvalidInputError`.
- `kakeibo.register`: the interactive prompts. Each `read_*` function and
  `run(file_path, ask)` take an `ask` callable that receives a prompt and
  returns the answer. `run` returns the new `Item`.
- `kakeibo.summarize` and `kakeibo.statistics`: monthly and yearly totals,
  plus the `run(file_path)` functions used by the command.
- `kakeibo.cli`: `main(argv=None)`, the command.

## What it does not do

Items can only be added. There is no way to edit or delete a stored item
except by editing the JSON file by hand. Totals cannot be narrowed to a
category or to a range of dates.

## Running the tests

```
pip install .[test]
pytest
```