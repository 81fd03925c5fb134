import datetime as dt
import json

import pytest

from kakeibo.models import ExpenseCategory, IncomeCategory, Item
from kakeibo.storage import StorageError, load_nonempty, load_or_create, save


@pytest.fixture
def items():
    return [Item("テスト", IncomeCategory.SALARY, 1000, dt.date(2023, 1, 1))]


def test_load_or_create_existing_file(tmp_path, items):
    path = tmp_path / "test_data.json"
    save(items, path)
    result = load_or_create(path)
    assert len(result) == 1
    assert result[0].name == "テスト"


def test_load_or_create_missing_file(tmp_path, capsys):
    result = load_or_create(tmp_path / "non_existent_file.json")
    assert result == []
    assert "新規ファイルを作成します" in capsys.readouterr().out


def test_load_nonempty_existing_file(tmp_path, items):
    path = tmp_path / "test_data.json"
    save(items, path)
    result = load_nonempty(path)
    assert len(result) == 1
    assert result[0].name == "テスト"


def test_load_nonempty_missing_file(tmp_path):
    with pytest.raises(StorageError, match="ファイルがオープンできませんでした"):
        load_nonempty(tmp_path / "non_existent_file.json")


def test_load_nonempty_empty_data(tmp_path):
    path = tmp_path / "empty_test_data.json"
    save([], path)
    with pytest.raises(StorageError, match="データが存在しません"):
        load_nonempty(path)


def test_save_then_read_back(tmp_path, items, capsys):
    path = tmp_path / "write_test_data.json"
    save(items, path)
    assert "項目の登録が完了しました" in capsys.readouterr().out
    result = load_or_create(path)
    assert len(result) == 1
    assert result[0].name == "テスト"


def test_save_writes_expected_json(tmp_path, items):
    path = tmp_path / "data.json"
    save(items, path)
    text = path.read_text(encoding="utf-8")
    assert text.endswith("\n")
    assert "テスト" in text
    assert json.loads(text) == [
        {
            "name": "テスト",
            "category": {"Income": "Salary"},
            "price": 1000,
            "date": "2023-01-01",
        }
    ]


def test_round_trip_preserves_order_and_values(tmp_path):
    entries = [
        Item("外食", ExpenseCategory.FOOD, 3000, dt.date(2022, 2, 15)),
        Item("ボーナス", IncomeCategory.BONUS, 500000, dt.date(2022, 6, 30)),
        Item("旅行", ExpenseCategory.HOBBY, 100000, dt.date(2022, 1, 30)),
    ]
    path = tmp_path / "data.json"
    save(entries, path)
    assert load_nonempty(path) == entries


@pytest.mark.parametrize(
    "content",
    [
        "not json",
        '{"name": "x"}',
        '[{"name": "x", "category": {"Income": "Nope"}, "price": 1, "date": "2023-01-01"}]',
    ],
)
def test_malformed_file_raises(tmp_path, content):
    path = tmp_path / "bad.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(StorageError, match="デシリアライズに失敗しました"):
        load_or_create(path)
    with pytest.raises(StorageError, match="デシリアライズに失敗しました"):
        load_nonempty(path)


def test_save_to_unopenable_path(tmp_path, items):
    with pytest.raises(StorageError, match="書き込みファイルのオープンに失敗しました"):
        save(items, tmp_path / "missing_dir" / "data.json")