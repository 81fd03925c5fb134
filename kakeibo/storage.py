"""Reading and writing the account book as a JSON file."""

from __future__ import annotations

import json
import os
from collections.abc import Iterable

from kakeibo.models import Item

_PathLike = str | os.PathLike


class StorageError(Exception):
    """Raised when the account book file cannot be read or written."""


def _parse(text: str) -> list[Item]:
    try:
        raw = json.loads(text)
        if not isinstance(raw, list):
            raise ValueError("top-level value must be a list")
        return [Item.from_dict(entry) for entry in raw]
    except ValueError as exc:
        raise StorageError("デシリアライズに失敗しました") from exc


def load_or_create(file_path: _PathLike) -> list[Item]:
    """Load the items, or start an empty list when the file cannot be opened."""
    try:
        with open(file_path, encoding="utf-8") as handle:
            text = handle.read()
    except OSError:
        print("新規ファイルを作成します")
        return []
    return _parse(text)


def load_nonempty(file_path: _PathLike) -> list[Item]:
    """Load the items; raise StorageError if the file is missing or empty of data."""
    try:
        with open(file_path, encoding="utf-8") as handle:
            text = handle.read()
    except OSError as exc:
        raise StorageError("ファイルがオープンできませんでした") from exc
    items = _parse(text)
    if not items:
        raise StorageError("データが存在しません")
    return items


def save(items: Iterable[Item], file_path: _PathLike) -> None:
    """Write the items as pretty-printed JSON, replacing the file."""
    text = json.dumps([item.to_dict() for item in items], ensure_ascii=False, indent=2)
    try:
        handle = open(file_path, "w", encoding="utf-8")
    except OSError as exc:
        raise StorageError("書き込みファイルのオープンに失敗しました") from exc
    try:
        with handle:
            handle.write(text + "\n")
    except OSError as exc:
        raise StorageError("ファイルへの書き込みに失敗しました") from exc
    print("項目の登録が完了しました")