"""Command-line entry point of the account book."""

from __future__ import annotations

import argparse
import re
import sys

from kakeibo import register, statistics, summarize
from kakeibo.storage import StorageError
from kakeibo.validate import validate_service_type

FILE_PATH = "store/data.json"

_UNSIGNED = re.compile(r"\+?[0-9]+")
_U8_MAX = 0xFF

_SERVICES = {
    0: lambda path: register.run(path),
    1: summarize.run,
    2: statistics.run,
}


def _parse_service_type(text: str) -> int:
    text = text.strip()
    if not _UNSIGNED.fullmatch(text) or int(text) > _U8_MAX:
        raise ValueError("数値で入力してください")
    return int(text)


def main(argv=None) -> int:
    """Ask which service to run and run it; return the exit status."""
    parser = argparse.ArgumentParser(prog="kakeibo", description="家計簿")
    parser.add_argument("--file", default=FILE_PATH, help="data file (JSON)")
    args = parser.parse_args(argv)

    print("実行したい内容を入力してください(0: 登録, 1: 集計, 2: 統計)")
    try:
        service_type = _parse_service_type(input())
        validate_service_type(service_type)
        _SERVICES[service_type](args.file)
    except EOFError:
        print("入力がありません", file=sys.stderr)
        return 1
    except (ValueError, StorageError) as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())