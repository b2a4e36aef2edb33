#!/usr/bin/env python3
"""
Отладочный разбор строк товаров.

Использование:
    # Разобрать файл (одна строка - один товар)
    python scripts/parse_items.py path/to/items.txt

    # Разобрать stdin
    echo "ABC123; Tomate; 10; kg" | python scripts/parse_items.py

    # Режим списания: строка "motivo: ..." и не больше 3 знаков после запятой
    python scripts/parse_items.py items.txt --wastage
"""

import sys
import argparse
import json
from pathlib import Path

from loguru import logger

# Добавляем корень проекта в путь
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config.settings import DEFAULT_LOCALE, QUANTITY_MAX_DECIMAL_PLACES
from koabot.parsing.application.factory import ParsingComponentFactory
from koabot.parsing.domain.exceptions import ParsingError


def main() -> int:
    parser = argparse.ArgumentParser(description="Разбор строк товаров в JSON")
    parser.add_argument("file", nargs="?", type=Path, help="Файл со строками (по умолчанию stdin)")
    parser.add_argument("--locale", default=DEFAULT_LOCALE, help="Код локали")
    parser.add_argument("--wastage", action="store_true", help="Режим списания (motivo:, точность количества)")
    parser.add_argument("--verbose", action="store_true", help="DEBUG логи")
    args = parser.parse_args()

    logger.remove()
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>",
        level="DEBUG" if args.verbose else "WARNING",
    )

    if args.file:
        text = args.file.read_text(encoding="utf-8")
    else:
        text = sys.stdin.read()

    line_parser = ParsingComponentFactory.create_item_line_parser(args.locale)
    batch_parser = ParsingComponentFactory.create_batch_parser(
        line_parser=line_parser,
        allow_reason_directive=args.wastage,
        max_decimal_places=QUANTITY_MAX_DECIMAL_PLACES if args.wastage else None,
    )

    try:
        batch = batch_parser.parse(text)
    except ParsingError as e:
        logger.debug(e.describe())
        print(f"[ERROR] {e.message}", file=sys.stderr)
        return 1

    print(json.dumps(batch.model_dump(mode="json", exclude_none=True), ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
