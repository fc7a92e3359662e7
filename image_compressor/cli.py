"""Консольный фронтенд конвейера сжатия.

Примеры:

    image-compressor-cli photos/ -o out/ --target-kb 200
    image-compressor-cli a.jpg b.png -o out/ --max-width 1920 --max-height 1080
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from image_compressor.models.compression_model import CompressionResult
from image_compressor.models.errors import InvalidArgument
from image_compressor.services.batch_service import BatchService, expand_inputs
from image_compressor.utils.logging_setup import configure_logging
from image_compressor.utils.settings import load_config

logger = logging.getLogger(__name__)


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"ожидалось целое число: {value!r}") from exc
    if number < 0:
        raise argparse.ArgumentTypeError(f"значение не может быть отрицательным: {number}")
    return number


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Сжатие изображений в JPEG с подбором качества под целевой размер."
    )
    parser.add_argument("inputs", nargs="+", help="Файлы и/или папки (обходятся рекурсивно)")
    parser.add_argument("--output", "-o", help="Папка для результатов (по умолчанию из конфига)")
    parser.add_argument(
        "--target-kb",
        "-t",
        type=_non_negative_int,
        default=None,
        help="Целевой размер в КБ; 0 — обычный JPEG с качеством 85",
    )
    parser.add_argument("--max-width", "-W", type=_non_negative_int, default=None, help="Максимальная ширина, px (0 — без ограничения)")
    parser.add_argument("--max-height", "-H", type=_non_negative_int, default=None, help="Максимальная высота, px (0 — без ограничения)")
    parser.add_argument("--config", "-c", help="Путь к YAML-конфигу")
    parser.add_argument("--verbose", "-v", action="store_true", help="Подробный лог (DEBUG)")
    return parser.parse_args(argv)


def _print_progress(done: int, total: int, result: CompressionResult) -> None:
    print(f"[{done}/{total}] {result.summary()}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    try:
        settings = load_config(args.config)
    except (FileNotFoundError, InvalidArgument) as exc:
        print(f"Ошибка конфигурации: {exc}", file=sys.stderr)
        return 2

    configure_logging("DEBUG" if args.verbose else settings.log_level)

    output_dir = Path(args.output) if args.output else settings.output_dir
    if output_dir is None:
        print("Не задана папка для результатов (--output)", file=sys.stderr)
        return 2

    target_kb = settings.target_size_kb if args.target_kb is None else args.target_kb
    max_width = settings.max_width if args.max_width is None else args.max_width
    max_height = settings.max_height if args.max_height is None else args.max_height

    images = expand_inputs(args.inputs)
    if not images:
        print("Изображения не найдены.", file=sys.stderr)
        return 1

    logger.info("Processing %d image(s) into %s", len(images), output_dir)
    results: List[CompressionResult] = BatchService().run(
        images,
        output_dir,
        target_size_kb=target_kb,
        max_width=max_width,
        max_height=max_height,
        on_progress=_print_progress,
    )
    failed = sum(1 for r in results if not r.ok)
    print(f"Готово: {len(results) - failed} успешно, {failed} с ошибками.")
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
