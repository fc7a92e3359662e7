"""Чтение EXIF-ориентации без декодирования пикселей.

Отсутствие метаданных — обычный случай, а не ошибка: при любом сбое
возвращается ориентация 1 («без поворота»).
"""
from __future__ import annotations

import logging
from pathlib import Path

from PIL import Image

from image_compressor.models.image_model import ORIENTATION_NORMAL

logger = logging.getLogger(__name__)

EXIF_ORIENTATION_TAG = 0x0112


def read_orientation(file_path: str | Path) -> int:
    """Возвращает EXIF-ориентацию файла (1..8) или 1, если её нет.

    `Image.open` ленивый: читается только заголовок контейнера.
    """
    try:
        with Image.open(file_path) as img:
            value = img.getexif().get(EXIF_ORIENTATION_TAG)
    except Exception as exc:  # любой сбой метаданных деградирует до «без поворота»
        logger.debug("No orientation for %s: %s", file_path, exc)
        return ORIENTATION_NORMAL

    if value is None:
        return ORIENTATION_NORMAL
    try:
        orientation = int(value)
    except (TypeError, ValueError):
        logger.debug("Malformed orientation %r in %s", value, file_path)
        return ORIENTATION_NORMAL
    if not 1 <= orientation <= 8:
        logger.debug("Out-of-range orientation %d in %s", orientation, file_path)
        return ORIENTATION_NORMAL
    return orientation
