"""Загрузка изображений с диска с учётом EXIF-ориентации.

Принципы:
- SRP: класс отвечает только за декодирование и коррекцию поворота.
- Ошибки метаданных не прерывают загрузку: изображение возвращается без поворота.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Dict, Optional

from PIL import Image, UnidentifiedImageError

from image_compressor.models.errors import DecodeError, ImageIOError
from image_compressor.models.image_model import ImageData
from image_compressor.services.metadata_service import read_orientation

logger = logging.getLogger(__name__)

# Зеркальные варианты (2, 4, 5, 7) намеренно не обрабатываются.
ROTATIONS: Dict[int, Image.Transpose] = {
    3: Image.Transpose.ROTATE_180,
    6: Image.Transpose.ROTATE_270,
    8: Image.Transpose.ROTATE_90,
}


def apply_orientation(image: Image.Image, orientation: int) -> Image.Image:
    """Поворачивает изображение по коду ориентации; прочие коды — без изменений."""
    method = ROTATIONS.get(orientation)
    if method is None:
        return image
    return image.transpose(method)


class ImageService:
    def __init__(self, orientation_reader: Optional[Callable[[Path], int]] = None) -> None:
        self._read_orientation = orientation_reader or read_orientation

    def load_image(self, file_path: str | Path) -> ImageData:
        """Декодирует изображение и применяет EXIF-поворот.

        Args:
            file_path: Путь до файла изображения.

        Returns:
            `ImageData` с повёрнутым `PIL.Image.Image`, размерами и режимом.

        Raises:
            ImageIOError: если путь не существует или файл не читается.
            DecodeError: если файл не распознан как изображение или повреждён.
        """
        path = Path(file_path)
        if not path.exists() or not path.is_file():
            raise ImageIOError(f"Файл не найден: {path}")

        try:
            with Image.open(path) as img:
                img.load()
                pil_image = img
        except UnidentifiedImageError as exc:
            raise DecodeError(f"Файл не является изображением: {path}") from exc
        except (PermissionError, IsADirectoryError) as exc:
            raise ImageIOError(f"Нет доступа к файлу: {path}") from exc
        except (OSError, SyntaxError, ValueError, Image.DecompressionBombError) as exc:
            # truncated/corrupt data surfaces from load() as OSError
            raise DecodeError(f"Не удалось декодировать {path}: {exc}") from exc

        try:
            orientation = self._read_orientation(path)
        except Exception as exc:
            logger.debug("Orientation lookup failed for %s: %s", path, exc)
            orientation = 1
        pil_image = apply_orientation(pil_image, orientation)
        if orientation in ROTATIONS:
            logger.debug("Rotated %s for orientation %d", path.name, orientation)

        width, height = pil_image.size
        try:
            size_bytes: Optional[int] = path.stat().st_size
        except OSError:
            size_bytes = None

        return ImageData(
            path=path,
            pil_image=pil_image,
            width=width,
            height=height,
            mode=pil_image.mode,
            size_bytes=size_bytes,
            orientation=orientation,
        )
