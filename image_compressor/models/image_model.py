"""Модели данных для изображений.

Принципы:
- SRP: только структура данных, без логики обработки.
- Чистый код: неизменяемость (`frozen=True`) для предсказуемости.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional

from PIL import Image

ORIENTATION_NORMAL = 1


@dataclass(frozen=True)
class ImageData:
    """Неизменяемая модель декодированного изображения и его метаданные.

    Fields:
        path: Путь к исходному файлу.
        pil_image: Декодированное (и уже повёрнутое) изображение PIL.
        width: Ширина, px.
        height: Высота, px.
        mode: Режим PIL, например "RGB".
        size_bytes: Размер исходного файла, если доступен.
        orientation: EXIF-ориентация, прочитанная при загрузке.
    """
    path: Path
    pil_image: Image.Image
    width: int
    height: int
    mode: str
    size_bytes: Optional[int]
    orientation: int = ORIENTATION_NORMAL

    def with_image(self, pil_image: Image.Image) -> "ImageData":
        """Возвращает копию модели с другим пиксельным буфером."""
        width, height = pil_image.size
        return replace(self, pil_image=pil_image, width=width, height=height, mode=pil_image.mode)


@dataclass(frozen=True)
class EncodedImage:
    """Результат кодирования: байты JPEG и качество, которым они получены."""
    data: bytes
    quality: int
    fell_back: bool = False

    @property
    def size(self) -> int:
        return len(self.data)
