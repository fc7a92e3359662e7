from __future__ import annotations

import logging
from typing import Tuple

from PIL import Image

from image_compressor.models.errors import InvalidArgument
from image_compressor.models.image_model import ImageData

logger = logging.getLogger(__name__)


def fit_size(width: int, height: int, max_width: int, max_height: int) -> Tuple[int, int]:
    """
    Размер, при котором (width, height) вписывается в рамку с сохранением пропорций.
    Нулевая граница означает «без ограничения» по этой оси.
    Изображение, уже помещающееся в рамку, не увеличивается.
    """
    if max_width < 0 or max_height < 0:
        raise InvalidArgument(f"Границы размера не могут быть отрицательными: {max_width}x{max_height}")
    bound_w = max_width if max_width > 0 else width
    bound_h = max_height if max_height > 0 else height
    if width <= bound_w and height <= bound_h:
        return width, height

    src_aspect = width / height
    box_aspect = bound_w / bound_h
    if src_aspect > box_aspect:
        new_w = bound_w
        new_h = int(round(bound_w / src_aspect))
    else:
        new_h = bound_h
        new_w = int(round(bound_h * src_aspect))
    return max(1, new_w), max(1, new_h)


class ResizeService:
    def fit(self, image: ImageData, max_width: int = 0, max_height: int = 0) -> ImageData:
        """
        Вписывает изображение в рамку max_width x max_height (Lanczos).
        При (0, 0) возвращает тот же объект без копирования.
        """
        if max_width < 0 or max_height < 0:
            raise InvalidArgument(f"Границы размера не могут быть отрицательными: {max_width}x{max_height}")
        if max_width == 0 and max_height == 0:
            return image

        new_size = fit_size(image.width, image.height, max_width, max_height)
        if new_size == (image.width, image.height):
            return image

        logger.debug(
            "Resizing %s: %dx%d -> %dx%d",
            image.path.name, image.width, image.height, new_size[0], new_size[1],
        )
        resized = image.pil_image.resize(new_size, Image.Resampling.LANCZOS)
        return image.with_image(resized)
