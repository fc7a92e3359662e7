"""Кодирование в JPEG с подбором качества под целевой размер.

Размер JPEG монотонно не убывает с ростом качества, поэтому максимальное
допустимое качество ищется бинарным поиском за O(log диапазона) кодирований.
"""
from __future__ import annotations

import io
import logging
from typing import Callable, Optional

from PIL import Image

from image_compressor.models.errors import EncodeError
from image_compressor.models.image_model import EncodedImage

logger = logging.getLogger(__name__)

DEFAULT_QUALITY = 85
MIN_QUALITY = 10
MAX_QUALITY = 95

JPEG_BACKGROUND = (255, 255, 255)

Encoder = Callable[[Image.Image, int], bytes]


def _to_8bit_gray(image: Image.Image) -> Image.Image:
    """Сводит 16/32-битную и float-градацию серого к 8 битам ("L").

    16-битные данные делятся на 256 (берётся старший байт); прочие диапазоны
    растягиваются по экстремумам; float в [0, 1] умножается на 255.
    """
    if image.mode.startswith("I;16"):
        return image.convert("I").point(lambda v: v * (1 / 256)).convert("L")
    lo, hi = image.getextrema()
    if image.mode == "F" and lo >= 0 and hi <= 1.0:
        return image.point(lambda v: v * 255).convert("L")
    if lo >= 0 and hi <= 255:
        return image.convert("L")
    if image.mode == "I" and lo >= 0 and hi <= 65535:
        return image.point(lambda v: v * (1 / 256)).convert("L")
    if hi == lo:
        return Image.new("L", image.size, 0)
    scale = 255.0 / (hi - lo)
    return image.point(lambda v: (v - lo) * scale).convert("L")


def prepare_for_jpeg(image: Image.Image) -> Image.Image:
    """Приводит изображение к режиму, который понимает JPEG (альфа — на белый фон)."""
    if image.mode in ("RGB", "L", "CMYK"):
        return image
    if image.mode == "P":
        image = image.convert("RGBA" if "transparency" in image.info else "RGB")
        if image.mode == "RGB":
            return image
    if image.mode in ("RGBA", "LA", "PA"):
        rgba = image.convert("RGBA")
        background = Image.new("RGB", rgba.size, JPEG_BACKGROUND)
        background.paste(rgba, mask=rgba.getchannel("A"))
        return background
    if image.mode.startswith("I") or image.mode == "F":
        return _to_8bit_gray(image)
    try:
        return image.convert("RGB")
    except ValueError as exc:
        raise EncodeError(f"Режим {image.mode} не конвертируется в RGB: {exc}") from exc


def encode_jpeg(image: Image.Image, quality: int) -> bytes:
    """Кодирует изображение в JPEG с заданным качеством.

    Raises:
        EncodeError: если Pillow отказался кодировать буфер.
    """
    buf = io.BytesIO()
    try:
        image.save(buf, format="JPEG", quality=quality)
    except (OSError, ValueError, KeyError) as exc:
        raise EncodeError(f"Ошибка кодирования JPEG (q={quality}): {exc}") from exc
    return buf.getvalue()


class EncoderService:
    def __init__(self, encoder: Optional[Encoder] = None) -> None:
        self._encode = encoder or encode_jpeg

    def encode(self, image: Image.Image, target_bytes: int = 0) -> EncodedImage:
        """Кодирует изображение: с фиксированным качеством 85 или под целевой размер в байтах."""
        if target_bytes <= 0:
            prepared = prepare_for_jpeg(image)
            return EncodedImage(data=self._encode(prepared, DEFAULT_QUALITY), quality=DEFAULT_QUALITY)
        return self.find_quality_for_target(image, target_bytes)

    def find_quality_for_target(self, image: Image.Image, target_bytes: int) -> EncodedImage:
        """Бинарный поиск наибольшего качества из [10, 95], дающего не больше target_bytes.

        Если даже качество 10 не укладывается в цель, возвращается кодирование
        с качеством 10 независимо от размера. Ошибка кодирования прерывает поиск.
        """
        image = prepare_for_jpeg(image)
        lo, hi = MIN_QUALITY, MAX_QUALITY
        best: Optional[EncodedImage] = None

        while lo <= hi:
            mid = (lo + hi) // 2
            data = self._encode(image, mid)
            fits = len(data) <= target_bytes
            logger.debug("q=%d -> %d bytes (target %d, %s)", mid, len(data), target_bytes, "fits" if fits else "too big")
            if fits:
                best = EncodedImage(data=data, quality=mid)
                lo = mid + 1
            else:
                hi = mid - 1

        if best is None:
            logger.info("Target %d bytes unreachable, falling back to q=%d", target_bytes, MIN_QUALITY)
            return EncodedImage(data=self._encode(image, MIN_QUALITY), quality=MIN_QUALITY, fell_back=True)
        return best
