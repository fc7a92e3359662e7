"""Конвейер сжатия одного файла: загрузка → поворот → вписывание → кодирование → запись.

Принципы:
- Чистая функция явных входов: никакого общего состояния между вызовами.
- Ошибка обработки возвращается как `CompressionResult.failure`, а не пробрасывается.
- Либо записан полный файл, либо ничего: запись идёт через временный файл.
"""
from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Optional

from image_compressor.models.compression_model import CompressionRequest, CompressionResult
from image_compressor.models.errors import CompressorError, ImageIOError, InvalidArgument
from image_compressor.services.encoder_service import EncoderService
from image_compressor.services.image_service import ImageService
from image_compressor.services.output_path_service import output_path_for, unique_output_path
from image_compressor.services.resize_service import ResizeService

logger = logging.getLogger(__name__)


def _validate(request: CompressionRequest) -> None:
    if request.max_width < 0 or request.max_height < 0:
        raise InvalidArgument(
            f"Границы размера не могут быть отрицательными: {request.max_width}x{request.max_height}"
        )


def _ensure_dir(directory: Path) -> None:
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise ImageIOError(f"Не удалось создать каталог {directory}: {exc}") from exc


def write_atomically(path: Path, data: bytes) -> None:
    """Пишет данные во временный файл рядом с `path` и переименовывает его."""
    try:
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.stem}.", suffix=".part")
    except OSError as exc:
        raise ImageIOError(f"Не удалось записать {path}: {exc}") from exc
    try:
        with os.fdopen(fd, "wb") as fh:
            fh.write(data)
        os.chmod(tmp_name, 0o644)
        os.replace(tmp_name, path)
    except OSError as exc:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        raise ImageIOError(f"Не удалось записать {path}: {exc}") from exc


class CompressService:
    def __init__(
        self,
        image_service: Optional[ImageService] = None,
        resize_service: Optional[ResizeService] = None,
        encoder_service: Optional[EncoderService] = None,
    ) -> None:
        self._image_service = image_service or ImageService()
        self._resize_service = resize_service or ResizeService()
        self._encoder_service = encoder_service or EncoderService()

    def compress(self, request: CompressionRequest) -> CompressionResult:
        """Обрабатывает один запрос; ошибки конвейера превращаются в результат-отказ."""
        try:
            return self._run(request)
        except CompressorError as exc:
            logger.warning("Failed %s [%s]: %s", request.source_path, exc.kind, exc)
            return CompressionResult.failure(request.source_path, exc.kind, str(exc))

    def _run(self, request: CompressionRequest) -> CompressionResult:
        _validate(request)
        image = self._image_service.load_image(request.source_path)
        image = self._resize_service.fit(image, request.max_width, request.max_height)

        destination_dir = Path(request.destination_dir)
        _ensure_dir(destination_dir)

        encoded = self._encoder_service.encode(image.pil_image, request.target_bytes)
        output_path = unique_output_path(output_path_for(request.source_path, destination_dir))
        write_atomically(output_path, encoded.data)

        result = CompressionResult.success(
            source_path=request.source_path,
            output_path=output_path,
            bytes_written=encoded.size,
            quality=encoded.quality if request.target_size_kb > 0 else None,
            width=image.width,
            height=image.height,
        )
        logger.info("%s", result.summary())
        return result


def compress(
    source_path: str | Path,
    destination_dir: str | Path,
    target_size_kb: int = 0,
    max_width: int = 0,
    max_height: int = 0,
) -> CompressionResult:
    """Точка входа конвейера для любого фронтенда (GUI, CLI, сервис)."""
    request = CompressionRequest(
        source_path=Path(source_path),
        destination_dir=Path(destination_dir),
        target_size_kb=target_size_kb,
        max_width=max_width,
        max_height=max_height,
    )
    return CompressService().compress(request)
