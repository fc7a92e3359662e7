"""Поиск входных изображений и последовательная пакетная обработка.

Файлы обрабатываются строго по одному, в порядке списка. Сбой одного
элемента фиксируется в его результате и не прерывает пакет.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Callable, Iterable, List, Optional

from image_compressor.models.compression_model import CompressionRequest, CompressionResult
from image_compressor.services.compress_service import CompressService

logger = logging.getLogger(__name__)

# Сравнение расширений регистрозависимое: "PHOTO.JPG" не подходит.
IMAGE_EXTENSIONS = frozenset({".jpg", ".jpeg", ".png", ".webp", ".bmp", ".tiff"})

ProgressCallback = Callable[[int, int, CompressionResult], None]


def is_image_file(path: str | Path) -> bool:
    return Path(path).suffix in IMAGE_EXTENSIONS


def list_images(root: str | Path) -> List[Path]:
    """Рекурсивно собирает изображения под `root`, отсортированные лексикографически."""
    files: List[str] = []
    for dirpath, _dirnames, filenames in os.walk(root):
        for name in filenames:
            if is_image_file(name):
                files.append(os.path.join(dirpath, name))
    files.sort()
    return [Path(f) for f in files]


def expand_inputs(paths: Iterable[str | Path]) -> List[Path]:
    """Раскрывает каталоги в списки изображений; прочие пути передаются как есть."""
    images: List[Path] = []
    for raw in paths:
        path = Path(raw)
        if path.is_dir():
            images.extend(list_images(path))
        else:
            images.append(path)
    return images


class BatchService:
    def __init__(self, compress_service: Optional[CompressService] = None) -> None:
        self._compress_service = compress_service or CompressService()

    def run(
        self,
        sources: Iterable[str | Path],
        destination_dir: str | Path,
        target_size_kb: int = 0,
        max_width: int = 0,
        max_height: int = 0,
        on_progress: Optional[ProgressCallback] = None,
        should_stop: Optional[Callable[[], bool]] = None,
    ) -> List[CompressionResult]:
        """Обрабатывает файлы по очереди и возвращает по одному результату на файл.

        `on_progress(done, total, result)` вызывается после каждого элемента.
        `should_stop()` проверяется только между элементами.
        """
        items = list(sources)
        total = len(items)
        results: List[CompressionResult] = []
        for index, source in enumerate(items, start=1):
            if should_stop is not None and should_stop():
                logger.info("Batch stopped after %d of %d items", index - 1, total)
                break
            request = CompressionRequest(
                source_path=Path(source),
                destination_dir=Path(destination_dir),
                target_size_kb=target_size_kb,
                max_width=max_width,
                max_height=max_height,
            )
            try:
                result = self._compress_service.compress(request)
            except Exception as exc:
                logger.exception("Unexpected failure on %s", source)
                result = CompressionResult.failure(Path(source), "internal", str(exc))
            results.append(result)
            if on_progress is not None:
                on_progress(index, total, result)

        failed = sum(1 for r in results if not r.ok)
        logger.info("Batch finished: %d ok, %d failed", len(results) - failed, failed)
        return results
