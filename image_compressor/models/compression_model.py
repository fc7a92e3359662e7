"""Запрос и результат сжатия одного файла."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class CompressionRequest:
    """Параметры обработки одного файла.

    Fields:
        source_path: Исходное изображение.
        destination_dir: Каталог для результата (создаётся при необходимости).
        target_size_kb: Целевой размер в КБ; 0 — фиксированное качество.
        max_width: Максимальная ширина; 0 — без ограничения.
        max_height: Максимальная высота; 0 — без ограничения.
    """
    source_path: Path
    destination_dir: Path
    target_size_kb: int = 0
    max_width: int = 0
    max_height: int = 0

    @property
    def target_bytes(self) -> int:
        return self.target_size_kb * 1024


@dataclass(frozen=True)
class CompressionResult:
    """Итог обработки: либо успех, либо ошибка — частичных результатов нет."""
    source_path: Path
    ok: bool
    output_path: Optional[Path] = None
    bytes_written: int = 0
    quality: Optional[int] = None  # None, если целевой размер не задан
    width: int = 0
    height: int = 0
    error_kind: Optional[str] = None
    message: Optional[str] = None

    @classmethod
    def success(
        cls,
        source_path: Path,
        output_path: Path,
        bytes_written: int,
        quality: Optional[int],
        width: int,
        height: int,
    ) -> "CompressionResult":
        return cls(
            source_path=source_path,
            ok=True,
            output_path=output_path,
            bytes_written=bytes_written,
            quality=quality,
            width=width,
            height=height,
        )

    @classmethod
    def failure(cls, source_path: Path, error_kind: str, message: str) -> "CompressionResult":
        return cls(source_path=source_path, ok=False, error_kind=error_kind, message=message)

    def summary(self) -> str:
        """Однострочный статус для строки состояния и консоли."""
        if not self.ok:
            return f"Ошибка [{self.error_kind}] {self.source_path}: {self.message}"
        size_kb = self.bytes_written // 1024
        if self.quality is None:
            return f"OK {self.source_path} -> {self.output_path} ({size_kb}KB)"
        return f"OK {self.source_path} -> {self.output_path} (q={self.quality}, {size_kb}KB)"
