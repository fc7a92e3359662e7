"""Иерархия ошибок конвейера сжатия.

Каждая ошибка несёт `kind` — короткую метку, по которой пакетный драйвер
и интерфейс различают причины сбоя без разбора текста сообщения.
"""
from __future__ import annotations


class CompressorError(Exception):
    """Базовая ошибка обработки одного изображения."""
    kind: str = "error"


class ImageIOError(CompressorError, OSError):
    """Источник не читается, каталог назначения не создаётся или файл не пишется."""
    kind = "io"


class DecodeError(CompressorError):
    """Пиксельные данные повреждены или формат не поддерживается."""
    kind = "decode"


class EncodeError(CompressorError):
    """Кодировщик JPEG отверг буфер или упал внутри."""
    kind = "encode"


class InvalidArgument(CompressorError, ValueError):
    """Недопустимый параметр (например, отрицательная граница размера)."""
    kind = "invalid_argument"
