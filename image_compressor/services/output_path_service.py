"""Подбор имени выходного файла без перезаписи существующих.

Проверка «существует → используем» не атомарна: предполагается один писатель.
"""
from __future__ import annotations

from pathlib import Path

from image_compressor.models.errors import ImageIOError

MAX_DISAMBIGUATION_ATTEMPTS = 10_000


def unique_output_path(path: str | Path, max_attempts: int = MAX_DISAMBIGUATION_ATTEMPTS) -> Path:
    """Возвращает `path`, если он свободен, иначе `"name (n).ext"` с наименьшим свободным n.

    Raises:
        ImageIOError: если за `max_attempts` попыток свободное имя не нашлось.
    """
    path = Path(path)
    if not path.exists():
        return path

    stem, suffix = path.stem, path.suffix
    for counter in range(1, max_attempts + 1):
        candidate = path.with_name(f"{stem} ({counter}){suffix}")
        if not candidate.exists():
            return candidate
    raise ImageIOError(f"Не найдено свободное имя для {path} за {max_attempts} попыток")


def output_path_for(source: str | Path, destination_dir: str | Path) -> Path:
    """Кандидат `{имя исходника}.jpg` в каталоге назначения (ещё без разрешения коллизий)."""
    return Path(destination_dir) / f"{Path(source).stem}.jpg"
