from pathlib import Path

import pytest

from image_compressor.models.errors import ImageIOError
from image_compressor.services.output_path_service import output_path_for, unique_output_path


def test_free_path_returned_unchanged(tmp_path: Path) -> None:
    assert unique_output_path(tmp_path / "photo.jpg") == tmp_path / "photo.jpg"


def test_disambiguates_with_counter(tmp_path: Path) -> None:
    (tmp_path / "photo.jpg").write_bytes(b"1")
    assert unique_output_path(tmp_path / "photo.jpg") == tmp_path / "photo (1).jpg"

    (tmp_path / "photo (1).jpg").write_bytes(b"2")
    assert unique_output_path(tmp_path / "photo.jpg") == tmp_path / "photo (2).jpg"


def test_fills_first_gap(tmp_path: Path) -> None:
    for name in ("photo.jpg", "photo (1).jpg", "photo (3).jpg"):
        (tmp_path / name).write_bytes(b"")
    assert unique_output_path(tmp_path / "photo.jpg") == tmp_path / "photo (2).jpg"


def test_existing_directory_counts_as_taken(tmp_path: Path) -> None:
    (tmp_path / "photo.jpg").mkdir()
    assert unique_output_path(tmp_path / "photo.jpg").name == "photo (1).jpg"


def test_gives_up_after_max_attempts(tmp_path: Path) -> None:
    (tmp_path / "a.jpg").write_bytes(b"")
    for n in range(1, 4):
        (tmp_path / f"a ({n}).jpg").write_bytes(b"")
    with pytest.raises(ImageIOError):
        unique_output_path(tmp_path / "a.jpg", max_attempts=3)


def test_output_name_always_jpg(tmp_path: Path) -> None:
    assert output_path_for(Path("in/shot.png"), tmp_path) == tmp_path / "shot.jpg"
    assert output_path_for("in/archive.v2.tiff", tmp_path) == tmp_path / "archive.v2.jpg"
