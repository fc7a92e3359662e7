from pathlib import Path

import pytest

from image_compressor.services.metadata_service import read_orientation

from image_factory import save_with_orientation, split_image


@pytest.mark.parametrize("orientation", [1, 2, 3, 6, 8])
def test_reads_orientation_tag(tmp_path: Path, orientation: int) -> None:
    path = save_with_orientation(split_image(), tmp_path / "o.jpg", orientation)
    assert read_orientation(path) == orientation


def test_no_exif_is_normal(tmp_path: Path) -> None:
    path = save_with_orientation(split_image(), tmp_path / "plain.jpg", None)
    assert read_orientation(path) == 1


def test_png_without_metadata_is_normal(tmp_path: Path) -> None:
    path = tmp_path / "plain.png"
    split_image().save(path)
    assert read_orientation(path) == 1


def test_missing_file_is_normal(tmp_path: Path) -> None:
    assert read_orientation(tmp_path / "nope.jpg") == 1


def test_garbage_file_is_normal(tmp_path: Path) -> None:
    path = tmp_path / "garbage.jpg"
    path.write_bytes(b"definitely not an image")
    assert read_orientation(path) == 1


def test_out_of_range_value_is_normal(tmp_path: Path) -> None:
    path = save_with_orientation(split_image(), tmp_path / "bad.jpg", 42)
    assert read_orientation(path) == 1
