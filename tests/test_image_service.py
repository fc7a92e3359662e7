from pathlib import Path

import pytest
from PIL import Image

from image_compressor.models.errors import DecodeError, ImageIOError
from image_compressor.services.image_service import ImageService, apply_orientation

from image_factory import BLUE, RED, is_close, save_with_orientation, split_image


@pytest.mark.parametrize(
    "orientation, method",
    [
        (3, Image.Transpose.ROTATE_180),
        (6, Image.Transpose.ROTATE_270),
        (8, Image.Transpose.ROTATE_90),
    ],
)
def test_apply_orientation_rotates(orientation: int, method: Image.Transpose) -> None:
    img = split_image()
    rotated = apply_orientation(img, orientation)
    assert rotated.tobytes() == img.transpose(method).tobytes()
    assert rotated.size == img.transpose(method).size


@pytest.mark.parametrize("orientation", [1, 2, 4, 5, 7, 0, 99])
def test_apply_orientation_leaves_other_codes(orientation: int) -> None:
    img = split_image()
    assert apply_orientation(img, orientation) is img


def test_load_plain_image(tmp_path: Path) -> None:
    path = tmp_path / "plain.png"
    split_image().save(path)
    data = ImageService().load_image(path)
    assert (data.width, data.height) == (40, 20)
    assert data.orientation == 1
    assert data.size_bytes == path.stat().st_size
    assert data.pil_image.getpixel((5, 10)) == RED


def test_load_orientation_6_turns_clockwise(tmp_path: Path) -> None:
    path = save_with_orientation(split_image(), tmp_path / "o6.jpg", 6)
    data = ImageService().load_image(path)
    assert (data.width, data.height) == (20, 40)
    # left (red) half ends up on top
    assert is_close(data.pil_image.getpixel((10, 5)), RED)
    assert is_close(data.pil_image.getpixel((10, 35)), BLUE)


def test_load_orientation_8_turns_counter_clockwise(tmp_path: Path) -> None:
    path = save_with_orientation(split_image(), tmp_path / "o8.jpg", 8)
    data = ImageService().load_image(path)
    assert (data.width, data.height) == (20, 40)
    assert is_close(data.pil_image.getpixel((10, 5)), BLUE)
    assert is_close(data.pil_image.getpixel((10, 35)), RED)


def test_load_orientation_3_turns_upside_down(tmp_path: Path) -> None:
    path = save_with_orientation(split_image(), tmp_path / "o3.jpg", 3)
    data = ImageService().load_image(path)
    assert (data.width, data.height) == (40, 20)
    assert is_close(data.pil_image.getpixel((5, 10)), BLUE)
    assert is_close(data.pil_image.getpixel((35, 10)), RED)


def test_load_mirrored_orientation_is_not_corrected(tmp_path: Path) -> None:
    path = save_with_orientation(split_image(), tmp_path / "o2.jpg", 2)
    data = ImageService().load_image(path)
    assert data.orientation == 2
    assert is_close(data.pil_image.getpixel((5, 10)), RED)


def test_metadata_failure_returns_unrotated(tmp_path: Path) -> None:
    def broken_reader(_path: Path) -> int:
        raise RuntimeError("exif parser exploded")

    path = save_with_orientation(split_image(), tmp_path / "o6.jpg", 6)
    data = ImageService(orientation_reader=broken_reader).load_image(path)
    assert (data.width, data.height) == (40, 20)


def test_missing_file_is_io_error(tmp_path: Path) -> None:
    with pytest.raises(ImageIOError):
        ImageService().load_image(tmp_path / "missing.jpg")


def test_not_an_image_is_decode_error(tmp_path: Path) -> None:
    path = tmp_path / "fake.jpg"
    path.write_text("hello", encoding="utf-8")
    with pytest.raises(DecodeError):
        ImageService().load_image(path)


def test_truncated_image_is_decode_error(tmp_path: Path) -> None:
    full = tmp_path / "full.jpg"
    save_with_orientation(split_image((400, 300)), full, None)
    truncated = tmp_path / "truncated.jpg"
    truncated.write_bytes(full.read_bytes()[:300])
    with pytest.raises(DecodeError):
        ImageService().load_image(truncated)
