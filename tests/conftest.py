from __future__ import annotations

from pathlib import Path

import pytest
from PIL import Image

from image_factory import gradient_image


@pytest.fixture
def textured_image() -> Image.Image:
    return gradient_image((160, 120), noise=40, seed=1)


@pytest.fixture
def out_dir(tmp_path: Path) -> Path:
    return tmp_path / "out"


@pytest.fixture(autouse=True)
def _no_project_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("IMAGE_COMPRESSOR_CONFIG", str(tmp_path / "absent-config.yaml"))
