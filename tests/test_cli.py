from pathlib import Path

from PIL import Image

from image_compressor.cli import main

from image_factory import gradient_image


def _make_inputs(root: Path) -> Path:
    src = root / "photos"
    (src / "nested").mkdir(parents=True)
    gradient_image((200, 100), noise=10).save(src / "one.png")
    gradient_image((100, 200), noise=10).save(src / "nested" / "two.bmp")
    (src / "notes.txt").write_text("skip me", encoding="utf-8")
    return src


def test_cli_compresses_folder(tmp_path: Path, capsys) -> None:
    src = _make_inputs(tmp_path)
    out = tmp_path / "out"
    code = main([str(src), "-o", str(out), "--target-kb", "5", "--max-width", "50", "--max-height", "50"])
    assert code == 0
    assert sorted(p.name for p in out.iterdir()) == ["one.jpg", "two.jpg"]
    with Image.open(out / "one.jpg") as img:
        assert img.size == (50, 25)
    printed = capsys.readouterr().out
    assert "[1/2]" in printed and "[2/2]" in printed


def test_cli_reports_failures(tmp_path: Path) -> None:
    bad = tmp_path / "bad.jpg"
    bad.write_bytes(b"nope")
    assert main([str(bad), "-o", str(tmp_path / "out")]) == 1


def test_cli_uses_config_defaults(tmp_path: Path) -> None:
    src = _make_inputs(tmp_path)
    out = tmp_path / "from-config"
    cfg = tmp_path / "config.yaml"
    cfg.write_text(f"compressor:\n  output_dir: '{out.as_posix()}'\n  max_width: 20\n", encoding="utf-8")
    assert main([str(src / "one.png"), "--config", str(cfg)]) == 0
    with Image.open(out / "one.jpg") as img:
        assert img.width == 20


def test_cli_requires_output(tmp_path: Path) -> None:
    src = _make_inputs(tmp_path)
    assert main([str(src)]) == 2


def test_cli_bad_config(tmp_path: Path) -> None:
    assert main(["x.png", "-o", str(tmp_path), "--config", str(tmp_path / "missing.yaml")]) == 2


def test_cli_no_images_found(tmp_path: Path) -> None:
    empty = tmp_path / "empty"
    empty.mkdir()
    assert main([str(empty), "-o", str(tmp_path / "out")]) == 1
