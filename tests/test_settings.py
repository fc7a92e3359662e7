from pathlib import Path

import pytest

from image_compressor.models.errors import InvalidArgument
from image_compressor.utils.settings import CompressorSettings, default_config_path, get_project_root, load_config


def test_missing_default_config_gives_defaults() -> None:
    # autouse fixture points the env var at a file that does not exist
    assert load_config() == CompressorSettings()


def test_explicit_missing_config_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


def test_loads_compressor_section(tmp_path: Path) -> None:
    cfg = tmp_path / "config.yaml"
    cfg.write_text(
        "compressor:\n"
        "  output_dir: /tmp/compressed\n"
        "  target_size_kb: 200\n"
        "  max_width: '1920'\n"
        "  max_height: 1080\n"
        "  log_level: debug\n"
        "  unknown_key: ignored\n",
        encoding="utf-8",
    )
    settings = load_config(cfg)
    assert settings.output_dir == Path("/tmp/compressed")
    assert (settings.target_size_kb, settings.max_width, settings.max_height) == (200, 1920, 1080)
    assert settings.log_level == "DEBUG"


def test_env_var_selects_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    cfg = tmp_path / "env.yaml"
    cfg.write_text("target_size_kb: 75\n", encoding="utf-8")
    monkeypatch.setenv("IMAGE_COMPRESSOR_CONFIG", str(cfg))
    assert load_config().target_size_kb == 75


def test_null_values_keep_defaults(tmp_path: Path) -> None:
    cfg = tmp_path / "config.yaml"
    cfg.write_text("compressor:\n  output_dir: ~\n  max_width: ~\n", encoding="utf-8")
    assert load_config(cfg) == CompressorSettings()


@pytest.mark.parametrize(
    "body",
    ["compressor:\n  max_width: -5\n", "compressor:\n  target_size_kb: lots\n", "- just\n- a list\n", "compressor: [1, 2]\n", "a: [unclosed\n"],
)
def test_bad_config_rejected(tmp_path: Path, body: str) -> None:
    cfg = tmp_path / "config.yaml"
    cfg.write_text(body, encoding="utf-8")
    with pytest.raises(InvalidArgument):
        load_config(cfg)


def test_shipped_config_is_valid() -> None:
    settings = load_config(get_project_root() / "config.yaml")
    assert settings.target_size_kb == 0
    assert settings.output_dir is None


def test_default_path_is_project_config(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("IMAGE_COMPRESSOR_CONFIG")
    assert default_config_path() == get_project_root() / "config.yaml"
    assert load_config() == load_config(get_project_root() / "config.yaml")
