from __future__ import annotations

from pathlib import Path

import pytest

from models.preset import Domain
from utils.config import PROJECT_ROOT, load_config

ENV_VARS = ("PRESETS_DIR", "RULES_DIR", "LOG_DIR", "LOG_LEVEL", "DEFAULT_DOMAIN")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    # setenv first so monkeypatch also undoes whatever load_dotenv exports
    for name in ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


def test_load_config_defaults(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_DIR", str(tmp_path / "logs"))
    config = load_config(tmp_path / "missing.env")
    assert config.presets_dir == PROJECT_ROOT / "presets"
    assert config.rules_dir == PROJECT_ROOT / "rules"
    assert config.log_level == "INFO"
    assert config.default_domain is Domain.ARTICLE
    assert config.log_dir.is_dir()


def test_load_config_reads_env_file(tmp_path: Path) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text(
        "\n".join(
            [
                f"PRESETS_DIR={tmp_path / 'catalogs'}",
                f"LOG_DIR={tmp_path / 'logs'}",
                "LOG_LEVEL=DEBUG",
                "DEFAULT_DOMAIN=Social",
            ]
        ),
        encoding="utf-8",
    )
    config = load_config(env_file)
    assert config.presets_dir == tmp_path / "catalogs"
    assert config.log_level == "DEBUG"
    assert config.default_domain is Domain.SOCIAL


def test_load_config_rejects_unknown_domain(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.setenv("DEFAULT_DOMAIN", "poster")
    with pytest.raises(ValueError, match="poster"):
        load_config(tmp_path / "missing.env")
